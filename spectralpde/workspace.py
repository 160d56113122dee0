"""Axis-transform protocol and pre-allocated solver buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from spectralpde.shape import Shape

_REAL_BYTES = 8
_COMPLEX_BYTES = 16


@runtime_checkable
class AxisTransform(Protocol):
    """A transform applied along every line of one axis of a grid.

    Implementations cover the FFT (periodic), DST (Dirichlet) and DCT
    (Neumann) cases. ``data`` is modified in place.
    """

    def forward(self, data: np.ndarray, shape: Shape, axis: int) -> None:
        """Apply the forward transform along lines of ``axis``."""
        ...

    def inverse(self, data: np.ndarray, shape: Shape, axis: int) -> None:
        """Apply the inverse transform along lines of ``axis``."""
        ...

    def length(self) -> int:
        """Return the transform size along the axis."""
        ...

    def normalization_factor(self) -> float:
        """Return the scale left on values after a forward/inverse round trip."""
        ...


@dataclass
class Workspace:
    """Real and complex intermediate buffers used by a solver."""

    real: np.ndarray
    complex: np.ndarray

    @classmethod
    def allocate(cls, real_size: int, complex_size: int) -> "Workspace":
        """Create zero-filled buffers of the given lengths."""
        return cls(
            real=np.zeros(real_size, dtype=np.float64),
            complex=np.zeros(complex_size, dtype=np.complex128),
        )

    def nbytes(self) -> int:
        """Return the memory held by both buffers in bytes."""
        return len(self.real) * _REAL_BYTES + len(self.complex) * _COMPLEX_BYTES