"""Discrete sine transforms (types I and II) computed through the FFT.

The DST diagonalises the second-order discrete Laplacian with Dirichlet
boundaries (u = 0). Both types embed the data in an odd extension and take
a complex FFT of the extended sequence.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from spectralpde.errors import InvalidSizeError, SizeMismatchError
from spectralpde.options import Normalization

_COMPLEX_BYTES = 16


def _as_line(src: Sequence[float], n: int) -> np.ndarray:
    data = np.asarray(src, dtype=np.float64)
    if data.ndim != 1 or data.shape[0] != n:
        raise SizeMismatchError(f"expected a line of length {n}, got shape {data.shape}")
    return data


class DSTPlan:
    """Pre-computed DST-I plan.

    ``X[k] = sum_n x[n] * sin(pi*(n+1)*(k+1)/(N+1))`` for k = 0..N-1.
    Unnormalised, the inverse is the same transform scaled by 2/(N+1).
    """

    def __init__(self, n: int, normalization: Normalization = Normalization.NONE) -> None:
        if n < 1:
            raise InvalidSizeError(f"DST-I size must be at least 1, got {n}")
        self.n = n
        self.normalization = Normalization(normalization)
        self._extended_n = 2 * (n + 1)

    def __len__(self) -> int:
        return self.n

    def forward(self, src: Sequence[float]) -> np.ndarray:
        """Return the forward DST-I of ``src``."""
        x = _as_line(src, self.n)
        extended = np.zeros(self._extended_n)
        extended[1 : self.n + 1] = x
        extended[self.n + 2 :] = -x[::-1]
        spectrum = np.fft.fft(extended)
        scale = math.sqrt(2.0 / (self.n + 1)) if self.normalization.is_ortho() else 1.0
        return (-spectrum.imag[1 : self.n + 1] / 2.0) * scale

    def inverse(self, src: Sequence[float]) -> np.ndarray:
        """Return the inverse DST-I of ``src``."""
        result = self.forward(src)
        if not self.normalization.is_ortho():
            result *= 2.0 / (self.n + 1)
        return result

    def normalization_factor(self) -> float:
        """Scale left by the unnormalised forward transform relative to the identity."""
        if self.normalization.is_ortho():
            return 1.0
        return (self.n + 1) / 2.0

    def nbytes(self) -> int:
        """Return the size of the plan's FFT buffers in bytes."""
        return 2 * self._extended_n * _COMPLEX_BYTES


class DST2Plan:
    """Pre-computed DST-II plan.

    ``X[k] = sum_n x[n] * sin(pi*(n+1/2)*(k+1)/N)`` for k = 0..N-1.
    The inverse is the weighted transpose of the kernel.
    """

    def __init__(self, n: int, normalization: Normalization = Normalization.NONE) -> None:
        if n < 1:
            raise InvalidSizeError(f"DST-II size must be at least 1, got {n}")
        self.n = n
        self.normalization = Normalization(normalization)
        self._extended_n = 2 * n
        modes = np.arange(1, n + 1)
        self._phase = np.exp(-1j * math.pi * modes / (2.0 * n))

    def __len__(self) -> int:
        return self.n

    def _ortho_scale(self) -> np.ndarray:
        scale = np.full(self.n, math.sqrt(2.0 / self.n))
        scale[-1] = 1.0 / math.sqrt(self.n)
        return scale

    def forward(self, src: Sequence[float]) -> np.ndarray:
        """Return the forward DST-II of ``src``."""
        x = _as_line(src, self.n)
        extended = np.empty(self._extended_n)
        extended[: self.n] = x
        extended[self.n :] = -x[::-1]
        spectrum = np.fft.fft(extended)
        shifted = spectrum[1 : self.n + 1] * self._phase
        result = -shifted.imag / 2.0
        if self.normalization.is_ortho():
            result *= self._ortho_scale()
        return result

    def inverse(self, src: Sequence[float]) -> np.ndarray:
        """Return the inverse DST-II of ``src``."""
        coeffs = _as_line(src, self.n)
        if self.normalization.is_ortho():
            weights = self._ortho_scale()
        else:
            weights = np.full(self.n, 2.0 / self.n)
            weights[-1] = 1.0 / self.n
        positions = np.arange(self.n) + 0.5
        modes = np.arange(1, self.n + 1)
        kernel = np.sin(math.pi * np.outer(positions, modes) / self.n)
        return kernel @ (coeffs * weights)

    def normalization_factor(self) -> float:
        """Forward followed by inverse returns the original signal."""
        return 1.0

    def nbytes(self) -> int:
        """Return the size of the plan's FFT buffers and phase table in bytes."""
        return (2 * self._extended_n + self.n) * _COMPLEX_BYTES


def dst1(src: Sequence[float]) -> np.ndarray:
    """One-shot forward DST-I."""
    return DSTPlan(len(src)).forward(src)


def dst2_forward(src: Sequence[float]) -> np.ndarray:
    """One-shot forward DST-II."""
    return DST2Plan(len(src)).forward(src)


def dst1_inverse(src: Sequence[float]) -> np.ndarray:
    """One-shot inverse DST-I."""
    return DSTPlan(len(src)).inverse(src)


def dst2_inverse(src: Sequence[float]) -> np.ndarray:
    """One-shot inverse DST-II."""
    return DST2Plan(len(src)).inverse(src)


def dst1_coefficient(n: int, k: int, size: int) -> float:
    """DST-I basis value ``sin(pi*(n+1)*(k+1)/(size+1))``."""
    return math.sin(math.pi * (n + 1) * (k + 1) / (size + 1))


def dst2_coefficient(n: int, k: int, size: int) -> float:
    """DST-II basis value ``sin(pi*(n+1/2)*(k+1)/size)``; 0 for empty sizes."""
    if size <= 0:
        return 0.0
    return math.sin(math.pi * (n + 0.5) * (k + 1) / size)


def dst3_coefficient(n: int, k: int, size: int) -> float:
    """DST-III basis value ``sin(pi*(n+1)*(k+1/2)/size)``; 0 for empty sizes."""
    if size <= 0:
        return 0.0
    return math.sin(math.pi * (n + 1) * (k + 0.5) / size)