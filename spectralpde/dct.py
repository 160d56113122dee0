"""Discrete cosine transforms (types I and II) computed through the FFT.

The DCT diagonalises the second-order discrete Laplacian with Neumann
boundaries (zero normal derivative). Both types embed the data in an even
extension and take a complex FFT of the extended sequence.
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


class DCTPlan:
    """Pre-computed DCT-I plan.

    ``X[k] = x[0] + (-1)^k x[N-1] + 2 * sum_{n=1}^{N-2} x[n] cos(pi*n*k/(N-1))``.
    DCT-I needs at least two points. Unnormalised, a forward followed by an
    inverse is the identity; the forward alone scales by 2*(N-1).
    """

    def __init__(self, n: int, normalization: Normalization = Normalization.NONE) -> None:
        if n < 2:
            raise InvalidSizeError(f"DCT-I size must be at least 2, got {n}")
        self.n = n
        self.normalization = Normalization(normalization)
        self._extended_n = 2 * (n - 1)

    def __len__(self) -> int:
        return self.n

    def forward(self, src: Sequence[float]) -> np.ndarray:
        """Return the forward DCT-I of ``src``."""
        x = _as_line(src, self.n)
        extended = np.concatenate((x, x[self.n - 2 : 0 : -1]))
        spectrum = np.fft.fft(extended)
        scale = 1.0 / math.sqrt(2.0 * (self.n - 1)) if self.normalization.is_ortho() else 1.0
        return spectrum.real[: self.n] * scale

    def inverse(self, src: Sequence[float]) -> np.ndarray:
        """Return the inverse DCT-I of ``src``."""
        result = self.forward(src)
        if not self.normalization.is_ortho():
            result *= 1.0 / self._extended_n
        return result

    def normalization_factor(self) -> float:
        """Scale left by the unnormalised forward transform relative to the identity."""
        if self.normalization.is_ortho():
            return 1.0
        return float(self._extended_n)

    def nbytes(self) -> int:
        """Return the size of the plan's FFT buffers in bytes."""
        return 2 * self._extended_n * _COMPLEX_BYTES


class DCT2Plan:
    """Pre-computed DCT-II plan.

    ``X[k] = sum_n x[n] * cos(pi*(n+1/2)*k/N)`` for k = 0..N-1.
    The inverse is the weighted transpose of the kernel.
    """

    def __init__(self, n: int, normalization: Normalization = Normalization.NONE) -> None:
        if n < 1:
            raise InvalidSizeError(f"DCT-II size must be at least 1, got {n}")
        self.n = n
        self.normalization = Normalization(normalization)
        self._extended_n = 2 * n
        modes = np.arange(n)
        self._phase = np.exp(-1j * math.pi * modes / (2.0 * n))

    def __len__(self) -> int:
        return self.n

    def _ortho_scale(self) -> np.ndarray:
        scale = np.full(self.n, math.sqrt(2.0 / self.n))
        scale[0] = 1.0 / math.sqrt(self.n)
        return scale

    def forward(self, src: Sequence[float]) -> np.ndarray:
        """Return the forward DCT-II of ``src``."""
        x = _as_line(src, self.n)
        extended = np.concatenate((x, x[::-1]))
        spectrum = np.fft.fft(extended)
        shifted = spectrum[: self.n] * self._phase
        result = shifted.real / 2.0
        if self.normalization.is_ortho():
            result *= self._ortho_scale()
        return result

    def inverse(self, src: Sequence[float]) -> np.ndarray:
        """Return the inverse DCT-II of ``src``."""
        coeffs = _as_line(src, self.n)
        if self.normalization.is_ortho():
            weights = self._ortho_scale()
        else:
            weights = np.full(self.n, 2.0 / self.n)
            weights[0] = 1.0 / self.n
        positions = np.arange(self.n) + 0.5
        modes = np.arange(self.n)
        kernel = np.cos(math.pi * np.outer(positions, modes) / self.n)
        return kernel @ (coeffs * weights)

    def normalization_factor(self) -> float:
        """Forward followed by inverse returns the original signal."""
        return 1.0

    def nbytes(self) -> int:
        """Return the size of the plan's FFT buffers and phase table in bytes."""
        return (2 * self._extended_n + self.n) * _COMPLEX_BYTES


def dct1(src: Sequence[float]) -> np.ndarray:
    """One-shot forward DCT-I."""
    return DCTPlan(len(src)).forward(src)


def dct2_forward(src: Sequence[float]) -> np.ndarray:
    """One-shot forward DCT-II."""
    return DCT2Plan(len(src)).forward(src)


def dct1_inverse(src: Sequence[float]) -> np.ndarray:
    """One-shot inverse DCT-I."""
    return DCTPlan(len(src)).inverse(src)


def dct2_inverse(src: Sequence[float]) -> np.ndarray:
    """One-shot inverse DCT-II."""
    return DCT2Plan(len(src)).inverse(src)


def dct1_coefficient(n: int, k: int, size: int) -> float:
    """DCT-I basis value ``cos(pi*n*k/(size-1))``; 1 for sizes below 2."""
    if size <= 1:
        return 1.0
    return math.cos(math.pi * n * k / (size - 1))


def dct2_coefficient(n: int, k: int, size: int) -> float:
    """DCT-II basis value ``cos(pi*(n+1/2)*k/size)``; 0 for empty sizes."""
    if size <= 0:
        return 0.0
    return math.cos(math.pi * (n + 0.5) * k / size)