"""Dimensions of an N-dimensional grid stored in row-major order."""

from __future__ import annotations

import math
from typing import Iterable


class Shape(tuple):
    """Grid dimensions in row-major order; the last axis varies fastest."""

    def __new__(cls, dims: Iterable[int] = ()) -> "Shape":
        return super().__new__(cls, (int(d) for d in dims))

    def dim(self) -> int:
        """Return the number of dimensions."""
        return len(self)

    def size(self) -> int:
        """Return the total number of elements; an empty shape holds none."""
        if not self:
            return 0
        return math.prod(self)

    def n(self, axis: int) -> int:
        """Return the extent along ``axis``, or 0 when the axis does not exist."""
        if axis < 0 or axis >= len(self):
            return 0
        return self[axis]