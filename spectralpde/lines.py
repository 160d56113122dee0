"""Apply a one-dimensional transform plan along every line of a grid axis."""

from __future__ import annotations

from typing import Callable, Iterable, Protocol, Sequence

import numpy as np

from spectralpde.errors import SizeMismatchError
from spectralpde.shape import Shape


class _LinePlan(Protocol):
    def __len__(self) -> int: ...

    def forward(self, src: Sequence[float]) -> np.ndarray: ...

    def inverse(self, src: Sequence[float]) -> np.ndarray: ...


def _transform_all_lines(
    plan: _LinePlan,
    data: Sequence[float] | np.ndarray,
    shape: Iterable[int],
    axis: int,
    transform: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    grid = Shape(shape)
    if grid.n(axis) != len(plan):
        raise SizeMismatchError(
            f"plan length {len(plan)} does not match axis {axis} of shape {tuple(grid)}"
        )
    arr = np.asarray(data, dtype=np.float64)
    if arr.size != grid.size():
        raise SizeMismatchError(
            f"data holds {arr.size} values, shape {tuple(grid)} needs {grid.size()}"
        )

    view = arr.reshape(tuple(grid))
    lines = np.moveaxis(view, axis, -1)
    for index in np.ndindex(*lines.shape[:-1]):
        lines[index] = transform(lines[index])

    if not np.shares_memory(view, arr):
        arr[...] = view.reshape(arr.shape)
    return arr


def forward_lines(
    plan: _LinePlan, data: Sequence[float] | np.ndarray, shape: Iterable[int], axis: int
) -> np.ndarray:
    """Apply ``plan.forward`` to every line of ``data`` parallel to ``axis``.

    ``data`` holds the grid in row-major order. A float64 array is modified in
    place; the transformed array is returned in every case.
    """
    return _transform_all_lines(plan, data, shape, axis, plan.forward)


def inverse_lines(
    plan: _LinePlan, data: Sequence[float] | np.ndarray, shape: Iterable[int], axis: int
) -> np.ndarray:
    """Apply ``plan.inverse`` to every line of ``data`` parallel to ``axis``.

    A float64 array is modified in place; the transformed array is returned.
    """
    return _transform_all_lines(plan, data, shape, axis, plan.inverse)