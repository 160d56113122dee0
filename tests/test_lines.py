import numpy as np
import pytest

from spectralpde.dct import DCTPlan
from spectralpde.dst import DSTPlan, dst1_coefficient
from spectralpde.errors import SizeMismatchError
from spectralpde.lines import forward_lines, inverse_lines
from spectralpde.shape import Shape

TOL = 1e-10


def test_dst_forward_lines_2d_axis0():
    nx, ny = 7, 4
    plan = DSTPlan(nx)
    data = np.zeros(nx * ny)
    expected = np.zeros(nx * ny)
    for j in range(ny):
        mode = j + 1
        for i in range(nx):
            data[i * ny + j] = dst1_coefficient(i, mode, nx)
        expected[mode * ny + j] = (nx + 1) / 2.0
    forward_lines(plan, data, Shape((nx, ny)), 0)
    np.testing.assert_allclose(data, expected, atol=TOL, rtol=0)


def test_dst_forward_lines_2d_axis1():
    nx, ny = 4, 7
    plan = DSTPlan(ny)
    data = np.zeros(nx * ny)
    expected = np.zeros(nx * ny)
    for i in range(nx):
        mode = i + 1
        for j in range(ny):
            data[i * ny + j] = dst1_coefficient(j, mode, ny)
        expected[i * ny + mode] = (ny + 1) / 2.0
    forward_lines(plan, data, Shape((nx, ny)), 1)
    np.testing.assert_allclose(data, expected, atol=TOL, rtol=0)


@pytest.mark.parametrize("plan_cls", [DSTPlan, DCTPlan])
def test_round_trip_lines_2d(plan_cls):
    nx, ny = 8, 6
    shape = Shape((nx, ny))
    plan_x = plan_cls(nx)
    plan_y = plan_cls(ny)
    data = np.arange(1, nx * ny + 1, dtype=float)
    original = data.copy()
    forward_lines(plan_x, data, shape, 0)
    forward_lines(plan_y, data, shape, 1)
    assert not np.allclose(data, original)
    inverse_lines(plan_y, data, shape, 1)
    inverse_lines(plan_x, data, shape, 0)
    np.testing.assert_allclose(data, original, atol=TOL, rtol=0)


def test_dct_forward_lines_2d_axis0_constant():
    nx, ny = 8, 4
    data = np.ones(nx * ny)
    forward_lines(DCTPlan(nx), data, Shape((nx, ny)), 0)
    grid = data.reshape(nx, ny)
    np.testing.assert_allclose(grid[1:, :], 0.0, atol=TOL)


def test_dct_forward_lines_2d_axis1_constant():
    nx, ny = 4, 8
    data = np.ones(nx * ny)
    forward_lines(DCTPlan(ny), data, Shape((nx, ny)), 1)
    grid = data.reshape(nx, ny)
    np.testing.assert_allclose(grid[:, 1:], 0.0, atol=TOL)


def test_dst_lines_3d_round_trip():
    nx, ny, nz = 7, 5, 4
    shape = Shape((nx, ny, nz))
    plan = DSTPlan(ny)
    data = np.arange(1, nx * ny * nz + 1, dtype=float)
    original = data.copy()
    forward_lines(plan, data, shape, 1)
    inverse_lines(plan, data, shape, 1)
    np.testing.assert_allclose(data, original, atol=TOL, rtol=0)


def test_dct_lines_3d_round_trip():
    nx, ny, nz = 8, 6, 4
    shape = Shape((nx, ny, nz))
    plan = DCTPlan(nz)
    data = np.arange(1, nx * ny * nz + 1, dtype=float)
    original = data.copy()
    forward_lines(plan, data, shape, 2)
    inverse_lines(plan, data, shape, 2)
    np.testing.assert_allclose(data, original, atol=TOL, rtol=0)


def test_lines_size_mismatch():
    shape = Shape((8, 6))
    with pytest.raises(SizeMismatchError):
        forward_lines(DSTPlan(10), np.zeros(48), shape, 0)
    with pytest.raises(SizeMismatchError):
        forward_lines(DCTPlan(10), np.zeros(48), shape, 1)


def test_lines_data_length_mismatch():
    with pytest.raises(SizeMismatchError):
        forward_lines(DSTPlan(8), np.zeros(40), Shape((8, 6)), 0)


def test_lines_accepts_list_and_returns_result():
    nx, ny = 3, 2
    data = [float(v) for v in range(1, nx * ny + 1)]
    plan = DSTPlan(nx)
    result = forward_lines(plan, data, (nx, ny), 0)
    column0 = plan.forward([1.0, 3.0, 5.0])
    np.testing.assert_allclose(result.reshape(nx, ny)[:, 0], column0, atol=TOL)
    back = inverse_lines(plan, result, (nx, ny), 0)
    np.testing.assert_allclose(back, data, atol=TOL, rtol=0)