import pytest

from spectralpde.shape import Shape


def test_dim_counts_axes():
    assert Shape((7, 5, 4)).dim() == 3
    assert Shape((9,)).dim() == 1
    assert Shape().dim() == 0


def test_size_is_product():
    assert Shape((3, 4)).size() == 12
    assert Shape((8, 6)).size() == Shape((6, 8)).size()


def test_empty_shape_has_no_elements():
    assert Shape().size() == 0


def test_single_axis_size_is_its_extent():
    assert Shape((17,)).size() == 17


@pytest.mark.parametrize("axis,expected", [(0, 7), (1, 5), (2, 4)])
def test_n_returns_axis_extent(axis, expected):
    assert Shape((7, 5, 4)).n(axis) == expected


@pytest.mark.parametrize("axis", [-1, 3, 10])
def test_n_out_of_range_is_zero(axis):
    assert Shape((7, 5, 4)).n(axis) == 0


def test_shape_behaves_as_tuple():
    shape = Shape([2, 3])
    assert shape == (2, 3)
    assert list(shape) == [2, 3]