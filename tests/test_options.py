import pytest

from spectralpde.options import Normalization


def test_ortho_reports_ortho():
    assert Normalization.ORTHO.is_ortho() is True


def test_none_is_not_ortho():
    assert Normalization.NONE.is_ortho() is False


def test_values_follow_declaration_order():
    assert Normalization(0) is Normalization.NONE
    assert Normalization(1) is Normalization.ORTHO


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Normalization(7)