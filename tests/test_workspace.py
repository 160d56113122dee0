import numpy as np

from spectralpde.workspace import Workspace


def test_allocate_lengths_follow_arguments():
    ws = Workspace.allocate(5, 9)
    assert len(ws.real) == 5
    assert len(ws.complex) == 9


def test_allocated_buffers_are_zero():
    ws = Workspace.allocate(4, 6)
    assert np.all(ws.real == 0.0)
    assert np.all(ws.complex == 0.0)
    assert ws.complex.dtype == np.complex128


def test_real_element_is_eight_bytes():
    assert Workspace.allocate(1, 0).nbytes() == 8


def test_complex_element_is_sixteen_bytes():
    assert Workspace.allocate(0, 1).nbytes() == 16


def test_empty_workspace_has_no_bytes():
    assert Workspace.allocate(0, 0).nbytes() == 0


def test_nbytes_adds_both_buffers():
    combined = Workspace.allocate(11, 23).nbytes()
    assert combined == Workspace.allocate(11, 0).nbytes() + Workspace.allocate(0, 23).nbytes()


def test_nbytes_scales_with_length():
    assert Workspace.allocate(20, 0).nbytes() == 2 * Workspace.allocate(10, 0).nbytes()