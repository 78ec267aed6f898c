import numpy as np
import pytest

from routegraph.graph.matrix import NO_PATH, ScratchMatrices


def test_matrices_start_unallocated():
    m = ScratchMatrices()
    assert m.dist_matrix is None
    assert m.path_matrix is None
    assert m.size == 0
    assert not m.allocated
    assert not m.is_stale(5)


def test_allocate_fills_defaults():
    m = ScratchMatrices()
    m.allocate(3)
    assert m.allocated
    assert m.size == 3
    assert m.dist_matrix.shape == (3, 3)
    assert m.dist_matrix.dtype == np.float64
    assert np.isinf(m.dist_matrix).all()
    assert m.path_matrix.dtype == np.int64
    assert (m.path_matrix == NO_PATH).all()


def test_stale_after_size_change():
    m = ScratchMatrices()
    m.allocate(2)
    assert not m.is_stale(2)
    assert m.is_stale(3)
    m.allocate(3)
    assert not m.is_stale(3)


def test_release_is_idempotent():
    m = ScratchMatrices()
    m.release()
    m.allocate(4)
    m.release()
    m.release()
    assert m.dist_matrix is None
    assert m.path_matrix is None
    assert m.size == 0


def test_allocate_zero_and_negative():
    m = ScratchMatrices()
    m.allocate(0)
    assert m.dist_matrix.shape == (0, 0)
    with pytest.raises(ValueError):
        m.allocate(-1)
