from __future__ import annotations

import numpy as np
import pytest

from engine.core.geometry import Geometry


def test_from_lines_normalizes_2d_and_offsets() -> None:
    xy = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]], dtype=np.float32)
    g = Geometry.from_lines([xy])
    assert g.coords.shape == (3, 3)
    assert g.offsets.tolist() == [0, 3]
    assert np.allclose(g.coords[:, 2], 0.0)


def test_from_lines_multiple_lines_offsets() -> None:
    circle = np.zeros((65, 2), dtype=np.float32)
    seg = np.zeros((2, 2), dtype=np.float32)
    g = Geometry.from_lines([circle, circle, seg, seg])
    assert g.offsets.tolist() == [0, 65, 130, 132, 134]
    assert len(g) == 4
    assert g.n_vertices == 134


def test_from_lines_skips_empty_lines() -> None:
    g = Geometry.from_lines([np.empty((0, 2)), [[1.0, 2.0]]])
    assert g.offsets.tolist() == [0, 1]


def test_constructor_normalizes_dtype_and_contiguity() -> None:
    coords = np.asfortranarray(np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0]], dtype=np.float64))
    g = Geometry(coords, np.array([0, 2], dtype=np.int64))
    assert g.coords.dtype == np.float32
    assert g.offsets.dtype == np.int32
    assert g.coords.flags.c_contiguous is True


def test_constructor_invalid_offsets_raises() -> None:
    coords = np.zeros((2, 3), dtype=np.float32)
    with pytest.raises(ValueError):
        Geometry(coords, np.array([0, 1], dtype=np.int32))
    with pytest.raises(ValueError):
        Geometry(coords, np.array([1, 2], dtype=np.int32))


def test_from_lines_invalid_shape_raises() -> None:
    with pytest.raises(ValueError):
        Geometry.from_lines([np.zeros((3, 4), dtype=np.float32)])


def test_empty_geometry_properties() -> None:
    g = Geometry.from_lines([])
    assert g.is_empty
    assert g.coords.shape == (0, 3)
    assert g.offsets.tolist() == [0]
    assert len(g) == 0


def test_translate_is_pure_and_new_instance() -> None:
    g0 = Geometry.from_lines([[[0.0, 0.0], [1.0, 0.0]]])
    g1 = g0.translate(200.0, 300.0)
    assert g1 is not g0
    assert g1.coords[:, :2].tolist() == [[200.0, 300.0], [201.0, 300.0]]
    assert g0.coords[:, :2].tolist() == [[0.0, 0.0], [1.0, 0.0]]
