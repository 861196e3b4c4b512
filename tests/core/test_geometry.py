from __future__ import annotations

import numpy as np
import pytest

from engine.core.geometry import Geometry


def test_from_lines_builds_offsets() -> None:
    xy = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
    g = Geometry.from_lines([xy, [[5.0, 5.0]]])
    assert g.coords.shape == (4, 2)
    assert g.offsets.tolist() == [0, 3, 4]
    assert g.coords.dtype == np.float64
    assert g.offsets.dtype == np.int32


def test_constructor_normalizes_dtype_and_contiguity() -> None:
    coords = np.asfortranarray(np.array([[0.0, 0.0], [1.0, 2.0]], dtype=np.float32))
    offsets = np.array([0, 2], dtype=np.int64)
    g = Geometry(coords, offsets)
    assert g.coords.dtype == np.float64
    assert g.offsets.dtype == np.int32
    assert g.coords.flags.c_contiguous is True
    assert np.allclose(g.coords, coords)


def test_constructor_invalid_coords_shape_raises() -> None:
    with pytest.raises(ValueError):
        Geometry(np.zeros((2, 3)), np.array([0, 2]))


def test_constructor_invalid_offsets_raises() -> None:
    with pytest.raises(ValueError):
        Geometry(np.zeros((2, 2)), np.array([0, 1]))
    with pytest.raises(ValueError):
        Geometry(np.zeros((2, 2)), np.array([1, 2]))


def test_from_lines_invalid_shape_raises() -> None:
    with pytest.raises(ValueError):
        Geometry.from_lines([np.array([1.0, 2.0, 3.0])])


def test_empty_geometry_properties() -> None:
    g = Geometry.from_lines([])
    assert g.is_empty
    assert g.coords.shape == (0, 2)
    assert g.offsets.tolist() == [0]
    assert len(g) == 0


def test_as_arrays_view_is_read_only() -> None:
    g = Geometry.from_lines([[[0.0, 0.0], [1.0, 1.0]]])
    coords, _ = g.as_arrays()
    with pytest.raises(ValueError):
        coords[0, 0] = 5.0
    coords_copy, _ = g.as_arrays(copy=True)
    coords_copy[0, 0] = 5.0
    assert g.coords[0, 0] == 0.0


def test_lines_and_is_closed() -> None:
    square = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]
    open_line = [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]]
    g = Geometry.from_lines([square, open_line])
    lines = list(g.lines())
    assert [line.shape[0] for line in lines] == [4, 3]
    assert g.is_closed(0)
    assert not g.is_closed(1)
