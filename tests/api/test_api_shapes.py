from __future__ import annotations

import pytest

import api
from api import G, compute_path, list_shapes, shape
from common.errors import ParameterError, ShapeKindMismatchError
from engine.core.path import Path, Rect
from shapes.params import ArcParams, TrapezoidParams, make_params
from shapes.registry import get_registry, get_shape, is_shape_registered, unregister

ALL_KINDS = [
    "arc",
    "blend_circles",
    "checkerbox",
    "color_cycling_circle",
    "flower",
    "trapezoid",
    "triangle",
]


@pytest.mark.smoke
def test_public_surface() -> None:
    assert api.__version__
    assert list_shapes() == ALL_KINDS
    assert sorted(get_registry()) == ALL_KINDS


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_every_kind_builds_with_defaults(kind: str, rect300: Rect) -> None:
    params = make_params(kind)
    path = compute_path(kind, params, rect300)
    assert isinstance(path, Path)


def test_compute_path_accepts_camel_case(rect300: Rect) -> None:
    a = compute_path("Trapezoid", TrapezoidParams(), rect300)
    b = compute_path("trapezoid", TrapezoidParams(), rect300)
    assert a == b


def test_compute_path_is_deterministic(rect300: Rect) -> None:
    p = ArcParams(30.0, 300.0, False, 4.0)
    assert compute_path("arc", p, rect300) == compute_path("arc", p, rect300)


def test_kind_mismatch(rect300: Rect) -> None:
    with pytest.raises(ShapeKindMismatchError):
        compute_path("arc", TrapezoidParams(), rect300)


def test_unknown_kind(rect300: Rect) -> None:
    with pytest.raises(KeyError):
        compute_path("hexagon", TrapezoidParams(), rect300)
    with pytest.raises(KeyError):
        make_params("hexagon")


def test_facade_builds_and_validates(rect300: Rect) -> None:
    path = G.checkerbox(rect300, rows=2, columns=3)
    assert path.subpath_count == 3
    with pytest.raises(ParameterError):
        G.checkerbox(rect300, rows=0)
    with pytest.raises(AttributeError):
        G.hexagon  # noqa: B018
    with pytest.raises(AttributeError):
        G._private  # noqa: B018
    assert "flower" in dir(G)


def test_shape_decorator_registration() -> None:
    @shape("test_square")
    def _square(params, rect: Rect) -> Path:
        return Path().move_to(rect.min_x, rect.min_y)

    try:
        assert is_shape_registered("test_square")
        assert get_shape("TestSquare") is _square
    finally:
        unregister("test_square")
    assert not is_shape_registered("test_square")


def test_shape_decorator_rejects_non_function() -> None:
    with pytest.raises(TypeError):
        shape()(object())
