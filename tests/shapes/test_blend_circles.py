from __future__ import annotations

import numpy as np
import pytest

from api import blend_circle_layers, composite_at, compute_path
from common.errors import ParameterError
from engine.core.path import Rect
from shapes.blend_circles import composite_grid
from shapes.params import BlendCirclesParams


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (150.0, 150.0, (1.0, 1.0, 1.0)),  # 3 円の重なり
        (150.0, 240.0, (0.0, 0.0, 1.0)),  # 青のみ
        (60.0, 40.0, (1.0, 0.0, 0.0)),  # 赤のみ
        (240.0, 40.0, (0.0, 1.0, 0.0)),  # 緑のみ
        (5.0, 295.0, (0.0, 0.0, 0.0)),  # 背景
    ],
)
def test_screen_composite_at_points(rect300: Rect, x: float, y: float, expected) -> None:
    assert composite_at(BlendCirclesParams(1.0), rect300, x, y) == pytest.approx(expected)


def test_zero_amount_is_black_everywhere(rect300: Rect) -> None:
    xs = np.linspace(0.0, 300.0, 7)
    out = composite_grid(BlendCirclesParams(0.0), rect300, xs, xs)
    assert out.shape == (7, 7, 3)
    assert not out.any()


def test_layers_scale_with_rect_width() -> None:
    layers = blend_circle_layers(BlendCirclesParams(0.5), Rect(0.0, 0.0, 600.0, 600.0))
    colors = [color for _, color in layers]
    assert colors == [(1.0, 0.0, 0.0, 1.0), (0.0, 1.0, 0.0, 1.0), (0.0, 0.0, 1.0, 1.0)]
    red = layers[0][0].segments[0].rect
    assert red == Rect(100.0, 40.0, 200.0, 200.0)


def test_registered_shape_has_three_subpaths(rect300: Rect) -> None:
    assert compute_path("blend_circles", BlendCirclesParams(0.3), rect300).subpath_count == 3


def test_amount_out_of_range(rect300: Rect) -> None:
    with pytest.raises(ParameterError) as ei:
        compute_path("blend_circles", BlendCirclesParams(1.5), rect300)
    assert str(ei.value) == "invalid parameter: amount must be within [0, 1]"
