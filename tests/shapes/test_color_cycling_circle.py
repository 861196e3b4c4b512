from __future__ import annotations

import pytest

from api import color_ring_layers, compute_color_ring, compute_path
from common.errors import ParameterError
from engine.core.path import EllipseIn, Rect
from shapes.color_cycling_circle import ring_hue
from shapes.params import ColorCyclingCircleParams


@pytest.mark.smoke
def test_hue_wraps_once_above_one() -> None:
    entries = compute_color_ring(ColorCyclingCircleParams(amount=0.95, steps=100))
    assert len(entries) == 100
    assert entries[10].hue == pytest.approx(0.05)
    assert entries[10].inset == 10.0
    assert entries[0].hue == pytest.approx(0.95)


def test_hue_exactly_one_is_kept() -> None:
    assert ring_hue(1, 2, 0.5) == 1.0
    entry = compute_color_ring(ColorCyclingCircleParams(amount=0.5, steps=2))[1]
    assert entry.color == pytest.approx((1.0, 0.0, 0.0, 1.0))


def test_negative_amount_is_not_corrected() -> None:
    assert ring_hue(0, 10, -0.5) == -0.5


def test_first_ring_color_is_red_at_zero_amount() -> None:
    entry = compute_color_ring(ColorCyclingCircleParams(amount=0.0, steps=4))[0]
    assert entry.hue == 0.0
    assert entry.color == pytest.approx((1.0, 0.0, 0.0, 1.0))


def test_ring_layers_inset_for_stroke_border(rect300: Rect) -> None:
    layers = color_ring_layers(ColorCyclingCircleParams(steps=100), rect300, line_width=2.0)
    assert len(layers) == 100
    outer, _ = layers[0]
    (seg,) = outer.segments
    assert isinstance(seg, EllipseIn)
    assert seg.rect == Rect(1.0, 1.0, 298.0, 298.0)


def test_ring_layers_skip_collapsed_rings() -> None:
    layers = color_ring_layers(
        ColorCyclingCircleParams(steps=100), Rect(0.0, 0.0, 20.0, 40.0), line_width=2.0
    )
    assert len(layers) == 9


def test_registered_shape_concatenates_rings(rect300: Rect) -> None:
    path = compute_path("color_cycling_circle", ColorCyclingCircleParams(steps=5), rect300)
    assert path.subpath_count == 5


def test_zero_steps_is_rejected() -> None:
    with pytest.raises(ParameterError):
        compute_color_ring(ColorCyclingCircleParams(steps=0))
