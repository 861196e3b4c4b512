from __future__ import annotations

import math

import pytest

from api import compute_path
from common.errors import ParameterError
from engine.core.path import ArcTo, Point, Rect
from shapes.params import ArcParams


def test_arc_converts_angles_and_direction() -> None:
    path = compute_path("arc", ArcParams(0.0, 90.0, clockwise=True), Rect(0.0, 0.0, 200.0, 200.0))
    (seg,) = path.segments
    assert isinstance(seg, ArcTo)
    assert seg.center == Point(100.0, 100.0)
    assert seg.radius == 100.0
    assert seg.start_angle == pytest.approx(-math.pi / 2)
    assert seg.end_angle == pytest.approx(0.0)
    assert seg.clockwise is False


def test_arc_starts_at_top_of_circle() -> None:
    path = compute_path("arc", ArcParams(0.0, 90.0), Rect(0.0, 0.0, 200.0, 200.0))
    g = path.flatten(arc_segments=64)
    assert g.coords[0] == pytest.approx([100.0, 0.0], abs=1e-9)
    assert g.coords[-1] == pytest.approx([200.0, 100.0], abs=1e-9)


def test_inset_accumulates_and_keeps_original() -> None:
    base = ArcParams(start_angle=10.0, end_angle=200.0, clockwise=False, inset_amount=3.0)
    moved = base.inset(10.0).inset(5.0)
    assert base.inset_amount == 3.0
    assert moved.inset_amount == 18.0
    rect = Rect(0.0, 0.0, 100.0, 100.0)
    expected = ArcParams(10.0, 200.0, False, 3.0 + 10.0 + 5.0)
    assert compute_path("arc", moved, rect) == compute_path("arc", expected, rect)


def test_radius_clamps_to_zero() -> None:
    path = compute_path("arc", ArcParams(inset_amount=500.0), Rect(0.0, 0.0, 100.0, 100.0))
    assert path.segments[0].radius == 0.0


def test_negative_inset_is_rejected() -> None:
    with pytest.raises(ParameterError) as ei:
        compute_path("arc", ArcParams(inset_amount=-1.0), Rect(0.0, 0.0, 100.0, 100.0))
    assert str(ei.value) == "invalid parameter: inset_amount must be ≥ 0"
