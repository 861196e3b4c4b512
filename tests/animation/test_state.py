from __future__ import annotations

import pytest

from api import compute_path
from common.easing import cubic_bezier
from common.errors import ParameterError, ShapeKindMismatchError
from engine.core.path import Rect
from engine.animation import idle, interpolate, retarget, sample, start_animation
from shapes.params import (
    AnimatablePair,
    CheckerboxParams,
    FlowerParams,
    TrapezoidParams,
    round_half_up,
)


@pytest.mark.smoke
def test_sample_timeline_linear() -> None:
    state = start_animation(
        TrapezoidParams(50.0), TrapezoidParams(100.0), 2.0, "linear", start_time=10.0
    )
    assert sample(state, 10.0) == (TrapezoidParams(50.0), False)
    value, done = sample(state, 11.0)
    assert value.inset_amount == pytest.approx(75.0)
    assert done is False
    assert sample(state, 12.0) == (TrapezoidParams(100.0), True)
    assert sample(state, 99.0) == (TrapezoidParams(100.0), True)
    assert sample(state, 9.0) == (TrapezoidParams(50.0), False)


@pytest.mark.parametrize("duration", [0.0, -1.0])
def test_non_positive_duration_completes_immediately(duration: float) -> None:
    state = start_animation(TrapezoidParams(0.0), TrapezoidParams(10.0), duration, start_time=0.0)
    assert sample(state, 0.0) == (TrapezoidParams(10.0), True)


def test_pair_is_rounded_half_up() -> None:
    state = start_animation(
        CheckerboxParams(4, 4), CheckerboxParams(8, 3), 1.0, "linear", start_time=0.0
    )
    value, _ = sample(state, 0.5)
    # rows 6.0 -> 6, columns 3.5 -> 4
    assert value == CheckerboxParams(6, 4)
    assert isinstance(value.rows, int)


def test_round_half_up_is_not_bankers() -> None:
    assert [round_half_up(x) for x in (0.5, 1.5, 2.5, -0.5, 2.49)] == [1, 2, 3, 0, 2]
    assert AnimatablePair(2.5, 3.5).rounded() == (3, 4)


def test_interpolate_rejects_mixed_kinds() -> None:
    with pytest.raises(TypeError):
        interpolate(AnimatablePair(0.0, 0.0), 1.0, 0.5)


def test_retarget_starts_from_displayed_value() -> None:
    state = start_animation(TrapezoidParams(0.0), TrapezoidParams(100.0), 1.0, start_time=0.0)
    new = retarget(state, TrapezoidParams(200.0), 0.5)
    assert new.from_params == TrapezoidParams(50.0)
    assert new.start_time == 0.5
    assert new.duration == 1.0
    assert sample(new, 0.5) == (TrapezoidParams(50.0), False)
    assert sample(new, 1.5) == (TrapezoidParams(200.0), True)


def test_retarget_uses_rounded_pair() -> None:
    state = start_animation(CheckerboxParams(4, 4), CheckerboxParams(8, 3), 1.0, start_time=0.0)
    new = retarget(state, CheckerboxParams(3, 3), 0.5, duration=2.0, easing="ease_in")
    assert new.from_params == CheckerboxParams(6, 4)
    assert new.duration == 2.0


def test_easing_by_name_and_callable() -> None:
    s1 = start_animation(TrapezoidParams(50.0), TrapezoidParams(100.0), 1.0, "ease_in_out", start_time=0.0)
    assert sample(s1, 0.5)[0].inset_amount == pytest.approx(75.0, abs=1e-6)
    s2 = start_animation(
        TrapezoidParams(50.0), TrapezoidParams(100.0), 1.0, lambda t: t * t, start_time=0.0
    )
    assert sample(s2, 0.5)[0].inset_amount == pytest.approx(62.5)


def test_kind_mismatch_is_rejected() -> None:
    with pytest.raises(ShapeKindMismatchError) as ei:
        start_animation(TrapezoidParams(), CheckerboxParams(), 1.0, start_time=0.0)
    assert str(ei.value) == "invalid parameter: kind must be 'trapezoid' (got 'checkerbox')"


def test_invalid_target_is_rejected() -> None:
    with pytest.raises(ParameterError):
        start_animation(CheckerboxParams(), CheckerboxParams(0, 2), 1.0, start_time=0.0)


def test_non_animatable_kind_switches_immediately() -> None:
    state = start_animation(FlowerParams(), FlowerParams(10.0, 50.0), 3.0, start_time=0.0)
    assert state.duration == 0.0
    assert sample(state, 0.0) == (FlowerParams(10.0, 50.0), True)


def test_idle_state_is_done() -> None:
    state = idle(TrapezoidParams(12.0), now=5.0)
    assert state.is_done(5.0)
    assert sample(state, 0.0) == (TrapezoidParams(12.0), True)


def test_start_time_defaults_to_perf_counter(monkeypatch: pytest.MonkeyPatch) -> None:
    import engine.animation.state as state_mod

    monkeypatch.setattr(state_mod.time, "perf_counter", lambda: 42.0)
    state = start_animation(TrapezoidParams(0.0), TrapezoidParams(1.0), 1.0)
    assert state.start_time == 42.0


def test_sample_at_end_time_is_done_despite_rounding() -> None:
    state = start_animation(TrapezoidParams(0.0), TrapezoidParams(10.0), 0.1, start_time=100.0)
    # (100.1 - 100.0) / 0.1 は 1 をわずかに下回る
    assert sample(state, 100.0 + 0.1) == (TrapezoidParams(10.0), True)
    assert state.is_done(100.0 + 0.1)


def test_overshooting_easing_keeps_pair_valid() -> None:
    back_in = cubic_bezier(0.6, -0.28, 0.735, 0.045)
    state = start_animation(
        CheckerboxParams(1, 1), CheckerboxParams(8, 8), 1.0, back_in, start_time=0.0
    )
    value, done = sample(state, 0.3)
    assert value == CheckerboxParams(1, 1)
    assert done is False
    assert compute_path("checkerbox", value, Rect(0.0, 0.0, 100.0, 100.0)).subpath_count == 1
    new = retarget(state, CheckerboxParams(3, 3), 0.3)
    assert new.from_params == CheckerboxParams(1, 1)
