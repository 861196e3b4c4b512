from __future__ import annotations

import pytest

from engine.core.frame_clock import FrameClock
from engine.core.tickable import Tickable


class _Recorder:
    def __init__(self, name: str, log: list[tuple[str, float]]):
        self.name = name
        self.log = log

    def tick(self, dt: float) -> None:
        self.log.append((self.name, dt))


def test_recorder_satisfies_tickable_protocol() -> None:
    assert isinstance(_Recorder("a", []), Tickable)


def test_tick_runs_in_registration_order() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log), _Recorder("b", log)])
    clock.add(_Recorder("c", log))
    clock.tick(0.1)
    assert [name for name, _ in log] == ["a", "b", "c"]
    assert all(dt == pytest.approx(0.1) for _, dt in log)


def test_tick_without_dt_uses_time_source() -> None:
    times = iter([10.0, 10.25, 10.75])
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log)], time_source=lambda: next(times))
    clock.tick()
    clock.tick()
    assert [dt for _, dt in log] == pytest.approx([0.25, 0.5])
    assert clock.elapsed == pytest.approx(0.75)


def test_negative_dt_is_clamped_to_zero() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log)])
    clock.tick(-1.0)
    assert log == [("a", 0.0)]
    assert clock.elapsed == 0.0
