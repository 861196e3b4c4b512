"""
どこで: `engine.animation.state`
何を: アニメーション状態の純粋な状態機械（開始/標本化/割り込み）。
なぜ: 進行状況をすべて呼び出し側が所有する値に持たせ、コア側に隠れた状態を置かないため。

状態遷移:
- Idle(params) → Animating(from, to, start, duration, easing) → Idle(to)
- 割り込み（`retarget`）時は、その時刻に表示されていた値を新しい `from` にする。

標本化:
- `t = (now - start) / duration` を [0, 1] に clamp。
- `duration <= 0` は除算せず即座に `(to, True)`。
- `t >= 1` で `(to, True)`、それ以外は `from + easing(t) * (to - from)`。
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from common.easing import Easing, linear, resolve_easing
from shapes.params import ShapeParams, is_animatable

from .interpolation import ensure_same_kind, interpolate_params

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimationState:
    from_params: ShapeParams
    to_params: ShapeParams
    start_time: float
    duration: float
    easing: Easing = linear

    @property
    def kind(self) -> str:
        return self.to_params.kind

    def progress(self, now: float) -> float:
        """正規化時間 t（[0,1] に clamp、duration <= 0 は 1）。

        終了時刻 `start_time + duration` 以降は除算せずに 1 を返す
        （`(now - start) / duration` の丸めで 1 未満に留まらないように）。
        """
        if self.duration <= 0:
            return 1.0
        now = float(now)
        if now >= self.start_time + self.duration:
            return 1.0
        t = (now - self.start_time) / self.duration
        return 0.0 if t < 0.0 else 1.0 if t > 1.0 else t

    def is_done(self, now: float) -> bool:
        return self.progress(now) >= 1.0


def idle(params: ShapeParams, now: float = 0.0) -> AnimationState:
    """既に完了している（静止した）状態。"""
    params.validate()
    return AnimationState(params, params, float(now), 0.0, linear)


def start_animation(
    current: ShapeParams,
    target: ShapeParams,
    duration: float,
    easing: str | Easing | None = "linear",
    *,
    start_time: float | None = None,
) -> AnimationState:
    """`current`（表示中の値）から `target` への遷移を開始する。

    補間対象を持たない種別は duration を 0 にして即時完了させる。
    `start_time` 省略時は `time.perf_counter()`。
    """
    ensure_same_kind(current, target)
    current.validate()
    target.validate()
    ease = resolve_easing(easing)
    now = time.perf_counter() if start_time is None else float(start_time)
    dur = float(duration)
    if not is_animatable(target):
        logger.debug("%s は補間対象を持たないため即時切り替え", target.kind)
        dur = 0.0
    state = AnimationState(current, target, now, dur, ease)
    logger.debug("animation start: kind=%s duration=%.3f", state.kind, dur)
    return state


def sample(state: AnimationState, now: float) -> tuple[ShapeParams, bool]:
    """時刻 `now` の表示値と完了フラグを返す。"""
    if state.duration <= 0:
        return state.to_params, True
    t = state.progress(now)
    if t >= 1.0:
        return state.to_params, True
    if t <= 0.0:
        return state.from_params, False
    return interpolate_params(state.from_params, state.to_params, state.easing(t)), False


def retarget(
    state: AnimationState,
    target: ShapeParams,
    now: float,
    duration: float | None = None,
    easing: str | Easing | None = None,
) -> AnimationState:
    """進行中でも、`now` の表示値から `target` へ新しい遷移を始める。

    duration/easing 省略時は元の状態のものを引き継ぐ。
    """
    displayed, done = sample(state, now)
    if not done:
        logger.debug("animation interrupted: kind=%s", state.kind)
    return start_animation(
        displayed,
        target,
        state.duration if duration is None else duration,
        state.easing if easing is None else easing,
        start_time=now,
    )


__all__ = ["AnimationState", "idle", "start_animation", "sample", "retarget"]
