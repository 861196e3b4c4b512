"""
どこで: `engine.animation.animator`
何を: 1 つの shape パラメータのアニメーション状態を保持する呼び出し側所有の Tickable。
なぜ: タップ等のイベントで `request()` し、FrameClock から `tick(dt)` するだけで
      表示値（`value`）を得られるようにするため。状態遷移そのものは `state` の純関数に委譲する。
"""

from __future__ import annotations

import logging

from common import settings
from common.easing import Easing, resolve_easing
from shapes.params import ShapeParams

from .state import AnimationState, idle, retarget, sample

logger = logging.getLogger(__name__)


class Animator:
    """ローカル時計で `AnimationState` を進める。

    引数:
        params: 初期表示値。
        duration: 既定の遷移時間 [秒]。None で `DRW_DEFAULT_DURATION`。
        easing: 既定のイージング（名前または callable）。None で `DRW_DEFAULT_EASING`。
    """

    def __init__(
        self,
        params: ShapeParams,
        *,
        duration: float | None = None,
        easing: str | Easing | None = None,
    ) -> None:
        cfg = settings.get()
        self._duration = cfg.DEFAULT_DURATION if duration is None else float(duration)
        self._easing = resolve_easing(cfg.DEFAULT_EASING if easing is None else easing)
        self._now = 0.0
        self._state = idle(params, self._now)
        self._animating = False

    @property
    def now(self) -> float:
        return self._now

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def value(self) -> ShapeParams:
        """現在の表示値。"""
        return sample(self._state, self._now)[0]

    @property
    def is_animating(self) -> bool:
        return not self._state.is_done(self._now)

    def request(
        self,
        target: ShapeParams,
        *,
        duration: float | None = None,
        easing: str | Easing | None = None,
    ) -> AnimationState:
        """現在の表示値から `target` への遷移を開始（進行中なら割り込み）。"""
        self._state = retarget(
            self._state,
            target,
            self._now,
            self._duration if duration is None else duration,
            self._easing if easing is None else easing,
        )
        self._animating = self.is_animating
        return self._state

    def tick(self, dt: float) -> None:
        self._now += max(0.0, float(dt))
        if self._animating and self._state.is_done(self._now):
            self._animating = False
            self._state = idle(self._state.to_params, self._now)
            logger.debug("animation complete: kind=%s", self._state.kind)


__all__ = ["Animator"]
