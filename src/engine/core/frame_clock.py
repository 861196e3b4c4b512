"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定と経過時間の積算）。
なぜ: ホスト UI のリフレッシュ毎に呼ぶだけで、複数の Animator の更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。

    `time_source` はテストで差し替え可能（既定は `time.perf_counter`）。
    """

    def __init__(
        self,
        tickables: Sequence[Tickable] = (),
        *,
        time_source: Callable[[], float] = time.perf_counter,
    ):
        self._tickables = tuple(tickables)
        self._time_source = time_source
        self._last_time = time_source()
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """これまでに進めた合計秒数。"""
        return self._elapsed

    def add(self, tickable: Tickable) -> None:
        self._tickables = self._tickables + (tickable,)

    # ホストの描画ループから 1 フレームに 1 回呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # dt を渡さないホスト用
            now = self._time_source()
            dt = now - self._last_time
            self._last_time = now
        dt = max(0.0, float(dt))
        self._elapsed += dt

        for t in self._tickables:
            t.tick(dt)
