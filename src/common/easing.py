"""
どこで: `common.easing`
何を: 正規化時間 t∈[0,1] を進捗値へ写すイージング関数と、その名前付きレジストリ。
なぜ: アニメーション標本化（`engine.animation.state`）から曲線を名前/関数どちらでも選べるようにするため。

設計方針:
- 純粋・決定的。副作用なし。
- 端点は常に固定（f(0)=0, f(1)=1）。範囲外の t は [0,1] に clamp してから評価する。
- ease_* は CSS/UIKit と同じ制御点の 3 次ベジェ曲線（x(s)=t を解いて y(s) を返す）。
"""

from __future__ import annotations

from typing import Callable

from .base_registry import BaseRegistry

Easing = Callable[[float], float]

_easing_registry = BaseRegistry(label="easing")


def _clamp01(t: float) -> float:
    t = float(t)
    return 0.0 if t < 0.0 else 1.0 if t > 1.0 else t


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """制御点 (x1,y1), (x2,y2) の 3 次ベジェ曲線によるタイミング関数を返す。

    端点は (0,0), (1,1) に固定。x1/x2 は [0,1] に制限（x(s) の単調性のため）。
    Newton 法で x(s)=t を解き、収束しない場合は二分法へ切り替える。
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("x1/x2 は 0..1 の範囲が必要")

    cx = 3.0 * x1
    bx = 3.0 * (x2 - x1) - cx
    ax = 1.0 - cx - bx
    cy = 3.0 * y1
    by = 3.0 * (y2 - y1) - cy
    ay = 1.0 - cy - by

    def _x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def _y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def _dx(s: float) -> float:
        return (3.0 * ax * s + 2.0 * bx) * s + cx

    def _solve_s(t: float) -> float:
        s = t
        for _ in range(8):
            err = _x(s) - t
            if abs(err) < 1e-7:
                return s
            d = _dx(s)
            if abs(d) < 1e-6:
                break
            s -= err / d
        # 二分法
        lo, hi = 0.0, 1.0
        s = t
        for _ in range(60):
            xs = _x(s)
            if abs(xs - t) < 1e-7:
                break
            if xs < t:
                lo = s
            else:
                hi = s
            s = 0.5 * (lo + hi)
        return s

    def _ease(t: float) -> float:
        u = _clamp01(t)
        if u == 0.0 or u == 1.0:
            return u
        return _y(_solve_s(u))

    return _ease


@_easing_registry.register("linear")
def linear(t: float) -> float:
    return _clamp01(t)


_ease_in = cubic_bezier(0.42, 0.0, 1.0, 1.0)
_ease_out = cubic_bezier(0.0, 0.0, 0.58, 1.0)
_ease_in_out = cubic_bezier(0.42, 0.0, 0.58, 1.0)


@_easing_registry.register("ease_in")
def ease_in(t: float) -> float:
    return _ease_in(t)


@_easing_registry.register("ease_out")
def ease_out(t: float) -> float:
    return _ease_out(t)


@_easing_registry.register("ease_in_out")
def ease_in_out(t: float) -> float:
    return _ease_in_out(t)


def get_easing(name: str) -> Easing:
    """登録済みイージングを名前で取得。未登録なら KeyError。"""
    return _easing_registry.get(name)


def list_easings() -> list[str]:
    return sorted(_easing_registry.list_all())


def resolve_easing(easing: str | Easing | None) -> Easing:
    """名前/関数/None を関数へ解決する（None は linear）。"""
    if easing is None:
        return linear
    if isinstance(easing, str):
        return get_easing(easing)
    if not callable(easing):
        raise TypeError(f"easing は名前または callable が必要: got {easing!r}")
    return easing


__all__ = [
    "Easing",
    "cubic_bezier",
    "linear",
    "ease_in",
    "ease_out",
    "ease_in_out",
    "get_easing",
    "list_easings",
    "resolve_easing",
]
