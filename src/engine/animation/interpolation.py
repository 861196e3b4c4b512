"""
どこで: `engine.animation.interpolation`
何を: アニメーション可能データ（スカラー/AnimatablePair）とパラメータ値の線形補間。
なぜ: 補間規則を shape 種別から切り離し、標本化（`state.sample`）を種別非依存にするため。

規則:
- `value = from + progress * (to - from)` を各成分独立に適用する。
- AnimatablePair は成分ごとに補間し、パラメータへ戻す際に round-half-up で整数化する
  （`CheckerboxParams.with_animatable_data`、1 未満は 1 に clamp）。
- 補間対象を持たない種別は即時に `to` へ切り替える。
"""

from __future__ import annotations

from common.errors import ShapeKindMismatchError
from shapes.params import AnimatableData, AnimatablePair, ShapeParams


def lerp(a: float, b: float, progress: float) -> float:
    return a + progress * (b - a)


def interpolate(a: AnimatableData, b: AnimatableData, progress: float) -> AnimatableData:
    """スカラーまたはペアを補間する。両者の型は一致している必要がある。"""
    if isinstance(a, AnimatablePair):
        if not isinstance(b, AnimatablePair):
            raise TypeError("AnimatablePair はペア同士でのみ補間できます")
        return a + (b - a).scaled(progress)
    if isinstance(b, AnimatablePair):
        raise TypeError("AnimatablePair はペア同士でのみ補間できます")
    return lerp(float(a), float(b), progress)


def ensure_same_kind(a: ShapeParams, b: ShapeParams) -> None:
    if type(a) is not type(b):
        raise ShapeKindMismatchError(expected=a.kind, actual=b.kind)


def interpolate_params(
    from_params: ShapeParams, to_params: ShapeParams, progress: float
) -> ShapeParams:
    """2 つの同種パラメータの間の値を返す。"""
    ensure_same_kind(from_params, to_params)
    a = from_params.animatable_data
    if a is None:
        return to_params
    value = interpolate(a, to_params.animatable_data, progress)
    return from_params.with_animatable_data(value)


__all__ = ["lerp", "interpolate", "interpolate_params", "ensure_same_kind"]
