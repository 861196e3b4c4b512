"""
どこで: `shapes.params`
何を: shape 種別ごとのパラメータ値型（タグ付きバリアント）と、そのアニメーション可能データ。
なぜ: 形状生成（`shapes.<kind>`）と補間（`engine.animation`）が同じ不変値を受け渡すため。

方針:
- すべて frozen dataclass。値の変更は `dataclasses.replace` で新しい値を作る。
- `kind` は ClassVar のタグで、レジストリ名と一致させる。
- `validate()` は制約違反時に `ParameterError` を送出し、正常時は自身を返す。
- アニメーション可能な種別は `animatable_data` と `with_animatable_data()` を持つ。
  補間対象が無い種別では `animatable_data` が None（即時切り替え）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import ClassVar, Union

from common.base_registry import BaseRegistry
from common.errors import ParameterError


def round_half_up(x: float) -> int:
    """四捨五入（.5 は常に +∞ 側）。Python 組込み `round` の偶数丸めは使わない。"""
    return int(math.floor(float(x) + 0.5))


@dataclass(frozen=True)
class AnimatablePair:
    """2 成分を同時に補間するための明示的なペア。"""

    first: float
    second: float

    def __add__(self, other: "AnimatablePair") -> "AnimatablePair":
        return AnimatablePair(self.first + other.first, self.second + other.second)

    def __sub__(self, other: "AnimatablePair") -> "AnimatablePair":
        return AnimatablePair(self.first - other.first, self.second - other.second)

    def scaled(self, k: float) -> "AnimatablePair":
        return AnimatablePair(self.first * k, self.second * k)

    def rounded(self) -> tuple[int, int]:
        """各成分を round-half-up で整数化。"""
        return (round_half_up(self.first), round_half_up(self.second))


AnimatableData = Union[float, AnimatablePair]


@dataclass(frozen=True)
class TriangleParams:
    kind: ClassVar[str] = "triangle"

    def validate(self) -> "TriangleParams":
        return self

    @property
    def animatable_data(self) -> None:
        return None


@dataclass(frozen=True)
class ArcParams:
    """円弧。角度は度数法で 0° が上向き。"""

    kind: ClassVar[str] = "arc"

    start_angle: float = 0.0
    end_angle: float = 110.0
    clockwise: bool = True
    inset_amount: float = 0.0

    def validate(self) -> "ArcParams":
        if self.inset_amount < 0:
            raise ParameterError("inset_amount", "≥ 0")
        return self

    def inset(self, amount: float) -> "ArcParams":
        """inset を累積した新しい値（置き換えではなく加算）。"""
        return replace(self, inset_amount=self.inset_amount + float(amount))

    @property
    def animatable_data(self) -> None:
        return None


@dataclass(frozen=True)
class FlowerParams:
    kind: ClassVar[str] = "flower"

    petal_offset: float = -20.0
    petal_width: float = 100.0

    def validate(self) -> "FlowerParams":
        if self.petal_width < 0:
            raise ParameterError("petal_width", "≥ 0")
        return self

    @property
    def animatable_data(self) -> None:
        return None


@dataclass(frozen=True)
class TrapezoidParams:
    kind: ClassVar[str] = "trapezoid"

    inset_amount: float = 50.0

    def validate(self) -> "TrapezoidParams":
        return self

    @property
    def animatable_data(self) -> float:
        return float(self.inset_amount)

    def with_animatable_data(self, value: float) -> "TrapezoidParams":
        return replace(self, inset_amount=float(value))


@dataclass(frozen=True)
class CheckerboxParams:
    kind: ClassVar[str] = "checkerbox"

    rows: int = 4
    columns: int = 4

    def validate(self) -> "CheckerboxParams":
        for name in ("rows", "columns"):
            value = getattr(self, name)
            if int(value) != value:
                raise ParameterError(name, "an integer")
            if value < 1:
                raise ParameterError(name, "≥ 1")
        return self

    @property
    def animatable_data(self) -> AnimatablePair:
        return AnimatablePair(float(self.rows), float(self.columns))

    def with_animatable_data(self, value: AnimatablePair) -> "CheckerboxParams":
        """round-half-up で整数化し、1 未満は 1 に clamp する。

        下へ行き過ぎるイージングでも行/列が 0 以下にならず、表示値は常に有効。
        """
        rows, columns = value.rounded()
        return replace(self, rows=max(1, rows), columns=max(1, columns))


@dataclass(frozen=True)
class ColorCyclingCircleParams:
    """色相サイクル円。amount は [0,1) を想定するが、範囲外でも補正しない。"""

    kind: ClassVar[str] = "color_cycling_circle"

    amount: float = 0.0
    steps: int = 100

    def validate(self) -> "ColorCyclingCircleParams":
        if int(self.steps) != self.steps:
            raise ParameterError("steps", "an integer")
        if self.steps < 1:
            raise ParameterError("steps", "≥ 1")
        return self

    @property
    def animatable_data(self) -> None:
        return None


@dataclass(frozen=True)
class BlendCirclesParams:
    """スクリーン合成される RGB 3 円。amount は円の大きさ（0..1）。"""

    kind: ClassVar[str] = "blend_circles"

    amount: float = 0.0

    def validate(self) -> "BlendCirclesParams":
        if not (0.0 <= self.amount <= 1.0):
            raise ParameterError("amount", "within [0, 1]")
        return self

    @property
    def animatable_data(self) -> float:
        return float(self.amount)

    def with_animatable_data(self, value: float) -> "BlendCirclesParams":
        return replace(self, amount=float(value))


ShapeParams = Union[
    TriangleParams,
    ArcParams,
    FlowerParams,
    TrapezoidParams,
    CheckerboxParams,
    ColorCyclingCircleParams,
    BlendCirclesParams,
]


def is_animatable(params: ShapeParams) -> bool:
    return params.animatable_data is not None


PARAMS_BY_KIND: dict[str, type] = {
    cls.kind: cls
    for cls in (
        TriangleParams,
        ArcParams,
        FlowerParams,
        TrapezoidParams,
        CheckerboxParams,
        ColorCyclingCircleParams,
        BlendCirclesParams,
    )
}


def make_params(kind: str, **fields: object) -> ShapeParams:
    """種別名とフィールド値からパラメータを作る。未知の種別は KeyError。"""
    try:
        cls = PARAMS_BY_KIND[BaseRegistry.normalize_key(kind)]
    except KeyError:
        raise KeyError(f"shape '{kind}' は登録されていません") from None
    return cls(**fields).validate()


__all__ = [
    "AnimatablePair",
    "AnimatableData",
    "ArcParams",
    "BlendCirclesParams",
    "CheckerboxParams",
    "ColorCyclingCircleParams",
    "FlowerParams",
    "ShapeParams",
    "TrapezoidParams",
    "TriangleParams",
    "PARAMS_BY_KIND",
    "is_animatable",
    "make_params",
    "round_half_up",
]
