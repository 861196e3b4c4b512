"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトイン shape を import 副作用で登録し、`api.shapes` から種別名で解決できるようにする。
なぜ: 形状種別ごとのディスパッチを一箇所に集約し、パラメータ型と同じ名前で引けるようにするため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import arc as _register_arc  # noqa: F401
from . import blend_circles as _register_blend_circles  # noqa: F401
from . import checkerbox as _register_checkerbox  # noqa: F401
from . import color_cycling_circle as _register_color_cycling_circle  # noqa: F401
from . import flower as _register_flower  # noqa: F401
from . import trapezoid as _register_trapezoid  # noqa: F401
from . import triangle as _register_triangle  # noqa: F401
from .params import (
    AnimatablePair,
    ArcParams,
    BlendCirclesParams,
    CheckerboxParams,
    ColorCyclingCircleParams,
    FlowerParams,
    ShapeParams,
    TrapezoidParams,
    TriangleParams,
)
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "AnimatablePair",
    "ArcParams",
    "BlendCirclesParams",
    "CheckerboxParams",
    "ColorCyclingCircleParams",
    "FlowerParams",
    "ShapeParams",
    "TrapezoidParams",
    "TriangleParams",
]
