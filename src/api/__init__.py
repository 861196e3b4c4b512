"""
どこで: `api` 入口（高レベル公開 API）。
何を: 形状 `G`・`compute_path`・色相リング・アニメーション標本化・SVG 出力を再輸出。
なぜ: ホスト UI が単一名前空間から形状生成→補間→描画データ取得まで完結できるようにするため。

Usage:
    from api import Rect, TrapezoidParams, compute_path, sample, start_animation

    rect = Rect(0, 0, 300, 300)
    state = start_animation(TrapezoidParams(50), TrapezoidParams(100), 1.0, start_time=0.0)
    params, done = sample(state, 0.5)
    path = compute_path("trapezoid", params, rect)
"""

from common.errors import ParameterError, ShapeKindMismatchError
from engine.core.frame_clock import FrameClock
from engine.core.geometry import Geometry
from engine.core.path import AffineTransform, Path, Point, Rect
from engine.export.svg import SVGParams, SVGWriter, to_svg_string
from shapes.params import (
    AnimatablePair,
    ArcParams,
    BlendCirclesParams,
    CheckerboxParams,
    ColorCyclingCircleParams,
    FlowerParams,
    TrapezoidParams,
    TriangleParams,
)
from shapes.registry import shape as shape

from .animation import (
    AnimationState,
    Animator,
    cubic_bezier,
    get_easing,
    idle,
    list_easings,
    retarget,
    sample,
    start_animation,
)
from .shapes import (
    G,
    ShapesAPI,
    blend_circle_layers,
    color_ring_layers,
    composite_at,
    compute_color_ring,
    compute_path,
    list_shapes,
)

__all__ = [
    # 形状
    "G",
    "ShapesAPI",
    "compute_path",
    "compute_color_ring",
    "color_ring_layers",
    "blend_circle_layers",
    "composite_at",
    "list_shapes",
    "shape",
    # 値型
    "AffineTransform",
    "Geometry",
    "Path",
    "Point",
    "Rect",
    "AnimatablePair",
    "ArcParams",
    "BlendCirclesParams",
    "CheckerboxParams",
    "ColorCyclingCircleParams",
    "FlowerParams",
    "TrapezoidParams",
    "TriangleParams",
    # アニメーション
    "AnimationState",
    "Animator",
    "FrameClock",
    "cubic_bezier",
    "get_easing",
    "idle",
    "list_easings",
    "retarget",
    "sample",
    "start_animation",
    # 出力
    "SVGParams",
    "SVGWriter",
    "to_svg_string",
    # 例外
    "ParameterError",
    "ShapeKindMismatchError",
]

__version__ = "2026.10"
