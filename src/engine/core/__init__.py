"""
どこで: `engine.core` サブパッケージ。
何を: 値型（Rect/Point/Path）・平坦化表現（Geometry）・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 形状生成とアニメーションの土台を構成し、上位層（shapes/animation/export）から再利用するため。
"""

from .frame_clock import FrameClock
from .geometry import Geometry
from .path import AffineTransform, ArcTo, EllipseIn, LineTo, MoveTo, Path, PathSegment, Point, Rect
from .tickable import Tickable

__all__ = [
    "AffineTransform",
    "ArcTo",
    "EllipseIn",
    "FrameClock",
    "Geometry",
    "LineTo",
    "MoveTo",
    "Path",
    "PathSegment",
    "Point",
    "Rect",
    "Tickable",
]
