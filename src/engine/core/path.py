"""
どこで: `engine.core.path`
何を: 形状生成の出力となる値型（Rect/Point/AffineTransform/PathSegment/Path）と平坦化。
なぜ: 各 shape 関数は描画環境に依存しない「セグメント列」だけを返し、
      ラスタライズや書き出しは `Path.flatten()` → `Geometry` を通じて行うため。

座標系:
- 原点は左上、y は下向きに増える。
- 角度はラジアン。`ArcTo.clockwise=True` は「角度が減少する向き」に進むことを表す
  （y 下向きの画面上では反時計回りに見える）。

サブパス規則:
- `MoveTo` は新しいサブパスを開始する。
- `EllipseIn` はそれ自体で閉じた 1 サブパス。
- `ArcTo` は現在のサブパスに続く（現在点から円弧始点への直線を含意）。現在点が無ければ
  円弧始点から新しいサブパスを開始する。
- 現在点の無い `LineTo` は、その点から新しいサブパスを開始する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Union

import numpy as np

from common import settings
from common.errors import ParameterError

from .geometry import Geometry

TAU = 2.0 * math.pi


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """描画先の矩形。幅/高さは 0 以上（0 は許容: 縮退した形状になる）。"""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ParameterError("width", "≥ 0")
        if self.height < 0:
            raise ParameterError("height", "≥ 0")

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    def inset_by(self, amount: float) -> "Rect":
        """各辺を `amount` だけ内側へ寄せた矩形。縮みすぎた軸は中心で幅 0 に潰す。"""
        w = self.width - 2 * amount
        h = self.height - 2 * amount
        x = self.x + amount if w >= 0 else self.mid_x
        y = self.y + amount if h >= 0 else self.mid_y
        return Rect(x, y, max(w, 0.0), max(h, 0.0))


@dataclass(frozen=True)
class AffineTransform:
    """2D アフィン変換。

    `x' = a*x + c*y + tx`, `y' = b*x + d*y + ty`。
    `t1.concatenating(t2)` は「t1 を適用した後に t2」を表す。
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        cos_t, sin_t = math.cos(angle), math.sin(angle)
        return cls(cos_t, sin_t, -sin_t, cos_t, 0.0, 0.0)

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(tx=float(tx), ty=float(ty))

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(a=float(sx), d=float(sx if sy is None else sy))

    @property
    def is_identity(self) -> bool:
        return self == _IDENTITY

    def concatenating(self, other: "AffineTransform") -> "AffineTransform":
        return AffineTransform(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    def apply(self, x: float, y: float) -> Point:
        return Point(self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty)

    def apply_points(self, pts: np.ndarray) -> np.ndarray:
        """(N,2) の点列へ一括適用した新しい配列を返す。"""
        if self.is_identity:
            return np.array(pts, dtype=np.float64, copy=True)
        m = np.array([[self.a, self.b], [self.c, self.d]], dtype=np.float64)
        return np.asarray(pts, dtype=np.float64) @ m + np.array([self.tx, self.ty])


_IDENTITY = AffineTransform()


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class ArcTo:
    """中心/半径/開始角/終了角で表す円弧。`transform` は平坦化時に点列へ適用する。"""

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool
    transform: AffineTransform = field(default=_IDENTITY)

    @property
    def sweep(self) -> float:
        """符号付きの掃引角（clockwise なら負）。

        角度差が 2π の非零倍のときは 1 周として扱う。
        """
        raw = self.end_angle - self.start_angle
        if raw == 0:
            return 0.0
        if self.clockwise:
            delta = (self.start_angle - self.end_angle) % TAU
            return -(delta if delta != 0 else TAU)
        delta = raw % TAU
        return delta if delta != 0 else TAU

    def sample(self, segments_per_turn: int) -> np.ndarray:
        """円弧上の点列 (K,2) を返す（変換適用済み）。"""
        sweep = self.sweep
        n = max(1, int(math.ceil(abs(sweep) / TAU * segments_per_turn)))
        angles = self.start_angle + sweep * np.linspace(0.0, 1.0, n + 1)
        r = max(0.0, float(self.radius))
        pts = np.stack(
            [self.center.x + r * np.cos(angles), self.center.y + r * np.sin(angles)], axis=1
        )
        return self.transform.apply_points(pts)


@dataclass(frozen=True)
class EllipseIn:
    """`rect` に内接する楕円（単独で閉じたサブパス）。"""

    rect: Rect
    transform: AffineTransform = field(default=_IDENTITY)

    def sample(self, segments: int) -> np.ndarray:
        """閉じた点列 (segments+1, 2) を返す（末尾は始点と完全一致）。"""
        n = max(4, int(segments))
        angles = np.linspace(0.0, TAU, n, endpoint=False)
        rx = self.rect.width / 2
        ry = self.rect.height / 2
        pts = np.stack(
            [self.rect.mid_x + rx * np.cos(angles), self.rect.mid_y + ry * np.sin(angles)], axis=1
        )
        pts = np.vstack([pts, pts[:1]])
        return self.transform.apply_points(pts)


PathSegment = Union[MoveTo, LineTo, ArcTo, EllipseIn]


def _transform_segment(seg: PathSegment, t: AffineTransform) -> PathSegment:
    if isinstance(seg, (MoveTo, LineTo)):
        return type(seg)(t.apply(seg.point.x, seg.point.y))
    return replace(seg, transform=seg.transform.concatenating(t))


@dataclass(frozen=True)
class Path:
    """セグメントの順序付き列（不変）。順序は描画順を意味する。"""

    segments: tuple[PathSegment, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))

    # ── 構築（すべて新しい Path を返す） ──
    def move_to(self, x: float, y: float) -> "Path":
        return Path(self.segments + (MoveTo(Point(x, y)),))

    def line_to(self, x: float, y: float) -> "Path":
        return Path(self.segments + (LineTo(Point(x, y)),))

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> "Path":
        return Path(self.segments + (ArcTo(center, radius, start_angle, end_angle, clockwise),))

    def add_ellipse(self, rect: Rect) -> "Path":
        return Path(self.segments + (EllipseIn(rect),))

    def add_path(self, other: "Path") -> "Path":
        return Path(self.segments + other.segments)

    def __add__(self, other: "Path") -> "Path":
        return self.add_path(other)

    def applying(self, transform: AffineTransform) -> "Path":
        """全セグメントへ変換を適用した Path。直線系は即時、円弧/楕円は変換を合成して保持。"""
        return Path(tuple(_transform_segment(s, transform) for s in self.segments))

    # ── 参照 ──
    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def points(self) -> list[Point]:
        """MoveTo/LineTo の頂点を順に返す（円弧/楕円は含まない）。"""
        return [s.point for s in self.segments if isinstance(s, (MoveTo, LineTo))]

    def subpaths(self) -> list["Path"]:
        """サブパス規則に従って分割した Path のリスト。"""
        out: list[list[PathSegment]] = []
        current: list[PathSegment] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                if current:
                    out.append(current)
                current = [seg]
            elif isinstance(seg, EllipseIn):
                if current:
                    out.append(current)
                    current = []
                out.append([seg])
            else:
                current.append(seg)
        if current:
            out.append(current)
        return [Path(tuple(segs)) for segs in out]

    @property
    def subpath_count(self) -> int:
        return len(self.subpaths())

    def flatten(
        self,
        arc_segments: int | None = None,
        ellipse_segments: int | None = None,
    ) -> Geometry:
        """円弧/楕円を折れ線で近似し、サブパスごとに 1 本のポリラインへ落とす。

        分割数の既定値は `DRW_ARC_SEGMENTS` / `DRW_ELLIPSE_SEGMENTS`（1 周あたり）。
        """
        cfg = settings.get()
        n_arc = int(arc_segments or cfg.ARC_SEGMENTS)
        n_ell = int(ellipse_segments or cfg.ELLIPSE_SEGMENTS)

        lines: list[np.ndarray] = []
        current: list[np.ndarray] = []

        def flush() -> None:
            if current:
                lines.append(np.vstack(current))
                current.clear()

        for seg in self.segments:
            if isinstance(seg, MoveTo):
                flush()
                current.append(np.array([seg.point.as_tuple()], dtype=np.float64))
            elif isinstance(seg, LineTo):
                current.append(np.array([seg.point.as_tuple()], dtype=np.float64))
            elif isinstance(seg, ArcTo):
                current.append(seg.sample(n_arc))
            elif isinstance(seg, EllipseIn):
                flush()
                lines.append(seg.sample(n_ell))
            else:  # pragma: no cover - 型で保証
                raise TypeError(f"unknown path segment: {seg!r}")
        flush()
        return Geometry.from_lines(lines)

    def bounds(self) -> Rect:
        """平坦化した点列の外接矩形（空なら原点の 0 矩形）。"""
        g = self.flatten()
        if g.is_empty:
            return Rect(0.0, 0.0, 0.0, 0.0)
        lo = g.coords.min(axis=0)
        hi = g.coords.max(axis=0)
        return Rect(float(lo[0]), float(lo[1]), float(hi[0] - lo[0]), float(hi[1] - lo[1]))


def path_from_points(points: Iterable[tuple[float, float]]) -> Path:
    """点列を MoveTo + LineTo... の 1 サブパスにする（閉じる場合は始点を末尾に含める）。"""
    segs: list[PathSegment] = []
    for i, (x, y) in enumerate(points):
        p = Point(float(x), float(y))
        segs.append(MoveTo(p) if i == 0 else LineTo(p))
    return Path(tuple(segs))


__all__ = [
    "TAU",
    "Point",
    "Rect",
    "AffineTransform",
    "MoveTo",
    "LineTo",
    "ArcTo",
    "EllipseIn",
    "PathSegment",
    "Path",
    "path_from_points",
]
