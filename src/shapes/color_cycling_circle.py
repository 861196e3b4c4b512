"""
どこで: `shapes.color_cycling_circle`
何を: 色相をずらした同心円群（1 本のパスではなく「インセット量と色」の列）。
なぜ: ホストが各リングを strokeBorder で描けるよう、色と形状を分けて提供するため。

色相規則:
- `hue = index / steps + amount`。1 を超えたときだけ 1 を 1 回引く（一般の剰余は取らない）。
- amount が負の場合も補正しない。
"""

from __future__ import annotations

from dataclasses import dataclass

from common import settings
from common.types import RGBA
from engine.core.path import Path, Rect
from util.color import hsb_to_rgba

from .params import ColorCyclingCircleParams
from .registry import shape


@dataclass(frozen=True)
class ColorRingEntry:
    index: int
    inset: float
    hue: float
    color: RGBA


def ring_hue(index: int, steps: int, amount: float) -> float:
    target_hue = index / steps + amount
    if target_hue > 1:
        target_hue -= 1
    return target_hue


def compute_color_ring(params: ColorCyclingCircleParams) -> list[ColorRingEntry]:
    """外側（index=0）から内側へ順に `steps` 個のリング情報を返す。彩度/明度は 1。"""
    params.validate()
    steps = int(params.steps)
    entries = []
    for index in range(steps):
        hue = ring_hue(index, steps, params.amount)
        entries.append(ColorRingEntry(index, float(index), hue, hsb_to_rgba(hue, 1.0, 1.0)))
    return entries


def _bounding_circle(rect: Rect) -> Rect:
    d = min(rect.width, rect.height)
    return Rect(rect.mid_x - d / 2, rect.mid_y - d / 2, d, d)


def color_ring_layers(
    params: ColorCyclingCircleParams,
    rect: Rect,
    line_width: float | None = None,
) -> list[tuple[Path, RGBA]]:
    """各リングの円パスと線色。

    線は内側に収まる（strokeBorder）ので、円は `inset + line_width/2` だけ縮める。
    半径が 0 以下になるリングは省く。
    """
    lw = settings.get().RING_LINE_WIDTH if line_width is None else float(line_width)
    base = _bounding_circle(rect)
    layers: list[tuple[Path, RGBA]] = []
    for entry in compute_color_ring(params):
        ring = base.inset_by(entry.inset + lw / 2)
        if ring.width <= 0 or ring.height <= 0:
            continue
        layers.append((Path().add_ellipse(ring), entry.color))
    return layers


@shape
def color_cycling_circle(params: ColorCyclingCircleParams, rect: Rect) -> Path:
    """全リングの輪郭を外側から順に連結したパス（色は `color_ring_layers` を使う）。"""
    out = Path()
    for path, _ in color_ring_layers(params, rect):
        out = out.add_path(path)
    return out
