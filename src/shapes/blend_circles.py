"""
どこで: `shapes.blend_circles`
何を: 赤/緑/青の 3 円を黒背景の上でスクリーン合成するデモ形状。
なぜ: 形状（円パス）と合成結果（各点の色）の両方をホスト非依存に求められるようにするため。

配置は 300×300 の基準枠で定義し、`rect.width / 300` で拡縮する:
- 赤: 中心 + (-50, -80)、緑: 中心 + (50, -80)、青: 中心
- 直径はいずれも `200 * amount`
"""

from __future__ import annotations

import numpy as np

from common.types import RGB, RGBA
from engine.core.path import Path, Rect
from util.color import screen_blend

from .params import BlendCirclesParams
from .registry import shape

REFERENCE_SIZE = 300.0
_CIRCLES: tuple[tuple[tuple[float, float], RGBA], ...] = (
    ((-50.0, -80.0), (1.0, 0.0, 0.0, 1.0)),
    ((50.0, -80.0), (0.0, 1.0, 0.0, 1.0)),
    ((0.0, 0.0), (0.0, 0.0, 1.0, 1.0)),
)


def _circle_specs(params: BlendCirclesParams, rect: Rect) -> list[tuple[float, float, float, RGBA]]:
    """(cx, cy, radius, color) の列。"""
    params.validate()
    s = rect.width / REFERENCE_SIZE
    radius = 100.0 * params.amount * s
    return [
        (rect.mid_x + ox * s, rect.mid_y + oy * s, radius, color) for (ox, oy), color in _CIRCLES
    ]


def blend_circle_layers(params: BlendCirclesParams, rect: Rect) -> list[tuple[Path, RGBA]]:
    """描画順（赤 → 緑 → 青）の円パスと塗り色。"""
    layers = []
    for cx, cy, r, color in _circle_specs(params, rect):
        layers.append((Path().add_ellipse(Rect(cx - r, cy - r, 2 * r, 2 * r)), color))
    return layers


def composite_grid(
    params: BlendCirclesParams, rect: Rect, xs: np.ndarray, ys: np.ndarray
) -> np.ndarray:
    """格子点 (len(ys), len(xs)) ごとのスクリーン合成 RGB（黒背景）を返す。"""
    gx, gy = np.meshgrid(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
    out = np.zeros(gx.shape + (3,), dtype=np.float64)
    for cx, cy, r, color in _circle_specs(params, rect):
        if r <= 0:
            continue
        inside = (gx - cx) ** 2 + (gy - cy) ** 2 <= r * r
        out = np.where(inside[..., np.newaxis], screen_blend(out, color[:3]), out)
    return out


def composite_at(params: BlendCirclesParams, rect: Rect, x: float, y: float) -> RGB:
    """1 点のスクリーン合成色。"""
    rgb = composite_grid(params, rect, np.array([x]), np.array([y]))[0, 0]
    return (float(rgb[0]), float(rgb[1]), float(rgb[2]))


@shape
def blend_circles(params: BlendCirclesParams, rect: Rect) -> Path:
    """3 円の輪郭を描画順に連結したパス（色は `blend_circle_layers` を使う）。"""
    out = Path()
    for path, _ in blend_circle_layers(params, rect):
        out = out.add_path(path)
    return out
