from __future__ import annotations

from engine.core.path import Path, Rect, path_from_points

from .params import TriangleParams
from .registry import shape


@shape
def triangle(params: TriangleParams, rect: Rect) -> Path:
    """上辺中央を頂点とする二等辺三角形（始点へ戻る直線で閉じる）。

    幅/高さ 0 の矩形では面積 0 のパスになる（除算なし）。
    """
    params.validate()
    return path_from_points(
        [
            (rect.mid_x, rect.min_y),
            (rect.min_x, rect.max_y),
            (rect.max_x, rect.max_y),
            (rect.mid_x, rect.min_y),
        ]
    )
