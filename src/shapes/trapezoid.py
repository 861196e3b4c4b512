from __future__ import annotations

from engine.core.path import Path, Rect, path_from_points

from .params import TrapezoidParams
from .registry import shape


@shape
def trapezoid(params: TrapezoidParams, rect: Rect) -> Path:
    """下辺が矩形幅いっぱい、上辺が両側 `inset_amount` だけ狭い台形。

    左下は x=0 固定（矩形原点ではない）。自己交差しないのは 0 ≤ inset ≤ width/2 のとき。
    """
    params.validate()
    inset = params.inset_amount
    return path_from_points(
        [
            (0.0, rect.max_y),
            (inset, rect.min_y),
            (rect.max_x - inset, rect.min_y),
            (rect.max_x, rect.max_y),
            (0.0, rect.max_y),
        ]
    )
