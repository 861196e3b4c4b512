from __future__ import annotations

import math

from engine.core.path import Path, Rect

from .params import ArcParams
from .registry import shape

# 0° を上向きにするための回転（描画座標では 0 rad が右向き）
_UP_OFFSET_DEG = 90.0


@shape
def arc(params: ArcParams, rect: Rect) -> Path:
    """矩形中心を中心とする 1 本の円弧。

    半径は `width/2 - inset_amount`（0 未満は 0 に clamp）。
    角度は 90° 引いてから変換し、向きは `clockwise` の否定で描く。
    """
    params.validate()
    radius = max(0.0, rect.width / 2 - params.inset_amount)
    start = math.radians(params.start_angle - _UP_OFFSET_DEG)
    end = math.radians(params.end_angle - _UP_OFFSET_DEG)
    return Path().add_arc(rect.center, radius, start, end, clockwise=not params.clockwise)
