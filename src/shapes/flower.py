from __future__ import annotations

import math

import numpy as np

from engine.core.path import AffineTransform, Path, Rect

from .params import FlowerParams
from .registry import shape

PETAL_COUNT = 16
# 花弁の重なりを抜くため、呼び出し側は even-odd で塗ること
FILL_RULE = "evenodd"


@shape
def flower(params: FlowerParams, rect: Rect) -> Path:
    """π/8 刻みで回転させた 16 枚の楕円花弁。

    各花弁は局所空間の `Rect(petal_offset, 0, petal_width, height/2)` に内接する楕円で、
    原点回りに回転 → 矩形中心へ平行移動して配置する。花弁数は矩形サイズに依存しない。
    """
    params.validate()
    petal = Path().add_ellipse(Rect(params.petal_offset, 0.0, params.petal_width, rect.height / 2))
    to_center = AffineTransform.translation(rect.width / 2, rect.height / 2)

    out = Path()
    # 浮動小数の刻み累積を避けるため、角度は整数インデックスから作る
    for number in np.arange(PETAL_COUNT) * (math.pi / 8):
        position = AffineTransform.rotation(float(number)).concatenating(to_center)
        out = out.add_path(petal.applying(position))
    return out
