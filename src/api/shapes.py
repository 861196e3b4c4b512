"""
どこで: `api.shapes`（形状生成の高レベル API）。
何を: 種別名とパラメータから `Path` を得る `compute_path` と、動的ファサード `G`。
なぜ: ホスト UI が 1 フレーム/1 イベントごとに呼ぶ入口を一つに揃えるため。

Notes
-----
- 実体はレジストリ（`shapes.registry`）に登録済みの shape 関数 `fn(params, rect)`。
- `compute_path` は `params.kind` と要求種別の一致を検査し、不一致は `ShapeKindMismatchError`。
- 色相サイクル円は 1 本のパスではないため、色付きの情報は `compute_color_ring` /
  `color_ring_layers` から得る。

Examples
--------
    from api import G, Rect

    rect = Rect(0, 0, 300, 300)
    path = G.trapezoid(rect, inset_amount=50)
    geometry = path.flatten()
"""

from __future__ import annotations

from typing import Any

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from common.errors import ShapeKindMismatchError
from engine.core.path import Path, Rect
from shapes.blend_circles import blend_circle_layers, composite_at, composite_grid
from shapes.color_cycling_circle import ColorRingEntry, color_ring_layers, compute_color_ring
from shapes.params import ShapeParams, make_params
from shapes.registry import get_shape, is_shape_registered, list_shapes, normalize_kind


def compute_path(kind: str, params: ShapeParams, rect: Rect) -> Path:
    """`kind` の shape 関数で `params` と `rect` からパスを作る（純関数）。

    Raises
    ------
    KeyError
        未登録の種別。
    ShapeKindMismatchError
        `params` の種別が `kind` と異なる。
    ParameterError
        パラメータ制約の違反。
    """
    fn = get_shape(kind)
    key = normalize_kind(kind)
    if params.kind != key:
        raise ShapeKindMismatchError(expected=key, actual=params.kind)
    return fn(params, rect)


class ShapesAPI:
    """`G.<kind>(rect, **fields)` で `make_params` → `compute_path` を行う動的ファサード。"""

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"未登録のシェイプ名です: {name}")

        def _build(rect: Rect, **fields: Any) -> Path:
            return compute_path(name, make_params(name, **fields), rect)

        _build.__name__ = name
        return _build

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_shapes()))


G = ShapesAPI()

__all__ = [
    "G",
    "ShapesAPI",
    "ColorRingEntry",
    "compute_path",
    "compute_color_ring",
    "color_ring_layers",
    "blend_circle_layers",
    "composite_at",
    "composite_grid",
    "list_shapes",
]
