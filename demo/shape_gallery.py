"""
どこで: demo/shape_gallery.py（デモ用スクリプト）
何を: 登録済みの全 shape を既定パラメータで SVG に書き出す。
なぜ: 各 shape の“素の見た目”を描画環境なしで確認できるようにするため。

起動: `python demo/shape_gallery.py --out build/gallery`
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# src/ を import パスへ追加（簡易ブート）
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from api import (  # type: ignore  # after sys.path tweak
    BlendCirclesParams,
    ColorCyclingCircleParams,
    Rect,
    SVGParams,
    blend_circle_layers,
    color_ring_layers,
    compute_path,
    list_shapes,
    to_svg_string,
)
from common.logging import setup_default_logging
from shapes.flower import FILL_RULE
from shapes.params import make_params

logger = logging.getLogger("demo.shape_gallery")

CANVAS = 300.0
MARGIN = 20.0


def _layers_for(kind: str, rect: Rect) -> tuple[list, SVGParams]:
    base = SVGParams(width=CANVAS, height=CANVAS)
    # 色付きの shape は専用のレイヤ関数を使う
    if kind == "color_cycling_circle":
        layers = color_ring_layers(ColorCyclingCircleParams(amount=0.3), rect)
        return layers, SVGParams(width=CANVAS, height=CANVAS, stroke_width=2.0)
    if kind == "blend_circles":
        layers = blend_circle_layers(BlendCirclesParams(amount=1.0), rect)
        return layers, SVGParams(
            width=CANVAS,
            height=CANVAS,
            stroke=None,
            fill="#000000",
            layer_color_target="fill",
            background="#000000",
        )
    path = compute_path(kind, make_params(kind), rect)
    if kind == "flower":
        return [path], SVGParams(width=CANVAS, height=CANVAS, fill="#3366cc", fill_rule=FILL_RULE)
    return [path], base


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="全 shape を SVG に書き出す")
    ap.add_argument("--out", type=Path, default=ROOT / "build" / "gallery")
    args = ap.parse_args(argv)

    setup_default_logging()
    args.out.mkdir(parents=True, exist_ok=True)
    rect = Rect(MARGIN, MARGIN, CANVAS - 2 * MARGIN, CANVAS - 2 * MARGIN)
    for kind in list_shapes():
        layers, params = _layers_for(kind, rect)
        dest = args.out / f"{kind}.svg"
        dest.write_text(to_svg_string(layers, params), encoding="utf-8")
        logger.info("wrote %s", dest)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
