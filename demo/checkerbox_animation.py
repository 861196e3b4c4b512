"""
Animator + FrameClock でチェッカーボードの行/列数をアニメーションさせ、コマ送り SVG を書き出す。

使い方:
    python demo/checkerbox_animation.py --frames 90 --fps 30

ポイント:
    - 一定間隔でランダムな行/列数（3..8）を `Animator.request` する（タップの代わり）。
    - `FrameClock.tick(dt)` でホストのリフレッシュを模擬する。
    - 行/列は補間中も round-half-up で整数に丸められる。
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from api import (  # type: ignore  # after sys.path tweak
    Animator,
    CheckerboxParams,
    FrameClock,
    Rect,
    SVGParams,
    compute_path,
    to_svg_string,
)
from common.logging import setup_default_logging

logger = logging.getLogger("demo.checkerbox_animation")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="checkerbox のアニメーションをコマ送り SVG で保存")
    ap.add_argument("--out", type=Path, default=ROOT / "build" / "checkerbox")
    ap.add_argument("--frames", type=int, default=90)
    ap.add_argument("--fps", type=float, default=30.0)
    ap.add_argument("--every", type=int, default=30, help="何フレームごとに新しい目標を出すか")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args(argv)

    setup_default_logging()
    args.out.mkdir(parents=True, exist_ok=True)
    rng = np.random.default_rng(args.seed)
    rect = Rect(0.0, 0.0, 300.0, 300.0)
    svg_params = SVGParams(fill="#222222", stroke=None)

    anim = Animator(CheckerboxParams(4, 4), duration=0.6, easing="ease_in_out")
    clock = FrameClock([anim])
    dt = 1.0 / args.fps

    for frame in range(args.frames):
        if frame % args.every == 0:
            rows, columns = (int(v) for v in rng.integers(3, 9, size=2))
            anim.request(CheckerboxParams(rows, columns))
            logger.info("frame %d: target %dx%d", frame, rows, columns)
        clock.tick(dt)
        path = compute_path("checkerbox", anim.value, rect)
        (args.out / f"frame_{frame:04d}.svg").write_text(
            to_svg_string([path], svg_params), encoding="utf-8"
        )
    logger.info("done: %d frames -> %s", args.frames, args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
