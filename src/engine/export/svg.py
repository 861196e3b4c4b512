"""
どこで: `engine.export.svg`。
何を: Path（またはパスと色の組）の列を平坦化し、SVG テキストとして書き出す。
なぜ: 描画環境を持たない利用者でも、形状の見た目を確認/保存できるようにするため。

仕様:
- 1 レイヤ = 1 `<path>`。レイヤ順は描画順（後のレイヤが上）。
- 各ポリラインは `M x y L ...` で出力し、始点へ戻って閉じていれば `Z` を付ける。
- 色は `util.color.normalize_color` の受理形式。レイヤ色は `fill`/`stroke` のうち
  `layer_color_target` で指定した側に適用する。
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import IO, Iterable, Literal, Sequence, Union

from engine.core.geometry import Geometry
from engine.core.path import Path
from util.color import normalize_color, to_hex

logger = logging.getLogger(__name__)

ColorLike = Union[str, Sequence[float]]
Layer = Union[Path, tuple[Path, ColorLike]]


@dataclass(frozen=True)
class SVGParams:
    """SVG 出力パラメータ。

    属性:
        width, height: キャンバスサイズ（viewBox も同じ）。
        stroke: 既定の線色。None で線なし。
        stroke_width: 線幅。
        fill: 既定の塗り色。None で塗りなし。
        fill_rule: "nonzero" / "evenodd"（花形は evenodd）。
        layer_color_target: レイヤ色を適用する側（"stroke" / "fill"）。
        background: 背景色。None で透明。
        decimals: 座標の丸め桁数。
        arc_segments, ellipse_segments: 平坦化の分割数（None で設定値）。
    """

    width: float = 300.0
    height: float = 300.0
    stroke: ColorLike | None = "#000000"
    stroke_width: float = 1.0
    fill: ColorLike | None = None
    fill_rule: Literal["nonzero", "evenodd"] = "nonzero"
    layer_color_target: Literal["stroke", "fill"] = "stroke"
    background: ColorLike | None = None
    decimals: int = 3
    arc_segments: int | None = None
    ellipse_segments: int | None = None


def _fmt(v: float, decimals: int) -> str:
    s = f"{round(float(v), decimals):.{decimals}f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _paint(color: ColorLike | None) -> tuple[str, float]:
    if color is None:
        return "none", 1.0
    rgba = normalize_color(color)
    return to_hex(rgba), rgba[3]


def path_data(geometry: Geometry, decimals: int = 3) -> str:
    """Geometry を SVG の `d` 属性文字列にする。"""
    parts: list[str] = []
    for i, line in enumerate(geometry.lines()):
        if line.shape[0] == 0:
            continue
        closed = geometry.is_closed(i)
        pts = line[:-1] if closed else line
        cmds = [f"M{_fmt(pts[0, 0], decimals)} {_fmt(pts[0, 1], decimals)}"]
        cmds.extend(f"L{_fmt(x, decimals)} {_fmt(y, decimals)}" for x, y in pts[1:])
        if closed:
            cmds.append("Z")
        parts.append(" ".join(cmds))
    return " ".join(parts)


class SVGWriter:
    """SVG 書き出しクラス（最小実装）。"""

    def write(self, layers: Iterable[Layer], params: SVGParams, fp: IO[str]) -> None:
        """レイヤ列を SVG 文書として `fp` に書き出す。"""
        w = _fmt(params.width, params.decimals)
        h = _fmt(params.height, params.decimals)
        fp.write(
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
            f'viewBox="0 0 {w} {h}">\n'
        )
        if params.background is not None:
            bg, bg_alpha = _paint(params.background)
            fp.write(f'  <rect width="100%" height="100%" fill="{bg}" fill-opacity="{bg_alpha:g}"/>\n')

        n_layers = 0
        for layer in layers:
            if isinstance(layer, Path):
                path, color = layer, None
            else:
                path, color = layer
            geometry = path.flatten(params.arc_segments, params.ellipse_segments)
            d = path_data(geometry, params.decimals)
            if not d:
                continue

            stroke = params.stroke
            fill = params.fill
            if color is not None:
                if params.layer_color_target == "fill":
                    fill = color
                else:
                    stroke = color
            stroke_hex, stroke_alpha = _paint(stroke)
            fill_hex, fill_alpha = _paint(fill)

            attrs = [f'd="{d}"', f'fill="{fill_hex}"', f'stroke="{stroke_hex}"']
            if fill is not None:
                attrs.append(f'fill-rule="{params.fill_rule}"')
                if fill_alpha < 1.0:
                    attrs.append(f'fill-opacity="{fill_alpha:g}"')
            if stroke is not None:
                attrs.append(f'stroke-width="{_fmt(params.stroke_width, params.decimals)}"')
                if stroke_alpha < 1.0:
                    attrs.append(f'stroke-opacity="{stroke_alpha:g}"')
            fp.write(f"  <path {' '.join(attrs)}/>\n")
            n_layers += 1

        fp.write("</svg>\n")
        logger.debug("svg written: %d layers", n_layers)


def to_svg_string(layers: Iterable[Layer], params: SVGParams | None = None) -> str:
    """`SVGWriter.write` の結果を文字列で返す糖衣。"""
    buf = io.StringIO()
    SVGWriter().write(layers, params or SVGParams(), buf)
    return buf.getvalue()


__all__ = ["SVGParams", "SVGWriter", "path_data", "to_svg_string"]
