"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255, HSB）とスクリーン合成。
なぜ: 色相サイクル円・RGB 合成円・SVG 出力で同一の受理仕様とエラーメッセージを使うため。
"""

from __future__ import annotations

import colorsys
from typing import Sequence

import numpy as np

from common.types import RGBA


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0)
    # まず 0–1 として解釈し、全要素が 0..1 ならそのまま
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (r, g, b, a)
    # 次に 0–255 とみなし、整数丸め → 0–1 へスケール
    if len(seq) == 3:
        fseq[3] = 255.0
    r8, g8, b8, a8 = (max(0, min(255, int(round(x)))) for x in fseq)
    return (r8 / 255.0, g8 / 255.0, b8 / 255.0, a8 / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def to_u8_rgb(value: object) -> tuple[int, int, int]:
    """色を RGB(0–255) へ変換する。"""
    r, g, b, _ = to_u8_rgba(value)
    return (r, g, b)


def to_hex(value: object) -> str:
    """色を "#rrggbb" 形式へ変換する（アルファは捨てる）。"""
    r, g, b = to_u8_rgb(value)
    return f"#{r:02x}{g:02x}{b:02x}"


def hsb_to_rgba(hue: float, saturation: float = 1.0, brightness: float = 1.0, alpha: float = 1.0) -> RGBA:
    """HSB(=HSV) を RGBA(0–1) へ変換する。

    hue は補正しない（[0,1] 外の値もそのまま変換式へ渡す）。結果の各チャネルのみ
    [0,1] に clamp する。hue=1.0 は 0.0 と同じ赤になる。
    """
    r, g, b = colorsys.hsv_to_rgb(float(hue), float(saturation), float(brightness))
    return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(alpha))


def screen_blend(
    base: np.ndarray | Sequence[float], top: np.ndarray | Sequence[float]
) -> np.ndarray:
    """スクリーン合成 `1 - (1 - base) * (1 - top)`（0–1）。

    末尾軸を RGB として扱い、`(..., 3)` の配列同士はブロードキャストする。
    入力は [0,1] に clamp してから合成する。
    """
    b = np.clip(np.asarray(base, dtype=np.float64), 0.0, 1.0)
    t = np.clip(np.asarray(top, dtype=np.float64), 0.0, 1.0)
    return 1.0 - (1.0 - b) * (1.0 - t)


__all__ = [
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_u8_rgb",
    "to_hex",
    "hsb_to_rgba",
    "screen_blend",
]
