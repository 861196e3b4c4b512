from __future__ import annotations

from engine.core.path import Path, Rect, path_from_points

from .params import CheckerboxParams
from .registry import shape


def filled_cells(rows: int, columns: int) -> list[tuple[int, int]]:
    """塗るセル `(row, col)` の一覧（`row + col` が偶数）。行優先の描画順。"""
    return [(r, c) for r in range(rows) for c in range(columns) if (r + c) % 2 == 0]


@shape
def checkerbox(params: CheckerboxParams, rect: Rect) -> Path:
    """rows × columns の市松模様。塗るセルごとに閉じた四角形サブパスを 1 つ追加する。"""
    params.validate()
    rows = int(params.rows)
    columns = int(params.columns)
    cell_w = rect.width / columns
    cell_h = rect.height / rows

    segments = []
    for row, col in filled_cells(rows, columns):
        x0 = rect.min_x + col * cell_w
        y0 = rect.min_y + row * cell_h
        x1 = x0 + cell_w
        y1 = y0 + cell_h
        cell = path_from_points([(x0, y0), (x1, y0), (x1, y1), (x0, y1), (x0, y0)])
        segments.extend(cell.segments)
    return Path(tuple(segments))
