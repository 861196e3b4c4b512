"""
平坦化済みポリライン集合 `Geometry`

本モジュールは、`engine.core.path.Path`（移動/直線/円弧/楕円のセグメント列）を
ラスタライザや書き出し側が扱いやすい「点列の集合」に落とした表現 `Geometry` を提供する。
生成（shapes）→ パス（Path）→ 平坦化（Geometry）→ 出力（export/ホスト UI）の順で流れる。

データモデル（不変条件）:
- `coords: float64 ndarray (N, 2)`: 全頂点を 1 本の連続メモリで保持（行は XY、y は下向き）。
- `offsets: int32 ndarray (M+1,)`: 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の点列は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- 1 本のポリラインは Path の 1 サブパスに対応する（描画順も保持）。

API 方針:
- 形状の変換は平坦化前の `Path.applying` で行い、ここでは点列の参照だけを提供。
- 生成後は不変として扱い、参照は読み取り専用ビューで返す。

直感図（複数線の格納）:

    # 2 本のポリライン（線0は3点、線1は2点）
    # coords (N=5): [[0,0], [1,0], [1,1], [2,2], [3,2]]
    # offsets (M+1=3): [0, 3, 5]
    #   線0 = coords[0:3]
    #   線1 = coords[3:5]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`（線本数 M=0）。
- 単頂点の線も許容（MoveTo だけのサブパスなど）。
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np


NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.asarray(coords, dtype=np.float64)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError("coords は形状 (N, 2) の配列である必要があります。")
    if not coords_arr.flags.c_contiguous:
        coords_arr = np.ascontiguousarray(coords_arr, dtype=np.float64)

    offsets_arr = np.asarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1:
        raise ValueError("offsets は 1 次元配列である必要があります。")
    if offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")
    if not offsets_arr.flags.c_contiguous:
        offsets_arr = np.ascontiguousarray(offsets_arr, dtype=np.int32)

    return coords_arr, offsets_arr


class Geometry:
    """平坦化済み 2D ポリライン集合。

    フィールド:
    - `coords (N,2) float64`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各ポリラインの開始 index（末尾は N）。

    生成時に dtype/形状を検証し、正規化済み状態だけを許容する。
    """

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        norm_coords, norm_offsets = _normalize_geometry_input(coords, offsets)
        self.coords = norm_coords
        self.offsets = norm_offsets

    # ── ファクトリ ───────────────────
    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """点列の集合を統一表現に正規化して `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は形状 `(K, 2)` の座標列。`list`/`tuple`/`ndarray` いずれも可。

        Raises
        ------
        ValueError
            形状が `(K, 2)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float64)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            coords = np.empty((0, 2), dtype=np.float64)
            offsets = np.array([0], dtype=np.int32)
            return cls(coords, offsets)

        offsets = np.empty(len(np_lines) + 1, dtype=np.int32)
        offsets[0] = 0
        for i, arr in enumerate(np_lines, start=1):
            offsets[i] = offsets[i - 1] + arr.shape[0]
        coords = np.concatenate(np_lines, axis=0)
        return cls(coords, offsets)

    # ── 基本操作（すべて純粋） ────────
    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """内部配列 `(coords, offsets)` を返す。

        `copy=False` は読み取り専用ビュー（`setflags(write=False)`）を返す。
        書き込みが必要な場合は `copy=True` を指定する。
        """
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    def lines(self) -> Iterator[np.ndarray]:
        """各ポリラインの点列（読み取り専用ビュー）を描画順に返す。"""
        coords, offsets = self.as_arrays()
        for i in range(len(self)):
            yield coords[offsets[i] : offsets[i + 1]]

    def is_closed(self, index: int, *, atol: float = 1e-9) -> bool:
        """index 本目のポリラインが始点に戻って閉じているか。"""
        s = int(self.offsets[index])
        e = int(self.offsets[index + 1])
        if e - s < 3:
            return False
        return bool(np.allclose(self.coords[s], self.coords[e - 1], atol=atol))

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def __len__(self) -> int:
        """ポリライン本数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1) if self.offsets.size > 0 else 0

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["Geometry", "LineLike"]
