"""
ポリライン集合 `Geometry`（描画層への受け渡し型）

エピサイクル・半径線・軌跡・波形プロットは、いずれも最終的に「複数本のポリライン」として
レンダラへ渡される。本モジュールはその唯一の表現 `Geometry` を提供する。

データモデル（不変条件）:
- `coords: float32 ndarray (N, 3)` — 全頂点を 1 本の連続メモリで保持（行は XYZ、Z は常に 0 でよい）。
- `offsets: int32 ndarray (M+1,)` — 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の線は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- 2D 入力は Z=0 で補う。

例:

    # 円 2 本（各 65 点）と半径線 2 本（各 2 点）
    #   offsets = [0, 65, 130, 132, 134]

補足:
- 空ジオメトリは `coords.shape==(0,3)`, `offsets==[0]`。
- 変換はすべて純関数で、新しいインスタンスを返す。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[NumberLike] | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float32)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 3:
        raise ValueError("coords は形状 (N, 3) の配列である必要があります。")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1 or offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む 1 次元配列である必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")

    return coords_arr, offsets_arr


class Geometry:
    """ポリライン集合。

    フィールド:
    - `coords (N,3) float32`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各ポリラインの開始 index（末尾は N）。
    """

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        self.coords, self.offsets = _normalize_geometry_input(coords, offsets)

    # ── ファクトリ ───────────────────
    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """線分集合を統一表現に正規化して `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は座標列。`(K, 2)` は Z=0 を補完、`(K, 3)` はそのまま。
            点を 1 つも持たない線は捨てる。

        Raises
        ------
        ValueError
            形状が `(K,2)/(K,3)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float32)
            if arr.size == 0:
                continue
            if arr.ndim == 1:
                arr = arr.reshape(1, -1)
            if arr.ndim != 2 or arr.shape[1] not in (2, 3):
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            if arr.shape[1] == 2:
                arr = np.hstack([arr, np.zeros((arr.shape[0], 1), dtype=np.float32)])
            np_lines.append(arr)

        if not np_lines:
            return cls(np.empty((0, 3), dtype=np.float32), np.array([0], dtype=np.int32))

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([arr.shape[0] for arr in np_lines])
        return cls(np.concatenate(np_lines, axis=0), offsets)

    # ── 基本操作（すべて純粋） ────────
    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Geometry":
        """平行移動（純関数）。空ジオメトリでもコピーを返す。"""
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        vec = np.array([dx, dy, dz], dtype=np.float32)
        return Geometry(self.coords + vec, self.offsets.copy())

    def __len__(self) -> int:
        """ポリライン本数（`M`）。"""
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["Geometry"]
