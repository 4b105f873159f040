"""
どこで: `engine.core.trajectory`。
何を: ペン先位置の有界・順序保存の履歴（新しい点が先頭、容量超過で最古を捨てる FIFO）。
なぜ: 2D の渦巻き軌跡と、インデックス軸に射影した 1D 波形の両方をこの履歴から描くため。

- `push` は先頭挿入、容量 C を超えたら末尾（最古）を捨てる。`deque(maxlen=C)` で O(1)。
- 波形が切り替わったらセッション側が `clear()` する（異なる波形の軌跡を混ぜない）。
- `snapshot()` は現時点の点列を新しい順に保持する、何度でも反復できる有限列を返す。
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

import numpy as np

from common.types import Vec2


class TrajectorySnapshot(Sequence[Vec2]):
    """軌跡のスナップショット（新しい順, index 0 = 最新）。

    生成時に点列を tuple へ 1 回だけ複写する（1 ステップ O(C)）。以後の `push` で
    過去のフレームのスナップショットが変わらないようにするため。反復は遅延評価で、
    何度でもやり直せる。描画用途は 2 つ:

    - `path()`: 各点をそのまま 2D パスとして。
    - `waveform()`: 横軸をサンプル番号（0 = 最新）、縦軸を元の y 座標とした 1D 波形。
    """

    __slots__ = ("_points",)

    def __init__(self, points: Sequence[Vec2]) -> None:
        self._points = tuple(points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index):  # type: ignore[override]
        return self._points[index]

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self._points)

    def path(self) -> Iterator[Vec2]:
        yield from self._points

    def waveform(self) -> Iterator[Vec2]:
        for i, (_x, y) in enumerate(self._points):
            yield (float(i), y)

    def path_array(self) -> np.ndarray:
        """`path()` を `(N, 2) float32` 配列で返す。"""
        if not self._points:
            return np.empty((0, 2), dtype=np.float32)
        return np.asarray(self._points, dtype=np.float32)

    def waveform_array(self) -> np.ndarray:
        """`waveform()` を `(N, 2) float32` 配列で返す。"""
        arr = self.path_array()
        if arr.shape[0] == 0:
            return arr
        out = np.empty_like(arr)
        out[:, 0] = np.arange(arr.shape[0], dtype=np.float32)
        out[:, 1] = arr[:, 1]
        return out

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"TrajectorySnapshot(len={len(self._points)})"


class TrajectoryBuffer:
    """ペン先履歴の有界バッファ。"""

    def __init__(self, capacity: int = 256) -> None:
        cap = int(capacity)
        if cap < 1:
            raise ValueError(f"capacity は 1 以上である必要があります: got {capacity!r}")
        self._points: deque[Vec2] = deque(maxlen=cap)

    @property
    def capacity(self) -> int:
        return int(self._points.maxlen or 0)

    def push(self, point: Vec2) -> None:
        """先頭に挿入。容量を超えた分は末尾（最古）から捨てる。"""
        x, y = point
        self._points.appendleft((float(x), float(y)))

    def clear(self) -> None:
        self._points.clear()

    def snapshot(self) -> TrajectorySnapshot:
        return TrajectorySnapshot(self._points)

    @property
    def newest(self) -> Vec2 | None:
        return self._points[0] if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"TrajectoryBuffer(len={len(self._points)}, capacity={self.capacity})"


__all__ = ["TrajectoryBuffer", "TrajectorySnapshot"]
