"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を登録順に呼ぶ FrameClock。フレーム計数と一時停止を持つ。
なぜ: 1 ティック内で「計算 → 描画準備」の順序を常に同じにするため。

一時停止中は tickable を呼ばない（位相も軌跡も進まない）。`frame_count` は実際に
tickable を回したティック数で、停止中のティックは数えない。
"""

from __future__ import annotations

import logging
from typing import Sequence

from .tickable import Tickable

logger = logging.getLogger(__name__)


class FrameClock:
    """登録された Tickable を固定順序で実行する。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self.frame_count = 0
        self.paused = False

    def toggle_pause(self) -> bool:
        """一時停止を切り替え、切り替え後の状態を返す。"""
        self.paused = not self.paused
        logger.debug("frame clock %s at frame %d", "paused" if self.paused else "resumed", self.frame_count)
        return self.paused

    # pyglet.clock.schedule_interval から呼ばせる（dt は実経過秒）
    def tick(self, dt: float = 0.0) -> None:
        if self.paused:
            return
        for t in self._tickables:
            t.tick(dt)
        self.frame_count += 1
