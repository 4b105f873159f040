"""
どこで: `engine.core` の更新インターフェース。
何を: 1 フレーム更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: シミュレーション駆動・レンダラ・HUD を同じ順序制御で扱うため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。

    `dt` は実経過秒。シミュレーションの位相は固定 dt で進むため、使わない実装もある。
    """

    def tick(self, dt: float) -> None: ...
