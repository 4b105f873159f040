"""
どこで: `engine.ui.controls`。
何を: 毎ティック「オクターブ数」と「波形名」を供給する操作状態と、キー入力の割り当て。
なぜ: 入力検証（オクターブ範囲のクランプ）は計算コアではなく UI 側の責務だから。

キー割り当て:
- UP / DOWN: オクターブ数 ±1（[min, max] にクランプ）
- TAB: 波形を順送り、1/2/3: 波形を直接選択
- R: セッションをリセット（位相 0・軌跡クリア）
- SPACE: 一時停止 / 再開
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from common.settings import get as get_settings
from waveforms import WaveformKind

logger = logging.getLogger(__name__)

WAVEFORM_CHOICES: tuple[str, ...] = tuple(kind.value for kind in WaveformKind)


def clamp_octaves(value: int, lo: int, hi: int) -> int:
    return max(int(lo), min(int(hi), int(value)))


@dataclass
class ControlState:
    """UI 側の操作状態（オクターブ数と波形名）。"""

    octaves: int = 5
    waveform: str = "square"
    octaves_min: int = 2
    octaves_max: int = 24
    choices: Sequence[str] = field(default=WAVEFORM_CHOICES)

    def __post_init__(self) -> None:
        if self.octaves_min > self.octaves_max:
            raise ValueError(
                f"octaves_min は octaves_max 以下である必要があります: {self.octaves_min} > {self.octaves_max}"
            )
        self.octaves = clamp_octaves(self.octaves, self.octaves_min, self.octaves_max)

    @classmethod
    def from_settings(cls, *, octaves: int | None = None, waveform: str | None = None) -> "ControlState":
        s = get_settings()
        return cls(
            octaves=s.DEFAULT_OCTAVES if octaves is None else octaves,
            waveform=s.DEFAULT_WAVEFORM if waveform is None else waveform,
            octaves_min=s.OCTAVES_MIN,
            octaves_max=s.OCTAVES_MAX,
        )

    def set_octaves(self, value: int) -> None:
        self.octaves = clamp_octaves(value, self.octaves_min, self.octaves_max)

    def increase_octaves(self) -> None:
        self.set_octaves(self.octaves + 1)

    def decrease_octaves(self) -> None:
        self.set_octaves(self.octaves - 1)

    def select_waveform(self, index: int) -> None:
        if 0 <= index < len(self.choices):
            self.waveform = self.choices[index]

    def cycle_waveform(self) -> None:
        try:
            i = list(self.choices).index(self.waveform)
        except ValueError:
            i = -1
        self.waveform = self.choices[(i + 1) % len(self.choices)]

    @property
    def label_text(self) -> str:
        return f"octaves: {self.octaves}   waveform: {self.waveform}"


def make_key_handler(
    controls: ControlState,
    *,
    on_reset: Callable[[], None] | None = None,
    on_toggle_pause: Callable[[], object] | None = None,
) -> Callable[[int, int], None]:
    """pyglet の `on_key_press(symbol, modifiers)` 用ハンドラを作る。"""
    from pyglet.window import key  # 遅延 import（ヘッドレス環境での import を避ける）

    digit_keys = (key._1, key._2, key._3)

    def _on_key(symbol: int, _modifiers: int) -> None:
        if symbol == key.UP:
            controls.increase_octaves()
        elif symbol == key.DOWN:
            controls.decrease_octaves()
        elif symbol == key.TAB:
            controls.cycle_waveform()
        elif symbol in digit_keys:
            controls.select_waveform(digit_keys.index(symbol))
        elif symbol == key.R and on_reset is not None:
            on_reset()
        elif symbol == key.SPACE and on_toggle_pause is not None:
            on_toggle_pause()
        else:
            return
        logger.debug("controls: %s", controls.label_text)

    return _on_key


__all__ = ["ControlState", "WAVEFORM_CHOICES", "clamp_octaves", "make_key_handler"]
