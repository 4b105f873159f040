"""
どこで: `engine.ui.label`。
何を: 操作状態（オクターブ数・波形名）を画面左下に pyglet Label で描く HUD。
"""

from __future__ import annotations

import pyglet

from util.color import to_u8_rgba

from .controls import ControlState


class StatusLabel:
    """`ControlState.label_text` を毎フレーム反映する 1 行ラベル。"""

    def __init__(self, controls: ControlState, *, color: object = "#ebdbb2", font_size: int = 16):
        self.controls = controls
        self._label = pyglet.text.Label(
            controls.label_text,
            x=20,
            y=22,
            font_size=font_size,
            color=to_u8_rgba(color),
        )

    def tick(self, dt: float) -> None:
        text = self.controls.label_text
        if self._label.text != text:
            self._label.text = text

    def draw(self) -> None:
        # 一時停止中は tick が来ないため、描画時にも同期する
        self.tick(0.0)
        self._label.draw()
