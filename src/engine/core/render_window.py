"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア）と描画コールバック・キー入力コールバック登録を提供。
なぜ: レンダラ/シミュレーション層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(800, 600, bg_color=(0.16, 0.16, 0.16, 1))
    win.add_draw_callback(renderer.draw)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (0.157, 0.157, 0.157, 1.0),
        caption: str = "Epicycles",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 線描画を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(width=width, height=height, caption=caption, config=config)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._key_callbacks: list[Callable[[int, int], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """`on_draw` 中に呼び出す描画関数を登録する（登録順に呼ぶ）。"""
        self._draw_callbacks.append(func)

    def add_key_callback(self, func: Callable[[int, int], None]) -> None:
        """`on_key_press(symbol, modifiers)` で呼び出す関数を登録する。"""
        self._key_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_key_press(self, symbol, modifiers):  # Pyglet 既定のイベント名
        for cb in self._key_callbacks:
            cb(symbol, modifiers)
        # ESC での終了は pyglet 既定の挙動に任せる
        return super().on_key_press(symbol, modifiers)
