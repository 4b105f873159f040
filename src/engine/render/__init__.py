"""
どこで: `engine.render` サブパッケージ。
何を: シミュレーションフレーム → レイヤー変換（scene）と ModernGL による線描画（renderer/line_mesh/shader）。
なぜ: 計算（engine.core）と GPU 転送/描画の責務を分離するため。

注意: `renderer`/`line_mesh`/`shader` は moderngl を必要とするため、ここでは import しない。
"""

from .scene import SceneStyle, build_scene
from .types import Layer

__all__ = ["Layer", "SceneStyle", "build_scene"]
