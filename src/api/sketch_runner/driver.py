"""
どこで: `api.sketch_runner.driver`。
何を: 1 ティックで「操作状態の読み取り → シミュレーション 1 ステップ → シーン構築 → レンダラへ受け渡し」を行う Tickable。
なぜ: 計算と描画を同一ティック内で固定順に実行し、ティックを跨ぐ同期を不要にするため。
"""

from __future__ import annotations

from typing import Protocol, Sequence

from engine.core.simulation import EpicycleSimulation, SimulationFrame
from engine.render.scene import SceneStyle, build_scene
from engine.render.types import Layer
from engine.ui.controls import ControlState


class LayerSink(Protocol):
    def set_layers(self, layers: Sequence[Layer]) -> None: ...


class SimulationDriver:
    """FrameClock に登録する駆動役。

    pyglet から渡る実経過 `dt` は使わない（位相はシミュレーションの固定 dt で進む）。
    """

    def __init__(
        self,
        simulation: EpicycleSimulation,
        controls: ControlState,
        sink: LayerSink,
        style: SceneStyle | None = None,
    ) -> None:
        self.simulation = simulation
        self.controls = controls
        self.sink = sink
        self.style = style or SceneStyle()
        self.last_frame: SimulationFrame | None = None

    def tick(self, dt: float) -> None:
        frame = self.simulation.advance(self.controls.octaves, self.controls.waveform)
        self.last_frame = frame
        self.sink.set_layers(build_scene(frame, self.style))
