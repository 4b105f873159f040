"""
どこで: `api` 入口（高レベル公開 API）。
何を: 波形解決・連鎖構築・半径線導出・軌跡バッファ・位相ステップ・セッション・ランナーを再輸出。
なぜ: 描画/UI 側の協調者が単一名前空間から計算コアを使えるようにするため。

Usage:
    from api import resolve, build_epicycles, derive_radials, TrajectoryBuffer, step_time

    wf = resolve("square")
    epis = build_epicycles(0.0, 5, wf)
    tip = derive_radials(0.0, epis)[-1].p2
"""

from engine.core.epicycle import Epicycle, build_epicycles, next_center
from engine.core.radial import RadialSegment, derive_radials, pencil_tip
from engine.core.simulation import EpicycleSimulation, SimulationFrame
from engine.core.timestep import TWO_PI, step_time
from engine.core.trajectory import TrajectoryBuffer, TrajectorySnapshot
from waveforms import Wave, WaveformKind, list_waveforms, resolve

from .sketch import run_epicycles
from .sketch import run_epicycles as run

__all__ = [
    # 波形
    "Wave",
    "WaveformKind",
    "resolve",
    "list_waveforms",
    # 計算コア
    "Epicycle",
    "build_epicycles",
    "next_center",
    "RadialSegment",
    "derive_radials",
    "pencil_tip",
    "TrajectoryBuffer",
    "TrajectorySnapshot",
    "TWO_PI",
    "step_time",
    # セッション
    "EpicycleSimulation",
    "SimulationFrame",
    # 実行
    "run_epicycles",
    "run",
]

__version__ = "2025.10"
