"""
どこで: `engine.core.simulation`（セッション状態）。
何を: ステップを跨いで残る唯一の状態（位相 `time` と `TrajectoryBuffer`）を所有し、1 ステップを進める。
なぜ: 大域変数を使わず、波形切替時のリセットとステップ順序を一箇所で保証するため。

1 ステップの順序（固定）:
1) 波形名が前ステップと異なれば軌跡をクリア
2) 波形名を解決（未知名は矩形波）
3) 現在の `time` で連鎖を構築 → 半径線を導出
4) ペン先を軌跡へ push
5) フレームを確定（描画側はこれだけを読む）
6) `time` を dt だけ進める
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from common.settings import get as get_settings
from common.types import Vec2
from waveforms import resolve

from .epicycle import Epicycle, build_epicycles
from .radial import RadialSegment, derive_radials, pencil_tip
from .timestep import step_time
from .trajectory import TrajectoryBuffer, TrajectorySnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationFrame:
    """1 ステップ分の計算結果（描画側への受け渡し専用, 読み取りのみ）。"""

    time: float
    octaves: int
    waveform: str
    epicycles: tuple[Epicycle, ...]
    radials: tuple[RadialSegment, ...]
    tip: Vec2 | None
    trajectory: TrajectorySnapshot


class EpicycleSimulation:
    """位相と軌跡を所有するシミュレーションセッション。

    引数:
        dt: 1 ステップの位相増分。None で設定値（`EPC_DT`）。
        capacity: 軌跡の容量。None で設定値（`EPC_TRAJECTORY_CAPACITY`）。
        scale: 振幅スケール A。None で設定値（`EPC_SCALE`）。
    """

    def __init__(
        self,
        *,
        dt: float | None = None,
        capacity: int | None = None,
        scale: float | None = None,
    ) -> None:
        settings = get_settings()
        self.dt = float(settings.DT if dt is None else dt)
        self.scale = float(settings.SCALE if scale is None else scale)
        self.time = 0.0
        self.trajectory = TrajectoryBuffer(settings.TRAJECTORY_CAPACITY if capacity is None else capacity)
        self._last_waveform: str | None = None
        self._debug = bool(settings.DEBUG_SIMULATION)

    @property
    def last_waveform(self) -> str | None:
        return self._last_waveform

    def reset(self) -> None:
        """セッション再開: 位相を 0 に戻し、軌跡を空にする。"""
        self.time = 0.0
        self.trajectory.clear()
        self._last_waveform = None
        logger.debug("simulation reset")

    def advance(self, octaves: int, waveform: str) -> SimulationFrame:
        """1 ステップ進め、そのステップのフレームを返す。"""
        if self._last_waveform is not None and waveform != self._last_waveform:
            logger.debug(
                "waveform changed %r -> %r; clearing trajectory (%d points)",
                self._last_waveform,
                waveform,
                len(self.trajectory),
            )
            self.trajectory.clear()
        self._last_waveform = waveform

        t = self.time
        wf = resolve(waveform, scale=self.scale)
        epis = build_epicycles(t, octaves, wf)
        radials = derive_radials(t, epis)
        tip = pencil_tip(radials)
        if tip is not None:
            self.trajectory.push(tip)

        frame = SimulationFrame(
            time=t,
            octaves=len(epis),
            waveform=waveform,
            epicycles=tuple(epis),
            radials=tuple(radials),
            tip=tip,
            trajectory=self.trajectory.snapshot(),
        )
        if self._debug:
            logger.debug("t=%.4f octaves=%d tip=%s", t, len(epis), tip)

        self.time = step_time(t, self.dt)
        return frame


__all__ = ["EpicycleSimulation", "SimulationFrame"]
