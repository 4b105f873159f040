"""
どこで: `api.sketch`（実行ランナー）。
何を: エピサイクルのシミュレーションを pyglet のクロックで駆動し、ModernGL で線描画・キー操作・HUD を統合。
なぜ: 計算コア（engine.core）・描画（engine.render）・操作（engine.ui）を 1 か所で結線するため。

主エントリポイント:
- `run_epicycles(*, octaves=None, waveform=None, window_size=None, fps=None, dt=None, capacity=None, scale=None, init_only=False)`

実行フロー（概要）:
1) 設定解決: YAML（`util.utils.load_config()`）と環境変数（`common.settings`）から
   FPS・ウィンドウサイズ・色・dt・軌跡容量・スケールを確定。
2) 計算側: `ControlState`（オクターブ数/波形名）と `EpicycleSimulation`（位相/軌跡）を生成。
3) `init_only=True` ならここで終了（pyglet/moderngl を import しない）。
4) ウィンドウ/GL: `RenderWindow` と `LineRenderer` を生成し、投影行列を設定。
5) フレーム駆動: `FrameClock` が毎ティック `SimulationDriver` → `StatusLabel` の順に `tick` を呼ぶ。
   `pyglet.clock.schedule_interval` で 1/fps ごと。
6) `on_draw` でレイヤーとラベルを描画。ESC でウィンドウを閉じ、GL リソースを解放。

スレッド:
- すべて UI スレッド上で同期実行する（1 ティック = 計算 1 回 + 描画 1 回）。位相と軌跡は
  `EpicycleSimulation` だけが所有し、同ティック内で描画側が読むためロックは不要。

注意:
- 位相の増分は固定 dt で、実経過時間に依らない。見かけの速度は FPS に比例する。
"""

from __future__ import annotations

import logging

from engine.core.simulation import EpicycleSimulation
from engine.render.scene import SceneStyle
from engine.ui.controls import ControlState

from .sketch_runner.utils import build_projection, resolve_fps, resolve_window_size

logger = logging.getLogger(__name__)


def run_epicycles(
    *,
    octaves: int | None = None,
    waveform: str | None = None,
    window_size: tuple[int, int] | None = None,
    fps: int | None = None,
    dt: float | None = None,
    capacity: int | None = None,
    scale: float | None = None,
    init_only: bool = False,
) -> None:
    """エピサイクルのアニメーションを実行する。

    Parameters
    ----------
    octaves : int | None
        初期オクターブ数。None で設定値。UI の範囲 [min, max] にクランプ。
    waveform : str | None
        初期波形名（"square"/"sawtooth"/"harmonic_overtone"）。未知名は矩形波として扱う。
    window_size : tuple[int, int] | None
        ウィンドウ [px]。None で設定ファイル、無ければ 800x600。
    fps : int | None
        描画更新レート。None で設定ファイル、無ければ 60。
    dt : float | None
        1 ティックあたりの位相増分。None で設定値（既定 0.025）。
    capacity : int | None
        軌跡バッファの容量。None で設定値（既定 256）。
    scale : float | None
        振幅スケール A。None で設定値（既定 75）。
    init_only : bool, default False
        True で重い依存（pyglet/moderngl）の初期化をスキップして終了する。
    """
    from util.utils import load_config

    cfg = load_config()
    fps = resolve_fps(fps, cfg)
    width, height = resolve_window_size(window_size, cfg)

    controls = ControlState.from_settings(octaves=octaves, waveform=waveform)
    simulation = EpicycleSimulation(dt=dt, capacity=capacity, scale=scale)
    style = SceneStyle.from_config(cfg, width=width, height=height)
    logger.info(
        "epicycles: %dx%d @%dfps, dt=%.4f, capacity=%d, octaves=%d, waveform=%s",
        width,
        height,
        fps,
        simulation.dt,
        simulation.trajectory.capacity,
        controls.octaves,
        controls.waveform,
    )

    if init_only:
        return None

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.frame_clock import FrameClock
    from engine.ui.controls import make_key_handler
    from engine.ui.label import StatusLabel

    from .sketch_runner.driver import SimulationDriver
    from .sketch_runner.render import create_window_and_renderer

    rendering_window, _mgl_ctx, line_renderer = create_window_and_renderer(
        width,
        height,
        cfg=cfg,
        projection_matrix=build_projection(width, height),
    )

    driver = SimulationDriver(simulation, controls, line_renderer, style)
    label = StatusLabel(controls)

    rendering_window.add_draw_callback(line_renderer.draw)
    rendering_window.add_draw_callback(label.draw)

    frame_clock = FrameClock([driver, label])
    rendering_window.add_key_callback(
        make_key_handler(controls, on_reset=simulation.reset, on_toggle_pause=frame_clock.toggle_pause)
    )
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    @rendering_window.event
    def on_close() -> None:  # noqa: ANN202
        pyglet.clock.unschedule(frame_clock.tick)
        line_renderer.release()
        logger.info("closed after %d frames", frame_clock.frame_count)

    pyglet.app.run()
    return None


__all__ = ["run_epicycles"]
