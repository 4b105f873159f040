"""
どこで: `engine.render.scene`。
何を: `SimulationFrame` を色付きレイヤー列（円・半径線・軌跡・射影線・波形）へ変換する純関数。
なぜ: GL に触れずに「何をどこに描くか」を決め、テスト可能にするため。

座標系:
- 画面左上が (0, 0)、y 下向きのピクセル座標（投影行列がこれをクリップ空間へ写す）。
- エピサイクル系の原点は `(width/4, height/2)`。
- 波形プロットは原点から `WF_TRANSLATE` だけ右にずらして描く（横軸 = サンプル番号）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import numpy as np

from common.types import RGBA, Vec2
from engine.core.geometry import Geometry
from engine.core.simulation import SimulationFrame
from util.color import normalize_color
from util.constants import CIRCLE_SEGMENTS, WF_TRANSLATE

from .types import Layer

logger = logging.getLogger(__name__)


def _default_colors() -> dict[str, RGBA]:
    return {
        "circles": normalize_color("#689d6aaa"),
        "radials": normalize_color("#d79921ff"),
        "trajectory": normalize_color("#d5c4a1aa"),
        "projection": normalize_color("#d65d0eff"),
        "waveform": normalize_color("#98971aff"),
    }


@dataclass(frozen=True)
class SceneStyle:
    """レイヤー色と配置。"""

    width: int = 800
    height: int = 600
    wf_translate: float = WF_TRANSLATE
    circle_segments: int = CIRCLE_SEGMENTS
    marker_radius: float = 2.0
    colors: dict[str, RGBA] = field(default_factory=_default_colors)

    @property
    def origin(self) -> Vec2:
        return (self.width / 4.0, self.height / 2.0)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any] | None, *, width: int, height: int) -> "SceneStyle":
        """`configs/default.yaml` の `scene` セクションから生成する。

        - `scene.colors.<layer>`: Hex 文字列または RGBA。
        - 不正な色は ValueError（設定ミスは起動時に知らせる）。
        """
        scene_cfg = cfg.get("scene", {}) if isinstance(cfg, Mapping) else {}
        if not isinstance(scene_cfg, Mapping):
            scene_cfg = {}
        colors = _default_colors()
        raw_colors = scene_cfg.get("colors", {})
        if isinstance(raw_colors, Mapping):
            for name, value in raw_colors.items():
                if name not in colors:
                    logger.warning("unknown scene layer color %r ignored", name)
                    continue
                colors[name] = normalize_color(value)
        return cls(
            width=int(width),
            height=int(height),
            wf_translate=float(scene_cfg.get("wf_translate", WF_TRANSLATE)),
            circle_segments=max(3, int(scene_cfg.get("circle_segments", CIRCLE_SEGMENTS))),
            marker_radius=float(scene_cfg.get("marker_radius", 2.0)),
            colors=colors,
        )


def circle_polyline(center: Vec2, radius: float, segments: int = CIRCLE_SEGMENTS) -> np.ndarray:
    """閉じた円ポリライン `(segments + 1, 2)`。半径は絶対値を使う（負の振幅は位相反転）。"""
    theta = np.linspace(0.0, 2.0 * np.pi, int(segments) + 1, dtype=np.float64)
    r = abs(float(radius))
    xy = np.empty((theta.shape[0], 2), dtype=np.float32)
    xy[:, 0] = center[0] + r * np.cos(theta)
    xy[:, 1] = center[1] + r * np.sin(theta)
    return xy


def build_scene(frame: SimulationFrame, style: SceneStyle | None = None) -> list[Layer]:
    """1 フレーム分のレイヤー列を描画順に返す（空のレイヤーは含めない）。"""
    st = style or SceneStyle()
    ox, oy = st.origin
    layers: list[Layer] = []

    def _add(name: str, lines: list[np.ndarray]) -> None:
        geom = Geometry.from_lines(lines)
        if geom.is_empty:
            return
        layers.append(Layer(geometry=geom.translate(ox, oy), color=st.colors[name], name=name))

    _add(
        "circles",
        [circle_polyline(e.center, e.wave.amplitude, st.circle_segments) for e in frame.epicycles],
    )
    _add("radials", [np.array([r.p1, r.p2], dtype=np.float32) for r in frame.radials])
    _add("trajectory", [frame.trajectory.path_array()])

    if frame.tip is not None:
        tx, ty = frame.tip
        marker = (st.wf_translate, ty)
        _add(
            "projection",
            [
                np.array([[tx, ty], marker], dtype=np.float32),
                circle_polyline(marker, st.marker_radius, 16),
            ],
        )

    wave = frame.trajectory.waveform_array()
    if wave.shape[0] > 0:
        wave[:, 0] += st.wf_translate
    _add("waveform", [wave])
    return layers


__all__ = ["SceneStyle", "build_scene", "circle_polyline"]
