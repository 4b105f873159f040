"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ウィンドウサイズ解決・投影行列の構築。
なぜ: `api.sketch` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from util.constants import DEFAULT_WINDOW_SIZE


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None = None, *, default: int = 60) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（数値化できない/<=0 は既定へ）。
    - それ以外は設定 `window.fps`、無ければ既定値。
    """
    if requested_fps is not None:
        try:
            return max(1, int(requested_fps))
        except (TypeError, ValueError):
            return max(1, int(default))
    window_cfg = cfg.get("window", {}) if isinstance(cfg, Mapping) else {}
    if not isinstance(window_cfg, Mapping):
        return max(1, int(default))
    try:
        return max(1, int(window_cfg.get("fps", default)))
    except (TypeError, ValueError):
        return max(1, int(default))


def resolve_window_size(
    window_size: tuple[int, int] | None, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する。

    - 明示指定 `(width, height)` を優先（正であることを検証）。
    - それ以外は設定 `window.width/height`、無ければ 800x600。
    - 不正値は `ValueError`。
    """
    if window_size is None:
        window_cfg = cfg.get("window", {}) if isinstance(cfg, Mapping) else {}
        if not isinstance(window_cfg, Mapping):
            window_cfg = {}
        window_size = (
            window_cfg.get("width", DEFAULT_WINDOW_SIZE[0]),
            window_cfg.get("height", DEFAULT_WINDOW_SIZE[1]),
        )
    try:
        w, h = int(window_size[0]), int(window_size[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"invalid window_size: {window_size!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"window_size must be positive, got: {(w, h)}")
    return w, h


def build_projection(width: float, height: float) -> "np.ndarray":
    """左上原点・y 下向きのピクセル座標を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    proj = np.array(
        [
            [2 / width, 0, 0, -1],
            [0, -2 / height, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


__all__ = ["resolve_fps", "resolve_window_size", "build_projection"]
