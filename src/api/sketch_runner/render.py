"""
どこで: `api.sketch_runner.render`
何を: RenderWindow/ModernGL/LineRenderer の初期化と背景/線色の決定。
なぜ: `api.sketch` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

from typing import Any, Mapping

import moderngl


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    cfg: Mapping[str, Any],
    projection_matrix,
):
    """ウィンドウ/ModernGL/LineRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, line_renderer)
    """
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import LineRenderer
    from util.color import normalize_color

    window_cfg = cfg.get("window", {}) if isinstance(cfg, Mapping) else {}
    if not isinstance(window_cfg, Mapping):
        window_cfg = {}
    bg_rgba = normalize_color(window_cfg.get("background_color", "#282828"))
    caption = str(window_cfg.get("caption", "Epicycles"))
    rendering_window = RenderWindow(window_width, window_height, bg_color=bg_rgba, caption=caption)

    # ModernGL コンテキスト
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    line_renderer = LineRenderer(
        mgl_context=mgl_ctx,
        projection_matrix=projection_matrix,
        line_color=normalize_color(window_cfg.get("line_color", "#ebdbb2")),
    )
    return rendering_window, mgl_ctx, line_renderer
