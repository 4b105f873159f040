"""
どこで: `engine.render` の高レベル描画。
何を: フレームごとのレイヤー列を受け取り、`Geometry` を頂点/インデックスへ変換して ModernGL で線描画。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、描画処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import moderngl as mgl
import numpy as np

from common.types import RGBA
from engine.core.geometry import Geometry
from util.color import normalize_color
from util.constants import PRIMITIVE_RESTART_INDEX

from .line_mesh import LineMesh
from .shader import Shader
from .types import Layer

logger = logging.getLogger(__name__)


class LineRenderer:
    """レイヤー列を LINE_STRIP（primitive restart 区切り）で順描画する。

    `set_layers()` で次に描くレイヤーを差し替え、`draw()`（on_draw 内）で描画する。
    """

    def __init__(
        self,
        mgl_context: Any,
        projection_matrix: np.ndarray,
        line_color: RGBA = (1.0, 1.0, 1.0, 1.0),
    ):
        self.ctx = mgl_context
        self.line_program = Shader.create_shader(mgl_context)
        self.line_program["projection"].write(projection_matrix.tobytes())
        self._base_line_color: RGBA = normalize_color(line_color)
        self.line_program["color"].value = self._base_line_color
        self.gpu = LineMesh(
            ctx=mgl_context,
            program=self.line_program,
            primitive_restart_index=PRIMITIVE_RESTART_INDEX,
        )
        self._layers: tuple[Layer, ...] = ()
        self._last_vertex_count: int = 0
        self._last_line_count: int = 0

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def set_layers(self, layers: Sequence[Layer]) -> None:
        self._layers = tuple(layers)

    def draw(self) -> None:
        """保持しているレイヤーを順に描画し、頂点/ライン数を更新する。"""
        total_vertices = 0
        total_lines = 0
        for layer in self._layers:
            if layer.geometry.is_empty:
                continue
            self.set_line_color(layer.color if layer.color is not None else self._base_line_color)
            self._upload_geometry(layer.geometry)
            if self.gpu.index_count > 0:
                self.gpu.vao.render(mgl.LINE_STRIP, self.gpu.index_count)
                total_vertices += layer.geometry.n_vertices
                total_lines += layer.geometry.n_lines
        self._last_vertex_count = total_vertices
        self._last_line_count = total_lines

    def set_line_color(self, rgba: Sequence[float]) -> None:
        """線色（RGBA 0–1）を即時更新する。不正値は無視（描画を止めない）。"""
        try:
            self.line_program["color"].value = normalize_color(tuple(rgba))
        except (ValueError, TypeError, KeyError):
            logger.debug("ignoring invalid line color %r", rgba)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()

    def get_last_counts(self) -> tuple[int, int]:
        """直近 draw() の頂点数/ライン数（HUD 用）。"""
        return int(self._last_vertex_count), int(self._last_line_count)

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _upload_geometry(self, geometry: Geometry) -> None:
        verts, inds = geometry_to_vertices_indices(geometry, self.gpu.primitive_restart_index)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Uploading geometry: verts=%d (%.1f KB), inds=%d",
                len(verts),
                verts.nbytes / 1024.0,
                len(inds),
            )
        self.gpu.upload(verts, inds)


# ---------- utility -------------------------------------------------------- #
def geometry_to_vertices_indices(
    geometry: Geometry,
    primitive_restart_index: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Geometry を VBO/IBO 用の配列に変換。
    各ポリラインの末尾に primitive restart を挟み、1 回の LINE_STRIP で全線を描けるようにする。
    """
    coords = geometry.coords
    offsets = geometry.offsets

    num_lines = len(offsets) - 1
    total_verts = len(coords)
    total_inds = total_verts + num_lines

    indices = np.empty(total_inds, dtype=np.uint32)
    # 再始動位置（各ライン終端の直後）: offsets[1:] + 行番号
    restart_pos = offsets[1:].astype(np.int64) + np.arange(num_lines, dtype=np.int64)
    mask = np.zeros(total_inds, dtype=bool)
    mask[restart_pos] = True
    indices[~mask] = np.arange(total_verts, dtype=np.uint32)
    indices[mask] = np.uint32(primitive_restart_index)
    return coords, indices


__all__ = ["LineRenderer", "geometry_to_vertices_indices"]
