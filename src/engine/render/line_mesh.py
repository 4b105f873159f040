"""
どこで: `engine.render` の低レベルメッシュ層。
何を: VBO/IBO/VAO の確保・拡張・解放を担当する `LineMesh`。
なぜ: GPU 転送の詳細を LineRenderer から切り離し、バッファ再確保時の VAO 張り直しを一箇所にするため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class LineMesh:
    """レイヤー 1 枚分の頂点/インデックスを保持する GPU バッファ。

    エピサイクルのシーンは 1 レイヤー高々数千頂点なので、初期予約は小さめ（256KB）にして
    足りなくなったときだけ倍々で拡張する。
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        initial_reserve: int = 256 * 1024,
        primitive_restart_index: int = 0xFFFFFFFF,
    ):
        self.ctx = ctx
        self.program = program
        self.initial_reserve = int(initial_reserve)
        self.primitive_restart_index = primitive_restart_index

        self.vbo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.ibo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.vao = self._bind()

        self.index_count: int = 0
        self.ctx.primitive_restart = True  # type: ignore
        self.ctx.primitive_restart_index = primitive_restart_index  # type: ignore

    def _bind(self) -> Any:
        return self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert", index_buffer=self.ibo)

    def _ensure_capacity(self, vbo_size: int, ibo_size: int) -> None:
        grown = False
        if vbo_size > self.vbo.size:
            reserve = max(vbo_size, 2 * self.vbo.size)
            self.vbo.release()
            self.vbo = self.ctx.buffer(reserve=reserve, dynamic=True)
            grown = True
        if ibo_size > self.ibo.size:
            reserve = max(ibo_size, 2 * self.ibo.size)
            self.ibo.release()
            self.ibo = self.ctx.buffer(reserve=reserve, dynamic=True)
            grown = True
        if grown:
            self.vao.release()
            self.vao = self._bind()

    def upload(self, vertices: np.ndarray, indices: np.ndarray) -> None:
        self._ensure_capacity(vertices.nbytes, indices.nbytes)
        self.vbo.orphan()
        self.vbo.write(vertices.tobytes())
        self.ibo.orphan()
        self.ibo.write(indices.tobytes())
        self.index_count = len(indices)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時）。"""
        self.vbo.release()
        self.ibo.release()
        self.vao.release()
