"""
どこで: `engine.render.shader`。
何を: 線描画用の最小 GLSL プログラム（投影行列 + 単色）を生成する。
"""

from __future__ import annotations

from typing import Any

_VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec3 in_vert;
void main() {
    gl_Position = projection * vec4(in_vert, 1.0);
}
"""

_FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 frag_color;
void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """`projection`（mat4）と `color`（vec4）を持つプログラムを返す。"""
        return ctx.program(vertex_shader=_VERTEX_SHADER, fragment_shader=_FRAGMENT_SHADER)


__all__ = ["Shader"]
