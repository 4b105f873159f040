"""
どこで: `engine.core.epicycle`。
何を: 時刻 t とオクターブ数 n と波形ジェネレータから、エピサイクルの連鎖を組み立てる。
なぜ: 波形の各項を「前の円の円周上を回る円」として並べ、先端の軌跡で波形を近似するため。

最初のオクターブが系の「太陽」で、以降のオクターブはそれぞれ直前の円の
現在位置を中心に回る（惑星の周りを回る月のように）。

漸化式（時計回り）:
    θ = t·ω + φ
    next = (a·cos(−θ) + c.x, a·sin(−θ) + c.y)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from common.types import Vec2
from waveforms.model import Wave, WaveformGenerator

ORIGIN: Vec2 = (0.0, 0.0)


@dataclass(frozen=True)
class Epicycle:
    """中心点と、その円が表す 1 高調波。毎ステップ作り直す（就地変更しない）。"""

    center: Vec2
    wave: Wave


def next_center(t: float, epicycle: Epicycle) -> Vec2:
    """時刻 `t` における、`epicycle` の半径の先端（= 次の円の中心）を返す。"""
    wave = epicycle.wave
    theta = t * wave.angular_velocity + wave.initial_offset
    cx, cy = epicycle.center
    return (
        wave.amplitude * math.cos(-theta) + cx,
        wave.amplitude * math.sin(-theta) + cy,
    )


def build_epicycles(t: float, n: int, wf: WaveformGenerator) -> list[Epicycle]:
    """エピサイクルの連鎖を返す。

    引数:
        t: 時刻（位相, [0, 2π)）。
        n: オクターブ数。0 以下なら空リスト。
        wf: 波形ジェネレータ `Octave -> Wave`。

    返り値:
        ちょうど `n` 個の `Epicycle`。先頭は原点中心で、以降は直前の円の先端を中心とする。
    """
    epicycles: list[Epicycle] = []
    center = ORIGIN
    for o in range(max(0, int(n))):
        epi = Epicycle(center=center, wave=wf(o))
        epicycles.append(epi)
        center = next_center(t, epi)
    return epicycles


__all__ = ["Epicycle", "ORIGIN", "next_center", "build_epicycles"]
