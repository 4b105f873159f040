"""
どこで: `waveforms.sawtooth`。
何を: のこぎり波の係数（全次高調波、次数の偶奇で符号反転）。
"""

from __future__ import annotations

import math

from .model import Octave, Wave
from .registry import DEFAULT_SCALE, waveform


@waveform
def sawtooth(o: Octave, *, scale: float = DEFAULT_SCALE) -> Wave:
    """のこぎり波の第 `o` 項。

    k = o + 1, sign = +1（k 偶数）/ -1（k 奇数）,
    amplitude = 2A / (sign·k·π), angular_velocity = 2k。
    """
    k = int(o) + 1
    sign = 1 if k % 2 == 0 else -1
    return Wave(
        amplitude=(scale * 2.0) / (sign * k * math.pi),
        angular_velocity=float(2 * k),
        initial_offset=0.0,
    )


__all__ = ["sawtooth"]
