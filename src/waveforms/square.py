"""
どこで: `waveforms.square`。
何を: 矩形波のフーリエ係数（奇数次高調波のみ、振幅は 1/k で減衰）。
なぜ: 既定波形。未知の波形名もここへフォールバックする。
"""

from __future__ import annotations

import math

from .model import Octave, Wave
from .registry import DEFAULT_SCALE, waveform


def odd_harmonic(o: Octave) -> int:
    """オクターブ番号から奇数次の高調波番号 k = 2o + 1 を返す。"""
    return 2 * int(o) + 1


@waveform
def square(o: Octave, *, scale: float = DEFAULT_SCALE) -> Wave:
    """矩形波の第 `o` 項。

    amplitude = 4A / (kπ), angular_velocity = k, initial_offset = 0（k = 2o + 1）。
    """
    k = odd_harmonic(o)
    return Wave(
        amplitude=(scale * 4.0) / (k * math.pi),
        angular_velocity=float(k),
        initial_offset=0.0,
    )


__all__ = ["square", "odd_harmonic"]
