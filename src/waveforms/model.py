"""
どこで: `waveforms.model`。
何を: 1 つの高調波を表す `Wave`、オクターブ、波形ジェネレータ型、閉じた波形種別 `WaveformKind`。
なぜ: 係数生成（waveforms）と位置計算（engine.core）の境界を、素の値型だけで表すため。

フーリエ級数は波形を複数の正弦波の和に分解して表す。1 つの正弦波は
振幅・角速度・初期位相の 3 つで記述できる。級数の各項を「オクターブ」と呼び、
0 始まりの整数で表す（音楽のオクターブではない）。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

Octave = int


@dataclass(frozen=True)
class Wave:
    """1 高調波の記述（不変）。

    amplitude は負値を取り得る（位相反転を表す）。initial_offset はラジアン。
    """

    amplitude: float
    angular_velocity: float
    initial_offset: float = 0.0


WaveformGenerator = Callable[[Octave], Wave]


class WaveformKind(Enum):
    """組込み波形の閉じた列挙。値はレジストリの正規化済みキー。"""

    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    HARMONIC_OVERTONE = "harmonic_overtone"


__all__ = ["Octave", "Wave", "WaveformGenerator", "WaveformKind"]
