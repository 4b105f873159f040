"""
どこで: `waveforms.harmonic_overtone`。
何を: 偶数次高調波に実験的な角速度 `k XOR (2.71^k)` を与える視覚用の波形。
なぜ: フーリエ理論からの導出ではなく見た目のための式。補正せず、そのまま保持する。

角速度の XOR は 32bit 符号付き整数同士の演算として評価する。
非整数のべき乗はゼロ方向に切り捨てたうえで 2^32 を法として畳み込み、
符号付き 32bit として解釈する（k が大きいと 2.71^k は 2^32 を超えるため、
この折り返しが結果を決める）。
"""

from __future__ import annotations

import math

from .model import Octave, Wave
from .registry import DEFAULT_SCALE, waveform

_U32 = 0x1_0000_0000
_I32_SIGN = 0x8000_0000


def to_int32(x: float) -> int:
    """実数を 32bit 符号付き整数へ変換（ゼロ方向切り捨て → mod 2^32 → 符号付き解釈）。

    非有限値は 0。
    """
    if not math.isfinite(x):
        return 0
    n = math.trunc(x) & (_U32 - 1)
    return n - _U32 if n >= _I32_SIGN else n


def overtone_velocity(k: int) -> int:
    """`k XOR (2.71 ** k)` を 32bit 整数演算として評価する。

    べき乗が float の範囲を超える（k >= 712）場合は無限大とみなし、`to_int32` で 0 になる。
    """
    try:
        power = 2.71**k
    except OverflowError:
        power = math.inf
    return to_int32(float(k)) ^ to_int32(power)


@waveform
def harmonic_overtone(o: Octave, *, scale: float = DEFAULT_SCALE) -> Wave:
    """倍音バリアントの第 `o` 項。

    k = 2(o + 1), amplitude = 4A / (kπ), angular_velocity = k XOR (2.71^k)。
    """
    k = 2 * (int(o) + 1)
    return Wave(
        amplitude=(scale * 4.0) / (k * math.pi),
        angular_velocity=float(overtone_velocity(k)),
        initial_offset=0.0,
    )


__all__ = ["harmonic_overtone", "overtone_velocity", "to_int32"]
