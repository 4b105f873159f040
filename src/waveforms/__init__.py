"""
どこで: `waveforms` パッケージ（係数ジェネレータの登録）。
何を: 組込み波形を import 副作用で登録し、`resolve(name)` で UI 側の名前から解決できるようにする。
なぜ: 波形カタログを一箇所に集約し、engine.core からは `Octave -> Wave` の純関数としてだけ扱うため。
"""

# 関数版 waveform 定義を import して登録（副作用）
from . import harmonic_overtone as _register_harmonic_overtone  # noqa: F401
from . import sawtooth as _register_sawtooth  # noqa: F401
from . import square as _register_square  # noqa: F401
from .model import Octave, Wave, WaveformGenerator, WaveformKind
from .registry import (  # re-export
    get_waveform,
    is_waveform_registered,
    list_waveforms,
    parse_kind,
    resolve,
    waveform,
)

__all__ = [
    "Octave",
    "Wave",
    "WaveformGenerator",
    "WaveformKind",
    "waveform",
    "resolve",
    "parse_kind",
    "get_waveform",
    "list_waveforms",
    "is_waveform_registered",
]
