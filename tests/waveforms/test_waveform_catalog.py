from __future__ import annotations

import math

import pytest

from engine.core.epicycle import build_epicycles
from waveforms import Wave, WaveformKind, list_waveforms, parse_kind, resolve
from waveforms.harmonic_overtone import harmonic_overtone, overtone_velocity, to_int32
from waveforms.sawtooth import sawtooth
from waveforms.square import square

A = 75.0


def test_builtin_waveforms_are_registered() -> None:
    assert list_waveforms() == ["harmonic_overtone", "sawtooth", "square"]


def test_square_first_octave_coefficients() -> None:
    w = square(0)
    assert isinstance(w, Wave)
    assert w.amplitude == pytest.approx(4 * A / math.pi)
    assert w.angular_velocity == 1
    assert w.initial_offset == 0


def test_square_uses_odd_harmonics_with_one_over_k_decay() -> None:
    for o in range(10):
        k = 2 * o + 1
        w = square(o)
        assert w.angular_velocity == k
        assert w.amplitude == pytest.approx(4 * A / (k * math.pi))


@pytest.mark.parametrize("o", range(51))
def test_square_velocity_odd_and_sawtooth_velocity_even(o: int) -> None:
    assert int(square(o).angular_velocity) % 2 == 1
    assert int(sawtooth(o).angular_velocity) % 2 == 0


def test_sawtooth_sign_alternates_with_harmonic_parity() -> None:
    # k = 1（奇数）→ 負、k = 2（偶数）→ 正
    w0 = sawtooth(0)
    w1 = sawtooth(1)
    assert w0.amplitude == pytest.approx(-2 * A / math.pi)
    assert w0.angular_velocity == 2
    assert w1.amplitude == pytest.approx(2 * A / (2 * math.pi))
    assert w1.angular_velocity == 4


def test_harmonic_overtone_literal_formula() -> None:
    # k=2: 2.71^2 = 7.3441 -> 7, 2 ^ 7 = 5
    # k=4: 2.71^4 = 53.93... -> 53, 4 ^ 53 = 49
    w0 = harmonic_overtone(0)
    w1 = harmonic_overtone(1)
    assert w0.angular_velocity == 5
    assert w1.angular_velocity == 49
    assert w0.amplitude == pytest.approx(4 * A / (2 * math.pi))
    assert w1.amplitude == pytest.approx(4 * A / (4 * math.pi))


def test_overtone_velocity_stays_in_int32_for_large_harmonics() -> None:
    for o in range(24):
        k = 2 * (o + 1)
        v = overtone_velocity(k)
        assert -(2**31) <= v < 2**31


def test_overtone_beyond_float_range_keeps_k() -> None:
    # 2.71**712 は float を超える。無限大は 32bit 変換で 0 になり、k XOR 0 == k
    assert overtone_velocity(712) == 712
    w = harmonic_overtone(400)
    assert w.angular_velocity == 802.0
    assert math.isfinite(w.amplitude)


def test_overtone_chain_with_many_octaves() -> None:
    epis = build_epicycles(0.3, 400, resolve("harmonic_overtone"))
    assert len(epis) == 400
    assert all(math.isfinite(c) for e in epis for c in e.center)


def test_to_int32_truncates_and_wraps() -> None:
    assert to_int32(3.9) == 3
    assert to_int32(-1.5) == -1
    assert to_int32(2.0**32 + 5) == 5
    assert to_int32(2.0**31) == -(2**31)
    assert to_int32(float("inf")) == 0
    assert to_int32(float("nan")) == 0


def test_scale_keyword_scales_amplitude_only() -> None:
    w = square(2, scale=69.0)
    assert w.amplitude == pytest.approx(4 * 69.0 / (5 * math.pi))
    assert w.angular_velocity == 5


def test_resolve_unknown_falls_back_to_square() -> None:
    assert resolve("unknown") is resolve("square")
    assert resolve("") is resolve("square")
    assert resolve(None) is resolve("square")  # type: ignore[arg-type]


def test_resolve_accepts_spelling_variants() -> None:
    assert resolve("Square") is square
    assert resolve("harmonic-overtone") is harmonic_overtone
    assert resolve("HarmonicOvertone") is harmonic_overtone
    assert resolve("SAWTOOTH") is sawtooth


def test_resolve_binds_non_default_scale() -> None:
    wf = resolve("square", scale=69.0)
    assert wf(0).amplitude == pytest.approx(4 * 69.0 / math.pi)
    # 既定スケールなら登録関数そのもの
    assert resolve("square", scale=75.0) is square


def test_parse_kind_maps_boundary_strings() -> None:
    assert parse_kind("sawtooth") is WaveformKind.SAWTOOTH
    assert parse_kind("harmonic_overtone") is WaveformKind.HARMONIC_OVERTONE
    assert parse_kind("triangle") is WaveformKind.SQUARE
    assert parse_kind(WaveformKind.SAWTOOTH) is WaveformKind.SAWTOOTH
    assert parse_kind(42) is WaveformKind.SQUARE


def test_wave_is_immutable() -> None:
    w = square(0)
    with pytest.raises(AttributeError):
        w.amplitude = 1.0  # type: ignore[misc]
