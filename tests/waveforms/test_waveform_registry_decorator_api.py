from __future__ import annotations

import pytest

from waveforms import Wave
from waveforms.registry import get_registry, get_waveform, is_waveform_registered, unregister, waveform


def test_waveform_decorator_supports_name_keyword() -> None:
    @waveform(name="custom_test_wave")
    def custom_test_wave(o: int) -> Wave:
        return Wave(1.0, 1.0)

    assert is_waveform_registered("custom_test_wave")
    assert get_waveform("CustomTestWave") is custom_test_wave
    unregister("custom_test_wave")
    assert not is_waveform_registered("custom_test_wave")


def test_waveform_decorator_supports_positional_name() -> None:
    @waveform("positional_named_wave")
    def _fn(o: int) -> Wave:
        return Wave(1.0, 1.0)

    assert is_waveform_registered("positional_named_wave")
    unregister("positional_named_wave")


def test_waveform_decorator_rejects_non_function_with_message() -> None:
    class NotFunc:  # noqa: N801 (テスト用の簡易クラス)
        pass

    deco = waveform(name="bad")
    with pytest.raises(TypeError) as ei:
        deco(NotFunc)
    assert "got" in str(ei.value)


def test_get_waveform_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_waveform("no_such_wave")


def test_get_registry_returns_copy() -> None:
    snap = get_registry()
    snap["bogus"] = object()
    assert not is_waveform_registered("bogus")
