from __future__ import annotations

from common import settings
from common.env import env_bool, env_float, env_int, env_str


def test_defaults_without_env(reload_settings) -> None:
    for name in ("EPC_SCALE", "EPC_DT", "EPC_TRAJECTORY_CAPACITY", "EPC_OCTAVES", "EPC_WAVEFORM"):
        reload_settings.delenv(name, raising=False)
    settings.reload_from_env()
    s = settings.get()
    assert s.SCALE == 75.0
    assert s.DT == 0.025
    assert s.TRAJECTORY_CAPACITY == 256
    assert (s.OCTAVES_MIN, s.DEFAULT_OCTAVES, s.OCTAVES_MAX) == (2, 5, 24)
    assert s.DEFAULT_WAVEFORM == "square"


def test_env_overrides_and_guards(reload_settings) -> None:
    reload_settings.setenv("EPC_SCALE", "69")
    reload_settings.setenv("EPC_DT", "-1")
    reload_settings.setenv("EPC_TRAJECTORY_CAPACITY", "0")
    reload_settings.setenv("EPC_OCTAVES", "99")
    reload_settings.setenv("EPC_WAVEFORM", "sawtooth")
    settings.reload_from_env()
    s = settings.get()
    assert s.SCALE == 69.0
    assert s.DT == 0.025  # 非正は既定
    assert s.TRAJECTORY_CAPACITY == 1  # 下限丸め
    assert s.DEFAULT_OCTAVES == 24  # 上限丸め
    assert s.DEFAULT_WAVEFORM == "sawtooth"


def test_env_helpers(monkeypatch) -> None:
    monkeypatch.setenv("X_INT", "abc")
    assert env_int("X_INT", 7) == 7
    monkeypatch.setenv("X_INT", "-5")
    assert env_int("X_INT", 7, min_value=0) == 0
    monkeypatch.setenv("X_FLOAT", "nan")
    assert env_float("X_FLOAT", 1.5) == 1.5
    monkeypatch.setenv("X_FLOAT", "0.0125")
    assert env_float("X_FLOAT", 1.5) == 0.0125
    monkeypatch.setenv("X_BOOL", "yes")
    assert env_bool("X_BOOL") is True
    monkeypatch.setenv("X_BOOL", "0")
    assert env_bool("X_BOOL", True) is False
    monkeypatch.setenv("X_STR", "  ")
    assert env_str("X_STR", "square") == "square"
