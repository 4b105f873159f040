"""共通フィクスチャ。

- 波形ジェネレータ
- 設定の環境変数読み直し（テスト後に既定へ戻す）
"""

from __future__ import annotations

import math
from typing import Iterator

import pytest

from common import settings as settings_mod
from waveforms import WaveformGenerator, resolve

A = 75.0


@pytest.fixture()
def square_wf() -> WaveformGenerator:
    return resolve("square")


@pytest.fixture()
def sawtooth_wf() -> WaveformGenerator:
    return resolve("sawtooth")


@pytest.fixture()
def overtone_wf() -> WaveformGenerator:
    return resolve("harmonic_overtone")


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """`EPC_*` を設定して `reload_from_env()` するテスト用。終了時に既定値へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings_mod.reload_from_env()


def approx_point(p, q, tol: float = 1e-9) -> bool:
    return math.isclose(p[0], q[0], abs_tol=tol) and math.isclose(p[1], q[1], abs_tol=tol)
