from __future__ import annotations

import sys

from api.sketch import run_epicycles


def test_run_epicycles_init_only_returns_none() -> None:
    out = run_epicycles(octaves=3, waveform="sawtooth", fps=30, init_only=True)
    assert out is None


def test_init_only_accepts_unknown_waveform() -> None:
    assert run_epicycles(waveform="triangle", window_size=(320, 240), init_only=True) is None


def test_init_only_does_not_import_window_modules() -> None:
    before = "engine.core.render_window" in sys.modules
    run_epicycles(init_only=True)
    assert ("engine.core.render_window" in sys.modules) == before
