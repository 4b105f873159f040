from __future__ import annotations

import math

import pytest

from engine.core.timestep import TWO_PI, step_time


def test_step_adds_dt() -> None:
    assert step_time(0.0, 0.025) == pytest.approx(0.025)
    assert step_time(1.0, 0.5) == pytest.approx(1.5)


def test_step_wraps_modulo_two_pi() -> None:
    t = step_time(TWO_PI - 0.01, 0.025)
    assert t == pytest.approx(0.015)
    assert 0.0 <= t < TWO_PI


@pytest.mark.parametrize("dt", [0.0125, 0.025, 0.1, 0.7])
def test_full_turn_returns_near_zero(dt: float) -> None:
    t = 0.0
    for _ in range(math.ceil(TWO_PI / dt)):
        t = step_time(t, dt)
        assert 0.0 <= t < TWO_PI
    assert min(t, TWO_PI - t) <= dt + 1e-9


def test_non_finite_dt_raises() -> None:
    with pytest.raises(ValueError):
        step_time(0.0, float("nan"))
    with pytest.raises(ValueError):
        step_time(0.0, float("inf"))
