from __future__ import annotations

import pytest

from engine.core.epicycle import build_epicycles
from engine.core.radial import derive_radials
from engine.core.simulation import EpicycleSimulation
from waveforms import resolve


def test_first_step_uses_time_zero_then_advances() -> None:
    sim = EpicycleSimulation(dt=0.025, capacity=16, scale=75.0)
    frame = sim.advance(5, "square")
    assert frame.time == 0.0
    assert sim.time == pytest.approx(0.025)
    expected_tip = derive_radials(0.0, build_epicycles(0.0, 5, resolve("square")))[-1].p2
    assert frame.tip == expected_tip
    assert list(frame.trajectory) == [expected_tip]
    assert len(frame.epicycles) == len(frame.radials) == 5


def test_trajectory_accumulates_newest_first_up_to_capacity() -> None:
    sim = EpicycleSimulation(dt=0.1, capacity=3)
    tips = [sim.advance(4, "square").tip for _ in range(5)]
    assert len(sim.trajectory) == 3
    assert list(sim.trajectory.snapshot()) == [tips[4], tips[3], tips[2]]


def test_waveform_change_clears_trajectory() -> None:
    sim = EpicycleSimulation(dt=0.05, capacity=64)
    for _ in range(6):
        sim.advance(5, "square")
    assert len(sim.trajectory) == 6
    frame = sim.advance(5, "sawtooth")
    assert len(frame.trajectory) == 1
    assert frame.trajectory[0] == frame.tip
    assert sim.last_waveform == "sawtooth"


def test_waveform_change_does_not_reset_time() -> None:
    sim = EpicycleSimulation(dt=0.05)
    sim.advance(5, "square")
    sim.advance(5, "square")
    frame = sim.advance(5, "harmonic_overtone")
    assert frame.time == pytest.approx(0.1)


def test_unknown_waveform_is_drawn_as_square() -> None:
    a = EpicycleSimulation(dt=0.05).advance(3, "unknown")
    b = EpicycleSimulation(dt=0.05).advance(3, "square")
    assert a.tip == b.tip
    assert a.waveform == "unknown"


def test_zero_octaves_produces_empty_frame_without_push() -> None:
    sim = EpicycleSimulation(dt=0.05)
    sim.advance(3, "square")
    frame = sim.advance(0, "square")
    assert frame.epicycles == ()
    assert frame.radials == ()
    assert frame.tip is None
    assert len(frame.trajectory) == 1


def test_frame_snapshot_is_independent_of_later_steps() -> None:
    sim = EpicycleSimulation(dt=0.05)
    frame = sim.advance(3, "square")
    sim.advance(3, "square")
    assert len(frame.trajectory) == 1
    assert len(sim.trajectory) == 2


def test_reset_restores_session_start() -> None:
    sim = EpicycleSimulation(dt=0.05)
    for _ in range(4):
        sim.advance(3, "square")
    sim.reset()
    assert sim.time == 0.0
    assert len(sim.trajectory) == 0
    assert sim.last_waveform is None
    assert sim.advance(3, "sawtooth").time == 0.0


def test_scale_is_forwarded_to_generator() -> None:
    frame = EpicycleSimulation(scale=69.0).advance(1, "square")
    assert frame.epicycles[0].wave.amplitude == pytest.approx(resolve("square", scale=69.0)(0).amplitude)


def test_defaults_come_from_settings(reload_settings) -> None:
    from common import settings

    reload_settings.setenv("EPC_DT", "0.0125")
    reload_settings.setenv("EPC_TRAJECTORY_CAPACITY", "512")
    reload_settings.setenv("EPC_SCALE", "69")
    settings.reload_from_env()
    sim = EpicycleSimulation()
    assert sim.dt == 0.0125
    assert sim.trajectory.capacity == 512
    assert sim.scale == 69.0
