from __future__ import annotations

from engine.core.frame_clock import FrameClock


class _Recorder:
    def __init__(self, name: str, log: list[tuple[str, float]]) -> None:
        self.name = name
        self.log = log

    def tick(self, dt: float) -> None:
        self.log.append((self.name, dt))


def test_tickables_run_in_registration_order() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("driver", log), _Recorder("label", log)])
    clock.tick(0.016)
    clock.tick(0.017)
    assert [n for n, _ in log] == ["driver", "label", "driver", "label"]
    assert log[0][1] == 0.016
    assert clock.frame_count == 2


def test_tick_without_dt_passes_zero() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log)])
    clock.tick()
    assert log == [("a", 0.0)]


def test_paused_clock_skips_tickables_and_frame_count() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log)])
    clock.tick(0.016)
    assert clock.toggle_pause() is True
    clock.tick(0.016)
    clock.tick(0.016)
    assert len(log) == 1
    assert clock.frame_count == 1
    assert clock.toggle_pause() is False
    clock.tick(0.016)
    assert clock.frame_count == 2
