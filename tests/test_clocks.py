from __future__ import annotations

import threading
from unittest.mock import patch

import pytest

from backoff_policy.clocks import StepClock, WallClock
from backoff_policy.models.clock import Clock


@pytest.mark.parametrize("clock", [StepClock(), WallClock()])
def test_clocks_are_clocks(clock: Clock) -> None:
    assert isinstance(clock, Clock)


def test_step_clock_sleep_advances_time() -> None:
    clock = StepClock(time=10.0)
    clock.sleep(0.5)
    clock.sleep(0)
    clock.sleep(1.5)

    assert clock.time() == 12.0
    assert clock.sleeps == [0.5, 0, 1.5]


def test_step_clock_only_moves_forward() -> None:
    clock = StepClock()
    clock.step(5)
    assert clock.time() == 5

    with pytest.raises(AssertionError):
        clock.step(4)


def test_wall_clock_sleeps() -> None:
    with patch("backoff_policy.clocks.wall.time.sleep") as sleep:
        WallClock().sleep(0.25)
        sleep.assert_called_once_with(0.25)


def test_wall_clock_clamps_huge_sleeps() -> None:
    with patch("backoff_policy.clocks.wall.time.sleep") as sleep:
        WallClock().sleep(float(2**64))
        sleep.assert_called_once_with(threading.TIMEOUT_MAX)
