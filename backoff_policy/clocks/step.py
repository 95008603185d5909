from __future__ import annotations


class StepClock:
    """A virtual clock that only moves when told to.

    Sleeping advances the clock instantly and records the requested
    duration, so backoff schedules can be asserted without waiting.
    """

    def __init__(self, time: float = 0.0) -> None:
        self._time = time
        self.sleeps: list[float] = []

    def step(self, time: float) -> None:
        assert time >= self._time, "The arrow of time only flows forward."
        self._time = time

    def time(self) -> float:
        """Return the current time in seconds."""
        return self._time

    def sleep(self, secs: float, /) -> None:
        assert secs >= 0, "secs must be greater than or equal to 0"
        self.sleeps.append(secs)
        self.step(self._time + secs)
