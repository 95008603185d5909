from __future__ import annotations

import threading
import time


class WallClock:
    def time(self) -> float:
        """Return the current time in seconds."""
        return time.time()

    def sleep(self, secs: float, /) -> None:
        # time.sleep raises OverflowError past the platform limit
        time.sleep(min(secs, threading.TIMEOUT_MAX))
