from __future__ import annotations

from .step import StepClock
from .wall import WallClock

__all__ = ["StepClock", "WallClock"]
