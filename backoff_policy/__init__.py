from __future__ import annotations

from .clocks import StepClock, WallClock
from .logging import configure
from .models.result import Ko, Ok, Result
from .policy import BackoffPolicy, backoff, default_policy, from_env
from .predicates import capture, retry_always, retry_never, retry_on, retry_while_ko

__all__ = [
    "BackoffPolicy",
    "Ko",
    "Ok",
    "Result",
    "StepClock",
    "WallClock",
    "backoff",
    "capture",
    "configure",
    "default_policy",
    "from_env",
    "retry_always",
    "retry_never",
    "retry_on",
    "retry_while_ko",
]
