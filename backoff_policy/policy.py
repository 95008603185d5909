from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from decimal import Decimal
from functools import wraps
from numbers import Real
from typing import TYPE_CHECKING, final

from backoff_policy import utils
from backoff_policy.clocks import WallClock
from backoff_policy.models.clock import Clock

if TYPE_CHECKING:
    from collections.abc import Callable

    from backoff_policy.models.result import Result

logger = logging.getLogger(__name__)

MAX_LEN = 120


@final
@dataclass(frozen=True)
class BackoffPolicy[T, E]:
    """An exponential backoff, measured in milliseconds.

    The delay after attempt *n* is ``coefficient * n ** exponent + constant``.
    Attempts stop as soon as ``should_retry`` rejects a result or
    ``max_retries`` attempts have been made, whichever comes first.
    """

    max_retries: int
    constant: float
    coefficient: float
    exponent: float
    should_retry: Callable[[Result[T, E]], bool]

    def __post_init__(self) -> None:
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            msg = f"max_retries must be `int`, got {type(self.max_retries).__name__}"
            raise TypeError(msg)

        if not isinstance(self.constant, Real | Decimal):
            msg = f"constant must be `float`, got {type(self.constant).__name__}"
            raise TypeError(msg)

        if not isinstance(self.coefficient, Real | Decimal):
            msg = f"coefficient must be `float`, got {type(self.coefficient).__name__}"
            raise TypeError(msg)

        if not isinstance(self.exponent, Real | Decimal):
            msg = f"exponent must be `float`, got {type(self.exponent).__name__}"
            raise TypeError(msg)

        if not callable(self.should_retry):
            msg = f"should_retry must be `Callable`, got {type(self.should_retry).__name__}"
            raise TypeError(msg)

        if not (self.max_retries >= 1):
            msg = "max_retries must be greater than or equal to one"
            raise ValueError(msg)

    @classmethod
    def default(cls, should_retry: Callable[[Result[T, E]], bool]) -> BackoffPolicy[T, E]:
        """A backoff tuned for network calls: 7 attempts, square-root growth."""
        return cls(
            max_retries=7,
            constant=0.0,
            coefficient=1000.0,
            exponent=0.5,
            should_retry=should_retry,
        )

    def delay(self, attempt: int) -> float:
        """Return the delay in milliseconds that follows the given attempt."""
        assert attempt > 0, "attempt must be positive"
        try:
            growth = float(attempt) ** utils.as_float(self.exponent)
        except OverflowError:
            growth = math.inf
        return utils.as_float(self.constant) + utils.as_float(self.coefficient) * growth

    def total_delay(self, *, inclusive: bool = False) -> float:
        """Return the worst case time in milliseconds spent waiting in `retry`.

        No delay follows the final attempt, so by default the last term is
        left out. With ``inclusive=True`` every attempt number up to
        ``max_retries`` contributes.
        """
        last = self.max_retries if inclusive else self.max_retries - 1
        return sum((self.delay(attempt) for attempt in range(1, last + 1)), 0.0)

    def retry(self, operation: Callable[[], Result[T, E]], clock: Clock | None = None) -> Result[T, E]:
        """Execute an operation, retrying it until it succeeds or the attempts run out.

        Exceptions raised by ``operation`` or ``should_retry`` are not
        retried and propagate to the caller unchanged.
        """
        clock = WallClock() if clock is None else clock
        assert isinstance(clock, Clock), "clock must be an instance of Clock"

        attempt = 0
        while True:
            attempt += 1
            logger.debug("Running attempt %d of %d", attempt, self.max_retries)
            result = operation()

            # the predicate is not consulted on the final attempt
            if attempt == self.max_retries or not self.should_retry(result):
                logger.debug(
                    "Attempt %d of %d finished with %s",
                    attempt,
                    self.max_retries,
                    utils.truncate(repr(result), MAX_LEN),
                )
                return result

            millis = utils.whole_millis(self.delay(attempt))
            logger.debug(
                "Attempt %d of %d returned %s (retrying in %dms)",
                attempt,
                self.max_retries,
                utils.truncate(repr(result), MAX_LEN),
                millis,
            )
            clock.sleep(millis / 1000)

    def retrying[**P](
        self,
        func: Callable[P, Result[T, E]],
        /,
        *,
        clock: Clock | None = None,
    ) -> Callable[P, Result[T, E]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            logger.debug(
                "Retrying %s(%s)",
                getattr(func, "__name__", repr(func)),
                utils.truncate(utils.format_args_and_kwargs(args, kwargs), MAX_LEN),
            )
            return self.retry(lambda: func(*args, **kwargs), clock)

        return wrapper

    def merge(
        self,
        *,
        max_retries: int | None = None,
        constant: float | None = None,
        coefficient: float | None = None,
        exponent: float | None = None,
        should_retry: Callable[[Result[T, E]], bool] | None = None,
    ) -> BackoffPolicy[T, E]:
        return BackoffPolicy(
            max_retries=max_retries if max_retries is not None else self.max_retries,
            constant=constant if constant is not None else self.constant,
            coefficient=coefficient if coefficient is not None else self.coefficient,
            exponent=exponent if exponent is not None else self.exponent,
            should_retry=should_retry if should_retry is not None else self.should_retry,
        )


def backoff[T, E](
    max_retries: int,
    constant: float,
    coefficient: float,
    exponent: float,
    should_retry: Callable[[Result[T, E]], bool],
) -> BackoffPolicy[T, E]:
    return BackoffPolicy(
        max_retries=max_retries,
        constant=constant,
        coefficient=coefficient,
        exponent=exponent,
        should_retry=should_retry,
    )


def default_policy[T, E](should_retry: Callable[[Result[T, E]], bool]) -> BackoffPolicy[T, E]:
    return BackoffPolicy.default(should_retry)


def from_env[T, E](
    should_retry: Callable[[Result[T, E]], bool],
    prefix: str = "BACKOFF_",
) -> BackoffPolicy[T, E]:
    """Build a policy from environment variables, falling back to the default preset."""
    default = BackoffPolicy.default(should_retry)
    return BackoffPolicy(
        max_retries=int(os.getenv(f"{prefix}MAX_RETRIES", str(default.max_retries))),
        constant=float(os.getenv(f"{prefix}CONSTANT", str(default.constant))),
        coefficient=float(os.getenv(f"{prefix}COEFFICIENT", str(default.coefficient))),
        exponent=float(os.getenv(f"{prefix}EXPONENT", str(default.exponent))),
        should_retry=should_retry,
    )
