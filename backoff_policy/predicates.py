from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Any

from backoff_policy.models.result import Ko, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from backoff_policy.models.result import Result


def retry_while_ko(result: Result[Any, Any]) -> bool:
    return isinstance(result, Ko)


def retry_always(result: Result[Any, Any]) -> bool:
    return True


def retry_never(result: Result[Any, Any]) -> bool:
    return False


def retry_on(*types: type[BaseException]) -> Callable[[Result[Any, Any]], bool]:
    """Retry only failures whose error is an instance of one of ``types``."""

    def should_retry(result: Result[Any, Any]) -> bool:
        match result:
            case Ko(e):
                return isinstance(e, types)
            case Ok():
                return False

    return should_retry


def capture[**P, R](
    func: Callable[P, R],
    non_retryable_exceptions: tuple[type[Exception], ...] = (),
) -> Callable[P, Result[R, Exception]]:
    """Turn a raising callable into one that returns a result.

    Exceptions listed in ``non_retryable_exceptions`` are re-raised instead
    of being captured, as is anything that is not an ``Exception``.
    """
    if not isinstance(non_retryable_exceptions, tuple):
        msg = f"non_retryable_exceptions must be `tuple`, got {type(non_retryable_exceptions).__name__}"
        raise TypeError(msg)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R, Exception]:
        try:
            return Ok(func(*args, **kwargs))
        except non_retryable_exceptions:
            raise
        except Exception as e:
            return Ko(e)

    return wrapper
