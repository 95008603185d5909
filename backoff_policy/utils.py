from __future__ import annotations

import math
from typing import Any

MAX_MILLIS = 2**64 - 1


def truncate(s: str, n: int) -> str:
    if len(s) > n:
        return s[:n] + "..."
    return s


def format_args_and_kwargs(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    parts = [repr(arg) for arg in args]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def whole_millis(ms: float) -> int:
    """Truncate a delay to whole milliseconds.

    NaN and negative delays become 0, delays past 2**64 - 1 saturate.
    """
    if math.isnan(ms) or ms <= 0:
        return 0
    if ms >= MAX_MILLIS:
        return MAX_MILLIS
    return int(ms)


def as_float(x: Any) -> float:
    """Convert a real number to float, saturating at infinity."""
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf
    except ValueError:
        # signaling NaN decimals refuse conversion
        return math.nan
