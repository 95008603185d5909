from __future__ import annotations

from dataclasses import dataclass
from typing import final

type Result[T, E] = Ok[T] | Ko[E]


@final
@dataclass(frozen=True)
class Ok[T]:
    value: T


@final
@dataclass(frozen=True)
class Ko[E]:
    value: E
