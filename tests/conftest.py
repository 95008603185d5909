from __future__ import annotations

import pytest

from backoff_policy.clocks import StepClock


@pytest.fixture
def clock() -> StepClock:
    return StepClock()
