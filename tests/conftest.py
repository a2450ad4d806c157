from __future__ import annotations

import pytest

from dungeon.environment.level import Algorithm, Level
from tests.helpers import make_level


@pytest.fixture
def rooms_level() -> Level:
    return make_level(Algorithm.ROOMS)


@pytest.fixture
def bsp_level() -> Level:
    return make_level(Algorithm.BSP)


@pytest.fixture(params=list(Algorithm), ids=lambda a: a.value)
def any_level(request: pytest.FixtureRequest) -> Level:
    """A default-sized level from each algorithm in turn."""
    return make_level(request.param)
