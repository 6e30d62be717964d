from __future__ import annotations

import os

# headless pygame for the sandbox tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from core.clock import SimulationClock  # noqa: E402
from tests.helpers import FakeGround  # noqa: E402


@pytest.fixture
def clock() -> SimulationClock:
    return SimulationClock()


@pytest.fixture
def ground() -> FakeGround:
    return FakeGround()
