# core/clock.py
from __future__ import annotations

from collections.abc import Callable

from core.settings import FIXED_DT, MAX_FRAME_DT


class SimulationClock:
    """Monotonic simulation time, advanced only by fixed steps."""

    def __init__(self, start: float = 0.0):
        self._time = float(start)

    @property
    def time(self) -> float:
        return self._time

    def advance(self, dt: float) -> float:
        if dt < 0.0:
            raise ValueError("dt must be non-negative")
        self._time += dt
        return self._time


class FixedStepScheduler:
    """
    Turns variable frame times into whole fixed steps.
      - frame dt is clamped to max_frame_dt first (same trick as the game loop)
      - leftover time carries over to the next frame
    """

    def __init__(
        self,
        step: Callable[[float], None],
        fixed_dt: float = FIXED_DT,
        max_frame_dt: float = MAX_FRAME_DT,
        clock: SimulationClock | None = None,
    ):
        if fixed_dt <= 0.0:
            raise ValueError("fixed_dt must be positive")
        self.step = step
        self.fixed_dt = fixed_dt
        self.max_frame_dt = max_frame_dt
        self.clock = clock if clock is not None else SimulationClock()
        self._accumulator = 0.0

    def tick(self, frame_dt: float) -> int:
        """Run as many fixed steps as the accumulated time allows. Returns the count."""
        if frame_dt > self.max_frame_dt:
            frame_dt = self.max_frame_dt
        self._accumulator += max(0.0, frame_dt)

        steps = 0
        while self._accumulator >= self.fixed_dt:
            self._accumulator -= self.fixed_dt
            self.clock.advance(self.fixed_dt)
            self.step(self.fixed_dt)
            steps += 1
        return steps
