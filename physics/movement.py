# physics/movement.py
from __future__ import annotations

import math
from typing import Protocol

from core.tuning import MovementTuning
from core.utils import clamp, sign
from physics.body import Body


class SpeedSource(Protocol):
    """What the jump tuner needs to know about horizontal motion."""

    @property
    def velocity(self) -> float:
        ...

    @property
    def max_speed(self) -> float:
        ...

    @property
    def velocity_changed(self) -> bool:
        ...


def _acceleration(max_speed: float, duration: float) -> float:
    if max_speed == 0.0:
        return 0.0
    if duration == 0.0:
        # instant, not zero: with no input the velocity must still shrink every step.
        # the clamp below lands exactly on the limit
        return math.inf
    return max_speed / duration


def calculate_new_velocity(
    current_velocity: float,
    target_direction: int,
    max_speed: float,
    time_to_max_speed: float,
    time_to_stop: float,
    delta_time: float,
) -> float:
    """
    One fixed step of horizontal velocity.
      - with input: accelerate toward target_direction (speed-up rate when
        going the same way or starting from rest, slow-down rate when reversing)
      - without input: push against current motion at the slow-down rate
      - result clamped to +-max_speed
      - with no input, crossing (or touching) zero snaps to exactly 0
    """
    velocity_direction = sign(current_velocity)
    acceleration_direction = target_direction if target_direction != 0 else -velocity_direction

    if acceleration_direction == 0:
        magnitude = 0.0
    elif acceleration_direction * velocity_direction >= 0:
        magnitude = _acceleration(max_speed, time_to_max_speed)
    else:
        magnitude = _acceleration(max_speed, time_to_stop)

    if magnitude and delta_time:
        new_velocity = current_velocity + acceleration_direction * magnitude * delta_time
    else:
        new_velocity = current_velocity
    new_velocity = clamp(new_velocity, -max_speed, max_speed)

    if target_direction == 0 and new_velocity * current_velocity <= 0:
        new_velocity = 0.0

    return new_velocity


class Mover:
    """Drives body.vel.x from the last commanded direction."""

    def __init__(self, body: Body, tuning: MovementTuning | None = None):
        self.body = body
        self.tuning = tuning if tuning is not None else MovementTuning()
        self._target_direction = 0
        self._velocity = 0.0
        self._velocity_changed = False

    @property
    def velocity(self) -> float:
        return self._velocity

    @property
    def max_speed(self) -> float:
        return self.tuning.max_speed

    @property
    def target_direction(self) -> int:
        return self._target_direction

    @property
    def velocity_changed(self) -> bool:
        """Whether the last fixed step changed the velocity."""
        return self._velocity_changed

    def move(self, wanted_direction: float) -> int:
        """Only the sign is kept. Returns the direction actually applied."""
        self._target_direction = sign(wanted_direction)
        return self._target_direction

    def fixed_update(self, dt: float) -> float:
        t = self.tuning
        new_velocity = calculate_new_velocity(
            self.body.vel.x,
            self._target_direction,
            t.max_speed,
            t.time_to_max_speed,
            t.time_to_stop,
            dt,
        )
        self.body.vel.x = new_velocity
        self._velocity_changed = new_velocity != self._velocity
        self._velocity = new_velocity
        return new_velocity
