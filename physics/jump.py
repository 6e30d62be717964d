# physics/jump.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from core.clock import SimulationClock
from core.errors import InvalidTuningError
from core.events import EventBus, JumpEvent, LandedEvent, LeftGroundEvent
from core.settings import GRAVITY_Y
from core.tuning import JumpTuning
from physics.body import Body
from physics.ground import GroundedSignal

logger = logging.getLogger(__name__)


class JumpResult(Enum):
    JUMPED = "jumped"
    DEFERRED = "deferred"
    IGNORED = "ignored"


class JumpController:
    """
    Jump state machine, polled once per fixed step.

    - can_jump follows the grounded signal, except that after walking off a
      ledge it stays true for `jump_after_leaving_ground_delay` (coyote time).
    - A jump requested while it can't jump is remembered; landing within
      `jump_before_landing_delay` of the request fires it (jump buffer).
    - Gravity scale is picked every step so the rise takes `time_to_apex`
      and the fall takes `time_from_apex`.

    Timers are deadlines on the simulation clock, checked in fixed_update().
    """

    def __init__(
        self,
        body: Body,
        grounded: GroundedSignal,
        clock: SimulationClock,
        tuning: Optional[JumpTuning] = None,
        gravity_y: float = GRAVITY_Y,
        events: Optional[EventBus] = None,
    ):
        if gravity_y == 0.0:
            raise InvalidTuningError("gravity_y", "must be non-zero")
        self.body = body
        self.grounded = grounded
        self.clock = clock
        self.tuning = tuning if tuning is not None else JumpTuning()
        self.gravity_y = gravity_y
        self.events = events if events is not None else EventBus()
        self.enabled = True

        self._can_jump = False
        self._request_time: Optional[float] = None
        self._coyote_armed = False
        self._coyote_expires_at = 0.0
        self._last_grounded: Optional[bool] = None

    # -------------------------
    # Read-only state
    # -------------------------
    @property
    def can_jump(self) -> bool:
        return self._can_jump

    @property
    def pending_request(self) -> Optional[float]:
        """Simulation time of the outstanding jump request, if any."""
        return self._request_time

    @property
    def coyote_deadline(self) -> Optional[float]:
        return self._coyote_expires_at if self._coyote_armed else None

    @property
    def jump_speed(self) -> float:
        t = self.tuning
        return 2.0 * t.apex_height / t.time_to_apex

    @property
    def rise_gravity_scale(self) -> float:
        t = self.tuning
        return -2.0 * t.apex_height / (t.time_to_apex * t.time_to_apex) / self.gravity_y

    @property
    def fall_gravity_scale(self) -> float:
        t = self.tuning
        return -2.0 * t.apex_height / (t.time_from_apex * t.time_from_apex) / self.gravity_y

    @property
    def gravity_scale(self) -> float:
        if self.grounded.is_grounded:
            return 0.0
        if self.body.vel.y >= 0.0:
            return self.rise_gravity_scale
        return self.fall_gravity_scale

    # -------------------------
    # Commands
    # -------------------------
    def request_jump(self) -> JumpResult:
        """Jump now if allowed, otherwise remember the request (overwrites older ones)."""
        if not self.enabled:
            return JumpResult.IGNORED

        if self._can_jump:
            self._jump(buffered=False)
            return JumpResult.JUMPED

        self._request_time = self.clock.time
        return JumpResult.DEFERRED

    def fixed_update(self) -> None:
        now = self.clock.time
        grounded = self.grounded.is_grounded

        if grounded != self._last_grounded:
            if grounded:
                self._on_landed(now)
            elif self._last_grounded is not None:
                self._on_left_ground(now)
        self._last_grounded = grounded

        if self._coyote_armed and now >= self._coyote_expires_at:
            self._coyote_armed = False
            self._can_jump = grounded
            if not grounded:
                logger.debug("coyote window closed at t=%.3f", now)

        if (
            self._request_time is not None
            and now - self._request_time > self.tuning.jump_before_landing_delay
        ):
            self._request_time = None

        self.body.gravity_scale = self.gravity_scale

    # -------------------------
    # Internals
    # -------------------------
    def _on_landed(self, now: float) -> None:
        self._can_jump = True
        self._coyote_armed = False
        self.events.publish(LandedEvent(now))

        if (
            self.enabled
            and self._request_time is not None
            and now - self._request_time <= self.tuning.jump_before_landing_delay
        ):
            self._request_time = None
            self._jump(buffered=True)

    def _on_left_ground(self, now: float) -> None:
        self.events.publish(LeftGroundEvent(now))
        if self._can_jump:
            self._coyote_armed = True
            self._coyote_expires_at = now + self.tuning.jump_after_leaving_ground_delay

    def _jump(self, buffered: bool) -> None:
        speed = self.jump_speed
        self.body.vel.y = speed
        self._can_jump = False
        self._coyote_armed = False
        logger.debug("jump speed=%.2f buffered=%s t=%.3f", speed, buffered, self.clock.time)
        self.events.publish(JumpEvent(self.clock.time, speed, buffered))
