# physics/jump_tuner.py
from __future__ import annotations

import logging
import math
from typing import Optional

from core.settings import MIN_ALLOWED_TIME
from core.tuning import JumpScaling, JumpTuning
from core.utils import lerp
from physics.ground import GroundedSignal
from physics.movement import SpeedSource

logger = logging.getLogger(__name__)


class JumpTuner:
    """
    Faster runs jump higher.

    apex height goes linearly from min to max with |speed| / max_speed, and
    both jump times scale with sqrt(height / max height), which keeps the
    rise acceleration the same for every jump.

    Only touches the jump tuning while grounded: on landing, and whenever the
    speed source reports a velocity change.
    """

    def __init__(
        self,
        speed: SpeedSource,
        grounded: GroundedSignal,
        jump: JumpTuning,
        scaling: Optional[JumpScaling] = None,
    ):
        self.speed = speed
        self.grounded = grounded
        self.jump = jump
        self.scaling = scaling if scaling is not None else JumpScaling()
        self.enabled = True
        self._was_grounded = False

    def fixed_update(self) -> bool:
        """Returns True if the jump tuning was rewritten this step."""
        grounded = self.grounded.is_grounded
        landed = grounded and not self._was_grounded
        self._was_grounded = grounded

        if not (self.enabled and grounded):
            return False
        if not (landed or self.speed.velocity_changed):
            return False
        self.apply()
        return True

    def apply(self) -> None:
        s = self.scaling
        max_speed = self.speed.max_speed
        fraction = abs(self.speed.velocity) / max_speed if max_speed > 0 else 0.0

        apex = lerp(s.min_apex_height, s.max_apex_height, fraction)
        ratio = math.sqrt(apex / s.max_apex_height) if s.max_apex_height > 0 else 1.0

        self.jump.apex_height = apex
        self.jump.time_to_apex = max(MIN_ALLOWED_TIME, s.time_to_max_apex * ratio)
        self.jump.time_from_apex = max(MIN_ALLOWED_TIME, s.time_from_max_apex * ratio)
        logger.debug(
            "jump rescaled: apex=%.2f to_apex=%.3f from_apex=%.3f",
            apex, self.jump.time_to_apex, self.jump.time_from_apex,
        )
