# core/tuning.py
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping

from core import settings
from core.errors import InvalidTuningError

logger = logging.getLogger(__name__)


class TuningField:
    """
    Validated float attribute.
    - Runtime assignment outside the allowed range raises InvalidTuningError
      and keeps the old value.
    - `clamp_floor` is what sanitize() clamps to (designer-time path).
    """

    def __init__(self, positive: bool = False, doc: str = ""):
        self.positive = positive
        self.clamp_floor = settings.MIN_ALLOWED_TIME if positive else 0.0
        self.__doc__ = doc

    def __set_name__(self, owner, name: str):
        self.name = name
        self.attr = "_" + name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return getattr(obj, self.attr)

    def __set__(self, obj, value) -> None:
        try:
            value = float(value)
        except (TypeError, ValueError):
            logger.warning("Rejected %s=%r on %s", self.name, value, type(obj).__name__)
            raise InvalidTuningError(self.name, f"must be a number, got {value!r}") from None
        ok = math.isfinite(value) and (value > 0.0 if self.positive else value >= 0.0)
        if not ok:
            requirement = "positive and finite" if self.positive else "non-negative and finite"
            logger.warning("Rejected %s=%r on %s", self.name, value, type(obj).__name__)
            raise InvalidTuningError(self.name, f"must be {requirement}, got {value!r}")
        setattr(obj, self.attr, value)

    def sanitize(self, obj) -> None:
        value = getattr(obj, self.attr)
        if not math.isfinite(value) or value < self.clamp_floor:
            setattr(obj, self.attr, self.clamp_floor)


class Tuning:
    """Base for tuning groups: fields declared as TuningField class attributes."""

    def fields(self) -> Dict[str, TuningField]:
        return {
            name: f for name, f in vars(type(self)).items() if isinstance(f, TuningField)
        }

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.fields()}

    def sanitize(self) -> "Tuning":
        """Clamp every field into range instead of failing (editor / file path)."""
        for f in self.fields().values():
            f.sanitize(self)
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], sanitize: bool = False):
        obj = cls()
        known = obj.fields()
        for key, value in data.items():
            if key not in known:
                raise InvalidTuningError(key, f"unknown {cls.__name__} field")
            if sanitize:
                # bypass the setter, then clamp
                try:
                    setattr(obj, known[key].attr, float(value))
                except (TypeError, ValueError):
                    raise InvalidTuningError(key, f"must be a number, got {value!r}") from None
            else:
                setattr(obj, key, value)
        if sanitize:
            obj.sanitize()
        return obj

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"{type(self).__name__}({inner})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.as_dict() == other.as_dict()


class MovementTuning(Tuning):
    max_speed = TuningField(doc="Top horizontal speed with no friction.")
    time_to_max_speed = TuningField(doc="Seconds from rest to max speed. 0 = instant.")
    time_to_stop = TuningField(doc="Seconds from max speed to rest. 0 = instant.")

    def __init__(
        self,
        max_speed: float = settings.MAX_SPEED,
        time_to_max_speed: float = settings.TIME_TO_MAX_SPEED,
        time_to_stop: float = settings.TIME_TO_STOP,
    ):
        self.max_speed = max_speed
        self.time_to_max_speed = time_to_max_speed
        self.time_to_stop = time_to_stop


class JumpTuning(Tuning):
    apex_height = TuningField(doc="Height at the top of the jump.")
    time_to_apex = TuningField(positive=True, doc="Seconds to reach the apex.")
    time_from_apex = TuningField(positive=True, doc="Seconds to fall from the apex to the ground.")
    jump_after_leaving_ground_delay = TuningField(doc="Coyote time, seconds.")
    jump_before_landing_delay = TuningField(doc="Jump buffer, seconds.")

    def __init__(
        self,
        apex_height: float = settings.APEX_HEIGHT,
        time_to_apex: float = settings.TIME_TO_APEX,
        time_from_apex: float = settings.TIME_FROM_APEX,
        jump_after_leaving_ground_delay: float = settings.JUMP_AFTER_LEAVING_GROUND_DELAY,
        jump_before_landing_delay: float = settings.JUMP_BEFORE_LANDING_DELAY,
    ):
        self.apex_height = apex_height
        self.time_to_apex = time_to_apex
        self.time_from_apex = time_from_apex
        self.jump_after_leaving_ground_delay = jump_after_leaving_ground_delay
        self.jump_before_landing_delay = jump_before_landing_delay


class JumpScaling(Tuning):
    """Parameters for scaling jumps by run speed (see physics/jump_tuner.py)."""

    min_apex_height = TuningField()
    max_apex_height = TuningField()
    time_to_max_apex = TuningField(positive=True)
    time_from_max_apex = TuningField(positive=True)

    def __init__(
        self,
        min_apex_height: float = settings.MIN_APEX_HEIGHT,
        max_apex_height: float = settings.MAX_APEX_HEIGHT,
        time_to_max_apex: float = settings.TIME_TO_MAX_APEX,
        time_from_max_apex: float = settings.TIME_FROM_MAX_APEX,
    ):
        self.min_apex_height = min_apex_height
        self.max_apex_height = max_apex_height
        self.time_to_max_apex = time_to_max_apex
        self.time_from_max_apex = time_from_max_apex
