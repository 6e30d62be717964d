# physics/ground.py
from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, Tuple

import pygame

from core.errors import InvalidTuningError
from core.settings import GROUND_LAYER
from physics.body import Body, Collider


class ContactVolume(Protocol):
    def overlaps(self, mask: int) -> bool:
        """True if this volume currently touches any collider in `mask`."""
        ...


class GroundedSignal(Protocol):
    @property
    def is_grounded(self) -> bool:
        ...


class RectContactVolume:
    """
    A probe rect attached to a body, e.g. a thin strip under the feet.
    offset/size are in body-local y-up coordinates.
    """

    def __init__(
        self,
        body: Body,
        offset: Tuple[int, int],
        size: Tuple[int, int],
        colliders: Sequence[Collider],
    ):
        self.body = body
        self.offset = offset
        self.size = size
        self.colliders = colliders

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(
            int(self.body.pos.x) + self.offset[0],
            int(self.body.pos.y) + self.offset[1],
            self.size[0],
            self.size[1],
        )

    def overlaps(self, mask: int) -> bool:
        probe = self.rect
        for c in self.colliders:
            if (c.layer & mask) and probe.colliderect(c.rect):
                return True
        return False


def feet_probe(body: Body, colliders: Sequence[Collider], height: int = 1) -> RectContactVolume:
    """Strip just below the body, inset 1px each side so walls don't count."""
    w = body.size[0]
    return RectContactVolume(body, offset=(1, -height), size=(max(1, w - 2), height), colliders=colliders)


class GroundSensor:
    """
    OR of all contact volumes against the ground mask, refreshed once per
    fixed step. Raw signal: no hysteresis, no filtering.
    """

    def __init__(self, volumes: Optional[Iterable[ContactVolume]], ground_mask: int = GROUND_LAYER):
        if volumes is None:
            raise InvalidTuningError("volumes", "ground sensor has no contact volumes wired")
        self.volumes = list(volumes)
        self.ground_mask = ground_mask
        self._is_grounded = False

    @property
    def is_grounded(self) -> bool:
        return self._is_grounded

    def refresh(self) -> bool:
        self._is_grounded = any(v.overlaps(self.ground_mask) for v in self.volumes)
        return self._is_grounded
