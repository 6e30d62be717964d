# entities/player.py
from __future__ import annotations

from typing import Optional, Sequence

import pygame

from core.clock import SimulationClock
from core.events import EventBus
from core.settings import GRAVITY_Y, GROUND_LAYER, GROUND_PROBE_HEIGHT, PLAYER_SIZE
from core.tuning import JumpScaling, JumpTuning, MovementTuning
from physics.body import Body, Collider
from physics.ground import GroundSensor, feet_probe
from physics.jump import JumpController, JumpResult
from physics.jump_tuner import JumpTuner
from physics.movement import Mover


class Player:
    """
    The platforming character: a body plus the controllers that drive it.

    Each fixed step runs, in order:
      ground sensor -> mover -> jump tuner -> jump controller -> body
    The tuner runs before the jump controller so a buffered jump fired on
    landing already uses the speed-scaled jump.
    """

    def __init__(
        self,
        x: float,
        y: float,
        solids: Sequence[Collider],
        clock: Optional[SimulationClock] = None,
        movement: Optional[MovementTuning] = None,
        jump: Optional[JumpTuning] = None,
        scaling: Optional[JumpScaling] = None,
        gravity_y: float = GRAVITY_Y,
        scale_jump_with_speed: bool = True,
    ):
        w, h = PLAYER_SIZE
        self.solids = solids
        self.gravity_y = gravity_y
        self.clock = clock if clock is not None else SimulationClock()
        self.events = EventBus()

        self.body = Body(x, y, w, h)
        self.ground = GroundSensor(
            [feet_probe(self.body, solids, GROUND_PROBE_HEIGHT)], ground_mask=GROUND_LAYER
        )
        self.mover = Mover(self.body, movement)
        self.jumper = JumpController(
            self.body, self.ground, self.clock, jump, gravity_y=gravity_y, events=self.events
        )
        self.jump_tuner = JumpTuner(self.mover, self.ground, self.jumper.tuning, scaling)
        self.jump_tuner.enabled = scale_jump_with_speed

        self.facing = 1

    # read-only snapshot, consistent between fixed steps
    @property
    def velocity(self) -> pygame.Vector2:
        return pygame.Vector2(self.body.vel)

    @property
    def is_grounded(self) -> bool:
        return self.ground.is_grounded

    @property
    def can_jump(self) -> bool:
        return self.jumper.can_jump

    @property
    def rect(self) -> pygame.Rect:
        return self.body.rect

    def move(self, direction: float) -> int:
        applied = self.mover.move(direction)
        if applied != 0:
            self.facing = applied
        return applied

    def jump(self) -> JumpResult:
        return self.jumper.request_jump()

    def fixed_update(self, dt: float) -> None:
        self.ground.refresh()
        self.mover.fixed_update(dt)
        self.jump_tuner.fixed_update()
        self.jumper.fixed_update()
        self.body.step(dt, self.gravity_y, self.solids)
