# physics/body.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import pygame

from core.settings import GROUND_LAYER


@dataclass
class Collider:
    """Static world geometry. y-up: rect.y is the bottom edge, rect.bottom the top."""

    rect: pygame.Rect
    layer: int = GROUND_LAYER


class Body:
    """
    Minimal 2D rigid body (y-up).
      - velocity is written by the movement / jump controllers
      - gravity_scale multiplies the world gravity each step
      - step() integrates and resolves against solid colliders, axis by axis
    """

    def __init__(self, x: float, y: float, w: int, h: int):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(0, 0)
        self.size = (int(w), int(h))
        self.gravity_scale = 1.0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), self.size[0], self.size[1])

    def step(self, dt: float, gravity_y: float, solids: Iterable[Collider] = ()) -> None:
        self.vel.y += gravity_y * self.gravity_scale * dt
        solids = list(solids)

        # X
        self.pos.x += self.vel.x * dt
        self._resolve(solids, axis=0)

        # Y
        self.pos.y += self.vel.y * dt
        self._resolve(solids, axis=1)

    def _resolve(self, solids: List[Collider], axis: int) -> None:
        rect = self.rect
        for s in solids:
            if not rect.colliderect(s.rect):
                continue
            if axis == 0:
                if self.vel.x > 0:
                    self.pos.x = s.rect.left - self.size[0]
                elif self.vel.x < 0:
                    self.pos.x = s.rect.right
                self.vel.x = 0.0
            else:
                if self.vel.y < 0:
                    # falling onto the top face
                    self.pos.y = s.rect.bottom
                elif self.vel.y > 0:
                    self.pos.y = s.rect.top - self.size[1]
                self.vel.y = 0.0
            rect = self.rect
