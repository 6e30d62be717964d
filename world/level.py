# world/level.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pygame

from core.clock import SimulationClock
from core.settings import GROUND_LAYER, TILE_SIZE
from entities.player import Player
from physics.body import Collider

logger = logging.getLogger(__name__)

# Tile legend:
# '.' empty
# '#' ground
# 'P' player spawn (treated as empty)

DEMO_LEVEL = [
    "....................",
    "....................",
    "...........###......",
    "....................",
    "......###.......##..",
    "....................",
    "..P.................",
    "####################",
]


class Level:
    """
    Sandbox level built from an ASCII grid. World coordinates are y-up:
    row 0 of the grid is the top of the world.
    """

    def __init__(self, grid: Optional[Sequence[str]] = None, clock: Optional[SimulationClock] = None):
        self.grid = [str(row) for row in (grid if grid is not None else DEMO_LEVEL)]
        self.rows = len(self.grid)
        self.cols = max((len(r) for r in self.grid), default=0)
        self.world_rect = pygame.Rect(0, 0, self.cols * TILE_SIZE, self.rows * TILE_SIZE)

        self.solids = self._build_solids()
        spawn = self._find_player_spawn()
        self.player = Player(spawn.x, spawn.y, self.solids, clock=clock)
        logger.debug("level %dx%d, %d solids, spawn=%s", self.cols, self.rows, len(self.solids), spawn)

    def tile_origin(self, col: int, row: int) -> pygame.Vector2:
        """Bottom-left corner of a grid cell in world space."""
        return pygame.Vector2(col * TILE_SIZE, (self.rows - 1 - row) * TILE_SIZE)

    def _build_solids(self) -> List[Collider]:
        solids = []
        for row, line in enumerate(self.grid):
            for col, ch in enumerate(line):
                if ch == "#":
                    o = self.tile_origin(col, row)
                    solids.append(Collider(pygame.Rect(int(o.x), int(o.y), TILE_SIZE, TILE_SIZE), GROUND_LAYER))
        return solids

    def _find_player_spawn(self) -> pygame.Vector2:
        for row, line in enumerate(self.grid):
            for col, ch in enumerate(line):
                if ch == "P":
                    return self.tile_origin(col, row) + pygame.Vector2(8, 0)
        return pygame.Vector2(TILE_SIZE * 2, TILE_SIZE * 2)

    def fixed_update(self, dt: float) -> None:
        self.player.fixed_update(dt)
