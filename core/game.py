# core/game.py
import logging

import pygame

from core.clock import FixedStepScheduler, SimulationClock
from core.input import Input
from core.settings import (
    BG_COLOR,
    FIXED_DT,
    FPS,
    HEIGHT,
    MAX_FRAME_DT,
    PLAYER_AIR_COLOR,
    PLAYER_COLOR,
    TILE_COLOR,
    TITLE,
    WIDTH,
)
from world.level import Level

logger = logging.getLogger(__name__)


class Game:
    """Sandbox: one level, one player, fixed-step simulation, debug rects."""

    def __init__(self, grid=None):
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True

        self.sim_clock = SimulationClock()
        self.input = Input()
        self.level = Level(grid, clock=self.sim_clock)
        self.scheduler = FixedStepScheduler(self._fixed_step, FIXED_DT, MAX_FRAME_DT, self.sim_clock)

    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                self.input.handle_event(event)
            self.step_frame(dt)
            self.draw()
            pygame.display.flip()

        pygame.quit()

    def step_frame(self, dt: float) -> int:
        if self.input.quit_requested:
            self.running = False
            return 0

        player = self.level.player
        player.move(self.input.direction)
        if self.input.consume_jump():
            result = player.jump()
            logger.debug("jump request -> %s", result.value)

        return self.scheduler.tick(dt)

    def _fixed_step(self, dt: float) -> None:
        self.level.fixed_update(dt)

    def to_screen(self, rect: pygame.Rect) -> pygame.Rect:
        # world is y-up, screen is y-down; bottom of the world sits on the bottom edge
        world_h = self.level.world_rect.height
        offset_y = HEIGHT - world_h
        return pygame.Rect(rect.x, offset_y + world_h - rect.bottom, rect.w, rect.h)

    def draw(self):
        self.screen.fill(BG_COLOR)
        for s in self.level.solids:
            pygame.draw.rect(self.screen, TILE_COLOR, self.to_screen(s.rect))
        player = self.level.player
        col = PLAYER_COLOR if player.is_grounded else PLAYER_AIR_COLOR
        pygame.draw.rect(self.screen, col, self.to_screen(player.rect))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Game().run()
