# core/input.py
import pygame

from core.settings import KEYS_JUMP, KEYS_LEFT, KEYS_RIGHT


class Input:
    """
    Keyboard events -> movement direction + one-shot jump presses.
    Feed every pygame event through handle_event(); read direction each step.
    """

    def __init__(self):
        self._left = False
        self._right = False
        self._jump_pressed = False
        self.quit_requested = False

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True
            if event.key in KEYS_LEFT:
                self._left = True
            if event.key in KEYS_RIGHT:
                self._right = True
            if event.key in KEYS_JUMP:
                self._jump_pressed = True

        elif event.type == pygame.KEYUP:
            if event.key in KEYS_LEFT:
                self._left = False
            if event.key in KEYS_RIGHT:
                self._right = False

    @property
    def direction(self) -> int:
        # both held cancels out
        return int(self._right) - int(self._left)

    def consume_jump(self) -> bool:
        pressed = self._jump_pressed
        self._jump_pressed = False
        return pressed
