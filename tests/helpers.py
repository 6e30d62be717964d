"""Test doubles for the narrow interfaces the controllers depend on."""

from __future__ import annotations


class FakeGround:
    """Grounded signal driven directly by the test."""

    def __init__(self, grounded: bool = False) -> None:
        self.is_grounded = grounded


class FakeSpeed:
    """Speed source with settable velocity and change flag."""

    def __init__(self, velocity: float = 0.0, max_speed: float = 10.0) -> None:
        self.velocity = velocity
        self.max_speed = max_speed
        self.velocity_changed = False


class FakeVolume:
    def __init__(self, touching_mask: int = 0) -> None:
        self.touching_mask = touching_mask
        self.queries: list[int] = []

    def overlaps(self, mask: int) -> bool:
        self.queries.append(mask)
        return bool(self.touching_mask & mask)
