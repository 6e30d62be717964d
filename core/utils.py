# core/utils.py


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def sign(value: float) -> int:
    """-1, 0 or 1. NaN counts as 0."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def lerp(a: float, b: float, t: float) -> float:
    # t clamped to 0..1
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t
