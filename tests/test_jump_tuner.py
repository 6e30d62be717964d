"""Tests for speed-scaled jump tuning."""

from __future__ import annotations

import math

import pytest

from core.settings import MIN_ALLOWED_TIME
from core.tuning import JumpScaling, JumpTuning
from physics.jump_tuner import JumpTuner
from tests.helpers import FakeGround, FakeSpeed


@pytest.fixture
def speed() -> FakeSpeed:
    return FakeSpeed(velocity=0.0, max_speed=10.0)


@pytest.fixture
def jump() -> JumpTuning:
    return JumpTuning(apex_height=1.0, time_to_apex=0.1, time_from_apex=0.1)


def make_tuner(speed: FakeSpeed, ground: FakeGround, jump: JumpTuning, **scaling: float) -> JumpTuner:
    params = dict(min_apex_height=2.0, max_apex_height=8.0, time_to_max_apex=1.0, time_from_max_apex=0.5)
    params.update(scaling)
    return JumpTuner(speed, ground, jump, JumpScaling(**params))


class TestJumpTuner:
    def test_rescales_on_landing(self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning) -> None:
        tuner = make_tuner(speed, ground, jump)
        speed.velocity = 10.0

        ground.is_grounded = True
        assert tuner.fixed_update() is True

        assert jump.apex_height == pytest.approx(8.0)
        assert jump.time_to_apex == pytest.approx(1.0)
        assert jump.time_from_apex == pytest.approx(0.5)

    def test_standing_still_gives_min_jump(self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning) -> None:
        ground.is_grounded = True
        make_tuner(speed, ground, jump).fixed_update()

        assert jump.apex_height == pytest.approx(2.0)
        assert jump.time_to_apex == pytest.approx(0.5)
        assert jump.time_from_apex == pytest.approx(0.25)

    @pytest.mark.parametrize("velocity", [-10.0, -5.0, 2.5, 7.5])
    def test_height_linear_in_speed_and_rise_accel_constant(
        self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning, velocity: float
    ) -> None:
        speed.velocity = velocity
        ground.is_grounded = True
        make_tuner(speed, ground, jump).fixed_update()

        expected_apex = 2.0 + 6.0 * abs(velocity) / 10.0
        assert jump.apex_height == pytest.approx(expected_apex)
        assert jump.time_to_apex == pytest.approx(math.sqrt(expected_apex / 8.0))
        # 2h/t^2 matches the max jump: 2*8/1^2
        assert 2 * jump.apex_height / jump.time_to_apex**2 == pytest.approx(16.0)

    def test_noop_while_airborne(self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning) -> None:
        tuner = make_tuner(speed, ground, jump)
        speed.velocity = 10.0
        speed.velocity_changed = True
        assert tuner.fixed_update() is False
        assert jump.apex_height == 1.0

    def test_noop_when_disabled(self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning) -> None:
        tuner = make_tuner(speed, ground, jump)
        tuner.enabled = False
        ground.is_grounded = True
        assert tuner.fixed_update() is False
        assert jump.apex_height == 1.0

    def test_follows_velocity_changes_while_grounded(
        self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning
    ) -> None:
        tuner = make_tuner(speed, ground, jump)
        ground.is_grounded = True
        tuner.fixed_update()

        speed.velocity = 5.0
        assert tuner.fixed_update() is False  # no change reported
        assert jump.apex_height == pytest.approx(2.0)

        speed.velocity_changed = True
        assert tuner.fixed_update() is True
        assert jump.apex_height == pytest.approx(5.0)

    def test_zero_heights_floor_times(self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning) -> None:
        ground.is_grounded = True
        make_tuner(speed, ground, jump, min_apex_height=0.0).fixed_update()
        assert jump.apex_height == 0.0
        assert jump.time_to_apex == MIN_ALLOWED_TIME
        assert jump.time_from_apex == MIN_ALLOWED_TIME

    def test_zero_max_apex_height(self, speed: FakeSpeed, ground: FakeGround, jump: JumpTuning) -> None:
        ground.is_grounded = True
        make_tuner(speed, ground, jump, min_apex_height=0.0, max_apex_height=0.0).fixed_update()
        assert jump.apex_height == 0.0
        assert jump.time_to_apex == pytest.approx(1.0)

    def test_zero_max_speed(self, ground: FakeGround, jump: JumpTuning) -> None:
        speed = FakeSpeed(velocity=0.0, max_speed=0.0)
        ground.is_grounded = True
        make_tuner(speed, ground, jump).fixed_update()
        assert jump.apex_height == pytest.approx(2.0)
