import math

import pytest

from openrm import delay


def test_yaw_points_at_target():
    result = delay.get_fly_delay(25.0, 3.0, 4.0, 0.5)
    assert result.yaw == pytest.approx(math.atan2(4.0, 3.0))


def test_time_matches_final_pitch():
    speed, x, y, z = 20.0, 5.0, -2.0, 0.3
    result = delay.get_fly_delay(speed, x, y, z)
    distance = math.hypot(x, y)
    assert result.time == pytest.approx(distance / (speed * math.cos(result.pitch)))


def test_level_target_needs_upward_pitch():
    result = delay.get_fly_delay(25.0, 6.0, 0.0, 0.0)
    assert result.pitch > 0.0
    assert result.time > 6.0 / 25.0


def test_trajectory_reaches_target_height():
    speed, x, y, z = 25.0, 5.0, 1.0, 0.4
    result = delay.get_fly_delay(speed, x, y, z)
    t = result.time
    reached = speed * math.sin(result.pitch) * t - 0.5 * delay.GRAVITY * t * t
    assert reached == pytest.approx(z, abs=1e-3)


def test_unreachable_target_falls_back_to_zero_pitch():
    speed, x = 2.0, 50.0
    result = delay.get_fly_delay(speed, x, 0.0, 0.0)
    assert result.pitch == 0.0
    assert result.time == pytest.approx(x / speed)


def test_target_at_origin():
    result = delay.get_fly_delay(10.0, 0.0, 0.0, 0.0)
    assert result.time == 0.0
    assert result.pitch == 0.0


@pytest.mark.parametrize("speed", [0.0, -3.0])
def test_non_positive_speed_rejected(speed):
    with pytest.raises(ValueError):
        delay.get_fly_delay(speed, 1.0, 1.0, 1.0)


def test_rotate_delay_is_zero():
    assert delay.get_rotate_delay(0.3, 1.2) == 0.0