import math

import pytest

from trackodom.odometer import BicycleOdometer


def test_initial_heading_points_along_y():
    odo = BicycleOdometer()
    odom = odo.update(0.0, 0.0, 0.0)
    assert odom.orientation.yaw() == pytest.approx(math.pi / 2)
    assert (odom.x, odom.y) == (0.0, 0.0)


def test_straight_line_moves_along_y():
    odo = BicycleOdometer()
    odom = odo.update(0.0, 36.0, 1.0)
    assert odom.x == pytest.approx(0.0, abs=1e-9)
    assert odom.y == pytest.approx(10.0)
    assert odom.angular_velocity == 0.0
    assert odom.linear_velocity == pytest.approx(10.0)


def test_zero_interval_does_not_move():
    odo = BicycleOdometer(start_time=5.0)
    odom = odo.update(90.0, 50.0, 5.0)
    assert (odom.x, odom.y) == (0.0, 0.0)


def test_positive_steer_turns_left():
    odo = BicycleOdometer()
    odom = odo.update(100.0, 20.0, 1.0)
    assert odom.angular_velocity > 0
    assert odom.x < 0
    assert odom.orientation.yaw() > math.pi / 2


def test_heading_grows_by_omega_dt():
    odo = BicycleOdometer()
    first = odo.update(60.0, 30.0, 0.5)
    second = odo.update(60.0, 30.0, 1.5)
    assert odo.theta == pytest.approx(math.pi / 2 + first.angular_velocity * 1.5)
    assert second.angular_velocity == pytest.approx(first.angular_velocity)


def test_constant_turn_stays_on_circle():
    odo = BicycleOdometer()
    odom = odo.update(80.0, 25.0, 0.0)
    radius = odom.linear_velocity / odom.angular_velocity
    # Turning left from heading +y, the centre lies on the -x side.
    centre = (-radius, 0.0)
    for step in range(1, 6):
        odom = odo.update(80.0, 25.0, step * 0.7)
        assert math.dist((odom.x, odom.y), centre) == pytest.approx(abs(radius))


def test_frames():
    odom = BicycleOdometer().update(0.0, 10.0, 1.0)
    assert (odom.frame_id, odom.child_frame_id, odom.stamp) == ("world", "vehicle", 1.0)