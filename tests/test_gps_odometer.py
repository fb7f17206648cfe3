import math

import pytest

from trackodom.gps_odometer import GpsOdometer, ecef_to_enu, geodetic_to_ecef

A = 6378137.0
B = 6356752.0


def test_ecef_on_equator_prime_meridian():
    assert geodetic_to_ecef(0.0, 0.0, 0.0, A, B) == pytest.approx((A, 0.0, 0.0))


def test_ecef_at_pole_is_semi_minor_axis():
    x, y, z = geodetic_to_ecef(math.pi / 2, 0.0, 0.0, A, B)
    assert z == pytest.approx(B)
    assert abs(x) < 1e-6 and abs(y) < 1e-6


def test_altitude_adds_along_normal():
    base = geodetic_to_ecef(0.3, 0.2, 0.0, A, B)
    raised = geodetic_to_ecef(0.3, 0.2, 100.0, A, B)
    assert math.dist(base, raised) == pytest.approx(100.0)


@pytest.mark.parametrize("ref", [(0.0, 0.0), (0.8, 0.16), (-0.5, 2.0)])
def test_enu_rotation_preserves_length(ref):
    vec = (12.0, -7.0, 3.0)
    enu = ecef_to_enu(*vec, *ref)
    assert math.hypot(*enu) == pytest.approx(math.hypot(*vec))


def test_enu_at_origin_axes():
    assert ecef_to_enu(0.0, 1.0, 0.0, 0.0, 0.0) == pytest.approx((1.0, 0.0, 0.0))
    assert ecef_to_enu(0.0, 0.0, 1.0, 0.0, 0.0) == pytest.approx((0.0, 1.0, 0.0))


def test_first_fix_is_origin_with_zero_yaw():
    odom = GpsOdometer().update(45.63, 9.28, 200.0)
    assert (odom.x, odom.y, odom.z) == (0.0, 0.0, 0.0)
    assert odom.orientation.yaw() == pytest.approx(0.0)


def test_moving_north_gives_north_heading():
    gps = GpsOdometer()
    gps.update(45.63, 9.28, 200.0)
    odom = gps.update(45.6301, 9.28, 200.0)
    assert odom.y > 0
    assert abs(odom.x) < 1e-6
    assert odom.orientation.yaw() == pytest.approx(math.pi / 2)


def test_moving_east_gives_zero_heading():
    gps = GpsOdometer()
    gps.update(45.63, 9.28, 200.0)
    odom = gps.update(45.63, 9.2801, 200.0)
    assert odom.x > 0
    assert odom.orientation.yaw() == pytest.approx(0.0, abs=1e-3)


def test_stationary_keeps_zero_yaw():
    gps = GpsOdometer()
    gps.update(45.63, 9.28, 200.0)
    odom = gps.update(45.63, 9.28, 200.0)
    assert (odom.x, odom.y) == pytest.approx((0.0, 0.0))
    assert odom.orientation.yaw() == pytest.approx(0.0)


def test_outlier_falls_back_to_average_position():
    gps = GpsOdometer()
    gps.update(45.63, 9.28, 200.0)
    odom = gps.update(50.0, 9.28, 200.0)
    assert (odom.x, odom.y) == pytest.approx((0.0, 0.0), abs=1e-6)