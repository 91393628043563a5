from pytest import approx

from geomaths import GeodeticPoint


def assert_points_equal(p1: GeodeticPoint, p2: GeodeticPoint, abs_tol=1e-7):
    """
    Asserts that two points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeodeticPoint
        p2: The second GeodeticPoint
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(p1.latitude, p1.longitude)
        print(p2.latitude, p2.longitude)
        raise e
