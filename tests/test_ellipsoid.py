import pytest
from pytest import approx

from geomaths import GeodeticPoint
from geomaths.ellipsoid import *
from geomaths.exceptions import NumericDegeneracyError

LANDS_END = GeodeticPoint(50.066389, -5.714722)
JOHN_O_GROATS = GeodeticPoint(58.643889, -3.070000)


def test_wgs84():
    assert WGS84.a == 6378137.
    assert WGS84.b == 6356752.3142
    assert WGS84.f == approx(1 / 298.257223563)


def test_vincenty_inverse():
    result = vincenty_inverse(LANDS_END, JOHN_O_GROATS)
    assert isinstance(result, VincentyResult)
    assert result.converged
    assert result.iterations == 5
    assert result.distance == approx(969_932.985, abs=1e-3)

    # Same ellipsoid passed explicitly
    assert vincenty_inverse(LANDS_END, JOHN_O_GROATS, WGS84) == result


def test_vincenty_inverse_dms_fixture():
    # Land's End to John o' Groats from their published DMS positions
    origin = GeodeticPoint.from_dms((50, 3, 58.76, 'N'), (5, 42, 53.10, 'W'))
    dest = GeodeticPoint.from_dms((58, 38, 38.48, 'N'), (3, 4, 12.34, 'W'))
    assert vincenty_inverse(origin, dest).distance == approx(969_954.114, abs=1e-3)


def test_vincenty_inverse_coincident():
    p = GeodeticPoint(12.5, 45.)
    result = vincenty_inverse(p, p)
    assert result.converged
    assert result.distance == 0.
    assert result.initial_bearing == 0.

    # Never converges before the third iteration
    assert result.iterations == 3


def test_vincenty_inverse_equatorial():
    # cos^2(alpha) is exactly zero along the equator
    result = vincenty_inverse(GeodeticPoint(0., 0.), GeodeticPoint(0., 1.))
    assert result.converged
    assert result.distance == approx(111_319.490793, abs=1e-5)
    assert result.initial_bearing == approx(90.)


def test_vincenty_inverse_meridional():
    # lambda stays at exactly zero
    result = vincenty_inverse(GeodeticPoint(10., 0.), GeodeticPoint(20., 0.))
    assert result.converged
    assert result.iterations == 3
    assert result.distance == approx(1_106_511.420930, abs=1e-5)
    assert result.initial_bearing == 0.


def test_vincenty_inverse_antipodal(caplog):
    result = vincenty_inverse(GeodeticPoint(0., 0.), GeodeticPoint(0., 180.))
    assert not result.converged
    assert result.iterations == 20
    assert 'did not converge' in caplog.text


def test_vincenty_distance():
    # Checked against PyGeodesy library results
    expected = 156.903468
    actual = vincenty_distance(GeodeticPoint(0.0, 0.0), GeodeticPoint(0.001, 0.001))
    assert expected == approx(actual, abs=1e-5)

    expected = 156_899.568291
    actual = vincenty_distance(GeodeticPoint(0.0, 0.0), GeodeticPoint(1.0, 1.0))
    assert expected == approx(actual, abs=1e-5)

    # Antimeridian test
    expected = 222_638.981586
    actual = vincenty_distance(GeodeticPoint(0., 179.), GeodeticPoint(0., -179.))
    assert expected == approx(actual, abs=1e-5)

    with pytest.raises(NumericDegeneracyError):
        vincenty_distance(GeodeticPoint(0., 0.), GeodeticPoint(0., 180.))


def test_vincenty_bearing():
    expected = 45.192423
    actual = vincenty_bearing(GeodeticPoint(0.0, 0.0), GeodeticPoint(0.001, 0.001))
    assert actual == approx(expected, abs=1e-6)

    assert vincenty_bearing(GeodeticPoint(0., 0.), GeodeticPoint(-1., 0.)) == approx(180.)

    with pytest.raises(NumericDegeneracyError):
        vincenty_bearing(GeodeticPoint(0., 0.), GeodeticPoint(0., 180.))


def test_custom_ellipsoid():
    # A sphere: no flattening, Vincenty reduces to the great circle distance
    sphere = Ellipsoid(6_378_135., 6_378_135., 0.)
    result = vincenty_inverse(GeodeticPoint(0., 0.), GeodeticPoint(0., 90.), sphere)
    assert result.converged
    assert result.distance == approx(6_378_135. * 3.141592653589793 / 2)
