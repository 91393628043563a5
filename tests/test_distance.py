import logging

import pytest

from geomaths import GeodeticPoint, distance
from geomaths.ellipsoid import vincenty_bearing, vincenty_distance
from geomaths.exceptions import InvalidArgumentError
from geomaths.geodesic import heading
from geomaths.spherical import haversine_distance


@pytest.fixture
def reset_algorithm():
    yield
    distance.set_geodesic_algorithm('haversine')


def test_default_algorithm():
    c1, c2 = GeodeticPoint(0., 0.), GeodeticPoint(0.1, 0.1)
    assert distance.get_geodesic_algorithm() == 'haversine'
    assert distance.distance_meters(c1, c2) == haversine_distance(c1, c2)
    assert distance.bearing_degrees(c1, c2) == heading(c1, c2)


def test_set_geodesic_algorithm(reset_algorithm, caplog):
    caplog.set_level(logging.INFO, logger='geomaths')
    c1, c2 = GeodeticPoint(0., 0.), GeodeticPoint(0.1, 0.1)

    distance.set_geodesic_algorithm('vincenty')
    assert distance.get_geodesic_algorithm() == 'vincenty'
    assert distance.distance_meters(c1, c2) == vincenty_distance(c1, c2)
    assert distance.bearing_degrees(c1, c2) == vincenty_bearing(c1, c2)
    assert 'Geodesic algorithm set to vincenty' in caplog.text

    distance.set_geodesic_algorithm('haversine')
    assert distance.distance_meters(c1, c2) == haversine_distance(c1, c2)

    with pytest.raises(InvalidArgumentError):
        distance.set_geodesic_algorithm('made up')

    # Failed switch leaves the selection untouched
    assert distance.get_geodesic_algorithm() == 'haversine'
