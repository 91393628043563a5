# geomaths/distance.py
"""
Geodesic calculation dispatch module.
Supports switching between Haversine (sphere) and Vincenty (ellipsoid) calculations.
"""

__all__ = [
    'bearing_degrees', 'distance_meters',
    'get_geodesic_algorithm', 'set_geodesic_algorithm',
]

from typing import Literal

from geomaths.ellipsoid import vincenty_bearing, vincenty_distance
from geomaths.exceptions import InvalidArgumentError
from geomaths.geodesic import heading
from geomaths.spherical import haversine_distance
from geomaths.utils.logging import LOGGER


# These declare the distance algo in use (default haversine)
distance_meters = haversine_distance
bearing_degrees = heading

_ALGORITHM = 'haversine'

_ALGORITHMS = {
    'haversine': (
        haversine_distance,
        heading,
    ),
    'vincenty': (
        vincenty_distance,
        vincenty_bearing,
    ),
}


def set_geodesic_algorithm(algorithm: Literal['haversine', 'vincenty']):
    """
    Set the global geodesic calculation method used by distance_meters and
    bearing_degrees.

    Callers should reference the functions through the module
    (distance.distance_meters) so that the switch takes effect.

    Args:
        algorithm: 'haversine' or 'vincenty'
    """
    global distance_meters, bearing_degrees, _ALGORITHM

    if algorithm not in _ALGORITHMS:
        raise InvalidArgumentError(
            f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}"
        )

    distance_meters, bearing_degrees = _ALGORITHMS[algorithm]
    _ALGORITHM = algorithm
    LOGGER.info('Geodesic algorithm set to %s', algorithm)


def get_geodesic_algorithm() -> str:
    """Returns the name of the geodesic algorithm currently in use"""
    return _ALGORITHM
