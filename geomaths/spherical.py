"""
Great-circle calculations on a spherical earth of radius EARTH_RADIUS_METERS
"""

__all__ = [
    'angular_distance', 'angular_distances', 'haversine_distance', 'haversine_distances'
]

import math
from typing import Sequence, Union

import numpy as np

from geomaths._const import EARTH_RADIUS_METERS
from geomaths.angles import degrees_to_radians
from geomaths.coordinates import GeodeticPoint
from geomaths.exceptions import InvalidArgumentError

_PointArray = Union[Sequence[GeodeticPoint], np.ndarray]


def angular_distance(point1: GeodeticPoint, point2: GeodeticPoint) -> float:
    """
    Calculates the central angle between two points using the Haversine formula.

    Args:
        point1:
            The first point

        point2:
            The second point

    Returns:
        (float) the angular distance, in radians
    """
    phi1 = degrees_to_radians(point1.latitude)
    phi2 = degrees_to_radians(point2.latitude)
    d_phi = degrees_to_radians(point2.latitude - point1.latitude)
    d_lambda = degrees_to_radians(point2.longitude - point1.longitude)

    var1 = (
        math.sin(d_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    # Rounding can push the term just outside [0, 1] for nearly antipodal points,
    # or for one place written with an out-of-range latitude
    var1 = max(0.0, min(var1, 1.0))
    return 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def haversine_distance(point1: GeodeticPoint, point2: GeodeticPoint) -> float:
    """Calculates the great circle distance between two points, in meters"""
    return EARTH_RADIUS_METERS * angular_distance(point1, point2)


def _as_radians_array(points: _PointArray) -> np.ndarray:
    """Converts points, or an (n, 2) array of [lat, lon] degrees, to radians"""
    if isinstance(points, np.ndarray):
        arr = np.atleast_2d(points.astype(float))
    else:
        arr = np.array([p.to_float() for p in points], dtype=float).reshape(-1, 2)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgumentError(
            f'Expected an array of [latitude, longitude] pairs, got shape {arr.shape}'
        )
    return np.deg2rad(arr)


def angular_distances(origins: _PointArray, destinations: _PointArray) -> np.ndarray:
    """
    Vectorized angular_distance over pairs of points.

    Args:
        origins:
            A sequence of GeodeticPoints, or an (n, 2) array of [latitude, longitude]

        destinations:
            A sequence of the same length and form as origins

    Returns:
        numpy array of n angular distances, in radians
    """
    start, end = _as_radians_array(origins), _as_radians_array(destinations)
    if start.shape != end.shape:
        raise InvalidArgumentError(
            f'origins and destinations must be the same length ({len(start)} != {len(end)})'
        )

    phi1, phi2 = start[:, 0], end[:, 0]
    d_phi = phi2 - phi1
    d_lambda = end[:, 1] - start[:, 1]

    var1 = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    var1 = np.clip(var1, 0.0, 1.0)
    return 2 * np.arctan2(np.sqrt(var1), np.sqrt(1 - var1))


def haversine_distances(origins: _PointArray, destinations: _PointArray) -> np.ndarray:
    """Vectorized haversine_distance over pairs of points, in meters"""
    return EARTH_RADIUS_METERS * angular_distances(origins, destinations)
