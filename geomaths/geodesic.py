""" Heading, interpolation and destination calculations on a spherical earth """

__all__ = ['destination', 'heading', 'intermediate_point']

import math

import numpy as np

from geomaths._const import EARTH_RADIUS_METERS, EPSILON
from geomaths.angles import degrees_to_radians, normalise_angle, radians_to_degrees
from geomaths.coordinates import GeodeticPoint
from geomaths.exceptions import InvalidArgumentError, NumericDegeneracyError
from geomaths.spherical import angular_distance


def heading(origin: GeodeticPoint, destination: GeodeticPoint) -> float:
    """
    Calculates the initial heading at which an object at the origin will need to
    travel to reach the destination along a great circle.

    Coincident points have a heading of 0.

    Args:
        origin:
            The start point

        destination:
            The end point

    Returns:
        (float) the initial heading in degrees, [0, 360)
    """
    phi1 = degrees_to_radians(origin.latitude)
    phi2 = degrees_to_radians(destination.latitude)
    cos_phi2 = math.cos(phi2)
    d_lambda = degrees_to_radians(destination.longitude - origin.longitude)

    bearing = math.atan2(
        math.sin(d_lambda) * cos_phi2,
        math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * cos_phi2 * math.cos(d_lambda)
    )
    return radians_to_degrees(normalise_angle(bearing))


def intermediate_point(
    origin: GeodeticPoint,
    destination: GeodeticPoint,
    fraction: float
) -> GeodeticPoint:
    """
    Calculates the point a given fraction of the way along the great circle between
    two points.

    Coincident points return a copy of the origin for any fraction. Antipodal points
    have no unique great circle between them and raise NumericDegeneracyError.

    Args:
        origin:
            The start point

        destination:
            The end point

        fraction:
            Position along the path, from 0 (origin) to 1 (destination)

    Returns:
        GeodeticPoint
    """
    if not 0 <= fraction <= 1:
        raise InvalidArgumentError(f'fraction must be between 0 and 1, got {fraction}')

    delta = angular_distance(origin, destination)
    sin_delta = math.sin(delta)
    if abs(sin_delta) < EPSILON:
        if delta < math.pi / 2:
            return GeodeticPoint(origin.latitude, origin.longitude)

        raise NumericDegeneracyError(
            f'Cannot interpolate between antipodal points {origin!r} and {destination!r}'
        )

    weights = np.array([
        math.sin((1 - fraction) * delta) / sin_delta,
        math.sin(fraction * delta) / sin_delta,
    ])
    return GeodeticPoint.from_xyz(weights @ np.vstack([origin.xyz, destination.xyz]))


def destination(origin: GeodeticPoint, heading: float, distance: float) -> GeodeticPoint:
    """
    Given a start location, a heading (in degrees clockwise from North), and a
    distance of travel, returns the finish location.

    Heading and distance are not validated; out-of-range or negative values wrap
    through the trigonometry. The resulting longitude is not normalised.

    The longitude term uses cos(phi1) in the atan2 numerator, as in the usual
    great-circle direct formula. A cos(phi2) variant seen elsewhere does not land on
    the point given by heading() and haversine_distance().

    Args:
        origin:
            The starting location

        heading:
            The heading, in degrees

        distance:
            The distance of travel, in meters

    Returns:
        GeodeticPoint
    """
    phi1 = degrees_to_radians(origin.latitude)
    lambda1 = degrees_to_radians(origin.longitude)
    heading_rad = degrees_to_radians(heading)

    _rad = distance / EARTH_RADIUS_METERS
    sin_phi1, cos_phi1 = math.sin(phi1), math.cos(phi1)
    sin_rad, cos_rad = math.sin(_rad), math.cos(_rad)

    sin_phi2 = sin_phi1 * cos_rad + cos_phi1 * sin_rad * math.cos(heading_rad)
    phi2 = math.asin(max(-1.0, min(1.0, sin_phi2)))
    lambda2 = lambda1 + math.atan2(
        math.sin(heading_rad) * sin_rad * cos_phi1,
        cos_rad - sin_phi1 * sin_phi2
    )

    return GeodeticPoint(radians_to_degrees(phi2), radians_to_degrees(lambda2))
