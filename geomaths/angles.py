""" Angle conversion and normalisation helpers """

__all__ = [
    'degrees_to_radians', 'fix_latitude', 'fix_longitude',
    'normalise_angle', 'radians_to_degrees', 'reverse_angle'
]

import math

from geomaths.exceptions import InvalidArgumentError

_FULL_CIRCLE = 2 * math.pi

# Beyond this many steps the range-fixing loops reduce the angle with fmod first
_MAX_STEPS = 1024


def _reduce_large(angle: float, step: float) -> float:
    """
    Removes whole steps from very large angles in one go, leaving a value within two
    steps of zero so the stepping loops finish with the same result they would reach
    one step at a time.
    """
    if math.isinf(angle):
        raise InvalidArgumentError(f'Cannot bring an infinite angle ({angle}) into range')

    if abs(angle) <= _MAX_STEPS * step:
        return angle

    remainder = math.fmod(angle, step)
    return remainder + step if angle > 0 else remainder - step


def fix_longitude(angle: float) -> float:
    """
    Keep a longitudinal angle in the [-180, 180] range by repeatedly adding or
    subtracting a full turn.

    Args:
        angle:
            The longitude, in degrees

    Returns:
        (float) the equivalent longitude in [-180, 180]
    """
    angle = _reduce_large(angle, 360)

    while angle < -180:
        angle += 360

    while angle > 180:
        angle -= 360

    return angle


def fix_latitude(angle: float) -> float:
    """
    Keep a latitudinal angle in the [-90, 90] range.

    Note the step is 90 degrees, not a reflection over the pole: 100 becomes 10,
    not 80. Use for display purposes only.

    Args:
        angle:
            The latitude, in degrees

    Returns:
        (float) the angle in [-90, 90]
    """
    angle = _reduce_large(angle, 90)

    while angle < -90:
        angle += 90

    while angle > 90:
        angle -= 90

    return angle


def degrees_to_radians(degrees: float) -> float:
    """Converts decimal degrees to radians"""
    return degrees if degrees == 0 else degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """Converts radians to decimal degrees"""
    return radians if radians == 0 else radians / math.pi * 180.0


def normalise_angle(radians: float) -> float:
    """
    Keep an angle in the [0, 2*pi) range

    Args:
        radians:
            The angle, in radians

    Returns:
        (float) the normalised angle, in radians
    """
    radians = math.fmod(radians, _FULL_CIRCLE)
    if radians < 0:
        radians += _FULL_CIRCLE

    # Tiny negative remainders round up to a full turn
    return 0.0 if radians >= _FULL_CIRCLE else radians


def reverse_angle(radians: float) -> float:
    """Returns the opposite direction of an angle, normalised to [0, 2*pi)"""
    return normalise_angle(radians + math.pi)
