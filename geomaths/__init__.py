
from geomaths._version import __version__  # noqa: F401
from geomaths.utils.logging import LOGGER
from geomaths.coordinates import GeodeticPoint
from geomaths.angles import (
    degrees_to_radians, fix_latitude, fix_longitude, normalise_angle,
    radians_to_degrees, reverse_angle
)
from geomaths.ellipsoid import (
    WGS84, Ellipsoid, VincentyResult, vincenty_bearing, vincenty_distance, vincenty_inverse
)
from geomaths.exceptions import GeomathsError, InvalidArgumentError, NumericDegeneracyError
from geomaths.geodesic import destination, heading, intermediate_point
from geomaths.spherical import (
    angular_distance, angular_distances, haversine_distance, haversine_distances
)
from geomaths.units import kilometres_to_miles, miles_to_kilometres

__all__ = [
    'Ellipsoid',
    'GeodeticPoint',
    'GeomathsError',
    'InvalidArgumentError',
    'NumericDegeneracyError',
    'VincentyResult',
    'WGS84',
    'LOGGER',
    'angular_distance',
    'angular_distances',
    'degrees_to_radians',
    'destination',
    'fix_latitude',
    'fix_longitude',
    'haversine_distance',
    'haversine_distances',
    'heading',
    'intermediate_point',
    'kilometres_to_miles',
    'miles_to_kilometres',
    'normalise_angle',
    'radians_to_degrees',
    'reverse_angle',
    'vincenty_bearing',
    'vincenty_distance',
    'vincenty_inverse',
]
