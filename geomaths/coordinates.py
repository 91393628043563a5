"""
Representation of a specific point on earth
"""

__all__ = ['GeodeticPoint']

from functools import cached_property
from typing import Tuple, Union

import numpy as np

from geomaths.angles import (
    degrees_to_radians, fix_latitude, fix_longitude, radians_to_degrees
)
from geomaths.utils.logging import warn_once


class GeodeticPoint:
    """
    An immutable latitude/longitude pair, in decimal degrees.

    Values are stored exactly as given. A point outside the conventional
    [-90, 90] / [-180, 180] ranges is accepted (with a one-time warning) and is
    only brought into range by an explicit call to .normalised().
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not (-90 <= lat <= 90 and -180 <= lon <= 180):
            warn_once(
                'GeodeticPoint created outside the [-90, 90] latitude / [-180, 180] longitude '
                'range; values are not normalised automatically. (this warning will not repeat)'
            )

        object.__setattr__(self, '_latitude', lat)
        object.__setattr__(self, '_longitude', lon)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeodeticPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude  # type: ignore

    @property
    def longitude(self) -> float:
        return self._longitude  # type: ignore

    @cached_property
    def xyz(self) -> np.ndarray:
        """Converts lat/lon to a unit vector [x, y, z]"""
        phi, lam = self.to_radians()
        return np.array([
            np.cos(phi) * np.cos(lam),
            np.cos(phi) * np.sin(lam),
            np.sin(phi),
        ])

    @classmethod
    def from_xyz(cls, xyz) -> 'GeodeticPoint':
        """
        Creates a point from a cartesian vector. The vector does not need to be
        of unit length.
        """
        x, y, z = (float(val) for val in xyz)
        return cls(
            radians_to_degrees(np.arctan2(z, np.hypot(x, y))),
            radians_to_degrees(np.arctan2(y, x)),
        )

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a point from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeodeticPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lon))

    def normalised(self) -> 'GeodeticPoint':
        """
        Returns a new point with latitude and longitude brought into range using
        fix_latitude and fix_longitude.
        """
        return GeodeticPoint(fix_latitude(self.latitude), fix_longitude(self.longitude))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of degrees, minutes, seconds, hemisphere

        Returns:
            ((degrees, minutes, seconds, hemisphere), (degrees, minutes, seconds, hemisphere))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def to_radians(self) -> Tuple[float, float]:
        """Returns (latitude, longitude) in radians"""
        return degrees_to_radians(self.latitude), degrees_to_radians(self.longitude)
