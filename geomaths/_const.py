"""
Constants declarations for geomaths
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.3142  # Minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Sphere radius used by the spherical formulas. Differs from WGS84_A.
EARTH_RADIUS_METERS = 6_378_135.0

# Vincenty convergence threshold and iteration cap
EPSILON = 1e-13
VINCENTY_MAX_ITERATIONS = 20

MILES_PER_KILOMETRE = 0.621371192
