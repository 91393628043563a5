"""
Vincenty's inverse geodesic solution on an oblate ellipsoid (WGS84 by default).

Equation numbers refer to T. Vincenty, "Direct and Inverse Solutions of Geodesics on the
Ellipsoid with Application of Nested Equations", Survey Review XXIII, 1975.
"""

__all__ = [
    'Ellipsoid', 'VincentyResult', 'WGS84',
    'vincenty_bearing', 'vincenty_distance', 'vincenty_inverse',
]

import math
from typing import NamedTuple

from geomaths._const import (
    EPSILON, VINCENTY_MAX_ITERATIONS, WGS84_A, WGS84_B, WGS84_F
)
from geomaths.angles import degrees_to_radians, normalise_angle, radians_to_degrees
from geomaths.coordinates import GeodeticPoint
from geomaths.exceptions import NumericDegeneracyError
from geomaths.utils.logging import LOGGER


class Ellipsoid(NamedTuple):
    """Reference ellipsoid: semi-major axis a, semi-minor axis b (meters), flattening f"""
    a: float
    b: float
    f: float


WGS84 = Ellipsoid(WGS84_A, WGS84_B, WGS84_F)


class VincentyResult(NamedTuple):
    """
    Outcome of the inverse solver.

    When converged is False the distance and bearing are those of the final
    iteration and may be inaccurate (typically for nearly antipodal points).
    """
    distance: float
    initial_bearing: float
    iterations: int
    converged: bool


def vincenty_inverse(
    origin: GeodeticPoint,
    destination: GeodeticPoint,
    ellipsoid: Ellipsoid = WGS84,
) -> VincentyResult:
    """
    Solves the inverse geodesic problem between two points.

    The iteration on lambda runs at most VINCENTY_MAX_ITERATIONS times and is
    considered converged once, after the first two passes, the relative change
    in lambda drops below EPSILON. Non-convergence is reported through the
    result rather than raised.

    Args:
        origin:
            The first point

        destination:
            The second point

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        VincentyResult
    """
    a, b, f = ellipsoid

    phi1 = degrees_to_radians(origin.latitude)
    phi2 = degrees_to_radians(destination.latitude)
    lambda1 = degrees_to_radians(origin.longitude)
    lambda2 = degrees_to_radians(destination.longitude)

    a2b2b2 = (a ** 2 - b ** 2) / b ** 2
    omega = lambda2 - lambda1

    # Reduced latitudes
    U1 = math.atan((1 - f) * math.tan(phi1))
    U2 = math.atan((1 - f) * math.tan(phi2))
    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    sinU1sinU2 = sinU1 * sinU2
    cosU1sinU2 = cosU1 * sinU2
    sinU1cosU2 = sinU1 * cosU2
    cosU1cosU2 = cosU1 * cosU2

    # eq. 13
    Lambda = omega

    A = 0.0
    sigma = 0.0
    deltaSigma = 0.0
    converged = False
    iterations = 0

    for i in range(VINCENTY_MAX_ITERATIONS):
        iterations = i + 1
        Lambda_prev = Lambda
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSqSigma = (cosU2 * sinLambda) ** 2 + (cosU1sinU2 - sinU1cosU2 * cosLambda) ** 2
        sinSigma = math.sqrt(sinSqSigma)

        # eq. 15
        cosSigma = sinU1sinU2 + cosU1cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17 - sinSqSigma is zero for coincident points
        sinAlpha = 0.0 if sinSqSigma == 0 else cosU1cosU2 * sinLambda / sinSigma
        sinAlpha = max(-1.0, min(1.0, sinAlpha))
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18 - cosSqAlpha is zero for geodesics along the equator
        cos2SigmaM = 0.0 if cosSqAlpha == 0 else cosSigma - 2 * sinU1sinU2 / cosSqAlpha
        cos2SigmaMSq = cos2SigmaM ** 2
        uSq = cosSqAlpha * a2b2b2

        # eq. 3
        A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))

        # eq. 4
        B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))

        # eq. 6
        deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaMSq) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSqSigma) * (-3 + 4 * cos2SigmaMSq)
            )
        )

        # eq. 10
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))

        # eq. 11 (modified)
        Lambda = omega + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaMSq))
        )

        # Relative change; absolute when lambda is exactly zero (meridional geodesics)
        change = abs(Lambda - Lambda_prev)
        if Lambda != 0:
            change = abs(change / Lambda)

        if i > 1 and change < EPSILON:
            converged = True
            break

    if not converged:
        LOGGER.warning(
            'Vincenty solution between %r and %r did not converge after %d iterations',
            origin, destination, iterations
        )

    # eq. 20
    alpha1 = math.atan2(
        cosU2 * math.sin(Lambda),
        cosU1sinU2 - sinU1cosU2 * math.cos(Lambda)
    )

    return VincentyResult(
        # eq. 19
        distance=b * A * (sigma - deltaSigma),
        initial_bearing=radians_to_degrees(normalise_angle(alpha1)),
        iterations=iterations,
        converged=converged,
    )


def _solve_or_raise(
    origin: GeodeticPoint,
    destination: GeodeticPoint,
    ellipsoid: Ellipsoid
) -> VincentyResult:
    result = vincenty_inverse(origin, destination, ellipsoid)
    if not result.converged:
        raise NumericDegeneracyError(
            f'Vincenty formula failed to converge between {origin!r} and {destination!r} '
            f'(points may be nearly antipodal)'
        )
    return result


def vincenty_distance(
    origin: GeodeticPoint,
    destination: GeodeticPoint,
    ellipsoid: Ellipsoid = WGS84,
) -> float:
    """
    Calculates the geodesic distance between two points on the ellipsoid, in meters.

    Raises:
        NumericDegeneracyError: if the solution did not converge
    """
    return _solve_or_raise(origin, destination, ellipsoid).distance


def vincenty_bearing(
    origin: GeodeticPoint,
    destination: GeodeticPoint,
    ellipsoid: Ellipsoid = WGS84,
) -> float:
    """
    Calculates the initial bearing (forward azimuth) on the ellipsoid, in degrees [0, 360).

    Raises:
        NumericDegeneracyError: if the solution did not converge
    """
    return _solve_or_raise(origin, destination, ellipsoid).initial_bearing
