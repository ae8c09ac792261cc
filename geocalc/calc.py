"""
Geodetic calculations: distances, headings, midpoints and destination points.

Scalar functions take and return degrees and meters. Spherical calculations assume an
earth radius of EARTH_EQUATORIAL_RADIUS; Vincenty's formula uses the WGS84 ellipsoid.
"""

__all__ = [
    'ConvergenceError', 'VincentyResult', 'VincentyStatus',
    'distance', 'distance_haversine', 'distance_vincenty', 'endpoint',
    'haversine_distances', 'heading', 'midpoint', 'normalize_lat', 'normalize_lng',
]

from dataclasses import dataclass
from enum import Enum
import math
from typing import Optional, Union

import numpy as np

from geocalc._const import (
    EARTH_EQUATORIAL_RADIUS, EARTH_FLATTENING, EARTH_POLAR_RADIUS,
    VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
)
from geocalc.distance import Distance
from geocalc.latlng import LatLng
from geocalc.utils.functions import all_finite
from geocalc.utils.logging import LOGGER, warn_once


class ConvergenceError(ArithmeticError):
    """Raised when a Vincenty result without a distance is unwrapped"""


class VincentyStatus(Enum):
    CONVERGED = 'converged'
    COINCIDENT = 'coincident'
    NON_CONVERGENT = 'non_convergent'


@dataclass(frozen=True)
class VincentyResult:
    """
    Outcome of Vincenty's inverse formula.

    A COINCIDENT result carries a zero Distance; a NON_CONVERGENT result carries no
    Distance at all.
    """
    status: VincentyStatus
    distance: Optional[Distance] = None
    iterations: int = 0

    def __bool__(self):
        return self.distance is not None

    def unwrap(self) -> Distance:
        """
        Return the distance, or raise ConvergenceError if the formula failed to converge.
        """
        if self.distance is None:
            raise ConvergenceError(
                f'Vincenty formula failed to converge after {self.iterations} iterations'
            )

        return self.distance


def _check_finite(*values: float):
    """NaN passes through the calculations; infinity is rejected"""
    if all_finite(*values):
        return

    if any(math.isinf(x) for x in values):
        raise ValueError(f'Infinite values are not supported: {values}')

    warn_once(
        'Non-finite (NaN) coordinate, heading or distance received; results will be NaN. '
        '(this warning will not repeat)'
    )


def distance_haversine(lat1: float, lng1: float, lat2: float, lng2: float) -> Distance:
    """
    Calculate the approximate sea level great circle distance between two points using the
    Haversine formula.

    Args:
        lat1:
            Latitude of the first point, in degrees

        lng1:
            Longitude of the first point, in degrees

        lat2:
            Latitude of the second point, in degrees

        lng2:
            Longitude of the second point, in degrees

    Returns:
        Distance
    """
    _check_finite(lat1, lng1, lat2, lng2)

    lat1, lng1 = math.radians(lat1), math.radians(lng1)
    lat2, lng2 = math.radians(lat2), math.radians(lng2)

    d_lat, d_lng = lat2 - lat1, lng2 - lng1
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2)
    # Rounding can push antipodal pairs just past 1
    a = min(1., a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return Distance(EARTH_EQUATORIAL_RADIUS * c)


def haversine_distances(lats1, lngs1, lats2, lngs2) -> np.ndarray:
    """
    Vectorized Haversine distance. Accepts any array-likes (or scalars) that broadcast
    against one another.

    Returns:
        numpy array of distances, in meters
    """
    lats1, lngs1, lats2, lngs2 = map(np.radians, (lats1, lngs1, lats2, lngs2))

    d_lat, d_lng = lats2 - lats1, lngs2 - lngs1
    a = np.sin(d_lat / 2) ** 2 + np.cos(lats1) * np.cos(lats2) * np.sin(d_lng / 2) ** 2
    a = np.clip(a, 0., 1.)

    return EARTH_EQUATORIAL_RADIUS * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def distance_vincenty(lat1: float, lng1: float, lat2: float, lng2: float) -> VincentyResult:
    """
    Calculate the geodetic distance between two points using Vincenty's inverse formula on
    the WGS84 ellipsoid.

    Identical points short-circuit to a COINCIDENT result holding a zero distance. If the
    iteration limit is reached before lambda converges (typically for nearly antipodal
    points) the result is NON_CONVERGENT and holds no distance.

    Args:
        lat1:
            Latitude of the first point, in degrees

        lng1:
            Longitude of the first point, in degrees

        lat2:
            Latitude of the second point, in degrees

        lng2:
            Longitude of the second point, in degrees

    Returns:
        VincentyResult
    """
    _check_finite(lat1, lng1, lat2, lng2)

    a, b, f = EARTH_EQUATORIAL_RADIUS, EARTH_POLAR_RADIUS, EARTH_FLATTENING

    L = math.radians(lng2 - lng1)
    U1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    U2 = math.atan((1 - f) * math.tan(math.radians(lat2)))

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    Lambda = L
    iterations = 0
    for iterations in range(1, VINCENTY_MAX_ITERATIONS + 1):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return VincentyResult(VincentyStatus.COINCIDENT, Distance(0.), iterations)

        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            # Equatorial line
            cos2SigmaM = 0

        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) <= VINCENTY_TOLERANCE:
            break
    else:
        LOGGER.warning(
            'Vincenty formula failed to converge after %d iterations for (%s, %s) -> (%s, %s)',
            iterations, lat1, lng1, lat2, lng2
        )
        return VincentyResult(VincentyStatus.NON_CONVERGENT, None, iterations)

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )

    return VincentyResult(
        VincentyStatus.CONVERGED,
        Distance(b * A * (sigma - deltaSigma)),
        iterations
    )


def heading(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Calculate the initial heading from the first point to the second point along a great
    circle. Identical points yield a heading of 0.

    Returns:
        (float) the heading in degrees clockwise from North, within [0, 360)
    """
    _check_finite(lat1, lng1, lat2, lng2)

    lat1, lat2 = math.radians(lat1), math.radians(lat2)
    d_lng = math.radians(lng2 - lng1)

    y = math.sin(d_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


def midpoint(lat1: float, lng1: float, lat2: float, lng2: float) -> LatLng:
    """
    Calculate the point halfway along the great circle between two points.

    Returns:
        LatLng
    """
    _check_finite(lat1, lng1, lat2, lng2)

    lat1, lat2 = math.radians(lat1), math.radians(lat2)
    d_lng = math.radians(lng2 - lng1)

    bx = math.cos(lat2) * math.cos(d_lng)
    by = math.cos(lat2) * math.sin(d_lng)

    lat3 = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by ** 2)
    )
    lng3 = math.radians(lng1) + math.atan2(by, math.cos(lat1) + bx)

    return LatLng(math.degrees(lat3), math.degrees(lng3))


def endpoint(
    lat: float,
    lng: float,
    heading_degrees: float,
    distance_meters: Union[float, Distance],
) -> LatLng:
    """
    Given a start location, an initial heading, and a distance of travel along a great
    circle, returns the destination.

    Args:
        lat:
            Latitude of the start point, in degrees

        lng:
            Longitude of the start point, in degrees

        heading_degrees:
            The initial heading, in degrees clockwise from North

        distance_meters:
            The distance of travel, either in meters or as a Distance

    Returns:
        LatLng
    """
    if isinstance(distance_meters, Distance):
        distance_meters = distance_meters.meters

    _check_finite(lat, lng, heading_degrees, distance_meters)

    lat, lng = math.radians(lat), math.radians(lng)
    theta = math.radians(heading_degrees)
    ang_dist = distance_meters / EARTH_EQUATORIAL_RADIUS

    lat2 = math.asin(math.sin(lat) * math.cos(ang_dist) +
                     math.cos(lat) * math.sin(ang_dist) * math.cos(theta))
    lng2 = lng + math.atan2(math.sin(theta) * math.sin(ang_dist) * math.cos(lat),
                            math.cos(ang_dist) - math.sin(lat) * math.sin(lat2))

    return LatLng(math.degrees(lat2), math.degrees(lng2))


def normalize_lat(lat: float) -> float:
    """
    Fit a latitude within [-90, 90]. Latitudes beyond either pole are capped, not wrapped.
    """
    _check_finite(lat)
    return max(min(lat, 90.), -90.)


def normalize_lng(lng: float) -> float:
    """
    Wrap a longitude into (-180, 180]. Note that -180 itself is left unchanged, while any
    other equivalent of 180 maps to positive 180.
    """
    _check_finite(lng)
    mod = math.fmod(lng, 360)

    if mod == 180:
        return 180.

    if mod < -180:
        return mod + 360

    if mod > 180:
        return mod - 360

    return mod


# -------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------

_ALGORITHMS = {
    'haversine': lambda p1, p2: distance_haversine(p1.lat, p1.lng, p2.lat, p2.lng),
    'vincenty': lambda p1, p2: distance_vincenty(p1.lat, p1.lng, p2.lat, p2.lng).unwrap(),
}


def distance(point1: LatLng, point2: LatLng, algorithm: str = 'haversine') -> Distance:
    """
    Calculate the distance between two LatLngs using the named algorithm.

    Args:
        point1:
            The first point

        point2:
            The second point

        algorithm:
            'haversine' (default) or 'vincenty'. Vincenty failing to converge raises
            ConvergenceError.

    Returns:
        Distance
    """
    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")

    return _ALGORITHMS[algorithm](point1, point2)
