from geocalc._version import __version__  # noqa: F401
from geocalc.utils.logging import LOGGER
from geocalc.distance import Distance
from geocalc.latlng import LatLng
from geocalc.calc import (
    ConvergenceError, VincentyResult, VincentyStatus,
    distance, distance_haversine, distance_vincenty, endpoint,
    haversine_distances, heading, midpoint, normalize_lat, normalize_lng,
)

__all__ = [
    'ConvergenceError',
    'Distance',
    'LatLng',
    'VincentyResult',
    'VincentyStatus',
    'distance',
    'distance_haversine',
    'distance_vincenty',
    'endpoint',
    'haversine_distances',
    'heading',
    'midpoint',
    'normalize_lat',
    'normalize_lng',
    'LOGGER',
]
