"""
Representation of a latitude/longitude pair
"""

__all__ = ['LatLng']

import re
from typing import Iterator, Tuple

from pydantic import validate_call

from geocalc.utils.functions import round_half_up


_SEPARATOR = re.compile(r'\s*,\s*|\s+')


class LatLng:
    """
    A latitude/longitude pair, in degrees. Values are stored as given; use .normalized()
    to fit them within the valid latitude and longitude ranges.
    """

    __slots__ = ('_lat', '_lng')

    @validate_call
    def __init__(self, lat: float, lng: float):
        object.__setattr__(self, '_lat', lat)
        object.__setattr__(self, '_lng', lng)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, LatLng):
            return False

        return self._lat == other._lat and self._lng == other._lng

    def __hash__(self):
        return hash((self._lat, self._lng))

    def __iter__(self) -> Iterator[float]:
        return iter((self._lat, self._lng))

    def __repr__(self):
        return f'<LatLng({self._lat}, {self._lng})>'

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lng(self) -> float:
        return self._lng

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lng: Tuple[int, int, float, str]):
        """
        Creates a LatLng from a Degree Minutes Seconds (lat, lng) pair.

        The hemisphere value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str) )
            lng:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str))

        Returns:
            LatLng
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3].upper() in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return LatLng(convert(lat), convert(lng))

    @classmethod
    def from_string(cls, latlng_str: str):
        """
        Creates a LatLng from a string holding a latitude and a longitude separated by a
        comma and/or whitespace, e.g. "52.5, 13.4"

        Args:
            latlng_str:
                The string-represented lat/lng pair

        Returns:
            LatLng
        """
        parts = [x for x in _SEPARATOR.split(latlng_str.strip()) if x]
        if len(parts) != 2:
            raise ValueError(f'Invalid lat/lng string: {latlng_str!r}')

        try:
            lat, lng = float(parts[0]), float(parts[1])
        except ValueError as exc:
            raise ValueError(f'Invalid lat/lng string: {latlng_str!r}') from exc

        return LatLng(lat, lng)

    def normalized(self) -> 'LatLng':
        """
        Returns a new LatLng with the latitude clamped to [-90, 90] and the longitude
        wrapped to (-180, 180].
        """
        from geocalc.calc import normalize_lat, normalize_lng  # pylint: disable=import-outside-toplevel

        return LatLng(normalize_lat(self._lat), normalize_lng(self._lng))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude in decimal degrees to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), (...))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            # Round the total first so that seconds never reach 60
            minutes, seconds = divmod(round_half_up(abs(dd) * 3600, 5), 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self._lat), 'N' if self._lat >= 0 else 'S'),
            (*convert(self._lng), 'E' if self._lng >= 0 else 'W'),
        )
