"""
Representation of a length along the surface of the earth
"""

__all__ = ['Distance']

from functools import total_ordering
import re
from typing import Dict, Union

from pydantic import validate_call


# Meters per unit
_METERS = 1.
_KILOMETERS = 1000.
_MILES = 1609.344
_FEET = 0.3048
_YARDS = 0.9144
_NAUTICAL_MILES = 1852.

_UNITS: Dict[str, float] = {
    'm': _METERS,
    'meter': _METERS,
    'meters': _METERS,
    'metre': _METERS,
    'metres': _METERS,
    'km': _KILOMETERS,
    'kilometer': _KILOMETERS,
    'kilometers': _KILOMETERS,
    'kilometre': _KILOMETERS,
    'kilometres': _KILOMETERS,
    'mi': _MILES,
    'mile': _MILES,
    'miles': _MILES,
    'ft': _FEET,
    'foot': _FEET,
    'feet': _FEET,
    'yd': _YARDS,
    'yard': _YARDS,
    'yards': _YARDS,
    'nm': _NAUTICAL_MILES,
    'nmi': _NAUTICAL_MILES,
    'nautical': _NAUTICAL_MILES,
    'nauticalmile': _NAUTICAL_MILES,
    'nauticalmiles': _NAUTICAL_MILES,
}

_DISTANCE_PATTERN = re.compile(
    r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z][a-zA-Z ]*)?\s*$'
)


def _unit_factor(unit: str) -> float:
    """Look up the number of meters in one of the named unit"""
    key = unit.lower().replace(' ', '')
    if key not in _UNITS:
        raise ValueError(f"Unknown distance unit '{unit}'. Options: {sorted(_UNITS)}")

    return _UNITS[key]


@total_ordering
class Distance:
    """A length, stored in meters, with read-only conversions to other units"""

    __slots__ = ('_meters',)

    @validate_call
    def __init__(self, meters: float):
        object.__setattr__(self, '_meters', meters)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Distance):
            return False

        return self._meters == other._meters

    def __lt__(self, other):
        if not isinstance(other, Distance):
            return NotImplemented

        return self._meters < other._meters

    def __hash__(self):
        return hash(self._meters)

    def __float__(self):
        return self._meters

    def __repr__(self):
        return f'<Distance({self._meters} m)>'

    @property
    def meters(self) -> float:
        return self._meters

    @property
    def kilometers(self) -> float:
        return self._meters / _KILOMETERS

    @property
    def miles(self) -> float:
        return self._meters / _MILES

    @property
    def feet(self) -> float:
        return self._meters / _FEET

    @property
    def yards(self) -> float:
        return self._meters / _YARDS

    @property
    def nautical_miles(self) -> float:
        return self._meters / _NAUTICAL_MILES

    @classmethod
    def from_unit(cls, value: Union[float, int], unit: str) -> 'Distance':
        """
        Creates a Distance from a value expressed in a named unit.

        Args:
            value:
                The length, in the specified unit

            unit:
                The unit name or abbreviation, e.g. 'km', 'miles', 'ft', 'nm'

        Returns:
            Distance
        """
        return cls(float(value) * _unit_factor(unit))

    @classmethod
    def from_string(cls, distance_str: str) -> 'Distance':
        """
        Creates a Distance from a string such as "10km" or "2.5 mi". A number with no
        unit is interpreted as meters.

        Args:
            distance_str:
                The string-represented distance

        Returns:
            Distance
        """
        match = _DISTANCE_PATTERN.match(distance_str)
        if match is None:
            raise ValueError(f'Invalid distance string: {distance_str!r}')

        value, unit = match.groups()
        return cls.from_unit(float(value), unit or 'm')

    def to(self, unit: str) -> float:
        """
        Converts this distance to a named unit.

        Args:
            unit:
                The unit name or abbreviation, e.g. 'km', 'miles', 'ft', 'nm'

        Returns:
            float
        """
        return self._meters / _unit_factor(unit)
