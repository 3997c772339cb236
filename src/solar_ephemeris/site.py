"""Observing site: geodetic location and atmospheric conditions."""

from __future__ import annotations

import math

import cspyce
import numpy as np

from solar_ephemeris.constants import EARTH_FLAT, EARTH_RAD_KM
from solar_ephemeris.errors import ConfigurationError, MalformedInputError

_FIELDS = ('latitude', 'longitude', 'height', 'temperature', 'pressure')


def _check(name: str, value: float) -> float:
    value = float(value)
    if math.isnan(value):
        raise MalformedInputError(f'Site {name} is NaN')
    if name == 'latitude' and abs(value) > 90.0:
        raise MalformedInputError(f'Site latitude {value} outside [-90, 90]')
    if name == 'longitude' and abs(value) > 180.0:
        raise MalformedInputError(f'Site longitude {value} outside [-180, 180]')
    if name == 'pressure' and value <= 0.0:
        raise MalformedInputError(f'Site pressure {value} must be positive')
    if name == 'temperature' and value <= -273.15:
        raise MalformedInputError(f'Site temperature {value} below absolute zero')
    return value


class Site:
    """Geodetic observer location and ambient conditions.

    Latitude and longitude are in degrees (north and east positive), height
    is in meters above the GRS 80 ellipsoid, temperature in deg C and
    pressure in millibars. Each field is independently set or unset; reading
    an unset field raises ConfigurationError.
    """

    def __init__(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        height: float | None = None,
        temperature: float | None = None,
        pressure: float | None = None,
    ) -> None:
        self._values: dict[str, float] = {}
        for name, value in zip(_FIELDS, (latitude, longitude, height, temperature, pressure)):
            if value is not None:
                self._values[name] = _check(name, value)

    def _get(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise ConfigurationError(f'Site {name} has not been set') from None

    def _set(self, name: str, value: float) -> None:
        self._values[name] = _check(name, value)

    latitude = property(
        lambda self: self._get('latitude'),
        lambda self, v: self._set('latitude', v),
        doc='Geodetic latitude in degrees, north positive.',
    )
    longitude = property(
        lambda self: self._get('longitude'),
        lambda self, v: self._set('longitude', v),
        doc='Longitude in degrees, east positive.',
    )
    height = property(
        lambda self: self._get('height'),
        lambda self, v: self._set('height', v),
        doc='Height above the ellipsoid in meters.',
    )
    temperature = property(
        lambda self: self._get('temperature'),
        lambda self, v: self._set('temperature', v),
        doc='Air temperature in deg C.',
    )
    pressure = property(
        lambda self: self._get('pressure'),
        lambda self, v: self._set('pressure', v),
        doc='Barometric pressure in millibars.',
    )

    def is_set(self, name: str) -> bool:
        """Return True if the named field has a value."""
        if name not in _FIELDS:
            raise KeyError(name)
        return name in self._values

    def get(self, name: str, default: float) -> float:
        """Return the named field, or default when it is unset."""
        return self._values.get(name, default)

    def require(self, *names: str) -> None:
        """Raise ConfigurationError naming every listed field that is unset."""
        missing = [n for n in names if n not in self._values]
        if missing:
            raise ConfigurationError(f'Site is missing {", ".join(missing)}')

    def geocentric_vector_km(self) -> np.ndarray:
        """Return the Earth-fixed geocentric position of the site in km (GRS 80)."""
        self.require('latitude', 'longitude', 'height')
        return np.asarray(
            cspyce.georec(
                math.radians(self.longitude),
                math.radians(self.latitude),
                self.height / 1000.0,
                EARTH_RAD_KM,
                EARTH_FLAT,
            ),
            dtype=np.float64,
        )

    def __repr__(self) -> str:
        fields = ', '.join(f'{k}={v}' for k, v in self._values.items())
        return f'Site({fields})'
