"""Cartesian position and velocity vectors with lazily derived spherical fields.

A PositionVector stores x, y, z in AU. Right ascension, declination, distance
and light time are derived from the Cartesian triple on first read and kept
in an explicit cache tagged FRESH or STALE; every Cartesian mutation marks
the cache STALE. Azimuth and altitude are a one-time measurement attached by
the horizontal-coordinate stage and are not derived from x, y, z.

Vectors are scratch objects for a single query on a single thread.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import cspyce
import erfa
import numpy as np

from solar_ephemeris.constants import (
    AU_KM,
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_HOUR_RA,
    EARTH_ROT_RATE_RAD_S,
    HOURS_PER_CIRCLE,
    MIN_PARALLAX_ARCSEC,
    MJD_OFFSET,
    PARSEC_AU,
    SECONDS_PER_DAY,
    SPEED_OF_LIGHT_AU_PER_DAY,
    TWO_PI,
)
from solar_ephemeris.errors import ConfigurationError

if TYPE_CHECKING:
    from solar_ephemeris.site import Site

_AXES = ('x', 'y', 'z')


class CacheState(enum.Enum):
    """Whether the derived spherical values match the Cartesian triple."""

    FRESH = 'fresh'
    STALE = 'stale'


@dataclass
class _SphericalCache:
    state: CacheState = CacheState.STALE
    right_ascension: float = 0.0
    declination: float = 0.0
    distance: float = 0.0
    light_time: float = 0.0


class _Cartesian:
    """Three independently settable components; reading an unset one fails."""

    _kind = 'vector'

    def __init__(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
    ) -> None:
        self._xyz: list[float | None] = [None, None, None]
        for i, value in enumerate((x, y, z)):
            if value is not None:
                self._xyz[i] = float(value)

    def _get(self, i: int) -> float:
        value = self._xyz[i]
        if value is None:
            raise ConfigurationError(f'{self._kind} component {_AXES[i]} has not been set')
        return value

    def _set(self, i: int, value: float) -> None:
        self._xyz[i] = float(value)

    @property
    def x(self) -> float:
        return self._get(0)

    @x.setter
    def x(self, value: float) -> None:
        self._set(0, value)

    @property
    def y(self) -> float:
        return self._get(1)

    @y.setter
    def y(self, value: float) -> None:
        self._set(1, value)

    @property
    def z(self) -> float:
        return self._get(2)

    @z.setter
    def z(self, value: float) -> None:
        self._set(2, value)

    @property
    def is_set(self) -> bool:
        """True when all three components have been set."""
        return all(v is not None for v in self._xyz)

    def as_array(self) -> np.ndarray:
        """Return (x, y, z) as a float64 array; raises if any component is unset."""
        return np.array([self._get(0), self._get(1), self._get(2)], dtype=np.float64)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(x={self._xyz[0]}, y={self._xyz[1]}, z={self._xyz[2]})'


class VelocityVector(_Cartesian):
    """Cartesian velocity in AU/day."""

    _kind = 'velocity'

    @classmethod
    def from_array(cls, values: np.ndarray) -> VelocityVector:
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def from_star(
        cls,
        ra_hours: float,
        dec_deg: float,
        parallax_arcsec: float,
        pm_ra: float,
        pm_dec: float,
        radial_velocity: float,
    ) -> VelocityVector:
        """Space velocity of a star from catalog proper motion and radial velocity.

        Parameters:
            ra_hours: Right ascension in hours.
            dec_deg: Declination in degrees.
            parallax_arcsec: Parallax in arcsec; values <= 0 use 1e-7 arcsec.
            pm_ra: Proper motion in right ascension, seconds of time per century.
            pm_dec: Proper motion in declination, arcsec per century.
            radial_velocity: Radial velocity in km/s (positive receding).

        Returns:
            Velocity in AU/day, equatorial frame of the catalog.
        """
        parallax = parallax_arcsec if parallax_arcsec > 0.0 else MIN_PARALLAX_ARCSEC
        ra = math.radians(ra_hours * DEGREES_PER_HOUR_RA)
        dec = math.radians(dec_deg)
        sin_ra, cos_ra = math.sin(ra), math.cos(ra)
        sin_dec, cos_dec = math.sin(dec), math.cos(dec)
        v_ra = pm_ra * DEGREES_PER_HOUR_RA * cos_dec / (parallax * DAYS_PER_JULIAN_CENTURY)
        v_dec = pm_dec / (parallax * DAYS_PER_JULIAN_CENTURY)
        v_r = radial_velocity * SECONDS_PER_DAY / AU_KM
        return cls(
            -v_ra * sin_ra - v_dec * sin_dec * cos_ra + v_r * cos_dec * cos_ra,
            v_ra * cos_ra - v_dec * sin_dec * sin_ra + v_r * cos_dec * sin_ra,
            v_dec * cos_dec + v_r * sin_dec,
        )

    @classmethod
    def from_site(cls, site: Site, gast_hours: float) -> VelocityVector:
        """Diurnal velocity of an Earth site in the true equator of date (AU/day)."""
        r_km = _site_vector_km(site, gast_hours)
        scale = EARTH_ROT_RATE_RAD_S * SECONDS_PER_DAY / AU_KM
        return cls(-r_km[1] * scale, r_km[0] * scale, 0.0)


class PositionVector(_Cartesian):
    """Cartesian position in AU with cached right ascension, declination, distance."""

    _kind = 'position'

    def __init__(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
    ) -> None:
        super().__init__(x, y, z)
        self._cache = _SphericalCache()
        self._azimuth: float | None = None
        self._altitude: float | None = None

    def _set(self, i: int, value: float) -> None:
        super()._set(i, value)
        self._cache.state = CacheState.STALE

    @property
    def cache_state(self) -> CacheState:
        return self._cache.state

    def _spherical(self) -> _SphericalCache:
        """Return the spherical cache, recomputing it first if it is stale.

        Recomputing is the documented side effect of reading any derived field.
        """
        if self._cache.state is CacheState.STALE:
            rng, ra, dec = cspyce.recrad(self.as_array())
            self._cache.right_ascension = (float(ra) / TWO_PI * HOURS_PER_CIRCLE) % HOURS_PER_CIRCLE
            self._cache.declination = math.degrees(float(dec))
            self._cache.distance = float(rng)
            self._cache.light_time = float(rng) / SPEED_OF_LIGHT_AU_PER_DAY
            self._cache.state = CacheState.FRESH
        return self._cache

    @property
    def right_ascension(self) -> float:
        """Right ascension in hours, [0, 24)."""
        return self._spherical().right_ascension

    @property
    def declination(self) -> float:
        """Declination in degrees."""
        return self._spherical().declination

    @property
    def distance(self) -> float:
        """Distance from the origin in AU."""
        return self._spherical().distance

    @property
    def light_time(self) -> float:
        """Light travel time over the distance, in days."""
        return self._spherical().light_time

    @property
    def azimuth(self) -> float:
        """Azimuth in degrees (north through east), set by the horizontal stage."""
        if self._azimuth is None:
            raise ConfigurationError('azimuth has not been computed for this position')
        return self._azimuth

    @property
    def altitude(self) -> float:
        """Altitude in degrees, set by the horizontal stage."""
        if self._altitude is None:
            raise ConfigurationError('altitude has not been computed for this position')
        return self._altitude

    @property
    def has_horizontal(self) -> bool:
        return self._azimuth is not None and self._altitude is not None

    def set_horizontal(self, azimuth: float, altitude: float) -> None:
        """Attach azimuth/altitude once; they cannot be replaced afterwards."""
        if self._azimuth is not None or self._altitude is not None:
            raise ConfigurationError('azimuth/altitude are already set for this position')
        self._azimuth = float(azimuth)
        self._altitude = float(altitude)

    def set_array(self, values: np.ndarray) -> None:
        """Replace all three components at once."""
        for i in range(3):
            self._set(i, float(values[i]))

    def copy(self) -> PositionVector:
        """Return a new vector with the same Cartesian components (no az/alt)."""
        out = PositionVector()
        out._xyz = list(self._xyz)
        return out

    def __sub__(self, other: PositionVector) -> PositionVector:
        return PositionVector.from_array(self.as_array() - other.as_array())

    def __add__(self, other: PositionVector) -> PositionVector:
        return PositionVector.from_array(self.as_array() + other.as_array())

    def precess(self, from_jd_tt: float, to_jd_tt: float) -> None:
        """Rotate from the mean equator and equinox of one epoch to another.

        Uses the IAU 2006 precession matrices; the frame bias common to both
        epochs cancels.

        Parameters:
            from_jd_tt: TT Julian date of the current mean equator/equinox.
            to_jd_tt: TT Julian date of the target mean equator/equinox.
        """
        if from_jd_tt == to_jd_tt:
            return
        p_from = erfa.pmat06(MJD_OFFSET, from_jd_tt - MJD_OFFSET)
        p_to = erfa.pmat06(MJD_OFFSET, to_jd_tt - MJD_OFFSET)
        self.set_array(p_to @ (p_from.T @ self.as_array()))

    def apply_aberration(self, velocity: VelocityVector) -> None:
        """Apply classical aberration: position += light_time * observer velocity.

        The light time must already be current: read ``distance`` or
        ``light_time`` (or any other derived field) after the last Cartesian
        change and before calling this.

        Raises:
            ConfigurationError: If the derived cache is stale.
        """
        if self._cache.state is not CacheState.FRESH:
            raise ConfigurationError(
                'light time is not current; read distance or light_time before applying aberration'
            )
        self.set_array(self.as_array() + self._cache.light_time * velocity.as_array())

    def apply_proper_motion(
        self,
        velocity: VelocityVector,
        from_jd: float,
        to_jd: float,
    ) -> None:
        """Move linearly along a space velocity (AU/day) between two epochs.

        With a full Cartesian space velocity the radial component changes
        the distance along the line of sight, which carries the
        foreshortening of the proper motion.
        """
        self.set_array(self.as_array() + velocity.as_array() * (to_jd - from_jd))

    @classmethod
    def from_array(cls, values: np.ndarray) -> PositionVector:
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def from_spherical(cls, ra_hours: float, dec_deg: float, distance: float) -> PositionVector:
        """Build a vector from right ascension (hours), declination (deg), distance (AU)."""
        ra = ra_hours / HOURS_PER_CIRCLE * TWO_PI
        return cls.from_array(np.asarray(cspyce.radrec(distance, ra, math.radians(dec_deg))))

    @classmethod
    def from_star(cls, ra_hours: float, dec_deg: float, parallax_arcsec: float) -> PositionVector:
        """Position of a star from catalog coordinates and parallax.

        Unknown parallaxes (zero or negative) are replaced by 1e-7 arcsec,
        placing the star at roughly 10 Mpc.
        """
        parallax = parallax_arcsec if parallax_arcsec > 0.0 else MIN_PARALLAX_ARCSEC
        return cls.from_spherical(ra_hours, dec_deg, PARSEC_AU / parallax)

    @classmethod
    def from_site(cls, site: Site, gast_hours: float) -> PositionVector:
        """Geocentric position of an Earth site in the true equator of date (AU)."""
        return cls.from_array(_site_vector_km(site, gast_hours) / AU_KM)


def _site_vector_km(site: Site, gast_hours: float) -> np.ndarray:
    """Site position (km) rotated from the Earth-fixed frame by sidereal time."""
    fixed = site.geocentric_vector_km()
    theta = gast_hours / HOURS_PER_CIRCLE * TWO_PI
    return np.asarray(cspyce.mtxv(cspyce.rotate(theta, 3), fixed), dtype=np.float64)


__all__ = [
    'CacheState',
    'PositionVector',
    'VelocityVector',
]
