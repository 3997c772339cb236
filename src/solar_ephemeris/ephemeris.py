"""Public facade: positions of one solar-system body for a UTC instant.

Example:
    >>> venus = SolarSystemBody(Body.VENUS)
    >>> venus.site = Site(latitude=51.0786, longitude=-0.2944, height=80.0)
    >>> venus.topocentric_coordinates('2023-07-01T12:00:00Z')
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from solar_ephemeris.bodies import Body, BodyKind, StateVector, earth_state, resolve
from solar_ephemeris.catalogs import CatalogDialect, parse_orbit
from solar_ephemeris.errors import ConfigurationError
from solar_ephemeris.frames import FramePipeline, geocentric_observer, site_observer
from solar_ephemeris.kepler import OrbitalElements
from solar_ephemeris.site import Site
from solar_ephemeris.time_utils import DeltaTProvider, ObservationTime, observation_time
from solar_ephemeris.vectors import PositionVector

logger = logging.getLogger(__name__)

When = datetime | str | float


@dataclass(frozen=True)
class Coordinates:
    """Sky position.

    Attributes:
        right_ascension: Hours, [0, 24).
        declination: Degrees.
        distance: AU.
        azimuth: Degrees from north through east, or None.
        altitude: Degrees, or None.
    """

    right_ascension: float
    declination: float
    distance: float
    azimuth: float | None = None
    altitude: float | None = None

    @classmethod
    def from_vector(cls, vec: PositionVector) -> Coordinates:
        if vec.has_horizontal:
            return cls(vec.right_ascension, vec.declination, vec.distance, vec.azimuth, vec.altitude)
        return cls(vec.right_ascension, vec.declination, vec.distance)


@dataclass(frozen=True)
class BodyPositionVelocity:
    """Cartesian state in AU and AU/day, J2000 mean equator."""

    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float

    @property
    def distance(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @property
    def speed(self) -> float:
        return math.sqrt(self.vx * self.vx + self.vy * self.vy + self.vz * self.vz)

    @classmethod
    def from_state(cls, state: StateVector) -> BodyPositionVelocity:
        p, v = state.position, state.velocity
        return cls(float(p[0]), float(p[1]), float(p[2]), float(v[0]), float(v[1]), float(v[2]))


class SolarSystemBody:
    """A major body, comet or minor planet and the queries that locate it.

    Parameters:
        target: A Body, or an orbital element record.
        site: Observing site for topocentric and horizontal queries.
        refraction: Apply atmospheric refraction in altaz_coordinates.
        delta_t: Delta-T provider (UTC Julian date -> TT - UT1 seconds);
            defaults to the leap-second table.
        earth: Heliocentric Earth state provider (TT Julian date).
        log: Logger for query diagnostics; defaults to this module's logger.
    """

    def __init__(
        self,
        target: Body | OrbitalElements,
        *,
        site: Site | None = None,
        refraction: bool = False,
        delta_t: DeltaTProvider | None = None,
        earth: Callable[[float], StateVector] = earth_state,
        log: logging.Logger | None = None,
    ) -> None:
        if target is None:
            raise ConfigurationError('No body or orbital elements supplied')
        self._body = target if isinstance(target, Body) else None
        self._resolver = resolve(target)
        self._pipeline = FramePipeline(self._resolver, earth)
        self._earth = earth
        self.site = site
        self.refraction = refraction
        self.delta_t = delta_t
        self.log = log if log is not None else logger

    @classmethod
    def from_elements(cls, elements: OrbitalElements, **kwargs: object) -> SolarSystemBody:
        return cls(elements, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_catalog_line(
        cls,
        dialect: CatalogDialect | str,
        line: str,
        **kwargs: object,
    ) -> SolarSystemBody:
        """Build a body from one line of a supported element catalog."""
        return cls(parse_orbit(dialect, line), **kwargs)  # type: ignore[arg-type]

    @property
    def name(self) -> str:
        return self._body.label if self._body is not None else self._resolver.name

    @property
    def kind(self) -> BodyKind:
        return self._resolver.kind

    @property
    def body(self) -> Body | None:
        return self._body

    def _time(self, when: When) -> ObservationTime:
        return observation_time(when, self.delta_t)

    def _reject_earth(self) -> None:
        if self._body is Body.EARTH:
            raise ConfigurationError('The Earth cannot be observed from the Earth')

    def _require_site(self) -> Site:
        if self.site is None:
            raise ConfigurationError('Site has not been set')
        self.site.require('latitude', 'longitude', 'height')
        return self.site

    def _site_is_located(self) -> bool:
        return self.site is not None and all(
            self.site.is_set(n) for n in ('latitude', 'longitude', 'height')
        )

    def astrometric_coordinates(self, when: When) -> Coordinates:
        """Astrometric J2000 place.

        Major bodies are corrected for light time and seen from the Earth's
        center. Element-defined bodies give the geometric direction at the
        instant, from the site when one is located.
        """
        self._reject_earth()
        time = self._time(when)
        if self._body is not None:
            vec = self._pipeline.astrometric(time, geocentric_observer(time, self._earth))
        else:
            if self._site_is_located():
                observer = site_observer(time, self.site, self._earth)
            else:
                observer = geocentric_observer(time, self._earth)
            vec = self._pipeline.astrometric(time, observer, light_time=False)
        self.log.debug('%s astrometric at JD(TT) %.6f', self.name, time.jd_tt)
        return Coordinates.from_vector(vec)

    def topocentric_coordinates(self, when: When) -> Coordinates:
        """Apparent place of date seen from the site."""
        self._reject_earth()
        site = self._require_site()
        time = self._time(when)
        return Coordinates.from_vector(self._pipeline.topocentric(time, site))

    def altaz_coordinates(self, when: When) -> Coordinates:
        """Topocentric place with azimuth and altitude; refraction if enabled."""
        self._reject_earth()
        site = self._require_site()
        time = self._time(when)
        return Coordinates.from_vector(self._pipeline.horizontal(time, site, self.refraction))

    def heliocentric_position(self, when: When) -> BodyPositionVelocity:
        """Heliocentric J2000 state (geometric)."""
        time = self._time(when)
        return BodyPositionVelocity.from_state(self._pipeline.heliocentric(time.jd_tt))

    def geocentric_position(self, when: When) -> BodyPositionVelocity:
        """Geocentric J2000 state (geometric)."""
        self._reject_earth()
        time = self._time(when)
        return BodyPositionVelocity.from_state(self._pipeline.geocentric(time.jd_tt))

    def __repr__(self) -> str:
        return f'SolarSystemBody({self.name!r}, kind={self.kind.value!r})'
