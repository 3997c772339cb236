"""Body identifiers and the resolvers that compute their heliocentric states.

Every resolver returns heliocentric J2000 equatorial position (AU) and
velocity (AU/day) at a TT Julian date:

* Venus, Mars, Neptune - harmonic series tables;
* Mercury, Jupiter, Saturn, Uranus - ERFA plan94 analytic theory;
* Earth - ERFA epv00;
* Moon - ERFA moon98 added to the Earth;
* Pluto, comets and minor planets - two-body orbits;
* Sun - the origin.

Resolvers hold only immutable data and may be shared between threads.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import erfa
import numpy as np

from solar_ephemeris import kepler
from solar_ephemeris.constants import MJD_OFFSET, VELOCITY_STEP_DAYS
from solar_ephemeris.errors import ConfigurationError, MalformedInputError
from solar_ephemeris.series import PlanetTable, load_table

logger = logging.getLogger(__name__)

# Span over which plan94 is documented (AD 1000-3000).
PLAN94_VALID_FROM_JD = 2086308.0
PLAN94_VALID_TO_JD = 2816788.0


class Body(enum.IntEnum):
    """Major solar-system bodies."""

    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    PLUTO = 9
    SUN = 10
    MOON = 11

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> Body:
        """Look up a body by case-insensitive name.

        Raises:
            MalformedInputError: If the name is not a major body.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise MalformedInputError(f'Unknown body name: {name!r}') from None


class BodyKind(enum.Enum):
    MAJOR_PLANET = 'major planet'
    MOON = 'moon'
    SUN = 'sun'
    COMET = 'comet'
    MINOR_PLANET = 'minor planet'


@dataclass(frozen=True)
class StateVector:
    """Position (AU) and velocity (AU/day), J2000 equatorial."""

    position: np.ndarray
    velocity: np.ndarray


def _pv(pv: np.ndarray) -> StateVector:
    return StateVector(
        np.array(pv['p'], dtype=np.float64),
        np.array(pv['v'], dtype=np.float64),
    )


def _tdb_parts(jd_tt: float) -> tuple[float, float]:
    # TDB - TT stays below 2 ms; the analytic theories do not resolve it.
    return (MJD_OFFSET, jd_tt - MJD_OFFSET)


class Resolver:
    """Computes a body's heliocentric state; subclasses supply the position."""

    name: str = ''
    kind: BodyKind = BodyKind.MAJOR_PLANET

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        raise NotImplementedError

    def heliocentric_state(self, jd_tt: float) -> StateVector:
        """Position plus a central-difference velocity."""
        h = VELOCITY_STEP_DAYS
        ahead = self.heliocentric_position(jd_tt + h)
        behind = self.heliocentric_position(jd_tt - h)
        return StateVector(self.heliocentric_position(jd_tt), (ahead - behind) / (2.0 * h))


class SeriesResolver(Resolver):
    """Planet evaluated from a harmonic series table."""

    def __init__(self, table: PlanetTable) -> None:
        self.table = table
        self.name = table.name

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return self.table.heliocentric_equatorial(jd_tt)


class AnalyticPlanetResolver(Resolver):
    """Planet evaluated from ERFA's plan94 (Simon et al. 1994) theory."""

    def __init__(self, name: str, planet_number: int) -> None:
        self.name = name
        self.planet_number = planet_number

    def heliocentric_state(self, jd_tt: float) -> StateVector:
        if not PLAN94_VALID_FROM_JD <= jd_tt <= PLAN94_VALID_TO_JD:
            logger.warning(
                '%s analytic theory evaluated at JD %.1f outside AD 1000-3000; extrapolating',
                self.name,
                jd_tt,
            )
        return _pv(erfa.plan94(*_tdb_parts(jd_tt), self.planet_number))

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return self.heliocentric_state(jd_tt).position


class EarthResolver(Resolver):
    """Earth from ERFA's epv00."""

    name = 'Earth'

    def heliocentric_state(self, jd_tt: float) -> StateVector:
        pvh, _pvb = erfa.epv00(*_tdb_parts(jd_tt))
        return _pv(pvh)

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return self.heliocentric_state(jd_tt).position


class MoonResolver(Resolver):
    """Moon from ERFA's moon98, offset by the Earth's heliocentric state."""

    name = 'Moon'
    kind = BodyKind.MOON

    def __init__(self, earth: EarthResolver) -> None:
        self.earth = earth

    def geocentric_state(self, jd_tt: float) -> StateVector:
        return _pv(erfa.moon98(*_tdb_parts(jd_tt)))

    def heliocentric_state(self, jd_tt: float) -> StateVector:
        earth = self.earth.heliocentric_state(jd_tt)
        moon = self.geocentric_state(jd_tt)
        return StateVector(earth.position + moon.position, earth.velocity + moon.velocity)

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return self.heliocentric_state(jd_tt).position


class SunResolver(Resolver):
    name = 'Sun'
    kind = BodyKind.SUN

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return np.zeros(3)

    def heliocentric_state(self, jd_tt: float) -> StateVector:
        return StateVector(np.zeros(3), np.zeros(3))


class ElementsResolver(Resolver):
    """Comet, minor planet or mean-element body on a two-body orbit."""

    def __init__(self, elements: kepler.OrbitalElements, kind: BodyKind | None = None) -> None:
        if elements is None:
            raise ConfigurationError('No orbital elements supplied')
        if not isinstance(elements, (kepler.CometElements, kepler.AsteroidElements, kepler.MeanElements)):
            raise MalformedInputError(f'Unsupported orbital element record: {type(elements).__name__}')
        self.elements = elements
        self.name = elements.name
        if kind is None:
            kind = BodyKind.COMET if isinstance(elements, kepler.CometElements) else BodyKind.MINOR_PLANET
        self.kind = kind

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return kepler.heliocentric_position(self.elements, jd_tt)


_EARTH = EarthResolver()

_REGISTRY: Mapping[Body, Resolver] = MappingProxyType(
    {
        Body.MERCURY: AnalyticPlanetResolver('Mercury', 1),
        Body.VENUS: SeriesResolver(load_table('venus')),
        Body.EARTH: _EARTH,
        Body.MARS: SeriesResolver(load_table('mars')),
        Body.JUPITER: AnalyticPlanetResolver('Jupiter', 5),
        Body.SATURN: AnalyticPlanetResolver('Saturn', 6),
        Body.URANUS: AnalyticPlanetResolver('Uranus', 7),
        Body.NEPTUNE: SeriesResolver(load_table('neptune')),
        Body.PLUTO: ElementsResolver(kepler.PLUTO_MEAN_ELEMENTS, BodyKind.MAJOR_PLANET),
        Body.SUN: SunResolver(),
        Body.MOON: MoonResolver(_EARTH),
    }
)


def resolve(target: Body | kepler.OrbitalElements) -> Resolver:
    """Return the resolver for a major body or an orbital element record."""
    if isinstance(target, Body):
        return _REGISTRY[target]
    return ElementsResolver(target)


def earth_state(jd_tt: float) -> StateVector:
    """Heliocentric state of the Earth at a TT Julian date."""
    return _EARTH.heliocentric_state(jd_tt)
