"""Solar-system ephemeris engine.

Computes astrometric, topocentric and horizontal (azimuth/altitude) positions
of the major planets, the Sun, the Moon, and comets or minor planets given by
orbital elements, as seen from the Earth's center or an observing site.

Planet positions come from compact harmonic series (Venus, Mars, Neptune),
from the IAU analytic theories exposed by pyerfa, or from two-body orbits;
time handling uses rms-julian and vector helpers come from cspyce.
"""

from __future__ import annotations

from solar_ephemeris.bodies import Body, BodyKind
from solar_ephemeris.catalogs import CatalogDialect, parse_orbit
from solar_ephemeris.ephemeris import BodyPositionVelocity, Coordinates, SolarSystemBody
from solar_ephemeris.errors import (
    ConfigurationError,
    ConvergenceError,
    EphemerisError,
    MalformedInputError,
)
from solar_ephemeris.kepler import AsteroidElements, CometElements, orbital_elements
from solar_ephemeris.site import Site

__all__ = [
    'AsteroidElements',
    'Body',
    'BodyKind',
    'BodyPositionVelocity',
    'CatalogDialect',
    'CometElements',
    'ConfigurationError',
    'ConvergenceError',
    'Coordinates',
    'EphemerisError',
    'MalformedInputError',
    'Site',
    'SolarSystemBody',
    'orbital_elements',
    'parse_orbit',
]
