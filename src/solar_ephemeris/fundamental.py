"""Fundamental arguments: planetary mean longitudes, Delaunay arguments, obliquity.

The planetary mean longitudes follow Simon et al. (1994) and are the
arguments indexed by the harmonic series tables. The lunar-solar Delaunay
arguments come from the IERS 2003 conventions as implemented by ERFA.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import cspyce
import erfa
import numpy as np

from solar_ephemeris.angle_utils import normalize_radians
from solar_ephemeris.constants import (
    ARCSEC_PER_CIRCLE,
    ARCSEC_PER_DEGREE,
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_JULIAN_MILLENNIUM,
    J2000_JD,
    RADIANS_PER_ARCSEC,
)

# Time unit of the mean-longitude rates: 10000 Julian years, in days.
SERIES_TIMESCALE_DAYS = 3652500.0

# Mean motions, arcsec per 10000 Julian years (Simon et al. 1994).
MEAN_MOTIONS = (
    53810162868.8982,  # Mercury
    21066413643.3548,  # Venus
    12959774228.3429,  # Earth-Moon barycenter
    6890507749.3988,  # Mars
    1092566037.7991,  # Jupiter
    439960985.5372,  # Saturn
    154248119.3933,  # Uranus
    78655032.0744,  # Neptune
    52272245.1795,  # Pluto
)

# Mean longitudes at J2000, arcsec.
MEAN_LONGITUDES_J2000 = (
    252.25090552 * ARCSEC_PER_DEGREE,
    181.97980085 * ARCSEC_PER_DEGREE,
    100.46645683 * ARCSEC_PER_DEGREE,
    355.43299958 * ARCSEC_PER_DEGREE,
    34.35151874 * ARCSEC_PER_DEGREE,
    50.0774443 * ARCSEC_PER_DEGREE,
    314.05500511 * ARCSEC_PER_DEGREE,
    304.34866548 * ARCSEC_PER_DEGREE,
    860492.1546,
)

# Mean obliquity of the ecliptic (arcsec), highest power first, in units of
# 1000 Julian years from J2000 (Williams 1994 with DE403 corrections).
_OBLIQUITY_COEFFS = (
    2.45e-10,
    5.79e-9,
    2.787e-7,
    7.12e-7,
    -3.905e-5,
    -2.4967e-3,
    -5.138e-3,
    1.9989,
    -0.0175,
    -468.3396,
    84381.406173,
)


def reduce_arcsec(value: float) -> float:
    """Reduce an angle in arcseconds to [0, 1296000)."""
    return value - ARCSEC_PER_CIRCLE * math.floor(value / ARCSEC_PER_CIRCLE)


def series_time(jd_tt: float) -> float:
    """Return time from J2000 in units of 10000 Julian years."""
    return (jd_tt - J2000_JD) / SERIES_TIMESCALE_DAYS


def planetary_mean_longitudes(jd_tt: float) -> tuple[float, ...]:
    """Return the nine planetary mean longitudes in radians, [0, 2*pi).

    Order: Mercury, Venus, Earth-Moon barycenter, Mars, Jupiter, Saturn,
    Uranus, Neptune, Pluto.
    """
    t = series_time(jd_tt)
    return tuple(
        normalize_radians((reduce_arcsec(rate * t) + phase) * RADIANS_PER_ARCSEC)
        for rate, phase in zip(MEAN_MOTIONS, MEAN_LONGITUDES_J2000)
    )


@dataclass(frozen=True)
class FundamentalArguments:
    """Planetary mean longitudes and lunar-solar Delaunay arguments (radians).

    Attributes:
        planets: Mean longitudes, Mercury through Pluto.
        l: Mean anomaly of the Moon.
        l_prime: Mean anomaly of the Sun.
        f: Mean argument of latitude of the Moon.
        d: Mean elongation of the Moon from the Sun.
        omega: Mean longitude of the Moon's ascending node.
    """

    planets: tuple[float, ...]
    l: float
    l_prime: float
    f: float
    d: float
    omega: float


def fundamental_arguments(jd_tt: float) -> FundamentalArguments:
    """Evaluate all fundamental arguments at a TT Julian date."""
    t = (jd_tt - J2000_JD) / DAYS_PER_JULIAN_CENTURY
    return FundamentalArguments(
        planets=planetary_mean_longitudes(jd_tt),
        l=float(erfa.fal03(t)),
        l_prime=float(erfa.falp03(t)),
        f=float(erfa.faf03(t)),
        d=float(erfa.fad03(t)),
        omega=normalize_radians(float(erfa.faom03(t))),
    )


def mean_obliquity(jd_tt: float) -> float:
    """Return the mean obliquity of the ecliptic of date in radians."""
    t = (jd_tt - J2000_JD) / DAYS_PER_JULIAN_MILLENNIUM
    eps = 0.0
    for coeff in _OBLIQUITY_COEFFS:
        eps = eps * t + coeff
    return eps * RADIANS_PER_ARCSEC


def ecliptic_to_equatorial(vector: np.ndarray, obliquity: float) -> np.ndarray:
    """Rotate an ecliptic vector to the equator for the given obliquity (radians)."""
    return np.asarray(cspyce.mtxv(cspyce.rotate(obliquity, 1), vector), dtype=np.float64)


def equatorial_to_ecliptic(vector: np.ndarray, obliquity: float) -> np.ndarray:
    """Rotate an equatorial vector to the ecliptic for the given obliquity (radians)."""
    return np.asarray(cspyce.mxv(cspyce.rotate(obliquity, 1), vector), dtype=np.float64)


J2000_OBLIQUITY = mean_obliquity(J2000_JD)
