"""Harmonic series tables for heliocentric planet positions.

A table holds a sequence of terms. A polynomial term is a power series in
time; a periodic term multiplies power series for cosine and sine
amplitudes by the cosine and sine of an integer combination of the
planetary mean longitudes. Tables are delivered in a packed form: a flat
integer array in which each term is a count of (multiplier, planet) pairs
followed by the pairs and the highest power of time, terminated by a
negative count; amplitudes sit in three parallel flat arrays. The packed
form is parsed once into SeriesTerm records.

Time runs in units of 10000 Julian years from J2000 TT. Amplitudes are in
arcseconds; radius amplitudes are scaled by the table's reference distance.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from solar_ephemeris.angle_utils import normalize_radians
from solar_ephemeris.constants import J2000_JD, RADIANS_PER_ARCSEC
from solar_ephemeris.errors import MalformedInputError
from solar_ephemeris.fundamental import (
    J2000_OBLIQUITY,
    SERIES_TIMESCALE_DAYS,
    ecliptic_to_equatorial,
    planetary_mean_longitudes,
    reduce_arcsec,
)

logger = logging.getLogger(__name__)

NUMBER_OF_ARGUMENTS = 9


@dataclass(frozen=True)
class Harmonic:
    """One integer multiple of a planetary mean longitude.

    Attributes:
        multiplier: Integer multiple (may be negative or zero).
        argument: Index into the mean longitudes, 0 = Mercury ... 8 = Pluto.
    """

    multiplier: int
    argument: int


@dataclass(frozen=True)
class SeriesTerm:
    """A polynomial (no harmonics) or periodic term of a series table.

    Polynomial terms hold ``degree + 1`` coefficients per coordinate, highest
    power first. Periodic terms hold ``degree + 1`` (cosine, sine) pairs,
    interleaved and highest power first.
    """

    harmonics: tuple[Harmonic, ...]
    degree: int
    longitude: tuple[float, ...]
    latitude: tuple[float, ...]
    radius: tuple[float, ...]

    @property
    def is_polynomial(self) -> bool:
        return not self.harmonics

    def phase(self, longitudes: Sequence[float]) -> float | None:
        """Return the term's angle, or None when every multiplier is zero."""
        angle = 0.0
        used = False
        for h in self.harmonics:
            if h.multiplier != 0:
                angle += h.multiplier * longitudes[h.argument]
                used = True
        return angle if used else None


@dataclass(frozen=True)
class EclipticPosition:
    """Heliocentric J2000 ecliptic spherical position.

    Attributes:
        longitude: Radians, [0, 2*pi).
        latitude: Radians.
        radius: AU.
    """

    longitude: float
    latitude: float
    radius: float

    def rectangular(self) -> np.ndarray:
        cos_b = math.cos(self.latitude)
        return self.radius * np.array(
            [
                cos_b * math.cos(self.longitude),
                cos_b * math.sin(self.longitude),
                math.sin(self.latitude),
            ]
        )


def _horner(coeffs: Sequence[float], t: float) -> float:
    value = 0.0
    for c in coeffs:
        value = value * t + c
    return value


@dataclass(frozen=True)
class PlanetTable:
    """Immutable harmonic series for one planet.

    Attributes:
        name: Planet name.
        max_harmonic: Highest multiplier used for each mean longitude.
        max_power_of_t: Highest power of time in any term.
        distance: Reference semi-major axis in AU.
        valid_from_jd: First TT Julian date of the fitted span.
        valid_to_jd: Last TT Julian date of the fitted span.
        terms: Parsed series terms in table order.
        timescale: Length of the time unit in days.
    """

    name: str
    max_harmonic: tuple[int, ...]
    max_power_of_t: int
    distance: float
    valid_from_jd: float
    valid_to_jd: float
    terms: tuple[SeriesTerm, ...]
    timescale: float = SERIES_TIMESCALE_DAYS

    @classmethod
    def from_packed(
        cls,
        *,
        name: str,
        max_harmonic: Sequence[int],
        max_power_of_t: int,
        arguments: Sequence[int],
        longitude: Sequence[float],
        latitude: Sequence[float],
        radius: Sequence[float],
        distance: float,
        valid_from_jd: float,
        valid_to_jd: float,
        timescale: float = SERIES_TIMESCALE_DAYS,
    ) -> PlanetTable:
        """Parse packed argument and amplitude arrays into a table.

        Raises:
            MalformedInputError: If the arrays are truncated, reference an
                unknown argument, or leave amplitudes unused.
        """
        terms: list[SeriesTerm] = []
        p = pl = pb = pr = 0
        try:
            while True:
                count = arguments[p]
                p += 1
                if count < 0:
                    break
                harmonics: list[Harmonic] = []
                for _ in range(count):
                    multiplier, planet = arguments[p], arguments[p + 1]
                    p += 2
                    if not 1 <= planet <= NUMBER_OF_ARGUMENTS:
                        raise MalformedInputError(
                            f'{name} series term {len(terms)} references argument {planet}'
                        )
                    harmonics.append(Harmonic(multiplier, planet - 1))
                degree = arguments[p]
                p += 1
                width = degree + 1 if count == 0 else 2 * (degree + 1)
                if pl + width > len(longitude) or pb + width > len(latitude) or pr + width > len(radius):
                    raise MalformedInputError(f'{name} series amplitudes are truncated')
                terms.append(
                    SeriesTerm(
                        harmonics=tuple(harmonics),
                        degree=degree,
                        longitude=tuple(longitude[pl : pl + width]),
                        latitude=tuple(latitude[pb : pb + width]),
                        radius=tuple(radius[pr : pr + width]),
                    )
                )
                pl += width
                pb += width
                pr += width
        except IndexError:
            raise MalformedInputError(f'{name} series argument table is not terminated') from None
        if (pl, pb, pr) != (len(longitude), len(latitude), len(radius)):
            raise MalformedInputError(f'{name} series has unused amplitudes')
        return cls(
            name=name,
            max_harmonic=tuple(max_harmonic),
            max_power_of_t=max_power_of_t,
            distance=distance,
            valid_from_jd=valid_from_jd,
            valid_to_jd=valid_to_jd,
            terms=tuple(terms),
            timescale=timescale,
        )

    def in_valid_range(self, jd_tt: float) -> bool:
        return self.valid_from_jd <= jd_tt <= self.valid_to_jd

    def evaluate(self, jd_tt: float) -> EclipticPosition:
        """Evaluate the series at a TT Julian date.

        Dates outside the fitted span are extrapolated with a logged warning.

        Parameters:
            jd_tt: TT Julian date.

        Returns:
            Heliocentric J2000 ecliptic longitude, latitude and radius.
        """
        if not self.in_valid_range(jd_tt):
            logger.warning(
                '%s series evaluated at JD %.1f outside its fitted span %.1f-%.1f; extrapolating',
                self.name,
                jd_tt,
                self.valid_from_jd,
                self.valid_to_jd,
            )
        t = (jd_tt - J2000_JD) / self.timescale
        longitudes = planetary_mean_longitudes(jd_tt)
        sl = sb = sr = 0.0
        for term in self.terms:
            if term.is_polynomial:
                sl += reduce_arcsec(_horner(term.longitude, t))
                sb += _horner(term.latitude, t)
                sr += _horner(term.radius, t)
                continue
            angle = term.phase(longitudes)
            if angle is None:
                continue
            c, s = math.cos(angle), math.sin(angle)
            sl += _horner(term.longitude[0::2], t) * c + _horner(term.longitude[1::2], t) * s
            sb += _horner(term.latitude[0::2], t) * c + _horner(term.latitude[1::2], t) * s
            sr += _horner(term.radius[0::2], t) * c + _horner(term.radius[1::2], t) * s
        return EclipticPosition(
            longitude=normalize_radians(sl * RADIANS_PER_ARCSEC),
            latitude=sb * RADIANS_PER_ARCSEC,
            radius=self.distance * (1.0 + sr * RADIANS_PER_ARCSEC),
        )

    def heliocentric_equatorial(self, jd_tt: float) -> np.ndarray:
        """Return the heliocentric J2000 equatorial position in AU."""
        return ecliptic_to_equatorial(self.evaluate(jd_tt).rectangular(), J2000_OBLIQUITY)
