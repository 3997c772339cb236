"""Time conversion wrappers around rms-julian and ERFA sidereal time."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

import erfa
import julian

from solar_ephemeris.config import get_leapsecs_path
from solar_ephemeris.constants import (
    DEGREES_PER_HOUR_RA,
    HOURS_PER_CIRCLE,
    JULIAN_DAY_ZERO_JD,
    MJD_OFFSET,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TT_MINUS_TAI,
    TWO_PI,
)
from solar_ephemeris.errors import MalformedInputError

logger = logging.getLogger(__name__)

# Delta-T provider: UTC Julian date -> TT - UT1 in seconds.
DeltaTProvider = Callable[[float], float]

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel if not already loaded.

    rms-julian requires a NAIF LSK (e.g. naif0012.tls). If the configured file
    is missing or not in LSK format, falls back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    try:
        julian.load_lsk(path)
    except (OSError, KeyError, ValueError) as e:
        logger.info(
            'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
            path,
            e,
        )
        julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse a date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string in any form rms-julian accepts; a trailing
            'Z' and the short form 'YYYY HH:MM:SS' (January 1st) are also
            accepted.

    Returns:
        (day, sec) where day counts days since 2000-01-01 and sec is seconds
        into that day; None on parse failure.
    """
    _ensure_leapsecs()
    stripped = string.strip()
    candidates = [stripped]
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO "Z" suffix; the value is UTC anyway.
        candidates.append(stripped[:-1])
    year_hms = re.fullmatch(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})', stripped)
    if year_hms is not None:
        year, hms = year_hms.groups()
        candidates.append(f'{year}-01-01 {hms}')
    for candidate in candidates:
        try:
            result = julian.day_sec_from_string(candidate)
        except (ValueError, TypeError, LookupError):
            continue
        return (int(result[0]), float(result[1]))
    return None


def day_sec_from_datetime(value: datetime) -> tuple[int, float]:
    """Return UTC (day, sec) for a datetime; naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    day = int(julian.day_from_ymd(value.year, value.month, value.day))
    sec = (
        value.hour * SECONDS_PER_HOUR
        + value.minute * SECONDS_PER_MINUTE
        + value.second
        + value.microsecond / 1.0e6
    )
    return (day, sec)


def jd_from_day_sec(day: int, sec: float) -> float:
    """Convert rms-julian (day, sec) to a Julian date on the same time scale."""
    return JULIAN_DAY_ZERO_JD + day + sec / SECONDS_PER_DAY


def day_sec_from_jd(jd: float) -> tuple[int, float]:
    """Split a Julian date into rms-julian (day, sec)."""
    offset = jd - JULIAN_DAY_ZERO_JD
    day = math.floor(offset)
    return (int(day), (offset - day) * SECONDS_PER_DAY)


def jd_from_calendar(year: int, month: int, day: float) -> float:
    """Return the Julian date of a calendar date with a fractional day of month.

    Parameters:
        year: Calendar year (Julian calendar before the Gregorian reform).
        month: Month number, 1-12.
        day: Day of month; the fraction is the time of day (1.5 = noon of the 1st).

    Returns:
        Julian date.

    Raises:
        MalformedInputError: If the month or day is out of range.
    """
    if not 1 <= month <= 12 or not 1.0 <= day < 32.0:
        raise MalformedInputError(f'Invalid calendar date {year}-{month}-{day}')
    whole = math.floor(day)
    return JULIAN_DAY_ZERO_JD + float(julian.day_from_ymd(year, month, 1)) + (whole - 1) + (day - whole)


def jd_from_mjd(mjd: float) -> float:
    """Return the Julian date for a Modified Julian Date."""
    return mjd + MJD_OFFSET


def leap_second_delta_t(jd_utc: float) -> float:
    """Return TT - UTC in seconds from the loaded leap-second table.

    This is the default Delta-T provider: it treats UT1 as UTC, which is good
    to better than a second for dates covered by the leap-second table.

    Parameters:
        jd_utc: UTC Julian date.

    Returns:
        TT - UTC in seconds (32.184 + TAI - UTC).
    """
    _ensure_leapsecs()
    day, _ = day_sec_from_jd(jd_utc)
    return TT_MINUS_TAI + float(julian.delta_t_from_day(day))


@dataclass(frozen=True)
class ConstantDeltaT:
    """Delta-T provider returning a fixed value (seconds)."""

    seconds: float

    def __call__(self, jd_utc: float) -> float:
        return self.seconds


@dataclass(frozen=True)
class ObservationTime:
    """An observation instant on the UTC and TT scales.

    Attributes:
        jd_utc: UTC Julian date.
        delta_t: TT - UT1 in seconds used to derive the dynamical time.
    """

    jd_utc: float
    delta_t: float

    @property
    def jd_tt(self) -> float:
        """Terrestrial Time Julian date."""
        return self.jd_utc + self.delta_t / SECONDS_PER_DAY

    @property
    def jd_ut1(self) -> float:
        """UT1 Julian date (UTC, since DUT1 is not modelled)."""
        return self.jd_utc


def observation_time(
    when: datetime | str | float,
    delta_t: DeltaTProvider | None = None,
) -> ObservationTime:
    """Build an ObservationTime from a datetime, string or UTC Julian date.

    Parameters:
        when: datetime (naive = UTC), date/time string, or UTC Julian date.
        delta_t: Delta-T provider; defaults to leap_second_delta_t.

    Returns:
        ObservationTime for the instant.

    Raises:
        MalformedInputError: If a string cannot be parsed.
    """
    if isinstance(when, datetime):
        jd_utc = jd_from_day_sec(*day_sec_from_datetime(when))
    elif isinstance(when, str):
        parsed = parse_datetime(when)
        if parsed is None:
            raise MalformedInputError(f'Unrecognized date/time: {when!r}')
        jd_utc = jd_from_day_sec(*parsed)
    else:
        jd_utc = float(when)
    provider = delta_t if delta_t is not None else leap_second_delta_t
    return ObservationTime(jd_utc, float(provider(jd_utc)))


def greenwich_apparent_sidereal_time(time: ObservationTime) -> float:
    """Return Greenwich apparent sidereal time in hours [0, 24) (IAU 2006/2000A)."""
    ut1 = time.jd_ut1
    tt = time.jd_tt
    gast = erfa.gst06a(MJD_OFFSET, ut1 - MJD_OFFSET, MJD_OFFSET, tt - MJD_OFFSET)
    return float(gast) / TWO_PI * HOURS_PER_CIRCLE


def local_sidereal_time(time: ObservationTime, longitude_deg: float) -> float:
    """Return local apparent sidereal time in hours [0, 24) for an east longitude."""
    lst = greenwich_apparent_sidereal_time(time) + longitude_deg / DEGREES_PER_HOUR_RA
    return lst % HOURS_PER_CIRCLE
