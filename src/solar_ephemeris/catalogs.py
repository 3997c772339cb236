"""Fixed-column orbital element catalogs (MPC, JPL, Lowell) to element records.

Each dialect is a one-line record with fields at fixed columns. Parsing is
all-or-nothing: any short line or unreadable field raises
MalformedInputError naming the dialect and field, and no record is returned.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from solar_ephemeris.errors import MalformedInputError
from solar_ephemeris.kepler import AsteroidElements, CometElements
from solar_ephemeris.time_utils import jd_from_calendar, jd_from_mjd

logger = logging.getLogger(__name__)

_CENTURIES = {'I': 18, 'J': 19, 'K': 20}
_PACKED_DIGITS = '123456789ABCDEFGHIJKLMNOPQRSTUV'


class CatalogDialect(enum.Enum):
    """Supported one-line element formats and their minimum line lengths."""

    MPC_COMET = 168
    MPC_ASTEROID = 202
    JPL_COMET = 119
    JPL_NUMBERED_ASTEROID = 105
    JPL_UNNUMBERED_ASTEROID = 95
    LOWELL_ASTEROID = 267

    @property
    def min_length(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> CatalogDialect:
        """Look up a dialect by name, ignoring case and '-'/'_' differences."""
        key = name.strip().upper().replace('-', '_').replace(' ', '_')
        try:
            return cls[key]
        except KeyError:
            raise MalformedInputError(f'Unknown catalog dialect: {name!r}') from None


class _Record:
    """Column reader bound to one catalog line."""

    def __init__(self, dialect: CatalogDialect, line: str | None) -> None:
        if not line or not line.strip():
            raise MalformedInputError(f'{dialect.name}: empty element line')
        line = line.rstrip('\r\n')
        if len(line) < dialect.min_length:
            raise MalformedInputError(
                f'{dialect.name}: line has {len(line)} characters, needs at least {dialect.min_length}'
            )
        self.dialect = dialect
        self.line = line

    def text(self, start: int, stop: int) -> str:
        return self.line[start:stop].strip()

    def _convert(self, start: int, stop: int, field: str, kind: Callable[[str], float]) -> float:
        raw = self.text(start, stop)
        try:
            return kind(raw)
        except ValueError:
            raise MalformedInputError(
                f'{self.dialect.name}: {field} field {raw!r} (columns {start + 1}-{stop}) is not a number'
            ) from None

    def number(self, start: int, stop: int, field: str) -> float:
        return self._convert(start, stop, field, float)

    def integer(self, start: int, stop: int, field: str) -> int:
        return int(self._convert(start, stop, field, int))

    def name(self, start: int, stop: int) -> str:
        """Designation text, cut before a parenthesized common name."""
        text = self.line[start:stop]
        paren = text.find('(')
        if paren > 0 and text[:paren].strip():
            text = text[:paren]
        return text.strip()

    def calendar_jd(
        self,
        year: tuple[int, int],
        month: tuple[int, int],
        day: tuple[int, int],
        field: str,
    ) -> float:
        y = self.integer(*year, f'{field} year')
        m = self.integer(*month, f'{field} month')
        d = self.number(*day, f'{field} day')
        try:
            return jd_from_calendar(y, m, d)
        except MalformedInputError as e:
            raise MalformedInputError(f'{self.dialect.name}: {field}: {e}') from None


def unpack_epoch(code: str) -> tuple[int, int, int]:
    """Decode an MPC packed date such as 'K239D' to (2023, 9, 13).

    Raises:
        MalformedInputError: If the code is not a valid packed date.
    """
    code = code.strip()
    if len(code) != 5 or code[0] not in _CENTURIES or not code[1:3].isdigit():
        raise MalformedInputError(f'Invalid MPC packed epoch {code!r}')
    month = _PACKED_DIGITS.find(code[3]) + 1
    day = _PACKED_DIGITS.find(code[4]) + 1
    if not 1 <= month <= 12 or day < 1:
        raise MalformedInputError(f'Invalid MPC packed epoch {code!r}')
    return (_CENTURIES[code[0]] * 100 + int(code[1:3]), month, day)


def _mpc_comet(r: _Record) -> CometElements:
    return CometElements(
        name=r.name(102, 158),
        perihelion_jd=r.calendar_jd((14, 18), (19, 21), (22, 29), 'perihelion date'),
        q=r.number(30, 39, 'perihelion distance'),
        e=r.number(41, 49, 'eccentricity'),
        omega=r.number(51, 59, 'argument of perihelion'),
        node=r.number(61, 69, 'ascending node'),
        i=r.number(71, 79, 'inclination'),
    )


def _mpc_asteroid(r: _Record) -> AsteroidElements:
    year, month, day = unpack_epoch(r.text(20, 25))
    return AsteroidElements(
        name=r.text(166, 194),
        epoch_jd=jd_from_calendar(year, month, day),
        mean_anomaly=r.number(26, 35, 'mean anomaly'),
        omega=r.number(37, 46, 'argument of perihelion'),
        node=r.number(48, 57, 'ascending node'),
        i=r.number(59, 68, 'inclination'),
        e=r.number(70, 79, 'eccentricity'),
        daily_motion=r.number(80, 91, 'mean daily motion'),
        a=r.number(92, 103, 'semi-major axis'),
    )


def _jpl_comet(r: _Record) -> CometElements:
    return CometElements(
        name=r.name(0, 43),
        perihelion_jd=r.calendar_jd((105, 109), (109, 111), (111, 119), 'perihelion date'),
        q=r.number(52, 63, 'perihelion distance'),
        e=r.number(64, 74, 'eccentricity'),
        i=r.number(75, 84, 'inclination'),
        omega=r.number(85, 94, 'argument of perihelion'),
        node=r.number(95, 104, 'ascending node'),
    )


def _jpl_numbered(r: _Record) -> AsteroidElements:
    return AsteroidElements(
        name=r.text(0, 24),
        epoch_jd=jd_from_mjd(r.integer(25, 30, 'epoch')),
        a=r.number(31, 41, 'semi-major axis'),
        e=r.number(42, 52, 'eccentricity'),
        i=r.number(53, 62, 'inclination'),
        omega=r.number(63, 72, 'argument of perihelion'),
        node=r.number(73, 82, 'ascending node'),
        mean_anomaly=r.number(83, 94, 'mean anomaly'),
    )


def _jpl_unnumbered(r: _Record) -> AsteroidElements:
    return AsteroidElements(
        name=r.text(0, 13),
        epoch_jd=jd_from_mjd(r.integer(14, 19, 'epoch')),
        a=r.number(20, 31, 'semi-major axis'),
        e=r.number(32, 42, 'eccentricity'),
        i=r.number(43, 52, 'inclination'),
        omega=r.number(53, 62, 'argument of perihelion'),
        node=r.number(63, 72, 'ascending node'),
        mean_anomaly=r.number(73, 84, 'mean anomaly'),
    )


def _lowell(r: _Record) -> AsteroidElements:
    return AsteroidElements(
        name=r.text(7, 25),
        epoch_jd=r.calendar_jd((106, 110), (110, 112), (112, 114), 'epoch'),
        mean_anomaly=r.number(115, 125, 'mean anomaly'),
        omega=r.number(126, 136, 'argument of perihelion'),
        node=r.number(137, 147, 'ascending node'),
        i=r.number(147, 157, 'inclination'),
        e=r.number(158, 168, 'eccentricity'),
        a=r.number(168, 181, 'semi-major axis'),
    )


_PARSERS: dict[CatalogDialect, Callable[[_Record], CometElements | AsteroidElements]] = {
    CatalogDialect.MPC_COMET: _mpc_comet,
    CatalogDialect.MPC_ASTEROID: _mpc_asteroid,
    CatalogDialect.JPL_COMET: _jpl_comet,
    CatalogDialect.JPL_NUMBERED_ASTEROID: _jpl_numbered,
    CatalogDialect.JPL_UNNUMBERED_ASTEROID: _jpl_unnumbered,
    CatalogDialect.LOWELL_ASTEROID: _lowell,
}


def parse_orbit(dialect: CatalogDialect | str, line: str | None) -> CometElements | AsteroidElements:
    """Parse one catalog line into an orbital element record.

    Parameters:
        dialect: CatalogDialect or its name (e.g. 'mpc_comet').
        line: The element line.

    Returns:
        CometElements for comet dialects, AsteroidElements otherwise.

    Raises:
        MalformedInputError: For short lines, unreadable fields, or elements
            that fail validation.
    """
    if isinstance(dialect, str):
        dialect = CatalogDialect.from_name(dialect)
    record = _Record(dialect, line)
    elements = _PARSERS[dialect](record)
    logger.debug('Parsed %s elements for %s', dialect.name, elements.name)
    return elements
