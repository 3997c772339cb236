"""Tests for fixed-column orbital element catalog parsing."""

from __future__ import annotations

import pytest

from solar_ephemeris.catalogs import CatalogDialect, parse_orbit, unpack_epoch
from solar_ephemeris.errors import MalformedInputError
from solar_ephemeris.kepler import AsteroidElements, CometElements

MPC_COMET_LINE = (
    '    CK23V010  2025 07 13.1576  5.092857  0.999309  103.3112   15.0240  102.0074 '
    ' 20231106   8.5  4.0  C/2023 V1 (Lemmon)                                       M'
    'PEC 2023-V23'
)
MPC_ASTEROID_LINE = (
    '00001    3.33  0.15 K239D  60.07881   73.42179   80.25496   10.58688  0.0789126 '
    ' 0.21410680   2.7672543  0 E2023-F87  7283 123 1801-2023 0.65 M-v 30k MPCLINUX  '
    ' 0000      (1) Ceres              20230321'
)
JPL_COMET_LINE = (
    '   C/2023 V1 (Lemmon)                         60215  5.09304502 0.99918231 102.0'
    '0676 103.30969  15.02344 20250713.18186 JPL 1'
)
JPL_NUMBERED_LINE = (
    '     1 Ceres             60200  2.7672544 0.07891253  10.58688  73.42180  80.254'
    '98  60.0787728  3.33  0.12 JPL 48'
)
JPL_UNNUMBERED_LINE = (
    '  1993 BC16   60200   5.2120059 0.13592842  17.34267 226.41108 132.56253 333.928'
    '5365 13.13 0.15 JPL 24'
)
LOWELL_LINE = (
    '     1 Ceres              L.H. Wasserman   3.33  0.15 0.72 848.4 G?      0   0  '
    ' 0   0   0   0 81218 6833 20231222  81.513198  73.391274  80.253704 10.587314 0.'
    '07897659   2.76719926 20230804 1.1E-02 -2.8E-06 20231107 2.3E-02 20240707 2.7E-0'
    '2 20320228 2.7E-02 20320228'
)


def test_mpc_comet() -> None:
    """MPC comet lines give perihelion-form elements."""
    elements = parse_orbit(CatalogDialect.MPC_COMET, MPC_COMET_LINE)
    assert isinstance(elements, CometElements)
    assert elements.name == 'C/2023 V1'
    assert elements.perihelion_jd == pytest.approx(2460869.6576, abs=1e-9)
    assert elements.q == pytest.approx(5.092857)
    assert elements.e == pytest.approx(0.999309)
    assert elements.omega == pytest.approx(103.3112)
    assert elements.node == pytest.approx(15.0240)
    assert elements.i == pytest.approx(102.0074)


def test_mpc_asteroid() -> None:
    """MPC asteroid lines unpack the epoch and keep the daily motion."""
    elements = parse_orbit('mpc_asteroid', MPC_ASTEROID_LINE)
    assert isinstance(elements, AsteroidElements)
    assert elements.name == '(1) Ceres'
    assert elements.epoch_jd == 2460200.5
    assert elements.mean_anomaly == pytest.approx(60.07881)
    assert elements.omega == pytest.approx(73.42179)
    assert elements.node == pytest.approx(80.25496)
    assert elements.i == pytest.approx(10.58688)
    assert elements.e == pytest.approx(0.0789126)
    assert elements.a == pytest.approx(2.7672543)
    assert elements.mean_motion == pytest.approx(0.21410680)


def test_jpl_comet() -> None:
    """JPL comet lines cut the common name and read the YYYYMMDD.ddddd date."""
    elements = parse_orbit(CatalogDialect.JPL_COMET, JPL_COMET_LINE)
    assert isinstance(elements, CometElements)
    assert elements.name == 'C/2023 V1'
    assert elements.perihelion_jd == pytest.approx(2460869.68186, abs=1e-9)
    assert elements.q == pytest.approx(5.09304502)
    assert elements.e == pytest.approx(0.99918231)
    assert elements.i == pytest.approx(102.00676)
    assert elements.omega == pytest.approx(103.30969)
    assert elements.node == pytest.approx(15.02344)


def test_jpl_numbered_asteroid() -> None:
    """JPL numbered asteroid epochs are Modified Julian Dates."""
    elements = parse_orbit(CatalogDialect.JPL_NUMBERED_ASTEROID, JPL_NUMBERED_LINE)
    assert elements.name == '1 Ceres'
    assert elements.epoch_jd == 2460200.5
    assert elements.a == pytest.approx(2.7672544)
    assert elements.mean_anomaly == pytest.approx(60.0787728)
    assert elements.daily_motion is None


def test_jpl_unnumbered_asteroid() -> None:
    """JPL unnumbered asteroid lines use the provisional designation."""
    elements = parse_orbit('jpl-unnumbered-asteroid', JPL_UNNUMBERED_LINE)
    assert elements.name == '1993 BC16'
    assert elements.epoch_jd == 2460200.5
    assert elements.a == pytest.approx(5.2120059)
    assert elements.e == pytest.approx(0.13592842)
    assert elements.i == pytest.approx(17.34267)
    assert elements.omega == pytest.approx(226.41108)
    assert elements.node == pytest.approx(132.56253)
    assert elements.mean_anomaly == pytest.approx(333.9285365)


def test_lowell_asteroid() -> None:
    """Lowell lines read the calendar epoch and osculating elements."""
    elements = parse_orbit(CatalogDialect.LOWELL_ASTEROID, LOWELL_LINE)
    assert elements.name == 'Ceres'
    assert elements.epoch_jd == 2460300.5
    assert elements.mean_anomaly == pytest.approx(81.513198)
    assert elements.omega == pytest.approx(73.391274)
    assert elements.node == pytest.approx(80.253704)
    assert elements.i == pytest.approx(10.587314)
    assert elements.e == pytest.approx(0.07897659)
    assert elements.a == pytest.approx(2.76719926)


def test_trailing_newline_is_ignored() -> None:
    """Lines read from a file keep their newline; it does not matter."""
    assert parse_orbit('mpc_comet', MPC_COMET_LINE + '\n') == parse_orbit('mpc_comet', MPC_COMET_LINE)


def test_short_line_rejected() -> None:
    """A line cut before the designation columns is malformed."""
    with pytest.raises(MalformedInputError, match='needs at least 168'):
        parse_orbit(CatalogDialect.MPC_COMET, MPC_COMET_LINE[:120])


def test_unreadable_field_names_the_field() -> None:
    """A non-numeric perihelion day is reported with its field name."""
    line = MPC_COMET_LINE[:22] + 'XX.YYYY' + MPC_COMET_LINE[29:]
    with pytest.raises(MalformedInputError, match='perihelion date day'):
        parse_orbit(CatalogDialect.MPC_COMET, line)


def test_invalid_calendar_month_rejected() -> None:
    """Month 13 in a perihelion date is malformed."""
    line = MPC_COMET_LINE[:19] + '13' + MPC_COMET_LINE[21:]
    with pytest.raises(MalformedInputError):
        parse_orbit(CatalogDialect.MPC_COMET, line)


def test_hyperbolic_eccentricity_in_asteroid_dialect_rejected() -> None:
    """Semi-major-axis dialects cannot carry e >= 1."""
    line = JPL_NUMBERED_LINE[:42] + '1.07891253' + JPL_NUMBERED_LINE[52:]
    with pytest.raises(MalformedInputError):
        parse_orbit(CatalogDialect.JPL_NUMBERED_ASTEROID, line)


@pytest.mark.parametrize('line', [None, '', '   \n'])
def test_empty_input_rejected(line: str | None) -> None:
    """Absent or blank input is malformed for every dialect."""
    for dialect in CatalogDialect:
        with pytest.raises(MalformedInputError, match='empty'):
            parse_orbit(dialect, line)


def test_dialect_lookup() -> None:
    """Dialect names are case and separator insensitive; unknown names raise."""
    assert CatalogDialect.from_name('Lowell-Asteroid') is CatalogDialect.LOWELL_ASTEROID
    with pytest.raises(MalformedInputError):
        CatalogDialect.from_name('skybot')


@pytest.mark.parametrize(
    ('code', 'expected'),
    [('K239D', (2023, 9, 13)), ('J981V', (1998, 1, 31)), ('I00A1', (1800, 10, 1))],
)
def test_unpack_epoch(code: str, expected: tuple[int, int, int]) -> None:
    """Packed MPC dates decode century, year, month and day."""
    assert unpack_epoch(code) == expected


@pytest.mark.parametrize('code', ['K239', 'L239D', 'K2X9D', 'K23D1'])
def test_unpack_epoch_rejects_bad_codes(code: str) -> None:
    """Wrong length, unknown century, non-digit year or month > 12 raise."""
    with pytest.raises(MalformedInputError):
        unpack_epoch(code)
