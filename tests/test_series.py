"""Tests for harmonic series table parsing and evaluation."""

from __future__ import annotations

import logging
import math

import erfa
import numpy as np
import pytest

from solar_ephemeris.errors import MalformedInputError
from solar_ephemeris.series import PlanetTable, load_table


def _tiny_table() -> PlanetTable:
    # One polynomial term (degree 1) and one periodic term 2*Venus - 1*EMB (degree 0).
    return PlanetTable.from_packed(
        name='Tiny',
        max_harmonic=(0, 2, 1, 0, 0, 0, 0, 0, 0),
        max_power_of_t=1,
        arguments=(0, 1, 2, 2, 2, -1, 3, 0, -1),
        longitude=(100.0, 3600.0, 10.0, 20.0),
        latitude=(0.0, 0.0, 5.0, 0.0),
        radius=(0.0, 0.0, 0.0, 1000.0),
        distance=2.0,
        valid_from_jd=2400000.5,
        valid_to_jd=2500000.5,
    )


def test_packed_table_parses_into_terms() -> None:
    """The flat argument array becomes structured terms."""
    table = _tiny_table()
    assert len(table.terms) == 2
    poly, periodic = table.terms
    assert poly.is_polynomial
    assert poly.longitude == (100.0, 3600.0)
    assert [(h.multiplier, h.argument) for h in periodic.harmonics] == [(2, 1), (-1, 2)]
    assert periodic.longitude == (10.0, 20.0)


def test_truncated_argument_table_rejected() -> None:
    """A missing terminator is a malformed table."""
    with pytest.raises(MalformedInputError, match='not terminated'):
        PlanetTable.from_packed(
            name='Bad',
            max_harmonic=(0,) * 9,
            max_power_of_t=0,
            arguments=(0, 0),
            longitude=(1.0,),
            latitude=(1.0,),
            radius=(1.0,),
            distance=1.0,
            valid_from_jd=0.0,
            valid_to_jd=1.0,
        )


def test_unused_amplitudes_rejected() -> None:
    """Amplitude arrays longer than the terms need are malformed."""
    with pytest.raises(MalformedInputError, match='unused'):
        PlanetTable.from_packed(
            name='Bad',
            max_harmonic=(0,) * 9,
            max_power_of_t=0,
            arguments=(0, 0, -1),
            longitude=(1.0, 2.0),
            latitude=(1.0,),
            radius=(1.0,),
            distance=1.0,
            valid_from_jd=0.0,
            valid_to_jd=1.0,
        )


def test_tiny_table_evaluation_at_j2000() -> None:
    """At J2000 only constant coefficients contribute."""
    from solar_ephemeris.fundamental import planetary_mean_longitudes

    pos = _tiny_table().evaluate(2451545.0)
    lon = planetary_mean_longitudes(2451545.0)
    angle = 2.0 * lon[1] - lon[2]
    arcsec = math.pi / 648000.0
    expected_lon = (3600.0 + 10.0 * math.cos(angle) + 20.0 * math.sin(angle)) * arcsec
    assert pos.longitude == pytest.approx(expected_lon, rel=1e-12)
    assert pos.latitude == pytest.approx(5.0 * math.cos(angle) * arcsec, abs=1e-14)
    assert pos.radius == pytest.approx(2.0 * (1.0 + 1000.0 * math.sin(angle) * arcsec))


def test_shipped_tables_parse() -> None:
    """Venus, Mars and Neptune tables load with their known term counts."""
    assert len(load_table('venus').terms) == 108
    assert len(load_table('mars').terms) == 201
    assert len(load_table('Neptune').terms) == 59
    with pytest.raises(KeyError):
        load_table('vulcan')


def test_venus_heliocentric_distance() -> None:
    """Venus's radius on 2023-11-09 12:00 UTC matches the DE404 fit."""
    pos = load_table('venus').evaluate(2460258.0 + 69.184 / 86400.0)
    assert pos.radius == pytest.approx(0.7191297389456842, abs=1e-6)
    assert 0.0 <= pos.longitude < 2.0 * math.pi


@pytest.mark.parametrize(
    ('name', 'planet', 'tol_au'),
    [('venus', 2, 5e-5), ('mars', 4, 1e-4), ('neptune', 8, 1e-2)],
)
def test_series_agree_with_plan94(name: str, planet: int, tol_au: float) -> None:
    """Series positions agree with ERFA's independent plan94 theory."""
    jd = 2460127.0
    ours = load_table(name).heliocentric_equatorial(jd)
    theirs = erfa.plan94(2400000.5, jd - 2400000.5, planet)['p']
    np.testing.assert_allclose(ours, theirs, atol=tol_au)


def test_out_of_range_extrapolates_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Dates beyond the fitted span still evaluate but log a warning."""
    table = load_table('mars')
    with caplog.at_level(logging.WARNING, logger='solar_ephemeris.series.table'):
        pos = table.evaluate(table.valid_to_jd + 3650.0)
    assert math.isfinite(pos.radius)
    assert 'outside its fitted span' in caplog.text


def test_evaluation_is_deterministic() -> None:
    """Repeated evaluation yields bit-identical results."""
    table = load_table('neptune')
    assert table.evaluate(2460000.5) == table.evaluate(2460000.5)
