"""Tests for sexagesimal parsing and formatting."""

from __future__ import annotations

import math

import pytest

from solar_ephemeris.angle_utils import dms_string, normalize_degrees, normalize_radians, parse_angle


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('51:04:43', 51.0 + 4.0 / 60.0 + 43.0 / 3600.0),
        ('-00:17:40', -(17.0 / 60.0 + 40.0 / 3600.0)),
        ('-00 17 40', -(17.0 / 60.0 + 40.0 / 3600.0)),
        ('12 30', 12.5),
        ('  7.25 ', 7.25),
        ('10:00:59.5', 10.0 + 59.5 / 3600.0),
    ],
)
def test_parse_angle(text: str, expected: float) -> None:
    """Colon or space separated fields; the sign applies to the whole angle."""
    assert parse_angle(text) == pytest.approx(expected)


@pytest.mark.parametrize('text', ['', '   ', 'abc', '10:60:00', '10:-5:00', '1 2 3 4', '10:00:60'])
def test_parse_angle_rejects(text: str) -> None:
    """Garbage, out-of-range minutes/seconds and too many fields return None."""
    assert parse_angle(text) is None


def test_dms_string() -> None:
    """Fields are zero padded and rounding carries into minutes."""
    assert dms_string(9.573884818285455, 'hms', 3) == ' 09h 34m 25.985s'
    assert dms_string(-25.973636895902157, 'dms', 2) == '-25d 58m 25.09s'
    assert dms_string(0.9999999, ':: ', 1) == ' 01: 00: 00.0'


def test_dms_string_without_decimals() -> None:
    """ndecimal=0 drops the fractional part."""
    assert dms_string(1.5, 'dms', 0) == ' 01d 30m 00s'


def test_normalize() -> None:
    """Angles wrap into one positive turn."""
    assert normalize_degrees(-30.0) == pytest.approx(330.0)
    assert normalize_degrees(720.0) == 0.0
    assert normalize_radians(-math.pi / 2.0) == pytest.approx(1.5 * math.pi)
    assert 0.0 <= normalize_radians(7.0 * math.pi) < 2.0 * math.pi
