"""Sexagesimal angle parsing and formatting, plus small angle helpers."""

from __future__ import annotations

import math
import re

from solar_ephemeris.constants import DEGREES_PER_CIRCLE, TWO_PI

_SEPARATORS = re.compile(r'[\s:]+')


def parse_angle(string: str) -> float | None:
    """Parse an angle given as degrees (or hours), minutes and seconds.

    Accepts one, two or three numbers separated by whitespace or colons
    (e.g. ``'51 04 43'``, ``'-00:17:40'``, ``'12.5'``). Minutes and seconds
    must be non-negative and below 60; a leading minus sign negates the whole
    value, so ``'-00 17 40'`` is -0.2944.

    Parameters:
        string: Angle text.

    Returns:
        Angle in the units of the first field, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = [p for p in _SEPARATORS.split(s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    for minor in values[1:]:
        if minor < 0.0 or minor >= 60.0:
            return None
    angle = abs(values[0])
    scale = 1.0
    for minor in values[1:]:
        scale /= 60.0
        angle += minor * scale
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(value: float, separator: str = 'dms', ndecimal: int = 3) -> str:
    """Format an angle as degrees (or hours), minutes and seconds.

    Parameters:
        value: Angle in degrees, or hours for right ascension.
        separator: Three characters written after each field (e.g. 'hms').
        ndecimal: Decimal places on the seconds field.

    Returns:
        Formatted string such as ``' 12h 30m 45.123s'``.
    """
    sep1, sep2, sep3 = (separator + '   ')[:3]
    sign = '-' if value < 0 else ' '
    ntens = 10**ndecimal
    total = round(abs(value) * 3600.0 * ntens)
    whole_sec, frac = divmod(total, ntens)
    minutes, sec = divmod(whole_sec, 60)
    deg, minutes = divmod(minutes, 60)
    frac_text = f'.{frac:0{ndecimal}d}' if ndecimal > 0 else ''
    return f'{sign}{deg:02d}{sep1} {minutes:02d}{sep2} {sec:02d}{frac_text}{sep3}'.rstrip()


def normalize_radians(angle: float) -> float:
    """Return angle reduced to [0, 2*pi)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0.0:
        angle += TWO_PI
    return angle


def normalize_degrees(angle: float) -> float:
    """Return angle reduced to [0, 360)."""
    angle = math.fmod(angle, DEGREES_PER_CIRCLE)
    if angle < 0.0:
        angle += DEGREES_PER_CIRCLE
    return angle
