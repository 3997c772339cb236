"""Configuration: SPICE/leap-second paths and atmosphere defaults from environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from solar_ephemeris.constants import DEFAULT_PRESSURE_MBAR, DEFAULT_TEMPERATURE_C

logger = logging.getLogger(__name__)

DEFAULT_SPICE_PATH = '/var/www/SPICE/'
DEFAULT_KEPLER_ITERATIONS = 100


def get_spice_path() -> str:
    """Return SPICE kernel root directory (SPICE_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('SPICE_PATH', DEFAULT_SPICE_PATH)


def get_leapsecs_path() -> str:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then the newest naif*.tls under SPICE_PATH, then
    leapsecs.txt (which rms-julian may reject, triggering the bundled LSK).

    Returns:
        Path string to LSK or leapsecs file.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = Path(get_spice_path())
    if base.is_dir():
        candidates = sorted(base.glob('naif*.tls'), reverse=True)
        if candidates:
            return str(candidates[0])
        p = base / 'leapseconds.tls'
        if p.exists():
            return str(p)
    return str(base / 'leapsecs.txt')


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning('Ignoring invalid %s=%r; using %s', name, raw, default)
        return default


def get_default_pressure() -> float:
    """Return default barometric pressure in millibars (SOLAR_EPHEMERIS_PRESSURE)."""
    return _float_from_env('SOLAR_EPHEMERIS_PRESSURE', DEFAULT_PRESSURE_MBAR)


def get_default_temperature() -> float:
    """Return default air temperature in deg C (SOLAR_EPHEMERIS_TEMPERATURE)."""
    return _float_from_env('SOLAR_EPHEMERIS_TEMPERATURE', DEFAULT_TEMPERATURE_C)


def get_kepler_max_iterations() -> int:
    """Return the iteration budget for Kepler's equation.

    Reads SOLAR_EPHEMERIS_KEPLER_ITERATIONS; non-positive or non-integer
    values fall back to the default.

    Returns:
        Maximum number of Newton iterations.
    """
    raw = os.environ.get('SOLAR_EPHEMERIS_KEPLER_ITERATIONS', '').strip()
    if not raw:
        return DEFAULT_KEPLER_ITERATIONS
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning(
            'Ignoring invalid SOLAR_EPHEMERIS_KEPLER_ITERATIONS=%r; using %d',
            raw,
            DEFAULT_KEPLER_ITERATIONS,
        )
        return DEFAULT_KEPLER_ITERATIONS
    return value
