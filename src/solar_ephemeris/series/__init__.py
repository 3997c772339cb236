"""Harmonic series tables for the planets that ship one (Venus, Mars, Neptune)."""

from __future__ import annotations

from solar_ephemeris.series.table import (
    EclipticPosition,
    Harmonic,
    PlanetTable,
    SeriesTerm,
)

__all__ = ['EclipticPosition', 'Harmonic', 'PlanetTable', 'SeriesTerm', 'load_table']


def load_table(name: str) -> PlanetTable:
    """Return the series table for a planet name ('venus', 'mars', 'neptune').

    Raises:
        KeyError: If no table ships for the planet.
    """
    key = name.strip().lower()
    if key == 'venus':
        from solar_ephemeris.series.venus import TABLE
    elif key == 'mars':
        from solar_ephemeris.series.mars import TABLE
    elif key == 'neptune':
        from solar_ephemeris.series.neptune import TABLE
    else:
        raise KeyError(name)
    return TABLE
