"""Tests for body identifiers and heliocentric state resolvers."""

from __future__ import annotations

import logging

import erfa
import numpy as np
import pytest

from solar_ephemeris import bodies, kepler
from solar_ephemeris.errors import ConfigurationError, MalformedInputError

JD_TT_2023_11_09 = 2460258.0 + 69.184 / 86400.0


def test_body_from_name() -> None:
    """Names are matched case-insensitively."""
    assert bodies.Body.from_name(' Venus ') is bodies.Body.VENUS
    assert bodies.Body.from_name('moon') is bodies.Body.MOON
    assert bodies.Body.PLUTO.label == 'Pluto'
    with pytest.raises(MalformedInputError):
        bodies.Body.from_name('Vulcan')


def test_every_body_resolves() -> None:
    """Each major body has a resolver returning finite states."""
    for body in bodies.Body:
        state = bodies.resolve(body).heliocentric_state(2460127.0)
        assert state.position.shape == (3,)
        assert np.all(np.isfinite(state.position))
        assert np.all(np.isfinite(state.velocity))


def test_body_kinds() -> None:
    """Registry entries carry the right kind."""
    assert bodies.resolve(bodies.Body.SUN).kind is bodies.BodyKind.SUN
    assert bodies.resolve(bodies.Body.MOON).kind is bodies.BodyKind.MOON
    assert bodies.resolve(bodies.Body.PLUTO).kind is bodies.BodyKind.MAJOR_PLANET
    assert bodies.resolve(bodies.Body.MARS).kind is bodies.BodyKind.MAJOR_PLANET


def test_registry_is_read_only() -> None:
    """The shared resolver registry cannot be mutated."""
    with pytest.raises(TypeError):
        bodies._REGISTRY[bodies.Body.SUN] = bodies.SunResolver()  # type: ignore[index]


def test_sun_is_origin() -> None:
    """The Sun's heliocentric state is zero."""
    state = bodies.resolve(bodies.Body.SUN).heliocentric_state(2460127.0)
    assert not state.position.any()
    assert not state.velocity.any()


def test_earth_heliocentric_distance() -> None:
    """Earth on 2023-11-09 12:00 UTC is 0.99062 AU from the Sun."""
    state = bodies.earth_state(JD_TT_2023_11_09)
    assert np.linalg.norm(state.position) == pytest.approx(0.9906241599, abs=1e-6)
    assert np.linalg.norm(state.velocity) == pytest.approx(0.0172, abs=0.0004)


def test_moon_is_near_earth() -> None:
    """The Moon's heliocentric position is the Earth's plus moon98."""
    moon = bodies.resolve(bodies.Body.MOON)
    earth = bodies.earth_state(2460127.0)
    offset = moon.heliocentric_position(2460127.0) - earth.position
    assert 0.0023 < np.linalg.norm(offset) < 0.0028


def test_series_velocity_matches_plan94() -> None:
    """Series-table velocities agree with plan94's analytic velocity.

    plan94 is good to a few arcseconds for Mars, about 1e-6 AU/day in
    velocity, so the two theories are compared at 5e-6 AU/day.
    """
    state = bodies.resolve(bodies.Body.MARS).heliocentric_state(2460127.0)
    theirs = erfa.plan94(2400000.5, 2460127.0 - 2400000.5, 4)['v']
    np.testing.assert_allclose(state.velocity, theirs, atol=5e-6)


def test_analytic_planet_warns_outside_span(caplog: pytest.LogCaptureFixture) -> None:
    """plan94 bodies extrapolate with a warning outside AD 1000-3000."""
    with caplog.at_level(logging.WARNING, logger='solar_ephemeris.bodies'):
        bodies.resolve(bodies.Body.JUPITER).heliocentric_state(bodies.PLAN94_VALID_TO_JD + 1000.0)
    assert 'outside AD 1000-3000' in caplog.text


def test_pluto_warns_outside_mean_element_span(caplog: pytest.LogCaptureFixture) -> None:
    """Pluto's mean elements extrapolate with a warning outside 1800-2050."""
    pluto = bodies.resolve(bodies.Body.PLUTO)
    with caplog.at_level(logging.WARNING, logger='solar_ephemeris.kepler'):
        pluto.heliocentric_position(2460127.0)
    assert 'outside their fitted span' not in caplog.text
    with caplog.at_level(logging.WARNING, logger='solar_ephemeris.kepler'):
        position = pluto.heliocentric_position(2488070.0)
    assert np.all(np.isfinite(position))
    assert 'Pluto mean elements evaluated at JD 2488070.0 outside their fitted span' in caplog.text


def test_elements_resolver_kinds() -> None:
    """Comet records resolve as comets; asteroid records as minor planets."""
    comet = kepler.CometElements('c', 2460000.5, 1.0, 0.5, 0.0, 0.0, 0.0)
    asteroid = kepler.AsteroidElements('a', 2460000.5, 2.0, 0.1, 0.0, 0.0, 0.0, 0.0)
    assert bodies.resolve(comet).kind is bodies.BodyKind.COMET
    assert bodies.resolve(asteroid).kind is bodies.BodyKind.MINOR_PLANET
    assert bodies.resolve(asteroid).name == 'a'


def test_elements_resolver_rejects_missing_or_foreign_input() -> None:
    """None is a configuration error; a foreign record is malformed."""
    with pytest.raises(ConfigurationError):
        bodies.ElementsResolver(None)  # type: ignore[arg-type]
    with pytest.raises(MalformedInputError):
        bodies.ElementsResolver({'a': 2.0})  # type: ignore[arg-type]
