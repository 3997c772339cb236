"""Tests for the reference-frame pipeline, light time and refraction."""

from __future__ import annotations

import erfa
import numpy as np
import pytest

from solar_ephemeris import frames
from solar_ephemeris.bodies import Body, Resolver, StateVector, resolve
from solar_ephemeris.constants import SPEED_OF_LIGHT_AU_PER_DAY
from solar_ephemeris.errors import ConvergenceError
from solar_ephemeris.site import Site
from solar_ephemeris.time_utils import ObservationTime

TIME_2023_11_09 = ObservationTime(2460258.0, 69.184)
TIME_2023_07_01 = ObservationTime(2460127.0, 69.184)


class _FixedResolver(Resolver):
    name = 'Fixed'

    def __init__(self, position: list[float]) -> None:
        self.position = np.array(position)

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        return self.position.copy()


class _RunawayResolver(Resolver):
    """Recedes faster than light, so light time never settles."""

    name = 'Runaway'

    def heliocentric_position(self, jd_tt: float) -> np.ndarray:
        receding = SPEED_OF_LIGHT_AU_PER_DAY * (1.0 + 2.0 * (2460200.0 - jd_tt))
        return np.array([1.0 + receding, 0.0, 0.0])


def _static_earth(jd_tt: float) -> StateVector:
    return StateVector(np.array([1.0, 0.0, 0.0]), np.zeros(3))


def test_refraction_at_horizon() -> None:
    """Bennett's formula gives about 34.5 arcminutes at the horizon."""
    assert frames.refraction(0.0, 1010.0, 10.0) == pytest.approx(0.5742, abs=0.002)


def test_refraction_limits() -> None:
    """No refraction near the zenith; below -1 degree the -1 degree value applies."""
    assert frames.refraction(89.95, 1010.0, 10.0) == 0.0
    assert frames.refraction(-5.0, 1010.0, 10.0) == frames.refraction(-1.0, 1010.0, 10.0)


def test_refraction_scales_with_pressure_and_temperature() -> None:
    """Thinner or warmer air refracts less."""
    base = frames.refraction(20.0, 1010.0, 10.0)
    assert frames.refraction(20.0, 505.0, 10.0) == pytest.approx(base / 2.0)
    assert frames.refraction(20.0, 1010.0, 30.0) < base


def test_refract_altitude_is_self_consistent() -> None:
    """The observed altitude equals the geometric one plus refraction at the observed altitude."""
    observed = frames.refract_altitude(39.1540754, 1010.0, 10.0)
    assert observed - 39.1540754 == pytest.approx(0.0203, abs=1e-4)
    assert observed - 39.1540754 == pytest.approx(frames.refraction(observed, 1010.0, 10.0), abs=3e-5)


def test_true_of_date_matrix_matches_erfa_without_bias() -> None:
    """Precession-nutation agrees with ERFA's bias-precession-nutation to the frame bias."""
    jd = 2460127.0
    ours = frames.true_of_date_matrix(jd)
    np.testing.assert_allclose(ours @ ours.T, np.eye(3), atol=1e-14)
    np.testing.assert_allclose(ours, erfa.pnm06a(2400000.5, jd - 2400000.5), atol=2e-7)


def test_earth_venus_geometric_distance() -> None:
    """Geometric Earth-Venus distance on 2023-11-09 12:00 UTC."""
    pipeline = frames.FramePipeline(resolve(Body.VENUS))
    state = pipeline.geocentric(TIME_2023_11_09.jd_tt)
    assert np.linalg.norm(state.position) == pytest.approx(0.818367547890153, abs=1e-5)


def test_light_time_converges() -> None:
    """Venus's light time converges quickly and matches distance / c."""
    pipeline = frames.FramePipeline(resolve(Body.VENUS))
    observer = frames.geocentric_observer(TIME_2023_07_01)
    vec, tau, iterations = pipeline.light_time_corrected(TIME_2023_07_01.jd_tt, observer)
    assert iterations <= 6
    assert tau == pytest.approx(vec.distance / SPEED_OF_LIGHT_AU_PER_DAY, abs=1e-12)


@pytest.mark.parametrize(('body', 'low', 'high'), [(Body.NEPTUNE, 28.0, 31.5), (Body.PLUTO, 32.0, 36.0)])
def test_light_time_converges_for_distant_bodies(body: Body, low: float, high: float) -> None:
    """Hours of light time still settle well inside the iteration cap."""
    pipeline = frames.FramePipeline(resolve(body))
    observer = frames.geocentric_observer(TIME_2023_07_01)
    vec, tau, iterations = pipeline.light_time_corrected(TIME_2023_07_01.jd_tt, observer)
    assert low < vec.distance < high
    assert iterations < frames.LIGHT_TIME_MAX_ITERATIONS
    assert tau == pytest.approx(vec.distance / SPEED_OF_LIGHT_AU_PER_DAY, abs=1e-12)
    emitted = resolve(body).heliocentric_position(TIME_2023_07_01.jd_tt - tau)
    np.testing.assert_allclose(vec.as_array(), emitted - observer.position, atol=1e-12)


def test_light_time_failure_raises() -> None:
    """A target that outruns its own light raises ConvergenceError."""
    pipeline = frames.FramePipeline(_RunawayResolver(), earth=_static_earth)
    observer = frames.geocentric_observer(TIME_2023_07_01, _static_earth)
    with pytest.raises(ConvergenceError):
        pipeline.astrometric(TIME_2023_07_01, observer)


def test_injected_earth_state_is_used() -> None:
    """A supplied Earth state replaces the built-in theory."""
    pipeline = frames.FramePipeline(_FixedResolver([2.0, 0.0, 0.0]), earth=_static_earth)
    observer = frames.geocentric_observer(TIME_2023_07_01, _static_earth)
    vec = pipeline.astrometric(TIME_2023_07_01, observer)
    np.testing.assert_allclose(vec.as_array(), [1.0, 0.0, 0.0])
    assert pipeline.geocentric(TIME_2023_07_01.jd_tt).position[0] == 1.0


def test_geometric_astrometric_skips_light_time() -> None:
    """With light_time=False the body is taken at the observation time."""
    pipeline = frames.FramePipeline(resolve(Body.MARS))
    observer = frames.geocentric_observer(TIME_2023_07_01)
    geometric = pipeline.astrometric(TIME_2023_07_01, observer, light_time=False)
    np.testing.assert_allclose(
        geometric.as_array(), pipeline.geocentric(TIME_2023_07_01.jd_tt).position, atol=1e-15
    )


def test_apparent_without_velocity_is_pure_rotation() -> None:
    """A stationary observer sees no aberration; only precession-nutation remains."""
    pipeline = frames.FramePipeline(_FixedResolver([2.0, 0.0, 0.0]), earth=_static_earth)
    observer = frames.geocentric_observer(TIME_2023_07_01, _static_earth)
    vec = pipeline.apparent(TIME_2023_07_01, observer)
    expected = frames.true_of_date_matrix(TIME_2023_07_01.jd_tt) @ np.array([1.0, 0.0, 0.0])
    np.testing.assert_allclose(vec.as_array(), expected, atol=1e-14)


def test_site_observer_offset_is_earth_radius() -> None:
    """A sea-level site is about one Earth radius from the geocenter."""
    site = Site(latitude=0.0, longitude=0.0, height=0.0)
    geocenter = frames.geocentric_observer(TIME_2023_07_01)
    observer = frames.site_observer(TIME_2023_07_01, site)
    offset_km = np.linalg.norm(observer.position - geocenter.position) * 149597870.0
    assert offset_km == pytest.approx(6378.137, abs=1e-3)
    assert observer.site is site


def test_horizontal_refraction_raises_altitude_and_keeps_distance() -> None:
    """Refraction lifts the altitude, keeps azimuth and distance, and moves RA/Dec."""
    site = Site(latitude=51.078611, longitude=-0.294444, height=80.0)
    pipeline = frames.FramePipeline(resolve(Body.VENUS))
    plain = pipeline.horizontal(TIME_2023_07_01, site, refract=False)
    refracted = pipeline.horizontal(TIME_2023_07_01, site, refract=True)
    assert refracted.altitude - plain.altitude == pytest.approx(
        frames.refraction(refracted.altitude, 1010.0, 10.0), abs=3e-5
    )
    assert refracted.azimuth == pytest.approx(plain.azimuth)
    assert refracted.distance == pytest.approx(plain.distance, rel=1e-12)
    cos_sep = np.dot(refracted.as_array(), plain.as_array()) / (refracted.distance * plain.distance)
    separation = np.degrees(np.arccos(min(cos_sep, 1.0)))
    assert separation == pytest.approx(refracted.altitude - plain.altitude, abs=1e-5)
