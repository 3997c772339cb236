"""Reference-frame pipeline from heliocentric states to observed coordinates.

Stages, in order (each query stops at its own terminal stage):

1. heliocentric body state from a resolver;
2. geocentric (or site-relative) vector, optionally iterated for light time;
3. classical aberration from the observer's velocity;
4. precession and nutation to the true equator and equinox of date;
5. topocentric parallax (when the observer is a site);
6. horizontal coordinates with optional refraction.

Inputs are heliocentric J2000 mean equatorial vectors (AU, AU/day).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

import erfa
import numpy as np

from solar_ephemeris.bodies import Resolver, StateVector, earth_state
from solar_ephemeris.config import get_default_pressure, get_default_temperature
from solar_ephemeris.constants import (
    HOURS_PER_CIRCLE,
    J2000_JD,
    MJD_OFFSET,
    SPEED_OF_LIGHT_AU_PER_DAY,
    TWO_PI,
)
from solar_ephemeris.errors import ConvergenceError
from solar_ephemeris.site import Site
from solar_ephemeris.time_utils import (
    ObservationTime,
    greenwich_apparent_sidereal_time,
    local_sidereal_time,
)
from solar_ephemeris.vectors import PositionVector, VelocityVector

logger = logging.getLogger(__name__)

LIGHT_TIME_TOLERANCE_DAYS = 1.0e-12
LIGHT_TIME_MAX_ITERATIONS = 10
REFRACTION_TOLERANCE_DEG = 3.0e-5
REFRACTION_MAX_ITERATIONS = 20
# Refraction is not applied above this altitude, and the formula is
# evaluated no lower than REFRACTION_FLOOR_DEG.
REFRACTION_CEILING_DEG = 89.9
REFRACTION_FLOOR_DEG = -1.0


@dataclass(frozen=True)
class ObserverState:
    """Heliocentric J2000 state of the observer.

    Attributes:
        position: AU.
        velocity: AU/day.
        site: The observing site, or None for the Earth's center.
    """

    position: np.ndarray
    velocity: np.ndarray
    site: Site | None = None


def true_of_date_matrix(jd_tt: float) -> np.ndarray:
    """Rotation from the J2000 mean equator to the true equator of date.

    IAU 2006 precession (relative to J2000, so the frame bias cancels)
    followed by IAU 2000A nutation.
    """
    date2 = jd_tt - MJD_OFFSET
    precession = erfa.pmat06(MJD_OFFSET, date2) @ erfa.pmat06(MJD_OFFSET, J2000_JD - MJD_OFFSET).T
    return erfa.num06a(MJD_OFFSET, date2) @ precession


def geocentric_observer(
    time: ObservationTime,
    earth: Callable[[float], StateVector] = earth_state,
) -> ObserverState:
    """Observer at the Earth's center."""
    state = earth(time.jd_tt)
    return ObserverState(state.position, state.velocity)


def site_observer(
    time: ObservationTime,
    site: Site,
    earth: Callable[[float], StateVector] = earth_state,
) -> ObserverState:
    """Observer at a site on the rotating Earth.

    The site vector is built in the true equator of date from Greenwich
    apparent sidereal time, then rotated back to J2000.
    """
    site.require('latitude', 'longitude', 'height')
    gast = greenwich_apparent_sidereal_time(time)
    to_date = true_of_date_matrix(time.jd_tt)
    offset = to_date.T @ PositionVector.from_site(site, gast).as_array()
    diurnal = to_date.T @ VelocityVector.from_site(site, gast).as_array()
    state = earth(time.jd_tt)
    return ObserverState(state.position + offset, state.velocity + diurnal, site)


def refraction(altitude_deg: float, pressure: float, temperature: float) -> float:
    """Atmospheric refraction in degrees for an observed altitude.

    Bennett's formula scaled for pressure (millibars) and temperature
    (deg C). Returns 0 above 89.9 degrees; below -1 degree the value at -1
    degree is used.
    """
    if altitude_deg > REFRACTION_CEILING_DEG:
        return 0.0
    h = max(altitude_deg, REFRACTION_FLOOR_DEG)
    r = 0.016667 / math.tan(math.radians(h + 7.31 / (h + 4.4)))
    return r * (0.28 * pressure / (temperature + 273.0))


def refract_altitude(altitude_deg: float, pressure: float, temperature: float) -> float:
    """Return the observed altitude for a geometric (unrefracted) altitude.

    Iterates because refraction is a function of the observed altitude.
    """
    observed = altitude_deg
    for _ in range(REFRACTION_MAX_ITERATIONS):
        updated = altitude_deg + refraction(observed, pressure, temperature)
        if abs(updated - observed) < REFRACTION_TOLERANCE_DEG:
            return updated
        observed = updated
    logger.debug('Refraction iteration stopped at altitude %.6f', observed)
    return observed


class FramePipeline:
    """Drives one body through the reference-frame stages.

    Parameters:
        resolver: Heliocentric state source for the target body.
        earth: Heliocentric Earth state as a function of TT Julian date.
    """

    def __init__(
        self,
        resolver: Resolver,
        earth: Callable[[float], StateVector] = earth_state,
    ) -> None:
        self.resolver = resolver
        self.earth = earth

    def heliocentric(self, jd_tt: float) -> StateVector:
        return self.resolver.heliocentric_state(jd_tt)

    def geocentric(self, jd_tt: float) -> StateVector:
        """Geometric body-minus-Earth state (no light time)."""
        body = self.resolver.heliocentric_state(jd_tt)
        earth = self.earth(jd_tt)
        return StateVector(body.position - earth.position, body.velocity - earth.velocity)

    def light_time_corrected(
        self,
        jd_tt: float,
        observer: ObserverState,
    ) -> tuple[PositionVector, float, int]:
        """Observer-to-body vector with the body at the light-emission time.

        Returns:
            (vector, light_time_days, iterations).

        Raises:
            ConvergenceError: If the light time does not settle within the cap.
        """
        tau = 0.0
        for n in range(1, LIGHT_TIME_MAX_ITERATIONS + 1):
            emitted = self.resolver.heliocentric_position(jd_tt - tau)
            vec = PositionVector.from_array(emitted - observer.position)
            updated = vec.light_time
            if abs(updated - tau) < LIGHT_TIME_TOLERANCE_DAYS:
                logger.debug('%s light time %.9f d after %d iterations', self.resolver.name, updated, n)
                return vec, updated, n
            tau = updated
        raise ConvergenceError(
            f'{self.resolver.name}: light time did not converge in {LIGHT_TIME_MAX_ITERATIONS} iterations'
        )

    def astrometric(
        self,
        time: ObservationTime,
        observer: ObserverState,
        light_time: bool = True,
    ) -> PositionVector:
        """Position relative to the observer in the J2000 mean equator, no aberration."""
        if light_time:
            return self.light_time_corrected(time.jd_tt, observer)[0]
        return PositionVector.from_array(self.resolver.heliocentric_position(time.jd_tt) - observer.position)

    def apparent(self, time: ObservationTime, observer: ObserverState) -> PositionVector:
        """Light-time corrected, aberrated position in the true equator of date."""
        vec, _tau, _n = self.light_time_corrected(time.jd_tt, observer)
        # light_time_corrected leaves the cache fresh, as aberration requires.
        vec.apply_aberration(VelocityVector.from_array(observer.velocity))
        vec.precess(J2000_JD, time.jd_tt)
        nutation = erfa.num06a(MJD_OFFSET, time.jd_tt - MJD_OFFSET)
        vec.set_array(nutation @ vec.as_array())
        return vec

    def topocentric(self, time: ObservationTime, site: Site) -> PositionVector:
        """Apparent place of date as seen from a site."""
        return self.apparent(time, site_observer(time, site, self.earth))

    def horizontal(self, time: ObservationTime, site: Site, refract: bool = False) -> PositionVector:
        """Topocentric position with azimuth and altitude attached.

        With refraction, the altitude is raised by the refraction for the
        site's pressure and temperature (configured defaults when unset), and
        right ascension and declination are moved along the vertical circle
        to match; the distance is unchanged.
        """
        vec = self.topocentric(time, site)
        lat = math.radians(site.latitude)
        lst = local_sidereal_time(time, site.longitude) / HOURS_PER_CIRCLE * TWO_PI
        ra = vec.right_ascension / HOURS_PER_CIRCLE * TWO_PI
        dec = math.radians(vec.declination)
        az, el = erfa.hd2ae(lst - ra, dec, lat)
        azimuth = math.degrees(float(az))
        altitude = math.degrees(float(el))
        if refract:
            pressure = site.get('pressure', get_default_pressure())
            temperature = site.get('temperature', get_default_temperature())
            observed = refract_altitude(altitude, pressure, temperature)
            if observed != altitude:
                vec = _shift_toward_zenith(vec, lat, lst, altitude, observed)
            altitude = observed
        vec.set_horizontal(azimuth, altitude)
        return vec


def _shift_toward_zenith(
    vec: PositionVector,
    lat: float,
    lst: float,
    altitude: float,
    observed: float,
) -> PositionVector:
    """Rotate a position along its vertical circle from altitude to observed."""
    distance = vec.distance
    p = vec.as_array() / distance
    zenith = np.array([math.cos(lat) * math.cos(lst), math.cos(lat) * math.sin(lst), math.sin(lat)])
    zd0 = math.radians(90.0 - altitude)
    zd = math.radians(90.0 - observed)
    if math.sin(zd0) == 0.0:
        return vec
    shifted = (p - math.cos(zd0) * zenith) / math.sin(zd0) * math.sin(zd) + zenith * math.cos(zd)
    return PositionVector.from_array(shifted * distance)
