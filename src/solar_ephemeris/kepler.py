"""Two-body (Keplerian) orbit propagation for comets, minor planets and Pluto.

Orbital elements come in three forms, each its own frozen dataclass:

* CometElements - perihelion date and perihelion distance q (any e >= 0);
* AsteroidElements - epoch, semi-major axis a and mean anomaly M (e < 1);
* MeanElements - secularly varying mean elements (used for Pluto).

Angles are degrees, referred to the J2000 ecliptic and equinox; distances
are AU and times TT Julian dates. Positions are returned in the J2000 mean
equatorial frame.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from solar_ephemeris.config import get_kepler_max_iterations
from solar_ephemeris.constants import (
    BARKER_K,
    DAYS_PER_JULIAN_CENTURY,
    GAUSS_K,
    GAUSS_K_DEGREES,
    J2000_JD,
    VELOCITY_STEP_DAYS,
)
from solar_ephemeris.errors import ConfigurationError, ConvergenceError, MalformedInputError
from solar_ephemeris.fundamental import J2000_OBLIQUITY, ecliptic_to_equatorial

logger = logging.getLogger(__name__)

# Comet-form orbits this close to e = 1 are propagated as parabolas.
PARABOLIC_TOLERANCE = 1.0e-8
KEPLER_TOLERANCE = 1.0e-12

# Iteration budget, read from the environment once at first use.
_max_iterations: int | None = None


def _iteration_budget(max_iterations: int | None) -> int:
    global _max_iterations
    if max_iterations is not None:
        return max_iterations
    if _max_iterations is None:
        _max_iterations = get_kepler_max_iterations()
    return _max_iterations


def _finite(name: str, **values: float | None) -> None:
    for key, value in values.items():
        if value is None or not math.isfinite(value):
            raise MalformedInputError(f'{name or "orbit"}: {key} must be a finite number, got {value!r}')


def _check_shape(name: str, e: float, i: float) -> None:
    if e < 0.0:
        raise MalformedInputError(f'{name or "orbit"}: eccentricity {e} is negative')
    if not 0.0 <= i <= 180.0:
        raise MalformedInputError(f'{name or "orbit"}: inclination {i} outside [0, 180]')


@dataclass(frozen=True)
class CometElements:
    """Orbit defined by perihelion passage and perihelion distance.

    Attributes:
        name: Designation or label.
        perihelion_jd: TT Julian date of perihelion passage.
        q: Perihelion distance (AU).
        e: Eccentricity; 1 is parabolic and above 1 hyperbolic.
        i: Inclination (degrees).
        omega: Argument of perihelion (degrees).
        node: Longitude of the ascending node (degrees).
    """

    name: str
    perihelion_jd: float
    q: float
    e: float
    i: float
    omega: float
    node: float

    def __post_init__(self) -> None:
        _finite(
            self.name,
            perihelion_jd=self.perihelion_jd,
            q=self.q,
            e=self.e,
            i=self.i,
            omega=self.omega,
            node=self.node,
        )
        _check_shape(self.name, self.e, self.i)
        if self.q <= 0.0:
            raise MalformedInputError(f'{self.name or "orbit"}: perihelion distance {self.q} must be positive')

    @property
    def is_parabolic(self) -> bool:
        return abs(self.e - 1.0) < PARABOLIC_TOLERANCE


@dataclass(frozen=True)
class AsteroidElements:
    """Elliptical orbit defined by semi-major axis and mean anomaly at an epoch.

    Attributes:
        name: Designation or label.
        epoch_jd: TT Julian date at which mean_anomaly applies.
        a: Semi-major axis (AU).
        e: Eccentricity, 0 <= e < 1.
        i: Inclination (degrees).
        omega: Argument of perihelion (degrees).
        node: Longitude of the ascending node (degrees).
        mean_anomaly: Mean anomaly at epoch (degrees).
        daily_motion: Mean daily motion (degrees/day); derived from a when None.
    """

    name: str
    epoch_jd: float
    a: float
    e: float
    i: float
    omega: float
    node: float
    mean_anomaly: float
    daily_motion: float | None = None

    def __post_init__(self) -> None:
        _finite(
            self.name,
            epoch_jd=self.epoch_jd,
            a=self.a,
            e=self.e,
            i=self.i,
            omega=self.omega,
            node=self.node,
            mean_anomaly=self.mean_anomaly,
        )
        _check_shape(self.name, self.e, self.i)
        if self.a <= 0.0:
            raise MalformedInputError(f'{self.name or "orbit"}: semi-major axis {self.a} must be positive')
        if self.e >= 1.0:
            raise MalformedInputError(
                f'{self.name or "orbit"}: eccentricity {self.e} needs the perihelion-distance form'
            )
        if self.daily_motion is not None and not (
            math.isfinite(self.daily_motion) and self.daily_motion > 0.0
        ):
            raise MalformedInputError(
                f'{self.name or "orbit"}: daily motion {self.daily_motion} must be positive'
            )

    @property
    def mean_motion(self) -> float:
        """Mean daily motion in degrees/day."""
        if self.daily_motion is not None:
            return self.daily_motion
        return GAUSS_K_DEGREES / self.a**1.5


@dataclass(frozen=True)
class MeanElements:
    """Mean elements with linear rates per Julian century from J2000.

    Attributes:
        name: Body name.
        a, e, i: Semi-major axis (AU), eccentricity, inclination (degrees).
        mean_longitude: Mean longitude L (degrees).
        perihelion_longitude: Longitude of perihelion (degrees).
        node: Longitude of the ascending node (degrees).
        *_rate: Change per Julian century.
        valid_from_jd, valid_to_jd: Span over which the rates were fitted;
            None for no limit.
    """

    name: str
    a: float
    e: float
    i: float
    mean_longitude: float
    perihelion_longitude: float
    node: float
    a_rate: float = 0.0
    e_rate: float = 0.0
    i_rate: float = 0.0
    mean_longitude_rate: float = 0.0
    perihelion_longitude_rate: float = 0.0
    node_rate: float = 0.0
    valid_from_jd: float | None = None
    valid_to_jd: float | None = None

    def in_valid_range(self, jd_tt: float) -> bool:
        if self.valid_from_jd is not None and jd_tt < self.valid_from_jd:
            return False
        return self.valid_to_jd is None or jd_tt <= self.valid_to_jd

    def at(self, jd_tt: float) -> AsteroidElements:
        """Return osculating-style elements with their epoch at jd_tt.

        Outside the fitted span the rates are extrapolated with a warning.
        """
        if not self.in_valid_range(jd_tt):
            logger.warning(
                '%s mean elements evaluated at JD %.1f outside their fitted span; extrapolating',
                self.name,
                jd_tt,
            )
        t = (jd_tt - J2000_JD) / DAYS_PER_JULIAN_CENTURY
        varpi = self.perihelion_longitude + self.perihelion_longitude_rate * t
        node = self.node + self.node_rate * t
        return AsteroidElements(
            name=self.name,
            epoch_jd=jd_tt,
            a=self.a + self.a_rate * t,
            e=self.e + self.e_rate * t,
            i=self.i + self.i_rate * t,
            omega=varpi - node,
            node=node,
            mean_anomaly=(self.mean_longitude + self.mean_longitude_rate * t) - varpi,
        )


OrbitalElements = CometElements | AsteroidElements | MeanElements


def orbital_elements(
    name: str = '',
    *,
    e: float,
    i: float,
    omega: float,
    node: float,
    q: float | None = None,
    perihelion_jd: float | None = None,
    a: float | None = None,
    mean_anomaly: float | None = None,
    epoch_jd: float | None = None,
    daily_motion: float | None = None,
) -> CometElements | AsteroidElements:
    """Build the matching element form from keyword arguments.

    Exactly one of the perihelion-distance form (q, perihelion_jd) or the
    semi-major-axis form (a, mean_anomaly, epoch_jd) must be given.

    Raises:
        MalformedInputError: If the forms are mixed or incomplete.
        ConfigurationError: If neither form is given.
    """
    comet = q is not None or perihelion_jd is not None
    asteroid = a is not None or mean_anomaly is not None or daily_motion is not None
    if comet and asteroid:
        raise MalformedInputError(
            f'{name or "orbit"}: perihelion-distance and semi-major-axis elements cannot be mixed'
        )
    if comet:
        if q is None or perihelion_jd is None:
            raise MalformedInputError(f'{name or "orbit"}: comet form needs both q and perihelion_jd')
        return CometElements(name, perihelion_jd, q, e, i, omega, node)
    if asteroid:
        if a is None or mean_anomaly is None or epoch_jd is None:
            raise MalformedInputError(
                f'{name or "orbit"}: asteroid form needs a, mean_anomaly and epoch_jd'
            )
        return AsteroidElements(name, epoch_jd, a, e, i, omega, node, mean_anomaly, daily_motion)
    raise ConfigurationError(f'{name or "orbit"}: no perihelion distance or semi-major axis given')


def solve_kepler(
    mean_anomaly: float,
    e: float,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int | None = None,
) -> float:
    """Solve M = E - e sin E for the eccentric anomaly by Newton-Raphson.

    Parameters:
        mean_anomaly: Mean anomaly M (radians).
        e: Eccentricity, 0 <= e < 1.
        tolerance: Convergence threshold on the correction (radians).
        max_iterations: Iteration budget; defaults to the configured value.

    Returns:
        Eccentric anomaly E (radians) in (-pi, pi].

    Raises:
        ConvergenceError: If the budget is exhausted.
    """
    budget = _iteration_budget(max_iterations)
    # (-pi, pi]: a small negative M before perihelion stays small.
    m = math.remainder(mean_anomaly, 2.0 * math.pi)
    # Newton from +-pi converges monotonically for any e < 1.
    ecc_anomaly = m if e < 0.8 else math.copysign(math.pi, m)
    for n in range(1, budget + 1):
        delta = (ecc_anomaly - e * math.sin(ecc_anomaly) - m) / (1.0 - e * math.cos(ecc_anomaly))
        ecc_anomaly -= delta
        if abs(delta) < tolerance:
            logger.debug('Kepler equation converged in %d iterations (e=%g)', n, e)
            return ecc_anomaly
    raise ConvergenceError(f'Kepler equation did not converge in {budget} iterations (M={m}, e={e})')


def solve_barker(w: float, tolerance: float = KEPLER_TOLERANCE, max_iterations: int | None = None) -> float:
    """Solve s**3 + 3 s = w (Barker's equation) for s = tan(nu / 2).

    Raises:
        ConvergenceError: If the budget is exhausted.
    """
    budget = _iteration_budget(max_iterations)
    s = w / 3.0
    for _ in range(budget):
        new = (2.0 * s**3 + w) / (3.0 * (1.0 + s * s))
        if abs(new - s) <= tolerance * max(1.0, abs(new)):
            return new
        s = new
    raise ConvergenceError(f"Barker's equation did not converge in {budget} iterations (W={w})")


def solve_hyperbolic(
    mean_anomaly: float,
    e: float,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int | None = None,
) -> float:
    """Solve M = e sinh H - H for the hyperbolic anomaly H (e > 1).

    Raises:
        ConvergenceError: If the budget is exhausted.
    """
    budget = _iteration_budget(max_iterations)
    sign = 1.0 if mean_anomaly >= 0.0 else -1.0
    h = sign * math.log(2.0 * abs(mean_anomaly) / e + 1.8)
    for _ in range(budget):
        delta = (e * math.sinh(h) - h - mean_anomaly) / (e * math.cosh(h) - 1.0)
        h -= delta
        if abs(delta) <= tolerance * max(1.0, abs(h)):
            return h
    raise ConvergenceError(f'Hyperbolic Kepler equation did not converge in {budget} iterations')


@dataclass(frozen=True)
class OrbitSolution:
    """Position along the orbit.

    Attributes:
        true_anomaly: Radians.
        radius: Heliocentric distance (AU).
        eccentric_anomaly: E (elliptic), H (hyperbolic) or tan(nu/2) (parabolic).
    """

    true_anomaly: float
    radius: float
    eccentric_anomaly: float


def _elliptic(a: float, e: float, mean_anomaly: float) -> OrbitSolution:
    ecc_anomaly = solve_kepler(mean_anomaly, e)
    half = ecc_anomaly / 2.0
    nu = 2.0 * math.atan2(math.sqrt(1.0 + e) * math.sin(half), math.sqrt(1.0 - e) * math.cos(half))
    return OrbitSolution(nu, a * (1.0 - e * math.cos(ecc_anomaly)), ecc_anomaly)


def solve_orbit(elements: CometElements | AsteroidElements, jd_tt: float) -> OrbitSolution:
    """Locate a body on its orbit at a TT Julian date."""
    if isinstance(elements, AsteroidElements):
        m = math.radians(elements.mean_anomaly + elements.mean_motion * (jd_tt - elements.epoch_jd))
        return _elliptic(elements.a, elements.e, m)
    dt = jd_tt - elements.perihelion_jd
    q, e = elements.q, elements.e
    if elements.is_parabolic:
        s = solve_barker(BARKER_K * dt / (q * math.sqrt(q)))
        return OrbitSolution(2.0 * math.atan(s), q * (1.0 + s * s), s)
    if e > 1.0:
        a = q / (e - 1.0)
        h = solve_hyperbolic(GAUSS_K * dt / a**1.5, e)
        nu = 2.0 * math.atan(math.sqrt((e + 1.0) / (e - 1.0)) * math.tanh(h / 2.0))
        return OrbitSolution(nu, a * (e * math.cosh(h) - 1.0), h)
    a = q / (1.0 - e)
    return _elliptic(a, e, GAUSS_K * dt / a**1.5)


def heliocentric_position(elements: OrbitalElements, jd_tt: float) -> np.ndarray:
    """Return the heliocentric J2000 equatorial position (AU) at a TT Julian date."""
    if isinstance(elements, MeanElements):
        elements = elements.at(jd_tt)
    orbit = solve_orbit(elements, jd_tt)
    u = orbit.true_anomaly + math.radians(elements.omega)
    node = math.radians(elements.node)
    incl = math.radians(elements.i)
    cos_u, sin_u = math.cos(u), math.sin(u)
    cos_n, sin_n = math.cos(node), math.sin(node)
    ecliptic = orbit.radius * np.array(
        [
            cos_n * cos_u - sin_n * sin_u * math.cos(incl),
            sin_n * cos_u + cos_n * sin_u * math.cos(incl),
            sin_u * math.sin(incl),
        ]
    )
    return ecliptic_to_equatorial(ecliptic, J2000_OBLIQUITY)


def heliocentric_state(elements: OrbitalElements, jd_tt: float) -> tuple[np.ndarray, np.ndarray]:
    """Return heliocentric position (AU) and velocity (AU/day) at a TT Julian date.

    Velocity is a central difference over VELOCITY_STEP_DAYS.
    """
    h = VELOCITY_STEP_DAYS
    position = heliocentric_position(elements, jd_tt)
    ahead = heliocentric_position(elements, jd_tt + h)
    behind = heliocentric_position(elements, jd_tt - h)
    return position, (ahead - behind) / (2.0 * h)


# JPL approximate mean elements for Pluto, 1800-2050 (Standish).
PLUTO_MEAN_ELEMENTS = MeanElements(
    name='Pluto',
    a=39.48211675,
    e=0.24882730,
    i=17.14001206,
    mean_longitude=238.92903833,
    perihelion_longitude=224.06891629,
    node=110.30393684,
    a_rate=-0.00031596,
    e_rate=0.00005170,
    i_rate=0.00004818,
    mean_longitude_rate=145.20780515,
    perihelion_longitude_rate=-0.04062942,
    node_rate=-0.01183482,
    valid_from_jd=2378496.5,  # 1800-01-01
    valid_to_jd=2470172.5,  # 2051-01-01
)
