"""Fixed astronomical and unit constants."""

import math

# Time
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0
J2000_JD = 2451545.0
MJD_OFFSET = 2400000.5
# Julian date of 2000-01-01 00:00, the zero point of rms-julian day numbers
JULIAN_DAY_ZERO_JD = 2451544.5
TT_MINUS_TAI = 32.184

# Angle
DEGREES_PER_CIRCLE = 360.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h
HOURS_PER_CIRCLE = 24.0
ARCSEC_PER_DEGREE = 3600.0
ARCSEC_PER_CIRCLE = 1296000.0
TWO_PI = 2.0 * math.pi
RADIANS_PER_ARCSEC = math.pi / 648000.0

# Distances and speeds
AU_KM = 149597870.0
SPEED_OF_LIGHT_AU_PER_DAY = 173.144633
PARSEC_AU = 206264.80624709636
# Substituted for unknown (zero or negative) stellar parallax, arcsec
MIN_PARALLAX_ARCSEC = 1.0e-7

# Gaussian gravitational constant (rad/day) and its mean daily motion at 1 AU
GAUSS_K = 0.01720209895
GAUSS_K_DEGREES = 0.9856076686
# Barker's equation s**3 + 3 s = BARKER_K * dt / q**1.5 with s = tan(nu / 2);
# BARKER_K = 3 k / sqrt(2), AU**1.5 / day
BARKER_K = 3.0 * GAUSS_K / math.sqrt(2.0)

# Earth (GRS 80)
EARTH_RAD_KM = 6378.137
EARTH_FLAT = 1.0 / 298.257222
EARTH_ROT_RATE_RAD_S = 7.2921150e-5

# Numerical derivative step for velocities (days)
VELOCITY_STEP_DAYS = 0.01

# Atmosphere defaults
DEFAULT_PRESSURE_MBAR = 1010.0
DEFAULT_TEMPERATURE_C = 10.0
