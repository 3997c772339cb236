"""Exception types raised by the ephemeris engine."""

from __future__ import annotations


class EphemerisError(Exception):
    """Base class for every error raised by solar_ephemeris."""


class ConfigurationError(EphemerisError):
    """A required input has not been set (vector component, site field, element source)."""


class MalformedInputError(EphemerisError, ValueError):
    """Input text or orbital elements failed structural or numeric validation."""


class ConvergenceError(EphemerisError, ArithmeticError):
    """An iterative solution did not converge within its iteration budget."""
