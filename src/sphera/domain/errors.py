# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Exception types raised by the ephemeris domain.

All derive from ValueError: every failure is a rejection of input that
lies outside the model (eccentricity, calendar date, body name).
"""


class EphemerisError(ValueError):
    """Base class for ephemeris computation errors."""


class DomainError(EphemerisError):
    """Input outside the physical domain of the model (e.g. e >= 1)."""


class NonConvergenceError(DomainError):
    """An iterative solver exceeded its iteration bound."""


class UnknownPlanetError(EphemerisError):
    """Planet identifier or name not present in the registry."""


class CalendarError(EphemerisError):
    """Civil date that does not exist (year zero, Gregorian gap)."""
