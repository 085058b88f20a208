"""Typed failures raised by the analytics engine."""

from __future__ import annotations


class AnalyticsError(Exception):
    """Base class for analytics failures."""


class MalformedInputError(AnalyticsError, ValueError):
    """Raised when a required numeric field is missing or non-numeric."""


class InvalidLeagueSizeError(AnalyticsError, ValueError):
    """Raised when divisions cannot be split evenly (odd or empty league)."""


class UnresolvedEntityError(AnalyticsError, LookupError):
    """Raised when a team id is not present in the roster list."""


class InsufficientDataError(AnalyticsError):
    """Raised when a computation receives nothing to work on."""
