"""Exception types raised by the happy hour utilities."""

from __future__ import annotations


class HappyHourError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(HappyHourError, ValueError):
    """A caller supplied a value outside the accepted set."""


class HostQueryError(HappyHourError, RuntimeError):
    """The host management interface could not provide the requested value."""
