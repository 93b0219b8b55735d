"""Exceptions raised while building benchmark fixtures."""

from __future__ import annotations


class FixtureError(Exception):
    """Base exception for fixture build errors."""

    pass


class ConfigurationError(FixtureError):
    """Raised when a builder is given inputs that cannot form a valid case.

    These are fatal at build time: the case is never registered.
    """

    pass


class SetupError(FixtureError):
    """Raised when a setup function fails against the underlying store."""

    pass
