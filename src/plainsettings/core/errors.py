"""Failure policy and the exception raised under the fatal policy."""

from __future__ import annotations

from enum import Enum

from plainsettings.core.contracts.diagnostic import Diagnostic


class MissingSettingPolicy(str, Enum):
    """How the loader reacts to a diagnostic.

    ``FATAL`` raises :class:`SettingsError` on the first diagnostic and aborts
    the load. ``ADVISORY`` logs a warning and carries on with the next line.
    """

    FATAL = "fatal"
    ADVISORY = "advisory"


class SettingsError(Exception):
    """Raised by the loader under :attr:`MissingSettingPolicy.FATAL`."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.render())
        self.diagnostic = diagnostic


__all__ = ["MissingSettingPolicy", "SettingsError"]
