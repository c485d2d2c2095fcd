"""plainsettings: bind a plain-text key/value settings file to declared fields.

Typical use::

    from plainsettings import FieldKind, MissingSettingPolicy, Registry, SettingsLoader

    registry = Registry().attribute("Width", game, "width", FieldKind.INT)
    SettingsLoader(registry, "settings.txt", policy=MissingSettingPolicy.ADVISORY).load()
"""

from __future__ import annotations

from plainsettings.core.contracts.diagnostic import Diagnostic, DiagnosticKind
from plainsettings.core.contracts.report import LoadReport
from plainsettings.core.errors import MissingSettingPolicy, SettingsError
from plainsettings.core.registry import ConfigField, FieldKind, Registry
from plainsettings.engine import EngineSettings, engine_registry, load_engine_settings
from plainsettings.loader import SettingsLoader

__all__ = [
    "ConfigField",
    "Diagnostic",
    "DiagnosticKind",
    "EngineSettings",
    "FieldKind",
    "LoadReport",
    "MissingSettingPolicy",
    "Registry",
    "SettingsError",
    "SettingsLoader",
    "__version__",
    "engine_registry",
    "load_engine_settings",
]
__version__ = "0.1.0"
