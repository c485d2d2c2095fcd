"""
Engine settings: a ready-made configuration object and its registry.

``EngineSettings`` holds the compiled-in defaults of a small 2D game engine
(screen resolution, full-screen flag) plus the switches that drive loading
itself. Those switches are ordinary fields, so a settings file can change the
file name, the failure policy or tracing for the *next* load.

Usage
-----
    settings = EngineSettings()
    load_engine_settings(settings)          # reads ./settings.txt
    game = MyGame(settings.screen_width, settings.screen_height)

Applications with their own fields can extend the registry::

    registry = engine_registry(settings).add_string_list("Levels", levels.extend)
    load_engine_settings(settings, registry)

Sample settings.txt
-------------------
    // integer values:
    ScreenWidth = 800
    ScreenHeight = 600
    // boolean values:
    FullScreen = true
    // string values (no quotes needed):
    SettingsFileName = settings.txt
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from plainsettings.core.contracts.report import LoadReport
from plainsettings.core.errors import MissingSettingPolicy
from plainsettings.core.registry import FieldKind, Registry
from plainsettings.loader import SettingsLoader

DEFAULT_SETTINGS_FILE = "settings.txt"


class EngineSettings(BaseModel):
    """Mutable engine configuration with compiled-in defaults."""

    settings_file_name: str = Field(
        default=DEFAULT_SETTINGS_FILE,
        description="Settings source, relative to the working directory.",
    )
    show_settings_parsing: bool = Field(
        default=False, description="Log every parsed line while loading."
    )
    throw_exception_on_missing_setting: bool = Field(
        default=True, description="Abort the load on the first problem instead of warning."
    )

    # Note: for the arcade cabinet use ScreenResolutionX/Y = 1600/1200.
    screen_resolution_x: int = Field(default=800, description="Horizontal screen resolution.")
    screen_resolution_y: int = Field(default=600, description="Vertical screen resolution.")
    full_screen: bool = Field(default=False, description="Run in full-screen mode.")
    screen_width: int = Field(default=800, description="Game window width.")
    screen_height: int = Field(default=600, description="Game window height.")

    @property
    def policy(self) -> MissingSettingPolicy:
        """Failure policy derived from `throw_exception_on_missing_setting`."""
        if self.throw_exception_on_missing_setting:
            return MissingSettingPolicy.FATAL
        return MissingSettingPolicy.ADVISORY


# key in the settings file -> (attribute, kind)
ENGINE_FIELDS: dict[str, tuple[str, FieldKind]] = {
    "SettingsFileName": ("settings_file_name", FieldKind.STRING),
    "ShowSettingsParsing": ("show_settings_parsing", FieldKind.BOOL),
    "ThrowExceptionOnMissingSetting": ("throw_exception_on_missing_setting", FieldKind.BOOL),
    "ScreenResolutionX": ("screen_resolution_x", FieldKind.INT),
    "ScreenResolutionY": ("screen_resolution_y", FieldKind.INT),
    "FullScreen": ("full_screen", FieldKind.BOOL),
    "ScreenWidth": ("screen_width", FieldKind.INT),
    "ScreenHeight": ("screen_height", FieldKind.INT),
}


def engine_registry(settings: EngineSettings) -> Registry:
    """Declare every engine field against ``settings``."""
    registry = Registry()
    for key, (attr, kind) in ENGINE_FIELDS.items():
        description = EngineSettings.model_fields[attr].description or ""
        registry.attribute(key, settings, attr, kind, description)
    return registry


def load_engine_settings(
    settings: EngineSettings, registry: Registry | None = None
) -> LoadReport:
    """
    Load ``settings.settings_file_name`` into ``settings``.

    Path, policy and tracing are read from ``settings`` when the call starts;
    values the file assigns to them apply from the next call on.
    """
    loader = SettingsLoader(
        registry if registry is not None else engine_registry(settings),
        settings.settings_file_name,
        policy=settings.policy,
        trace=settings.show_settings_parsing,
    )
    return loader.load()


__all__ = [
    "DEFAULT_SETTINGS_FILE",
    "ENGINE_FIELDS",
    "EngineSettings",
    "engine_registry",
    "load_engine_settings",
]
