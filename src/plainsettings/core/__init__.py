"""Core building blocks: parser, inference, registry, binder and contracts.

Downstream code usually imports from the package root instead:
    from plainsettings import Registry, SettingsLoader, MissingSettingPolicy
"""

from __future__ import annotations

__all__ = ["__doc__"]
