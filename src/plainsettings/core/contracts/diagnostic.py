"""Diagnostic contract shared by the parser, binder and loader.

Every problem the loader can run into is described by one :class:`Diagnostic`.
Whether it is logged or raised is decided later by the loader's policy, so
the same object ends up either in a WARNING log line or in the message of a
:class:`~plainsettings.core.errors.SettingsError`.

Rendering
---------
``render()`` produces a single human-readable line prefixed with the fixed
module tag, e.g.::

    Settings: line 4: No field with name Widht exists!
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DIAGNOSTIC_TAG = "Settings"


class DiagnosticKind(str, Enum):
    """Error taxonomy of a load."""

    SOURCE_NOT_FOUND = "source_not_found"
    MALFORMED_LINE = "malformed_line"
    UNKNOWN_FIELD = "unknown_field"
    TYPE_MISMATCH = "type_mismatch"


class Diagnostic(BaseModel):
    """One problem found while loading a settings source."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind = Field(description="Category of the problem.")
    detail: str = Field(description="Human-readable description without the tag.")
    line_number: int | None = Field(default=None, ge=1, description="1-based source line.")
    line: str | None = Field(default=None, description="Raw source line, if any.")

    def render(self) -> str:
        """Return the tagged single-line message."""
        if self.line_number is None:
            return f"{DIAGNOSTIC_TAG}: {self.detail}"
        return f"{DIAGNOSTIC_TAG}: line {self.line_number}: {self.detail}"

    def __str__(self) -> str:
        return self.render()


__all__ = ["DIAGNOSTIC_TAG", "Diagnostic", "DiagnosticKind"]
