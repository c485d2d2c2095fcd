"""LoadReport — what a single ``load()`` call did."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .diagnostic import Diagnostic


class LoadReport(BaseModel):
    """Summary of one load: source, keys bound in order, diagnostics raised."""

    source: str = Field(description="Settings source path as given to the loader.")
    found: bool = Field(default=False, description="Whether the source could be opened.")
    bound: list[str] = Field(default_factory=list, description="Keys assigned, in file order.")
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when the load produced no diagnostics."""
        return not self.diagnostics


__all__ = ["LoadReport"]
