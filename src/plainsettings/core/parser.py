"""
Line parser for plain-text settings sources.

A settings source is read top to bottom, one directive per line::

    // comment (only when the line *starts with* two slashes)
    Width = 800
    Levels = level1.tmx, level2.tmx

Rules
-----
- A line whose first two characters are ``//`` is a comment. There is no
  trailing or indented comment syntax.
- Empty and whitespace-only lines are skipped.
- Every other line must contain exactly one ``=``. Both sides are trimmed;
  whitespace inside them is kept.

The parser does not know about fields or types; it only produces
:class:`RawEntry` values (or malformed-line diagnostics) for the binder.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from plainsettings.core.contracts.diagnostic import Diagnostic, DiagnosticKind
from plainsettings.core.result import Result, err, ok

COMMENT_PREFIX = "//"


@dataclass(frozen=True, slots=True)
class RawEntry:
    """
    One ``key = text`` pair read from a source line.

    Attributes
    ----------
    key : str
        Trimmed left-hand side.
    text : str
        Trimmed right-hand side, not yet interpreted.
    line_number : int
        1-based position of the line in the source.
    line : str
        The line as read, without its line terminator.
    """

    key: str
    text: str
    line_number: int
    line: str


def is_comment(line: str) -> bool:
    """Return True if ``line`` starts with the comment prefix."""
    return len(line) >= 2 and line[:2] == COMMENT_PREFIX


def parse_line(line: str, line_number: int) -> Result[RawEntry, Diagnostic] | None:
    """
    Parse a single source line.

    Returns
    -------
    Result[RawEntry, Diagnostic] | None
        ``None`` for comments and blank lines, ``Ok(RawEntry)`` for a
        well-formed assignment, ``Err(Diagnostic)`` for anything else.
    """
    if is_comment(line) or not line.strip():
        return None

    parts = line.split("=")
    if len(parts) != 2:
        return err(
            Diagnostic(
                kind=DiagnosticKind.MALFORMED_LINE,
                detail=f"Malformed line (expected one '=' character): {line}",
                line_number=line_number,
                line=line,
            )
        )

    key, text = parts
    return ok(RawEntry(key=key.strip(), text=text.strip(), line_number=line_number, line=line))


def iter_entries(lines: Iterable[str]) -> Iterator[Result[RawEntry, Diagnostic]]:
    """Lazily parse ``lines`` in order, skipping comments and blank lines."""
    for line_number, raw in enumerate(lines, start=1):
        parsed = parse_line(raw.rstrip("\r\n"), line_number)
        if parsed is not None:
            yield parsed


__all__ = ["COMMENT_PREFIX", "RawEntry", "is_comment", "iter_entries", "parse_line"]
