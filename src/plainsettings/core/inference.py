"""Value inference for settings text.

The kind of a value is decided from its text alone, in a fixed order where
the first match wins:

1. Integer: ASCII base-10 digits with an optional leading sign (``"800"``).
2. Float: decimal number using ``.`` as separator whatever the locale,
   optional exponent (``"1.5"``, ``"-2e3"``).
3. Boolean: ``true`` / ``false`` in any case.
4. String: the trimmed text itself.

The number grammar is narrower than Python's ``int()`` / ``float()``:
``"1_000"``, ``"nan"``, ``"inf"`` and non-ASCII digits are strings here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from plainsettings.core.registry import FieldKind

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_BOOLS = {"true": True, "false": False}


@dataclass(frozen=True, slots=True)
class InferredValue:
    """A value tagged with the scalar kind it was inferred as."""

    kind: FieldKind
    value: int | float | bool | str


def infer_value(text: str) -> InferredValue:
    """Return the typed value for ``text`` following the inference order."""
    text = text.strip()
    if _INT_RE.fullmatch(text):
        try:
            return InferredValue(FieldKind.INT, int(text))
        except ValueError:
            # over the interpreter's int digit limit; falls through to Float
            pass
    if _FLOAT_RE.fullmatch(text):
        return InferredValue(FieldKind.FLOAT, float(text))
    flag = _BOOLS.get(text.lower())
    if flag is not None:
        return InferredValue(FieldKind.BOOL, flag)
    return InferredValue(FieldKind.STRING, text)


def split_list(text: str) -> list[str]:
    """Split a comma-separated value into trimmed items; blank text gives ``[]``."""
    if not text.strip():
        return []
    return [item.strip() for item in text.split(",")]


__all__ = ["InferredValue", "infer_value", "split_list"]
