"""
Binder: resolve a :class:`RawEntry` against a :class:`Registry` and assign it.

Decision per entry
------------------
1. Look up the field by exact name. Unknown key → ``UNKNOWN_FIELD``.
2. ``STRING_LIST`` fields take the comma-split text and skip inference.
3. Other fields take the inferred value when its kind matches the declared
   kind. An integer is accepted by a ``FLOAT`` field and stored as ``float``.
4. Any other combination → ``TYPE_MISMATCH`` and the field is left alone.

Each call mutates at most one field and yields at most one diagnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plainsettings.core.contracts.diagnostic import Diagnostic, DiagnosticKind
from plainsettings.core.inference import infer_value, split_list
from plainsettings.core.parser import RawEntry
from plainsettings.core.registry import ConfigField, FieldKind, Registry
from plainsettings.core.result import Result, err, ok


@dataclass(frozen=True, slots=True)
class Binding:
    """A value that has been written into a field."""

    key: str
    kind: FieldKind
    value: Any


def _coerce(field: ConfigField, entry: RawEntry) -> Result[Any, Diagnostic]:
    if field.kind is FieldKind.STRING_LIST:
        return ok(split_list(entry.text))

    inferred = infer_value(entry.text)
    if inferred.kind is field.kind:
        return ok(inferred.value)
    if field.kind is FieldKind.FLOAT and inferred.kind is FieldKind.INT:
        return ok(float(inferred.value))
    return err(
        _mismatch(
            entry,
            f"expected {field.kind.value}, got {inferred.kind.value} {entry.text!r}",
        )
    )


def _mismatch(entry: RawEntry, reason: str) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.TYPE_MISMATCH,
        detail=f"Cannot set field {entry.key}: type mismatch ({reason})",
        line_number=entry.line_number,
        line=entry.line,
    )


def bind(entry: RawEntry, registry: Registry) -> Result[Binding, Diagnostic]:
    """Assign ``entry`` to its declared field, or describe why it cannot be."""
    field = registry.lookup(entry.key)
    if field is None:
        return err(
            Diagnostic(
                kind=DiagnosticKind.UNKNOWN_FIELD,
                detail=f"No field with name {entry.key} exists!",
                line_number=entry.line_number,
                line=entry.line,
            )
        )

    coerced = _coerce(field, entry)
    if coerced.is_err():
        return err(coerced.unwrap_err())

    value = coerced.unwrap()
    try:
        field.setter(value)
    except (TypeError, ValueError) as exc:
        return err(_mismatch(entry, str(exc)))
    return ok(Binding(key=field.name, kind=field.kind, value=value))


__all__ = ["Binding", "bind"]
