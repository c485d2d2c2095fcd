"""
Registry of declared configuration fields.

The embedding application declares every key it wants the loader to
recognize, together with the kind of value the key holds and a setter that
performs the assignment. The loader never discovers fields on its own; it
only looks them up by name and calls the setter.

Example
-------
>>> class Game:
...     width = 800
>>> game = Game()
>>> registry = Registry().attribute("Width", game, "width", FieldKind.INT)
>>> registry.lookup("Width").kind
<FieldKind.INT: 'int'>
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

Setter = Callable[[Any], None]


class FieldKind(str, Enum):
    """Declared value kind of a configuration field."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    STRING_LIST = "string_list"


@dataclass(frozen=True, slots=True)
class ConfigField:
    """
    A named, typed storage slot.

    Attributes
    ----------
    name : str
        Key as it appears in the settings file (case-sensitive).
    kind : FieldKind
        Declared kind; the binder only calls ``setter`` with a matching value.
    setter : Setter
        Callback that stores the value in the embedding application's object.
    description : str
        Optional help text shown by the CLI.
    """

    name: str
    kind: FieldKind
    setter: Setter
    description: str = ""


class Registry:
    """Name → :class:`ConfigField` mapping, built through chainable calls."""

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, ConfigField] = {}

    # ------------------------------ Builders --------------------------------

    def register(
        self, name: str, kind: FieldKind, setter: Setter, description: str = ""
    ) -> Registry:
        """Declare field ``name``; raises ``ValueError`` if it already exists."""
        if not name:
            raise ValueError("field name must be a non-empty string")
        if name in self._fields:
            raise ValueError(f"field {name!r} is already registered")
        self._fields[name] = ConfigField(name, kind, setter, description)
        return self

    def add_int(self, name: str, setter: Setter, description: str = "") -> Registry:
        return self.register(name, FieldKind.INT, setter, description)

    def add_float(self, name: str, setter: Setter, description: str = "") -> Registry:
        return self.register(name, FieldKind.FLOAT, setter, description)

    def add_bool(self, name: str, setter: Setter, description: str = "") -> Registry:
        return self.register(name, FieldKind.BOOL, setter, description)

    def add_string(self, name: str, setter: Setter, description: str = "") -> Registry:
        return self.register(name, FieldKind.STRING, setter, description)

    def add_string_list(self, name: str, setter: Setter, description: str = "") -> Registry:
        return self.register(name, FieldKind.STRING_LIST, setter, description)

    def attribute(
        self,
        name: str,
        target: object,
        attr: str,
        kind: FieldKind,
        description: str = "",
    ) -> Registry:
        """Declare ``name`` as an alias for ``target.attr``."""

        def _set(value: Any) -> None:
            setattr(target, attr, value)

        return self.register(name, kind, _set, description)

    # ------------------------------ Lookup ----------------------------------

    def lookup(self, name: str) -> ConfigField | None:
        """Return the field declared under exactly ``name``, or ``None``."""
        return self._fields.get(name)

    def names(self) -> tuple[str, ...]:
        """Return declared names in registration order."""
        return tuple(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[ConfigField]:
        return iter(self._fields.values())

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._fields)


__all__ = ["ConfigField", "FieldKind", "Registry", "Setter"]
