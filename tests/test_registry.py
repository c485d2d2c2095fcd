"""Unit tests for the field registry."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from plainsettings.core.registry import FieldKind, Registry


@dataclass
class GameConfig:
    width: int = 800
    title: str = "untitled"
    levels: list[str] = field(default_factory=list)


def test_builders_declare_kinds_in_order() -> None:
    sink: dict[str, object] = {}
    registry = (
        Registry()
        .add_int("Width", lambda v: sink.__setitem__("w", v))
        .add_float("Speed", lambda v: sink.__setitem__("s", v))
        .add_bool("FullScreen", lambda v: sink.__setitem__("f", v))
        .add_string("Title", lambda v: sink.__setitem__("t", v))
        .add_string_list("Levels", lambda v: sink.__setitem__("l", v), "level files")
    )

    assert registry.names() == ("Width", "Speed", "FullScreen", "Title", "Levels")
    assert [f.kind for f in registry] == [
        FieldKind.INT,
        FieldKind.FLOAT,
        FieldKind.BOOL,
        FieldKind.STRING,
        FieldKind.STRING_LIST,
    ]
    levels = registry.lookup("Levels")
    assert levels is not None and levels.description == "level files"


def test_lookup_is_case_sensitive() -> None:
    registry = Registry().add_int("Width", lambda v: None)
    assert "Width" in registry
    assert registry.lookup("width") is None
    assert "width" not in registry


def test_duplicate_name_is_rejected() -> None:
    registry = Registry().add_int("Width", lambda v: None)
    with pytest.raises(ValueError, match="already registered"):
        registry.add_string("Width", lambda v: None)


def test_empty_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        Registry().add_int("", lambda v: None)


def test_attribute_setter_writes_target() -> None:
    config = GameConfig()
    registry = Registry().attribute("Width", config, "width", FieldKind.INT)

    width = registry.lookup("Width")
    assert width is not None
    width.setter(1024)
    assert config.width == 1024
