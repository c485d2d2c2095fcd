"""Unit tests for value inference (Int → Float → Bool → String)."""

from __future__ import annotations

import pytest

from plainsettings.core.inference import InferredValue, infer_value, split_list
from plainsettings.core.registry import FieldKind


@pytest.mark.parametrize(
    ("text", "expected"),
    [("42", 42), ("-7", -7), ("+3", 3), ("800", 800), ("007", 7)],
)
def test_integer_text_is_int(text: str, expected: int) -> None:
    assert infer_value(text) == InferredValue(FieldKind.INT, expected)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("1.5", 1.5), ("-0.25", -0.25), (".5", 0.5), ("2.", 2.0), ("1e3", 1000.0)],
)
def test_decimal_text_is_float(text: str, expected: float) -> None:
    inferred = infer_value(text)
    assert inferred.kind is FieldKind.FLOAT
    assert inferred.value == pytest.approx(expected)


def test_decimal_separator_is_always_a_dot() -> None:
    """`1,5` is not a number whatever the locale."""
    assert infer_value("1,5") == InferredValue(FieldKind.STRING, "1,5")


@pytest.mark.parametrize("text", ["true", "True", "TRUE", "tRuE"])
def test_true_variants(text: str) -> None:
    assert infer_value(text) == InferredValue(FieldKind.BOOL, True)


@pytest.mark.parametrize("text", ["false", "False", "FALSE"])
def test_false_variants(text: str) -> None:
    assert infer_value(text) == InferredValue(FieldKind.BOOL, False)


@pytest.mark.parametrize("text", ["settings.txt", "yes", "1_000", "nan", "inf", "0x10", ""])
def test_everything_else_is_string(text: str) -> None:
    assert infer_value(text) == InferredValue(FieldKind.STRING, text)


def test_string_is_trimmed() -> None:
    assert infer_value("  hello world ").value == "hello world"


def test_split_list_trims_and_keeps_order() -> None:
    assert split_list("a, b , c") == ["a", "b", "c"]
    assert split_list("Level1.tmx,Level2.tmx") == ["Level1.tmx", "Level2.tmx"]


def test_split_list_single_and_empty() -> None:
    assert split_list("only") == ["only"]
    assert split_list("") == []
    assert split_list("   ") == []


def test_split_list_keeps_empty_items_between_commas() -> None:
    assert split_list("a,,b") == ["a", "", "b"]


def test_integer_over_digit_limit_falls_through_to_float() -> None:
    """Text too long for `int()` is still a number, inferred as Float."""
    inferred = infer_value("9" * 5000)
    assert inferred.kind is FieldKind.FLOAT
