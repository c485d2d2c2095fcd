"""Unit tests for the settings line parser.

Scope
-----
1. Comment detection: only `//` in the first two columns.
2. Blank lines are skipped, not reported.
3. Exactly one `=` per assignment line; anything else is malformed.
4. Trimming of key and value, with internal whitespace preserved.
5. Laziness and ordering of `iter_entries`.
"""

from __future__ import annotations

from collections.abc import Iterator

from plainsettings.core.contracts.diagnostic import DiagnosticKind
from plainsettings.core.parser import RawEntry, is_comment, iter_entries, parse_line


def test_comment_detection_is_column_zero_only() -> None:
    assert is_comment("// a comment")
    assert is_comment("//")
    assert not is_comment("/")
    assert not is_comment("  // indented")
    assert not is_comment("Key = 1 // trailing")


def test_comment_and_blank_lines_produce_nothing() -> None:
    assert parse_line("// Width = 10", 1) is None
    assert parse_line("", 2) is None
    assert parse_line("   \t", 3) is None


def test_assignment_is_trimmed_on_both_sides() -> None:
    parsed = parse_line("  Window Title =   My  Game  ", 7)
    assert parsed is not None and parsed.is_ok()
    entry = parsed.unwrap()
    assert entry == RawEntry(
        key="Window Title", text="My  Game", line_number=7, line="  Window Title =   My  Game  "
    )


def test_assignment_without_spaces() -> None:
    parsed = parse_line("AnotherKey=123", 1)
    assert parsed is not None
    entry = parsed.unwrap()
    assert (entry.key, entry.text) == ("AnotherKey", "123")


def test_line_without_equals_is_malformed() -> None:
    parsed = parse_line("Bad Line Without Equals", 4)
    assert parsed is not None and parsed.is_err()
    diagnostic = parsed.unwrap_err()
    assert diagnostic.kind is DiagnosticKind.MALFORMED_LINE
    assert diagnostic.line_number == 4
    assert "Bad Line Without Equals" in diagnostic.render()


def test_line_with_two_equals_is_malformed() -> None:
    parsed = parse_line("Url = a=b", 1)
    assert parsed is not None and parsed.is_err()
    assert parsed.unwrap_err().kind is DiagnosticKind.MALFORMED_LINE


def test_short_non_blank_line_is_a_candidate() -> None:
    """A single character is not a comment; without `=` it is malformed."""
    parsed = parse_line("x", 1)
    assert parsed is not None and parsed.is_err()


def test_empty_value_is_allowed() -> None:
    parsed = parse_line("Levels =", 1)
    assert parsed is not None and parsed.unwrap().text == ""


def test_iter_entries_keeps_order_and_line_numbers() -> None:
    lines = [
        "// header\n",
        "Width = 800\n",
        "\n",
        "oops\n",
        "Width = 1024\r\n",
    ]
    results = list(iter_entries(lines))

    assert len(results) == 3
    assert results[0].unwrap().line_number == 2
    assert results[1].unwrap_err().line_number == 4
    last = results[2].unwrap()
    assert (last.key, last.text, last.line_number) == ("Width", "1024", 5)
    assert last.line == "Width = 1024"


def test_iter_entries_is_lazy() -> None:
    """Lines are pulled only as entries are consumed."""
    pulled: list[str] = []

    def source() -> Iterator[str]:
        for line in ["A = 1", "B = 2"]:
            pulled.append(line)
            yield line

    entries = iter_entries(source())
    assert pulled == []
    next(entries)
    assert pulled == ["A = 1"]
