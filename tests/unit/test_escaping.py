"""Tests for service message value escaping."""

import pytest

from teamcity_listener.escaping import escape_value


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("\\", "||"),
        ("'", "|'"),
        ("\n", "|n"),
        ("\r", "|r"),
        ("[", "|["),
        ("]", "|]"),
    ],
)
def test_escapes_special_character(raw: str, expected: str) -> None:
    """Each special character maps to its escape sequence."""
    assert escape_value(raw) == expected


def test_leaves_plain_text_untouched() -> None:
    """Text without special characters is returned unchanged."""
    assert escape_value("sprint-1.us-1.story.passedScenario") == (
        "sprint-1.us-1.story.passedScenario"
    )


def test_empty_string() -> None:
    """Empty input yields empty output."""
    assert escape_value("") == ""


def test_lone_pipe_is_kept() -> None:
    """A pipe in the input is not itself an escaped character."""
    assert escape_value("a|b") == "a|b"


def test_mixed_text_is_escaped_in_one_pass() -> None:
    """Pipes introduced by one rule are not escaped again by another."""
    assert escape_value("\\|'\n\r[]") == "|||'|n|r|[|]"


def test_multiline_stack_trace() -> None:
    """Escaped output contains no raw line breaks."""
    escaped = escape_value("AssertionError: 'a' != 'b'\r\n  at step[0]\n")

    assert "\n" not in escaped
    assert "\r" not in escaped
    assert escaped == "AssertionError: |'a|' != |'b|'|r|n  at step|[0|]|n"


@pytest.mark.parametrize(
    "raw",
    [
        "it's [done]",
        "\r\n\r\n",
        "[[]]''",
        "a\\'b",
        "trace:\n  at step[0]\r\n",
        "]'[",
        "{value=exampleTableValue}",
    ],
)
def test_output_has_no_raw_line_breaks_or_unescaped_delimiters(raw: str) -> None:
    """Quotes and brackets are always preceded by a pipe and line breaks vanish."""
    escaped = escape_value(raw)

    assert "\n" not in escaped
    assert "\r" not in escaped
    unescaped = [
        index
        for index, char in enumerate(escaped)
        if char in "'[]" and (index == 0 or escaped[index - 1] != "|")
    ]
    assert unescaped == []
