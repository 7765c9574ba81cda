"""Escaping of property values for TeamCity service messages."""

from collections.abc import Mapping, Sequence

ESCAPE_RULES: Sequence[tuple[str, str]] = (
    ("\\", "||"),
    ("'", "|'"),
    ("\n", "|n"),
    ("\r", "|r"),
    ("[", "|["),
    ("]", "|]"),
)

_TRANSLATION: Mapping[int, str] = {ord(match): repl for match, repl in ESCAPE_RULES}


def escape_value(value: str) -> str:
    """Escape text for use inside a single-quoted service message property.

    Every character is translated at most once, so the ``|`` introduced by
    one rule is never escaped again by another.
    """
    return value.translate(_TRANSLATION)
