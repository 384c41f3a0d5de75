"""Token consumers for the command language.

Each consumer takes the unparsed remainder of a line and returns the token
together with the new remainder, or None when the next token does not have
the required shape. Nothing is consumed on failure.
"""

from __future__ import annotations

import re

_WORD = re.compile(r"\s*(?P<word>\S+)(?P<rest>.*)", re.DOTALL)
_NAME = re.compile(r"\s*\[(?P<name>[^\]]+)\](?=\s|$)(?P<rest>.*)", re.DOTALL)


def consume_word(text: str) -> tuple[str, str] | None:
    """Consume a bare word: a run of non-whitespace characters."""
    m = _WORD.match(text)
    if not m:
        return None
    return m.group("word"), m.group("rest")


def consume_name(text: str) -> tuple[str, str] | None:
    """Consume a bracketed name such as ``[Milky Way]``, returning its contents."""
    m = _NAME.match(text)
    if not m:
        return None
    return m.group("name"), m.group("rest")


def consume_float(text: str) -> tuple[float, str] | None:
    """Consume a word that parses as a real number."""
    token = consume_word(text)
    if token is None:
        return None
    word, rest = token
    value = parse_float(word)
    if value is None:
        return None
    return value, rest


def consume_int(text: str) -> tuple[int, str] | None:
    """Consume a word that parses as an integer."""
    token = consume_word(text)
    if token is None:
        return None
    word, rest = token
    try:
        return int(word), rest
    except ValueError:
        return None


def parse_float(word: str) -> float | None:
    try:
        return float(word)
    except ValueError:
        return None


def is_blank(text: str) -> bool:
    return not text or text.isspace()
