"""Small text scanning helpers used when reading XPM sources."""

from __future__ import annotations

import re

__all__ = ["find", "find_unquoted", "split_words", "strip_comments"]

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Like :func:`find`, but ignore matches inside double-quoted strings."""
    if not needle:
        raise ValueError("needle must not be empty")
    inside_quotes = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside_quotes = not inside_quotes
        if not inside_quotes and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(chars: list[str], start: int, length: int) -> None:
    end = min(len(chars), start + length)
    chars[start:end] = " " * (end - start)


def strip_comments(text: str) -> str:
    """Blank out C-style comments that lie outside quoted strings.

    Block comments are replaced by spaces including their delimiters; line
    comments are replaced up to and including the ending newline.  The
    result has the same length as ``text``.
    """
    chars = list(text)
    while (begin := find_unquoted("".join(chars), "/*")) != -1:
        end = "".join(chars[begin + 2:]).find("*/")
        _blank(chars, begin, end + 4)
    while (begin := find_unquoted("".join(chars), "//")) != -1:
        end = "".join(chars[begin + 2:]).find("\n")
        _blank(chars, begin, end + 3)
    return "".join(chars)