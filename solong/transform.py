"""Building new strings from old ones: slicing, joining, trimming and mapping."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

CharLike = Union[str, int]


def _separator(sep: CharLike) -> str:
    if isinstance(sep, int):
        return chr(sep)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of ``text`` gives an empty string; a missing text gives None.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Return ``s1`` followed by ``s2``, or None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove every leading and trailing character that appears in ``charset``."""
    if text is None or charset is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def split(text: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    if text is None:
        return None
    separator = _separator(sep)
    return [word for word in text.split(separator) if word]


def strmapi(text: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Return a new string of ``func(index, char)`` for each character of ``text``."""
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: Optional[str], func: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Call ``func(index, char)`` on every character of ``text``.

    A string returned by ``func`` replaces that character; None leaves it as it
    was. Returns the resulting text, or None if either argument is missing.
    """
    if text is None or func is None:
        return None
    pieces = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)