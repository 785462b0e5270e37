"""Character classification and simple text output helpers."""

from __future__ import annotations

from typing import TextIO

_SPACES = frozenset("\t\n\v\f\r ")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as a one-char string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> int:
    """Return 1 for an ASCII upper-case letter, 2 for lower-case, 0 otherwise."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return 1
    if ord("a") <= code <= ord("z"):
        return 2
    return 0


def is_print(c: int | str) -> bool:
    """Return True for printable ASCII characters (space through tilde)."""
    return 32 <= _code(c) <= 126


def is_space(c: int | str) -> bool:
    """Return True for the six ASCII whitespace characters."""
    code = _code(c)
    return 0 <= code < 0x110000 and chr(code) in _SPACES


def only_spaces(text: str) -> bool:
    """Return True when every character of ``text`` is whitespace."""
    return all(ch in _SPACES for ch in text)


def is_all_digits(text: str) -> bool:
    """Return True when every character of ``text`` is an ASCII digit."""
    return all("0" <= ch <= "9" for ch in text)


def is_on_str(text: str | None, ch: int | str) -> bool:
    """Return True when ``ch`` occurs in ``text``; a missing text holds nothing."""
    if text is None:
        return False
    code = _code(ch)
    if code == 0:
        return False
    return chr(code) in text


def put_str(text: str | None, stream: TextIO | None) -> None:
    """Write ``text`` to ``stream``; does nothing if either is missing."""
    if text is None or stream is None:
        return
    stream.write(text)


def put_endl(text: str | None, stream: TextIO | None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    if stream is None:
        return
    put_str(text, stream)
    stream.write("\n")