"""Searching, comparing and bounded copying of strings."""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _code(ch: CharLike) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return ch


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the first ``ch`` in ``text``, or None if absent.

    Searching for the NUL character finds the end of the string.
    """
    code = _code(ch)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the last ``ch`` in ``text``, or None if absent.

    Searching for the NUL character finds the end of the string.
    """
    code = _code(ch)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    The end of a string compares as the NUL character, so a proper prefix
    sorts before the longer string.
    """
    _check_size(n, "n")
    for index in range(n):
        left = ord(s1[index]) if index < len(s1) else 0
        right = ord(s2[index]) if index < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: Optional[str], needle: Optional[str], length: int) -> Optional[int]:
    """Return the index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0; None is returned when there is no match.
    """
    _check_size(length, "length")
    if haystack is None or needle is None:
        if length == 0:
            return None
        raise TypeError("strnstr needs both a haystack and a needle")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied (possibly truncated) text and the length of ``src``.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: Optional[str], src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` is zero or smaller than ``dest``, ``dest`` is left unchanged and
    the returned length is ``len(src) + size``.
    """
    _check_size(size, "size")
    dest = dest or ""
    if size == 0 or size < len(dest):
        return dest, len(src) + size
    room = max(size - 1 - len(dest), 0)
    return dest + src[:room], len(dest) + len(src)


def streq(s1: Optional[str], s2: Optional[str]) -> bool:
    """Return True when both strings are exactly equal; a missing string equals only another."""
    if (s1 is None) != (s2 is None):
        return False
    return s1 == s2


def copy_or_blank(text: Optional[str]) -> str:
    """Return a copy of ``text``, or a single space when it is missing."""
    if text is None:
        return " "
    return str(text)