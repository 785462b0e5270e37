"""Integer parsing and formatting with C-style fixed-width semantics."""

from __future__ import annotations

from typing import TextIO

from solong.chars import is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a signed two's-complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    """Parse leading whitespace, an optional sign and a run of digits."""
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Convert the leading number of ``text`` to a 32-bit signed integer."""
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Convert the leading number of ``text`` to a 64-bit signed integer."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def put_number(n: int, stream: TextIO | None) -> None:
    """Write the decimal form of ``n`` to ``stream``; does nothing without one."""
    if stream is None:
        return
    stream.write(itoa(n))