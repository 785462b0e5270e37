"""Formatted output supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional

_UINT_MASK = 0xFFFFFFFF


class _MissingArgument(TypeError):
    """Raised when a conversion has no argument left to consume."""


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >> 31 else value


def _to_uint32(value: int) -> int:
    return value & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & 0xFFFFFFFFFFFFFFFF, "x")


def _signed(value: Any) -> str:
    return str(_to_int32(int(value)))


def _unsigned(value: Any) -> str:
    return str(_to_uint32(int(value)))


def _hex_lower(value: Any) -> str:
    return format(_to_uint32(int(value)), "x")


def _hex_upper(value: Any) -> str:
    return format(_to_uint32(int(value)), "X")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        # Unknown specifiers (and a trailing '%') produce no output.
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise _MissingArgument(f"not enough arguments for %{spec}") from None
    return conversion(value)


def render(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the formatted argument."""
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        pieces.append(_convert(next(chars, ""), values))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    if fmt is None:
        return 0
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)