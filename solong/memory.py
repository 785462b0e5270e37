"""Byte-buffer helpers that work on mutable buffers such as ``bytearray``."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_UINT_MASK = 0xFFFFFFFF


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``.

    When both buffers are missing, nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to ``dest``, safe when the regions overlap."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source buffer")
    _check_count(n, dest, src)
    # Taking a snapshot of the source first makes overlapping views safe.
    snapshot = bytes(src[:n])
    dest[:n] = snapshot
    return dest


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``."""
    _check_count(n, data)
    target = value & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(n, a, b)
    if n == 0:
        return 0
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> Optional[bytearray]:
    """Return a zeroed buffer of ``count * size`` bytes, or None if either is zero.

    The total is computed in 32-bit unsigned arithmetic.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return None
    total = (count * size) & _UINT_MASK
    return bytearray(total)