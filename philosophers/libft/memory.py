"""Byte-buffer operations over mutable buffers such as bytearray."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

UINT_MAX = 0xFFFFFFFF


def _check_span(buf: Buffer | MutableSequence[int], n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray | memoryview, c: int, n: int) -> bytearray | memoryview:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (truncated to a byte)."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray | memoryview, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: bytearray | memoryview, src: Buffer, n: int) -> bytearray | memoryview:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray | memoryview, src: Buffer, n: int) -> bytearray | memoryview:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    # Taking a snapshot of the source first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_span(buf, n, "buffer")
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(s1, n, "first buffer")
    _check_span(s2, n, "second buffer")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product would exceed an unsigned 32-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    if count and size and count > UINT_MAX // size:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)