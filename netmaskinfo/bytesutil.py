"""Byte buffer helpers: filling, copying, moving, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``); buffers that are only read may be any bytes-like object.
Byte values are reduced modulo 256, as an unsigned char would be.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(length: int, *buffers: ReadableBuffer) -> int:
    length = int(length)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(
                f"length {length} exceeds buffer of {len(buf)} bytes"
            )
    return length


def fill(buf: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Set the first ``length`` bytes of ``buf`` to ``value`` and return ``buf``."""
    length = _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def zero(buf: WritableBuffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    fill(buf, 0, length)


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer holding ``count`` elements of ``size`` bytes."""
    count = int(count)
    size = int(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def copy(dst: WritableBuffer, src: ReadableBuffer, length: int) -> WritableBuffer:
    """Copy the first ``length`` bytes of ``src`` into ``dst`` and return ``dst``."""
    length = _check_length(length, dst, src)
    if dst is src:
        return dst
    dst[:length] = bytes(src[:length])
    return dst


def move(buf: WritableBuffer, dst: int, src: int, length: int) -> WritableBuffer:
    """Move ``length`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    dst = int(dst)
    src = int(src)
    length = int(length)
    if min(dst, src, length) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst, src) + length > len(buf):
        raise ValueError("region extends past the end of the buffer")
    if dst != src:
        buf[dst : dst + length] = bytes(buf[src : src + length])
    return buf


def copy_until(
    dst: WritableBuffer, src: ReadableBuffer, stop: int, length: int
) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the byte ``stop``.

    At most ``length`` bytes are copied. Returns the offset in ``dst`` just past
    the copied ``stop`` byte, or None when it did not occur within ``length``.
    """
    length = _check_length(length, dst, src)
    stop &= 0xFF
    chunk = bytes(src[:length])
    pos = chunk.find(bytes([stop]))
    if pos < 0:
        dst[:length] = chunk
        return None
    dst[: pos + 1] = chunk[: pos + 1]
    return pos + 1


def find_byte(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Offset of the first byte equal to ``value`` within ``length`` bytes, or None."""
    length = _check_length(length, data)
    pos = bytes(data[:length]).find(bytes([value & 0xFF]))
    return pos if pos >= 0 else None


def compare(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Compare the first ``length`` bytes of ``a`` and ``b``.

    Returns the difference of the first differing bytes taken as unsigned
    values, or 0 when the compared bytes are equal.
    """
    length = _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0