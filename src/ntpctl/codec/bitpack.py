"""Bit-level field access on a control message buffer.

This module provides the low-level read/write primitives used by the
control message header. All multi-byte values are big-endian (network order).
"""

from __future__ import annotations


def _mask(width: int) -> int:
    return (1 << width) - 1


def read_bits(buf: bytearray | bytes, index: int, shift: int, width: int) -> int:
    """Read an unsigned sub-byte field.

    Args:
        buf: Byte buffer to read from
        index: Byte index holding the field
        shift: Bit position of the field's least significant bit (0 = LSB)
        width: Field width in bits (1-8)

    Returns:
        Unsigned field value

    Example:
        >>> read_bits(b"\\x26", 0, 3, 3)
        4
    """
    return (buf[index] >> shift) & _mask(width)


def write_bits(buf: bytearray, index: int, shift: int, width: int, value: int) -> None:
    """Write an unsigned sub-byte field without touching neighbouring bits.

    Args:
        buf: Byte buffer to modify in place
        index: Byte index holding the field
        shift: Bit position of the field's least significant bit (0 = LSB)
        width: Field width in bits (1-8)
        value: Unsigned value to store (must fit in width)

    Raises:
        ValueError: If value is negative or doesn't fit in width
    """
    mask = _mask(width)
    if value < 0:
        raise ValueError(f"write_bits requires non-negative value, got {value}")
    if value > mask:
        raise ValueError(f"Value {value} requires more than {width} bits (max: {mask})")

    buf[index] = (buf[index] & ~(mask << shift) & 0xFF) | ((value & mask) << shift)


def read_uint16(buf: bytearray | bytes, index: int) -> int:
    """Read a big-endian unsigned 16-bit value starting at index."""
    return (buf[index] << 8) | buf[index + 1]


def write_uint16(buf: bytearray, index: int, value: int) -> None:
    """Write a big-endian unsigned 16-bit value starting at index.

    The high byte goes to ``index`` and the low byte to ``index + 1``.

    Raises:
        ValueError: If value is outside 0-65535
    """
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"Value {value} requires more than 16 bits (max: 65535)")

    buf[index] = (value >> 8) & 0xFF
    buf[index + 1] = value & 0xFF
