"""
Unsigned LEB128 varints.

7 data bits per byte, least significant group first, high bit set on
every byte except the last. Values are limited to 64 bits, which takes
at most 10 bytes.
"""
from __future__ import annotations

from typing import Union


MAX_UINT64 = 2**64 - 1
MAX_UVARINT_LEN = 10

BytesLike = Union[bytes, bytearray, memoryview]


class VarintError(ValueError):
    """Raised when a varint is truncated, too long or overflows 64 bits."""


def encode_uvarint(value: int) -> bytes:
    """
    Encode a non-negative integer as an unsigned varint.

    Example:
        >>> encode_uvarint(300).hex()
        'ac02'
    """
    if value < 0 or value > MAX_UINT64:
        raise ValueError(f"varint value out of range: {value}")
    out = bytearray()
    while value >= 0x80:
        out.append(0x80 | (value & 0x7F))
        value >>= 7
    out.append(value)
    return bytes(out)


def uvarint_size(value: int) -> int:
    """Number of bytes encode_uvarint(value) produces."""
    return max(1, -(-value.bit_length() // 7))


def decode_uvarint(data: BytesLike, offset: int = 0) -> tuple[int, int]:
    """
    Decode an unsigned varint starting at offset.

    Returns:
        (value, next_offset) where next_offset points just past the varint

    Raises:
        VarintError: If the data ends mid-varint, the varint runs past
                     10 bytes, or the value does not fit 64 bits
    """
    value = 0
    shift = 0
    end = min(len(data), offset + MAX_UVARINT_LEN)

    for pos in range(offset, end):
        byte = data[pos]
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            if value > MAX_UINT64:
                raise VarintError("varint overflows 64 bits")
            return value, pos + 1
        shift += 7

    if end - offset == MAX_UVARINT_LEN:
        raise VarintError(f"varint longer than {MAX_UVARINT_LEN} bytes")
    raise VarintError("truncated varint")


__all__ = [
    "MAX_UINT64",
    "MAX_UVARINT_LEN",
    "VarintError",
    "encode_uvarint",
    "decode_uvarint",
    "uvarint_size",
]
