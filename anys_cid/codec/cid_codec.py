"""
CID Codec
Canonical binary and string encodings of a Cid.

Binary layout:
    byte 0        version tag
    bytes 1..k    size, unsigned LEB128 varint
    bytes k..k+32 Merkle root

String layout:
    <version char><base58(varint(size) || hash)>

The version character is written as-is, not base-58 encoded, so the
format of an identifier is visible at a glance.

Decoding is all-or-nothing: every failure raises a CidDecodeException
subclass and nothing is logged.
"""
from __future__ import annotations

import base58

from anys_cid.codec.varint import BytesLike, VarintError, decode_uvarint, encode_uvarint
from anys_cid.crypto.hashing import HASH_SIZE
from anys_cid.schemas.cid import Cid
from anys_cid.schemas.errors import (
    InvalidEncodingException,
    InvalidHashException,
    InvalidSizeException,
    UnsupportedVersionException,
)
from anys_cid.schemas.versioning import is_supported_version, version_char


_BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def _payload(cid: Cid) -> bytes:
    """Everything after the version tag: varint(size) || hash."""
    return encode_uvarint(cid.size) + cid.hash


def encode(cid: Cid) -> bytes:
    """
    Encode a Cid to its canonical binary form.

    Any version tag is written, implemented or not.

    Example:
        >>> encode(Cid(0x41, 10, bytes(32)))[:2].hex()
        '410a'
    """
    return bytes([cid.version]) + _payload(cid)


def _from_version_and_payload(version: int, payload: BytesLike) -> Cid:
    """Validate and assemble a Cid from a version tag and the bytes after it."""
    if not is_supported_version(version):
        raise UnsupportedVersionException(version)

    try:
        size, offset = decode_uvarint(payload)
    except VarintError as e:
        raise InvalidSizeException(f"invalid size: {e}") from e

    remaining = len(payload) - offset
    if remaining != HASH_SIZE:
        raise InvalidHashException(remaining)

    return Cid(version, size, bytes(payload[offset:]))


def decode(data: BytesLike) -> Cid:
    """
    Decode the binary form of a Cid.

    Raises:
        UnsupportedVersionException: Unknown version tag
        InvalidSizeException: Empty input, or truncated/overflowing varint
        InvalidHashException: Trailing bytes are not exactly 32 long
    """
    if len(data) == 0:
        raise InvalidSizeException("invalid size: empty input")
    return _from_version_and_payload(data[0], memoryview(data)[1:])


def to_string(cid: Cid) -> str:
    """
    Render the string form: version character followed by base-58 payload.

    Example:
        >>> to_string(Cid(0x41, 0, bytes(32)))[0]
        'A'
    """
    return version_char(cid.version) + base58.b58encode(_payload(cid)).decode("ascii")


def from_string(text: str) -> Cid:
    """
    Parse the string form of a Cid.

    The payload is base-58 decoded before the version is checked, so a
    malformed payload reports InvalidEncodingException whatever its tag.

    Raises:
        InvalidEncodingException: Empty string or invalid base-58 payload
        UnsupportedVersionException: Unknown version character
        InvalidSizeException: Truncated/overflowing varint
        InvalidHashException: Trailing bytes are not exactly 32 long
    """
    if not text:
        raise InvalidEncodingException("invalid encoding: empty string")

    version = ord(text[0])
    encoded = text[1:]
    # b58decode strips trailing whitespace; a CID string never carries any
    bad = next((c for c in encoded if c not in _BASE58_CHARS), None)
    if bad is not None:
        raise InvalidEncodingException(f"invalid encoding: invalid base-58 character {bad!r}")

    try:
        payload = base58.b58decode(encoded)
    except ValueError as e:
        raise InvalidEncodingException(f"invalid encoding: {e}") from e

    if version > 0xFF:
        raise UnsupportedVersionException(version)
    return _from_version_and_payload(version, payload)


__all__ = [
    "encode",
    "decode",
    "to_string",
    "from_string",
]
