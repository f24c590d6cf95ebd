"""
CID encodings.

- varint: unsigned LEB128 for the size field
- cid_codec: binary and base-58 string forms of a Cid
"""
from .varint import (
    MAX_UINT64,
    MAX_UVARINT_LEN,
    VarintError,
    decode_uvarint,
    encode_uvarint,
    uvarint_size,
)

from .cid_codec import (
    decode,
    encode,
    from_string,
    to_string,
)


__all__ = [
    "MAX_UINT64",
    "MAX_UVARINT_LEN",
    "VarintError",
    "decode_uvarint",
    "encode_uvarint",
    "uvarint_size",
    "decode",
    "encode",
    "from_string",
    "to_string",
]
