"""
anys-cid - Content Identifiers

Deterministic identifiers for byte streams: the data is split into
16 KiB blocks, the block hashes are reduced to a Merkle root, and the
root is packed with the format version and byte length.

Usage:
    from anys_cid import Cid, CidBuilder, VERSION_RAW

    cid = Cid.from_data(VERSION_RAW, b"helloworld")
    text = str(cid)
    assert Cid.from_string(text) == cid
"""

__version__ = "0.1.0"

from anys_cid.crypto import HASH_SIZE, ZERO_HASH

from anys_cid.schemas import (
    BLOCK_SIZE,
    MAX_ENCODED_SIZE,
    VERSION_RAW,
    AnysError,
    AnysException,
    BlockProofException,
    BuilderFinalizedException,
    Cid,
    CidDecodeException,
    CidSummary,
    FileModifiedException,
    InvalidEncodingException,
    InvalidHashException,
    InvalidSizeException,
    UnsupportedVersionException,
)

from anys_cid.merkle import (
    BlockProof,
    CidBuilder,
    build_block_proof,
    build_merkle_root,
    from_data,
    from_file,
    from_path,
    from_reader,
    verify_block_proof,
)

from anys_cid.codec import decode, encode, from_string, to_string


__all__ = [
    # Constants
    "BLOCK_SIZE",
    "HASH_SIZE",
    "MAX_ENCODED_SIZE",
    "VERSION_RAW",
    "ZERO_HASH",
    # Value types
    "Cid",
    "CidSummary",
    "BlockProof",
    # Building
    "CidBuilder",
    "build_merkle_root",
    "build_block_proof",
    "verify_block_proof",
    "from_data",
    "from_reader",
    "from_file",
    "from_path",
    # Codec
    "encode",
    "decode",
    "to_string",
    "from_string",
    # Errors
    "AnysError",
    "AnysException",
    "BlockProofException",
    "BuilderFinalizedException",
    "CidDecodeException",
    "FileModifiedException",
    "InvalidEncodingException",
    "InvalidHashException",
    "InvalidSizeException",
    "UnsupportedVersionException",
]
