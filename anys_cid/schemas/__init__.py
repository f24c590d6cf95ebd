"""
Schemas for anys-cid.

Exports the Cid value type, version constants and the error taxonomy.
"""

from .versioning import (
    BLOCK_SIZE,
    MAX_CID_SIZE,
    MAX_ENCODED_SIZE,
    SUPPORTED_VERSIONS,
    VERSION_RAW,
    is_supported_version,
    version_char,
)

from .errors import (
    AnysError,
    AnysException,
    BlockProofException,
    BuilderFinalizedException,
    CidDecodeException,
    ErrorCodes,
    FileModifiedException,
    InvalidEncodingException,
    InvalidHashException,
    InvalidSizeException,
    UnsupportedVersionException,
)

from .cid import Cid, CidSummary


__all__ = [
    # Versioning
    "BLOCK_SIZE",
    "MAX_CID_SIZE",
    "MAX_ENCODED_SIZE",
    "SUPPORTED_VERSIONS",
    "VERSION_RAW",
    "is_supported_version",
    "version_char",
    # Errors
    "AnysError",
    "AnysException",
    "BlockProofException",
    "BuilderFinalizedException",
    "CidDecodeException",
    "ErrorCodes",
    "FileModifiedException",
    "InvalidEncodingException",
    "InvalidHashException",
    "InvalidSizeException",
    "UnsupportedVersionException",
    # Value types
    "Cid",
    "CidSummary",
]
