"""
anys-cid CLI

Command-line interface for computing and checking content identifiers.

Usage:
    anys-cid hash file.bin other.bin
    anys-cid inspect A<base58>
    anys-cid verify A<base58> file.bin
"""

__version__ = "0.1.0"
