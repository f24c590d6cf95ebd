"""
CLI command modules.
"""

from anys_cli.commands import hash_files, inspect_cid, verify

__all__ = ["hash_files", "inspect_cid", "verify"]
