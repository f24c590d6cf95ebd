"""
CLI Verify Command

Recompute a file's CID and compare it with an expected one.

Usage:
    anys-cid verify CID FILE [--json]

The file is hashed with the expected CID's version tag. Exit code 2
means the file does not match.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass

from anys_cid.merkle.builder import from_path
from anys_cid.schemas.cid import Cid
from anys_cid.schemas.errors import CidDecodeException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Result of comparing a file against an expected CID."""
    path: str
    expected: str
    actual: str
    size_ok: bool
    hash_ok: bool

    @property
    def ok(self) -> bool:
        return self.size_ok and self.hash_ok

    def to_dict(self) -> dict:
        d = asdict(self)
        d["ok"] = self.ok
        return d


def compare(path: str, expected: Cid, actual: Cid) -> VerifySummary:
    """Build a VerifySummary from the expected and recomputed CIDs."""
    return VerifySummary(
        path=path,
        expected=str(expected),
        actual=str(actual),
        size_ok=expected.size == actual.size,
        hash_ok=expected.hash == actual.hash,
    )


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"path: {summary.path}")
    print(f"expected: {summary.expected}")
    print(f"actual: {summary.actual}")
    print(f"size_ok: {str(summary.size_ok).lower()}")
    print(f"hash_ok: {str(summary.hash_ok).lower()}")
    print("OK" if summary.ok else "MISMATCH")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    output_json = args.json or config.default_output_format == "json"

    try:
        expected = Cid.from_string(args.cid)
    except CidDecodeException as e:
        if output_json:
            print(e.to_error_model().model_dump_json())
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    actual, _ = from_path(expected.version, args.path, chunk_size=config.read_chunk_size)
    summary = compare(args.path, expected, actual)

    if not summary.ok:
        logger.warning("CID mismatch for %s", args.path)

    if output_json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    return EXIT_SUCCESS if summary.ok else EXIT_VERIFICATION_FAILED
