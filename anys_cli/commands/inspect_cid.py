"""
CLI Inspect Command

Decode a CID and print its fields.

Usage:
    anys-cid inspect CID [--hex] [--json]

With --hex the argument is read as the hex binary form instead of the
string form.
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from anys_cid.crypto.hashing import from_hex, to_hex
from anys_cid.schemas.cid import Cid, CidSummary
from anys_cid.schemas.errors import CidDecodeException


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def parse_cid_argument(value: str, as_hex: bool = False) -> Cid:
    """Parse a CID given on the command line in string or hex binary form."""
    if as_hex:
        return Cid.from_bytes(from_hex(value))
    return Cid.from_string(value)


def print_summary_human(summary: CidSummary, binary: bytes) -> None:
    """Print a CID summary in human-readable format."""
    print(f"cid: {summary.cid}")
    print(f"version: {summary.version}")
    print(f"size: {summary.size}")
    print(f"hash: {summary.hash}")
    print(f"num_blocks: {summary.num_blocks}")
    print(f"is_raw: {str(summary.is_raw).lower()}")
    print(f"bytes: {to_hex(binary)}")


def inspect_cmd(args: Namespace) -> int:
    """
    Execute the inspect command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    output_json = args.json or args.cli_config.default_output_format == "json"

    try:
        cid = parse_cid_argument(args.cid, as_hex=args.hex)
    except CidDecodeException as e:
        if output_json:
            print(e.to_error_model().model_dump_json())
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = cid.summary()
    if output_json:
        data = summary.model_dump()
        data["bytes"] = cid.to_bytes().hex()
        print(json.dumps(data, indent=2))
    else:
        print_summary_human(summary, cid.to_bytes())

    return EXIT_SUCCESS
