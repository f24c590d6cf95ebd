"""
CLI Hash Command

Compute the CID of one or more files and print its string form.

Usage:
    anys-cid hash FILE [FILE ...] [--json] [--version-tag A]

Files are processed in order. The first failure aborts the command;
CIDs already printed stay printed, the rest are not attempted.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from anys_cid.merkle.builder import from_path


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def hash_cmd(args: Namespace) -> int:
    """
    Execute the hash command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    if not args.paths:
        print("usage: anys-cid hash FILE [FILE ...]", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    config = args.cli_config
    version = ord(args.version_tag) if args.version_tag else config.version
    output_json = args.json or config.default_output_format == "json"

    logger.info("Hashing %d file(s)", len(args.paths))

    for path in args.paths:
        cid, _ = from_path(version, path, chunk_size=config.read_chunk_size)
        if output_json:
            record = {"path": path, **cid.summary().model_dump()}
            print(json.dumps(record))
        else:
            print(cid)

    return EXIT_SUCCESS
