"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    anys-cid hash FILE [FILE ...] [--json] [--version-tag A]
    anys-cid inspect CID [--hex] [--json]
    anys-cid verify CID FILE [--json]
    anys-cid config --init | --show

Environment Variables:
    ANYS_LOG_LEVEL          Log level (default: INFO)
    ANYS_LOG_FILE           Also write logs to this file
    ANYS_OUTPUT_FORMAT      human or json
    ANYS_READ_CHUNK_SIZE    Read buffer size in bytes (default: 16384)
    ANYS_VERSION_TAG        Version character for new CIDs (default: A)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from anys_cli import __version__
from anys_cli.commands import hash_files, inspect_cid, verify
from anys_cli.config import load_config, get_default_config_template


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def version_tag_arg(value: str) -> str:
    """Argparse type for a single byte-sized version character."""
    if len(value) != 1 or ord(value) > 0xFF:
        raise argparse.ArgumentTypeError(f"version tag must be one character, got {value!r}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="anys-cid",
        description="Compute, inspect and verify chunked-Merkle content identifiers.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./anys.json or ~/.config/anys/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Compute the CID of files",
        description="Print the string CID of each file, in order.",
    )
    hash_parser.add_argument(
        "paths",
        nargs="*",
        metavar="FILE",
        help="Files to hash",
    )
    hash_parser.add_argument(
        "--version-tag",
        type=version_tag_arg,
        default=None,
        help="Version character for the CIDs (default: from config, 'A')",
    )
    hash_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print one JSON object per file",
    )
    hash_parser.set_defaults(func=hash_files.hash_cmd)

    # --- inspect command ---
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Decode a CID and show its fields",
        description="Decode a string CID (or hex binary CID with --hex) and print its fields.",
    )
    inspect_parser.add_argument(
        "cid",
        type=str,
        help="CID in string form, or hex binary form with --hex",
    )
    inspect_parser.add_argument(
        "--hex",
        action="store_true",
        default=False,
        help="Treat the argument as the hex-encoded binary form",
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    inspect_parser.set_defaults(func=inspect_cid.inspect_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check a file against an expected CID",
        description="Recompute the file's CID and compare it with the expected one.",
    )
    verify_parser.add_argument(
        "cid",
        type=str,
        help="Expected CID in string form",
    )
    verify_parser.add_argument(
        "path",
        type=str,
        help="File to check",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="anys.json",
        help="Path for config file (default: anys.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (ANYS_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: anys-cid config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage(sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
