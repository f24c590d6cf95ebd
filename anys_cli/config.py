"""
CLI Configuration

Configuration management for the anys-cid CLI.
Supports environment variables, a .env file and JSON configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from anys_cid.schemas.versioning import BLOCK_SIZE

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "ANYS_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"

    # Hashing
    read_chunk_size: int = BLOCK_SIZE
    version_tag: str = "A"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Reject settings the commands cannot use."""
        if len(self.version_tag) != 1 or ord(self.version_tag) > 0xFF:
            raise ValueError(f"version_tag must be a single byte-sized character, got {self.version_tag!r}")
        if self.read_chunk_size <= 0:
            raise ValueError(f"read_chunk_size must be positive, got {self.read_chunk_size}")
        if self.default_output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"default_output_format must be one of {OUTPUT_FORMATS}, got {self.default_output_format!r}"
            )

    @property
    def version(self) -> int:
        """Version tag as the byte written into CIDs."""
        return ord(self.version_tag)

    def to_dict(self) -> dict:
        return {
            "log_level": self.log_level,
            "log_file": self.log_file,
            "default_output_format": self.default_output_format,
            "read_chunk_size": self.read_chunk_size,
            "version_tag": self.version_tag,
        }


def _apply_env(config: CLIConfig) -> CLIConfig:
    """Override config fields from ANYS_* environment variables that are set."""
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = os.environ[f"{ENV_PREFIX}LOG_LEVEL"]
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = os.environ[f"{ENV_PREFIX}LOG_FILE"]
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = os.environ[f"{ENV_PREFIX}OUTPUT_FORMAT"].lower()
    if os.getenv(f"{ENV_PREFIX}READ_CHUNK_SIZE"):
        config.read_chunk_size = int(os.environ[f"{ENV_PREFIX}READ_CHUNK_SIZE"])
    if os.getenv(f"{ENV_PREFIX}VERSION_TAG"):
        config.version_tag = os.environ[f"{ENV_PREFIX}VERSION_TAG"]
    config.validate()
    return config


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    return _apply_env(CLIConfig())


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    defaults = CLIConfig()
    return CLIConfig(
        log_level=data.get("log_level", defaults.log_level),
        log_file=data.get("log_file", defaults.log_file),
        default_output_format=data.get("default_output_format", defaults.default_output_format),
        read_chunk_size=data.get("read_chunk_size", defaults.read_chunk_size),
        version_tag=data.get("version_tag", defaults.version_tag),
    )


def default_config_paths() -> list[Path]:
    """Locations searched when no config path is given."""
    return [
        Path.cwd() / "anys.json",
        Path.cwd() / ".anys.json",
        Path.home() / ".config" / "anys" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    return _apply_env(config)


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(CLIConfig().to_dict(), indent=2) + "\n"
