"""
CLI Configuration

Configuration management for the merkleforge CLI.
Supports environment variables (.env aware) and JSON configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MERKLEFORGE_"


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Tree settings
    algorithm: str = "keccak256"
    leaf_count: int = 7
    trace: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    config = CLIConfig()

    if os.getenv(f"{ENV_PREFIX}ALGORITHM"):
        config.algorithm = os.getenv(f"{ENV_PREFIX}ALGORITHM", config.algorithm)
    if os.getenv(f"{ENV_PREFIX}LEAF_COUNT"):
        config.leaf_count = int(os.getenv(f"{ENV_PREFIX}LEAF_COUNT", "7"))
    if os.getenv(f"{ENV_PREFIX}TRACE"):
        config.trace = _env_bool(os.getenv(f"{ENV_PREFIX}TRACE", "false"))

    # Logging
    config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO")
    config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")

    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human")

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    config = CLIConfig()

    config.algorithm = data.get("algorithm", config.algorithm)
    config.leaf_count = int(data.get("leaf_count", config.leaf_count))
    config.trace = bool(data.get("trace", config.trace))

    # Logging
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)

    config.default_output_format = data.get(
        "default_output_format", config.default_output_format
    )

    return config


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
        default_paths = [
            Path.cwd() / "merkleforge.json",
            Path.cwd() / ".merkleforge.json",
            Path.home() / ".config" / "merkleforge" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    env_config = load_config_from_env()

    # Merge env into config (env takes precedence)
    if os.getenv(f"{ENV_PREFIX}ALGORITHM"):
        config.algorithm = env_config.algorithm
    if os.getenv(f"{ENV_PREFIX}LEAF_COUNT"):
        config.leaf_count = env_config.leaf_count
    if os.getenv(f"{ENV_PREFIX}TRACE"):
        config.trace = env_config.trace
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = env_config.log_level
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = env_config.log_file
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = env_config.default_output_format

    return config


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "algorithm": "keccak256",
  "leaf_count": 7,
  "trace": false,
  "log_level": "INFO",
  "log_file": null,
  "default_output_format": "human"
}
"""
