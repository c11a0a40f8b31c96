"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkleforge_cli generate [COUNT] [--algorithm A] [--trace] [--levels] [--json]
    python -m merkleforge_cli hash "<text>" [--algorithm A] [--json]
    python -m merkleforge_cli root [LEAF ...] [--text T ...] [--algorithm A] [--json]
    python -m merkleforge_cli config --init

Environment Variables:
    MERKLEFORGE_ALGORITHM       Default algorithm: sha256 or keccak256 (default: keccak256)
    MERKLEFORGE_LEAF_COUNT      Default leaf count for generate (default: 7)
    MERKLEFORGE_TRACE           Narrate every combination step (default: false)
    MERKLEFORGE_LOG_LEVEL       Log level (default: INFO)
    MERKLEFORGE_LOG_FILE        Optional log file
    MERKLEFORGE_OUTPUT_FORMAT   human or json (default: human)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from merkleforge.crypto.hashing import SUPPORTED_ALGORITHMS
from merkleforge_cli import __version__
from merkleforge_cli.commands import digest, generate, root
from merkleforge_cli.config import get_default_config_template, load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_INPUT = 2


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
    )


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )


def _add_tree_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--trace",
        action="store_true",
        default=False,
        help="Log every combination and promotion step",
    )
    parser.add_argument(
        "--levels",
        action="store_true",
        default=False,
        help="Include every tree level in the output",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkleforge",
        description="Build sorted-pair Merkle roots over SHA-256 or Keccak-256 leaves.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./merkleforge.json or ~/.config/merkleforge/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- generate command ---
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate random leaves and build their root",
        description="Hash COUNT random 32-byte blocks and reduce them to a Merkle root.",
    )
    generate_parser.add_argument(
        "count",
        type=int,
        nargs="?",
        default=None,
        help="Number of leaves (default: from config)",
    )
    generate_parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help=f"Hash algorithm: {', '.join(SUPPORTED_ALGORITHMS)} (default: from config)",
    )
    _add_tree_flags(generate_parser)
    _add_output_flags(generate_parser)
    generate_parser.set_defaults(func=generate.generate_cmd)

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Hash a UTF-8 string",
        description="Hash TEXT encoded as UTF-8.",
    )
    hash_parser.add_argument("text", type=str, help="Text to hash")
    hash_parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help=f"Hash algorithm: {', '.join(SUPPORTED_ALGORITHMS)} (default: from config)",
    )
    _add_output_flags(hash_parser)
    hash_parser.set_defaults(func=digest.hash_cmd)

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Build a root from given leaves",
        description="Reduce 0x-hex leaf digests, or hashed --text values, to a Merkle root.",
    )
    root_parser.add_argument(
        "leaves",
        type=str,
        nargs="*",
        help="0x-prefixed leaf digests (requires --algorithm)",
    )
    root_parser.add_argument(
        "--text", "-t",
        dest="texts",
        action="append",
        default=None,
        help="Text leaf, hashed before building (repeatable)",
    )
    root_parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help=f"Hash algorithm: {', '.join(SUPPORTED_ALGORITHMS)}",
    )
    _add_tree_flags(root_parser)
    _add_output_flags(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

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
        default="merkleforge.json",
        help="Path for config file (default: merkleforge.json)",
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
        print("You can also use environment variables (MERKLEFORGE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(asdict(args.cli_config), indent=2))
        return EXIT_SUCCESS

    print("Use --init to create a config file or --show to display current config")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=invalid input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
