"""
Module 09C - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m airdrop_cli leaf --address A --amount N [--json]
    python -m airdrop_cli verify --root R (--leaf L | --address A --amount N) --index I --proof P [P ...] [--json]
    python -m airdrop_cli check DISTRIBUTION.json [--address A] [--json] [--debug]
    python -m airdrop_cli serve [--host H] [--port P] [--reload]
    python -m airdrop_cli config --init | --show

Environment Variables:
    AIRDROP_API_HOST                 API bind host (default: 127.0.0.1)
    AIRDROP_API_PORT                 API bind port (default: 8000)
    AIRDROP_ASSET_ID                 Asset id of the service's token ledger
    AIRDROP_ROLLBACK_FAILED_PAYOUT   Restore the claim when a payout fails (default: true)
    AIRDROP_LOG_LEVEL                Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import Sequence

from airdrop_cli.commands import leaf, verify, check, serve
from airdrop_cli.config import DEFAULT_CONFIG_PATH, get_default_config_template, load_config
from core.config.runtime import setup_logging


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="airdrop",
        description="Merkle Airdrop CLI - Hash leaves, check proofs and distributions, serve the API.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./airdrop.json or ~/.config/airdrop/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- leaf command ---
    leaf_parser = subparsers.add_parser(
        "leaf",
        help="Print the leaf hash for an allocation",
        description="Compute keccak256(address || uint256 amount).",
    )
    leaf_parser.add_argument("--address", "-a", type=str, required=True, help="Recipient address")
    leaf_parser.add_argument("--amount", "-n", type=int, required=True, help="Allocated amount")
    leaf_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    leaf_parser.set_defaults(func=leaf.leaf_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a single Merkle proof offline",
        description="Fold a proof from a leaf and compare the result with a root.",
    )
    verify_parser.add_argument("--root", "-r", type=str, required=True, help="Merkle root (0x hex)")
    verify_parser.add_argument("--leaf", type=str, default=None, help="Pre-computed leaf hash")
    verify_parser.add_argument("--address", "-a", type=str, default=None, help="Recipient address")
    verify_parser.add_argument("--amount", "-n", type=int, default=None, help="Allocated amount")
    verify_parser.add_argument("--index", "-i", type=int, required=True, help="Leaf index")
    verify_parser.add_argument(
        "--proof", "-p",
        type=str,
        nargs="*",
        default=[],
        help="Sibling hashes, bottom to top",
    )
    verify_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- check command ---
    check_parser = subparsers.add_parser(
        "check",
        help="Verify a distribution file against its root",
        description="Check every proof (or one address's proof) in an externally built distribution.",
    )
    check_parser.add_argument("distribution", type=str, help="Path to distribution JSON")
    check_parser.add_argument("--address", "-a", type=str, default=None, help="Only check this address")
    check_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    check_parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Include per-entry results",
    )
    check_parser.set_defaults(func=check.check_cmd)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Serve the campaign API with uvicorn.",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Bind host (overrides config)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (overrides config)")
    serve_parser.add_argument("--reload", action="store_true", default=False, help="Auto-reload")
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
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
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path for config file (default: {DEFAULT_CONFIG_PATH})",
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
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (AIRDROP_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: airdrop config [--init|--show]")
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
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

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
