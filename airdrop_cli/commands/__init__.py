"""
CLI command modules.
"""

from airdrop_cli.commands import leaf, verify, check, serve

__all__ = ["leaf", "verify", "check", "serve"]
