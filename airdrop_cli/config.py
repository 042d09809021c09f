"""
Module 09C - CLI Configuration

Config template and display helpers for the `config` command. Loading itself
goes through core.config.RuntimeConfig so the CLI and the API agree.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.config.runtime import RuntimeConfig


DEFAULT_CONFIG_PATH = Path("airdrop.json")


def get_default_config_template() -> str:
    """Return a JSON config template with every supported key."""
    template: dict[str, Any] = RuntimeConfig().to_dict()
    template.pop("extra", None)
    return json.dumps(template, indent=2) + "\n"


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Raises:
        FileNotFoundError: If an explicit path does not exist
    """
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return RuntimeConfig.discover(config_path)
