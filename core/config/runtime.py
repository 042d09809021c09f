"""
Runtime Configuration

Central configuration for the campaign service, the CLI and logging.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


ENV_PREFIX = "AIRDROP_"

CONFIG_SEARCH_PATHS: tuple[Path, ...] = (
    Path("airdrop.json"),
    Path(".airdrop.json"),
    Path.home() / ".config" / "airdrop" / "config.json",
)


@dataclass
class ApiConfig:
    """Configuration for the HTTP service."""
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class LedgerConfig:
    """Configuration for the in-memory token ledger backing the service."""
    asset_id: str = "TOKEN"


@dataclass
class CampaignConfig:
    """Defaults applied to campaigns created by the service."""
    rollback_failed_payout: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - JSON or YAML file
    - Programmatic construction
    """
    api: ApiConfig = field(default_factory=ApiConfig)
    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    campaign: CampaignConfig = field(default_factory=CampaignConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - AIRDROP_API_HOST / AIRDROP_API_PORT: service bind address
        - AIRDROP_ASSET_ID: asset id of the in-memory ledger
        - AIRDROP_ROLLBACK_FAILED_PAYOUT: default failed-payout policy (true/false)
        - AIRDROP_LOG_LEVEL: log level
        - AIRDROP_LOG_FILE: optional log file
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}API_HOST"):
            overrides.setdefault("api", {})["host"] = os.getenv(f"{ENV_PREFIX}API_HOST")
        if os.getenv(f"{ENV_PREFIX}API_PORT"):
            overrides.setdefault("api", {})["port"] = int(os.getenv(f"{ENV_PREFIX}API_PORT", "8000"))

        if os.getenv(f"{ENV_PREFIX}ASSET_ID"):
            overrides.setdefault("ledger", {})["asset_id"] = os.getenv(f"{ENV_PREFIX}ASSET_ID")

        if os.getenv(f"{ENV_PREFIX}ROLLBACK_FAILED_PAYOUT"):
            overrides.setdefault("campaign", {})["rollback_failed_payout"] = (
                os.getenv(f"{ENV_PREFIX}ROLLBACK_FAILED_PAYOUT", "true").lower() == "true"
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a .json, .yaml or .yml file."""
        path = Path(path)
        if path.suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        api_data = data.get("api", {})
        ledger_data = data.get("ledger", {})
        campaign_data = data.get("campaign", {})
        logging_data = data.get("logging", {})

        # A flat top-level "log_level" key is accepted as well
        if "log_level" in data and "level" not in logging_data:
            logging_data = {**logging_data, "level": data["log_level"]}

        return cls(
            api=ApiConfig(**api_data) if api_data else ApiConfig(),
            ledger=LedgerConfig(**ledger_data) if ledger_data else LedgerConfig(),
            campaign=CampaignConfig(**campaign_data) if campaign_data else CampaignConfig(),
            logging=LoggingConfig(**logging_data) if logging_data else LoggingConfig(),
            extra=data.get("extra", {}),
        )

    @classmethod
    def discover(cls, path: str | Path | None = None) -> "RuntimeConfig":
        """
        Load configuration from a file, then overlay environment variables.

        Search order when no path is given:
          1. ./airdrop.json
          2. ./.airdrop.json
          3. ~/.config/airdrop/config.json

        Environment variables ALWAYS override config file values.
        """
        candidates = [Path(path)] if path is not None else list(CONFIG_SEARCH_PATHS)

        config: RuntimeConfig | None = None
        for candidate in candidates:
            if candidate.exists():
                try:
                    config = cls.from_file(candidate)
                    logger.info(f"Loaded config from {candidate}")
                    break
                except (ValueError, TypeError) as e:
                    logger.warning(f"Failed to parse {candidate}: {e}")

        if config is None:
            config = cls()

        return config.with_env_overrides()

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for section, values in overrides.items():
            target = getattr(new_config, section)
            for key, value in values.items():
                setattr(target, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "cors_origins": list(self.api.cors_origins),
            },
            "ledger": {
                "asset_id": self.ledger.asset_id,
            },
            "campaign": {
                "rollback_failed_payout": self.campaign.rollback_failed_payout,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging for the service and the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.discover()
    return _default_config


def set_default_config(config: RuntimeConfig) -> None:
    """Set the default runtime configuration."""
    global _default_config
    _default_config = config
