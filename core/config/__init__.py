"""
Runtime Configuration Module

Provides configuration loading and management for the airdrop service.
"""

from .runtime import (
    ApiConfig,
    CampaignConfig,
    LedgerConfig,
    LoggingConfig,
    RuntimeConfig,
    get_default_config,
    set_default_config,
    setup_logging,
)

__all__ = [
    "ApiConfig",
    "CampaignConfig",
    "LedgerConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
]
