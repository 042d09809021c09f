"""
Module 09D - API Dependencies

Dependency injection for the API.
Provides the process-wide campaign registry and its token ledger.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from core.airdrop.registry import CampaignRegistry
from core.config.runtime import RuntimeConfig, get_default_config
from core.ledger.memory import InMemoryTokenLedger

logger = logging.getLogger(__name__)


_registry: Optional[CampaignRegistry] = None
_registry_lock = threading.Lock()


def build_registry(config: RuntimeConfig) -> CampaignRegistry:
    """Create a registry backed by a fresh in-memory ledger."""
    ledger = InMemoryTokenLedger(asset_id=config.ledger.asset_id)
    logger.info(
        f"Campaign registry using in-memory ledger for asset {config.ledger.asset_id}"
    )
    return CampaignRegistry(
        ledger,
        rollback_failed_payout=config.campaign.rollback_failed_payout,
    )


def get_registry() -> CampaignRegistry:
    """
    FastAPI dependency returning the shared registry.

    Tests replace it through `app.dependency_overrides[get_registry]`.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = build_registry(get_default_config())
    return _registry


def reset_registry() -> None:
    """Drop the shared registry so the next request builds a new one."""
    global _registry
    with _registry_lock:
        _registry = None
