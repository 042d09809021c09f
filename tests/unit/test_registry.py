"""
Module 06 - Campaign Registry Unit Tests
Tests for core/airdrop/registry.py
"""
import pytest

from core.airdrop.registry import CampaignRegistry
from core.schemas.errors import (
    CampaignConfigurationException,
    CampaignNotFoundException,
)

from fixtures import ONE_DAY_MS, OWNER, T0


@pytest.fixture
def registry(ledger, clock, events):
    return CampaignRegistry(ledger, clock=clock, events=events)


class TestRegistry:

    def test_create_and_get(self, registry, tree):
        campaign = registry.create(tree.root, T0 + ONE_DAY_MS, OWNER, campaign_id="cmp_1")
        assert registry.get("cmp_1") is campaign
        assert "cmp_1" in registry
        assert len(registry) == 1

    def test_shared_collaborators(self, registry, tree, ledger, events):
        campaign = registry.create(tree.root, None, OWNER)
        assert campaign.asset_id == ledger.asset_id
        assert campaign.events is events

    def test_duplicate_id_rejected(self, registry, tree):
        registry.create(tree.root, None, OWNER, campaign_id="dup")
        with pytest.raises(CampaignConfigurationException, match="already registered"):
            registry.create(tree.root, None, OWNER, campaign_id="dup")
        assert len(registry) == 1

    def test_unknown_id(self, registry):
        with pytest.raises(CampaignNotFoundException):
            registry.get("missing")

    def test_invalid_campaign_not_registered(self, registry, tree):
        with pytest.raises(CampaignConfigurationException):
            registry.create(tree.root, T0 - 1, OWNER, campaign_id="late")
        assert "late" not in registry

    def test_rollback_policy_default_and_override(self, ledger, clock, tree):
        registry = CampaignRegistry(ledger, clock=clock, rollback_failed_payout=False)
        a = registry.create(tree.root, None, OWNER)
        b = registry.create(tree.root, None, OWNER, rollback_failed_payout=True)
        assert a.rollback_failed_payout is False
        assert b.rollback_failed_payout is True

    def test_list_campaigns(self, registry, tree):
        registry.create(tree.root, None, OWNER, campaign_id="a")
        registry.create(tree.root, None, OWNER, campaign_id="b")
        assert [c.campaign_id for c in registry.list_campaigns()] == ["a", "b"]
