"""
Module 05 - Claim Ledger Unit Tests
Tests for core/airdrop/claim_ledger.py
"""
import pytest

from core.airdrop.claim_ledger import ClaimLedger

from fixtures import ALICE, BOB


class TestClaimFlags:
    """Flags go from unclaimed to claimed once."""

    def test_absent_is_unclaimed(self):
        ledger = ClaimLedger()
        assert not ledger.is_claimed(ALICE)
        assert len(ledger) == 0

    def test_mark_claimed(self):
        ledger = ClaimLedger()
        key = ledger.mark_claimed(ALICE)
        assert key == ALICE
        assert ledger.is_claimed(ALICE)
        assert not ledger.is_claimed(BOB)

    def test_keys_are_normalised(self):
        ledger = ClaimLedger()
        ledger.mark_claimed("0x5AAEB6053F3E94C9B9A09F33669435E7EF1BEAED")
        assert ledger.is_claimed("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed")
        assert ledger.is_claimed("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")
        assert ledger.claimed_count() == 1

    def test_marking_twice_keeps_one_entry(self):
        ledger = ClaimLedger()
        ledger.mark_claimed(ALICE)
        ledger.mark_claimed(ALICE)
        assert ledger.claimed_count() == 1

    def test_contains(self):
        ledger = ClaimLedger()
        ledger.mark_claimed(ALICE)
        assert ALICE in ledger
        assert BOB not in ledger
        assert "not-an-address" not in ledger
        assert 42 not in ledger

    def test_claimed_identities(self):
        ledger = ClaimLedger()
        ledger.mark_claimed(ALICE)
        ledger.mark_claimed(BOB)
        assert {i.lower() for i in ledger.claimed_identities()} == {ALICE, BOB}


class TestPending:
    """A pending mark is withdrawn only if the body fails."""

    def test_commit_keeps_mark(self):
        ledger = ClaimLedger()
        with ledger.pending(ALICE):
            assert ledger.is_claimed(ALICE)
        assert ledger.is_claimed(ALICE)

    def test_failure_withdraws_mark(self):
        ledger = ClaimLedger()
        with pytest.raises(ValueError):
            with ledger.pending(ALICE):
                assert ledger.is_claimed(ALICE)
                raise ValueError("payout failed")
        assert not ledger.is_claimed(ALICE)
        assert ledger.claimed_count() == 0

    def test_already_marked_identity_rejected(self):
        ledger = ClaimLedger()
        ledger.mark_claimed(ALICE)
        with pytest.raises(RuntimeError, match="already marked"):
            with ledger.pending(ALICE):
                pass
        assert ledger.is_claimed(ALICE)

    def test_nested_pending_for_same_identity_rejected(self):
        ledger = ClaimLedger()
        with pytest.raises(RuntimeError):
            with ledger.pending(ALICE):
                with ledger.pending(ALICE):
                    pass
        # the outer body raised, so the outer mark is withdrawn too
        assert not ledger.is_claimed(ALICE)
