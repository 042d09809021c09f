"""
Test fixtures package for airdrop tests.

This package provides factory functions for creating test objects:
- common.py: addresses, allocation trees, ledgers and campaigns

Usage:
    from fixtures import make_tree, make_campaign, ALICE

    def test_something():
        tree = make_tree([(ALICE, 100)])
        campaign = make_campaign(tree, fund=100)
"""

from .common import (
    ALICE,
    BOB,
    CAROL,
    DAVE,
    OWNER,
    FUNDER,
    T0,
    ONE_DAY_MS,
    AllocationTree,
    build_levels,
    make_tree,
    make_address,
    make_ledger,
    make_campaign,
)

__all__ = [
    "ALICE",
    "BOB",
    "CAROL",
    "DAVE",
    "OWNER",
    "FUNDER",
    "T0",
    "ONE_DAY_MS",
    "AllocationTree",
    "build_levels",
    "make_tree",
    "make_address",
    "make_ledger",
    "make_campaign",
]
