"""
Common test fixtures shared by all modules.

Provides factory functions for core airdrop data structures:
- Well-known test addresses
- Merkle trees over (address, amount) allocations
- Funded in-memory ledgers and campaigns

Trees are built here only for tests; the package itself never builds them.
Padding follows the external builder: an odd level duplicates its last node.
"""

from dataclasses import dataclass, field
from typing import Optional

from core.airdrop.campaign import Campaign
from core.airdrop.clock import FixedClock
from core.airdrop.events import EventRecorder
from core.crypto.hashing import to_hex
from core.ledger.memory import InMemoryTokenLedger
from core.merkle.leaf import encode_leaf
from core.merkle.verify import merkle_parent


ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
CAROL = "0x3333333333333333333333333333333333333333"
DAVE = "0x4444444444444444444444444444444444444444"
OWNER = "0x00000000000000000000000000000000000000aa"
FUNDER = "0x00000000000000000000000000000000000000ff"

T0 = 1_700_000_000_000
ONE_DAY_MS = 86_400_000


# =============================================================================
# Merkle Tree Factory
# =============================================================================

@dataclass
class AllocationTree:
    """Allocations with their leaves, levels and root."""
    allocations: list[tuple[str, int]]
    leaves: list[bytes]
    levels: list[list[bytes]] = field(default_factory=list)

    @property
    def root(self) -> bytes:
        return self.levels[-1][0]

    def proof(self, index: int) -> list[bytes]:
        siblings = []
        position = index
        for level in self.levels[:-1]:
            padded = level + [level[-1]] if len(level) % 2 else level
            siblings.append(padded[position ^ 1])
            position //= 2
        return siblings

    def hex_proof(self, index: int) -> list[str]:
        return [to_hex(s) for s in self.proof(index)]


def build_levels(leaves: list[bytes]) -> list[list[bytes]]:
    levels = [list(leaves)]
    while len(levels[-1]) > 1:
        level = levels[-1]
        if len(level) % 2:
            level = level + [level[-1]]
        levels.append([
            merkle_parent(level[i], level[i + 1]) for i in range(0, len(level), 2)
        ])
    return levels


def make_tree(allocations: Optional[list[tuple[str, int]]] = None) -> AllocationTree:
    """
    Create a Merkle tree for testing.

    Args:
        allocations: (address, amount) pairs in leaf order. Defaults to
            ALICE=100 and BOB=500.
    """
    if allocations is None:
        allocations = [(ALICE, 100), (BOB, 500)]
    leaves = [encode_leaf(address, amount) for address, amount in allocations]
    return AllocationTree(
        allocations=list(allocations),
        leaves=leaves,
        levels=build_levels(leaves),
    )


def make_address(n: int) -> str:
    """Deterministic address for index n."""
    return "0x" + f"{n + 1:040x}"


# =============================================================================
# Ledger / Campaign Factory
# =============================================================================

def make_ledger(funder: str = FUNDER, supply: int = 10_000) -> InMemoryTokenLedger:
    ledger = InMemoryTokenLedger(asset_id="TEST")
    ledger.mint(funder, supply)
    return ledger


def make_campaign(
    tree: Optional[AllocationTree] = None,
    ledger: Optional[InMemoryTokenLedger] = None,
    clock: Optional[FixedClock] = None,
    end_time: Optional[int] = T0 + ONE_DAY_MS,
    owner: str = OWNER,
    fund: int = 0,
    funder: str = FUNDER,
    rollback_failed_payout: bool = True,
    events: Optional[EventRecorder] = None,
    campaign_id: str = "cmp_test",
) -> Campaign:
    """
    Create a campaign for testing, optionally funded.

    Args:
        tree: Allocation tree (defaults to make_tree())
        ledger: Token ledger (defaults to make_ledger())
        clock: Campaign clock (defaults to FixedClock(T0))
        end_time: Claim deadline, or None for no deadline
        owner: Campaign owner
        fund: Amount to approve and fund right away
        funder: Account that funds the campaign
        rollback_failed_payout: Failed-payout policy
        events: Event recorder
        campaign_id: Campaign id (also fixes the campaign account)
    """
    tree = tree or make_tree()
    ledger = ledger if ledger is not None else make_ledger(funder)
    clock = clock or FixedClock(T0)

    campaign = Campaign(
        ledger,
        tree.root,
        end_time,
        owner,
        clock=clock,
        events=events,
        campaign_id=campaign_id,
        rollback_failed_payout=rollback_failed_payout,
    )
    if fund:
        ledger.approve(funder, campaign.account, fund)
        campaign.fund(funder, fund)
    return campaign
