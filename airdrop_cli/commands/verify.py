"""
Module 09C - CLI Verify Command

Check a single Merkle proof offline against a root.

Usage:
    airdrop verify --root 0x.. --address 0x.. --amount 100 --index 3 --proof 0x.. 0x.. [--json]
    airdrop verify --root 0x.. --leaf 0x.. --index 3 --proof 0x..
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass

from core.crypto.hashing import hash_from_hex, to_hex
from core.merkle import MerkleVerifier
from core.schemas.errors import SchemaValidationException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class ProofSummary:
    """Summary of a proof check for CLI output."""
    root: str
    leaf: str
    index: int
    proof_length: int
    valid: bool

    def to_dict(self) -> dict:
        return asdict(self)


def print_summary_human(summary: ProofSummary) -> None:
    status = "VALID" if summary.valid else "INVALID"
    print(f"proof: {status}")
    print(f"  root:   {summary.root}")
    print(f"  leaf:   {summary.leaf}")
    print(f"  index:  {summary.index}")
    print(f"  depth:  {summary.proof_length}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        0 if the proof is valid, 2 if it is not, 1 on malformed input
    """
    try:
        root = hash_from_hex(args.root)
        siblings = [hash_from_hex(p) for p in args.proof]
        if args.leaf:
            leaf = hash_from_hex(args.leaf)
        elif args.address and args.amount is not None:
            leaf = MerkleVerifier.leaf(args.address, args.amount)
        else:
            print("Error: provide --leaf or both --address and --amount", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
    except SchemaValidationException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    valid = MerkleVerifier.verify(leaf, siblings, args.index, root)
    summary = ProofSummary(
        root=to_hex(root),
        leaf=to_hex(leaf),
        index=args.index,
        proof_length=len(siblings),
        valid=valid,
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    if valid:
        logger.info("Proof verified")
        return EXIT_SUCCESS
    logger.warning("Proof did not verify")
    return EXIT_VERIFICATION_FAILED
