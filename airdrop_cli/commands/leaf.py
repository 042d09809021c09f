"""
Module 09C - CLI Leaf Command

Print the leaf hash committed for an (address, amount) allocation.

Usage:
    airdrop leaf --address 0x.. --amount 100 [--json]
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from core.crypto.hashing import to_hex
from core.merkle.leaf import encode_leaf, leaf_preimage
from core.schemas.errors import SchemaValidationException
from core.schemas.types import normalize_identity


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def leaf_cmd(args: Namespace) -> int:
    try:
        address = normalize_identity(args.address)
        leaf = encode_leaf(address, args.amount)
    except SchemaValidationException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({
            "address": address,
            "amount": str(args.amount),
            "preimage": to_hex(leaf_preimage(address, args.amount)),
            "leaf": to_hex(leaf),
        }, indent=2))
    else:
        print(to_hex(leaf))
    return EXIT_SUCCESS
