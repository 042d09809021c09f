"""
Module 09D - Verify Route

Stateless Merkle proof check. Nothing is marked or paid out.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.errors import InvalidRequestError
from api.models.requests import VerifyProofRequest
from api.models.responses import VerifyProofResponse
from core.crypto.hashing import hash_from_hex, to_hex
from core.merkle import MerkleVerifier


logger = logging.getLogger(__name__)

router = APIRouter(tags=["verification"])


@router.post("/verify", response_model=VerifyProofResponse)
def verify(request: VerifyProofRequest) -> VerifyProofResponse:
    """
    Check a proof against a root.

    The leaf is taken as given, or computed from `identity` and `amount`.
    """
    if request.leaf is not None:
        leaf = hash_from_hex(request.leaf)
    elif request.identity is not None and request.amount is not None:
        leaf = MerkleVerifier.leaf(request.identity, request.amount)
    else:
        raise InvalidRequestError(
            "Provide either 'leaf' or both 'identity' and 'amount'",
        )

    siblings = [hash_from_hex(p) for p in request.proof]
    root = hash_from_hex(request.root)
    valid = MerkleVerifier.verify(leaf, siblings, request.index, root)
    logger.debug(f"Verified proof for leaf {to_hex(leaf)}: {valid}")

    return VerifyProofResponse(
        valid=valid,
        leaf=to_hex(leaf),
        root=request.root,
        index=request.index,
    )
