"""
Distribution Files

Reader for the output of an external tree builder. Two layouts are accepted:

Leaves list (index = position in the list):
    {"root": "0x..", "totalSupply": "1500",
     "leaves": [{"recipient": "0x..", "value": "100", "proof": ["0x..", ...]}]}

Claims map (index stored per entry):
    {"merkleRoot": "0x..", "tokenTotal": "1500",
     "claims": {"0x..": {"index": 0, "amount": "100", "proof": ["0x..", ...]}}}

Files are only read and checked here; nothing in this package writes them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.crypto.hashing import hash_from_hex, to_hex
from core.merkle.leaf import encode_leaf
from core.merkle.verify import MerkleProof, verify_proof
from core.schemas.errors import DistributionFileException, SchemaValidationException
from core.schemas.types import normalize_identity, validate_amount


logger = logging.getLogger(__name__)


class DistributionEntry(BaseModel):
    """One recipient's allocation and proof."""

    model_config = ConfigDict(extra="ignore")

    identity: str
    amount: int = Field(..., ge=0)
    index: int = Field(..., ge=0)
    proof: list[str] = Field(default_factory=list)

    @field_validator("identity")
    @classmethod
    def _normalize_identity(cls, v: str) -> str:
        try:
            return normalize_identity(v)
        except SchemaValidationException as e:
            raise ValueError(e.message) from e

    @field_validator("amount")
    @classmethod
    def _check_amount(cls, v: int) -> int:
        try:
            return validate_amount(v)
        except SchemaValidationException as e:
            raise ValueError(e.message) from e

    @field_validator("proof")
    @classmethod
    def _check_proof(cls, v: list[str]) -> list[str]:
        for entry in v:
            hash_from_hex(entry)
        return [entry.lower() for entry in v]

    def proof_bytes(self) -> list[bytes]:
        return [hash_from_hex(p) for p in self.proof]

    def leaf(self) -> bytes:
        return encode_leaf(self.identity, self.amount)


class EntryCheck(BaseModel):
    """Verification outcome for one entry."""

    identity: str
    index: int
    amount: int
    leaf: str
    ok: bool


class DistributionFile(BaseModel):
    """A Merkle root together with every recipient's proof."""

    model_config = ConfigDict(extra="forbid")

    root: str
    total_supply: Optional[int] = Field(default=None, ge=0)
    entries: list[DistributionEntry] = Field(default_factory=list)

    @field_validator("root")
    @classmethod
    def _check_root(cls, v: str) -> str:
        hash_from_hex(v)
        return v.lower()

    @property
    def root_bytes(self) -> bytes:
        return hash_from_hex(self.root)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DistributionFile":
        """
        Parse either supported layout.

        Raises:
            DistributionFileException: If the layout is unknown or invalid
        """
        try:
            if "leaves" in data:
                entries = [
                    {
                        "identity": leaf.get("recipient") or leaf.get("address"),
                        "amount": leaf.get("value", leaf.get("amount")),
                        "index": leaf.get("index", position),
                        "proof": leaf.get("proof", []),
                    }
                    for position, leaf in enumerate(data["leaves"])
                ]
                return cls(
                    root=data["root"],
                    total_supply=data.get("totalSupply"),
                    entries=entries,
                )
            if "claims" in data:
                entries = [
                    {
                        "identity": address,
                        "amount": claim.get("amount"),
                        "index": claim.get("index"),
                        "proof": claim.get("proof", []),
                    }
                    for address, claim in data["claims"].items()
                ]
                return cls(
                    root=data["merkleRoot"],
                    total_supply=data.get("tokenTotal"),
                    entries=entries,
                )
        except (KeyError, TypeError, AttributeError) as e:
            raise DistributionFileException(f"Malformed distribution data: {e}") from e
        except ValidationError as e:
            raise DistributionFileException(
                "Distribution data failed validation",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
        raise DistributionFileException(
            "Unknown distribution layout: expected 'leaves' or 'claims'"
        )

    @classmethod
    def load(cls, path: str | Path) -> "DistributionFile":
        path = Path(path)
        if not path.exists():
            raise DistributionFileException(
                f"Distribution file not found: {path}",
                details={"path": str(path)},
            )
        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DistributionFileException(
                f"Invalid JSON in {path}: {e}",
                details={"path": str(path)},
            ) from e
        logger.debug(f"Loaded distribution file {path}")
        return cls.from_dict(data)

    def entry_for(self, identity: str) -> Optional[DistributionEntry]:
        key = normalize_identity(identity)
        for entry in self.entries:
            if entry.identity == key:
                return entry
        return None

    def proof_for(self, identity: str) -> Optional[MerkleProof]:
        """Proof bundle for one identity, or None if it has no allocation."""
        entry = self.entry_for(identity)
        if entry is None:
            return None
        return MerkleProof(
            leaf=entry.leaf(),
            index=entry.index,
            siblings=entry.proof_bytes(),
            root=self.root_bytes,
        )

    def check_entry(self, entry: DistributionEntry) -> EntryCheck:
        leaf = entry.leaf()
        ok = verify_proof(leaf, entry.proof_bytes(), entry.index, self.root_bytes)
        return EntryCheck(
            identity=entry.identity,
            index=entry.index,
            amount=entry.amount,
            leaf=to_hex(leaf),
            ok=ok,
        )

    def verify_all(self) -> list[EntryCheck]:
        """Check every entry's proof against the file's root."""
        return [self.check_entry(entry) for entry in self.entries]

    @property
    def computed_total(self) -> int:
        return sum(entry.amount for entry in self.entries)
