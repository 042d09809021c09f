"""
Distribution File Unit Tests
Tests for core/airdrop/distribution.py
"""
import json

import pytest

from core.airdrop.distribution import DistributionFile
from core.crypto.hashing import to_hex
from core.schemas.errors import DistributionFileException

from fixtures import ALICE, BOB, CAROL, make_address, make_tree


def leaves_layout(tree) -> dict:
    return {
        "root": to_hex(tree.root),
        "totalSupply": str(sum(amount for _, amount in tree.allocations)),
        "leaves": [
            {"recipient": address, "value": str(amount), "proof": tree.hex_proof(i)}
            for i, (address, amount) in enumerate(tree.allocations)
        ],
    }


def claims_layout(tree) -> dict:
    return {
        "merkleRoot": to_hex(tree.root),
        "tokenTotal": sum(amount for _, amount in tree.allocations),
        "claims": {
            address: {"index": i, "amount": amount, "proof": tree.hex_proof(i)}
            for i, (address, amount) in enumerate(tree.allocations)
        },
    }


@pytest.fixture
def five():
    return make_tree([(make_address(i), 100 * (i + 1)) for i in range(5)])


class TestLeavesLayout:

    def test_parse_and_verify(self, five):
        dist = DistributionFile.from_dict(leaves_layout(five))
        assert dist.root_bytes == five.root
        assert dist.total_supply == 1_500
        assert [e.index for e in dist.entries] == [0, 1, 2, 3, 4]
        assert all(check.ok for check in dist.verify_all())

    def test_computed_total(self, five):
        dist = DistributionFile.from_dict(leaves_layout(five))
        assert dist.computed_total == dist.total_supply

    def test_tampered_amount_fails(self, five):
        data = leaves_layout(five)
        data["leaves"][3]["value"] = "401"
        results = DistributionFile.from_dict(data).verify_all()
        assert [r.ok for r in results] == [True, True, True, False, True]

    def test_proof_for(self, five):
        dist = DistributionFile.from_dict(leaves_layout(five))
        proof = dist.proof_for(make_address(2))
        assert proof.index == 2
        assert proof.leaf == five.leaves[2]
        assert proof.verify()
        assert dist.proof_for(CAROL) is None


class TestClaimsLayout:

    def test_parse_and_verify(self):
        tree = make_tree([(ALICE, 100), (BOB, 500)])
        dist = DistributionFile.from_dict(claims_layout(tree))
        assert dist.total_supply == 600
        assert dist.entry_for(BOB).index == 1
        assert all(check.ok for check in dist.verify_all())


class TestErrors:

    def test_unknown_layout(self):
        with pytest.raises(DistributionFileException, match="Unknown"):
            DistributionFile.from_dict({"root": "0x" + "00" * 32})

    def test_missing_root(self, five):
        data = leaves_layout(five)
        del data["root"]
        with pytest.raises(DistributionFileException):
            DistributionFile.from_dict(data)

    def test_bad_address(self, five):
        data = leaves_layout(five)
        data["leaves"][0]["recipient"] = "0x1234"
        with pytest.raises(DistributionFileException, match="validation"):
            DistributionFile.from_dict(data)

    def test_bad_proof_entry(self, five):
        data = leaves_layout(five)
        data["leaves"][0]["proof"] = ["0xabc"]
        with pytest.raises(DistributionFileException):
            DistributionFile.from_dict(data)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(DistributionFileException, match="not found"):
            DistributionFile.load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(DistributionFileException, match="Invalid JSON"):
            DistributionFile.load(path)

    def test_load_roundtrip(self, tmp_path, five):
        path = tmp_path / "dist.json"
        path.write_text(json.dumps(leaves_layout(five)))
        assert len(DistributionFile.load(path).entries) == 5
