"""
Module 09C - CLI Tests

Drives airdrop_cli.main.main() in-process and checks output and exit codes:
0 success, 1 runtime error, 2 verification failed.
"""
import json

import pytest

from airdrop_cli.main import main, EXIT_SUCCESS, EXIT_RUNTIME_ERROR, EXIT_VERIFICATION_FAILED
from core.crypto.hashing import to_hex

from fixtures import ALICE, BOB, CAROL, make_address, make_tree


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command from an empty directory so no airdrop.json is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AIRDROP_LOG_LEVEL", raising=False)
    return tmp_path


def write_distribution(path, tree, total=None):
    data = {
        "root": to_hex(tree.root),
        "totalSupply": str(total if total is not None else sum(a for _, a in tree.allocations)),
        "leaves": [
            {"recipient": address, "value": str(amount), "proof": tree.hex_proof(i)}
            for i, (address, amount) in enumerate(tree.allocations)
        ],
    }
    path.write_text(json.dumps(data))
    return path


class TestLeaf:

    def test_prints_leaf(self, capsys, tree):
        assert main(["leaf", "--address", ALICE, "--amount", "100"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == to_hex(tree.leaves[0])

    def test_json(self, capsys, tree):
        assert main(["leaf", "-a", BOB, "-n", "500", "--json"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["leaf"] == to_hex(tree.leaves[1])
        assert data["amount"] == "500"
        assert len(bytes.fromhex(data["preimage"][2:])) == 52

    def test_invalid_address(self, capsys):
        assert main(["leaf", "--address", "0x12", "--amount", "1"]) == EXIT_RUNTIME_ERROR
        assert "Error" in capsys.readouterr().err

    def test_negative_amount(self):
        assert main(["leaf", "--address", ALICE, "--amount=-1"]) == EXIT_RUNTIME_ERROR


class TestVerify:

    def test_valid_proof(self, capsys, tree):
        code = main([
            "verify", "--root", to_hex(tree.root),
            "--address", BOB, "--amount", "500",
            "--index", "1", "--proof", *tree.hex_proof(1),
        ])
        assert code == EXIT_SUCCESS
        assert "VALID" in capsys.readouterr().out

    def test_invalid_proof(self, capsys, tree):
        code = main([
            "verify", "--root", to_hex(tree.root),
            "--address", BOB, "--amount", "501",
            "--index", "1", "--proof", *tree.hex_proof(1),
            "--json",
        ])
        assert code == EXIT_VERIFICATION_FAILED
        assert json.loads(capsys.readouterr().out)["valid"] is False

    def test_precomputed_leaf(self, tree):
        code = main([
            "verify", "--root", to_hex(tree.root),
            "--leaf", to_hex(tree.leaves[0]),
            "--index", "0", "--proof", *tree.hex_proof(0),
        ])
        assert code == EXIT_SUCCESS

    def test_missing_leaf_inputs(self, tree):
        code = main(["verify", "--root", to_hex(tree.root), "--index", "0"])
        assert code == EXIT_RUNTIME_ERROR

    def test_malformed_root(self):
        code = main(["verify", "--root", "0x1234", "--address", ALICE, "--amount", "1", "--index", "0"])
        assert code == EXIT_RUNTIME_ERROR


class TestCheck:

    @pytest.fixture
    def tree7(self):
        return make_tree([(make_address(i), 10 * (i + 1)) for i in range(7)])

    def test_all_entries_ok(self, capsys, isolated_cwd, tree7):
        path = write_distribution(isolated_cwd / "dist.json", tree7)
        assert main(["check", str(path)]) == EXIT_SUCCESS
        assert "7 checked, 0 failed" in capsys.readouterr().out

    def test_json_summary(self, capsys, isolated_cwd, tree7):
        path = write_distribution(isolated_cwd / "dist.json", tree7)
        assert main(["check", str(path), "--json", "--debug"]) == EXIT_SUCCESS
        summary = json.loads(capsys.readouterr().out)
        assert summary["entries_checked"] == 7
        assert summary["computed_total"] == "280"
        assert len(summary["checks"]) == 7

    def test_tampered_entry(self, capsys, isolated_cwd, tree7):
        path = write_distribution(isolated_cwd / "dist.json", tree7)
        data = json.loads(path.read_text())
        data["leaves"][4]["proof"] = data["leaves"][3]["proof"]
        path.write_text(json.dumps(data))
        assert main(["check", str(path)]) == EXIT_VERIFICATION_FAILED

    def test_total_mismatch(self, isolated_cwd, tree7):
        path = write_distribution(isolated_cwd / "dist.json", tree7, total=1)
        assert main(["check", str(path)]) == EXIT_VERIFICATION_FAILED

    def test_single_address(self, capsys, isolated_cwd):
        tree = make_tree([(ALICE, 100), (BOB, 500)])
        path = write_distribution(isolated_cwd / "dist.json", tree)
        assert main(["check", str(path), "--address", BOB]) == EXIT_SUCCESS
        assert main(["check", str(path), "--address", CAROL]) == EXIT_VERIFICATION_FAILED

    def test_missing_file(self, isolated_cwd):
        assert main(["check", str(isolated_cwd / "nope.json")]) == EXIT_RUNTIME_ERROR


class TestConfigCommand:

    def test_init_then_refuse_overwrite(self, isolated_cwd):
        assert main(["config", "--init"]) == EXIT_SUCCESS
        written = json.loads((isolated_cwd / "airdrop.json").read_text())
        assert written["campaign"]["rollback_failed_payout"] is True
        assert main(["config", "--init"]) == EXIT_RUNTIME_ERROR

    def test_show_reflects_file(self, capsys, isolated_cwd):
        (isolated_cwd / "airdrop.json").write_text(json.dumps({"ledger": {"asset_id": "DOT"}}))
        assert main(["config", "--show"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)["ledger"]["asset_id"] == "DOT"

    def test_explicit_missing_config(self, isolated_cwd):
        assert main(["--config", str(isolated_cwd / "x.json"), "config", "--show"]) == EXIT_RUNTIME_ERROR


class TestServeAndDispatch:

    def test_serve_passes_bind_address(self, monkeypatch):
        calls = {}

        def fake_run(app, **kwargs):
            calls["app"] = app
            calls.update(kwargs)

        monkeypatch.setattr("airdrop_cli.commands.serve.uvicorn.run", fake_run)
        assert main(["serve", "--port", "9123"]) == EXIT_SUCCESS
        assert calls["app"] == "api.app:app"
        assert calls["port"] == 9123
        assert calls["host"] == "127.0.0.1"

    def test_no_command(self):
        assert main([]) == EXIT_RUNTIME_ERROR
