"""
CLI Unit Tests
Tests for merkleforge_cli (main, commands, config).
"""
import json

import pytest

from merkleforge.crypto.hashing import keccak256, sha256, to_hex
from merkleforge.merkle import build_merkle_root, combine, hash_texts
from merkleforge.schemas.errors import ErrorCodes
from merkleforge_cli.config import CLIConfig, load_config
from merkleforge_cli.main import (
    EXIT_INVALID_INPUT,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    main,
)


pytestmark = [pytest.mark.cli]


def run_json(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, json.loads(out)


class TestGenerateCommand:
    """Tests for `merkleforge generate`."""

    def test_generate_json(self, isolated_cli_env, capsys):
        """Generated tree summary has the requested shape."""
        code, data = run_json(capsys, ["generate", "5", "--algorithm", "sha256", "--json"])

        assert code == EXIT_SUCCESS
        assert data["success"] is True
        assert data["algorithm"] == "sha256"
        assert data["leaf_count"] == 5
        assert len(data["leaves"]) == 5
        assert data["tree_height"] == 4
        assert data["root"].startswith("0x")
        assert len(data["root"]) == 66
        assert "levels" not in data

    def test_generate_defaults_from_config(self, isolated_cli_env, capsys):
        """Count and algorithm fall back to configuration defaults."""
        code, data = run_json(capsys, ["generate", "--json"])

        assert code == EXIT_SUCCESS
        assert data["leaf_count"] == CLIConfig().leaf_count
        assert data["algorithm"] == CLIConfig().algorithm

    def test_generate_levels(self, isolated_cli_env, capsys):
        """--levels includes every level, ending with the root."""
        code, data = run_json(capsys, ["generate", "3", "-a", "keccak256", "--levels", "--json"])

        assert code == EXIT_SUCCESS
        assert [len(level) for level in data["levels"]] == [3, 2, 1]
        assert data["levels"][0] == data["leaves"]
        assert data["levels"][-1] == [data["root"]]

    def test_generate_with_trace(self, isolated_cli_env, capsys):
        """--trace does not change the JSON result."""
        code, data = run_json(capsys, ["generate", "4", "-a", "sha256", "--trace", "--json"])

        assert code == EXIT_SUCCESS
        assert data["leaf_count"] == 4

    def test_generate_zero_leaves(self, isolated_cli_env, capsys):
        """Zero leaves is invalid input."""
        code, data = run_json(capsys, ["generate", "0", "--json"])

        assert code == EXIT_INVALID_INPUT
        assert data["success"] is False
        assert data["error"]["code"] == ErrorCodes.INVALID_INPUT

    def test_generate_bad_algorithm(self, isolated_cli_env, capsys):
        """Unsupported algorithm is reported with its error code."""
        code, data = run_json(capsys, ["generate", "3", "--algorithm", "md5", "--json"])

        assert code == EXIT_INVALID_INPUT
        assert data["error"]["code"] == ErrorCodes.UNSUPPORTED_ALGORITHM

    def test_generate_human_output(self, isolated_cli_env, capsys):
        """Human output lists the root."""
        code = main(["generate", "2", "--algorithm", "sha256"])
        out = capsys.readouterr().out

        assert code == EXIT_SUCCESS
        assert "algorithm: sha256" in out
        assert "tree_height: 2" in out
        assert "merkle_root: 0x" in out


class TestHashCommand:
    """Tests for `merkleforge hash`."""

    def test_hash_json(self, isolated_cli_env, capsys):
        """hash prints the 0x digest of the UTF-8 text."""
        code, data = run_json(capsys, ["hash", "tx1", "--algorithm", "sha256", "--json"])

        assert code == EXIT_SUCCESS
        assert data["hash"] == to_hex(sha256(b"tx1"))
        assert data["algorithm"] == "sha256"

    def test_hash_human(self, isolated_cli_env, capsys):
        """Human output shows the hash."""
        code = main(["hash", "", "--algorithm", "keccak256"])
        out = capsys.readouterr().out

        assert code == EXIT_SUCCESS
        assert f"hash: {to_hex(keccak256(b''))}" in out

    def test_hash_bad_algorithm(self, isolated_cli_env, capsys):
        """Unsupported algorithm exits with invalid input."""
        code, data = run_json(capsys, ["hash", "tx1", "--algorithm", "sha512", "--json"])

        assert code == EXIT_INVALID_INPUT
        assert data["error"]["code"] == ErrorCodes.UNSUPPORTED_ALGORITHM


class TestRootCommand:
    """Tests for `merkleforge root`."""

    def test_root_from_texts(self, isolated_cli_env, capsys):
        """--text leaves reproduce the library root."""
        texts = ["tx1", "tx2", "tx3", "tx4"]
        argv = ["root", "--algorithm", "keccak256", "--json"]
        for text in texts:
            argv += ["--text", text]

        code, data = run_json(capsys, argv)

        expected = build_merkle_root(hash_texts(texts, "keccak256"))
        assert code == EXIT_SUCCESS
        assert data["root"] == to_hex(expected)

    def test_root_from_hex(self, isolated_cli_env, capsys):
        """Hex leaves with an explicit algorithm."""
        a = sha256(b"a")
        b = sha256(b"b")

        code, data = run_json(capsys, ["root", to_hex(a), to_hex(b), "-a", "sha256", "--json"])

        assert code == EXIT_SUCCESS
        assert data["root"] == to_hex(combine(a, b, "sha256"))

    def test_root_hex_requires_algorithm(self, isolated_cli_env, capsys):
        """Hex leaves without --algorithm are rejected, not defaulted."""
        code, data = run_json(capsys, ["root", to_hex(sha256(b"a")), "--json"])

        assert code == EXIT_INVALID_INPUT
        assert data["error"]["code"] == ErrorCodes.INVALID_INPUT
        assert data["error"]["details"]["field_path"] == "algorithm"

    def test_root_empty(self, isolated_cli_env, capsys):
        """No leaves at all is empty input."""
        code, data = run_json(capsys, ["root", "-a", "sha256", "--json"])

        assert code == EXIT_INVALID_INPUT
        assert data["error"]["code"] == ErrorCodes.EMPTY_INPUT

    def test_root_mixed_inputs(self, isolated_cli_env, capsys):
        """Hex leaves and --text cannot be mixed."""
        code, data = run_json(
            capsys,
            ["root", to_hex(sha256(b"a")), "--text", "tx1", "-a", "sha256", "--json"],
        )

        assert code == EXIT_INVALID_INPUT
        assert data["error"]["code"] == ErrorCodes.INVALID_INPUT

    def test_root_malformed_hex(self, isolated_cli_env, capsys):
        """Malformed hex leaves are invalid input."""
        code, data = run_json(capsys, ["root", "0x1234", "-a", "sha256", "--json"])

        assert code == EXIT_INVALID_INPUT
        assert data["error"]["details"]["field_path"] == "hashes[0]"


class TestConfigCommand:
    """Tests for `merkleforge config` and configuration loading."""

    def test_config_init_then_exists(self, isolated_cli_env, capsys):
        """--init writes a template once."""
        assert main(["config", "--init"]) == EXIT_SUCCESS
        assert (isolated_cli_env / "merkleforge.json").exists()

        assert main(["config", "--init"]) == EXIT_RUNTIME_ERROR

    def test_config_show(self, isolated_cli_env, capsys):
        """--show prints the merged configuration."""
        code, data = run_json(capsys, ["config", "--show"])

        assert code == EXIT_SUCCESS
        assert data["algorithm"] == "keccak256"

    def test_config_file_used(self, isolated_cli_env, capsys):
        """Values from an explicit config file apply."""
        path = isolated_cli_env / "custom.json"
        path.write_text(json.dumps({"algorithm": "sha256", "leaf_count": 3}))

        code, data = run_json(capsys, ["--config", str(path), "generate", "--json"])

        assert code == EXIT_SUCCESS
        assert data["algorithm"] == "sha256"
        assert data["leaf_count"] == 3

    def test_missing_config_file(self, isolated_cli_env, capsys):
        """An explicit missing config file is a runtime error."""
        assert main(["--config", str(isolated_cli_env / "nope.json"), "generate"]) == EXIT_RUNTIME_ERROR

    def test_env_overrides_file(self, isolated_cli_env, monkeypatch):
        """Environment variables take precedence over the file."""
        (isolated_cli_env / "merkleforge.json").write_text(json.dumps({"algorithm": "sha256"}))
        monkeypatch.setenv("MERKLEFORGE_ALGORITHM", "keccak256")
        monkeypatch.setenv("MERKLEFORGE_TRACE", "yes")
        monkeypatch.setenv("MERKLEFORGE_OUTPUT_FORMAT", "json")

        config = load_config()

        assert config.algorithm == "keccak256"
        assert config.trace is True
        assert config.default_output_format == "json"

    def test_output_format_from_env(self, isolated_cli_env, monkeypatch, capsys):
        """MERKLEFORGE_OUTPUT_FORMAT=json switches output without --json."""
        monkeypatch.setenv("MERKLEFORGE_OUTPUT_FORMAT", "json")

        code, data = run_json(capsys, ["hash", "tx1", "-a", "sha256"])

        assert code == EXIT_SUCCESS
        assert data["hash"] == to_hex(sha256(b"tx1"))

    def test_no_command(self, isolated_cli_env, capsys):
        """No subcommand prints help and fails."""
        assert main([]) == EXIT_RUNTIME_ERROR
