"""
Tests for CLI Commands
======================
Tests for the stateengines CLI interface in stateengines/cli.py.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from stateengines import __version__
from stateengines.cli import main

ROOT = Path(__file__).resolve().parents[1]


def run_cli(*args):
    return subprocess.run(
        [sys.executable, "-m", "stateengines", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=60,
    )


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        result = run_cli("--version")
        assert result.returncode == 0
        assert __version__ in result.stdout

    def test_help_flag(self):
        result = run_cli("--help")
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "transitions" in result.stdout.lower()

    def test_generate_help(self):
        result = run_cli("generate", "--help")
        assert result.returncode == 0
        assert "--count" in result.stdout
        assert "--lookback" in result.stdout

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIGenerate:
    """Tests for the generate command."""

    def test_generate_json(self, capsys):
        code = main(["generate", "-n", "5", "--corpus", "angels", "--seed", "1", "--json"])
        assert code == 0
        names = json.loads(capsys.readouterr().out)
        assert isinstance(names, list)
        assert len(names) <= 5

    def test_generate_is_seeded(self, capsys):
        args = ["generate", "-n", "4", "--corpus", "celestial", "--seed", "8", "--json"]
        main(args)
        first = json.loads(capsys.readouterr().out)
        main(args)
        second = json.loads(capsys.readouterr().out)
        assert first == second

    def test_generate_from_file(self, tmp_path, capsys):
        corpus = tmp_path / "names.txt"
        corpus.write_text("abc\nabd\n", encoding="utf-8")
        code = main([
            "generate", "-n", "2", "--file", str(corpus), "--include-training",
            "--min-length", "1", "--json", "--seed", "2",
        ])
        assert code == 0
        assert sorted(json.loads(capsys.readouterr().out)) == ["abc", "abd"]

    def test_generate_table(self):
        result = run_cli("generate", "-n", "3", "--lookback", "1", "--seed", "4")
        assert result.returncode == 0
        assert "Generated" in result.stdout

    def test_quiet_suppresses_table(self):
        result = run_cli("--quiet", "generate", "-n", "3", "--seed", "4")
        assert result.returncode == 0
        assert result.stdout.strip() == ""

    def test_unknown_corpus(self):
        result = run_cli("generate", "--corpus", "nope")
        assert result.returncode == 1
        assert "Unknown corpus" in result.stderr

    def test_invalid_length(self):
        result = run_cli("generate", "--length", "0")
        assert result.returncode == 1
        assert "length" in result.stderr

    def test_missing_file(self, tmp_path):
        result = run_cli("generate", "--file", str(tmp_path / "missing.txt"))
        assert result.returncode == 1
        assert "not found" in result.stderr

    def test_alias(self):
        result = run_cli("g", "-n", "1", "--seed", "3", "--json")
        assert result.returncode == 0


class TestCLITransitions:
    """Tests for the transitions command."""

    def test_start_transitions(self, capsys):
        code = main(["transitions", "--corpus", "angels", "--json"])
        assert code == 0
        table = json.loads(capsys.readouterr().out)
        assert table["G"]["count"] == 3  # Gabriel, Gadreel, Gagiel
        assert sum(row["probability"] for row in table.values()) == pytest.approx(1.0)

    def test_state_transitions(self, tmp_path, capsys):
        corpus = tmp_path / "names.txt"
        corpus.write_text("ab\nab\nac\n", encoding="utf-8")
        main(["transitions", "a", "--file", str(corpus), "--json"])
        table = json.loads(capsys.readouterr().out)
        assert table == {
            "b": {"count": 2, "probability": pytest.approx(2 / 3)},
            "c": {"count": 1, "probability": pytest.approx(1 / 3)},
        }

    def test_end_label(self):
        result = run_cli("transitions", "l", "--corpus", "angels")
        assert result.returncode == 0
        assert "<end>" in result.stdout

    def test_unknown_state(self):
        result = run_cli("transitions", "qqq", "--corpus", "angels")
        assert result.returncode == 1
        assert "Unknown state" in result.stderr


class TestCLICorpora:
    """Tests for the corpora command."""

    def test_lists_corpora(self):
        result = run_cli("corpora")
        assert result.returncode == 0
        assert "angels" in result.stdout
