"""Tests for the traversal CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphwalk.cli import cli

CAT_CYCLE = ["-e", "A:B", "-e", "B:C", "-e", "C:A", "-l", "A=cat", "-l", "B=elephant", "-l", "C=cat"]


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every command away from any graphwalk.toml on the real filesystem."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRAPHWALK_CONFIG", raising=False)


class TestShortWords:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["short-words", "A", "4", *CAT_CYCLE])
        assert result.exit_code == 0, result.output
        assert "OK  short_words" in result.output
        assert result.output.count("- cat") == 2

    def test_quiet_prints_one_label_per_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "short-words", "A", "4", *CAT_CYCLE])
        assert result.exit_code == 0
        assert result.output == "cat\ncat\n"

    def test_value_mode(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "short-words", "A", "4", "--mode", "value", *CAT_CYCLE]
        )
        assert result.output == "cat\n"

    def test_invalid_mode_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["short-words", "A", "4", "--mode", "fuzzy"])
        assert result.exit_code == 2

    def test_negative_k(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "short-words", "A", "-1", *CAT_CYCLE])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_ARGUMENT"

    def test_unknown_option_still_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["short-words", "A", "4", "--colour", *CAT_CYCLE])
        assert result.exit_code == 2

    def test_mode_from_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "graphwalk.toml").write_text('[traversal]\nvisit_mode = "value"\n')
        result = cli_runner.invoke(cli, ["-q", "short-words", "A", "4", *CAT_CYCLE])
        assert result.output == "cat\n"


class TestLongestWord:
    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "longest-word", "A", *CAT_CYCLE])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "longest_word"
        assert data["data"]["word"] == "elephant"

    def test_unknown_start(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["longest-word", "Z", *CAT_CYCLE])
        assert result.exit_code == 1
        assert "not found" in result.stderr

    def test_bad_edge_spec(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "longest-word", "A", "-e", "A-B"])
        assert result.exit_code == 1
        assert '"INVALID_EDGE"' in result.stderr

    def test_bad_label_spec(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "longest-word", "A", "-e", "A:B", "-l", "A"])
        assert result.exit_code == 1
        assert '"INVALID_LABEL"' in result.stderr

    def test_verbose_includes_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "longest-word", "A", *CAT_CYCLE])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["meta"]["telemetry"]["children"][0]["annotations"]["visited"] == 3


class TestSelfLoopers:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "self-loopers", "A", "-e", "A:A", "-e", "A:B", "-e", "B:C", "-e", "C:C"]
        )
        assert result.exit_code == 0
        assert result.output == "A\nC\n"

    def test_isolated_start(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "self-loopers", "X", "-n", "X"])
        assert json.loads(result.stdout)["data"]["items"] == []


class TestCanReach:
    def test_reachable(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["can-reach", "JFK", "LAX", "-e", "JFK:ORD", "-e", "ORD:LAX"])
        assert result.exit_code == 0
        assert "JFK -> LAX: reachable" in result.output

    def test_no_path(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "can-reach", "JFK", "LAX", "-e", "JFK:ORD", "-e", "ORD:JFK", "-n", "LAX"]
        )
        assert result.exit_code == 0
        assert result.output == "false\n"

    def test_self(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "can-reach", "SFO", "SFO", "-n", "SFO"])
        assert result.output == "true\n"

    def test_unknown_airport(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "can-reach", "JFK", "LAX", "-e", "JFK:ORD"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NOT_FOUND"


class TestUnreachable:
    def test_scenario(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "unreachable", "A", "-e", "A:B", "-e", "C:A", "-n", "B"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["items"] == ["C"]

    def test_unknown_start_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "unreachable", "Z", "-e", "A:B"])
        assert result.exit_code == 0
        assert result.stdout == "A\n"
        assert "WARNING" in result.stderr


class TestExamples:
    @pytest.mark.parametrize(
        "command", ["short-words", "longest-word", "self-loopers", "can-reach", "unreachable"]
    )
    def test_examples_flag(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--examples"])
        assert result.exit_code == 0
        assert f"graphwalk {command}" in result.output
