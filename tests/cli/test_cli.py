"""Unit tests for CLI commands.

Tests CLI behavior using Click's CliRunner for isolated, fast testing.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from conlog import __version__
from conlog.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestVersion:
    def test_version_flag_shows_version(self, runner: CliRunner) -> None:
        # Act
        result = runner.invoke(cli, ["--version"])

        # Assert
        assert result.exit_code == 0
        assert f"conlog {__version__}" in result.output

    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "send" in result.output


class TestSend:
    def test_sends_to_collector(self, runner: CliRunner, collector) -> None:
        # Act
        result = runner.invoke(
            cli, ["send", "-H", "127.0.0.1", "-p", str(collector.port), "--app", "cli", "hello"]
        )

        # Assert
        assert result.exit_code == 0, result.output
        assert collector.receive() == "<14>cli: APP: cli\nMSG: hello\x00"
        assert "INFO: APP: cli" in result.output
        assert "Sent info message" in result.output

    def test_severity_and_detail(self, runner: CliRunner, collector) -> None:
        result = runner.invoke(
            cli,
            [
                "send",
                "-H", "127.0.0.1",
                "-p", str(collector.port),
                "--app", "cli",
                "-s", "alert",
                "-d", "door open",
                "--quiet",
                "check",
            ],
        )

        assert result.exit_code == 0, result.output
        assert collector.receive() == "<9>cli: APP: cli\nMSG: check\nALERT: door open\x00"
        assert "APP: cli" not in result.output

    def test_writes_log_file(self, runner: CliRunner, collector) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(
                cli,
                [
                    "send",
                    "-H", "127.0.0.1",
                    "-p", str(collector.port),
                    "--app", "cli",
                    "-q",
                    "--log-file", "logs/cli.log",
                    "saved",
                ],
            )

            assert result.exit_code == 0, result.output
            with open("logs/cli.log", encoding="utf-8") as f:
                assert "MSG: saved" in f.read()

    def test_invalid_host_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["send", "-H", "999.1.1.1", "--app", "cli", "hello"])

        assert result.exit_code == 1
        assert "Invalid IPv4 address" in result.output

    def test_invalid_severity_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["send", "-H", "127.0.0.1", "--app", "cli", "-s", "debug", "hello"])

        assert result.exit_code == 2
