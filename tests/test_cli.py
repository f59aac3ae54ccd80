"""Tests for the command-line interface."""

import json
import logging

import pytest
from click.testing import CliRunner
from simfind.cli.main import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("SIMFIND_MIN_WORDS", raising=False)
    yield CliRunner()
    # setup_logging binds handlers to the runner's streams
    logger = logging.getLogger("simfind")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True


@pytest.fixture
def files(tmp_path):
    file1 = tmp_path / "one.txt"
    file2 = tmp_path / "two.txt"
    file1.write_text("The quick brown fox jumps over the lazy dog.", encoding="utf-8")
    file2.write_text("Yesterday the quick brown fox slept all day.", encoding="utf-8")
    return file1, file2


class TestCompareCommand:
    """Test cases for the compare command."""

    def test_compare_json(self, runner, files, tmp_path):
        """Test comparing two files and saving a JSON report."""
        output = tmp_path / "report.json"

        result = runner.invoke(cli, ["compare", str(files[0]), str(files[1]), "-o", str(output), "-f", "json"])

        assert result.exit_code == 0, result.output
        assert "Matches found: 1" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["matches"] == [{"start1": 0, "end1": 18, "start2": 10, "end2": 28}]

    def test_compare_html(self, runner, files, tmp_path):
        """Test saving the HTML report."""
        output = tmp_path / "report.html"

        result = runner.invoke(cli, ["compare", str(files[0]), str(files[1]), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert '<mark class="match-highlight" title="Match 1">' in output.read_text(encoding="utf-8")

    def test_compare_numwords(self, runner, files, tmp_path):
        """Test that --numwords raises the minimum match length."""
        output = tmp_path / "report.json"

        result = runner.invoke(cli, ["compare", str(files[0]), str(files[1]), "-n", "5", "-o", str(output), "-f", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8"))["total_matches"] == 0
        assert "No matches found." in result.output

    def test_invalid_numwords(self, runner, files):
        """Test that a minimum below one is rejected."""
        result = runner.invoke(cli, ["compare", str(files[0]), str(files[1]), "-n", "0"])

        assert result.exit_code == 1
        assert "--numwords must be at least 1" in result.output

    def test_missing_file(self, runner, files, tmp_path):
        """Test that click rejects a missing input file."""
        result = runner.invoke(cli, ["compare", str(files[0]), str(tmp_path / "missing.txt")])

        assert result.exit_code != 0


class TestOtherCommands:
    """Test cases for quick-compare and analyze."""

    def test_quick_compare(self, runner):
        """Test comparing two strings from the command line."""
        result = runner.invoke(cli, ["quick-compare", "the quick brown fox", "a quick brown fox"])

        assert result.exit_code == 0, result.output
        assert "Matches found: 1" in result.output
        assert "Match #1" in result.output

    def test_analyze(self, runner, files):
        """Test word statistics for a file."""
        result = runner.invoke(cli, ["analyze", str(files[0]), "--preview", "2"])

        assert result.exit_code == 0, result.output
        assert "Words: 9" in result.output
        assert "[0-2] the" in result.output
        assert "[4-8] quick" in result.output

    def test_version(self, runner):
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
