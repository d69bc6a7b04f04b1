"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They drive the interactive loop with scripted stdin against the built-in
offline exercises; nothing here calls Gemini.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import pytest
from typer.testing import CliRunner

from src.cli.locator_cli import __version__, app

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

runner = CliRunner()


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        """Main help should display without errors."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0, result.output
        assert "play" in result.output
        assert "sample" in result.output

    def test_play_help(self):
        result = runner.invoke(app, ["play", "--help"])

        assert result.exit_code == 0
        assert "--type" in result.output


class TestInfoCommands:
    """Test non-interactive commands."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_types(self):
        result = runner.invoke(app, ["types"])

        assert result.exit_code == 0
        assert "Matching Information" in result.output


class TestSampleSession:
    """Play the offline exercises with scripted input."""

    def test_correct_answer(self):
        # Built-in Gap Filling exercise: evidence is paragraph B
        result = runner.invoke(app, ["sample", "--type", "Gap Filling"], input="b\ns\nq\n")

        assert result.exit_code == 0, result.output
        assert "Bilingualism and the Ageing Brain" in result.output
        assert "◉ CORRECT" in result.output
        assert "four years" in result.output

    def test_wrong_answer_reveals_evidence(self):
        result = runner.invoke(app, ["sample", "--type", "Gap Filling"], input="a\ns\nq\n")

        assert result.exit_code == 0, result.output
        assert "INCORRECT" in result.output
        assert "paragraph(s): B" in result.output

    def test_empty_submit_is_refused(self):
        result = runner.invoke(app, ["sample", "--type", "Gap Filling"], input="s\nq\n")

        assert result.exit_code == 0, result.output
        assert "Select at least one paragraph first" in result.output
        assert "CORRECT" not in result.output

    def test_invalid_paragraph(self):
        result = runner.invoke(app, ["sample", "--type", "Gap Filling"], input="z\nq\n")

        assert result.exit_code == 0, result.output
        assert "Not a paragraph" in result.output

    def test_end_of_input_exits_cleanly(self):
        result = runner.invoke(app, ["sample"], input="")

        assert result.exit_code == 0, result.output

    def test_unknown_question_type(self):
        result = runner.invoke(app, ["sample", "--type", "Essay"])

        assert result.exit_code == 1
        assert "Unknown question type" in result.output
