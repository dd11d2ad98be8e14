"""Tests for CLI exception handling."""
from unittest.mock import patch

from click.testing import CliRunner

from longlocs.cli import main


def test_keyboard_interrupt_exits_with_130():
    """Test that KeyboardInterrupt exits with code 130 (SIGINT)."""
    runner = CliRunner()

    with runner.isolated_filesystem(), patch("longlocs.cli.run_scan") as mock_run:
        mock_run.side_effect = KeyboardInterrupt()

        result = runner.invoke(main, ["--ext", "go"])

        assert result.exit_code == 130
        assert "cancelled" in result.output.lower()


def test_generic_exception_shows_helpful_message():
    """Test that unexpected exceptions show helpful message."""
    runner = CliRunner()

    with runner.isolated_filesystem(), patch("longlocs.cli.run_scan") as mock_run:
        mock_run.side_effect = RuntimeError("Unexpected internal error")

        result = runner.invoke(main, ["--ext", "go", "--debug"])

        assert result.exit_code == 2
        assert "Unexpected internal error" in result.stderr
