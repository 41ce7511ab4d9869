"""Unit tests for main.py, the CLI entry point.

The session itself is patched out; these tests cover flag validation,
duration parsing and how the session status becomes the exit code.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from gutimer import __version__
from gutimer.main import UsageError, app, resolve_mode, resolve_target
from gutimer.models.config_models import AppConfig, RunOptions
from gutimer.models.timer.keyboard import TerminalError
from gutimer.utils.duration import MINUTE, SECOND
from gutimer.utils.logger import get_logger

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _invoke(*args, status=0):
    with patch("gutimer.main.run_session", return_value=status) as mock_run:
        result = runner.invoke(app, list(args))
    return result, mock_run


# ---------------------------------------------------------------------------
# Mode and duration resolution
# ---------------------------------------------------------------------------


class TestResolveMode:
    @pytest.mark.parametrize(
        "flags, mode",
        [
            ((True, False, False), "timer"),
            ((False, True, False), "countdown"),
            ((False, False, True), "stopwatch"),
        ],
    )
    def test_single_mode(self, flags, mode):
        assert resolve_mode(*flags) == mode

    def test_no_mode(self):
        with pytest.raises(UsageError, match="No mode provided"):
            resolve_mode(False, False, False)

    def test_too_many_modes(self):
        with pytest.raises(UsageError, match="Too many modes provided"):
            resolve_mode(True, False, True)


class TestResolveTarget:
    def test_stopwatch_ignores_duration(self):
        assert resolve_target("stopwatch", None) == 0
        assert resolve_target("stopwatch", "garbage") == 0

    def test_parses_duration(self):
        assert resolve_target("countdown", "1m30s") == 90 * SECOND

    def test_missing_duration(self):
        with pytest.raises(UsageError, match="Parse error"):
            resolve_target("timer", None)

    def test_unparseable_duration(self):
        with pytest.raises(UsageError, match="Parse error"):
            resolve_target("timer", "five minutes")

    def test_negative_duration(self):
        with pytest.raises(UsageError, match="negative"):
            resolve_target("countdown", "-5s")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


class TestCli:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--stopwatch" in result.output
        assert "--countdown" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_mode_exits_two(self):
        result, mock_run = _invoke("5s")
        assert result.exit_code == 2
        assert "No mode provided" in result.output
        mock_run.assert_not_called()

    def test_too_many_modes_exits_two(self):
        result, mock_run = _invoke("-t", "-c", "5s")
        assert result.exit_code == 2
        assert "Too many modes provided" in result.output
        mock_run.assert_not_called()

    def test_parse_error_exits_two(self):
        result, mock_run = _invoke("-c", "5")
        assert result.exit_code == 2
        assert "Parse error" in result.output
        mock_run.assert_not_called()

    def test_countdown_runs_session(self):
        result, mock_run = _invoke("-c", "25m")
        assert result.exit_code == 0
        args = mock_run.call_args.args
        assert args[0] == "countdown"
        assert args[1] == 25 * MINUTE
        assert args[2] == RunOptions()
        assert isinstance(args[3], AppConfig)

    def test_stopwatch_without_duration(self):
        result, mock_run = _invoke("-s")
        assert result.exit_code == 0
        assert mock_run.call_args.args[:2] == ("stopwatch", 0)

    def test_long_flags(self):
        result, mock_run = _invoke("--timer", "--verbose", "--quiet", "2s")
        assert result.exit_code == 0
        assert mock_run.call_args.args[2] == RunOptions(verbose=True, quiet=True)

    def test_session_status_becomes_exit_code(self):
        result, _ = _invoke("-s", status=1)
        assert result.exit_code == 1

    def test_verbose_echoes_mode_and_duration(self):
        result, _ = _invoke("-v", "-t", "90s")
        assert "Mode: timer" in result.output
        assert "Duration: 1m30s" in result.output

    def test_terminal_error_exits_three(self):
        with patch(
            "gutimer.main.run_session",
            side_effect=TerminalError("Unable to set cbreak mode in terminal: not a tty"),
        ):
            result = runner.invoke(app, ["-s"])
        assert result.exit_code == 3
        assert "Unable to set cbreak mode" in result.output

    def test_config_tick_interval_is_passed_through(self, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.json").write_text('{"tick_interval_ms": 40}')
        result, mock_run = _invoke("-s")
        assert result.exit_code == 0
        assert mock_run.call_args.args[3].tick_interval_ms == 40

    def test_invalid_config_exits_two(self, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.json").write_text('{"tick_interval_ms": 0}')
        result, mock_run = _invoke("-s")
        assert result.exit_code == 2
        mock_run.assert_not_called()


    def test_log_level_comes_from_config(self):
        _invoke("-s")
        assert get_logger().level == logging.INFO

    def test_verbose_logs_at_debug(self):
        _invoke("-v", "-s")
        assert get_logger().level == logging.DEBUG
