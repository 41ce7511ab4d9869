"""Main entry point for gutimer."""

import typer

from gutimer import __version__
from gutimer.commands.decorators import AppError, command_wrapper
from gutimer.models.config_models import RunOptions
from gutimer.models.timer import TIMER_MODES, TimerMode, run_session
from gutimer.services.config_service import get_config_service
from gutimer.utils.duration import DurationError, format_duration_string, parse_duration
from gutimer.utils.exit_codes import ERROR_INVALID_ARGS
from gutimer.utils.logger import set_log_level
from gutimer.utils.ui.console import get_console
from gutimer.utils.ui.formatters import format_info

app = typer.Typer(
    name="gutimer",
    help="Terminal stopwatch, timer and countdown.",
    add_completion=False,
)


class UsageError(AppError):
    """Bad flag combination or duration."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_INVALID_ARGS)


def resolve_mode(timer: bool, countdown: bool, stopwatch: bool) -> TimerMode:
    """Pick the single selected mode."""
    flags = (timer, countdown, stopwatch)
    selected: list[TimerMode] = [mode for mode, flag in zip(TIMER_MODES, flags) if flag]
    if not selected:
        raise UsageError("No mode provided")
    if len(selected) > 1:
        raise UsageError("Too many modes provided")
    return selected[0]


def resolve_target(mode: TimerMode, duration: str | None) -> int:
    """Parse the target duration. Stopwatch runs do not need one."""
    if mode == "stopwatch":
        return 0
    if duration is None:
        raise UsageError(f"Parse error: a duration is required in {mode} mode")
    try:
        target = parse_duration(duration)
    except DurationError as e:
        raise UsageError(f"Parse error: {e}") from e
    if target < 0:
        raise UsageError(f'Parse error: negative duration "{duration}"')
    return target


def version_callback(value: bool) -> None:
    if value:
        get_console().print(f"gutimer {__version__}")
        raise typer.Exit()


@app.command()
@command_wrapper
def run(
    duration: str | None = typer.Argument(
        None, help="Target duration such as 90s, 1h30m or 2.5m"
    ),
    timer: bool = typer.Option(False, "-t", "--timer", help="Start timer"),
    countdown: bool = typer.Option(False, "-c", "--countdown", help="Start countdown"),
    stopwatch: bool = typer.Option(False, "-s", "--stopwatch", help="Start stopwatch"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Quiet"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Count up, count up to a target, or count down.

    Press q to quit, space to pause a stopwatch, Ctrl-D to end input.
    """
    mode = resolve_mode(timer, countdown, stopwatch)
    target = resolve_target(mode, duration)
    options = RunOptions(verbose=verbose, quiet=quiet)
    config = get_config_service().load_config()
    set_log_level("DEBUG" if options.verbose else config.log_level)

    if options.verbose:
        format_info(f"Flags: {options.model_dump()}")
        format_info(f"Mode: {mode}")
        format_info(f"Duration: {format_duration_string(target)}")

    status = run_session(mode, target, options, config)
    raise typer.Exit(code=status)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
