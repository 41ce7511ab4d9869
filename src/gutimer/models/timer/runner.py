"""Wires the terminal, the input reader and the timing loop together."""

from __future__ import annotations

import asyncio
from typing import TextIO

from gutimer.models.config_models import AppConfig, RunOptions
from gutimer.utils.exit_codes import INTERRUPTED
from gutimer.utils.logger import get_logger

from .display import StatusLine
from .events import InputEvent
from .keyboard import CbreakTerminal
from .loop import TimingLoop
from .reader import InputReader
from .state import TimerMode


async def run_session_async(
    mode: TimerMode,
    target: int,
    options: RunOptions,
    config: AppConfig,
    stdin_fd: int | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Start the reader and run the timing loop to completion."""
    events: asyncio.Queue[InputEvent] = asyncio.Queue()
    reader = InputReader(stdin_fd, options)
    reader.start(asyncio.get_running_loop(), events)

    timing = TimingLoop(
        mode,
        target,
        events,
        display=StatusLine(mode, target, stdout),
        options=options,
        config=config,
    )
    try:
        return await timing.run()
    finally:
        reader.stop()


def run_session(
    mode: TimerMode,
    target: int,
    options: RunOptions,
    config: AppConfig,
    terminal: CbreakTerminal | None = None,
    stdin_fd: int | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one session in cbreak mode and return its exit status.

    The terminal is restored before this returns, whatever ended the session.
    """
    logger = get_logger()
    with terminal or CbreakTerminal():
        try:
            status = asyncio.run(
                run_session_async(mode, target, options, config, stdin_fd, stdout)
            )
        except KeyboardInterrupt:
            logger.info("session interrupted")
            status = INTERRUPTED
    logger.info("session finished with status %d", status)
    return status
