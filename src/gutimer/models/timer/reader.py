"""Single-byte stdin reader feeding the timing loop."""

from __future__ import annotations

import asyncio
import os
import sys

from gutimer.models.config_models import RunOptions
from gutimer.utils.exit_codes import ERROR_INPUT, SUCCESS
from gutimer.utils.logger import get_logger

from .events import EOT, EndOfInput, InputEvent, KeyEvent


class InputReader:
    """Reads a file descriptor one byte at a time and queues events.

    Reads go straight to the descriptor with ``os.read`` from an event loop
    readiness callback, so nothing is left blocked once the session ends.
    The reader never touches session state and never writes to the
    terminal. It stops after queueing exactly one ``EndOfInput``.
    """

    def __init__(self, fd: int | None = None, options: RunOptions | None = None):
        self.fd = fd if fd is not None else sys.stdin.fileno()
        self.options = options or RunOptions()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[InputEvent] | None = None
        self._watching = False
        self.stopped = False

    def read_event(self) -> InputEvent:
        """Read one byte and turn it into an event."""
        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            return EndOfInput(ERROR_INPUT, f"error reading stdin: {e}")

        if not data:
            return EndOfInput(ERROR_INPUT, "error reading stdin: EOF")
        if self.options.verbose:
            get_logger().debug("read %r from stdin", data)
        if data[0] == EOT:
            return EndOfInput(SUCCESS, "end of transmission")
        return KeyEvent(data[0])

    def start(
        self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[InputEvent]
    ) -> None:
        """Start posting events into *queue* whenever the descriptor is readable."""
        self._loop = loop
        self._queue = queue
        try:
            loop.add_reader(self.fd, self._on_readable)
            self._watching = True
        except PermissionError:
            # epoll refuses regular files; they never block, so just keep reading
            get_logger().debug("fd %d cannot be watched, reading eagerly", self.fd)
            loop.call_soon(self._on_readable)

    def stop(self) -> None:
        """Stop reading. Safe to call more than once."""
        if self.stopped:
            return
        self.stopped = True
        if self._watching and self._loop is not None and not self._loop.is_closed():
            self._loop.remove_reader(self.fd)
        self._watching = False

    def _on_readable(self) -> None:
        if self.stopped:
            return
        event = self.read_event()
        self._queue.put_nowait(event)
        if isinstance(event, EndOfInput):
            get_logger().info(
                "input reader stopped: %s (status %d)", event.reason, event.status
            )
            self.stop()
        elif not self._watching:
            self._loop.call_soon(self._on_readable)
