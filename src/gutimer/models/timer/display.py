"""In-place status line rendering.

The status line is a raw terminal protocol (carriage return to redraw,
BEL to alert) and is written straight to a text stream rather than through
rich, which strips those control characters.
"""

import sys
from typing import TextIO

from gutimer.utils.duration import HOUR, MILLISECOND, MINUTE, SECOND

from .state import TimerMode

BELL = "\a"


def format_clock(duration: int) -> str:
    """Format nanoseconds as ``[HH:MM:SS.CC]``.

    Hours are at least two digits and grow as needed. Centiseconds are
    truncated, never rounded.
    """
    hours, rest = divmod(duration, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    seconds, rest = divmod(rest, SECOND)
    centis = rest // MILLISECOND // 10
    return f"[{hours:02d}:{minutes:02d}:{seconds:02d}.{centis:02d}]"


def status_text(mode: TimerMode, target: int, duration: int) -> str:
    """Label and clock for *duration* elapsed in the given mode."""
    if mode == "countdown":
        return f"Time Remaining: {format_clock(target - duration)}"
    return f"Elapsed time: {format_clock(duration)}"


class StatusLine:
    """Writes the status line for one session."""

    def __init__(self, mode: TimerMode, target: int, stream: TextIO | None = None):
        self.mode = mode
        self.target = target
        self.stream = stream or sys.stdout

    def render(self, duration: int) -> None:
        """Redraw the current line in place."""
        self._write("\r" + status_text(self.mode, self.target, duration))

    def bell(self) -> None:
        self._write(BELL)

    def finish(self) -> None:
        """Leave the last frame on screen and move to a fresh line."""
        self._write("\n")

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
