"""Terminal mode handling for keystroke-at-a-time input."""

from __future__ import annotations

import os
import termios
import tty

from gutimer.commands.decorators import AppError
from gutimer.utils.exit_codes import ERROR_TERMINAL
from gutimer.utils.logger import get_logger

DEFAULT_TTY = "/dev/tty"


class TerminalError(AppError):
    """The terminal could not be put into cbreak mode."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_TERMINAL)


class CbreakTerminal:
    """Puts the controlling terminal into cbreak mode for a ``with`` block.

    The saved attributes are restored on every way out of the block,
    including exceptions and KeyboardInterrupt.
    """

    def __init__(self, path: str = DEFAULT_TTY):
        self.path = path
        self.fd: int | None = None
        self.old_settings = None

    def __enter__(self) -> "CbreakTerminal":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    def acquire(self) -> None:
        try:
            self.fd = os.open(self.path, os.O_RDWR | os.O_NOCTTY)
        except OSError as e:
            raise TerminalError(f"Unable to open terminal: {e}") from e

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError) as e:
            self._close()
            raise TerminalError(f"Unable to set cbreak mode in terminal: {e}") from e
        get_logger().debug("terminal %s switched to cbreak mode", self.path)

    def restore(self) -> None:
        """Restore the saved terminal settings. Safe to call more than once."""
        if self.fd is None:
            return
        try:
            if self.old_settings is not None:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
                get_logger().debug("terminal %s restored", self.path)
        except (termios.error, OSError) as e:
            # the session status stands; a failed restore is only logged
            get_logger().warning("failed to restore terminal %s: %s", self.path, e)
        finally:
            self._close()

    def _close(self) -> None:
        if self.fd is not None:
            os.close(self.fd)
        self.fd = None
        self.old_settings = None
