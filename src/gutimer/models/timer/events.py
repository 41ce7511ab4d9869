"""Events passed from the input reader to the timing loop."""

from dataclasses import dataclass

EOT = 0x04  # Ctrl-D in cbreak mode


@dataclass(frozen=True)
class KeyEvent:
    """One byte read from the input stream."""

    byte: int


@dataclass(frozen=True)
class EndOfInput:
    """The reader stopped. ``status`` becomes the process exit code."""

    status: int
    reason: str = ""


InputEvent = KeyEvent | EndOfInput
