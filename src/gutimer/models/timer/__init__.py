"""Interactive timing core: stopwatch, timer and countdown."""

from .display import StatusLine, format_clock
from .events import EndOfInput, KeyEvent
from .keyboard import CbreakTerminal, TerminalError
from .loop import TimingLoop
from .reader import InputReader
from .runner import run_session
from .state import TIMER_MODES, SessionState, TimerMode

__all__ = [
    "CbreakTerminal",
    "EndOfInput",
    "InputReader",
    "KeyEvent",
    "SessionState",
    "StatusLine",
    "TIMER_MODES",
    "TerminalError",
    "TimerMode",
    "TimingLoop",
    "format_clock",
    "run_session",
]
