"""Session state for a single timing run."""

from dataclasses import dataclass
from typing import Literal

from gutimer.utils.duration import MAX_DURATION

TimerMode = Literal["timer", "countdown", "stopwatch"]
TIMER_MODES: tuple[TimerMode, ...] = ("timer", "countdown", "stopwatch")


@dataclass
class SessionState:
    """Elapsed-time bookkeeping for one run.

    All values are nanoseconds on the monotonic clock. While running,
    ``elapsed = now - start``. Pausing freezes elapsed; resuming shifts
    ``start`` forward by the paused gap so elapsed continues without drift.
    """

    mode: TimerMode
    target: int
    start: int
    paused: bool = False
    elapsed_at_pause: int = 0

    @classmethod
    def begin(cls, mode: TimerMode, target: int, now: int) -> "SessionState":
        """Create a running session starting at *now*.

        Stopwatch runs have no target, so the overrun check can never fire.
        """
        if mode == "stopwatch":
            target = MAX_DURATION
        return cls(mode=mode, target=target, start=now)

    @property
    def pausable(self) -> bool:
        return self.mode == "stopwatch"

    def elapsed(self, now: int) -> int:
        """Elapsed time at *now*, frozen while paused."""
        if self.paused:
            return self.elapsed_at_pause
        return now - self.start

    def is_overrun(self, elapsed: int) -> bool:
        # Strictly greater: the final frame then shows exactly the target
        return elapsed > self.target

    def pause(self, now: int) -> None:
        self.elapsed_at_pause = now - self.start
        self.paused = True

    def resume(self, now: int) -> None:
        self.start = now - self.elapsed_at_pause
        self.paused = False

    def toggle_pause(self, now: int) -> bool:
        """Flip between paused and running. Returns the new paused flag."""
        if self.paused:
            self.resume(now)
        else:
            self.pause(now)
        return self.paused
