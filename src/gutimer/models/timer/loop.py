"""The timing loop: ticks, keystrokes and termination in one place.

The loop waits on a single point, the event queue bounded by the next tick
deadline. Whatever is already queued is handled before a due tick, so a
pending ``EndOfInput`` always beats the tick and nothing is rendered after
termination has been observed.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable

from rich.console import Console

from gutimer.models.config_models import AppConfig, RunOptions
from gutimer.utils.exit_codes import SUCCESS
from gutimer.utils.logger import get_logger
from gutimer.utils.ui.console import get_error_console

from .display import StatusLine
from .events import EndOfInput, InputEvent, KeyEvent
from .state import SessionState, TimerMode

QUIT_KEYS = frozenset(b"qQ")
PAUSE_KEY = ord(" ")

Clock = Callable[[], int]


class Tick:
    """Marker for an expired tick deadline."""


TICK = Tick()


class TimingLoop:
    """Drives one session from start to a termination status.

    ``on_tick`` and ``on_event`` are the synchronous state transitions and
    return an exit status once the session is over, otherwise ``None``.
    ``run`` feeds them from the queue and the tick schedule.
    """

    def __init__(
        self,
        mode: TimerMode,
        target: int,
        events: asyncio.Queue[InputEvent],
        display: StatusLine | None = None,
        options: RunOptions | None = None,
        config: AppConfig | None = None,
        clock: Clock = time.monotonic_ns,
        diagnostics: Console | None = None,
    ):
        self.mode = mode
        self.target = target
        self.events = events
        self.display = display or StatusLine(mode, target)
        self.options = options or RunOptions()
        self.config = config or AppConfig()
        self.clock = clock
        self.diagnostics = diagnostics or get_error_console()
        self.session: SessionState | None = None
        self.logger = get_logger()

    @property
    def tick_interval(self) -> float:
        return self.config.tick_interval

    def begin(self) -> SessionState:
        self.session = SessionState.begin(self.mode, self.target, self.clock())
        self.logger.info("session started: mode=%s target=%dns", self.mode, self.target)
        return self.session

    def on_tick(self) -> int | None:
        session = self.session
        if session.paused:
            return None

        elapsed = session.elapsed(self.clock())
        if session.is_overrun(elapsed):
            self.display.render(session.target)
            self.display.bell()
            self.logger.info("session complete: %s reached target", self.mode)
            return SUCCESS

        self.display.render(elapsed)
        return None

    def on_event(self, event: InputEvent) -> int | None:
        if isinstance(event, EndOfInput):
            self.logger.info("input ended: %s (status %d)", event.reason, event.status)
            if self.options.verbose:
                self.diagnostics.print(f"{event.reason} (status {event.status})", markup=False)
            return event.status

        if self.options.verbose:
            self.diagnostics.print(f"read {bytes([event.byte])!r} from stdin", markup=False)
        return self.on_key(event)

    def on_key(self, event: KeyEvent) -> int | None:
        if event.byte in QUIT_KEYS:
            self.logger.info("quit requested")
            return SUCCESS

        if event.byte == PAUSE_KEY and self.session.pausable:
            now = self.clock()
            paused = self.session.toggle_pause(now)
            self.logger.info(
                "%s at %dns", "paused" if paused else "resumed", self.session.elapsed(now)
            )
        return None

    async def next_event(self, deadline: float) -> InputEvent | Tick:
        """Return the next queued event, or ``TICK`` once *deadline* passes."""
        if not self.events.empty():
            return self.events.get_nowait()

        remaining = deadline - asyncio.get_running_loop().time()
        if remaining > 0:
            try:
                async with asyncio.timeout(remaining):
                    return await self.events.get()
            except TimeoutError:
                pass
        return TICK

    async def run(self) -> int:
        """Run until a termination condition and return the exit status."""
        loop = asyncio.get_running_loop()
        self.begin()
        deadline = loop.time() + self.tick_interval
        try:
            while True:
                event = await self.next_event(deadline)
                if event is TICK:
                    now = loop.time()
                    deadline += self.tick_interval
                    if deadline <= now:
                        # Fell behind: drop the missed ticks
                        deadline = now + self.tick_interval
                    status = self.on_tick()
                else:
                    status = self.on_event(event)

                if status is not None:
                    return status
        finally:
            self.display.finish()
