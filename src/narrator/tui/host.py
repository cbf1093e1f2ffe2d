"""
Terminal Host.

Provides the surface the views run against: live terminal size, render
requests, and cancelable repeating timers. RichTerminalHost drives a
single-threaded cooperative loop. One key press or one timer tick is
processed to completion before the next frame is drawn.

Key Components:
- Interval: handle for a repeating callback (cancel / active).
- TerminalHost: protocol the views and the session depend on.
- RichTerminalHost: real implementation on top of rich.live and termios.
"""

import logging
import os
import select
import sys
import termios
import time
import tty
from typing import Callable, List, Optional, Protocol, TextIO, Tuple

from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from .keys import KeyDecoder

logger = logging.getLogger(__name__)

# Longest time the loop blocks on stdin when no timer is pending;
# bounds how late a terminal resize is picked up.
IDLE_POLL_SECONDS = 0.25

# Grace period for the rest of an escape sequence to arrive
ESCAPE_GRACE_SECONDS = 0.04


class TerminalUnavailableError(RuntimeError):
    """Raised when no interactive terminal is attached to stdin."""


class Interval:
    """
    Handle for a repeating callback scheduled on a host.

    The host owns the schedule; the handle only records whether the
    callback is still live and when it is next due.
    """

    def __init__(self, seconds: float, callback: Callable[[], None], now: float):
        self.seconds = seconds
        self.callback = callback
        self.next_due = now + seconds
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def fire(self, now: float) -> None:
        self.next_due = now + self.seconds
        self.callback()


class Component(Protocol):
    """Anything the host can drive: the review session."""

    def render(self, width: int) -> List[str]: ...

    def handle_input(self, key: str) -> None: ...

    def close(self) -> None: ...


class TerminalHost(Protocol):
    """Host capabilities used by the views."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def request_render(self) -> None: ...

    def set_interval(self, seconds: float, callback: Callable[[], None]) -> Interval: ...

    def stop(self) -> None: ...


class RichTerminalHost:
    """
    Terminal host backed by rich.

    Frames are drawn with rich.live.Live on the alternate screen with
    auto-refresh disabled, so every redraw happens on the loop thread.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or Console()
        self.stdin = stdin or sys.stdin
        self._intervals: List[Interval] = []
        self._render_requested = False
        self._running = False
        self._last_size: Optional[Tuple[int, int]] = None

    # --- TerminalHost ---

    @property
    def width(self) -> int:
        return self.console.size.width

    @property
    def height(self) -> int:
        return self.console.size.height

    def request_render(self) -> None:
        self._render_requested = True

    def set_interval(self, seconds: float, callback: Callable[[], None]) -> Interval:
        interval = Interval(seconds, callback, time.monotonic())
        self._intervals.append(interval)
        return interval

    def stop(self) -> None:
        self._running = False

    # --- Loop ---

    @property
    def is_interactive(self) -> bool:
        try:
            return self.stdin.isatty()
        except (AttributeError, ValueError):
            return False

    @property
    def active_intervals(self) -> List[Interval]:
        return [i for i in self._intervals if i.active]

    def run(self, component: Component) -> None:
        """
        Drive a component until it stops the host.

        Raises:
            TerminalUnavailableError: If stdin is not a TTY.
        """
        if not self.is_interactive:
            raise TerminalUnavailableError("stdin is not an interactive terminal")

        fd = self.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        self._running = True
        logger.debug("Host loop starting")

        try:
            tty.setcbreak(fd)
            with Live(
                self._frame(component),
                console=self.console,
                screen=True,
                auto_refresh=False,
                transient=True,
            ) as live:
                self._loop(component, live, fd)
        except KeyboardInterrupt:
            logger.debug("Interrupted, closing session")
            component.close()
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            self._running = False
            self._intervals = self.active_intervals
            logger.debug("Host loop stopped")

    def _loop(self, component: Component, live: Live, fd: int) -> None:
        self._last_size = (self.width, self.height)
        decoder = KeyDecoder()

        while self._running:
            ready, _, _ = select.select([fd], [], [], self._next_timeout())

            if ready:
                for key in decoder.feed(self._read_available(fd)):
                    if key == "ctrl+c":
                        component.close()
                    else:
                        component.handle_input(key)
                    if not self._running:
                        return

            self._fire_due(time.monotonic())
            if not self._running:
                return

            size = (self.width, self.height)
            if size != self._last_size:
                self._last_size = size
                self._render_requested = True

            if self._render_requested:
                self._render_requested = False
                live.update(self._frame(component), refresh=True)

    def _frame(self, component: Component) -> Group:
        lines = component.render(self.width)
        return Group(*(Text.from_ansi(line, no_wrap=True, overflow="crop") for line in lines))

    def _read_available(self, fd: int) -> bytes:
        data = os.read(fd, 64)
        while select.select([fd], [], [], ESCAPE_GRACE_SECONDS)[0]:
            chunk = os.read(fd, 64)
            if not chunk:
                break
            data += chunk
        return data

    def _next_timeout(self) -> float:
        live_intervals = self.active_intervals
        if not live_intervals:
            return IDLE_POLL_SECONDS
        soonest = min(i.next_due for i in live_intervals)
        return max(0.0, min(IDLE_POLL_SECONDS, soonest - time.monotonic()))

    def _fire_due(self, now: float) -> None:
        self._intervals = self.active_intervals
        for interval in list(self._intervals):
            # A callback may cancel intervals scheduled later in this pass
            if interval.active and interval.next_due <= now:
                interval.fire(now)
