"""
Unit tests for the rich terminal host (timers, frames, loop guards).
"""

import io
import time
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from narrator.tui.host import (
    ESCAPE_GRACE_SECONDS,
    IDLE_POLL_SECONDS,
    Interval,
    RichTerminalHost,
    TerminalUnavailableError,
)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=40, height=12)


@pytest.fixture
def rich_host(console):
    return RichTerminalHost(console, stdin=io.StringIO())


class TestInterval:
    def test_cancel(self):
        interval = Interval(0.1, MagicMock(), now=0.0)
        assert interval.active
        interval.cancel()
        assert not interval.active

    def test_fire_reschedules(self):
        callback = MagicMock()
        interval = Interval(0.5, callback, now=0.0)
        assert interval.next_due == pytest.approx(0.5)

        interval.fire(now=2.0)
        callback.assert_called_once_with()
        assert interval.next_due == pytest.approx(2.5)


class TestRichTerminalHost:
    def test_size_from_console(self, rich_host):
        assert rich_host.width == 40
        assert rich_host.height == 12

    def test_not_interactive_without_tty(self, rich_host):
        assert not rich_host.is_interactive

    def test_run_requires_tty(self, rich_host):
        with pytest.raises(TerminalUnavailableError):
            rich_host.run(MagicMock())

    def test_fire_due_runs_callbacks(self, rich_host):
        callback = MagicMock()
        rich_host.set_interval(0.1, callback)

        rich_host._fire_due(time.monotonic() + 1)
        callback.assert_called_once_with()

    def test_fire_due_skips_pending(self, rich_host):
        callback = MagicMock()
        rich_host.set_interval(60, callback)

        rich_host._fire_due(time.monotonic())
        callback.assert_not_called()

    def test_cancelled_interval_dropped(self, rich_host):
        callback = MagicMock()
        interval = rich_host.set_interval(0.1, callback)
        interval.cancel()

        rich_host._fire_due(time.monotonic() + 1)
        callback.assert_not_called()
        assert rich_host.active_intervals == []

    def test_callback_cancelling_later_interval(self, rich_host):
        second = MagicMock()
        later = None

        def cancel_later():
            later.cancel()

        rich_host.set_interval(0.1, cancel_later)
        later = rich_host.set_interval(0.1, second)

        rich_host._fire_due(time.monotonic() + 1)
        second.assert_not_called()

    def test_next_timeout_idle(self, rich_host):
        assert rich_host._next_timeout() == IDLE_POLL_SECONDS

    def test_next_timeout_overdue(self, rich_host):
        interval = rich_host.set_interval(0.1, MagicMock())
        interval.next_due = time.monotonic() - 5
        assert rich_host._next_timeout() == 0.0

    def test_next_timeout_capped(self, rich_host):
        rich_host.set_interval(30, MagicMock())
        assert rich_host._next_timeout() <= IDLE_POLL_SECONDS

    def test_request_render_and_stop(self, rich_host):
        rich_host.request_render()
        assert rich_host._render_requested
        rich_host._running = True
        rich_host.stop()
        assert not rich_host._running

    def test_frame_strips_ansi(self, rich_host):
        component = MagicMock()
        component.render.return_value = ["\x1b[1mbold\x1b[0m", "plain"]

        frame = rich_host._frame(component)

        component.render.assert_called_once_with(40)
        assert [text.plain for text in frame.renderables] == ["bold", "plain"]
        assert all(text.no_wrap for text in frame.renderables)

    def test_read_available_joins_split_sequence(self, rich_host):
        reads = [b"\x1b", b"[B"]
        with patch("narrator.tui.host.select.select") as mock_select, \
                patch("narrator.tui.host.os.read", side_effect=lambda fd, n: reads.pop(0)):
            mock_select.side_effect = [([0], [], []), ([], [], [])]
            data = rich_host._read_available(0)

        assert data == b"\x1b[B"
        # Waits long enough for the tail of a sequence on a slow link
        assert mock_select.call_args_list[0].args[3] == ESCAPE_GRACE_SECONDS
        assert ESCAPE_GRACE_SECONDS >= 0.03
