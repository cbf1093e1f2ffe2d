"""
Overview View - Top-level review summary with section selection.

Shows the review title, a clipped summary and the list of section titles.
The selected row shows "title - explanation" and, when that text is wider
than the row, bounces it horizontally on a repeating timer.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..config import OVERVIEW_LEGEND, SCROLL_INTERVAL_SECONDS, SUMMARY_MAX_LINES
from ..core.types import Review
from .host import Interval, TerminalHost
from .layout import rule, truncate, wrap
from .theme import Theme

logger = logging.getLogger(__name__)

FORWARD = 1
BACKWARD = -1

# Columns taken by the "> " marker and right margin on section rows
ROW_INSET = 4


@dataclass
class OverviewCallbacks:
    on_select: Callable[[int], None]
    on_close: Callable[[], None]


class OverviewView:
    """
    Section list with a scrolling label for the current selection.

    The view owns at most one live Interval. It is started on construction
    and on every selection change, and must be cancelled with clear_timer()
    before the view is hidden or discarded.
    """

    def __init__(
        self,
        review: Review,
        theme: Theme,
        host: TerminalHost,
        callbacks: OverviewCallbacks,
        initial_selection: int = 0,
        scroll_interval: float = SCROLL_INTERVAL_SECONDS,
    ):
        self.review = review
        self.theme = theme
        self.host = host
        self.callbacks = callbacks
        self.scroll_interval = scroll_interval

        last_index = len(review.sections) - 1
        self.selected_index = max(0, min(initial_selection, last_index))
        self.scroll_offset = 0
        self.scroll_direction = FORWARD
        self._timer: Optional[Interval] = None

        self._start_scroll_timer()

    # --- Animation ---

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.active

    def _start_scroll_timer(self) -> None:
        self.clear_timer()
        self.scroll_offset = 0
        self.scroll_direction = FORWARD
        self._timer = self.host.set_interval(self.scroll_interval, self.tick)
        logger.debug(f"Scroll timer started for section {self.selected_index}")

    def clear_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            logger.debug("Scroll timer cleared")

    def restart_timer(self) -> None:
        self._start_scroll_timer()

    def selected_label(self) -> str:
        """Full text of the selected row before scrolling and clipping."""
        if not self.review.sections:
            return ""
        section = self.review.sections[self.selected_index]
        return f"{section.title} - {section.explanation}"

    def visible_width(self) -> int:
        """Characters of the selected label shown at once."""
        return max(1, self.host.width - ROW_INSET)

    def max_offset(self) -> int:
        return max(0, len(self.selected_label()) - self.visible_width())

    def tick(self) -> None:
        """Advance the scroll animation by one character."""
        max_offset = self.max_offset()

        if max_offset == 0:
            if self.scroll_offset:
                self.scroll_offset = 0
                self.host.request_render()
            return

        self.scroll_offset += self.scroll_direction

        if self.scroll_offset >= max_offset:
            self.scroll_direction = BACKWARD
            self.scroll_offset = max_offset
        elif self.scroll_offset <= 0:
            self.scroll_direction = FORWARD
            self.scroll_offset = 0

        self.host.request_render()

    # --- Rendering ---

    def render(self, width: int) -> List[str]:
        theme = self.theme
        separator = theme.fg("dim", rule(width))
        lines: List[str] = []

        header = truncate(f" Reviewing {self.review.title} ", width)
        lines.append(theme.fg("accent", theme.bold(header)))
        lines.append(separator)

        for line in wrap(self.review.summary, width - 2, SUMMARY_MAX_LINES):
            lines.append(f"  {line}")
        # Approximate: raw length against the line budget, not wrapped line count
        if len(self.review.summary) > width * SUMMARY_MAX_LINES:
            lines.append(theme.fg("dim", "  ..."))

        lines.append(separator)

        for index, section in enumerate(self.review.sections):
            if index == self.selected_index:
                scrolled = self.selected_label()[self.scroll_offset:]
                lines.append(theme.fg("accent", "> ") + truncate(scrolled, width - ROW_INSET))
            else:
                lines.append("  " + truncate(section.title, width - ROW_INSET))

        lines.append(separator)
        lines.append(theme.fg("dim", OVERVIEW_LEGEND))
        return lines

    # --- Input ---

    def _move(self, delta: int) -> None:
        target = self.selected_index + delta
        if 0 <= target < len(self.review.sections):
            self.selected_index = target
            self._start_scroll_timer()
            self.host.request_render()

    def handle_input(self, key: str) -> None:
        if key in ("j", "down"):
            self._move(1)
        elif key in ("k", "up"):
            self._move(-1)
        elif key == "return":
            if not self.review.sections:
                return
            self.clear_timer()
            self.callbacks.on_select(self.selected_index)
        elif key in ("escape", "q"):
            self.clear_timer()
            self.callbacks.on_close()
