"""
Review Session - Navigation controller for the interactive walkthrough.

Composes the overview and detail views into one modal session:

    overview --select(i)--> detail(i)   (overview timer paused)
    detail   --back-------> overview    (timer restarted, selection kept)
    overview --close------> closed
    detail   --close------> closed

Rendering and input always go to whichever view is active.
"""

import logging
from typing import Callable, List, Optional

from ..config import SCROLL_INTERVAL_SECONDS
from ..core.types import Review
from .detail import DetailCallbacks, DetailView
from .host import TerminalHost
from .overview import OverviewCallbacks, OverviewView
from .theme import Theme

logger = logging.getLogger(__name__)

OVERVIEW = "overview"
DETAIL = "detail"
CLOSED = "closed"


class ReviewSession:
    """
    State machine owning the two views for one review.

    The overview view lives for the whole session; a detail view is built
    fresh each time a section is opened and dropped on the way back.
    """

    def __init__(
        self,
        review: Review,
        host: TerminalHost,
        theme: Theme,
        initial_selection: int = 0,
        scroll_interval: float = SCROLL_INTERVAL_SECONDS,
        on_close: Optional[Callable[[], None]] = None,
    ):
        self.review = review
        self.host = host
        self.theme = theme
        self.on_close = on_close

        self.mode = OVERVIEW
        self.detail: Optional[DetailView] = None
        self.overview = OverviewView(
            review,
            theme,
            host,
            OverviewCallbacks(on_select=self._open_section, on_close=self.close),
            initial_selection=initial_selection,
            scroll_interval=scroll_interval,
        )

    @property
    def closed(self) -> bool:
        return self.mode == CLOSED

    @property
    def selected_index(self) -> int:
        return self.overview.selected_index

    def _open_section(self, index: int) -> None:
        if self.closed:
            return
        logger.debug(f"Opening section {index}")
        self.overview.clear_timer()
        self.detail = DetailView(
            self.review,
            index,
            self.theme,
            self.host,
            DetailCallbacks(on_back=self._back_to_overview, on_close=self.close),
        )
        self.mode = DETAIL
        self.host.request_render()

    def _back_to_overview(self) -> None:
        if self.closed:
            return
        logger.debug("Returning to overview")
        self.detail = None
        self.mode = OVERVIEW
        self.overview.restart_timer()
        self.host.request_render()

    def close(self) -> None:
        """End the session. Safe to call more than once."""
        if self.closed:
            return
        logger.debug("Closing review session")
        self.overview.clear_timer()
        self.detail = None
        self.mode = CLOSED
        self.host.stop()
        if self.on_close is not None:
            self.on_close()

    def render(self, width: int) -> List[str]:
        if self.mode == DETAIL and self.detail is not None:
            return self.detail.render(width)
        return self.overview.render(width)

    def handle_input(self, key: str) -> None:
        if self.closed:
            return
        if self.mode == DETAIL and self.detail is not None:
            self.detail.handle_input(key)
        else:
            self.overview.handle_input(key)
