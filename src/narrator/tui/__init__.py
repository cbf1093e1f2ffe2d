"""
Terminal presentation layer for narrator.

- layout: truncate / wrap helpers
- theme: styling capability (PlainTheme, RichTheme)
- host: terminal host, timers and the input loop
- overview / detail: the two views
- session: navigation controller
"""

from .layout import truncate, wrap
from .theme import PlainTheme, RichTheme, Theme
from .host import Interval, RichTerminalHost, TerminalHost, TerminalUnavailableError
from .overview import OverviewView
from .detail import DetailView
from .session import ReviewSession

__all__ = [
    "truncate", "wrap",
    "PlainTheme", "RichTheme", "Theme",
    "Interval", "RichTerminalHost", "TerminalHost", "TerminalUnavailableError",
    "OverviewView", "DetailView", "ReviewSession",
]
