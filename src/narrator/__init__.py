"""
Narrator - Interactive terminal walkthrough for structured code reviews.

A review document (title, summary and an ordered list of narrative
sections with annotated code excerpts) is presented as a two-level
terminal interface: an overview list of sections and a scrollable
detail walkthrough for each one.

Key Components:
- core: Review document types, demo content
- tui: Text layout, the overview/detail views and the session controller
- cli: Click commands (show, check, init)

Usage:
    from narrator.tui import ReviewSession, RichTerminalHost, RichTheme

    host = RichTerminalHost()
    session = ReviewSession(review, host, RichTheme())
    host.run(session)
"""

__version__ = "0.1.0"
