"""
Show Command - Interactive review walkthrough.

Opens a review document in the terminal: an overview of its sections and
a scrollable detail view for each one.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from ...config import ConfigError, load_settings
from ...tui.host import RichTerminalHost, TerminalUnavailableError
from ...tui.session import ReviewSession
from ...tui.theme import PlainTheme, RichTheme
from ..utils import configure_file_logging, echo_error, load_review

logger = logging.getLogger(__name__)


@click.command()
@click.argument("review_file", type=click.Path(dir_okay=False))
@click.option("-s", "--select", "selection", default=0, type=int, help="Section selected on open (0-based)")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), help="Settings file (default: .narrator/config.yaml)")
@click.option("--no-color", is_flag=True, help="Disable styling")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Write debug logs to this file")
def show(
    review_file: str,
    selection: int,
    config_path: Optional[str],
    no_color: bool,
    log_file: Optional[str],
):
    """
    Walk through a review interactively.

    \b
    Overview:  j/k select  enter view  esc close
    Detail:    j/k scroll  h/l scroll horiz  esc back  q close
    """
    configure_file_logging(log_file)

    try:
        settings = load_settings(Path(config_path) if config_path else None)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    review = load_review(review_file)
    if review is None:
        sys.exit(1)

    console = Console()
    host = RichTerminalHost(console)

    if not host.is_interactive:
        echo_error("TUI not available in this context")
        sys.exit(1)

    theme = RichTheme(settings.palette) if settings.color and not no_color else PlainTheme()

    console.set_window_title(review.title)
    session = ReviewSession(
        review,
        host,
        theme,
        initial_selection=selection,
        scroll_interval=settings.scroll_interval,
    )

    try:
        host.run(session)
    except TerminalUnavailableError:
        session.close()
        echo_error("TUI not available in this context")
        sys.exit(1)

    logger.debug("Review session finished")
