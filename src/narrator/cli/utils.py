"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing and review document loading.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from ..core.types import Review

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def configure_file_logging(log_file: Optional[str]) -> None:
    """
    Send debug logs to a file.

    The interactive session owns the terminal, so logs never go to the
    console while it is running.
    """
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format=LOG_FORMAT,
    )


def load_review(review_file: str) -> Optional[Review]:
    """
    Load a Review from a JSON file.

    Args:
        review_file (str): Path to a JSON file holding one review object.

    Returns:
        Optional[Review]: The validated review, or None if loading failed.
    """
    review_path = Path(review_file)

    if not review_path.is_file():
        echo_error(f"Review file not found: {review_file}")
        return None

    try:
        data = json.loads(review_path.read_text())
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        echo_error(f"Failed to read review: {e}")
        return None

    try:
        review = Review.model_validate(data)
    except ValidationError as e:
        echo_error(f"Invalid review in {review_file}:")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "<root>"
            click.echo(f"   {location}: {error['msg']}", err=True)
        return None

    logger.debug(f"Loaded review '{review.title}' with {review.section_count} sections")
    return review
