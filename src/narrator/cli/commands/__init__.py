"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import check
from . import initialize
from . import show

__all__ = [
    "check",
    "initialize",
    "show",
]
