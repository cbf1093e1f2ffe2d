"""
Core modules for narrator.

This package contains the document-level building blocks:
- types: Review document models (Review, Section, CodeBlock)
- demo: Sample review used for onboarding
"""

from .types import CodeBlock, ContentLine, Review, Section
from .demo import DemoManager

__all__ = [
    # Types
    "CodeBlock", "ContentLine", "Review", "Section",
    # Demo
    "DemoManager",
]
