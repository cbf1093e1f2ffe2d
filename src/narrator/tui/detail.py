"""
Detail View - Walkthrough of a single review section.

Shows the section's explanation followed by its code blocks as one
scrollable buffer. Code lines scroll horizontally and are clipped rather
than wrapped; the first code line in view is highlighted as the cursor.
"""

from dataclasses import dataclass
from typing import Callable, List

from ..config import DETAIL_LEGEND, FOOTER_HEIGHT, HEADER_HEIGHT
from ..core.types import ContentLine, Review
from .host import TerminalHost
from .layout import is_rule, rule, truncate, wrap
from .theme import Theme


@dataclass
class DetailCallbacks:
    on_back: Callable[[], None]
    on_close: Callable[[], None]


class DetailView:
    """
    Scrollable walkthrough for one section.

    content_lines is rebuilt from the section on every render; scroll
    offsets are the only state that survives between frames.
    """

    def __init__(
        self,
        review: Review,
        section_index: int,
        theme: Theme,
        host: TerminalHost,
        callbacks: DetailCallbacks,
    ):
        self.review = review
        self.section_index = section_index
        self.theme = theme
        self.host = host
        self.callbacks = callbacks

        self.vertical_offset = 0
        self.horizontal_offset = 0
        self.content_lines: List[ContentLine] = []

    @property
    def section(self):
        return self.review.sections[self.section_index]

    def available_height(self) -> int:
        return max(0, self.host.height - HEADER_HEIGHT - FOOTER_HEIGHT)

    def max_vertical_offset(self) -> int:
        return max(0, len(self.content_lines) - self.available_height())

    def build_content(self, width: int) -> List[ContentLine]:
        """Project the section into display lines."""
        theme = self.theme
        section = self.section
        content: List[ContentLine] = []

        for line in wrap(section.explanation, width - 2):
            content.append(ContentLine(f"  {line}", False))
        content.append(ContentLine("", False))

        blocks = section.code_blocks
        for index, block in enumerate(blocks):
            content.append(ContentLine(theme.fg("dim", f" {block.location} "), False))
            for code_line in block.lines():
                content.append(ContentLine(code_line, True))

            if index < len(blocks) - 1:
                content.append(ContentLine(rule(width), False))
            else:
                content.append(ContentLine("", False))

        if section.note:
            content.append(ContentLine(theme.fg("dim", f"Note: {section.note}"), False))
            content.append(ContentLine("", False))

        return content

    def render(self, width: int) -> List[str]:
        theme = self.theme
        section = self.section
        height = self.host.height
        position = f"[{self.section_index + 1}/{len(self.review.sections)}]"

        header = truncate(f" Reviewing {self.review.title} - {section.title} {position} ", width)
        lines = [
            theme.fg("accent", theme.bold(header)),
            theme.fg("dim", rule(width)),
        ]

        self.content_lines = self.build_content(width)
        start = self.vertical_offset
        visible = self.content_lines[start:start + self.available_height()]

        cursor = next((i for i, line in enumerate(visible) if line.is_code), -1)

        for index, line in enumerate(visible):
            if line.is_code:
                clipped = truncate(line.text[self.horizontal_offset:], width)
                rendered = theme.fg("dim", clipped)
                if index == cursor:
                    rendered = theme.bg("highlight", rendered)
                lines.append(rendered)
            elif is_rule(line.text):
                lines.append(theme.fg("dim", line.text))
            else:
                lines.append(line.text)

        while len(lines) < height - FOOTER_HEIGHT:
            lines.append("")

        lines.append(theme.fg("dim", DETAIL_LEGEND))
        return lines

    def handle_input(self, key: str) -> None:
        if key in ("j", "down"):
            self.vertical_offset = min(self.max_vertical_offset(), self.vertical_offset + 1)
            self.host.request_render()
        elif key in ("k", "up"):
            self.vertical_offset = max(0, self.vertical_offset - 1)
            self.host.request_render()
        elif key in ("l", "right"):
            self.horizontal_offset += 1
            self.host.request_render()
        elif key in ("h", "left"):
            self.horizontal_offset = max(0, self.horizontal_offset - 1)
            self.host.request_render()
        elif key == "escape":
            self.callbacks.on_back()
        elif key == "q":
            self.callbacks.on_close()
