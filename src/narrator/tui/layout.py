"""
Text Layout Utilities.

Pure helpers shared by the overview and detail views. Widths are counted
in terminal cells (rich.cells), so wide characters take two columns;
styling is applied by the caller after layout.
"""

from typing import List, Optional

from rich.cells import cell_len, set_cell_size

ELLIPSIS = "…"


def truncate(text: str, max_width: int) -> str:
    """
    Clip text to a fixed width, marking the cut with an ellipsis.

    Args:
        text: Text to clip.
        max_width: Maximum result width in cells. Values <= 0 yield "".

    Returns:
        str: text unchanged if it fits, otherwise the first max_width - 1
        cells followed by ELLIPSIS (exactly max_width cells wide). A wide
        character cut in half is replaced by a space.
    """
    if max_width <= 0:
        return ""
    if cell_len(text) <= max_width:
        return text
    return set_cell_size(text, max_width - 1) + ELLIPSIS


def wrap(text: str, width: int, max_lines: Optional[int] = None) -> List[str]:
    """
    Greedy word-wrap, paragraph by paragraph.

    Explicit line breaks split paragraphs first; a blank paragraph becomes a
    blank output line. Words are packed into lines no wider than width. A
    word longer than width sits alone on its own line, unbroken.

    Args:
        text: Text to wrap.
        width: Target line width.
        max_lines: Stop once this many lines have been produced.

    Returns:
        List[str]: Wrapped lines, in order.
    """
    lines: List[str] = []
    if max_lines is not None and max_lines <= 0:
        return lines

    def full() -> bool:
        return max_lines is not None and len(lines) >= max_lines

    for paragraph in text.split("\n"):
        if not paragraph.strip():
            lines.append("")
            if full():
                return lines
            continue

        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if cell_len(candidate) <= width:
                current = candidate
                continue
            if current:
                lines.append(current)
                if full():
                    return lines
            current = word

        if current:
            lines.append(current)
            if full():
                return lines

    return lines


def rule(width: int, char: str = "-") -> str:
    """A full-width separator line."""
    return char * max(0, width)


def is_rule(text: str) -> bool:
    """True for a non-empty line made only of dashes."""
    return bool(text) and not text.strip("-")
