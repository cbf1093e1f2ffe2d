"""
Styling capability for the terminal views.

Views never talk to a styling library directly. They call a Theme with a
handful of text-in/text-out decorations, so layout logic stays testable
with PlainTheme and the real terminal gets ANSI output from RichTheme.
"""

from typing import Dict, Optional, Protocol

from rich.color import ColorSystem
from rich.style import Style

from ..config import DEFAULT_PALETTE


class Theme(Protocol):
    """Named text decorations used by the views."""

    def bold(self, text: str) -> str: ...

    def fg(self, name: str, text: str) -> str: ...

    def bg(self, name: str, text: str) -> str: ...


class PlainTheme:
    """Theme that leaves text untouched."""

    def bold(self, text: str) -> str:
        return text

    def fg(self, name: str, text: str) -> str:
        return text

    def bg(self, name: str, text: str) -> str:
        return text


class RichTheme:
    """
    Theme backed by rich styles.

    Each palette name maps to a rich style definition ("cyan", "dim",
    "on grey23", ...). Decorations render to ANSI-wrapped strings that
    the host converts back with rich.text.Text.from_ansi.
    """

    def __init__(
        self,
        palette: Optional[Dict[str, str]] = None,
        color_system: ColorSystem = ColorSystem.TRUECOLOR,
    ):
        self.palette = {**DEFAULT_PALETTE, **(palette or {})}
        self.color_system = color_system
        self._styles: Dict[str, Style] = {}

    def _style(self, name: str) -> Style:
        if name not in self._styles:
            definition = self.palette.get(name)
            self._styles[name] = Style.parse(definition) if definition else Style.null()
        return self._styles[name]

    def _apply(self, style: Style, text: str) -> str:
        if not text:
            return text
        return style.render(text, color_system=self.color_system)

    def bold(self, text: str) -> str:
        return self._apply(Style(bold=True), text)

    def fg(self, name: str, text: str) -> str:
        return self._apply(self._style(name), text)

    def bg(self, name: str, text: str) -> str:
        return self._apply(self._style(name), text)
