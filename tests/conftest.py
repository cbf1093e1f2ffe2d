"""
Shared fixtures: a fake terminal host and review builders.
"""

from typing import Callable, List, Optional

import pytest

from narrator.core.types import CodeBlock, Review, Section
from narrator.tui.host import Interval


class FakeHost:
    """
    In-memory terminal host.

    Intervals never fire on their own; tests advance them with tick().
    """

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.intervals: List[Interval] = []
        self.render_requests = 0
        self.stopped = False

    def request_render(self) -> None:
        self.render_requests += 1

    def set_interval(self, seconds: float, callback: Callable[[], None]) -> Interval:
        interval = Interval(seconds, callback, 0.0)
        self.intervals.append(interval)
        return interval

    def stop(self) -> None:
        self.stopped = True

    @property
    def active_intervals(self) -> List[Interval]:
        return [i for i in self.intervals if i.active]

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            for interval in self.active_intervals:
                interval.callback()


class MarkerTheme:
    """Theme that wraps text in visible tags so styling can be asserted."""

    def bold(self, text: str) -> str:
        return f"*{text}*"

    def fg(self, name: str, text: str) -> str:
        return f"<{name}>{text}</{name}>"

    def bg(self, name: str, text: str) -> str:
        return f"[{name}]{text}[/{name}]"


def build_section(
    title: str = "Section",
    explanation: str = "Explains the change.",
    blocks: Optional[List[str]] = None,
    note: Optional[str] = None,
) -> Section:
    code_blocks = [
        CodeBlock(lang="python", path=f"src/file{i}.py", start_line=1, end_line=len(code.split("\n")), code=code)
        for i, code in enumerate(blocks or [])
    ]
    extra = {"note": note} if note is not None else {}
    return Section(title=title, explanation=explanation, code_blocks=code_blocks, **extra)


def build_review(sections: List[Section], title: str = "My Review", summary: str = "Short summary") -> Review:
    return Review(title=title, summary=summary, sections=sections)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def marker_theme():
    return MarkerTheme()


@pytest.fixture
def make_section():
    return build_section


@pytest.fixture
def make_review():
    return build_review


@pytest.fixture
def sample_review_dict():
    """Review payload as it appears on the wire (camelCase keys)."""
    return {
        "title": "Add caching",
        "summary": "Caches lookups.",
        "sections": [
            {
                "title": "Cache layer",
                "explanation": "Wraps the store.",
                "codeBlocks": [
                    {
                        "lang": "python",
                        "path": "app/cache.py",
                        "startLine": 10,
                        "endLine": 12,
                        "code": "def get(key):\n    return store[key]\n",
                    }
                ],
                "note": "TTL is fixed.",
            },
            {
                "title": "Wiring",
                "explanation": "Uses the cache.",
                "codeBlocks": [],
            },
        ],
    }
