"""
Core type definitions for narrator.

The review document is supplied externally as JSON with camelCase keys.
Models accept both the wire names and the snake_case attribute names.
Every list field is required, line numbers must be real integers and a
note, when present, must be a string.
"""

from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class CodeBlock(BaseModel):
    """
    An annotated code excerpt.

    The line range is descriptive only. Nothing checks that start_line <=
    end_line or that code spans that many lines.
    """
    lang: str
    path: str
    start_line: StrictInt = Field(alias="startLine")
    end_line: StrictInt = Field(alias="endLine")
    code: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def location(self) -> str:
        return f"{self.path}:{self.start_line}-{self.end_line}"

    def lines(self) -> List[str]:
        """Raw source lines of the excerpt."""
        return self.code.split("\n")


class Section(BaseModel):
    """
    One narrative step of a review.
    """
    title: str
    explanation: str
    code_blocks: List[CodeBlock] = Field(alias="codeBlocks")
    note: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("note", mode="before")
    @classmethod
    def note_must_be_string(cls, v):
        # Only runs when the key is given; an absent note stays None
        if not isinstance(v, str):
            raise ValueError("note must be a string when present")
        return v


class Review(BaseModel):
    """
    A structured code review document.

    Section order is display order and never changes for a session.
    """
    title: str
    summary: str
    sections: List[Section]

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def section_count(self) -> int:
        return len(self.sections)


class ContentLine(NamedTuple):
    """A line of the detail view's content buffer."""
    text: str
    is_code: bool
