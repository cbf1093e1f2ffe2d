"""
Check Command - Validate a review document without opening the TUI.
"""

import sys
from typing import List

import click
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..utils import echo_success, load_review

console = Console()


# --- API Models ---
class SectionSummary(BaseModel):
    title: str
    code_blocks: int
    code_lines: int
    has_note: bool


class CheckResponse(BaseModel):
    """
    Structured response for the check command.
    """
    title: str
    section_count: int
    code_block_count: int
    sections: List[SectionSummary] = Field(default_factory=list)


@click.command()
@click.argument("review_file", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def check(review_file: str, as_json: bool):
    """
    Validate a review file and summarize its sections.
    """
    review = load_review(review_file)
    if review is None:
        sys.exit(1)

    sections = [
        SectionSummary(
            title=section.title,
            code_blocks=len(section.code_blocks),
            code_lines=sum(len(block.lines()) for block in section.code_blocks),
            has_note=bool(section.note),
        )
        for section in review.sections
    ]
    response = CheckResponse(
        title=review.title,
        section_count=len(sections),
        code_block_count=sum(s.code_blocks for s in sections),
        sections=sections,
    )

    if as_json:
        click.echo(response.model_dump_json(indent=2))
        return

    table = Table(title=escape(review.title), show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Section", style="cyan")
    table.add_column("Blocks", justify="right")
    table.add_column("Lines", justify="right")
    table.add_column("Note", justify="center")

    for index, section in enumerate(sections, start=1):
        table.add_row(
            str(index),
            escape(section.title),
            str(section.code_blocks),
            str(section.code_lines),
            "✓" if section.has_note else "",
        )

    console.print(table)

    if not sections:
        console.print("[yellow]Review has no sections.[/yellow]")
    else:
        echo_success(f"Review is valid ({response.section_count} sections, {response.code_block_count} code blocks)")
