"""
Init Command - Onboarding Automation.

This module handles the `narrator init` command, which writes a starter
settings file and, with --demo, a sample review to open straight away.
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import default_config_path, default_settings_dict
from ...core.demo import DemoManager

console = Console()


def create_gitignore(narrator_dir: Path):
    """Ensure the .narrator/ directory is ignored by git."""
    gitignore = narrator_dir.parent / ".gitignore"
    entry = "\n# narrator\n.narrator/\n"

    if not gitignore.exists():
        with open(gitignore, "w") as f:
            f.write(entry)
    else:
        content = gitignore.read_text()
        if ".narrator" not in content:
            with open(gitignore, "a") as f:
                f.write(entry)


def _write_config(config_file: Path):
    """Internal helper to write the default settings file."""
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(default_settings_dict(), f, sort_keys=False, default_flow_style=False)

    create_gitignore(config_file.parent)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--demo", is_flag=True, help="Write a sample review to try the walkthrough")
def init(force: bool, demo: bool):
    """
    Initialize narrator in the current directory.

    If --demo is used, a sample review is written to
    ./narrator-demo/review.json as well.
    """
    console.print(Panel.fit("📖 [bold blue]Narrator Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = default_config_path(root_dir)

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    _write_config(config_file)

    if demo:
        review_file = DemoManager(root_dir).provision()
        console.print(f"📂 Created demo review at: [bold]{review_file}[/bold]")
        console.print("\n[bold green]Ready to go! Try:[/bold green]")
        console.print(f"   [bold cyan]narrator show {review_file.relative_to(root_dir)}[/bold cyan]")
