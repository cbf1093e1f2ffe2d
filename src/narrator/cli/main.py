"""
narrator CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import check, initialize, show


@click.group()
@click.version_option(package_name="narrator-review")
def main():
    """narrator: Interactive walkthrough for structured code reviews.

    \b
    Quick Start:
      narrator init --demo
      narrator show narrator-demo/review.json
      narrator check review.json --json
    """
    pass


# Register commands
main.add_command(show.show)
main.add_command(check.check)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
