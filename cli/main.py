#!/usr/bin/env python3
"""
Namer CLI - Deterministic, length-bounded names

Main entrypoint for the namer command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import name
from namer import DNS1123_LABEL_MAX_LENGTH, DNS1123_SUBDOMAIN_MAX_LENGTH
from namer.logging_config import setup_logging

# Initialize Typer app
app = typer.Typer(
    name="namer",
    help="Deterministic, length-bounded name generation",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.callback()
def configure():
    """Configure logging from NAMER_LOG_LEVEL and NAMER_LOG_FORMAT."""
    setup_logging()


app.command("compose")(name.compose_command)
app.command("limit")(name.limit_command)
app.command("digest")(name.digest_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Namer CLI[/bold]", f"v{__version__}")
    table.add_row("Digest", "FNV-1a 32-bit")
    table.add_row("Limits", f"subdomain={DNS1123_SUBDOMAIN_MAX_LENGTH} label={DNS1123_LABEL_MAX_LENGTH}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
