"""
Name commands: compose, limit, digest
"""

import json
from typing import Any, Dict

import typer
from rich.console import Console
from rich.table import Table

from namer import (
    DNS1123_LABEL_MAX_LENGTH,
    DNS1123_SUBDOMAIN_MAX_LENGTH,
    NameLengthError,
    compose_name,
    digest,
    limit_length,
)
from namer.logging_config import get_logger

console = Console()


def _max_length_option(help_text: str):
    return typer.Option(
        DNS1123_SUBDOMAIN_MAX_LENGTH,
        "--max-length",
        "-m",
        envvar="NAMER_MAX_LENGTH",
        help=help_text,
    )


def _print_result(result: Dict[str, Any], json_output: bool) -> None:
    if json_output:
        print(json.dumps(result))
        return

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Name[/bold]", result["name"])
    table.add_row("Length", str(result["length"]))
    table.add_row("Limit", str(result["max_length"]))
    table.add_row("Truncated", "yes" if result["truncated"] else "no")
    console.print(table)


def compose_command(
    base: str = typer.Argument(..., help="Base name, e.g. deployment-5"),
    suffix: str = typer.Argument("", help="Suffix describing the role, e.g. deploy"),
    max_length: int = _max_length_option("Maximum name length (default: DNS-1123 subdomain)"),
    label: bool = typer.Option(
        False, "--label", help=f"Use the DNS-1123 label limit ({DNS1123_LABEL_MAX_LENGTH})"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Join BASE and SUFFIX with a dash, shortening to fit the limit.

    Examples:
        namer compose deployment-5 deploy
        namer compose my-very-long-build-config-name build --label
        namer compose my-app web --max-length 20 --json
    """
    if label:
        max_length = DNS1123_LABEL_MAX_LENGTH

    logger = get_logger(__name__, trace_id=base)
    try:
        name = compose_name(base, suffix, max_length)
    except NameLengthError as e:
        logger.debug(f"Rejected compose request: {e}")
        if json_output:
            print(json.dumps({"error": str(e), "max_length": max_length}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    _print_result(
        {
            "name": name,
            "length": len(name),
            "max_length": max_length,
            "truncated": name != f"{base}-{suffix}",
        },
        json_output,
    )


def limit_command(
    name: str = typer.Argument(..., help="Name to shorten"),
    max_length: int = _max_length_option("Maximum name length (default: DNS-1123 subdomain)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Shorten NAME to the limit, ending it with its digest when truncated.

    Examples:
        namer limit this-name-is-too-long-for-the-limit -m 10
        namer limit my-app --json
    """
    shortened = limit_length(name, max_length)
    _print_result(
        {
            "name": shortened,
            "length": len(shortened),
            "max_length": max_length,
            "truncated": shortened != name,
        },
        json_output,
    )


def digest_command(
    value: str = typer.Argument(..., help="Value to hash"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Print the 8-character FNV-1a digest of VALUE."""
    result = digest(value)
    if json_output:
        print(json.dumps({"value": value, "digest": result}))
    else:
        console.print(result)
