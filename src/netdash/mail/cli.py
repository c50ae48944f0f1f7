"""
Email trace CLI commands.
"""

import click
from rich.console import Console
from rich.table import Table

from netdash.errors import ValidationError
from netdash.mail.core import parse_headers


@click.group()
def mail():
    """Email header tools."""
    pass


@mail.command()
@click.argument("headers", type=click.File("r"), default="-")
def trace(headers):
    """Trace the path of an email from its headers.

    Reads the headers from a file, or from stdin when no file is given.

    Examples:
        netdash mail trace headers.txt
        pbpaste | netdash mail trace
    """
    console = Console()

    try:
        result = parse_headers(headers.read())
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    table = Table(title="Email Headers", show_header=False, box=None)
    table.add_column("Header", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("From", result.sender or "-")
    table.add_row("To", result.recipient or "-")
    table.add_row("Subject", result.subject or "-")
    table.add_row("Date", result.date or "-")
    table.add_row("Message-ID", result.message_id or "-")
    if result.origin:
        table.add_row("Origin IP", f"[yellow]{result.origin}[/yellow]")
    console.print(table)

    if not result.received:
        console.print("\n[dim]No Received headers found[/dim]")
        return

    path = Table(title="Delivery Path (newest first)", box=None)
    path.add_column("#", style="dim", justify="right")
    path.add_column("Received", style="white")
    path.add_column("IPs", style="cyan")
    for index, hop in enumerate(result.received, 1):
        path.add_row(str(index), hop.raw, ", ".join(hop.addresses))

    console.print()
    console.print(path)
