"""
Blacklist CLI commands.
"""

import click
from rich.console import Console
from rich.table import Table

from netdash.errors import ValidationError
from netdash.rbl.core import BlacklistChecker


@click.group()
def rbl():
    """Blacklist check (simulated)."""
    pass


@rbl.command()
@click.argument("ip")
@click.option("--delay", default=1.0, show_default=True, help="Simulated lookup time in seconds")
def check(ip: str, delay: float):
    """Check an IP address against common blacklists.

    The check is simulated: no DNSBL queries are sent.

    Examples:
        netdash rbl check 8.8.8.8
    """
    console = Console()
    checker = BlacklistChecker(delay=delay)

    with console.status(f"[cyan]Checking {ip} against {len(checker.providers)} blacklists...[/cyan]"):
        try:
            result = checker.check(ip)
        except ValidationError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)

    if result.total_listed == 0:
        console.print(f"[green]CLEAN[/green] - Not listed on any of {result.total_checked} blacklists checked\n")
    else:
        console.print(f"[red]LISTED[/red] on {result.total_listed} of {result.total_checked} blacklists\n")

    table = Table(box=None)
    table.add_column("Blacklist", style="white")
    table.add_column("Zone", style="dim")
    table.add_column("Status", style="white")

    for entry in result.blacklists:
        status = "[red]Listed[/red]" if entry.listed else "[green]Clean[/green]"
        table.add_row(entry.name, entry.zone, status)

    console.print(table)
    console.print("\n[dim]Simulated check: no DNSBL servers were queried.[/dim]")
