"""
DNS CLI commands.
"""

import click
from rich.console import Console
from rich.table import Table

from netdash.dns.core import DoHClient


@click.group()
def dns():
    """DNS-over-HTTPS lookups."""
    pass


@dns.command()
@click.argument("name")
@click.option("-t", "--type", "record_type", default="A", help="Record type (A, AAAA, MX, NS, TXT, etc.)")
@click.option("--all", "all_types", is_flag=True, help="Query all common record types")
def query(name: str, record_type: str, all_types: bool):
    """Perform a DNS lookup.

    Examples:
        netdash dns query example.com
        netdash dns query example.com -t MX
        netdash dns query example.com --all
    """
    console = Console()
    client = DoHClient()

    with console.status(f"[cyan]Resolving {name}...[/cyan]"):
        if all_types:
            results = list(client.query_all(name).values())
        else:
            results = [client.query(name, record_type)]

    errors = [r for r in results if r.error]
    if errors and len(errors) == len(results):
        console.print(f"[red]Error:[/red] {errors[0].error}")
        raise SystemExit(1)

    records = [rec for r in results for rec in r.records]
    if not records:
        if all_types:
            console.print(f"[yellow]No records found for {name}[/yellow]")
        else:
            console.print(f"[yellow]No {record_type.upper()} records found for {name} ({results[0].status})[/yellow]")
        return

    table = Table(title=f"DNS Lookup: {name}", box=None)
    table.add_column("Name", style="white")
    table.add_column("Type", style="cyan")
    table.add_column("TTL", style="dim")
    table.add_column("Value", style="white")

    for record in records:
        table.add_row(record.name, record.record_type, str(record.ttl), record.value)

    console.print(table)
