"""
Services CLI commands for the public lookup APIs.
"""

import click
from rich.console import Console
from rich.table import Table

from netdash.errors import ServiceError
from netdash.services.ipapi import IPAPIClient
from netdash.services.rdap import RDAPClient


@click.group()
def services():
    """Public IP, geolocation, proxy and WHOIS lookups."""
    pass


@services.command()
def myip():
    """Show this machine's public IP address and location.

    Examples:
        netdash services myip
    """
    console = Console()
    client = IPAPIClient()

    with console.status("[cyan]Fetching public IP...[/cyan]"):
        try:
            result = client.get_public_ip()
        except ServiceError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)

    table = Table(title="Public IP", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("IP", result.ip)
    if result.city:
        table.add_row("City", result.city)
    if result.region:
        table.add_row("Region", result.region)
    if result.country_name:
        country = result.country_name
        if result.country_code:
            country += f" ({result.country_code})"
        table.add_row("Country", country)
    if result.latitude is not None and result.longitude is not None:
        table.add_row("Coordinates", f"{result.latitude}, {result.longitude}")
    if result.postal:
        table.add_row("Postal", result.postal)
    if result.timezone:
        table.add_row("Timezone", result.timezone)
    if result.org:
        table.add_row("Organization", result.org)
    if result.asn:
        table.add_row("ASN", result.asn)
    table.add_row("", "")
    table.add_row("[dim]Provider[/dim]", f"[dim]{result.provider}[/dim]")

    console.print(table)


@services.command()
@click.argument("ip")
def lookup(ip: str):
    """Look up geolocation details for an IP address.

    Examples:
        netdash services lookup 8.8.8.8
    """
    console = Console()
    client = IPAPIClient()

    with console.status(f"[cyan]Looking up {ip}...[/cyan]"):
        result = client.lookup(ip)

    if result.error:
        console.print(f"[red]Error:[/red] {result.error}")
        raise SystemExit(1)

    table = Table(title=f"IP Lookup: {result.ip}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("IP", result.ip)
    for label, value in (
        ("City", result.city),
        ("Region", result.region),
        ("Country", result.country_name),
        ("Postal", result.postal),
        ("Timezone", result.timezone),
        ("Organization", result.org),
        ("ASN", result.asn),
    ):
        if value:
            table.add_row(label, str(value))
    if result.latitude is not None and result.longitude is not None:
        table.add_row("Coordinates", f"{result.latitude}, {result.longitude}")

    console.print(table)


@services.command()
@click.argument("ip")
def proxy(ip: str):
    """Check whether an IP address is a proxy, VPN or datacenter host.

    Examples:
        netdash services proxy 1.1.1.1
    """
    console = Console()
    client = IPAPIClient()

    with console.status(f"[cyan]Checking {ip}...[/cyan]"):
        result = client.check_proxy(ip)

    if result.error:
        console.print(f"[red]Error:[/red] {result.error}")
        raise SystemExit(1)

    risk_color = "red" if result.risk == "High" else "green"
    console.print(f"[cyan]IP:[/cyan]   {result.ip}")
    console.print(f"[cyan]Type:[/cyan] {result.type}")
    console.print(f"[cyan]Risk:[/cyan] [{risk_color}]{result.risk}[/{risk_color}]")


@services.command()
@click.argument("domain")
def whois(domain: str):
    """Look up domain registration data over RDAP.

    Examples:
        netdash services whois example.com
        netdash services whois https://www.example.com/
    """
    console = Console()
    client = RDAPClient()

    with console.status(f"[cyan]Looking up {domain}...[/cyan]"):
        result = client.whois(domain)

    if result.error:
        console.print(f"[yellow]{result.error}[/yellow]")

    table = Table(title=f"WHOIS: {result.domain}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Registrar", result.registrar)
    table.add_row("Created", result.created)
    table.add_row("Expires", result.expires)
    table.add_row("Updated", result.updated)
    table.add_row("Status", result.status)
    table.add_row("Nameservers", ", ".join(result.nameservers) or "N/A")

    console.print(table)

    if result.error:
        raise SystemExit(1)
