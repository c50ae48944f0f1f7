"""
Subnet calculator CLI commands.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from netdash.config import get_config
from netdash.errors import NetdashError, ValidationError
from netdash.subnet.classify import ip_type
from netdash.subnet.core import (
    CidrInput,
    MaskInput,
    build_cidr_table,
    calculate_subnet,
    calculate_vlsm,
    classify_ip,
    convert_ip,
)
from netdash.subnet.export import to_json
from netdash.subnet.mask import cidr_to_mask, parse_prefix
from netdash.subnet.vlsm import SubnetRequest


def _fail(console: Console, error: Exception) -> None:
    console.print(f"[red]Error:[/red] {error}")
    raise SystemExit(1)


def _parse_request(arg: str) -> SubnetRequest:
    name, sep, hosts = arg.rpartition("=")
    if not sep or not name:
        raise ValidationError(f"Expected NAME=HOSTS, got {arg!r}")
    return SubnetRequest(name=name, hosts=hosts)


@click.group()
def subnet():
    """IPv4 subnet, CIDR and VLSM calculators."""
    pass


@subnet.command()
@click.argument("address")
@click.option("-c", "--cidr", help="Prefix length (0-32)")
@click.option("-m", "--mask", help="Subnet mask, e.g. 255.255.255.0")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def calc(address: str, cidr: str | None, mask: str | None, as_json: bool):
    """Calculate network information for an IP address.

    Examples:
        netdash subnet calc 192.168.1.100 --cidr 24
        netdash subnet calc 10.0.0.5 --mask 255.255.255.254
    """
    console = Console()

    if cidr is None and mask is None:
        cidr = "24"
    if cidr is not None and mask is not None:
        _fail(console, ValidationError("Use either --cidr or --mask, not both"))

    try:
        subnet_input = CidrInput(cidr) if cidr is not None else MaskInput(mask)
        result = calculate_subnet(address, subnet_input)
    except NetdashError as e:
        _fail(console, e)

    if as_json:
        click.echo(to_json(result))
        return

    table = Table(title=f"Subnet Calculator: {result.ip_address}/{result.cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("IP Address", result.ip_address)
    table.add_row("IP Binary", f"[dim]{result.ip_binary}[/dim]")
    table.add_row("Subnet Mask", result.subnet_mask)
    table.add_row("Mask Binary", f"[dim]{result.mask_binary}[/dim]")
    table.add_row("Wildcard Mask", result.wildcard_mask)
    table.add_row("CIDR", f"/{result.cidr}")
    table.add_row("", "")
    table.add_row("Network", result.network_address)
    table.add_row("Broadcast", result.broadcast_address)
    table.add_row("First Usable", result.first_usable)
    table.add_row("Last Usable", result.last_usable)
    table.add_row("Total Hosts", f"{result.total_hosts:,}")
    table.add_row("Usable Hosts", f"{result.usable_hosts:,}")
    table.add_row("", "")
    table.add_row("IP Class", result.ip_class)
    table.add_row(
        "Type",
        "[yellow]Private[/yellow]" if result.is_private else "[green]Public[/green]",
    )

    console.print(table)


@subnet.command()
@click.argument("address")
def convert(address: str):
    """Show an IP address in decimal, binary, hex and integer form.

    Examples:
        netdash subnet convert 192.168.1.1
    """
    console = Console()

    result = convert_ip(address)
    if result is None:
        _fail(console, ValidationError("Invalid IP address format"))

    table = Table(title=f"IP Converter: {address}", show_header=False, box=None)
    table.add_column("Format", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Decimal", result.decimal)
    table.add_row("Binary", result.binary)
    table.add_row("Hexadecimal", result.hex)
    table.add_row("Integer", str(result.integer))

    console.print(table)


@subnet.command()
def table():
    """Print the CIDR reference table (/0 to /32)."""
    console = Console()

    ref = Table(title="CIDR Reference Table", box=None)
    ref.add_column("CIDR", style="cyan")
    ref.add_column("Subnet Mask", style="white")
    ref.add_column("Total Hosts", justify="right")
    ref.add_column("Usable Hosts", justify="right")

    for row in build_cidr_table():
        ref.add_row(f"/{row.cidr}", row.mask, f"{row.total_hosts:,}", f"{row.usable_hosts:,}")

    console.print(ref)


@subnet.command()
@click.argument("prefix")
def mask(prefix: str):
    """Convert a CIDR prefix to a subnet mask.

    Examples:
        netdash subnet mask 22
        netdash subnet mask /27
    """
    console = Console()

    try:
        value = parse_prefix(prefix)
    except NetdashError as e:
        _fail(console, e)

    console.print(f"[cyan]Subnet Mask:[/cyan] {cidr_to_mask(value)}")


@subnet.command()
@click.argument("addresses", nargs=-1, required=True)
def classify(addresses: tuple[str, ...]):
    """Show the address class and private status of IP addresses.

    Examples:
        netdash subnet classify 8.8.8.8 192.168.1.1 172.20.0.1
    """
    console = Console()

    out = Table(title="IP Classification", box=None)
    out.add_column("Address", style="white")
    out.add_column("Class", style="cyan")
    out.add_column("Private", style="white")

    for addr in addresses:
        try:
            result = classify_ip(addr)
        except NetdashError as e:
            out.add_row(addr, "[red]Error[/red]", f"[red]{e}[/red]")
            continue
        private_str = "[yellow]Yes[/yellow]" if result.is_private else "[green]No[/green]"
        out.add_row(addr, result.ip_class, private_str)

    console.print(out)


@subnet.command("type")
@click.argument("address")
def type_(address: str):
    """Check whether an IP address is private (behind NAT) or public.

    Examples:
        netdash subnet type 10.1.2.3
    """
    console = Console()

    try:
        result = ip_type(address)
    except NetdashError as e:
        _fail(console, e)

    body = f"[bold]{result.type}[/bold]\n[cyan]{result.range}[/cyan]\n\n{result.message}"
    console.print(Panel(body, title=result.address))


@subnet.command()
@click.argument("network")
@click.argument("subnets", nargs=-1, required=True)
@click.option("-p", "--prefix", help="Prefix length of the major network, enables the capacity check")
@click.option("--strict", is_flag=True, help="Fail when subnets overflow the major network")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def vlsm(network: str, subnets: tuple[str, ...], prefix: str | None, strict: bool, as_json: bool):
    """Allocate VLSM subnets out of a major network.

    Each subnet is given as NAME=HOSTS. Subnets are allocated largest
    first.

    Examples:
        netdash subnet vlsm 192.168.1.0 Sales=50 Office=10
        netdash subnet vlsm 10.0.0.0 --prefix 24 LAN=200 WAN=2 --strict
    """
    console = Console()

    strict = strict or get_config().vlsm_strict

    try:
        requests = [_parse_request(s) for s in subnets]
        results = calculate_vlsm(network, requests, base_prefix=prefix, strict=strict)
    except NetdashError as e:
        _fail(console, e)

    if as_json:
        click.echo(to_json(results))
        return

    out = Table(title=f"VLSM Allocation: {network}" + (f"/{prefix.lstrip('/')}" if prefix else ""), box=None)
    out.add_column("Name", style="cyan")
    out.add_column("Needed", justify="right")
    out.add_column("Allocated", justify="right")
    out.add_column("Network", style="white")
    out.add_column("Mask", style="white")
    out.add_column("Usable Range", style="white")
    out.add_column("Broadcast", style="white")

    overflow = 0
    for res in results:
        name = res.name
        if res.within_base is False:
            overflow += 1
            name = f"[red]{res.name}[/red]"
        out.add_row(
            name,
            str(res.needed),
            str(res.allocated),
            res.network,
            res.mask,
            res.usable_range,
            res.broadcast_address,
        )

    console.print(out)

    if overflow:
        console.print(f"\n[yellow]Warning:[/yellow] {overflow} subnet(s) extend past the major network")
