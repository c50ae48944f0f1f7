"""
VLSM (Variable Length Subnet Masking) allocation.

Requests are served largest first. Each gets the smallest power-of-two
block that holds its hosts plus the network and broadcast addresses, and
blocks are laid out back to back starting at the base network address.
"""

import logging
import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from netaddr import IPNetwork

from netdash.errors import CapacityExceededError, InvalidAddressError, ValidationError
from netdash.subnet.address import MAX_IPV4, IPv4, parse_ipv4
from netdash.subnet.mask import cidr_to_mask, parse_prefix


logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class SubnetRequest:
    """A named subnet and the number of hosts it must hold.

    ``hosts`` is kept as entered; it is read as an integer at allocation
    time, with blank or non-numeric values counting as 0.
    """
    name: str
    hosts: int | str | None = None

    @property
    def hosts_needed(self) -> int:
        return coerce_hosts(self.hosts)


@dataclass(frozen=True)
class VLSMAllocation:
    """One allocated subnet."""
    name: str
    needed: int
    allocated: int
    network_address: str
    cidr: int
    mask: str
    usable_range: str
    broadcast_address: str
    # None when no base prefix was supplied to check against
    within_base: bool | None = None

    @property
    def block_size(self) -> int:
        return 2 ** (32 - self.cidr)

    @property
    def network(self) -> str:
        return f"{self.network_address}/{self.cidr}"


def coerce_hosts(value: Any) -> int:
    """Read a host count the way the form does: blanks and junk become 0.

    Raises:
        ValidationError: for negative host counts
    """
    if value is None or isinstance(value, bool):
        hosts = 0
    elif isinstance(value, int):
        hosts = value
    elif isinstance(value, float):
        hosts = int(value) if math.isfinite(value) else 0
    else:
        # leading integer only, so "3.5" reads as 3 and "12abc" as 12
        match = LEADING_INT.match(str(value))
        hosts = int(match.group(1)) if match else 0
    if hosts < 0:
        raise ValidationError(f"Host count cannot be negative: {value!r}")
    return hosts


def block_for_hosts(hosts: int) -> tuple[int, int]:
    """Smallest block (size, prefix) holding ``hosts`` plus network and broadcast."""
    needed = hosts + 2
    power = 0
    while 2 ** power < needed:
        power += 1
    if power > 32:
        raise CapacityExceededError(f"{hosts} hosts do not fit in an IPv4 network")
    return 2 ** power, 32 - power


def _to_request(item: SubnetRequest | Mapping[str, Any]) -> SubnetRequest:
    if isinstance(item, SubnetRequest):
        return item
    return SubnetRequest(name=str(item.get("name", "")), hosts=item.get("hosts"))


def allocate(
    base_network: str,
    requests: Iterable[SubnetRequest | Mapping[str, Any]],
    *,
    base_prefix: int | str | None = None,
    strict: bool = False,
) -> list[VLSMAllocation]:
    """Allocate subnets for each request out of a base network.

    Requests are sorted by host count, largest first; equal counts keep
    their input order. Results come back in that allocation order.

    Blocks are not checked against the size of the base network unless
    ``base_prefix`` is given. In that case each allocation's
    ``within_base`` says whether it fits, and overflowing blocks are
    logged, or rejected when ``strict`` is set.

    Args:
        base_network: Major network address, dotted quad
        requests: SubnetRequest objects or {"name", "hosts"} mappings
        base_prefix: Prefix length of the major network, if known
        strict: Raise instead of flagging blocks outside the base network

    Raises:
        InvalidAddressError: if the base network is malformed
        ValidationError: if there are no requests or a count is negative
        CapacityExceededError: if a block runs past 255.255.255.255, or
            past the base network in strict mode
    """
    try:
        base = parse_ipv4(base_network)
    except InvalidAddressError as e:
        raise InvalidAddressError("Invalid Major Network IP") from e

    items = [_to_request(r) for r in requests]
    if not items:
        raise ValidationError("At least one subnet is required")

    parent = None
    if base_prefix is not None:
        parent = IPNetwork(f"{base}/{parse_prefix(base_prefix)}")

    # sorted() is stable, so ties stay in input order
    ordered = sorted(
        ((item, item.hosts_needed) for item in items),
        key=lambda pair: pair[1],
        reverse=True,
    )

    cursor = base.to_integer()
    results = []

    for item, hosts in ordered:
        size, prefix = block_for_hosts(hosts)
        last = cursor + size - 1
        if last > MAX_IPV4:
            raise CapacityExceededError(
                f"Subnet {item.name!r} (/{prefix}) runs past the end of the IPv4 address space"
            )

        network = IPv4.from_integer(cursor)
        within = None
        if parent is not None:
            within = parent.first <= cursor and last <= parent.last
            if not within:
                if strict:
                    raise CapacityExceededError(
                        f"Subnet {item.name!r} ({network}/{prefix}) does not fit in {parent.cidr}"
                    )
                logger.warning("Subnet %r (%s/%d) extends past %s", item.name, network, prefix, parent.cidr)

        results.append(VLSMAllocation(
            name=item.name,
            needed=hosts,
            allocated=size - 2,
            network_address=str(network),
            cidr=prefix,
            mask=cidr_to_mask(prefix),
            usable_range=f"{IPv4.from_integer(cursor + 1)} - {IPv4.from_integer(last - 1)}",
            broadcast_address=str(IPv4.from_integer(last)),
            within_base=within,
        ))
        logger.debug("Allocated %s/%d to %r for %d hosts", network, prefix, item.name, hosts)

        cursor += size

    return results


def _default_name(index: int) -> str:
    if index < 26:
        return f"Subnet {chr(ord('A') + index)}"
    return f"Subnet {index + 1}"


@dataclass(frozen=True)
class SubnetPlan:
    """State of the VLSM form: the major network and its subnet list.

    Plans are immutable; every edit returns a new plan.
    """
    base_network: str = ""
    base_prefix: int | str = 24
    requests: tuple[SubnetRequest, ...] = field(
        default_factory=lambda: (SubnetRequest(_default_name(0), ""),)
    )

    def with_base(self, network: str, prefix: int | str | None = None) -> "SubnetPlan":
        if prefix is None:
            return replace(self, base_network=network)
        return replace(self, base_network=network, base_prefix=prefix)

    def add_subnet(self, name: str | None = None, hosts: int | str | None = "") -> "SubnetPlan":
        request = SubnetRequest(name or _default_name(len(self.requests)), hosts)
        return replace(self, requests=self.requests + (request,))

    def remove_subnet(self, index: int) -> "SubnetPlan":
        if not 0 <= index < len(self.requests):
            raise IndexError(f"No subnet at position {index}")
        return replace(self, requests=self.requests[:index] + self.requests[index + 1:])

    def update_subnet(self, index: int, *, name: str | None = None, hosts: Any = None) -> "SubnetPlan":
        if not 0 <= index < len(self.requests):
            raise IndexError(f"No subnet at position {index}")
        current = self.requests[index]
        updated = SubnetRequest(
            name=current.name if name is None else name,
            hosts=current.hosts if hosts is None else hosts,
        )
        return replace(
            self,
            requests=self.requests[:index] + (updated,) + self.requests[index + 1:],
        )

    def allocate(self, strict: bool = False) -> list[VLSMAllocation]:
        prefix = self.base_prefix if self.base_prefix not in (None, "") else None
        return allocate(self.base_network, self.requests, base_prefix=prefix, strict=strict)
