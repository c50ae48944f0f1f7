"""
Network arithmetic for an IPv4 address and subnet mask.
"""

import logging
from dataclasses import dataclass

from netdash.errors import ValidationError
from netdash.subnet.address import IPv4, parse_ipv4
from netdash.subnet.classify import ip_class, is_private
from netdash.subnet.mask import (
    cidr_to_ipv4,
    mask_to_cidr,
    parse_mask,
    parse_prefix,
    wildcard_mask,
)


logger = logging.getLogger(__name__)

NOT_APPLICABLE = "N/A"


@dataclass(frozen=True)
class NetworkCalculation:
    """Everything the subnet calculator reports for an address/mask pair."""
    ip_address: str
    ip_binary: str
    subnet_mask: str
    mask_binary: str
    cidr: int
    network_address: str
    broadcast_address: str
    first_usable: str
    last_usable: str
    total_hosts: int
    usable_hosts: int
    ip_class: str
    is_private: bool
    wildcard_mask: str


def network_address(ip: IPv4, mask: IPv4) -> IPv4:
    return IPv4(tuple(i & m for i, m in zip(ip.octets, mask.octets)))


def broadcast_address(ip: IPv4, mask: IPv4) -> IPv4:
    return IPv4(tuple(i | (255 - m) for i, m in zip(ip.octets, mask.octets)))


def total_hosts(cidr: int) -> int:
    return 2 ** (32 - cidr)


def usable_hosts(cidr: int) -> int:
    """Host count excluding network and broadcast; 0 for /31 and /32."""
    total = total_hosts(cidr)
    return total - 2 if total > 2 else 0


def calculate(ip: str, *, cidr: int | str | None = None, mask: str | None = None) -> NetworkCalculation:
    """Calculate subnet information for an address.

    Exactly one of ``cidr`` or ``mask`` must be given.

    Args:
        ip: Dotted-quad IPv4 address
        cidr: Prefix length, 0-32
        mask: Dotted-quad subnet mask

    Returns:
        NetworkCalculation for the address

    Raises:
        InvalidAddressError: if the address is malformed
        InvalidPrefixError: if the prefix is outside 0-32
        InvalidMaskError: if the mask is malformed or not contiguous
    """
    if (cidr is None) == (mask is None):
        raise ValidationError("Provide either a CIDR prefix or a subnet mask")

    address = parse_ipv4(ip)

    if cidr is not None:
        prefix = parse_prefix(cidr)
        mask_ip = cidr_to_ipv4(prefix)
    else:
        mask_ip = parse_mask(mask)
        prefix = mask_to_cidr(mask_ip)

    network = network_address(address, mask_ip)
    broadcast = broadcast_address(address, mask_ip)
    total = total_hosts(prefix)

    if total > 2:
        first = str(IPv4(network.octets[:3] + (network[3] + 1,)))
        last = str(IPv4(broadcast.octets[:3] + (broadcast[3] - 1,)))
    else:
        first = last = NOT_APPLICABLE

    logger.debug("Calculated %s/%d -> network %s", address, prefix, network)

    return NetworkCalculation(
        ip_address=str(address),
        ip_binary=address.to_binary(),
        subnet_mask=str(mask_ip),
        mask_binary=mask_ip.to_binary(),
        cidr=prefix,
        network_address=str(network),
        broadcast_address=str(broadcast),
        first_usable=first,
        last_usable=last,
        total_hosts=total,
        usable_hosts=usable_hosts(prefix),
        ip_class=ip_class(address),
        is_private=is_private(address),
        wildcard_mask=wildcard_mask(mask_ip),
    )
