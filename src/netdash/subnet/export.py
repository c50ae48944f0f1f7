"""
Reference tables, address conversions and record export for display.
"""

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

from netdash.errors import InvalidAddressError
from netdash.subnet.address import parse_ipv4
from netdash.subnet.mask import cidr_to_mask
from netdash.subnet.network import total_hosts, usable_hosts


@dataclass(frozen=True)
class CidrRow:
    """One row of the CIDR reference table."""
    cidr: int
    mask: str
    total_hosts: int
    usable_hosts: int


@dataclass(frozen=True)
class IPConversion:
    """An address in each of the notations the converter shows."""
    decimal: str
    binary: str
    hex: str
    integer: int


def build_cidr_table() -> list[CidrRow]:
    """All 33 prefix lengths, /0 first."""
    return [
        CidrRow(
            cidr=prefix,
            mask=cidr_to_mask(prefix),
            total_hosts=total_hosts(prefix),
            usable_hosts=usable_hosts(prefix),
        )
        for prefix in range(33)
    ]


def convert_ip(ip: str) -> IPConversion | None:
    """Convert an address to binary, hex and integer form.

    Returns None for invalid input rather than raising, so the converter
    can be fed partially typed text.
    """
    try:
        address = parse_ipv4(ip)
    except InvalidAddressError:
        return None
    return IPConversion(
        decimal=str(address),
        binary=address.to_binary(),
        hex=address.to_hex(),
        integer=address.to_integer(),
    )


def to_dict(record: Any) -> Any:
    """Turn a result record, or a list of them, into plain data."""
    if isinstance(record, (list, tuple)):
        return [to_dict(item) for item in record]
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    return record


def to_json(record: Any, indent: int | None = 2) -> str:
    return json.dumps(to_dict(record), indent=indent)
