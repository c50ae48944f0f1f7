"""
Conversion between CIDR prefix lengths and dotted-quad subnet masks.
"""

import re

from netdash.errors import InvalidAddressError, InvalidMaskError, InvalidPrefixError
from netdash.subnet.address import IPv4, parse_ipv4


CONTIGUOUS_MASK = re.compile(r"^1*0*$")


def _check_prefix(prefix: int) -> int:
    if isinstance(prefix, bool) or not isinstance(prefix, int) or not 0 <= prefix <= 32:
        raise InvalidPrefixError("CIDR must be between 0 and 32")
    return prefix


def cidr_to_ipv4(prefix: int) -> IPv4:
    """Build the subnet mask for a prefix length, eight bits per octet."""
    remaining = _check_prefix(prefix)
    octets = []
    for _ in range(4):
        n = min(remaining, 8)
        octets.append(256 - 2 ** (8 - n))
        remaining -= n
    return IPv4(tuple(octets))


def cidr_to_mask(prefix: int) -> str:
    """Convert a prefix length (0-32) to a dotted-quad mask.

    >>> cidr_to_mask(22)
    '255.255.252.0'
    """
    return str(cidr_to_ipv4(prefix))


def is_valid_mask(mask: str) -> bool:
    """Check that a string is an IPv4 address made of leading 1s then 0s."""
    try:
        address = parse_ipv4(mask)
    except InvalidAddressError:
        return False
    return CONTIGUOUS_MASK.match(address.to_bits()) is not None


def parse_mask(mask: str) -> IPv4:
    """Parse and validate a subnet mask.

    Raises:
        InvalidMaskError: if the mask is malformed or not contiguous
    """
    if not is_valid_mask(mask):
        raise InvalidMaskError("Invalid subnet mask")
    return parse_ipv4(mask)


def mask_to_cidr(mask: str | IPv4) -> int:
    """Count the 1-bits of a mask."""
    address = mask if isinstance(mask, IPv4) else parse_mask(mask)
    return address.to_bits().count("1")


def wildcard_mask(mask: str | IPv4) -> str:
    """The per-octet complement of a mask (255 - octet)."""
    address = mask if isinstance(mask, IPv4) else parse_mask(mask)
    return str(IPv4(tuple(255 - o for o in address.octets)))


def parse_prefix(value: int | str) -> int:
    """Read a prefix length typed as 24, "24" or "/24".

    Raises:
        InvalidPrefixError: if the value is not a number in 0-32
    """
    if isinstance(value, str):
        text = value.strip().lstrip("/")
        if not text.isascii() or not text.isdigit():
            raise InvalidPrefixError("CIDR must be between 0 and 32")
        value = int(text)
    return _check_prefix(value)
