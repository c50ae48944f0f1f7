"""
Classful and private-range classification of IPv4 addresses.

The class rules follow legacy classful addressing on the first octet
only: 0 and 127 are reported as class E rather than being special-cased.
"""

from dataclasses import dataclass

from netdash.subnet.address import IPv4, parse_ipv4


# RFC1918 blocks keyed by first octet, with the text shown to users
PRIVATE_RANGE_LABELS = {
    10: "Class A (10.0.0.0 - 10.255.255.255)",
    172: "Class B (172.16.0.0 - 172.31.255.255)",
    192: "Class C (192.168.0.0 - 192.168.255.255)",
}

PRIVATE_MESSAGE = (
    "This IP is used within a local network (LAN) and is NOT directly "
    "accessible from the internet. It sits behind a NAT (Network Address "
    "Translation) device."
)

PUBLIC_MESSAGE = (
    "This IP is a public address routable on the global internet. It can be "
    "accessed directly from anywhere in the world (unless blocked by firewalls)."
)


@dataclass(frozen=True)
class Classification:
    """Legacy class and RFC1918 status of an address."""
    ip_class: str
    is_private: bool


@dataclass(frozen=True)
class IPTypeResult:
    """Whether an address is private (behind NAT) or public."""
    address: str
    type: str
    range: str
    message: str


def _as_ipv4(ip: str | IPv4) -> IPv4:
    return ip if isinstance(ip, IPv4) else parse_ipv4(ip)


def ip_class(ip: str | IPv4) -> str:
    first = _as_ipv4(ip)[0]
    if 1 <= first <= 126:
        return "A"
    if 128 <= first <= 191:
        return "B"
    if 192 <= first <= 223:
        return "C"
    if 224 <= first <= 239:
        return "D (Multicast)"
    return "E (Reserved)"


def is_private(ip: str | IPv4) -> bool:
    """Check if an address is in RFC1918 private space."""
    first, second = _as_ipv4(ip).octets[:2]
    return (
        first == 10
        or (first == 172 and 16 <= second <= 31)
        or (first == 192 and second == 168)
    )


def classify(ip: str | IPv4) -> Classification:
    address = _as_ipv4(ip)
    return Classification(ip_class=ip_class(address), is_private=is_private(address))


def ip_type(ip: str | IPv4) -> IPTypeResult:
    """Describe an address as private (LAN) or public (internet)."""
    address = _as_ipv4(ip)
    if is_private(address):
        return IPTypeResult(
            address=str(address),
            type="Private (Local)",
            range=PRIVATE_RANGE_LABELS[address[0]],
            message=PRIVATE_MESSAGE,
        )
    return IPTypeResult(
        address=str(address),
        type="Public (Internet)",
        range="Global Internet",
        message=PUBLIC_MESSAGE,
    )
