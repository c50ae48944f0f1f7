"""
Subnet calculator entry points.

These are the functions the front end calls; each takes plain values and
returns a frozen result record or raises a ValidationError.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from netdash.errors import ValidationError
from netdash.subnet.classify import Classification, classify
from netdash.subnet.export import CidrRow, IPConversion, build_cidr_table, convert_ip
from netdash.subnet.network import NetworkCalculation, calculate
from netdash.subnet.vlsm import SubnetRequest, VLSMAllocation, allocate


@dataclass(frozen=True)
class CidrInput:
    """Subnet given as a prefix length."""
    value: int | str


@dataclass(frozen=True)
class MaskInput:
    """Subnet given as a dotted-quad mask."""
    value: str


SubnetInput = CidrInput | MaskInput | Mapping[str, Any]


def _normalize_subnet_input(cidr_or_mask: SubnetInput) -> CidrInput | MaskInput:
    if isinstance(cidr_or_mask, (CidrInput, MaskInput)):
        return cidr_or_mask
    if isinstance(cidr_or_mask, Mapping):
        mode = cidr_or_mask.get("mode")
        if mode == "cidr":
            return CidrInput(cidr_or_mask.get("value"))
        if mode == "mask":
            return MaskInput(cidr_or_mask.get("value"))
        raise ValidationError(f"Unknown subnet input mode: {mode!r}")
    if isinstance(cidr_or_mask, int) and not isinstance(cidr_or_mask, bool):
        return CidrInput(cidr_or_mask)
    raise ValidationError("Subnet must be given as a CIDR prefix or a mask")


def calculate_subnet(ip: str, cidr_or_mask: SubnetInput) -> NetworkCalculation:
    """Calculate network information for an address.

    Examples:
        calculate_subnet("192.168.1.100", CidrInput(24))
        calculate_subnet("192.168.1.100", {"mode": "mask", "value": "255.255.255.0"})
    """
    subnet = _normalize_subnet_input(cidr_or_mask)
    if isinstance(subnet, CidrInput):
        if subnet.value is None:
            raise ValidationError("CIDR must be between 0 and 32")
        return calculate(ip, cidr=subnet.value)
    if subnet.value is None:
        raise ValidationError("Invalid subnet mask")
    return calculate(ip, mask=subnet.value)


def calculate_vlsm(
    base_network: str,
    requests: Iterable[SubnetRequest | Mapping[str, Any]],
    *,
    base_prefix: int | str | None = None,
    strict: bool = False,
) -> list[VLSMAllocation]:
    """Allocate VLSM subnets, largest demand first."""
    return allocate(base_network, requests, base_prefix=base_prefix, strict=strict)


def classify_ip(ip: str) -> Classification:
    """Legacy class and RFC1918 status of an address."""
    return classify(ip)


__all__ = [
    "CidrInput",
    "MaskInput",
    "CidrRow",
    "IPConversion",
    "calculate_subnet",
    "calculate_vlsm",
    "classify_ip",
    "convert_ip",
    "build_cidr_table",
]
