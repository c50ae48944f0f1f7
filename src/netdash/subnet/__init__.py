"""
Subnet Calculator Module

IPv4 address parsing and conversion, CIDR/mask conversion, network
arithmetic, classful/private classification and VLSM allocation.
"""

from netdash.subnet.address import IPv4, parse_ipv4, is_valid_ipv4
from netdash.subnet.classify import Classification, IPTypeResult, ip_class, ip_type, is_private
from netdash.subnet.core import (
    CidrInput,
    MaskInput,
    calculate_subnet,
    calculate_vlsm,
    classify_ip,
)
from netdash.subnet.export import CidrRow, IPConversion, build_cidr_table, convert_ip
from netdash.subnet.mask import cidr_to_mask, mask_to_cidr, is_valid_mask, wildcard_mask
from netdash.subnet.network import NetworkCalculation
from netdash.subnet.vlsm import SubnetPlan, SubnetRequest, VLSMAllocation

__all__ = [
    "IPv4",
    "parse_ipv4",
    "is_valid_ipv4",
    "Classification",
    "IPTypeResult",
    "ip_class",
    "ip_type",
    "is_private",
    "CidrInput",
    "MaskInput",
    "calculate_subnet",
    "calculate_vlsm",
    "classify_ip",
    "CidrRow",
    "IPConversion",
    "build_cidr_table",
    "convert_ip",
    "cidr_to_mask",
    "mask_to_cidr",
    "is_valid_mask",
    "wildcard_mask",
    "NetworkCalculation",
    "SubnetPlan",
    "SubnetRequest",
    "VLSMAllocation",
]
