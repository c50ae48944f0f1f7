"""
DNS Lookup Module

DNS-over-HTTPS queries with record type handling from dnspython.
"""

from netdash.dns.core import (
    COMMON_RECORD_TYPES,
    DNSLookupResult,
    DNSRecord,
    DoHClient,
    lookup,
)

__all__ = [
    "COMMON_RECORD_TYPES",
    "DNSLookupResult",
    "DNSRecord",
    "DoHClient",
    "lookup",
]
