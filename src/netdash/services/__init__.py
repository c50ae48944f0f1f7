"""
External API Services Module

Provides clients for the public lookup APIs:
- ipwho.is / ip-api.com / ipapi.co - public IP, geolocation, proxy detection
- rdap.org - domain registration (WHOIS)
"""

from netdash.services.ipapi import (
    IPAPIClient,
    IPLookupResult,
    ProxyCheckResult,
    PublicIPInfo,
)
from netdash.services.rdap import RDAPClient, WhoisResult

__all__ = [
    "IPAPIClient",
    "IPLookupResult",
    "ProxyCheckResult",
    "PublicIPInfo",
    "RDAPClient",
    "WhoisResult",
]
