"""
DNS lookups over HTTPS (Google's JSON resolver API).
"""

import logging
from dataclasses import dataclass, field

import dns.rcode
import dns.rdatatype
import httpx

from netdash.config import get_config
from netdash.services.base import ServiceClient
from netdash.validators import clean_domain, is_valid_domain


logger = logging.getLogger(__name__)

COMMON_RECORD_TYPES = ["A", "AAAA", "MX", "NS", "TXT", "CNAME", "SOA", "CAA"]


@dataclass
class DNSRecord:
    """A DNS record."""
    name: str
    record_type: str
    ttl: int
    value: str


@dataclass
class DNSLookupResult:
    """Answer to a single DNS query."""
    name: str
    record_type: str
    status: str = "NOERROR"
    records: list[DNSRecord] = field(default_factory=list)
    error: str | None = None


def record_type_name(value: int | str) -> str:
    """Render a numeric or textual RR type as its mnemonic (28 -> AAAA)."""
    try:
        if isinstance(value, str):
            value = dns.rdatatype.from_text(value)
        return dns.rdatatype.to_text(value)
    except (ValueError, dns.rdatatype.UnknownRdatatype):
        return str(value)


class DoHClient(ServiceClient):
    """Client for a DNS-over-HTTPS JSON endpoint."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.url = url or get_config().doh_url

    async def query_async(self, name: str, record_type: str = "A") -> DNSLookupResult:
        """Resolve ``name`` for one record type."""
        name = clean_domain(name)
        record_type = record_type.upper()
        result = DNSLookupResult(name=name, record_type=record_type)

        if not is_valid_domain(name):
            result.error = "Please enter a valid domain name"
            return result
        try:
            dns.rdatatype.from_text(record_type)
        except dns.rdatatype.UnknownRdatatype:
            result.error = f"Unknown record type: {record_type}"
            return result

        client = await self._get_client()
        try:
            resp = await client.get(self.url, params={"name": name, "type": record_type})
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("DNS lookup for %s %s failed: %s", name, record_type, e)
            result.error = f"Failed to lookup DNS: {e}"
            return result

        status = data.get("Status", 0)
        try:
            result.status = dns.rcode.to_text(int(status))
        except ValueError:
            result.status = str(status)

        for answer in data.get("Answer") or []:
            result.records.append(DNSRecord(
                name=answer.get("name", name).rstrip("."),
                record_type=record_type_name(answer.get("type", record_type)),
                ttl=int(answer.get("TTL", 0)),
                value=str(answer.get("data", "")),
            ))

        return result

    def query(self, name: str, record_type: str = "A") -> DNSLookupResult:
        """Synchronous lookup."""
        return self._run(self.query_async(name, record_type))

    async def query_all_async(self, name: str) -> dict[str, DNSLookupResult]:
        """Lookup all common record types for a domain."""
        results = {}
        for rtype in COMMON_RECORD_TYPES:
            results[rtype] = await self.query_async(name, rtype)
        return results

    def query_all(self, name: str) -> dict[str, DNSLookupResult]:
        return self._run(self.query_all_async(name))


def lookup(name: str, record_type: str = "A") -> DNSLookupResult:
    """Perform a DNS lookup."""
    return DoHClient().query(name, record_type)
