"""
Domain WHOIS lookups over RDAP.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from netdash.config import get_config
from netdash.services.base import ServiceClient
from netdash.validators import clean_domain


logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


@dataclass
class WhoisResult:
    """Registration details for a domain."""
    domain: str
    registrar: str = NOT_AVAILABLE
    created: str = NOT_AVAILABLE
    expires: str = NOT_AVAILABLE
    updated: str = NOT_AVAILABLE
    status: str = "Active"
    nameservers: list[str] = field(default_factory=list)
    error: str | None = None


def _event_date(events: list[dict[str, Any]], action: str) -> str:
    for event in events:
        if event.get("eventAction") == action:
            return event.get("eventDate") or NOT_AVAILABLE
    return NOT_AVAILABLE


def _registrar_name(entities: list[dict[str, Any]]) -> str:
    """Pull the registrar's display name out of its jCard."""
    ordered = sorted(entities, key=lambda e: "registrar" not in (e.get("roles") or []))
    for entity in ordered:
        vcard = entity.get("vcardArray")
        if not isinstance(vcard, list) or len(vcard) < 2:
            continue
        for prop in vcard[1]:
            if isinstance(prop, list) and len(prop) >= 4 and prop[0] == "fn":
                return str(prop[3])
    return NOT_AVAILABLE


def parse_rdap(domain: str, data: dict[str, Any]) -> WhoisResult:
    events = data.get("events") or []
    statuses = data.get("status") or []
    return WhoisResult(
        domain=domain,
        registrar=_registrar_name(data.get("entities") or []),
        created=_event_date(events, "registration"),
        expires=_event_date(events, "expiration"),
        updated=_event_date(events, "last changed"),
        status=statuses[0] if statuses else "Active",
        nameservers=[ns["ldhName"] for ns in data.get("nameservers") or [] if ns.get("ldhName")],
    )


class RDAPClient(ServiceClient):
    """Client for the rdap.org bootstrap redirector."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.base_url = (base_url or get_config().rdap_url).rstrip("/")

    async def whois_async(self, domain: str) -> WhoisResult:
        """Look up a domain's registration data."""
        name = clean_domain(domain)
        client = await self._get_client()
        try:
            resp = await client.get(f"{self.base_url}/domain/{name}")
        except httpx.HTTPError as e:
            logger.warning("RDAP lookup for %s failed: %s", name, e)
            return WhoisResult(domain=name, status="Error", error="Failed to retrieve WHOIS information")

        if resp.status_code != 200:
            return WhoisResult(
                domain=name,
                status="Unable to retrieve WHOIS data",
                error="Domain information not available",
            )

        try:
            return parse_rdap(name, resp.json())
        except ValueError as e:
            logger.warning("Bad RDAP response for %s: %s", name, e)
            return WhoisResult(domain=name, status="Error", error="Failed to retrieve WHOIS information")

    def whois(self, domain: str) -> WhoisResult:
        """Synchronous WHOIS lookup."""
        return self._run(self.whois_async(domain))
