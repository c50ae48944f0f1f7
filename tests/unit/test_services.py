"""Unit tests for netdash.services (HTTP mocked with httpx.MockTransport)."""

import httpx
import pytest

from netdash.errors import ServiceError
from netdash.services.ipapi import IPAPIClient
from netdash.services.rdap import RDAPClient, parse_rdap


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _transport(routes: dict[str, object]) -> httpx.MockTransport:
    """Route by host; values are JSON payloads, status codes or exceptions."""
    def handler(request: httpx.Request) -> httpx.Response:
        outcome = routes.get(request.url.host)
        if outcome is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return httpx.Response(outcome, text="unavailable")
        return httpx.Response(200, json=outcome)
    return httpx.MockTransport(handler)


IPWHOIS_PAYLOAD = {
    "ip": "203.0.113.7",
    "success": True,
    "city": "Amsterdam",
    "region": "North Holland",
    "country": "Netherlands",
    "country_code": "NL",
    "continent_code": "EU",
    "postal": "1012",
    "latitude": 52.37,
    "longitude": 4.89,
    "capital": "Amsterdam",
    "connection": {"asn": 64500, "org": "Example Net", "isp": "Example ISP"},
    "timezone": {"id": "Europe/Amsterdam"},
    "currency": {"code": "EUR"},
}

IPAPI_COM_PAYLOAD = {
    "status": "success",
    "query": "203.0.113.8",
    "city": "Berlin",
    "regionName": "Berlin",
    "country": "Germany",
    "countryCode": "DE",
    "org": "Example GmbH",
    "as": "AS64501 Example GmbH",
    "zip": "10115",
    "timezone": "Europe/Berlin",
    "lat": 52.52,
    "lon": 13.40,
}


# ---------------------------------------------------------------------------
# Public IP fallback chain
# ---------------------------------------------------------------------------

def test_public_ip_from_first_provider() -> None:
    client = IPAPIClient(transport=_transport({"ipwho.is": IPWHOIS_PAYLOAD}))
    result = client.get_public_ip()
    assert result.ip == "203.0.113.7"
    assert result.provider == "ipwho.is"
    assert result.country_name == "Netherlands"
    assert result.org == "Example Net"
    assert result.asn == "64500"
    assert result.timezone == "Europe/Amsterdam"
    assert result.currency == "EUR"


def test_public_ip_falls_back_when_first_refuses() -> None:
    client = IPAPIClient(transport=_transport({
        "ipwho.is": {"success": False, "message": "rate limited"},
        "ip-api.com": IPAPI_COM_PAYLOAD,
    }))
    result = client.get_public_ip()
    assert result.ip == "203.0.113.8"
    assert result.provider == "ip-api.com"
    assert result.region == "Berlin"
    assert result.postal == "10115"


def test_public_ip_falls_back_to_last_provider() -> None:
    client = IPAPIClient(transport=_transport({
        "ipwho.is": httpx.ConnectError("down"),
        "ip-api.com": 503,
        "ipapi.co": {"ip": "203.0.113.9", "city": "Paris", "country_name": "France"},
    }))
    result = client.get_public_ip()
    assert result.ip == "203.0.113.9"
    assert result.provider == "ipapi.co"
    assert result.city == "Paris"


def test_public_ip_all_providers_fail() -> None:
    client = IPAPIClient(transport=_transport({
        "ipwho.is": 500,
        "ip-api.com": httpx.ReadTimeout("slow"),
        "ipapi.co": 429,
    }))
    with pytest.raises(ServiceError, match="Unable to fetch Public IP"):
        client.get_public_ip()


def test_client_can_be_reused_across_sync_calls() -> None:
    client = IPAPIClient(transport=_transport({"ipwho.is": IPWHOIS_PAYLOAD}))
    assert client.get_public_ip().ip == client.get_public_ip().ip


# ---------------------------------------------------------------------------
# IP lookup
# ---------------------------------------------------------------------------

def test_lookup() -> None:
    client = IPAPIClient(transport=_transport({"ipapi.co": {
        "ip": "8.8.8.8",
        "city": "Mountain View",
        "country_name": "United States",
        "org": "GOOGLE",
        "asn": "AS15169",
    }}))
    result = client.lookup("8.8.8.8")
    assert result.error is None
    assert result.city == "Mountain View"
    assert result.asn == "AS15169"


def test_lookup_provider_error_payload() -> None:
    client = IPAPIClient(transport=_transport({"ipapi.co": {"error": True, "reason": "Reserved IP Address"}}))
    result = client.lookup("10.0.0.1")
    assert result.error == "Reserved IP Address"


def test_lookup_http_error() -> None:
    client = IPAPIClient(transport=_transport({"ipapi.co": 429}))
    result = client.lookup("8.8.8.8")
    assert result.error.startswith("HTTP 429")


def test_lookup_rejects_invalid_ip_without_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    client = IPAPIClient(transport=httpx.MockTransport(handler))
    result = client.lookup("not-an-ip")
    assert result.error == "Please enter a valid IP address"


# ---------------------------------------------------------------------------
# Proxy check
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("payload,is_proxy,kind,risk", [
    ({"status": "success", "proxy": True, "hosting": False}, True, "Proxy/VPN", "High"),
    ({"status": "success", "proxy": False, "hosting": True}, True, "Hosting/Datacenter", "High"),
    ({"status": "success", "proxy": False, "hosting": False}, False, "Residential", "Low"),
])
def test_check_proxy(payload: dict, is_proxy: bool, kind: str, risk: str) -> None:
    client = IPAPIClient(transport=_transport({"ip-api.com": payload}))
    result = client.check_proxy("198.51.100.1")
    assert result.error is None
    assert result.is_proxy is is_proxy
    assert result.type == kind
    assert result.risk == risk


def test_check_proxy_sends_field_list() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"status": "success"})

    IPAPIClient(transport=httpx.MockTransport(handler)).check_proxy("1.1.1.1")
    assert seen[0].path == "/json/1.1.1.1"
    assert seen[0].params["fields"] == "status,message,proxy,hosting"


def test_check_proxy_failure_status() -> None:
    client = IPAPIClient(transport=_transport({"ip-api.com": {"status": "fail", "message": "private range"}}))
    assert client.check_proxy("10.0.0.1").error == "private range"


# ---------------------------------------------------------------------------
# RDAP WHOIS
# ---------------------------------------------------------------------------

RDAP_PAYLOAD = {
    "ldhName": "EXAMPLE.COM",
    "status": ["client transfer prohibited"],
    "events": [
        {"eventAction": "registration", "eventDate": "1995-08-14T04:00:00Z"},
        {"eventAction": "expiration", "eventDate": "2030-08-13T04:00:00Z"},
        {"eventAction": "last changed", "eventDate": "2024-08-14T07:01:34Z"},
    ],
    "entities": [
        {
            "roles": ["registrar"],
            "vcardArray": ["vcard", [["version", {}, "text", "4.0"], ["fn", {}, "text", "Example Registrar, Inc."]]],
        },
    ],
    "nameservers": [{"ldhName": "A.IANA-SERVERS.NET"}, {"ldhName": "B.IANA-SERVERS.NET"}],
}


def test_parse_rdap() -> None:
    result = parse_rdap("example.com", RDAP_PAYLOAD)
    assert result.registrar == "Example Registrar, Inc."
    assert result.created == "1995-08-14T04:00:00Z"
    assert result.expires == "2030-08-13T04:00:00Z"
    assert result.updated == "2024-08-14T07:01:34Z"
    assert result.status == "client transfer prohibited"
    assert result.nameservers == ["A.IANA-SERVERS.NET", "B.IANA-SERVERS.NET"]


def test_parse_rdap_missing_fields() -> None:
    result = parse_rdap("example.org", {})
    assert result.registrar == "N/A"
    assert result.created == "N/A"
    assert result.status == "Active"
    assert result.nameservers == []


def test_whois_cleans_domain() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=RDAP_PAYLOAD)

    client = RDAPClient(transport=httpx.MockTransport(handler))
    result = client.whois("https://www.example.com/some/page")
    assert seen == ["/domain/example.com"]
    assert result.domain == "example.com"
    assert result.error is None


def test_whois_not_found() -> None:
    client = RDAPClient(transport=_transport({"rdap.org": 404}))
    result = client.whois("no-such-domain.example")
    assert result.error == "Domain information not available"
    assert result.registrar == "N/A"


def test_whois_network_error() -> None:
    client = RDAPClient(transport=_transport({"rdap.org": httpx.ConnectError("down")}))
    result = client.whois("example.com")
    assert result.status == "Error"
    assert result.error == "Failed to retrieve WHOIS information"
