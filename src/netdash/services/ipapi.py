"""
Public IP, IP geolocation and proxy/VPN detection.

Public IP discovery tries ipwho.is first, then ip-api.com, then ipapi.co.
IP lookups use ipapi.co; proxy checks use ip-api.com's proxy and hosting
flags.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from netdash.config import get_config
from netdash.errors import ServiceError
from netdash.services.base import ServiceClient
from netdash.validators import is_valid_ip


logger = logging.getLogger(__name__)


@dataclass
class PublicIPInfo:
    """Public IP address and its location, normalised across providers."""
    ip: str
    city: str | None = None
    region: str | None = None
    country_name: str | None = None
    country_code: str | None = None
    continent_code: str | None = None
    org: str | None = None
    asn: str | None = None
    postal: str | None = None
    timezone: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    currency: str | None = None
    capital: str | None = None
    provider: str | None = None


@dataclass
class IPLookupResult:
    """Result from an IP geolocation lookup."""
    ip: str
    city: str | None = None
    region: str | None = None
    country_name: str | None = None
    country_code: str | None = None
    org: str | None = None
    asn: str | None = None
    postal: str | None = None
    timezone: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    error: str | None = None


@dataclass
class ProxyCheckResult:
    """Proxy/VPN/datacenter verdict for an IP address."""
    ip: str
    is_proxy: bool = False
    type: str = "Residential"
    risk: str = "Low"
    error: str | None = None


def _from_ipwhois(data: dict[str, Any]) -> PublicIPInfo:
    connection = data.get("connection") or {}
    timezone = data.get("timezone") or {}
    currency = data.get("currency") or {}
    asn = connection.get("asn")
    return PublicIPInfo(
        ip=data["ip"],
        city=data.get("city"),
        region=data.get("region"),
        country_name=data.get("country"),
        country_code=data.get("country_code"),
        continent_code=data.get("continent_code"),
        org=connection.get("org") or connection.get("isp"),
        asn=str(asn) if asn is not None else None,
        postal=data.get("postal"),
        timezone=timezone.get("id"),
        latitude=data.get("latitude"),
        longitude=data.get("longitude"),
        currency=currency.get("code"),
        capital=data.get("capital"),
        provider="ipwho.is",
    )


def _from_ipapi_com(data: dict[str, Any]) -> PublicIPInfo:
    return PublicIPInfo(
        ip=data["query"],
        city=data.get("city"),
        region=data.get("regionName"),
        country_name=data.get("country"),
        country_code=data.get("countryCode"),
        org=data.get("org"),
        asn=data.get("as"),
        postal=data.get("zip"),
        timezone=data.get("timezone"),
        latitude=data.get("lat"),
        longitude=data.get("lon"),
        provider="ip-api.com",
    )


def _from_ipapi_co(data: dict[str, Any]) -> PublicIPInfo:
    return PublicIPInfo(
        ip=data["ip"],
        city=data.get("city"),
        region=data.get("region"),
        country_name=data.get("country_name"),
        country_code=data.get("country_code"),
        continent_code=data.get("continent_code"),
        org=data.get("org"),
        asn=data.get("asn"),
        postal=data.get("postal"),
        timezone=data.get("timezone"),
        latitude=data.get("latitude"),
        longitude=data.get("longitude"),
        currency=data.get("currency"),
        capital=data.get("country_capital"),
        provider="ipapi.co",
    )


class IPAPIClient(ServiceClient):
    """Client for the free IP geolocation providers."""

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        config = get_config()
        self.ipwhois_url = config.ipwhois_url.rstrip("/")
        self.ipapi_com_url = config.ipapi_com_url.rstrip("/")
        self.ipapi_co_url = config.ipapi_co_url.rstrip("/")

    async def _get_json(self, url: str, **params) -> dict[str, Any]:
        client = await self._get_client()
        resp = await client.get(url, params=params or None)
        resp.raise_for_status()
        return resp.json()

    async def get_public_ip_async(self) -> PublicIPInfo:
        """Find this machine's public IP, falling back across providers.

        Raises:
            ServiceError: if every provider failed
        """
        try:
            data = await self._get_json(f"{self.ipwhois_url}/")
            if data.get("success") is not False:
                return _from_ipwhois(data)
            logger.warning("ipwho.is refused the request: %s", data.get("message"))
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning("ipwho.is failed, trying fallback: %s", e)

        try:
            data = await self._get_json(f"{self.ipapi_com_url}/")
            if data.get("status") == "success":
                return _from_ipapi_com(data)
            logger.warning("ip-api.com refused the request: %s", data.get("message"))
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning("ip-api.com failed, trying fallback: %s", e)

        try:
            data = await self._get_json(f"{self.ipapi_co_url}/json/")
            return _from_ipapi_co(data)
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error("All public IP providers failed, last error: %s", e)

        raise ServiceError("public-ip", "Unable to fetch Public IP from any provider")

    def get_public_ip(self) -> PublicIPInfo:
        """Synchronous version of get_public_ip_async."""
        return self._run(self.get_public_ip_async())

    async def lookup_async(self, ip: str) -> IPLookupResult:
        """Look up geolocation details for an IP address."""
        ip = ip.strip()
        result = IPLookupResult(ip=ip)
        if not is_valid_ip(ip):
            result.error = "Please enter a valid IP address"
            return result

        try:
            data = await self._get_json(f"{self.ipapi_co_url}/{ip}/json/")
        except httpx.HTTPStatusError as e:
            result.error = f"HTTP {e.response.status_code}: {e.response.text}"
            return result
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("IP lookup for %s failed: %s", ip, e)
            result.error = str(e)
            return result

        if data.get("error"):
            result.error = data.get("reason") or "Failed to lookup IP"
            return result

        result.city = data.get("city")
        result.region = data.get("region")
        result.country_name = data.get("country_name")
        result.country_code = data.get("country_code")
        result.org = data.get("org")
        result.asn = data.get("asn")
        result.postal = data.get("postal")
        result.timezone = data.get("timezone")
        result.latitude = data.get("latitude")
        result.longitude = data.get("longitude")
        return result

    def lookup(self, ip: str) -> IPLookupResult:
        """Synchronous lookup."""
        return self._run(self.lookup_async(ip))

    async def check_proxy_async(self, ip: str) -> ProxyCheckResult:
        """Classify an IP as proxy/VPN, hosting/datacenter or residential."""
        ip = ip.strip()
        result = ProxyCheckResult(ip=ip)
        if not is_valid_ip(ip):
            result.error = "Please enter a valid IP address"
            return result

        try:
            data = await self._get_json(
                f"{self.ipapi_com_url}/{ip}",
                fields="status,message,proxy,hosting",
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Proxy check for %s failed: %s", ip, e)
            result.error = str(e)
            return result

        if data.get("status") == "fail":
            result.error = data.get("message") or "Failed to check proxy"
            return result

        proxy = bool(data.get("proxy"))
        hosting = bool(data.get("hosting"))
        result.is_proxy = proxy or hosting
        if proxy:
            result.type = "Proxy/VPN"
        elif hosting:
            result.type = "Hosting/Datacenter"
        result.risk = "High" if result.is_proxy else "Low"
        return result

    def check_proxy(self, ip: str) -> ProxyCheckResult:
        """Synchronous proxy check."""
        return self._run(self.check_proxy_async(ip))
