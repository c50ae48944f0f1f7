"""
Configuration management for netdash.

Loads provider endpoints and runtime settings from environment variables
or a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


ENV_LOCATIONS = [
    Path.home() / ".netdash" / ".env",
    Path.home() / ".config" / "netdash" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found in the common locations."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class NetdashConfig:
    """Provider endpoints and runtime settings."""

    # Public IP / geolocation providers, tried in this order
    ipwhois_url: str = "https://ipwho.is"
    ipapi_com_url: str = "http://ip-api.com/json"
    ipapi_co_url: str = "https://ipapi.co"

    # RDAP bootstrap service for WHOIS
    rdap_url: str = "https://rdap.org"

    # DNS-over-HTTPS JSON endpoint
    doh_url: str = "https://dns.google/resolve"

    http_timeout: float = 10.0
    log_level: str = "INFO"

    # Raise instead of flagging when VLSM blocks overflow the base network
    vlsm_strict: bool = False

    @classmethod
    def from_env(cls) -> "NetdashConfig":
        """Load configuration from environment variables."""
        defaults = cls()
        return cls(
            ipwhois_url=os.getenv("NETDASH_IPWHOIS_URL", defaults.ipwhois_url),
            ipapi_com_url=os.getenv("NETDASH_IPAPI_COM_URL", defaults.ipapi_com_url),
            ipapi_co_url=os.getenv("NETDASH_IPAPI_CO_URL", defaults.ipapi_co_url),
            rdap_url=os.getenv("NETDASH_RDAP_URL", defaults.rdap_url),
            doh_url=os.getenv("NETDASH_DOH_URL", defaults.doh_url),
            http_timeout=_env_float("NETDASH_HTTP_TIMEOUT", defaults.http_timeout),
            log_level=os.getenv("NETDASH_LOG_LEVEL", defaults.log_level).upper(),
            vlsm_strict=_env_bool("NETDASH_VLSM_STRICT", defaults.vlsm_strict),
        )


# Global config instance
_config: NetdashConfig | None = None


def get_config() -> NetdashConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = NetdashConfig.from_env()
    return _config


def set_config(config: NetdashConfig | None) -> None:
    """Set the global configuration instance (None forces a reload)."""
    global _config
    _config = config
