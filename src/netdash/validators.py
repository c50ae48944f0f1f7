"""
Input validators shared by the lookup tools.
"""

import re

from netaddr import valid_ipv6

from netdash.subnet.address import is_valid_ipv4


DOMAIN_RE = re.compile(
    r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z0-9][a-z0-9-]{0,61}[a-z0-9]$",
    re.IGNORECASE,
)
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SCHEME_WWW_RE = re.compile(r"^(https?://)?(www\.)?", re.IGNORECASE)


def is_valid_ip(value: str) -> bool:
    """Accept a dotted-quad IPv4 address or an IPv6 address."""
    value = value.strip()
    return is_valid_ipv4(value) or valid_ipv6(value)


def is_valid_domain(value: str) -> bool:
    return bool(DOMAIN_RE.match(value.strip()))


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value.strip()))


def clean_domain(value: str) -> str:
    """Strip a URL down to its host: no scheme, no leading www., no path.

    >>> clean_domain("https://www.example.com/about")
    'example.com'
    """
    return SCHEME_WWW_RE.sub("", value.strip()).split("/")[0]
