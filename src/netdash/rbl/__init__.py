"""
Blacklist Check Module

Simulated RBL/DNSBL check; see netdash.rbl.core for what is and is not
queried.
"""

from netdash.rbl.core import (
    BLACKLIST_PROVIDERS,
    BlacklistChecker,
    BlacklistEntry,
    BlacklistResult,
    check_ip,
)

__all__ = [
    "BLACKLIST_PROVIDERS",
    "BlacklistChecker",
    "BlacklistEntry",
    "BlacklistResult",
    "check_ip",
]
