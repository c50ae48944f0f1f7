"""
Simulated IP blacklist check.

No DNSBL queries are made: every address is reported as checked and not
listed on each provider. The provider list mirrors the zones a real
check would query.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from netdash.errors import ValidationError
from netdash.validators import is_valid_ip


logger = logging.getLogger(__name__)

BLACKLIST_PROVIDERS = {
    "zen.spamhaus.org": "Spamhaus ZEN",
    "b.barracudacentral.org": "Barracuda",
    "bl.spamcop.net": "SpamCop",
    "dnsbl.sorbs.net": "SORBS",
    "multi.uribl.com": "URIBL",
}


@dataclass
class BlacklistEntry:
    """Outcome for one blacklist provider."""
    name: str
    zone: str
    checked: bool = True
    listed: bool = False


@dataclass
class BlacklistResult:
    """Outcome of checking one IP against every provider."""
    ip: str
    blacklists: list[BlacklistEntry] = field(default_factory=list)

    @property
    def total_checked(self) -> int:
        return sum(1 for b in self.blacklists if b.checked)

    @property
    def total_listed(self) -> int:
        return sum(1 for b in self.blacklists if b.listed)

    @property
    def status(self) -> str:
        return "listed" if self.total_listed else "clean"


class BlacklistChecker:
    """Simulated blacklist checker.

    Args:
        delay: Seconds to wait before answering, to mimic a network check
        providers: Zone -> display name mapping, defaults to BLACKLIST_PROVIDERS
    """

    def __init__(self, delay: float = 0.0, providers: dict[str, str] | None = None):
        self.delay = delay
        self.providers = providers if providers is not None else BLACKLIST_PROVIDERS

    async def check_async(self, ip: str) -> BlacklistResult:
        ip = ip.strip()
        if not ip:
            raise ValidationError("Please enter an IP address")
        if not is_valid_ip(ip):
            raise ValidationError("Please enter a valid IP address")

        if self.delay > 0:
            await asyncio.sleep(self.delay)

        logger.debug("Simulated blacklist check for %s against %d providers", ip, len(self.providers))
        return BlacklistResult(
            ip=ip,
            blacklists=[BlacklistEntry(name=name, zone=zone) for zone, name in self.providers.items()],
        )

    def check(self, ip: str) -> BlacklistResult:
        return asyncio.run(self.check_async(ip))


def check_ip(ip: str) -> BlacklistResult:
    """Check an IP address against the simulated blacklists."""
    return BlacklistChecker().check(ip)
