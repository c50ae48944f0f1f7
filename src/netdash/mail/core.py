"""
Email header parsing for tracing a message's delivery path.
"""

import re
from dataclasses import dataclass, field
from email.parser import HeaderParser
from email.policy import default as default_policy

from netdash.errors import ValidationError
from netdash.subnet.address import is_valid_ipv4
from netdash.subnet.classify import is_private


IPV4_CANDIDATE = re.compile(r"(?<![\d.])(\d{1,3}(?:\.\d{1,3}){3})(?![\d.])")


@dataclass
class ReceivedHop:
    """One Received: header, with the IPv4 addresses it mentions."""
    raw: str
    addresses: list[str] = field(default_factory=list)

    @property
    def public_addresses(self) -> list[str]:
        return [a for a in self.addresses if not is_private(a)]


@dataclass
class EmailTrace:
    """The routing-relevant headers of an email."""
    sender: str = ""
    recipient: str = ""
    subject: str = ""
    date: str = ""
    message_id: str = ""
    received: list[ReceivedHop] = field(default_factory=list)

    @property
    def origin(self) -> str | None:
        """First public address on the path, i.e. the earliest hop."""
        for hop in reversed(self.received):
            if hop.public_addresses:
                return hop.public_addresses[0]
        return None


def extract_ipv4(text: str) -> list[str]:
    """Valid IPv4 addresses in a header, in order, without duplicates."""
    found = []
    for candidate in IPV4_CANDIDATE.findall(text):
        if is_valid_ipv4(candidate) and candidate not in found:
            found.append(candidate)
    return found


def _unfold(value: str) -> str:
    return " ".join(str(value).split())


def parse_headers(text: str) -> EmailTrace:
    """Parse raw email headers.

    Folded headers are unfolded. Received headers are kept in the order
    they appear, newest hop first.

    Raises:
        ValidationError: if there is nothing to parse
    """
    if not text or not text.strip():
        raise ValidationError("Please paste email headers")

    message = HeaderParser(policy=default_policy).parsestr(text.strip() + "\n")
    return EmailTrace(
        sender=_unfold(message.get("From", "")),
        recipient=_unfold(message.get("To", "")),
        subject=_unfold(message.get("Subject", "")),
        date=_unfold(message.get("Date", "")),
        message_id=_unfold(message.get("Message-ID", "")),
        received=[
            ReceivedHop(raw=_unfold(value), addresses=extract_ipv4(str(value)))
            for value in message.get_all("Received") or []
        ],
    )
