"""Unit tests for netdash.mail.core."""

import pytest

from netdash.errors import ValidationError
from netdash.mail.core import extract_ipv4, parse_headers


HEADERS = """\
Received: from mx.example.net (mx.example.net [198.51.100.20])
\tby mail.example.org with ESMTPS id abc123
\tfor <bob@example.org>; Mon, 5 Oct 2026 10:00:02 +0000
Received: from relay.internal (relay.internal [10.1.2.3])
\tby mx.example.net; Mon, 5 Oct 2026 10:00:01 +0000
Received: from laptop (dsl.example.com [203.0.113.45])
\tby relay.internal; Mon, 5 Oct 2026 10:00:00 +0000
From: Alice <alice@example.com>
To: Bob <bob@example.org>
Subject: Quarterly
 numbers
Date: Mon, 5 Oct 2026 10:00:00 +0000
Message-ID: <1234@example.com>
"""


def test_parse_headers() -> None:
    trace = parse_headers(HEADERS)
    assert trace.sender == "Alice <alice@example.com>"
    assert trace.recipient == "Bob <bob@example.org>"
    assert trace.subject == "Quarterly numbers"
    assert trace.message_id == "<1234@example.com>"
    assert len(trace.received) == 3
    assert trace.received[0].addresses == ["198.51.100.20"]
    assert trace.received[1].addresses == ["10.1.2.3"]
    assert "\t" not in trace.received[0].raw


def test_origin_is_earliest_public_hop() -> None:
    trace = parse_headers(HEADERS)
    assert trace.origin == "203.0.113.45"
    assert trace.received[1].public_addresses == []


def test_no_received_headers() -> None:
    trace = parse_headers("From: a@example.com\nSubject: hi\n")
    assert trace.received == []
    assert trace.origin is None
    assert trace.recipient == ""


@pytest.mark.parametrize("text", ["", "  \n\t"])
def test_empty_input(text: str) -> None:
    with pytest.raises(ValidationError, match="Please paste email headers"):
        parse_headers(text)


@pytest.mark.parametrize("text,expected", [
    ("from [192.0.2.1] via 192.0.2.1", ["192.0.2.1"]),
    ("version 1.2.3.4.5 and 999.1.1.1", []),
    ("a 8.8.8.8 b 1.1.1.1", ["8.8.8.8", "1.1.1.1"]),
    ("no addresses here", []),
])
def test_extract_ipv4(text: str, expected: list[str]) -> None:
    assert extract_ipv4(text) == expected
