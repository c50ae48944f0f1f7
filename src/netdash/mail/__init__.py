"""
Email Trace Module

Parses email headers to show the delivery path of a message.
"""

from netdash.mail.core import EmailTrace, ReceivedHop, extract_ipv4, parse_headers

__all__ = [
    "EmailTrace",
    "ReceivedHop",
    "extract_ipv4",
    "parse_headers",
]
