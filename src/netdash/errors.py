"""
Exception hierarchy for netdash.
"""


class NetdashError(Exception):
    """Base exception for all netdash errors."""


class ValidationError(NetdashError, ValueError):
    """Raised when user input is malformed or out of range.

    The message is meant to be shown to the user as-is.
    """


class InvalidAddressError(ValidationError):
    """Raised when a string is not a dotted-quad IPv4 address."""


class InvalidMaskError(ValidationError):
    """Raised when a subnet mask is not a contiguous run of 1-bits."""


class InvalidPrefixError(ValidationError):
    """Raised when a CIDR prefix length is outside 0-32."""


class CapacityExceededError(ValidationError):
    """Raised when VLSM allocations do not fit the available address space."""


class ServiceError(NetdashError):
    """Raised when an external lookup provider fails."""

    def __init__(self, provider: str, cause: Exception | str) -> None:
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider}: {cause}")
