"""
IPv4 address model.

Dotted-quad parsing with strict canonical-form validation, and the
integer/binary/hex conversions used by the rest of the subnet engine.
"""

from dataclasses import dataclass

from netdash.errors import InvalidAddressError, ValidationError


MAX_IPV4 = 0xFFFFFFFF


@dataclass(frozen=True)
class IPv4:
    """An IPv4 address held as four octets."""
    octets: tuple[int, int, int, int]

    def __post_init__(self):
        if len(self.octets) != 4 or not all(0 <= o <= 255 for o in self.octets):
            raise InvalidAddressError(f"Invalid octets: {self.octets!r}")

    def __str__(self) -> str:
        return ".".join(str(o) for o in self.octets)

    def __getitem__(self, index: int) -> int:
        return self.octets[index]

    def to_binary(self) -> str:
        """Dotted binary form, 8 zero-padded bits per octet."""
        return ".".join(f"{o:08b}" for o in self.octets)

    def to_bits(self) -> str:
        """The 32-bit binary form without separators."""
        return "".join(f"{o:08b}" for o in self.octets)

    def to_hex(self) -> str:
        """Dotted uppercase hex form, 2 digits per octet."""
        return ".".join(f"{o:02X}" for o in self.octets)

    def to_integer(self) -> int:
        """Unsigned 32-bit integer, first octet most significant."""
        o0, o1, o2, o3 = self.octets
        return (o0 << 24) | (o1 << 16) | (o2 << 8) | o3

    @classmethod
    def from_integer(cls, value: int) -> "IPv4":
        if not 0 <= value <= MAX_IPV4:
            raise ValidationError(f"Integer {value} is outside the IPv4 range")
        return cls((
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        ))


def _parse_octet(token: str) -> int | None:
    # str.isdigit() also accepts non-ASCII digits, which int() would parse
    if not token or not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > 255 or str(value) != token:
        return None
    return value


def parse_ipv4(value: str) -> IPv4:
    """Parse a dotted-quad IPv4 address.

    Each of the four components must be the canonical decimal spelling of
    an integer in 0-255, so "01.2.3.4", "256.0.0.1" and "1.2.3" are all
    rejected.

    Raises:
        InvalidAddressError: if the string is not a valid address
    """
    if not isinstance(value, str):
        raise InvalidAddressError("Invalid IP address format")

    tokens = value.split(".")
    if len(tokens) != 4:
        raise InvalidAddressError("Invalid IP address format")

    octets = []
    for token in tokens:
        octet = _parse_octet(token)
        if octet is None:
            raise InvalidAddressError("Invalid IP address format")
        octets.append(octet)

    return IPv4(tuple(octets))


def is_valid_ipv4(value: str) -> bool:
    """Check whether a string is a valid dotted-quad IPv4 address."""
    try:
        parse_ipv4(value)
    except InvalidAddressError:
        return False
    return True
