"""Unit tests for netdash.subnet.address."""

import pytest

from netdash.errors import InvalidAddressError, ValidationError
from netdash.subnet.address import (
    IPv4,
    is_valid_ipv4,
    parse_ipv4,
)


# ---------------------------------------------------------------------------
# parse_ipv4
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text,octets", [
    ("192.168.1.100", (192, 168, 1, 100)),
    ("0.0.0.0", (0, 0, 0, 0)),
    ("255.255.255.255", (255, 255, 255, 255)),
    ("10.0.0.1", (10, 0, 0, 1)),
])
def test_parse_valid(text: str, octets: tuple) -> None:
    assert parse_ipv4(text).octets == octets


@pytest.mark.parametrize("text", [
    "256.0.0.1",
    "1.2.3",
    "1.2.3.4.5",
    "01.2.3.4",
    "1.2.3.001",
    "a.b.c.d",
    "1.2.3.-4",
    "1.2.3.+4",
    "1.2..4",
    "",
    " 1.2.3.4",
    "1.2.3.4 ",
    "١.٢.٣.٤",
])
def test_parse_rejects_malformed(text: str) -> None:
    with pytest.raises(InvalidAddressError):
        parse_ipv4(text)
    assert is_valid_ipv4(text) is False


def test_parse_rejects_non_string() -> None:
    with pytest.raises(InvalidAddressError):
        parse_ipv4(None)


def test_invalid_address_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_ipv4("300.1.1.1")


def test_str_is_dotted_decimal() -> None:
    assert str(parse_ipv4("172.16.5.4")) == "172.16.5.4"


def test_octets_out_of_range_rejected() -> None:
    with pytest.raises(InvalidAddressError):
        IPv4((1, 2, 3, 256))


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def test_to_binary() -> None:
    assert parse_ipv4("192.168.1.1").to_binary() == "11000000.10101000.00000001.00000001"


def test_to_binary_zero_padded() -> None:
    assert parse_ipv4("0.1.2.3").to_binary() == "00000000.00000001.00000010.00000011"


def test_to_bits_has_32_chars() -> None:
    bits = parse_ipv4("255.255.255.0").to_bits()
    assert bits == "1" * 24 + "0" * 8


def test_to_hex_uppercase_padded() -> None:
    assert parse_ipv4("192.168.1.10").to_hex() == "C0.A8.01.0A"


def test_to_integer() -> None:
    assert parse_ipv4("192.168.1.1").to_integer() == 3232235777


def test_to_integer_is_unsigned() -> None:
    assert parse_ipv4("255.255.255.255").to_integer() == 4294967295
    assert parse_ipv4("128.0.0.0").to_integer() == 2147483648


def test_from_integer() -> None:
    assert str(IPv4.from_integer(3232235777)) == "192.168.1.1"
    assert str(IPv4.from_integer(0)) == "0.0.0.0"
    assert str(IPv4.from_integer(4294967295)) == "255.255.255.255"


@pytest.mark.parametrize("value", [-1, 4294967296])
def test_from_integer_out_of_range(value: int) -> None:
    with pytest.raises(ValidationError):
        IPv4.from_integer(value)


@pytest.mark.parametrize("text", [
    "0.0.0.0",
    "1.2.3.4",
    "127.0.0.1",
    "128.0.0.0",
    "192.168.1.255",
    "255.255.255.255",
])
def test_integer_round_trip(text: str) -> None:
    address = parse_ipv4(text)
    assert IPv4.from_integer(address.to_integer()) == address
