"""Address parsing and EIP-55 checksumming."""

from __future__ import annotations

import re

from ..errors import InvalidAddressError
from .abi import keccak256

ZERO_ADDRESS = "0x" + "0" * 40

_ADDRESS_RE = re.compile(r"^(0[xX])?[0-9a-fA-F]{40}$")


def to_checksum_address(address: str) -> str:
    """
    EIP-55 form of a 40-hex-digit address.

    A hex letter is upper-cased when the matching nibble of
    keccak256(lowercase hex) is 8 or more.
    """
    hex_digits = address.lower().removeprefix("0x")
    nibbles = keccak256(hex_digits.encode("ascii")).hex()
    return "0x" + "".join(
        digit.upper() if int(nibble, 16) >= 8 else digit
        for digit, nibble in zip(hex_digits, nibbles)
    )


def is_address(value: str) -> bool:
    return isinstance(value, str) and bool(_ADDRESS_RE.match(value.strip()))


def validate_address(value: str, label: str = "address") -> str:
    """
    Parse a 20-byte hex address.

    Any casing is accepted; the 0x prefix is optional.

    Args:
        value: Address text
        label: Role of the address ("sender", "recipient", ...) for errors

    Returns:
        0x-prefixed checksummed address

    Raises:
        InvalidAddressError: If value is not 40 hex digits
    """
    if not is_address(value):
        raise InvalidAddressError(value, label)
    return to_checksum_address(value.strip())
