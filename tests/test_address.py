"""Unit tests for address parsing."""

from __future__ import annotations

import pytest

from arbkit.chain.address import ZERO_ADDRESS, is_address, to_checksum_address, validate_address
from arbkit.errors import InvalidAddressError

# EIP-55 reference vectors
CHECKSUMMED = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]


class TestChecksum:
    @pytest.mark.parametrize("address", CHECKSUMMED)
    def test_reference_vectors(self, address: str) -> None:
        assert to_checksum_address(address.lower()) == address

    def test_zero_address(self) -> None:
        assert to_checksum_address(ZERO_ADDRESS) == ZERO_ADDRESS


class TestValidateAddress:
    @pytest.mark.parametrize("address", CHECKSUMMED)
    def test_any_casing_is_accepted(self, address: str) -> None:
        for variant in (address, address.lower(), "0x" + address[2:].upper()):
            parsed = validate_address(variant)
            assert parsed.lower() == address.lower()
            assert parsed == address

    def test_prefix_is_optional(self) -> None:
        assert validate_address(CHECKSUMMED[0][2:]) == CHECKSUMMED[0]

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert validate_address(f"  {CHECKSUMMED[1]}\n") == CHECKSUMMED[1]

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "0x",
            "0x1234",
            "0x" + "a" * 39,
            "0x" + "a" * 41,
            "0x" + "g" * 40,
            "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb",
            "0y" + "a" * 40,
            "not an address",
        ],
    )
    def test_malformed(self, value: str) -> None:
        with pytest.raises(InvalidAddressError) as excinfo:
            validate_address(value, "recipient")
        assert excinfo.value.value == value
        assert excinfo.value.label == "recipient"
        assert "recipient" in str(excinfo.value)

    def test_is_address(self) -> None:
        assert is_address(CHECKSUMMED[0])
        assert not is_address("0x1234")
        assert not is_address(None)  # type: ignore[arg-type]
