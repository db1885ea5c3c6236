"""
ABI helpers - function selectors, calldata encoding and result decoding.

Only the handful of ERC-20 read methods used by the contract reader are
declared here; encoding itself is done by eth-abi.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from eth_abi import decode, encode
from eth_hash.auto import keccak

# Minimal ERC-20 ABI (read-only methods)
ERC20_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "name",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "symbol",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "decimals",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "totalSupply",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
]


def keccak256(data: bytes) -> bytes:
    """Keccak-256 (NOT NIST SHA3-256; never use hashlib.sha3_256 here)."""
    return keccak(data)


def function_selector(signature: str) -> bytes:
    """First 4 bytes of keccak256 of a canonical signature, e.g. "balanceOf(address)"."""
    return keccak256(signature.encode("utf-8"))[:4]


@dataclass(frozen=True)
class AbiFunction:
    """One ``function`` entry of a contract ABI, reduced to its types."""

    name: str
    input_types: tuple[str, ...]
    output_types: tuple[str, ...]

    @classmethod
    def lookup(cls, abi: list, name: str) -> "AbiFunction":
        for entry in abi:
            if entry.get("type") == "function" and entry.get("name") == name:
                return cls(
                    name=name,
                    input_types=tuple(arg["type"] for arg in entry.get("inputs", [])),
                    output_types=tuple(arg["type"] for arg in entry.get("outputs", [])),
                )
        raise ValueError(f"Function {name} not found in ABI")

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.input_types)})"

    @property
    def selector(self) -> bytes:
        return function_selector(self.signature)

    def encode_call(self, args: Sequence[Any]) -> str:
        """0x-prefixed calldata: selector followed by the encoded arguments."""
        if len(args) != len(self.input_types):
            raise ValueError(
                f"{self.signature} takes {len(self.input_types)} arguments, got {len(args)}"
            )
        payload = encode(list(self.input_types), list(args)) if args else b""
        return "0x" + (self.selector + payload).hex()

    def decode_result(self, data: str) -> Any:
        """
        Decode eth_call return data.

        Returns:
            A single value for one output, a tuple for several, None for none
        """
        if not self.output_types:
            return None
        values = decode(list(self.output_types), bytes.fromhex(data.removeprefix("0x")))
        return values[0] if len(values) == 1 else values


def encode_function_call(abi: list, function_name: str, args: Sequence[Any]) -> str:
    return AbiFunction.lookup(abi, function_name).encode_call(args)


def decode_function_result(abi: list, function_name: str, data: str) -> Any:
    return AbiFunction.lookup(abi, function_name).decode_result(data)
