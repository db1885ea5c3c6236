"""
Contract reader - independent ERC-20 read calls.

Each query gets its own result slot. A failing call is recorded in its slot
and the remaining calls still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from eth_abi.exceptions import DecodingError

from .chain.abi import ERC20_ABI
from .chain.address import ZERO_ADDRESS, validate_address
from .chain.rpc import RpcClient
from .errors import ArbkitError

logger = logging.getLogger("arbkit.reader")

DEFAULT_TOKEN_ADDRESS = "0x2bF2A9E3A07B9f75fC1b36D56Efd6999b3AF7951"
DEFAULT_HOLDER_ADDRESS = ZERO_ADDRESS


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one read: ``value`` on success, ``error`` on failure."""

    label: str
    method: str
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def token_queries(holder: str) -> list[tuple[str, str, list]]:
    """(label, method, args) for the standard ERC-20 reads."""
    return [
        ("Token name", "name", []),
        ("Token symbol", "symbol", []),
        ("Decimals", "decimals", []),
        ("Total supply", "totalSupply", []),
        ("Balance", "balanceOf", [holder]),
    ]


def run_query(
    client: RpcClient,
    contract: str,
    label: str,
    method: str,
    args: list,
    abi: list = ERC20_ABI,
) -> QueryResult:
    try:
        value = client.read_contract(contract, method, abi, args)
    except (ArbkitError, DecodingError, ValueError) as exc:
        logger.debug("%s() on %s failed: %s", method, contract, exc)
        return QueryResult(label=label, method=method, error=str(exc))
    return QueryResult(label=label, method=method, value=value)


def read_token_info(
    client: RpcClient,
    contract: str = DEFAULT_TOKEN_ADDRESS,
    holder: str = DEFAULT_HOLDER_ADDRESS,
) -> list[QueryResult]:
    """
    Run name, symbol, decimals, totalSupply and balanceOf(holder).

    Raises:
        InvalidAddressError: If contract or holder is malformed. Per-call
            failures never raise.
    """
    contract = validate_address(contract, "contract")
    holder = validate_address(holder, "holder")
    return [
        run_query(client, contract, label, method, args)
        for label, method, args in token_queries(holder)
    ]
