"""Network configuration for the Arbitrum Sepolia demos."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

# Arbitrum Sepolia testnet
DEFAULT_RPC_URL = "https://arbitrum-sepolia-rpc.publicnode.com"
ROLLUP_RPC_URL = "https://sepolia-rollup.arbitrum.io/rpc"
DEFAULT_CHAIN_ID = 421614
DEFAULT_EXPLORER_URL = "https://sepolia.arbiscan.io"

# Plain ETH transfer gas limits
TRANSFER_GAS_LIMIT = 30_000
BASE_TRANSFER_GAS_LIMIT = 21_000


@dataclass(frozen=True)
class NetworkConfig:
    """
    Endpoint and transaction parameters for one command run.

    Attributes:
        rpc_url: JSON-RPC endpoint URL
        chain_id: Chain ID used when signing (None: ask the endpoint)
        gas_limit: Gas limit for a plain transfer
        explorer_url: Block explorer base URL for transaction links
        poll_interval: Seconds between receipt polls
    """

    rpc_url: str = DEFAULT_RPC_URL
    chain_id: Optional[int] = DEFAULT_CHAIN_ID
    gas_limit: int = TRANSFER_GAS_LIMIT
    explorer_url: str = DEFAULT_EXPLORER_URL
    poll_interval: float = 1.0

    @classmethod
    def from_env(cls) -> "NetworkConfig":
        """Build a config from ARBITRUM_SEPOLIA_RPC, CHAIN_ID and TRANSFER_GAS_LIMIT."""
        chain_id = os.environ.get("CHAIN_ID")
        gas_limit = os.environ.get("TRANSFER_GAS_LIMIT")
        return cls(
            rpc_url=os.environ.get("ARBITRUM_SEPOLIA_RPC", DEFAULT_RPC_URL),
            chain_id=int(chain_id) if chain_id else DEFAULT_CHAIN_ID,
            gas_limit=int(gas_limit) if gas_limit else TRANSFER_GAS_LIMIT,
        )

    def with_overrides(self, **changes) -> "NetworkConfig":
        """Return a copy with the non-None values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def tx_url(self, tx_hash: str) -> str:
        return f"{self.explorer_url.rstrip('/')}/tx/{tx_hash}"
