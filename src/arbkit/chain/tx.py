"""
Transaction Builder - Build, sign, and send plain ETH transfers.

Uses eth-account for signing and the httpx-based RpcClient for sending.
Transactions use legacy gas pricing; the gas price is read fresh at signing
time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from eth_account.signers.local import LocalAccount

from ..errors import ArbkitError, RpcError, SubmissionError
from .address import to_checksum_address
from .rpc import RpcClient, decode_quantity

logger = logging.getLogger("arbkit.chain.tx")

_RECEIPT_METHOD = "eth_getTransactionReceipt"


@dataclass(frozen=True)
class TransferRequest:
    """
    An ETH transfer, fixed before signing.

    The sender is implicit: whichever account signs it.
    """

    to: str
    value: int
    gas_limit: int

    def to_tx(self, nonce: int, gas_price: int, chain_id: int) -> dict[str, Any]:
        """Complete the request into an eth-account transaction dict."""
        return {
            "to": to_checksum_address(self.to),
            "value": self.value,
            "gas": self.gas_limit,
            "gasPrice": gas_price,
            "nonce": nonce,
            "chainId": chain_id,
        }


@dataclass(frozen=True)
class Receipt:
    """Confirmation record of a mined transaction."""

    tx_hash: str
    block_number: Optional[int]
    gas_used: int
    effective_gas_price: int
    succeeded: bool

    @property
    def actual_fee(self) -> int:
        """Fee actually paid, in wei."""
        return self.gas_used * self.effective_gas_price

    @classmethod
    def from_rpc(cls, data: dict) -> "Receipt":
        """
        Decode an eth_getTransactionReceipt result.

        Raises:
            RpcError: If the receipt or one of its quantities is malformed
        """
        if not isinstance(data, dict):
            raise RpcError(_RECEIPT_METHOD, f"expected receipt object, got {data!r}")

        def _int(key: str) -> Optional[int]:
            value = data.get(key)
            return decode_quantity(value, _RECEIPT_METHOD) if value else None

        return cls(
            tx_hash=data.get("transactionHash", ""),
            block_number=_int("blockNumber"),
            gas_used=_int("gasUsed") or 0,
            effective_gas_price=_int("effectiveGasPrice") or 0,
            succeeded=_int("status") == 1,
        )


def sign_transfer(
    account: LocalAccount,
    request: TransferRequest,
    nonce: int,
    gas_price: int,
    chain_id: int,
) -> str:
    """
    Sign a transfer.

    Returns:
        0x-prefixed hex encoded signed transaction
    """
    signed = account.sign_transaction(request.to_tx(nonce, gas_price, chain_id))
    return "0x" + bytes(signed.raw_transaction).hex()


def send_transfer(
    client: RpcClient,
    account: LocalAccount,
    request: TransferRequest,
    chain_id: Optional[int] = None,
) -> str:
    """
    Sign a transfer and broadcast it once.

    Nonce, gas price and (when not given) chain id are read from the
    endpoint immediately before signing.

    Returns:
        Transaction hash; this does not imply confirmation

    Raises:
        SubmissionError: If any step fails, carrying the endpoint message
    """
    try:
        nonce = client.get_transaction_count(account.address, "pending")
        gas_price = client.get_gas_price()
        if chain_id is None:
            chain_id = client.get_chain_id()
        raw_tx = sign_transfer(account, request, nonce, gas_price, chain_id)
        logger.debug(
            "Sending transfer nonce=%d gasPrice=%d chainId=%d", nonce, gas_price, chain_id
        )
        return client.send_raw_transaction(raw_tx)
    except ArbkitError as exc:
        raise SubmissionError(f"Transaction submission failed: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise SubmissionError(f"Transaction could not be signed: {exc}") from exc


def wait_for_confirmation(
    client: RpcClient,
    tx_hash: str,
    timeout: Optional[float] = None,
    poll_interval: float = 1.0,
) -> Receipt:
    """Block until mined; see RpcClient.wait_for_receipt."""
    data = client.wait_for_receipt(tx_hash, timeout=timeout, poll_interval=poll_interval)
    receipt = Receipt.from_rpc(data)
    if not receipt.tx_hash:
        receipt = replace(receipt, tx_hash=tx_hash)
    return receipt
