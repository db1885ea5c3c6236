"""
JSON-RPC Client for Arbitrum Sepolia.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
Supports balance and gas price queries, read-only contract calls, raw
transaction submission and receipt polling.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from ..errors import ConfirmationTimeoutError, RpcConnectionError, RpcError
from .abi import decode_function_result, encode_function_call

logger = logging.getLogger("arbkit.chain.rpc")


def _validate_url(rpc_url: str) -> str:
    try:
        url = httpx.URL(rpc_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise RpcConnectionError(f"Malformed RPC URL {rpc_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise RpcConnectionError(
            f"Malformed RPC URL {rpc_url!r}: expected http(s)://host/..."
        )
    return rpc_url


def decode_quantity(value: Any, method: str) -> int:
    """Decode a hex QUANTITY from a JSON-RPC result."""
    if not isinstance(value, str):
        raise RpcError(method, f"expected hex quantity, got {value!r}")
    try:
        return int(value, 16)
    except ValueError:
        raise RpcError(method, f"expected hex quantity, got {value!r}") from None


class RpcClient:
    """
    JSON-RPC client bound to a single endpoint.

    Every method issues one request and reflects chain state at call time;
    nothing is cached.

    Args:
        rpc_url: http(s) endpoint URL
        timeout: Per-request HTTP timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.rpc_url = _validate_url(rpc_url)
        self._http = httpx.Client(timeout=timeout, transport=transport)
        self._request_id = 0

    def __enter__(self) -> "RpcClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def request(self, method: str, params: list) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "eth_call")
            params: RPC parameters

        Returns:
            Result field from the RPC response

        Raises:
            RpcError: On transport failure, HTTP error status, malformed
                response or a JSON-RPC error object
        """
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": self._request_id,
        }
        logger.debug("-> %s %s", method, params)

        try:
            response = self._http.post(self.rpc_url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise RpcError(
                method,
                f"HTTP {exc.response.status_code}: {exc.response.text.strip()}",
            ) from exc
        except httpx.HTTPError as exc:
            raise RpcError(method, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise RpcError(method, f"malformed JSON response: {exc}") from exc

        if not isinstance(data, dict):
            raise RpcError(method, f"malformed JSON-RPC response: {data!r}")

        if "error" in data:
            error = data["error"]
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            logger.debug("<- %s error: %s", method, message)
            raise RpcError(method, message)

        result = data.get("result")
        logger.debug("<- %s %s", method, result)
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_balance(self, address: str, block: str = "latest") -> int:
        """Balance of ``address`` in wei."""
        method = "eth_getBalance"
        return decode_quantity(self.request(method, [address, block]), method)

    def get_gas_price(self) -> int:
        """Current gas price in wei."""
        method = "eth_gasPrice"
        return decode_quantity(self.request(method, []), method)

    def get_chain_id(self) -> int:
        method = "eth_chainId"
        return decode_quantity(self.request(method, []), method)

    def get_transaction_count(self, address: str, block: str = "pending") -> int:
        """Nonce for the next transaction from ``address``."""
        method = "eth_getTransactionCount"
        return decode_quantity(self.request(method, [address, block]), method)

    def call(self, to: str, data: str, block: str = "latest") -> str:
        """Raw eth_call; returns 0x-prefixed return data."""
        result = self.request("eth_call", [{"to": to, "data": data}, block])
        return result or "0x"

    def read_contract(
        self,
        contract_address: str,
        function_name: str,
        abi: list,
        args: Optional[list] = None,
    ) -> Any:
        """
        Read from a smart contract (eth_call) and decode the result.

        Raises:
            RpcError: If the call fails or returns no data (no contract
                deployed at the address, or the method does not exist)
        """
        calldata = encode_function_call(abi, function_name, args or [])
        result = self.call(contract_address, calldata)

        if result == "0x":
            raise RpcError(
                "eth_call",
                f"{function_name}() returned no data from {contract_address}",
            )
        return decode_function_result(abi, function_name, result)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def send_raw_transaction(self, raw_tx: str) -> str:
        """
        Send a signed raw transaction.

        Returns:
            Transaction hash (0x-prefixed hex)
        """
        method = "eth_sendRawTransaction"
        tx_hash = self.request(method, [raw_tx])
        if not isinstance(tx_hash, str):
            raise RpcError(method, f"expected transaction hash, got {tx_hash!r}")
        return tx_hash

    def get_transaction_receipt(self, tx_hash: str) -> Optional[dict]:
        """Receipt dict, or None while the transaction is pending."""
        return self.request("eth_getTransactionReceipt", [tx_hash])

    def wait_for_receipt(
        self,
        tx_hash: str,
        timeout: Optional[float] = None,
        poll_interval: float = 1.0,
    ) -> dict:
        """
        Poll until the transaction is mined.

        Args:
            tx_hash: Transaction hash
            timeout: Maximum wait in seconds; None waits indefinitely
            poll_interval: Seconds between polls

        Raises:
            ConfirmationTimeoutError: If timeout elapses first
        """
        start = time.monotonic()
        while True:
            receipt = self.get_transaction_receipt(tx_hash)
            if receipt is not None:
                return receipt
            if timeout is not None and time.monotonic() - start >= timeout:
                raise ConfirmationTimeoutError(tx_hash, timeout)
            time.sleep(poll_interval)


def connect(
    rpc_url: str,
    timeout: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> RpcClient:
    """Bind a client to ``rpc_url``. Raises RpcConnectionError on a malformed URL."""
    logger.debug("Connecting to %s", rpc_url)
    return RpcClient(rpc_url, timeout=timeout, transport=transport)
