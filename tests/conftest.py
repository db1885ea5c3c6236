"""Shared fixtures: an in-process JSON-RPC endpoint built on httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Union

import httpx
import pytest
from eth_abi import encode
from eth_account import Account

from arbkit.chain.abi import function_selector

# Well-known test key (eth-account documentation); never holds real funds.
TEST_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
TEST_ADDRESS = Account.from_key(TEST_PRIVATE_KEY).address

RECIPIENT = "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0"
RPC_URL = "https://rpc.test/arbitrum-sepolia"
TX_HASH = "0x" + "ab" * 32


@dataclass
class RpcFault:
    message: str
    code: int = -32000


Handler = Union[Any, RpcFault, Callable[[list], Any]]


class FakeRpc:
    """
    Minimal JSON-RPC endpoint.

    ``results`` maps a method name to a fixed result, an RpcFault, or a
    callable taking the params list. Unknown methods answer -32601.
    """

    def __init__(self, results: dict[str, Handler] | None = None) -> None:
        self.results: dict[str, Handler] = dict(results or {})
        self.calls: list[tuple[str, list]] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        method, params = payload["method"], payload["params"]
        self.calls.append((method, params))

        if method not in self.results:
            return self._error(payload, RpcFault(f"method {method} not found", -32601))

        result = self.results[method]
        if callable(result):
            result = result(params)
        if isinstance(result, RpcFault):
            return self._error(payload, result)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"], "result": result})

    @staticmethod
    def _error(payload: dict, fault: RpcFault) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": payload["id"],
                "error": {"code": fault.code, "message": fault.message},
            },
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]

    def params_of(self, method: str) -> list[list]:
        return [params for m, params in self.calls if m == method]


def receipt_json(status: str = "0x1", tx_hash: str = TX_HASH) -> dict:
    return {
        "transactionHash": tx_hash,
        "blockNumber": hex(1234),
        "gasUsed": hex(21000),
        "effectiveGasPrice": hex(100_000_000),
        "status": status,
    }


def transfer_chain(
    sender_balance: int = 10**18,
    gas_price: int = 100_000_000,
    receipt: dict | None = None,
) -> FakeRpc:
    """Endpoint that supports one successful transfer from TEST_ADDRESS."""
    balances = {TEST_ADDRESS.lower(): [sender_balance, sender_balance - 10**15]}
    recipient_balances = [0, 10**15]

    def get_balance(params: list) -> str:
        address = params[0].lower()
        if address == TEST_ADDRESS.lower():
            queue = balances[address]
            return hex(queue.pop(0) if len(queue) > 1 else queue[0])
        value = recipient_balances.pop(0) if len(recipient_balances) > 1 else recipient_balances[0]
        return hex(value)

    return FakeRpc(
        {
            "eth_getBalance": get_balance,
            "eth_gasPrice": hex(gas_price),
            "eth_chainId": hex(421614),
            "eth_getTransactionCount": "0x7",
            "eth_sendRawTransaction": TX_HASH,
            "eth_getTransactionReceipt": receipt or receipt_json(),
        }
    )


@pytest.fixture()
def fake_chain() -> FakeRpc:
    return transfer_chain()


def _erc20_returns() -> dict[str, tuple[str, bytes]]:
    return {
        function_selector("name()").hex(): ("name", encode(["string"], ["Test Token"])),
        function_selector("symbol()").hex(): ("symbol", encode(["string"], ["TST"])),
        function_selector("decimals()").hex(): ("decimals", encode(["uint8"], [18])),
        function_selector("totalSupply()").hex(): ("totalSupply", encode(["uint256"], [10**24])),
        function_selector("balanceOf(address)").hex(): ("balanceOf", encode(["uint256"], [42])),
    }


def erc20_chain(failing: frozenset[str] = frozenset(), empty: frozenset[str] = frozenset()) -> FakeRpc:
    """Token endpoint; methods in ``failing`` answer an RPC error, ``empty`` answer 0x."""
    returns = _erc20_returns()

    def eth_call(params: list) -> Any:
        method, encoded = returns[params[0]["data"][2:10]]
        if method in failing:
            return RpcFault(f"execution reverted: {method}")
        if method in empty:
            return "0x"
        return "0x" + encoded.hex()

    return FakeRpc({"eth_call": eth_call})
