"""
Transfer orchestrator - balance check, fee estimate, submit, confirm.

Flow:
1. Validate the recipient, then load the credential (sender address)
2. Bind the RPC client to the configured endpoint
3. Read the sender balance and the current gas price
4. Require balance >= amount + gas price × gas limit
5. Build, sign and broadcast the transfer (exactly once)
6. Wait for the receipt, then re-read both balances

The balance is checked once; it is not re-verified right before broadcast.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .chain.address import validate_address
from .chain.fees import FeeEstimate, check_sufficiency
from .chain.rpc import connect
from .chain.tx import Receipt, TransferRequest, send_transfer, wait_for_confirmation
from .chain.units import parse_ether
from .config import NetworkConfig
from .keys.credentials import CredentialProvider

logger = logging.getLogger("arbkit.transfer")


class TransferState(enum.Enum):
    INIT = "init"
    ADDRESSES_VALIDATED = "addresses_validated"
    CONNECTED = "connected"
    BALANCE_CHECKED = "balance_checked"
    FEE_ESTIMATED = "fee_estimated"
    SUFFICIENCY_OK = "sufficiency_ok"
    TX_BUILT = "tx_built"
    TX_SUBMITTED = "tx_submitted"
    TX_CONFIRMED = "tx_confirmed"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class TransferResult:
    sender: str
    recipient: str
    amount: int
    balance_before: int
    estimate: FeeEstimate
    tx_hash: str
    receipt: Receipt
    sender_balance_after: int
    recipient_balance_after: int


class TransferReporter:
    """Progress callbacks; the default implementation ignores everything."""

    def addresses(self, sender: str, recipient: str) -> None:
        pass

    def balance(self, balance: int, amount: int) -> None:
        pass

    def fee(self, estimate: FeeEstimate) -> None:
        pass

    def sufficient(self, required: int) -> None:
        pass

    def building(self, request: TransferRequest) -> None:
        pass

    def submitted(self, tx_hash: str, tx_url: str) -> None:
        pass

    def waiting(self, tx_hash: str) -> None:
        pass

    def confirmed(self, receipt: Receipt) -> None:
        pass

    def final_balances(self, sender_balance: int, recipient_balance: int) -> None:
        pass


class TransferFlow:
    """
    One ETH transfer from the credential's account.

    Args:
        config: Endpoint, chain id and gas limit
        credentials: Provider of the signing account
        transport: Optional httpx transport for the RPC client (tests)
        reporter: Progress callbacks
    """

    def __init__(
        self,
        config: NetworkConfig,
        credentials: CredentialProvider,
        transport: Optional[httpx.BaseTransport] = None,
        reporter: Optional[TransferReporter] = None,
    ) -> None:
        self.config = config
        self.credentials = credentials
        self.transport = transport
        self.reporter = reporter or TransferReporter()
        self.state = TransferState.INIT

    def _advance(self, state: TransferState) -> None:
        logger.debug("Transfer state %s -> %s", self.state.name, state.name)
        self.state = state

    def run(
        self,
        recipient: str,
        amount_eth: str,
        timeout: Optional[float] = None,
    ) -> TransferResult:
        """
        Execute the transfer.

        Args:
            recipient: Recipient address text
            amount_eth: Amount in ETH as a decimal string (e.g. "0.001")
            timeout: Confirmation wait limit in seconds; None waits forever

        Raises:
            ArbkitError: Any failure; the flow is left in FAILED
        """
        if self.state is not TransferState.INIT:
            raise RuntimeError("A TransferFlow can only be run once")
        try:
            return self._run(recipient, amount_eth, timeout)
        except BaseException:
            self._advance(TransferState.FAILED)
            raise

    def _run(
        self,
        recipient: str,
        amount_eth: str,
        timeout: Optional[float],
    ) -> TransferResult:
        to = validate_address(recipient, "recipient")
        account = self.credentials.load()
        sender = validate_address(account.address, "sender")
        amount = parse_ether(amount_eth)
        self._advance(TransferState.ADDRESSES_VALIDATED)
        self.reporter.addresses(sender, to)

        with connect(self.config.rpc_url, transport=self.transport) as client:
            self._advance(TransferState.CONNECTED)

            balance = client.get_balance(sender)
            self._advance(TransferState.BALANCE_CHECKED)
            self.reporter.balance(balance, amount)

            estimate = FeeEstimate(client.get_gas_price(), self.config.gas_limit)
            self._advance(TransferState.FEE_ESTIMATED)
            self.reporter.fee(estimate)

            required = check_sufficiency(balance, amount, estimate.fee)
            self._advance(TransferState.SUFFICIENCY_OK)
            self.reporter.sufficient(required)

            request = TransferRequest(to=to, value=amount, gas_limit=self.config.gas_limit)
            self._advance(TransferState.TX_BUILT)
            self.reporter.building(request)

            tx_hash = send_transfer(client, account, request, chain_id=self.config.chain_id)
            self._advance(TransferState.TX_SUBMITTED)
            self.reporter.submitted(tx_hash, self.config.tx_url(tx_hash))

            self.reporter.waiting(tx_hash)
            receipt = wait_for_confirmation(
                client, tx_hash, timeout=timeout, poll_interval=self.config.poll_interval
            )
            self._advance(TransferState.TX_CONFIRMED)
            self.reporter.confirmed(receipt)

            sender_after = client.get_balance(sender)
            recipient_after = client.get_balance(to)
            self.reporter.final_balances(sender_after, recipient_after)
            self._advance(TransferState.DONE)

        return TransferResult(
            sender=sender,
            recipient=to,
            amount=amount,
            balance_before=balance,
            estimate=estimate,
            tx_hash=tx_hash,
            receipt=receipt,
            sender_balance_after=sender_after,
            recipient_balance_after=recipient_after,
        )
