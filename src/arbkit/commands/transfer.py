"""
Transfer - Send ETH on Arbitrum Sepolia.

Usage: arb-transfer <recipient> <amount in ETH>

Checks that the sender can cover amount + estimated fee, signs and sends the
transaction, waits for the receipt and shows the balances afterwards.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from ..chain.fees import FeeEstimate
from ..chain.tx import Receipt, TransferRequest
from ..chain.units import format_ether, format_gwei
from ..config import (
    DEFAULT_CHAIN_ID,
    DEFAULT_EXPLORER_URL,
    DEFAULT_RPC_URL,
    TRANSFER_GAS_LIMIT,
    NetworkConfig,
)
from ..errors import ArbkitError, InsufficientFundsError
from ..keys.credentials import (
    DEFAULT_ENV_FILE,
    CredentialProvider,
    EnvCredentialProvider,
    FileCredentialProvider,
)
from ..transfer import TransferFlow, TransferReporter
from . import fail, get_transport

USAGE = """\
Usage:
  arb-transfer <recipient address> <amount in ETH>

Example:
  arb-transfer 0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0 0.001

Environment:
  export PRIVATE_KEY=your_private_key_here
  or create a .env file in the working directory containing:
  PRIVATE_KEY=your_private_key_here"""


def _eth(wei: int) -> str:
    return f"{format_ether(wei)} ETH ({wei} wei)"


class ClickTransferReporter(TransferReporter):
    """Print each transfer step as it happens."""

    def addresses(self, sender: str, recipient: str) -> None:
        click.echo("Addresses:")
        click.echo(f"  From: {sender}")
        click.echo(f"  To:   {recipient}")

    def balance(self, balance: int, amount: int) -> None:
        click.echo("")
        click.echo("Balance check:")
        click.echo(f"  Sender balance: {_eth(balance)}")
        click.echo(f"  Amount:         {_eth(amount)}")

    def fee(self, estimate: FeeEstimate) -> None:
        click.echo("")
        click.echo("Gas estimate:")
        click.echo(f"  Gas price:      {format_gwei(estimate.gas_price)} gwei")
        click.echo(f"  Gas limit:      {estimate.gas_limit} gas")
        click.echo(f"  Estimated fee:  {_eth(estimate.fee)}")

    def sufficient(self, required: int) -> None:
        click.secho(f"  Balance sufficient (need {_eth(required)})", fg="green")

    def building(self, request: TransferRequest) -> None:
        click.echo("")
        click.echo("Building transaction...")
        click.echo("  Signing and sending...")

    def submitted(self, tx_hash: str, tx_url: str) -> None:
        click.echo("")
        click.secho("Transaction sent!", fg="green")
        click.echo(f"  TX:       {tx_hash}")
        click.echo(f"  Explorer: {tx_url}")

    def waiting(self, tx_hash: str) -> None:
        click.echo("")
        click.echo("Waiting for confirmation...")

    def confirmed(self, receipt: Receipt) -> None:
        click.echo("")
        click.echo("Transaction mined:")
        block = receipt.block_number if receipt.block_number is not None else 0
        click.echo(f"  Block:      {block}")
        click.echo(f"  Gas used:   {receipt.gas_used} gas")
        click.echo(f"  Actual fee: {_eth(receipt.actual_fee)}")
        if receipt.succeeded:
            click.secho("  Status:     success", fg="green")
        else:
            click.secho("  Status:     failed", fg="red")

    def final_balances(self, sender_balance: int, recipient_balance: int) -> None:
        click.echo("")
        click.echo("Balances after transfer:")
        click.echo(f"  Sender:    {format_ether(sender_balance)} ETH")
        click.echo(f"  Recipient: {format_ether(recipient_balance)} ETH")


@click.command()
@click.argument("args", nargs=-1)
@click.option(
    "--rpc-url",
    envvar="ARBITRUM_SEPOLIA_RPC",
    default=DEFAULT_RPC_URL,
    help="Arbitrum Sepolia RPC URL",
)
@click.option("--chain-id", envvar="CHAIN_ID", default=DEFAULT_CHAIN_ID, type=int, help="Chain ID for signing")
@click.option(
    "--gas-limit",
    envvar="TRANSFER_GAS_LIMIT",
    default=TRANSFER_GAS_LIMIT,
    type=click.IntRange(min=21_000),
    show_default=True,
    help="Gas limit",
)
@click.option("--timeout", default=None, type=click.FloatRange(min=0), help="Confirmation timeout in seconds (default: wait forever)")
@click.option(
    "--key-file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read PRIVATE_KEY from this dotenv file instead of the environment",
)
@click.pass_context
def transfer(
    ctx: click.Context,
    args: tuple[str, ...],
    rpc_url: str,
    chain_id: int,
    gas_limit: int,
    timeout: Optional[float],
    key_file: Optional[Path],
) -> None:
    """
    Send ETH to RECIPIENT.

    Takes two arguments: the recipient address and the amount in ETH.
    With fewer arguments the usage text is shown.
    """
    if len(args) < 2:
        click.echo(USAGE)
        return

    recipient, amount = args[0], args[1]

    credentials: CredentialProvider
    if key_file is not None:
        credentials = FileCredentialProvider(key_file)
    else:
        credentials = EnvCredentialProvider(env_file=DEFAULT_ENV_FILE)

    config = NetworkConfig(
        rpc_url=rpc_url,
        chain_id=chain_id,
        gas_limit=gas_limit,
        explorer_url=DEFAULT_EXPLORER_URL,
    )

    click.echo("=== Arbitrum Sepolia ETH Transfer ===")
    click.echo("")

    flow = TransferFlow(
        config,
        credentials,
        transport=get_transport(ctx),
        reporter=ClickTransferReporter(),
    )
    try:
        result = flow.run(recipient, amount, timeout=timeout)
    except InsufficientFundsError as exc:
        click.secho(
            f"ERROR: Insufficient funds: need {_eth(exc.required)}, "
            f"have {_eth(exc.available)}",
            fg="red",
        )
        sys.exit(exc.exit_code)
    except ArbkitError as exc:
        fail(exc)
        return

    if not result.receipt.succeeded:
        click.secho("FAILED: Transaction reverted", fg="red")
        sys.exit(1)
