"""
Gas - Estimate the fee of a plain ETH transfer.

Fee = current gas price × gas limit (21000 for a basic transfer).
"""

from __future__ import annotations

import click

from ..chain.fees import FeeEstimate
from ..chain.rpc import connect
from ..chain.units import format_ether, format_gwei
from ..config import BASE_TRANSFER_GAS_LIMIT, DEFAULT_RPC_URL
from ..errors import ArbkitError
from . import fail, get_transport


@click.command("gas-fee")
@click.option(
    "--gas-limit",
    default=BASE_TRANSFER_GAS_LIMIT,
    type=click.IntRange(min=0),
    show_default=True,
    help="Gas limit of the transfer",
)
@click.option(
    "--rpc-url",
    envvar="ARBITRUM_SEPOLIA_RPC",
    default=DEFAULT_RPC_URL,
    help="Arbitrum Sepolia RPC URL",
)
@click.pass_context
def gas_fee(ctx: click.Context, gas_limit: int, rpc_url: str) -> None:
    """Show the current gas price and the estimated transfer fee."""
    click.echo("Fetching Arbitrum Sepolia gas information...")
    click.echo("")

    try:
        with connect(rpc_url, transport=get_transport(ctx)) as client:
            estimate = FeeEstimate(client.get_gas_price(), gas_limit)
    except ArbkitError as exc:
        fail(exc)
        return

    fee = estimate.fee
    click.echo("=== Arbitrum Sepolia Gas ===")
    click.echo(f"  Gas price:     {estimate.gas_price} wei")
    click.echo(f"  Gas price:     {format_gwei(estimate.gas_price)} gwei")
    click.echo("")
    click.echo("=== Basic Transfer Fee ===")
    click.echo(f"  Gas limit:     {gas_limit} gas")
    click.echo(f"  Estimated fee: {fee} wei")
    click.echo(f"  Estimated fee: {format_gwei(fee)} gwei")
    click.echo(f"  Estimated fee: {format_ether(fee)} ETH")
    click.echo("")
    click.echo("  fee = gas price × gas limit")
    click.echo(f"  {fee} wei = {estimate.gas_price} wei/gas × {gas_limit} gas")
