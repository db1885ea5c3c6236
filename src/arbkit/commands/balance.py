"""
Balance - Show the ETH balance of one address.
"""

from __future__ import annotations

import click

from ..chain.address import validate_address
from ..chain.rpc import connect
from ..chain.units import format_ether
from ..config import DEFAULT_RPC_URL
from ..errors import ArbkitError
from . import fail, get_transport

DEFAULT_ADDRESS = "0x94a517e9959eed4A8319f73166cb7725ae4cC8f0"


@click.command()
@click.option("--address", default=DEFAULT_ADDRESS, show_default=True, help="Address to query")
@click.option(
    "--rpc-url",
    envvar="ARBITRUM_SEPOLIA_RPC",
    default=DEFAULT_RPC_URL,
    help="Arbitrum Sepolia RPC URL",
)
@click.pass_context
def balance(ctx: click.Context, address: str, rpc_url: str) -> None:
    """Query the ETH balance of an address."""
    try:
        checked = validate_address(address, "query")
        with connect(rpc_url, transport=get_transport(ctx)) as client:
            wei = client.get_balance(checked)
    except ArbkitError as exc:
        fail(exc)
        return

    click.echo(f"Address: {address}")
    click.echo(f"Balance: {format_ether(wei)} ETH")
