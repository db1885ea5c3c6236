"""
Contract Call - Read ERC-20 token information.

Runs name, symbol, decimals, totalSupply and balanceOf independently; a
failed read is reported and does not stop the others.
"""

from __future__ import annotations

import click

from ..chain.rpc import connect
from ..config import ROLLUP_RPC_URL
from ..errors import ArbkitError
from ..reader import DEFAULT_HOLDER_ADDRESS, DEFAULT_TOKEN_ADDRESS, read_token_info
from . import fail, get_transport


@click.command("contract-call")
@click.option("--contract", default=DEFAULT_TOKEN_ADDRESS, show_default=True, help="ERC-20 contract address")
@click.option("--holder", default=DEFAULT_HOLDER_ADDRESS, show_default=True, help="Address for balanceOf")
@click.option(
    "--rpc-url",
    envvar="ARBITRUM_SEPOLIA_RPC",
    default=ROLLUP_RPC_URL,
    help="Arbitrum Sepolia RPC URL",
)
@click.pass_context
def contract_call(ctx: click.Context, contract: str, holder: str, rpc_url: str) -> None:
    """Read token name, symbol, decimals, supply and a balance."""
    click.echo("Reading contract on Arbitrum Sepolia...")
    click.echo("")
    click.echo(f"  Contract: {contract}")
    click.echo(f"  RPC:      {rpc_url}")
    click.echo("")

    try:
        with connect(rpc_url, transport=get_transport(ctx)) as client:
            results = read_token_info(client, contract, holder)
    except ArbkitError as exc:
        fail(exc)
        return

    for result in results:
        if result.ok:
            click.echo(f"  {result.label} ({result.method}): {result.value}")
        else:
            click.secho(
                f"  {result.label} ({result.method}) failed: {result.error}",
                fg="yellow",
            )

    click.echo("")
    failed = sum(1 for r in results if not r.ok)
    if failed:
        click.echo(f"Contract reads complete ({failed} of {len(results)} failed).")
    else:
        click.echo("Contract reads complete.")
