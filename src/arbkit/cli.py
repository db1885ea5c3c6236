"""
arbkit CLI

Command-line demos against the Arbitrum Sepolia JSON-RPC endpoint.

Commands:
  transfer       - Send ETH and wait for confirmation
  balance        - Show the ETH balance of an address
  gas-fee        - Estimate the fee of a plain transfer
  contract-call  - Read ERC-20 token information
  whoami         - Show the address of the configured key

Each command is also installed as its own program (arb-transfer,
arb-balance, arb-gas-fee, arb-contract-call).
"""

from __future__ import annotations

import logging
import sys

import click

from . import __version__
from .commands import fail
from .commands.balance import balance
from .commands.contract_call import contract_call
from .commands.gas import gas_fee
from .commands.transfer import transfer
from .errors import ArbkitError
from .keys.credentials import EnvCredentialProvider


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(version=__version__, prog_name="arbkit")
@click.option("--verbose", "-v", is_flag=True, help="Log RPC traffic to stderr")
def cli(verbose: bool) -> None:
    """arbkit: Arbitrum Sepolia command-line demos."""
    configure_logging(verbose)


cli.add_command(transfer)
cli.add_command(balance)
cli.add_command(gas_fee)
cli.add_command(contract_call)


@cli.command()
def whoami() -> None:
    """Show the address of the configured PRIVATE_KEY."""
    try:
        address = EnvCredentialProvider().address()
    except ArbkitError as exc:
        fail(exc)
        return
    click.echo(f"Address: {address}")


# ============ Entry Points ============


def _ensure_utf8() -> None:
    # Windows consoles need UTF-8 for the "×" in fee formulas
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass


def main() -> None:
    """arbkit entry point."""
    _ensure_utf8()
    cli()


def transfer_main() -> None:
    _ensure_utf8()
    configure_logging()
    transfer()


def balance_main() -> None:
    _ensure_utf8()
    configure_logging()
    balance()


def gas_fee_main() -> None:
    _ensure_utf8()
    configure_logging()
    gas_fee()


def contract_call_main() -> None:
    _ensure_utf8()
    configure_logging()
    contract_call()


if __name__ == "__main__":
    main()
