"""
Commands - CLI implementations for arbkit.

Each module corresponds to one demo program:
- transfer:      Send ETH and wait for confirmation
- balance:       Show the ETH balance of an address
- gas:           Estimate the fee of a plain transfer
- contract_call: Read ERC-20 token information
"""

from __future__ import annotations

import sys
from typing import Optional

import click
import httpx

from ..errors import ArbkitError


def get_transport(ctx: click.Context) -> Optional[httpx.BaseTransport]:
    """httpx transport injected through the click context object, if any."""
    obj = ctx.find_object(dict)
    return obj.get("transport") if obj else None


def fail(exc: ArbkitError) -> None:
    """Print an error and exit with its code."""
    click.secho(f"ERROR: {exc}", fg="red")
    sys.exit(exc.exit_code)
