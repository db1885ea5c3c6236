"""Conversions between base units (wei) and display units."""

from __future__ import annotations

from decimal import Decimal, DecimalException, localcontext

from ..errors import InvalidAmountError

ETHER_DECIMALS = 18
GWEI_DECIMALS = 9
WEI_PER_ETHER = 10**ETHER_DECIMALS
WEI_PER_GWEI = 10**GWEI_DECIMALS

MAX_UINT256 = 2**256 - 1
_MAX_UINT256_DIGITS = len(str(MAX_UINT256))

# Enough digits for any uint256 at any scale
_PRECISION = 100


def parse_units(value: str, decimals: int) -> int:
    """
    Parse a decimal string into an integer number of base units.

    Works on the digits and exponent of the parsed Decimal directly, so
    extreme exponents ("1e-9999999", "1e999999") are rejected instead of
    underflowing to zero or overflowing the context.

    Raises:
        InvalidAmountError: If value is not a finite non-negative number,
            has more fractional digits than ``decimals`` or does not fit
            in 256 bits
    """
    text = value.strip() if isinstance(value, str) else value
    try:
        amount = Decimal(text)
    except (DecimalException, TypeError, ValueError):
        raise InvalidAmountError(str(value), "not a number") from None

    if not amount.is_finite():
        raise InvalidAmountError(str(value), "not a finite number")
    if amount.is_zero():
        return 0
    if amount.is_signed():
        raise InvalidAmountError(str(value), "must not be negative")

    _, digits, exponent = amount.as_tuple()
    coefficient = "".join(map(str, digits)).rstrip("0")
    exponent += len(digits) - len(coefficient)

    shift = exponent + decimals
    if shift < 0:
        raise InvalidAmountError(str(value), f"more than {decimals} decimal places")
    if len(coefficient) + shift > _MAX_UINT256_DIGITS:
        raise InvalidAmountError(str(value), "out of range")

    units = int(coefficient) * 10**shift
    if units > MAX_UINT256:
        raise InvalidAmountError(str(value), "out of range")
    return units


def parse_ether(value: str) -> int:
    """Parse an ETH amount ("0.001") into wei."""
    return parse_units(value, ETHER_DECIMALS)


def format_units(amount: int, decimals: int) -> str:
    """Exact decimal rendering of ``amount`` base units, without trailing zeros."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        scaled = Decimal(amount).scaleb(-decimals).normalize()
    return f"{scaled:f}"


def format_ether(wei: int) -> str:
    return format_units(wei, ETHER_DECIMALS)


def format_gwei(wei: int) -> str:
    return format_units(wei, GWEI_DECIMALS)

