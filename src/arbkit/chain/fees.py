"""Fee arithmetic for plain transfers."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InsufficientFundsError


@dataclass(frozen=True)
class FeeEstimate:
    gas_price: int
    gas_limit: int

    @property
    def fee(self) -> int:
        return estimate_fee(self.gas_price, self.gas_limit)


def estimate_fee(gas_price: int, gas_limit: int) -> int:
    """Maximum fee in wei: gas price × gas limit."""
    if gas_price < 0 or gas_limit < 0:
        raise ValueError("gas price and gas limit must be non-negative")
    return gas_price * gas_limit


def check_sufficiency(balance: int, amount: int, fee: int) -> int:
    """
    Require ``balance >= amount + fee``.

    Returns:
        The required total in wei

    Raises:
        InsufficientFundsError: With required and available amounts in wei
    """
    required = amount + fee
    if balance < required:
        raise InsufficientFundsError(required=required, available=balance)
    return required
