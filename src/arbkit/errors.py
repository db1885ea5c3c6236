"""
Error taxonomy for arbkit commands.

Every error carries a class-level ``exit_code`` which the CLI uses as the
process exit status.
"""

from __future__ import annotations


class ArbkitError(RuntimeError):
    exit_code: int = 1


class MissingCredentialError(ArbkitError):
    exit_code = 2


class InvalidCredentialFormatError(ArbkitError):
    exit_code = 2


class InvalidAddressError(ArbkitError):
    exit_code = 3

    def __init__(self, value: str, label: str = "address") -> None:
        self.value = value
        self.label = label
        super().__init__(f"Invalid {label} address: {value!r}")


class InvalidAmountError(ArbkitError):
    exit_code = 3

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid amount {value!r}: {reason}")


class RpcConnectionError(ArbkitError):
    exit_code = 4


class RpcError(ArbkitError):
    """JSON-RPC or transport failure. ``message`` is the endpoint's raw text."""

    exit_code = 5

    def __init__(self, method: str, message: str) -> None:
        self.method = method
        self.message = message
        super().__init__(f"RPC error in {method}: {message}")


class InsufficientFundsError(ArbkitError):
    exit_code = 6

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient funds: need {required} wei, have {available} wei"
        )


class SubmissionError(ArbkitError):
    exit_code = 7


class ConfirmationTimeoutError(ArbkitError, TimeoutError):
    exit_code = 8

    def __init__(self, tx_hash: str, timeout: float) -> None:
        self.tx_hash = tx_hash
        self.timeout = timeout
        super().__init__(f"Transaction {tx_hash} not confirmed within {timeout}s")
