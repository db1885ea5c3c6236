__version__ = "0.1.0"

__all__ = [
    # Configuration
    "NetworkConfig",
    # Errors
    "ArbkitError",
    "MissingCredentialError",
    "InvalidCredentialFormatError",
    "InvalidAddressError",
    "InvalidAmountError",
    "RpcConnectionError",
    "RpcError",
    "InsufficientFundsError",
    "SubmissionError",
    "ConfirmationTimeoutError",
    # Credentials
    "CredentialProvider",
    "EnvCredentialProvider",
    "FileCredentialProvider",
    "StaticCredentialProvider",
    # Chain
    "RpcClient",
    "connect",
    "validate_address",
    "parse_ether",
    "format_ether",
    "estimate_fee",
    "check_sufficiency",
    "TransferRequest",
    "Receipt",
    # Flows
    "TransferFlow",
    "TransferResult",
    "TransferState",
    "QueryResult",
    "read_token_info",
]

from .config import NetworkConfig
from .errors import (
    ArbkitError,
    ConfirmationTimeoutError,
    InsufficientFundsError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidCredentialFormatError,
    MissingCredentialError,
    RpcConnectionError,
    RpcError,
    SubmissionError,
)
from .keys.credentials import (
    CredentialProvider,
    EnvCredentialProvider,
    FileCredentialProvider,
    StaticCredentialProvider,
)
from .chain.address import validate_address
from .chain.fees import check_sufficiency, estimate_fee
from .chain.rpc import RpcClient, connect
from .chain.tx import Receipt, TransferRequest
from .chain.units import format_ether, parse_ether
from .reader import QueryResult, read_token_info
from .transfer import TransferFlow, TransferResult, TransferState
