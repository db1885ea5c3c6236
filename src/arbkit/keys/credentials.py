"""
ECDSA / secp256k1 credential loading.

The transfer command only needs "something that can sign and report its own
address". Providers:

- EnvCredentialProvider:    PRIVATE_KEY from the environment, optionally
                            seeded from a local .env file
- FileCredentialProvider:   PRIVATE_KEY from a specific dotenv file
- StaticCredentialProvider: an in-memory key (tests)

Dependencies: eth-account, python-dotenv
"""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values, load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..errors import InvalidCredentialFormatError, MissingCredentialError

PRIVATE_KEY_VAR = "PRIVATE_KEY"
DEFAULT_ENV_FILE = Path(".env")

_KEY_RE = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


def account_from_key(private_key: str, source: str = PRIVATE_KEY_VAR) -> LocalAccount:
    """
    Decode a hex private key into a LocalAccount.

    Args:
        private_key: 64 hex digits, 0x prefix optional
        source: Where the key came from (used in error messages only)

    Raises:
        InvalidCredentialFormatError: If the key is not 32 bytes of hex or
            is not a valid secp256k1 scalar
    """
    key = private_key.strip()
    if not _KEY_RE.match(key):
        raise InvalidCredentialFormatError(
            f"{source} is not a valid private key "
            f"(expected 64 hex characters, optionally 0x-prefixed)"
        )
    if not key.startswith("0x"):
        key = "0x" + key
    try:
        return Account.from_key(key)
    except ValueError as exc:
        raise InvalidCredentialFormatError(f"{source} was rejected: {exc}") from exc


class CredentialProvider(ABC):
    """Source of a signing account."""

    @abstractmethod
    def load(self) -> LocalAccount:
        """Return the signing account or raise a credential error."""

    def address(self) -> str:
        return self.load().address


class EnvCredentialProvider(CredentialProvider):
    """
    Read the key from an environment variable.

    If ``env_file`` exists it is loaded first without overriding variables
    already set in the process environment.
    """

    def __init__(
        self,
        var: str = PRIVATE_KEY_VAR,
        env_file: Optional[Union[str, Path]] = DEFAULT_ENV_FILE,
    ) -> None:
        self.var = var
        self.env_file = Path(env_file) if env_file is not None else None

    def load(self) -> LocalAccount:
        if self.env_file is not None and self.env_file.is_file():
            load_dotenv(self.env_file, override=False)

        private_key = os.environ.get(self.var)
        if not private_key:
            raise MissingCredentialError(
                f"{self.var} not found. Set it with: export {self.var}=<hex key> "
                f"or add {self.var}=<hex key> to a .env file"
            )
        return account_from_key(private_key, source=self.var)


class FileCredentialProvider(CredentialProvider):
    """Read the key from a dotenv-format file, ignoring the environment."""

    def __init__(self, path: Union[str, Path], var: str = PRIVATE_KEY_VAR) -> None:
        self.path = Path(path).expanduser()
        self.var = var

    def load(self) -> LocalAccount:
        if not self.path.is_file():
            raise MissingCredentialError(f"Key file not found: {self.path}")

        private_key = dotenv_values(self.path).get(self.var)
        if not private_key:
            raise MissingCredentialError(f"{self.var} not found in {self.path}")
        return account_from_key(private_key, source=f"{self.var} in {self.path}")


class StaticCredentialProvider(CredentialProvider):
    """Hold a key in memory."""

    def __init__(self, private_key: Optional[str]) -> None:
        self._private_key = private_key

    def load(self) -> LocalAccount:
        if not self._private_key:
            raise MissingCredentialError("No private key provided")
        return account_from_key(self._private_key, source="private key")
