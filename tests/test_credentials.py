"""Unit tests for credential providers."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from eth_account import Account

from arbkit.errors import InvalidCredentialFormatError, MissingCredentialError
from arbkit.keys.credentials import (
    EnvCredentialProvider,
    FileCredentialProvider,
    StaticCredentialProvider,
    account_from_key,
)
from conftest import TEST_ADDRESS, TEST_PRIVATE_KEY


def _env_without_key() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k != "PRIVATE_KEY"}


class TestAccountFromKey:
    def test_prefixed(self) -> None:
        assert account_from_key(TEST_PRIVATE_KEY).address == TEST_ADDRESS

    def test_unprefixed(self) -> None:
        assert account_from_key(TEST_PRIVATE_KEY[2:]).address == TEST_ADDRESS

    @pytest.mark.parametrize(
        "key",
        [
            "0x1234",
            "0x" + "z" * 64,
            TEST_PRIVATE_KEY + "00",
            "not-a-key",
        ],
    )
    def test_malformed(self, key: str) -> None:
        with pytest.raises(InvalidCredentialFormatError):
            account_from_key(key)

    def test_error_does_not_leak_key(self) -> None:
        bad = "0x" + "ab" * 31 + "zz"
        with pytest.raises(InvalidCredentialFormatError) as excinfo:
            account_from_key(bad)
        assert bad not in str(excinfo.value)

    def test_generated_key_roundtrip(self) -> None:
        generated = Account.create()
        assert account_from_key(generated.key.hex()).address == generated.address


class TestEnvCredentialProvider:
    def test_reads_environment(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"PRIVATE_KEY": TEST_PRIVATE_KEY}):
            provider = EnvCredentialProvider(env_file=tmp_path / "missing.env")
            assert provider.address() == TEST_ADDRESS

    def test_missing(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, _env_without_key(), clear=True):
            provider = EnvCredentialProvider(env_file=tmp_path / "missing.env")
            with pytest.raises(MissingCredentialError, match="PRIVATE_KEY not found"):
                provider.load()

    def test_empty_is_missing(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"PRIVATE_KEY": ""}):
            with pytest.raises(MissingCredentialError):
                EnvCredentialProvider(env_file=None).load()

    def test_invalid(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"PRIVATE_KEY": "0xdeadbeef"}):
            with pytest.raises(InvalidCredentialFormatError):
                EnvCredentialProvider(env_file=None).load()

    def test_seeded_from_dotenv(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"PRIVATE_KEY={TEST_PRIVATE_KEY}\n", encoding="utf-8")
        with patch.dict(os.environ, _env_without_key(), clear=True):
            assert EnvCredentialProvider(env_file=env_file).address() == TEST_ADDRESS

    def test_environment_wins_over_dotenv(self, tmp_path: Path) -> None:
        other = Account.create()
        env_file = tmp_path / ".env"
        env_file.write_text(f"PRIVATE_KEY={other.key.hex()}\n", encoding="utf-8")
        with patch.dict(os.environ, {"PRIVATE_KEY": TEST_PRIVATE_KEY}):
            assert EnvCredentialProvider(env_file=env_file).address() == TEST_ADDRESS

    def test_custom_variable(self) -> None:
        with patch.dict(os.environ, {"ARB_KEY": TEST_PRIVATE_KEY}):
            assert EnvCredentialProvider(var="ARB_KEY", env_file=None).address() == TEST_ADDRESS


class TestFileCredentialProvider:
    def test_reads_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "wallet.env"
        key_file.write_text(f"# test wallet\nPRIVATE_KEY={TEST_PRIVATE_KEY}\n", encoding="utf-8")
        assert FileCredentialProvider(key_file).address() == TEST_ADDRESS

    def test_ignores_environment(self, tmp_path: Path) -> None:
        key_file = tmp_path / "wallet.env"
        key_file.write_text("OTHER=1\n", encoding="utf-8")
        with patch.dict(os.environ, {"PRIVATE_KEY": TEST_PRIVATE_KEY}):
            with pytest.raises(MissingCredentialError, match="not found in"):
                FileCredentialProvider(key_file).load()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MissingCredentialError, match="Key file not found"):
            FileCredentialProvider(tmp_path / "nope.env").load()


class TestStaticCredentialProvider:
    def test_key(self) -> None:
        assert StaticCredentialProvider(TEST_PRIVATE_KEY).address() == TEST_ADDRESS

    def test_none(self) -> None:
        with pytest.raises(MissingCredentialError):
            StaticCredentialProvider(None).load()
