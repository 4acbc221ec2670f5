"""Tests for settings and chain configuration."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from paradex_auth.config import ChainConfig, ParadexSettings
from paradex_auth.exceptions import ValidationError


def test_chain_configs():
    assert ChainConfig.testnet().starknet_chain_id == "SN_GOERLI"
    assert ChainConfig.production().starknet_chain_id == "SN_MAIN"
    assert ChainConfig.production().base_url == "https://api.prod.paradex.trade/v1"
    assert ChainConfig.for_environment(" Testnet ").name == "testnet"


def test_unknown_environment():
    with pytest.raises(ValidationError):
        ChainConfig.for_environment("devnet")

    with pytest.raises(PydanticValidationError):
        ParadexSettings(_env_file=None, environment="devnet")


def test_settings_from_prefixed_env(monkeypatch):
    monkeypatch.setenv("PARADEX_ENVIRONMENT", "production")
    monkeypatch.setenv("PARADEX_REQUEST_TIMEOUT", "5")
    settings = ParadexSettings(_env_file=None)

    assert settings.environment == "production"
    assert settings.request_timeout == 5.0
    assert ChainConfig.from_settings(settings).starknet_chain_id == "SN_MAIN"


def test_settings_from_legacy_env_names(monkeypatch):
    monkeypatch.setenv("paradex_account_address", "0x1")
    monkeypatch.setenv("paradex_account_private_key_hex", "0xabc")
    monkeypatch.setenv("eth_account_address", "0x" + "ab" * 20)
    settings = ParadexSettings(_env_file=None)

    assert settings.account_address == "0x1"
    assert settings.private_key.get_secret_value() == "0xabc"
    assert settings.ethereum_account == "0x" + "ab" * 20


def test_repr_hides_private_key():
    settings = ParadexSettings(_env_file=None, account_address="0x1", private_key="0x" + "5" * 63)
    assert "5" * 63 not in repr(settings)
    assert "5" * 63 not in str(settings.private_key)


def test_timeout_bounds():
    with pytest.raises(PydanticValidationError):
        ParadexSettings(_env_file=None, request_timeout=0.1)
