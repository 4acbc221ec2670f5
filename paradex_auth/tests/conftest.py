"""Shared fixtures for Paradex auth tests."""

import pytest

from paradex_auth.config import ChainConfig
from paradex_auth.metrics import Metrics

TEST_PRIVATE_KEY = "0x" + "1234567890abcdef" * 3 + "0123456789abcde"
TEST_ACCOUNT = "0x1"
TEST_ETH_ACCOUNT = "0x" + "ab" * 20
TEST_BASE_URL = "https://api.testnet.paradex.trade/v1"


@pytest.fixture
def private_key() -> str:
    return TEST_PRIVATE_KEY


@pytest.fixture
def account() -> str:
    return TEST_ACCOUNT


@pytest.fixture
def testnet() -> ChainConfig:
    return ChainConfig.testnet(TEST_BASE_URL)


@pytest.fixture
def production() -> ChainConfig:
    return ChainConfig.production()


@pytest.fixture
def metrics() -> Metrics:
    return Metrics(enabled=False)
