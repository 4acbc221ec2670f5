"""
Configuration management for the Paradex auth client.

Loads settings from environment variables with validation.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ValidationError

TESTNET = "testnet"
PRODUCTION = "production"

# Starknet chain identifiers; felt-encoded into the signing domain
CHAIN_IDS = {
    TESTNET: "SN_GOERLI",
    PRODUCTION: "SN_MAIN",
}

DEFAULT_URLS = {
    TESTNET: "https://api.testnet.paradex.trade/v1",
    PRODUCTION: "https://api.prod.paradex.trade/v1",
}


class ParadexSettings(BaseSettings):
    """
    Paradex auth client settings.

    Loads from environment variables with PARADEX_ prefix. Account fields
    also accept the legacy unprefixed variable names.
    """
    model_config = SettingsConfigDict(
        env_prefix="PARADEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    environment: str = Field(default=TESTNET, description="testnet or production")

    # API URLs
    testnet_url: str = Field(default=DEFAULT_URLS[TESTNET], description="Testnet REST URL")
    production_url: str = Field(default=DEFAULT_URLS[PRODUCTION], description="Production REST URL")

    # Account
    account_address: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("paradex_account_address", "PARADEX_ACCOUNT_ADDRESS"),
        description="Starknet account address"
    )
    private_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("paradex_account_private_key_hex", "PARADEX_PRIVATE_KEY"),
        description="Stark private key (hex)"
    )
    ethereum_account: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("eth_account_address", "PARADEX_ETHEREUM_ACCOUNT"),
        description="Ethereum account used for onboarding"
    )

    # Timeouts
    request_timeout: float = Field(default=30.0, ge=1.0, description="Request timeout (seconds)")
    connect_timeout: float = Field(default=10.0, ge=1.0, description="Connection timeout (seconds)")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_requests: bool = Field(default=False, description="Log all HTTP requests")

    # Metrics
    enable_metrics: bool = Field(default=False, description="Enable Prometheus metrics")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        env = v.strip().lower()
        if env not in CHAIN_IDS:
            raise ValueError(f"environment must be one of {sorted(CHAIN_IDS)}, got {v}")
        return env

    def __repr__(self) -> str:
        """Safe repr without sensitive data."""
        return (
            f"ParadexSettings("
            f"environment={self.environment}, "
            f"account_address={self.account_address}"
            ")"
        )


@dataclass(frozen=True)
class ChainConfig:
    """Venue environment: chain identifier and REST base URL."""
    name: str
    starknet_chain_id: str
    base_url: str

    @classmethod
    def testnet(cls, base_url: Optional[str] = None) -> "ChainConfig":
        return cls(TESTNET, CHAIN_IDS[TESTNET], base_url or DEFAULT_URLS[TESTNET])

    @classmethod
    def production(cls, base_url: Optional[str] = None) -> "ChainConfig":
        return cls(PRODUCTION, CHAIN_IDS[PRODUCTION], base_url or DEFAULT_URLS[PRODUCTION])

    @classmethod
    def for_environment(cls, environment: str, base_url: Optional[str] = None) -> "ChainConfig":
        """
        Build config for a named environment.

        Raises:
            ValidationError: If environment is not supported
        """
        env = environment.strip().lower()
        if env == TESTNET:
            return cls.testnet(base_url)
        if env == PRODUCTION:
            return cls.production(base_url)
        raise ValidationError(f"Unsupported environment: {environment}")

    @classmethod
    def from_settings(cls, settings: ParadexSettings) -> "ChainConfig":
        base_url = settings.production_url if settings.environment == PRODUCTION else settings.testnet_url
        return cls.for_environment(settings.environment, base_url)


def get_settings() -> ParadexSettings:
    """
    Get Paradex settings.

    Returns:
        Validated settings instance
    """
    return ParadexSettings()
