"""
Main Paradex auth client.

Loads account settings, onboards the Stark key when needed and exchanges
typed-data signatures for JWT bearer tokens.
"""

from typing import Optional
import logging

import httpx

from .config import get_settings, ParadexSettings, ChainConfig
from .models import AuthToken
from .auth.authenticator import Authenticator
from .auth.hasher import MessageHasher
from .auth.key_manager import SigningIdentity
from .api.base import BaseAPIClient
from .exceptions import AuthenticationConfigError, OnboardingRejectedError
from .metrics import get_metrics
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


class ParadexAuthClient:
    """
    Onboarding and auth for one Paradex account.

    A fresh SigningIdentity is built for every flow and released as soon as
    the request is signed, before any network I/O.
    """

    def __init__(
        self,
        settings: Optional[ParadexSettings] = None,
        chain: Optional[ChainConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        hasher: Optional[MessageHasher] = None
    ):
        """
        Initialize Paradex auth client.

        Args:
            settings: Optional settings (loads from env if not provided)
            chain: Target environment (derived from settings if None)
            transport: Optional httpx transport
            hasher: Optional typed-data hasher
        """
        self.settings = settings or get_settings()
        self.chain = chain or ChainConfig.from_settings(self.settings)

        self.api = BaseAPIClient(self.chain.base_url, settings=self.settings, transport=transport)
        self.metrics = get_metrics(enabled=self.settings.enable_metrics)
        self.authenticator = Authenticator(self.api, hasher=hasher, metrics=self.metrics)

        logger.info(f"Paradex auth client initialized for {self.chain.name} ({self.chain.starknet_chain_id})")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ParadexSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        configure_logging: bool = True
    ) -> "ParadexAuthClient":
        """
        Build a client from settings, applying the configured log level.

        Args:
            settings: Optional settings (loads from env if not provided)
            transport: Optional httpx transport
            configure_logging: Run setup_logging with settings.log_level
        """
        settings = settings or get_settings()
        if configure_logging:
            setup_logging(level=settings.log_level)
        return cls(settings=settings, transport=transport)

    def _identity(self) -> SigningIdentity:
        """
        Build a signing identity from settings.

        Raises:
            AuthenticationConfigError: If account address or private key is missing
            KeyParseError: If either is malformed
        """
        if not self.settings.account_address or self.settings.private_key is None:
            raise AuthenticationConfigError(
                "Account address and private key are required for signing"
            )
        return SigningIdentity(
            self.settings.private_key.get_secret_value(),
            self.settings.account_address
        )

    async def onboard(self, ethereum_account: Optional[str] = None) -> None:
        """
        Register the Stark public key with the venue.

        Args:
            ethereum_account: Ethereum account (uses settings if None)

        Raises:
            OnboardingRejectedError: On non-2xx, including already-onboarded accounts
            TransportError: On network failure
        """
        ethereum_account = ethereum_account or self.settings.ethereum_account
        if not ethereum_account:
            raise AuthenticationConfigError("Ethereum account is required for onboarding")

        with self._identity() as identity:
            request = self.authenticator.build_onboarding_request(identity, ethereum_account, self.chain)

        await self.authenticator.send_onboarding(request)

    async def authenticate(self) -> AuthToken:
        """
        Obtain a fresh JWT.

        Returns:
            Token valid for the fixed 24h signature window

        Raises:
            AuthRejectedError: On non-2xx or malformed token response
            TransportError: On network failure
        """
        with self._identity() as identity:
            request = self.authenticator.build_auth_request(identity, self.chain)

        return await self.authenticator.send_auth(request)

    async def login(self) -> AuthToken:
        """
        Onboard (when an Ethereum account is configured) then authenticate.

        A rejected onboarding is expected for accounts that are already
        registered; it is logged and auth proceeds.
        """
        if self.settings.ethereum_account:
            logger.info("Performing onboarding...")
            try:
                await self.onboard()
                logger.info("Onboarding completed successfully")
            except OnboardingRejectedError as e:
                logger.warning(f"Onboarding failed (may already be onboarded): {e.message}")

        return await self.authenticate()

    async def close(self) -> None:
        """Close HTTP resources."""
        await self.api.close()

    async def __aenter__(self) -> "ParadexAuthClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
