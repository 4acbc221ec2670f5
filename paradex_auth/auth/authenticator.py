"""
Onboarding and auth flows for Paradex.

Onboarding registers the Stark public key for an account; auth exchanges a
time-boxed typed-data signature for a JWT bearer token.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import orjson

from ..api.base import BaseAPIClient
from ..config import ChainConfig
from ..exceptions import AuthRejectedError, OnboardingRejectedError
from ..metrics import Metrics, get_metrics
from ..models import AuthToken, Felt
from ..utils.structured_logging import set_correlation_id
from ..utils.validators import validate_ethereum_address, validate_timestamp
from .hasher import MessageHasher
from .key_manager import SigningIdentity
from .typed_data import AUTH_BODY, AUTH_METHOD, AUTH_PATH, Domain, auth_schema, onboarding_schema

logger = logging.getLogger(__name__)

ONBOARDING_ENDPOINT = "/onboarding"
AUTH_ENDPOINT = "/auth"

# Signature validity window for auth requests; fixed by the venue
AUTH_EXPIRY_SECONDS = 24 * 60 * 60

HEADER_ETHEREUM_ACCOUNT = "PARADEX-ETHEREUM-ACCOUNT"
HEADER_STARKNET_ACCOUNT = "PARADEX-STARKNET-ACCOUNT"
HEADER_STARKNET_SIGNATURE = "PARADEX-STARKNET-SIGNATURE"
HEADER_TIMESTAMP = "PARADEX-TIMESTAMP"
HEADER_SIGNATURE_EXPIRATION = "PARADEX-SIGNATURE-EXPIRATION"


@dataclass(frozen=True)
class SignedRequest:
    """A fully signed request, ready to send. Holds no key material."""
    path: str
    headers: dict[str, str]
    message_hash: Felt
    json_data: Optional[dict[str, Any]] = None
    timestamp: Optional[int] = None
    expiration: Optional[int] = None
    correlation_id: Optional[str] = None


class Authenticator:
    """
    Builds, signs and sends onboarding/auth requests.

    Signing is synchronous and completes before any network await, so a
    cancelled call never leaves partial local state.
    """

    def __init__(
        self,
        api: BaseAPIClient,
        hasher: Optional[MessageHasher] = None,
        metrics: Optional[Metrics] = None,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize authenticator.

        Args:
            api: HTTP client bound to the venue base URL
            hasher: Typed-data hasher (default: StarkCurve-backed)
            metrics: Metrics sink (default: process-wide, disabled)
            clock: Source of unix time for auth timestamps
        """
        self.api = api
        self.hasher = hasher or MessageHasher()
        self.metrics = metrics or get_metrics()
        self.clock = clock

    def build_onboarding_request(
        self,
        identity: SigningIdentity,
        ethereum_account: str,
        chain: ChainConfig
    ) -> SignedRequest:
        """
        Sign the onboarding message.

        Args:
            identity: Signer
            ethereum_account: Ethereum account linked to the Stark key
            chain: Target environment

        Returns:
            Signed POST /onboarding request

        Raises:
            ValidationError: On bad chain or Ethereum address
            SchemaMismatch: If domain hash cross-check fails
            SigningError: If signing fails
        """
        correlation_id = set_correlation_id()
        eth_account = validate_ethereum_address(ethereum_account)
        domain = Domain.for_chain(chain.starknet_chain_id)
        message = onboarding_schema()

        logger.info(f"Onboarding flow started ({correlation_id})")
        logger.info(f"Onboarding typed data: {orjson.dumps(message.to_dict()).decode('utf-8')}")
        message_hash = self.hasher.message_hash(domain, message, identity.account_address)

        signature = identity.sign(message_hash)
        public_key = identity.public_key()

        headers = {
            HEADER_ETHEREUM_ACCOUNT: eth_account,
            HEADER_STARKNET_ACCOUNT: identity.account_address.to_hex(),
            HEADER_STARKNET_SIGNATURE: signature.to_header(),
        }
        return SignedRequest(
            path=ONBOARDING_ENDPOINT,
            headers=headers,
            message_hash=message_hash,
            json_data={"public_key": public_key.to_hex()},
            correlation_id=correlation_id,
        )

    def build_auth_request(
        self,
        identity: SigningIdentity,
        chain: ChainConfig,
        timestamp: Optional[int] = None
    ) -> SignedRequest:
        """
        Sign the auth message for a fresh timestamp/expiration pair.

        Args:
            identity: Signer
            chain: Target environment
            timestamp: Unix seconds (uses clock if None)

        Returns:
            Signed POST /auth request

        Raises:
            InvalidFieldValue: If timestamp is not a non-negative int
            SchemaMismatch: If domain hash cross-check fails
            SigningError: If signing fails
        """
        correlation_id = set_correlation_id()
        if timestamp is None:
            timestamp = int(self.clock())
        timestamp = validate_timestamp(timestamp)
        expiration = timestamp + AUTH_EXPIRY_SECONDS

        domain = Domain.for_chain(chain.starknet_chain_id)
        message = auth_schema(AUTH_METHOD, AUTH_PATH, AUTH_BODY, timestamp, expiration)

        logger.info(f"Auth flow started ({correlation_id})")
        logger.info(f"Auth typed data: {orjson.dumps(message.to_dict()).decode('utf-8')}")
        message_hash = self.hasher.message_hash(domain, message, identity.account_address)

        signature = identity.sign(message_hash)

        headers = {
            HEADER_STARKNET_ACCOUNT: identity.account_address.to_hex(),
            HEADER_STARKNET_SIGNATURE: signature.to_header(),
            HEADER_TIMESTAMP: str(timestamp),
            HEADER_SIGNATURE_EXPIRATION: str(expiration),
        }
        return SignedRequest(
            path=AUTH_ENDPOINT,
            headers=headers,
            message_hash=message_hash,
            timestamp=timestamp,
            expiration=expiration,
            correlation_id=correlation_id,
        )

    async def send_onboarding(self, request: SignedRequest) -> None:
        """
        POST a signed onboarding request.

        Raises:
            OnboardingRejectedError: On non-2xx (already-onboarded accounts included)
            TransportError: On network failure
        """
        if request.correlation_id:
            set_correlation_id(request.correlation_id)
        logger.info(
            f"POST {self.api.base_url}{request.path} with StarkNet account: "
            f"{request.headers[HEADER_STARKNET_ACCOUNT]}"
        )
        start = time.time()
        try:
            response = await self.api.post(request.path, headers=request.headers, json_data=request.json_data)
        finally:
            self.metrics.track_latency("onboarding", time.time() - start)

        if not response.is_success:
            self.metrics.track_request("onboarding", "rejected")
            raise OnboardingRejectedError(
                f"Onboarding failed with {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
                body=response.text,
            )

        self.metrics.track_request("onboarding", "success")
        logger.info("Onboarding successful")

    async def send_auth(self, request: SignedRequest) -> AuthToken:
        """
        POST a signed auth request and parse the JWT.

        Raises:
            AuthRejectedError: On non-2xx or a body without jwt_token
            TransportError: On network failure
        """
        if request.correlation_id:
            set_correlation_id(request.correlation_id)
        logger.info(
            f"POST {self.api.base_url}{request.path} with StarkNet account: "
            f"{request.headers[HEADER_STARKNET_ACCOUNT]}"
        )
        start = time.time()
        try:
            response = await self.api.post(request.path, headers=request.headers)
        finally:
            self.metrics.track_latency("auth", time.time() - start)

        if not response.is_success:
            self.metrics.track_request("auth", "rejected")
            raise AuthRejectedError(
                f"JWT auth failed with {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            payload = self.api.parse_json(response)
            jwt = payload["jwt_token"]
        except (orjson.JSONDecodeError, TypeError, KeyError) as e:
            self.metrics.track_request("auth", "invalid_response")
            raise AuthRejectedError(
                f"Auth response missing jwt_token: {type(e).__name__}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(jwt, str) or not jwt:
            self.metrics.track_request("auth", "invalid_response")
            raise AuthRejectedError(
                "Auth response jwt_token is empty or not a string",
                status_code=response.status_code,
                body=response.text,
            )

        self.metrics.track_request("auth", "success")
        logger.info("JWT token obtained successfully")
        return AuthToken(jwt=jwt, issued_at=request.timestamp, expires_at=request.expiration)

    async def onboard(
        self,
        identity: SigningIdentity,
        ethereum_account: str,
        chain: ChainConfig
    ) -> None:
        """Sign and send onboarding. See build_onboarding_request / send_onboarding."""
        request = self.build_onboarding_request(identity, ethereum_account, chain)
        await self.send_onboarding(request)

    async def authenticate(self, identity: SigningIdentity, chain: ChainConfig) -> AuthToken:
        """Sign and send auth with a fresh timestamp. See build_auth_request / send_auth."""
        request = self.build_auth_request(identity, chain)
        return await self.send_auth(request)
