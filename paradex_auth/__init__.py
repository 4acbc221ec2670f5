"""
Paradex Auth Client Library

Stark typed-data signing for Paradex onboarding and JWT authentication.
"""

from .client import ParadexAuthClient
from .config import ChainConfig, ParadexSettings, get_settings
from .models import FIELD_PRIME, AuthToken, Felt, Signature
from .auth import (
    Authenticator,
    Domain,
    MessageHasher,
    SigningIdentity,
    StarkCurve,
    TypedMessage,
    auth_schema,
    onboarding_schema,
)
from .exceptions import (
    ParadexError,
    ValidationError,
    KeyParseError,
    InvalidFieldValue,
    EncodingOverflow,
    AuthenticationConfigError,
    SchemaMismatch,
    SigningError,
    TransportError,
    OnboardingRejectedError,
    AuthRejectedError,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "ParadexAuthClient",

    # Config
    "ChainConfig",
    "ParadexSettings",
    "get_settings",

    # Types
    "FIELD_PRIME",
    "AuthToken",
    "Felt",
    "Signature",

    # Signing
    "Authenticator",
    "Domain",
    "MessageHasher",
    "SigningIdentity",
    "StarkCurve",
    "TypedMessage",
    "auth_schema",
    "onboarding_schema",

    # Exceptions
    "ParadexError",
    "ValidationError",
    "KeyParseError",
    "InvalidFieldValue",
    "EncodingOverflow",
    "AuthenticationConfigError",
    "SchemaMismatch",
    "SigningError",
    "TransportError",
    "OnboardingRejectedError",
    "AuthRejectedError",
]
