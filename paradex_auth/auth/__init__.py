"""Signing and authentication modules for the Paradex auth client."""

from .authenticator import Authenticator, SignedRequest
from .hasher import MessageHasher, MessageHashResult
from .key_manager import SigningIdentity
from .stark_curve import StarkCurve, get_curve
from .typed_data import Domain, StructSchema, TypedMessage, auth_schema, onboarding_schema, type_hash

__all__ = [
    "Authenticator",
    "SignedRequest",
    "MessageHasher",
    "MessageHashResult",
    "SigningIdentity",
    "StarkCurve",
    "get_curve",
    "Domain",
    "StructSchema",
    "TypedMessage",
    "auth_schema",
    "onboarding_schema",
    "type_hash",
]
