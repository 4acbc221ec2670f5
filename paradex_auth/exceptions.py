"""
Custom exceptions for the Paradex auth client.

Provides typed exceptions for every failure the onboarding and auth flows can surface.
"""

from typing import Optional, Any


class ParadexError(Exception):
    """Base exception for all Paradex auth errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ParadexError):
    """Input validation failed."""
    pass


class KeyParseError(ValidationError):
    """Private key or account address is not valid felt hex."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message, {"field": field_name})
        self.field_name = field_name


class InvalidFieldValue(ValidationError):
    """Value cannot be converted to a field element."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message, {"field": field_name})
        self.field_name = field_name


class EncodingOverflow(ValidationError):
    """Encoded value does not fit in the field."""

    def __init__(self, message: str, byte_length: Optional[int] = None):
        super().__init__(message, {"byte_length": byte_length})
        self.byte_length = byte_length


class SchemaMismatch(ParadexError):
    """Schema-driven domain hash disagrees with the independent computation."""

    def __init__(self, message: str, schema_hash: Optional[int] = None,
                 manual_hash: Optional[int] = None):
        super().__init__(message, {"schema_hash": schema_hash, "manual_hash": manual_hash})
        self.schema_hash = schema_hash
        self.manual_hash = manual_hash


class SigningError(ParadexError):
    """Signing primitive failed."""
    pass


class TransportError(ParadexError):
    """HTTP request failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 body: Optional[str] = None):
        super().__init__(message, {"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class OnboardingRejectedError(TransportError):
    """Venue rejected the onboarding request (includes already-onboarded accounts)."""
    pass


class AuthRejectedError(TransportError):
    """Venue rejected the auth request or returned no usable token."""
    pass


class AuthenticationConfigError(ValidationError):
    """Account address, private key or Ethereum account not configured."""
    pass
