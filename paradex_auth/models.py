"""
Type definitions for the Paradex auth client.

Field elements are plain immutable ints bounded by the Stark field prime.
Signatures and tokens use Pydantic for runtime validation.
"""

import time
from typing import Optional, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidFieldValue


# Stark field prime: 2^251 + 17 * 2^192 + 1
FIELD_PRIME = 2**251 + 17 * 2**192 + 1


class Felt(int):
    """
    Element of the Stark prime field.

    Immutable; equality and hashing are those of int. Construction rejects
    values outside [0, FIELD_PRIME).
    """

    def __new__(cls, value: Union[int, "Felt"]) -> "Felt":
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFieldValue(f"Felt must be built from int, got {type(value).__name__}")
        if not 0 <= value < FIELD_PRIME:
            raise InvalidFieldValue("Felt value out of field range")
        return super().__new__(cls, value)

    @classmethod
    def from_hex(cls, value: str) -> "Felt":
        """Parse 0x-prefixed (or bare) hex."""
        try:
            return cls(int(value, 16))
        except (TypeError, ValueError) as e:
            raise InvalidFieldValue(f"Invalid felt hex: {type(e).__name__}") from e

    def to_hex(self) -> str:
        """Lowercase 0x hex without zero padding."""
        return hex(self)

    def __repr__(self) -> str:
        return f"Felt({self.to_hex()})"


class Signature(BaseModel):
    """Stark ECDSA signature."""
    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, description="Signature r component")
    s: int = Field(..., ge=0, description="Signature s component")

    def to_header(self) -> str:
        """Serialize as the PARADEX-STARKNET-SIGNATURE header value: ["<r>","<s>"]."""
        return orjson.dumps([str(self.r), str(self.s)]).decode("utf-8")

    def as_list(self) -> list[int]:
        return [self.r, self.s]


class AuthToken(BaseModel):
    """
    Bearer token returned by a successful auth exchange.

    SECURITY: The JWT is hidden from repr to keep it out of logs.
    """
    model_config = ConfigDict(frozen=True)

    jwt: str = Field(..., min_length=1, repr=False, description="JWT bearer token")
    issued_at: int = Field(..., ge=0, description="Unix seconds the request was signed")
    expires_at: int = Field(..., ge=0, description="Unix seconds the signature expires")

    @field_validator("expires_at")
    @classmethod
    def validate_window(cls, v: int, info) -> int:
        """Expiry must not precede issue time."""
        issued_at = info.data.get("issued_at")
        if issued_at is not None and v < issued_at:
            raise ValueError("expires_at must be >= issued_at")
        return v

    def authorization_header(self) -> dict[str, str]:
        """Header for subsequent authenticated API calls."""
        return {"Authorization": f"Bearer {self.jwt}"}

    def is_expired(self, now: Optional[float] = None) -> bool:
        if now is None:
            now = time.time()
        return now >= self.expires_at
