"""
Scoped Stark signing identity.

The private scalar lives in a mutable buffer that is zeroed on release, so
callers can bound its lifetime with a `with` block.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..exceptions import SigningError
from ..models import Felt, Signature
from ..utils.validators import validate_account_address, validate_private_key
from .stark_curve import StarkCurve, get_curve

logger = logging.getLogger(__name__)

_SCALAR_BYTES = 32


class SigningIdentity:
    """
    Private scalar plus the account address it signs for.

    SECURITY: The scalar never appears in repr, str or error messages.

    Usage:
        >>> with SigningIdentity(private_key, account) as identity:
        ...     signature = identity.sign(message_hash)
    """

    def __init__(
        self,
        private_key: str,
        account_address: str,
        curve: Optional[StarkCurve] = None
    ):
        """
        Parse key material.

        Args:
            private_key: Stark private key hex
            account_address: Starknet account address hex
            curve: Arithmetic capability (default: process-wide StarkCurve)

        Raises:
            KeyParseError: If either value is malformed
        """
        scalar = validate_private_key(private_key)
        self.account_address: Felt = validate_account_address(account_address)
        self.curve = curve or get_curve()
        self._secret: Optional[bytearray] = bytearray(int(scalar).to_bytes(_SCALAR_BYTES, "big"))

    @property
    def released(self) -> bool:
        return self._secret is None

    @contextmanager
    def _scalar(self) -> Iterator[int]:
        if self._secret is None:
            raise SigningError("Signing identity already released")
        yield int.from_bytes(self._secret, "big")

    def public_key(self) -> Felt:
        """Stark public key derived from the scalar."""
        with self._scalar() as scalar:
            return self.curve.public_key(scalar)

    def sign(self, msg_hash: int) -> Signature:
        """
        Sign one message hash.

        Raises:
            SigningError: If released or the primitive fails
        """
        with self._scalar() as scalar:
            return self.curve.sign(scalar, msg_hash)

    def release(self) -> None:
        """Zero and drop the scalar. Idempotent."""
        if self._secret is not None:
            for i in range(len(self._secret)):
                self._secret[i] = 0
            self._secret = None
            logger.debug(f"Released signing identity for {self.account_address.to_hex()}")

    def __enter__(self) -> "SigningIdentity":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"SigningIdentity(account_address={self.account_address.to_hex()}, "
            f"released={self.released})"
        )

    __str__ = __repr__
