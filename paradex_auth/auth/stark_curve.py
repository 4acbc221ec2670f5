"""
Stark curve primitives.

Thin wrapper over audited implementations: Pedersen hash chains and ECDSA
from starknet-py, keccak from eth-utils. Only composition lives here.
"""

import logging
from typing import Sequence

from eth_utils import keccak as _keccak256
from starknet_py.hash.utils import (
    compute_hash_on_elements,
    message_signature,
    private_to_stark_key,
    verify_message_signature,
)

from ..exceptions import SigningError
from ..models import Felt, Signature

logger = logging.getLogger(__name__)

# starknet_keccak keeps the low 250 bits of keccak256
MASK_250 = 2**250 - 1


class StarkCurve:
    """
    Trusted arithmetic capability used by the message hasher and auth flows.

    Stateless and safe to share across concurrent calls.
    """

    def keccak(self, data: bytes) -> Felt:
        """Starknet keccak: keccak256 truncated to 250 bits."""
        return Felt(int.from_bytes(_keccak256(data), "big") & MASK_250)

    def hash_on_elements(self, elements: Sequence[int]) -> Felt:
        """Left-fold Pedersen hash over elements, finalized with the length."""
        return Felt(compute_hash_on_elements([int(e) for e in elements]))

    def public_key(self, private_scalar: int) -> Felt:
        """Stark public key (x coordinate) for a private scalar."""
        try:
            return Felt(private_to_stark_key(int(private_scalar)))
        except Exception as e:
            # SECURITY: only the type name, never the scalar
            raise SigningError(f"Public key derivation failed: {type(e).__name__}") from None

    def sign(self, private_scalar: int, msg_hash: int) -> Signature:
        """
        Sign a message hash.

        Raises:
            SigningError: If the primitive fails
        """
        try:
            r, s = message_signature(int(msg_hash), int(private_scalar))
        except Exception as e:
            error_type = type(e).__name__
            logger.error(f"Stark signing failed: {error_type}")
            raise SigningError(f"Stark signature failed: {error_type}") from None
        return Signature(r=r, s=s)

    def verify(self, msg_hash: int, signature: Signature, public_key: int) -> bool:
        return verify_message_signature(int(msg_hash), signature.as_list(), int(public_key))


_default_curve = StarkCurve()


def get_curve() -> StarkCurve:
    """Process-wide curve instance."""
    return _default_curve
