"""Utility modules for the Paradex auth client."""

from .encoding import decode_string, encode_int, encode_string, to_felt
from .validators import (
    validate_account_address,
    validate_ethereum_address,
    validate_private_key,
    validate_timestamp,
)

__all__ = [
    "decode_string",
    "encode_int",
    "encode_string",
    "to_felt",
    "validate_account_address",
    "validate_ethereum_address",
    "validate_private_key",
    "validate_timestamp",
]
