"""
Input validation utilities.

Parses private keys, account addresses and timestamps before signing.
"""

import re
from typing import Any

from eth_utils import is_address, to_checksum_address

from ..exceptions import InvalidFieldValue, KeyParseError, ValidationError
from ..models import FIELD_PRIME, Felt

# Order of the Stark curve generator; valid private scalars lie in [1, EC_ORDER)
EC_ORDER = 0x800000000000010FFFFFFFFFFFFFFFFB781126DCAE7B2321E66A241ADC64D2F

_FELT_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{1,64}$")


def _parse_felt_hex(value: Any, field_name: str) -> int:
    if not isinstance(value, str):
        raise KeyParseError(
            f"{field_name} must be string, got {type(value).__name__}",
            field_name=field_name,
        )

    digits = value[2:] if value[:2].lower() == "0x" else value
    if not _FELT_HEX_PATTERN.match(digits):
        # SECURITY: never echo the value, it may be a key
        raise KeyParseError(f"Invalid {field_name} format", field_name=field_name)

    return int(digits, 16)


def validate_private_key(private_key: str) -> Felt:
    """
    Validate Stark private key format.

    Args:
        private_key: Private key hex string (0x prefix optional)

    Returns:
        Private scalar as a felt

    Raises:
        KeyParseError: If private key is malformed or outside the curve order
    """
    scalar = _parse_felt_hex(private_key, "private key")

    if not 0 < scalar < EC_ORDER:
        raise KeyParseError("Private key out of range", field_name="private key")

    return Felt(scalar)


def validate_account_address(address: str) -> Felt:
    """
    Validate a Starknet account address.

    Args:
        address: Account address hex string

    Returns:
        Account address as a felt

    Raises:
        KeyParseError: If address is malformed or exceeds the field
    """
    value = _parse_felt_hex(address, "account address")

    if value >= FIELD_PRIME:
        raise KeyParseError("Account address exceeds field prime", field_name="account address")

    return Felt(value)


def validate_ethereum_address(address: str) -> str:
    """
    Validate Ethereum address format.

    Returns:
        Checksummed address

    Raises:
        ValidationError: If address is invalid
    """
    if not isinstance(address, str):
        raise ValidationError(f"Address must be string, got {type(address)}")

    if not is_address(address):
        raise ValidationError(f"Invalid Ethereum address: {address}")

    return to_checksum_address(address)


def validate_timestamp(timestamp: Any, field_name: str = "timestamp") -> int:
    """
    Validate a unix-seconds timestamp.

    Raises:
        InvalidFieldValue: If timestamp is not a non-negative int
    """
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise InvalidFieldValue(
            f"{field_name} must be int, got {type(timestamp).__name__}", field_name=field_name
        )

    if timestamp < 0:
        raise InvalidFieldValue(
            f"{field_name} must be non-negative, got {timestamp}", field_name=field_name
        )

    return timestamp
