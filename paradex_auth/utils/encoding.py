"""
Field element encoding.

Maps strings, integers and timestamps to Stark field elements. Strings are
byte-packed, not hashed: each UTF-8 byte becomes two big-endian hex digits.
"""

from typing import Any, Optional

from ..exceptions import EncodingOverflow, InvalidFieldValue
from ..models import FIELD_PRIME, Felt


def encode_string(value: str) -> Felt:
    """
    Pack a string's UTF-8 bytes into a felt.

    "Paradex" -> 0x50617261646578. The empty string maps to 0.

    Args:
        value: String to encode

    Returns:
        Packed field element

    Raises:
        InvalidFieldValue: If value is not a string
        EncodingOverflow: If the packed integer does not fit in the field
    """
    if not isinstance(value, str):
        raise InvalidFieldValue(f"Expected string, got {type(value).__name__}")

    raw = value.encode("utf-8")
    if not raw:
        return Felt(0)

    packed = int.from_bytes(raw, "big")
    if packed >= FIELD_PRIME:
        raise EncodingOverflow(
            f"String of {len(raw)} bytes does not fit in a field element",
            byte_length=len(raw),
        )
    return Felt(packed)


def decode_string(value: int) -> str:
    """Inverse of encode_string."""
    if value == 0:
        return ""
    raw = int(value).to_bytes((int(value).bit_length() + 7) // 8, "big")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFieldValue("Felt does not hold a UTF-8 string") from e


def encode_int(value: Any, field_name: Optional[str] = None) -> Felt:
    """
    Encode an integer or unix timestamp directly.

    Raises:
        InvalidFieldValue: On bool, non-int, negative or out-of-range values
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldValue(
            f"Field '{field_name}' must be int, got {type(value).__name__}",
            field_name=field_name,
        )
    if value < 0:
        raise InvalidFieldValue(
            f"Field '{field_name}' must be non-negative, got {value}",
            field_name=field_name,
        )
    if value >= FIELD_PRIME:
        raise InvalidFieldValue(
            f"Field '{field_name}' exceeds the field prime",
            field_name=field_name,
        )
    return Felt(value)


def to_felt(value: Any, field_name: Optional[str] = None) -> Felt:
    """
    Convert a value declared as `felt` into a field element.

    - int: used directly
    - "0x..." string: parsed as hex
    - string of ASCII digits: parsed as decimal ("1" -> 1)
    - any other string: byte-packed via encode_string

    Args:
        value: Message or domain value
        field_name: Field name for error reporting

    Returns:
        Field element

    Raises:
        InvalidFieldValue: If the value cannot be converted
        EncodingOverflow: If a packed string does not fit
    """
    if isinstance(value, Felt):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        return encode_int(value, field_name)

    if isinstance(value, str):
        if value[:2].lower() == "0x":
            try:
                parsed = int(value, 16)
            except ValueError as e:
                raise InvalidFieldValue(
                    f"Field '{field_name}' is not valid hex: {value}",
                    field_name=field_name,
                ) from e
            return encode_int(parsed, field_name)

        if value.isascii() and value.isdigit():
            return encode_int(int(value), field_name)

        return encode_string(value)

    raise InvalidFieldValue(
        f"Field '{field_name}' has unsupported type {type(value).__name__}",
        field_name=field_name,
    )
