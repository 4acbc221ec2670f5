"""
Signable message hash for Paradex typed data.

message_hash = H(["StarkNet Message", domain_hash, account, struct_hash])
where H is the Pedersen hash chain over the ordered elements.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions import InvalidFieldValue, SchemaMismatch
from ..models import Felt
from ..utils.encoding import encode_string, to_felt
from .stark_curve import StarkCurve, get_curve
from .typed_data import DOMAIN_SCHEMA, FELT, Domain, StructSchema, TypedMessage, type_hash

logger = logging.getLogger(__name__)

MESSAGE_PREFIX = "StarkNet Message"

# Independent literal used to cross-check the schema-driven domain hash
DOMAIN_TYPE_STRING = b"StarkNetDomain(name:felt,version:felt,chainId:felt)"


@dataclass(frozen=True)
class MessageHashResult:
    """Every intermediate hash of one typed-data computation."""
    domain_hash: Felt
    manual_domain_hash: Felt
    struct_hash: Felt
    message_hash: Felt


class MessageHasher:
    """
    Computes domain, struct and message hashes.

    Holds no mutable state; one instance may serve concurrent flows.
    """

    def __init__(self, curve: Optional[StarkCurve] = None):
        """
        Initialize hasher.

        Args:
            curve: Arithmetic capability (default: process-wide StarkCurve)
        """
        self.curve = curve or get_curve()

    def encode_struct_values(self, schema: StructSchema, values: Mapping[str, Any]) -> list[Felt]:
        """
        Encode values in declared field order.

        Raises:
            InvalidFieldValue: On missing, unexpected or unconvertible fields
        """
        unexpected = set(values) - set(schema.field_names)
        if unexpected:
            raise InvalidFieldValue(
                f"{schema.type_name} has no fields {sorted(unexpected)}",
                field_name=sorted(unexpected)[0],
            )

        encoded = []
        for name, kind in schema.fields:
            if kind != FELT:
                raise InvalidFieldValue(f"Unsupported field type {kind!r}", field_name=name)
            if name not in values:
                raise InvalidFieldValue(f"{schema.type_name} is missing field '{name}'", field_name=name)
            encoded.append(to_felt(values[name], name))
        return encoded

    def struct_hash(self, schema: StructSchema, values: Mapping[str, Any]) -> Felt:
        elements = [type_hash(schema, self.curve), *self.encode_struct_values(schema, values)]
        return self.curve.hash_on_elements(elements)

    def domain_hash(self, domain: Domain) -> Felt:
        """Schema-driven domain hash."""
        return self.struct_hash(
            DOMAIN_SCHEMA,
            {"name": domain.name, "version": domain.version, "chainId": domain.chain_id},
        )

    def manual_domain_hash(self, domain: Domain) -> Felt:
        """Domain hash from the literal type string, bypassing the schema tables."""
        domain_type_hash = self.curve.keccak(DOMAIN_TYPE_STRING)
        return self.curve.hash_on_elements(
            [domain_type_hash, domain.name, domain.version, domain.chain_id]
        )

    def message_struct_hash(self, message: TypedMessage) -> Felt:
        return self.struct_hash(message.schema, message.values)

    def hash_typed_message(
        self,
        domain: Domain,
        message: TypedMessage,
        account_address: int
    ) -> MessageHashResult:
        """
        Compute the signable hash for (domain, message, account).

        Args:
            domain: Signing domain
            message: Typed message
            account_address: Signer's account; binds the hash to that account

        Returns:
            All intermediate hashes

        Raises:
            SchemaMismatch: If the two domain hash derivations disagree
            InvalidFieldValue: If a message value cannot be encoded
        """
        account = to_felt(account_address, "account_address")

        domain_hash = self.domain_hash(domain)
        manual_domain_hash = self.manual_domain_hash(domain)

        logger.info(
            f"{message.primary_type} domain fields name={domain.name.to_hex()}, "
            f"version={domain.version.to_hex()}, chain_id={domain.chain_id.to_hex()}"
        )
        logger.info(
            f"{message.primary_type} domain_hash={domain_hash.to_hex()}, "
            f"manual_domain_hash={manual_domain_hash.to_hex()}"
        )

        if domain_hash != manual_domain_hash:
            logger.error(f"{message.primary_type} domain hash mismatch, refusing to sign")
            raise SchemaMismatch(
                "Schema-driven domain hash does not match independent computation",
                schema_hash=domain_hash,
                manual_hash=manual_domain_hash,
            )

        struct_hash = self.message_struct_hash(message)
        message_hash = self.curve.hash_on_elements(
            [encode_string(MESSAGE_PREFIX), domain_hash, account, struct_hash]
        )

        logger.info(
            f"{message.primary_type} message_struct_hash={struct_hash.to_hex()}, "
            f"message_hash={message_hash.to_hex()}"
        )

        return MessageHashResult(
            domain_hash=domain_hash,
            manual_domain_hash=manual_domain_hash,
            struct_hash=struct_hash,
            message_hash=message_hash,
        )

    def message_hash(self, domain: Domain, message: TypedMessage, account_address: int) -> Felt:
        return self.hash_typed_message(domain, message, account_address).message_hash
