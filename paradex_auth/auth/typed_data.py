"""
Typed-data schemas for Paradex onboarding and auth messages.

Only two message shapes exist, so they are fixed tables rather than a
general typed-data engine. Field order must match the venue byte for byte.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..config import CHAIN_IDS
from ..exceptions import ValidationError
from ..models import Felt
from ..utils.encoding import encode_string, to_felt
from .stark_curve import StarkCurve, get_curve

FELT = "felt"

DOMAIN_TYPE = "StarkNetDomain"
DOMAIN_NAME = "Paradex"
DOMAIN_VERSION = "1"

SUPPORTED_CHAIN_IDS = frozenset(CHAIN_IDS.values())

AUTH_METHOD = "POST"
AUTH_PATH = "/v1/auth"
AUTH_BODY = ""
ONBOARDING_ACTION = "Onboarding"


@dataclass(frozen=True)
class StructSchema:
    """Named struct with ordered (name, type) fields."""
    type_name: str
    fields: tuple[tuple[str, str], ...]

    def encode_type(self) -> str:
        """Canonical type string, e.g. Constant(action:felt)."""
        members = ",".join(f"{name}:{kind}" for name, kind in self.fields)
        return f"{self.type_name}({members})"

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.fields)


DOMAIN_SCHEMA = StructSchema(
    DOMAIN_TYPE,
    (("name", FELT), ("version", FELT), ("chainId", FELT)),
)

ONBOARDING_SCHEMA = StructSchema(
    "Constant",
    (("action", FELT),),
)

AUTH_SCHEMA = StructSchema(
    "Request",
    (
        ("method", FELT),
        ("path", FELT),
        ("body", FELT),
        ("timestamp", FELT),
        ("expiration", FELT),
    ),
)


@lru_cache(maxsize=32)
def type_hash(schema: StructSchema, curve: Optional[StarkCurve] = None) -> Felt:
    """
    Keccak of the canonical type string.

    Pure function of the schema; cached process-wide.
    """
    curve = curve or get_curve()
    return curve.keccak(schema.encode_type().encode("ascii"))


@dataclass(frozen=True)
class Domain:
    """StarkNetDomain values for one chain."""
    name: Felt
    version: Felt
    chain_id: Felt

    @classmethod
    def for_chain(cls, chain_id: str) -> "Domain":
        """
        Paradex domain for a supported Starknet chain.

        Raises:
            ValidationError: If chain_id is not supported
        """
        if chain_id not in SUPPORTED_CHAIN_IDS:
            raise ValidationError(
                f"Unsupported chain id {chain_id!r}, expected one of {sorted(SUPPORTED_CHAIN_IDS)}"
            )
        return cls(
            name=to_felt(encode_string(DOMAIN_NAME).to_hex(), "name"),
            version=to_felt(DOMAIN_VERSION, "version"),
            chain_id=to_felt(encode_string(chain_id).to_hex(), "chainId"),
        )

    def values(self) -> tuple[Felt, Felt, Felt]:
        """Values in DOMAIN_SCHEMA order."""
        return (self.name, self.version, self.chain_id)


@dataclass(frozen=True)
class TypedMessage:
    """A schema plus its raw (unencoded) values."""
    schema: StructSchema
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def primary_type(self) -> str:
        return self.schema.type_name

    def to_dict(self) -> dict[str, Any]:
        """Typed-data JSON shape, for logging."""
        return {
            "primaryType": self.primary_type,
            "types": {
                DOMAIN_TYPE: [{"name": n, "type": t} for n, t in DOMAIN_SCHEMA.fields],
                self.primary_type: [{"name": n, "type": t} for n, t in self.schema.fields],
            },
            "message": dict(self.values),
        }


def onboarding_schema() -> TypedMessage:
    """Constant(action:felt) with action = "Onboarding"."""
    return TypedMessage(ONBOARDING_SCHEMA, {"action": ONBOARDING_ACTION})


def auth_schema(
    method: str,
    path: str,
    body: str,
    timestamp: int,
    expiration: int
) -> TypedMessage:
    """Request(method,path,body,timestamp,expiration) message."""
    return TypedMessage(
        AUTH_SCHEMA,
        {
            "method": method,
            "path": path,
            "body": body,
            "timestamp": timestamp,
            "expiration": expiration,
        },
    )
