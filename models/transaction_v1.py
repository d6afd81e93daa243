"""
New-format (TransactionV1) data structures.

The payload carries a self-describing field map keyed by fixed numeric
slots. Byte-level decoding of each slot happens upstream, so the map holds
decoded values; ``deserialize_field`` only checks that a slot is present and
holds the expected type.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from errors import MalformedFieldError, MissingFieldError, UnsupportedArgsError
from models.cl_value import RuntimeArgs
from models.keys import AccountHash, PublicKey

ARGS_MAP_KEY = 0
TARGET_MAP_KEY = 1
ENTRY_POINT_MAP_KEY = 2
SCHEDULING_MAP_KEY = 3


# --- Arguments ---------------------------------------------------------------

@dataclass(frozen=True)
class NamedArgs:
    args: RuntimeArgs


@dataclass(frozen=True)
class BytesreprArgs:
    raw: bytes


TransactionArgs = Union[NamedArgs, BytesreprArgs]


def as_named(args: TransactionArgs) -> RuntimeArgs:
    if isinstance(args, NamedArgs):
        return args.args
    raise UnsupportedArgsError(f"Expected named transaction arguments, got {type(args).__name__}")


# --- Targets -----------------------------------------------------------------

class TransactionRuntime(enum.Enum):
    VM_CASPER_V1 = "VmCasperV1"
    VM_CASPER_V2 = "VmCasperV2"


@dataclass(frozen=True)
class ByHash:
    addr: bytes


@dataclass(frozen=True)
class ByName:
    name: str


@dataclass(frozen=True)
class ByPackageHash:
    addr: bytes
    version: Optional[int] = None


@dataclass(frozen=True)
class ByPackageName:
    name: str
    version: Optional[int] = None


TransactionInvocationTarget = Union[ByHash, ByName, ByPackageHash, ByPackageName]


@dataclass(frozen=True)
class Native:
    pass


@dataclass(frozen=True)
class Stored:
    id: TransactionInvocationTarget
    runtime: TransactionRuntime = TransactionRuntime.VM_CASPER_V1


@dataclass(frozen=True)
class Session:
    module_bytes: bytes
    runtime: TransactionRuntime = TransactionRuntime.VM_CASPER_V1
    is_install_upgrade: bool = False


TransactionTarget = Union[Native, Stored, Session]


# --- Entry points ------------------------------------------------------------

class EntryPointKind(enum.Enum):
    CALL = "call"
    CUSTOM = "custom"
    TRANSFER = "transfer"
    BURN = "burn"
    ADD_BID = "add_bid"
    WITHDRAW_BID = "withdraw_bid"
    DELEGATE = "delegate"
    UNDELEGATE = "undelegate"
    REDELEGATE = "redelegate"
    ACTIVATE_BID = "activate_bid"
    CHANGE_BID_PUBLIC_KEY = "change_bid_public_key"
    ADD_RESERVATIONS = "add_reservations"
    CANCEL_RESERVATIONS = "cancel_reservations"


@dataclass(frozen=True)
class TransactionEntryPoint:
    kind: EntryPointKind
    custom_name: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is EntryPointKind.CUSTOM) != (self.custom_name is not None):
            raise ValueError("custom_name is required for, and only for, custom entry points")

    @classmethod
    def custom(cls, name: str) -> "TransactionEntryPoint":
        return cls(EntryPointKind.CUSTOM, name)

    def __str__(self) -> str:
        if self.kind is EntryPointKind.CUSTOM:
            return self.custom_name
        return self.kind.value


CALL = TransactionEntryPoint(EntryPointKind.CALL)
TRANSFER = TransactionEntryPoint(EntryPointKind.TRANSFER)
BURN = TransactionEntryPoint(EntryPointKind.BURN)
ADD_BID = TransactionEntryPoint(EntryPointKind.ADD_BID)
WITHDRAW_BID = TransactionEntryPoint(EntryPointKind.WITHDRAW_BID)
DELEGATE = TransactionEntryPoint(EntryPointKind.DELEGATE)
UNDELEGATE = TransactionEntryPoint(EntryPointKind.UNDELEGATE)
REDELEGATE = TransactionEntryPoint(EntryPointKind.REDELEGATE)


# --- Scheduling --------------------------------------------------------------

@dataclass(frozen=True)
class Standard:
    pass


@dataclass(frozen=True)
class FutureEra:
    era_id: int


@dataclass(frozen=True)
class FutureTimestamp:
    timestamp_ms: int


TransactionScheduling = Union[Standard, FutureEra, FutureTimestamp]


# --- Header ------------------------------------------------------------------

InitiatorAddr = Union[PublicKey, AccountHash]


@dataclass(frozen=True)
class PaymentLimited:
    payment_amount: int
    gas_price_tolerance: int = 1
    standard_payment: bool = True


@dataclass(frozen=True)
class Fixed:
    gas_price_tolerance: int = 1
    additional_computation_factor: int = 0


@dataclass(frozen=True)
class Prepaid:
    receipt: bytes


PricingMode = Union[PaymentLimited, Fixed, Prepaid]

_FIELD_TYPES: Dict[int, Tuple[type, ...]] = {
    ARGS_MAP_KEY: (NamedArgs, BytesreprArgs),
    TARGET_MAP_KEY: (Native, Stored, Session),
    ENTRY_POINT_MAP_KEY: (TransactionEntryPoint,),
    SCHEDULING_MAP_KEY: (Standard, FutureEra, FutureTimestamp),
}


@dataclass(frozen=True)
class TransactionV1Payload:
    initiator_addr: InitiatorAddr
    timestamp_ms: int
    ttl_ms: int
    chain_name: str
    pricing_mode: PricingMode
    fields: Dict[int, Any] = field(default_factory=dict)

    def deserialize_field(self, key: int) -> Any:
        """Return the decoded value of slot ``key``, failing closed if absent or mistyped."""
        if key not in self.fields:
            raise MissingFieldError(f"Transaction field {key} is missing")
        value = self.fields[key]
        expected = _FIELD_TYPES.get(key)
        if expected is not None and not isinstance(value, expected):
            raise MalformedFieldError(
                f"Transaction field {key} holds {type(value).__name__}, "
                f"expected one of {', '.join(t.__name__ for t in expected)}"
            )
        return value


@dataclass(frozen=True)
class TransactionV1Approval:
    signer: PublicKey
    signature: bytes


@dataclass(frozen=True)
class TransactionV1:
    hash: bytes
    payload: TransactionV1Payload
    approvals: List[TransactionV1Approval] = field(default_factory=list)

    def deserialize_field(self, key: int) -> Any:
        return self.payload.deserialize_field(key)
