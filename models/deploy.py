"""
Legacy deploy data structures.

A deploy carries a header plus one executable item per phase (payment and
session). Instances are produced by the upstream deserializer and are
treated as structurally valid.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

from models.cl_value import RuntimeArgs
from models.keys import ContractHash, ContractPackageHash, PublicKey


class TxnPhase(enum.Enum):
    PAYMENT = "payment"
    SESSION = "session"

    def is_payment(self) -> bool:
        return self is TxnPhase.PAYMENT

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ModuleBytes:
    module_bytes: bytes
    args: RuntimeArgs = field(default_factory=RuntimeArgs)


@dataclass(frozen=True)
class StoredContractByHash:
    hash: ContractHash
    entry_point: str
    args: RuntimeArgs = field(default_factory=RuntimeArgs)


@dataclass(frozen=True)
class StoredContractByName:
    name: str
    entry_point: str
    args: RuntimeArgs = field(default_factory=RuntimeArgs)


@dataclass(frozen=True)
class StoredVersionedContractByHash:
    hash: ContractPackageHash
    version: Optional[int]
    entry_point: str
    args: RuntimeArgs = field(default_factory=RuntimeArgs)


@dataclass(frozen=True)
class StoredVersionedContractByName:
    name: str
    version: Optional[int]
    entry_point: str
    args: RuntimeArgs = field(default_factory=RuntimeArgs)


@dataclass(frozen=True)
class Transfer:
    args: RuntimeArgs = field(default_factory=RuntimeArgs)


StoredItem = Union[
    StoredContractByHash,
    StoredContractByName,
    StoredVersionedContractByHash,
    StoredVersionedContractByName,
]

ExecutableDeployItem = Union[ModuleBytes, StoredItem, Transfer]

STORED_ITEM_TYPES = (
    StoredContractByHash,
    StoredContractByName,
    StoredVersionedContractByHash,
    StoredVersionedContractByName,
)


@dataclass(frozen=True)
class Approval:
    signer: PublicKey
    signature: bytes


@dataclass(frozen=True)
class DeployHeader:
    account: PublicKey
    timestamp_ms: int
    ttl_ms: int
    gas_price: int
    body_hash: bytes
    chain_name: str
    dependencies: List[bytes] = field(default_factory=list)


@dataclass(frozen=True)
class Deploy:
    hash: bytes
    header: DeployHeader
    payment: ExecutableDeployItem
    session: ExecutableDeployItem
    approvals: List[Approval] = field(default_factory=list)
