"""
Decoded TransactionV1 fields and the rows describing the transaction target.

Shared by the v1 parser and the auction formatters.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from display.element import Element
from display.formatting import content_digest, parse_version
from errors import UnexpectedItemKindError
from models.keys import ContractHash, ContractPackageHash
from models.transaction_v1 import (
    ARGS_MAP_KEY,
    ENTRY_POINT_MAP_KEY,
    SCHEDULING_MAP_KEY,
    TARGET_MAP_KEY,
    ByHash,
    ByName,
    ByPackageHash,
    ByPackageName,
    Native,
    Session,
    Stored,
    TransactionArgs,
    TransactionEntryPoint,
    TransactionScheduling,
    TransactionTarget,
    TransactionV1,
)


@dataclass(frozen=True)
class TransactionV1Meta:
    args: TransactionArgs
    target: TransactionTarget
    entry_point: TransactionEntryPoint
    scheduling: TransactionScheduling

    @classmethod
    def deserialize_from(cls, v1: TransactionV1) -> "TransactionV1Meta":
        return cls(
            args=v1.deserialize_field(ARGS_MAP_KEY),
            target=v1.deserialize_field(TARGET_MAP_KEY),
            entry_point=v1.deserialize_field(ENTRY_POINT_MAP_KEY),
            scheduling=v1.deserialize_field(SCHEDULING_MAP_KEY),
        )


def is_system_payment(module_bytes: bytes) -> bool:
    """Session code is the system payment when the module bytes are empty."""
    return len(module_bytes) == 0


def v1_type(meta: TransactionV1Meta) -> List[Element]:
    """
    Returns the main elements describing the target: native, a call by name
    or by hash (versioned or not), or raw session bytes.

    Addresses render the same way as legacy stored items.
    """
    target = meta.target
    if isinstance(target, Native):
        return []
    if isinstance(target, Stored):
        invocation = target.id
        if isinstance(invocation, ByHash):
            return [
                Element.regular("execution", "by-hash"),
                Element.regular("address", str(ContractHash(invocation.addr))),
            ]
        if isinstance(invocation, ByName):
            return [
                Element.regular("execution", "by-name"),
                Element.regular("name", invocation.name),
            ]
        if isinstance(invocation, ByPackageHash):
            return [
                Element.regular("execution", "by-hash-versioned"),
                Element.regular("address", str(ContractPackageHash(invocation.addr))),
                parse_version(invocation.version),
            ]
        if isinstance(invocation, ByPackageName):
            return [
                Element.regular("execution", "by-name-versioned"),
                Element.regular("name", invocation.name),
                parse_version(invocation.version),
            ]
        raise UnexpectedItemKindError(f"Unknown invocation target: {type(invocation).__name__}")
    if isinstance(target, Session):
        if is_system_payment(target.module_bytes):
            return []
        return [
            Element.regular("execution", "contract"),
            Element.regular("Cntrct hash", content_digest(target.module_bytes)),
        ]
    raise UnexpectedItemKindError(f"Unknown transaction target: {type(target).__name__}")
