"""Typed transaction objects handed over by the upstream deserializer."""

from .cl_value import CLType, CLTypeTag, CLValue, RuntimeArgs
from .keys import AccountHash, ContractHash, ContractPackageHash, PublicKey
from .deploy import (
    Approval,
    Deploy,
    DeployHeader,
    ExecutableDeployItem,
    ModuleBytes,
    StoredContractByHash,
    StoredContractByName,
    StoredVersionedContractByHash,
    StoredVersionedContractByName,
    Transfer,
    TxnPhase,
)
from .transaction_v1 import TransactionV1, TransactionV1Payload

__all__ = [
    "CLType",
    "CLTypeTag",
    "CLValue",
    "RuntimeArgs",
    "AccountHash",
    "ContractHash",
    "ContractPackageHash",
    "PublicKey",
    "Approval",
    "Deploy",
    "DeployHeader",
    "ExecutableDeployItem",
    "ModuleBytes",
    "StoredContractByHash",
    "StoredContractByName",
    "StoredVersionedContractByHash",
    "StoredVersionedContractByName",
    "Transfer",
    "TxnPhase",
    "TransactionV1",
    "TransactionV1Payload",
]
