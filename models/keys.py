"""Keys and hashes as handed over by the upstream deserializer."""
from __future__ import annotations

from dataclasses import dataclass

ED25519_TAG = 1
SECP256K1_TAG = 2
SYSTEM_TAG = 0

_ALGORITHM_TAGS = {
    "system": SYSTEM_TAG,
    "ed25519": ED25519_TAG,
    "secp256k1": SECP256K1_TAG,
}


@dataclass(frozen=True)
class PublicKey:
    algorithm: str
    raw: bytes

    def __post_init__(self) -> None:
        if self.algorithm not in _ALGORITHM_TAGS:
            raise ValueError(f"Unknown public key algorithm: {self.algorithm!r}")

    @property
    def tag(self) -> int:
        return _ALGORITHM_TAGS[self.algorithm]

    def to_hex(self) -> str:
        """Tag-prefixed lowercase hex, e.g. ``01`` + 32 key bytes for ed25519."""
        return f"{self.tag:02x}{self.raw.hex()}"

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class AccountHash:
    value: bytes

    def __str__(self) -> str:
        return f"account-hash-{self.value.hex()}"


@dataclass(frozen=True)
class ContractHash:
    value: bytes

    def __str__(self) -> str:
        return f"contract-{self.value.hex()}"


@dataclass(frozen=True)
class ContractPackageHash:
    value: bytes

    def __str__(self) -> str:
        return f"contract-package-{self.value.hex()}"
