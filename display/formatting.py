"""
Value formatting helpers shared by the legacy and TransactionV1 parsers.
"""
from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import Optional, Union

from display.element import Element
from errors import UnexpectedItemKindError
from models.keys import AccountHash, PublicKey

DIGEST_SIZE = 32
_TTL_UNITS = (
    ("day", 24 * 60 * 60 * 1000),
    ("h", 60 * 60 * 1000),
    ("m", 60 * 1000),
    ("s", 1000),
    ("ms", 1),
)


def separate_with_spaces(value: int) -> str:
    """Group digits by three from the right: 10000 -> "10 000"."""
    digits = str(value)
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return " ".join(groups)


def format_amount(motes: int) -> str:
    if motes < 0:
        raise ValueError(f"Amount must be non-negative, got {motes}")
    return f"{separate_with_spaces(motes)} motes"


def parse_version(version: Optional[int]) -> Element:
    value = "latest" if version is None else str(version)
    return Element.expert("version", value)


def entrypoint(entry_point: str) -> Element:
    return Element.expert("entry-point", entry_point)


def content_digest(module_bytes: bytes) -> str:
    """BLAKE2b-256 digest of raw code bytes, as lowercase hex."""
    return hashlib.blake2b(module_bytes, digest_size=DIGEST_SIZE).hexdigest()


def timestamp_to_seconds_res(timestamp_ms: int) -> str:
    """Render a millisecond timestamp as RFC 3339 UTC with whole-second resolution."""
    moment = datetime.fromtimestamp(timestamp_ms // 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def format_ttl(ttl_ms: int) -> str:
    """Human readable duration, e.g. 5400000 -> "1h 30m"."""
    if ttl_ms == 0:
        return "0s"
    parts = []
    remaining = ttl_ms
    for unit, size in _TTL_UNITS:
        count, remaining = divmod(remaining, size)
        if not count:
            continue
        if unit == "day" and count > 1:
            parts.append(f"{count}days")
        else:
            parts.append(f"{count}{unit}")
    return " ".join(parts)


def parse_public_key(public_key: PublicKey) -> str:
    return public_key.to_hex()


def parse_account_hash(account_hash: AccountHash) -> str:
    return str(account_hash)


def parse_initiator(initiator: Union[PublicKey, AccountHash]) -> str:
    if isinstance(initiator, PublicKey):
        return parse_public_key(initiator)
    if isinstance(initiator, AccountHash):
        return parse_account_hash(initiator)
    raise UnexpectedItemKindError(f"Unknown initiator address type: {type(initiator).__name__}")
