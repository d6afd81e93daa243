"""
Typed argument values and the named-argument mapping.

A ``CLValue`` pairs a ``CLType`` with its already-parsed Python value and
knows how to render itself as the canonical display string shown to a
signer.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from models.keys import PublicKey


class CLTypeTag(enum.Enum):
    BOOL = "Bool"
    I32 = "I32"
    I64 = "I64"
    U8 = "U8"
    U32 = "U32"
    U64 = "U64"
    U128 = "U128"
    U256 = "U256"
    U512 = "U512"
    UNIT = "Unit"
    STRING = "String"
    KEY = "Key"
    UREF = "URef"
    OPTION = "Option"
    LIST = "List"
    BYTE_ARRAY = "ByteArray"
    RESULT = "Result"
    MAP = "Map"
    TUPLE1 = "Tuple1"
    TUPLE2 = "Tuple2"
    TUPLE3 = "Tuple3"
    ANY = "Any"
    PUBLIC_KEY = "PublicKey"


_NUMERIC_TAGS = frozenset(
    {
        CLTypeTag.I32,
        CLTypeTag.I64,
        CLTypeTag.U8,
        CLTypeTag.U32,
        CLTypeTag.U64,
        CLTypeTag.U128,
        CLTypeTag.U256,
        CLTypeTag.U512,
    }
)

_TUPLE_TAGS = {1: CLTypeTag.TUPLE1, 2: CLTypeTag.TUPLE2, 3: CLTypeTag.TUPLE3}


@dataclass(frozen=True)
class CLType:
    tag: CLTypeTag
    inner: Tuple["CLType", ...] = ()
    size: Optional[int] = None

    @classmethod
    def option(cls, inner: "CLType") -> "CLType":
        return cls(CLTypeTag.OPTION, (inner,))

    @classmethod
    def list(cls, inner: "CLType") -> "CLType":
        return cls(CLTypeTag.LIST, (inner,))

    @classmethod
    def map(cls, key: "CLType", value: "CLType") -> "CLType":
        return cls(CLTypeTag.MAP, (key, value))

    @classmethod
    def result(cls, ok: "CLType", err: "CLType") -> "CLType":
        return cls(CLTypeTag.RESULT, (ok, err))

    @classmethod
    def tuple(cls, *items: "CLType") -> "CLType":
        if len(items) not in _TUPLE_TAGS:
            raise ValueError(f"Tuples hold 1 to 3 items, got {len(items)}")
        return cls(_TUPLE_TAGS[len(items)], tuple(items))

    @classmethod
    def byte_array(cls, size: int) -> "CLType":
        return cls(CLTypeTag.BYTE_ARRAY, size=size)

    def __str__(self) -> str:
        if self.tag is CLTypeTag.BYTE_ARRAY:
            return f"ByteArray({self.size})"
        if self.inner:
            return f"{self.tag.value}({', '.join(str(t) for t in self.inner)})"
        return self.tag.value


BOOL = CLType(CLTypeTag.BOOL)
I32 = CLType(CLTypeTag.I32)
I64 = CLType(CLTypeTag.I64)
U8 = CLType(CLTypeTag.U8)
U32 = CLType(CLTypeTag.U32)
U64 = CLType(CLTypeTag.U64)
U128 = CLType(CLTypeTag.U128)
U256 = CLType(CLTypeTag.U256)
U512 = CLType(CLTypeTag.U512)
UNIT = CLType(CLTypeTag.UNIT)
STRING = CLType(CLTypeTag.STRING)
KEY = CLType(CLTypeTag.KEY)
UREF = CLType(CLTypeTag.UREF)
ANY = CLType(CLTypeTag.ANY)
PUBLIC_KEY = CLType(CLTypeTag.PUBLIC_KEY)


def _render(cl_type: CLType, value: Any) -> str:
    tag = cl_type.tag
    if tag is CLTypeTag.BOOL:
        return "true" if value else "false"
    if tag in _NUMERIC_TAGS:
        return str(value)
    if tag is CLTypeTag.UNIT:
        return "()"
    if tag in (CLTypeTag.STRING, CLTypeTag.KEY, CLTypeTag.UREF):
        return str(value)
    if tag is CLTypeTag.PUBLIC_KEY:
        return value.to_hex() if isinstance(value, PublicKey) else str(value)
    if tag in (CLTypeTag.BYTE_ARRAY, CLTypeTag.ANY):
        return bytes(value).hex()
    if tag is CLTypeTag.OPTION:
        if value is None:
            return "None"
        return _render(cl_type.inner[0], value)
    if tag is CLTypeTag.LIST:
        if cl_type.inner[0].tag is CLTypeTag.U8 and isinstance(value, (bytes, bytearray)):
            return bytes(value).hex()
        return "[" + ", ".join(_render(cl_type.inner[0], item) for item in value) + "]"
    if tag is CLTypeTag.MAP:
        key_type, value_type = cl_type.inner
        entries = (
            f"{_render(key_type, k)}: {_render(value_type, v)}" for k, v in dict(value).items()
        )
        return "{" + ", ".join(entries) + "}"
    if tag is CLTypeTag.RESULT:
        is_ok, inner = value
        if is_ok:
            return f"Ok({_render(cl_type.inner[0], inner)})"
        return f"Err({_render(cl_type.inner[1], inner)})"
    if tag in _TUPLE_TAGS.values():
        items = ", ".join(_render(t, v) for t, v in zip(cl_type.inner, value))
        return f"({items})"
    raise ValueError(f"Cannot render CL type {cl_type}")


@dataclass(frozen=True)
class CLValue:
    cl_type: CLType
    parsed: Any

    def to_display_string(self) -> str:
        return _render(self.cl_type, self.parsed)

    @classmethod
    def u8(cls, value: int) -> "CLValue":
        return cls(U8, value)

    @classmethod
    def u32(cls, value: int) -> "CLValue":
        return cls(U32, value)

    @classmethod
    def u64(cls, value: int) -> "CLValue":
        return cls(U64, value)

    @classmethod
    def u512(cls, value: int) -> "CLValue":
        return cls(U512, value)

    @classmethod
    def string(cls, value: str) -> "CLValue":
        return cls(STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> "CLValue":
        return cls(BOOL, value)

    @classmethod
    def key(cls, value: str) -> "CLValue":
        return cls(KEY, value)

    @classmethod
    def uref(cls, value: str) -> "CLValue":
        return cls(UREF, value)

    @classmethod
    def public_key(cls, value: PublicKey) -> "CLValue":
        return cls(PUBLIC_KEY, value)

    @classmethod
    def byte_array(cls, value: bytes) -> "CLValue":
        return cls(CLType.byte_array(len(value)), value)

    @classmethod
    def option(cls, inner: CLType, value: Any = None) -> "CLValue":
        return cls(CLType.option(inner), value)


class RuntimeArgs(Mapping[str, CLValue]):
    """Named arguments of a contract call or native operation."""

    def __init__(self, items: Optional[Iterable[Tuple[str, CLValue]]] = None) -> None:
        named: Dict[str, CLValue] = {}
        for name, value in items or ():
            if name in named:
                raise ValueError(f"Duplicate argument name: {name!r}")
            named[name] = value
        self._named = named

    @classmethod
    def from_dict(cls, named: Mapping[str, CLValue]) -> "RuntimeArgs":
        return cls(named.items())

    def __getitem__(self, name: str) -> CLValue:
        return self._named[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._named)

    def __len__(self) -> int:
        return len(self._named)

    def __repr__(self) -> str:
        return f"RuntimeArgs({list(self._named)!r})"

    def sorted_items(self) -> list[Tuple[str, CLValue]]:
        """Arguments in ascending name order, insertion order discarded."""
        return sorted(self._named.items(), key=lambda item: item[0])

    def without(self, keys: Iterable[str]) -> "RuntimeArgs":
        dropped = set(keys)
        return RuntimeArgs((name, value) for name, value in self._named.items() if name not in dropped)
