"""
Named-argument extraction.

Specialized extractors turn well-known arguments into labeled rows; the
generic dump surfaces everything else so that no argument is ever hidden
from the signer. Callers remove the consumed keys before dumping so that a
key is never rendered twice.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional

from display.element import Element
from display.formatting import format_amount
from errors import MalformedAmountError
from models.cl_value import RuntimeArgs

logger = logging.getLogger(__name__)

ARG_AMOUNT = "amount"
ARG_TO = "to"
ARG_SOURCE = "source"
ARG_TARGET = "target"
ARG_ID = "id"

TRANSFER_ARG_KEYS = (ARG_TO, ARG_SOURCE, ARG_TARGET, ARG_AMOUNT, ARG_ID)

U512_MAX = (1 << 512) - 1
_DECIMAL_LITERAL = re.compile(r"[0-9]+")


def identity(value: str) -> str:
    return value


def parse_optional_arg(
    args: RuntimeArgs,
    key: str,
    expert: bool,
    f: Callable[[str], str] = identity,
) -> Optional[Element]:
    cl_value = args.get(key)
    if cl_value is None:
        return None
    value = f(cl_value.to_display_string())
    if expert:
        return Element.expert(key, value)
    return Element.regular(key, value)


def _motes_from_literal(amount_str: str) -> str:
    if not _DECIMAL_LITERAL.fullmatch(amount_str):
        raise MalformedAmountError(f"Amount {amount_str!r} is not a decimal integer literal")
    motes = int(amount_str)
    if motes > U512_MAX:
        raise MalformedAmountError(f"Amount {amount_str!r} does not fit in U512")
    return format_amount(motes)


def parse_amount(args: RuntimeArgs) -> Optional[Element]:
    return parse_optional_arg(args, ARG_AMOUNT, False, _motes_from_literal)


def parse_fee(args: RuntimeArgs) -> Optional[Element]:
    """The `amount` argument of a system payment, shown as an expert `fee` row."""
    element = parse_optional_arg(args, ARG_AMOUNT, True, _motes_from_literal)
    if element is None:
        return None
    return Element.expert("fee", element.value)


def parse_transfer_args(args: RuntimeArgs) -> List[Element]:
    """
    Rows for a native transfer, in display order.

    Required fields for transfer are target, amount and id; `source` and
    `to` are optional. Any of them may be absent here, absence only drops
    the row.
    """
    rows = [
        parse_optional_arg(args, ARG_TO, False),
        parse_optional_arg(args, ARG_SOURCE, True),
        parse_optional_arg(args, ARG_TARGET, False),
        parse_amount(args),
        parse_optional_arg(args, ARG_ID, True),
    ]
    return [row for row in rows if row is not None]


def parse_runtime_args(args: RuntimeArgs) -> List[Element]:
    """
    Parses all arguments into a form:
    arg-n-name: <name>
    arg-n-val: <val>
    where n is the position of the argument in ascending name order.
    """
    elements: List[Element] = []
    for idx, (name, value) in enumerate(args.sorted_items()):
        elements.append(Element.expert(f"arg-{idx}-name", name))
        elements.append(Element.expert(f"arg-{idx}-val", value.to_display_string()))
    if elements:
        logger.debug("Dumped %d generic argument(s)", len(args))
    return elements


def remove_args(args: RuntimeArgs, keys: Iterable[str]) -> RuntimeArgs:
    return args.without(keys)


def remove_amount_arg(args: RuntimeArgs) -> RuntimeArgs:
    return remove_args(args, (ARG_AMOUNT,))


def remove_transfer_args(args: RuntimeArgs) -> RuntimeArgs:
    """Removes all arguments that are used in the transfer rows."""
    return remove_args(args, TRANSFER_ARG_KEYS)
