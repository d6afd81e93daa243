"""Staking (auction) rows for TransactionV1 delegate, undelegate and redelegate."""
from __future__ import annotations

from typing import List

from display.element import Element, as_expert
from display.runtime_args import (
    parse_amount,
    parse_optional_arg,
    parse_runtime_args,
    remove_args,
)
from display.target import TransactionV1Meta, v1_type
from models.transaction_v1 import as_named

ARG_DELEGATOR = "delegator"
ARG_VALIDATOR = "validator"
ARG_NEW_VALIDATOR = "new_validator"
ARG_AMOUNT = "amount"


def _parse_auction(action: str, meta: TransactionV1Meta, validator_keys: tuple) -> List[Element]:
    args = as_named(meta.args)
    elements = [Element.regular("Auction", action)]
    elements.extend(as_expert(v1_type(meta)))
    for key in (ARG_DELEGATOR,) + validator_keys:
        row = parse_optional_arg(args, key, False)
        if row is not None:
            elements.append(row)
    amount = parse_amount(args)
    if amount is not None:
        elements.append(amount)
    consumed = (ARG_DELEGATOR, ARG_AMOUNT) + validator_keys
    elements.extend(parse_runtime_args(remove_args(args, consumed)))
    return elements


def parse_delegation(meta: TransactionV1Meta) -> List[Element]:
    return _parse_auction("delegate", meta, (ARG_VALIDATOR,))


def parse_undelegation(meta: TransactionV1Meta) -> List[Element]:
    return _parse_auction("undelegate", meta, (ARG_VALIDATOR,))


def parse_redelegation(meta: TransactionV1Meta) -> List[Element]:
    """Moves a stake from `validator` to `new_validator`."""
    return _parse_auction("redelegate", meta, (ARG_VALIDATOR, ARG_NEW_VALIDATOR))
