"""
TransactionV1 parser.

The transaction's args, target, entry point and scheduling live in a field
map keyed by fixed numeric slots. They are decoded once into
``TransactionV1Meta`` and then dispatched on entry point and target.
"""
from __future__ import annotations

import logging
from typing import List

from display.auction import parse_delegation, parse_redelegation, parse_undelegation
from display.element import Element
from display.formatting import (
    entrypoint,
    format_ttl,
    parse_initiator,
    timestamp_to_seconds_res,
)
from display.runtime_args import (
    parse_amount,
    parse_fee,
    parse_runtime_args,
    parse_transfer_args,
    remove_amount_arg,
    remove_transfer_args,
)
from display.target import TransactionV1Meta, is_system_payment, v1_type
from errors import UnexpectedItemKindError, UnsupportedEntryPointError
from models.transaction_v1 import (
    EntryPointKind,
    Fixed,
    Native,
    PaymentLimited,
    Prepaid,
    Session,
    Stored,
    TransactionV1,
    TransactionV1Payload,
    as_named,
)

logger = logging.getLogger(__name__)

_AUCTION_PARSERS = {
    EntryPointKind.DELEGATE: parse_delegation,
    EntryPointKind.UNDELEGATE: parse_undelegation,
    EntryPointKind.REDELEGATE: parse_redelegation,
}


def _pricing_label(pricing_mode) -> str:
    if isinstance(pricing_mode, PaymentLimited):
        return str(pricing_mode.payment_amount)
    if isinstance(pricing_mode, Fixed):
        return "Fixed"
    if isinstance(pricing_mode, Prepaid):
        return "0"
    raise UnexpectedItemKindError(f"Unknown pricing mode: {type(pricing_mode).__name__}")


def parse_v1_payload(payload: TransactionV1Payload) -> List[Element]:
    return [
        Element.regular("chain ID", payload.chain_name),
        Element.regular("account", parse_initiator(payload.initiator_addr)),
        Element.expert("timestamp", timestamp_to_seconds_res(payload.timestamp_ms)),
        Element.expert("ttl", format_ttl(payload.ttl_ms)),
        Element.expert("payment", _pricing_label(payload.pricing_mode)),
    ]


def _parse_native(meta: TransactionV1Meta) -> List[Element]:
    if meta.entry_point.kind is not EntryPointKind.TRANSFER:
        raise UnsupportedEntryPointError(
            f"unsupported entry point {meta.entry_point} in native transaction"
        )
    args = as_named(meta.args)
    elements = parse_transfer_args(args)
    args_sans_transfer = remove_transfer_args(args)
    if len(args_sans_transfer):
        elements.extend(parse_runtime_args(args_sans_transfer))
    return elements


def parse_v1_meta(v1: TransactionV1) -> List[Element]:
    meta = TransactionV1Meta.deserialize_from(v1)

    auction_parser = _AUCTION_PARSERS.get(meta.entry_point.kind)
    if auction_parser is not None:
        logger.debug("Rendering transaction as %s", meta.entry_point)
        return auction_parser(meta)

    elements = v1_type(meta)
    target = meta.target
    if isinstance(target, Native):
        elements.extend(_parse_native(meta))
    elif isinstance(target, Stored):
        args = as_named(meta.args)
        elements.append(entrypoint(str(meta.entry_point)))
        amount = parse_amount(args)
        if amount is not None:
            elements.append(amount)
        elements.extend(parse_runtime_args(remove_amount_arg(args)))
    elif isinstance(target, Session):
        args = as_named(meta.args)
        args_sans_amount = remove_amount_arg(args)
        if is_system_payment(target.module_bytes):
            fee = parse_fee(args)
            if fee is not None:
                elements.append(fee)
            if len(args_sans_amount):
                elements.extend(parse_runtime_args(args_sans_amount))
        else:
            amount = parse_amount(args)
            if amount is not None:
                elements.append(amount)
            elements.extend(parse_runtime_args(args_sans_amount))
    else:
        raise UnexpectedItemKindError(f"Unknown transaction target: {type(target).__name__}")
    return elements


def parse_v1_approvals(v1: TransactionV1) -> List[Element]:
    return [Element.expert("Approvals #", str(len(v1.approvals)))]


def parse_v1(v1: TransactionV1) -> List[Element]:
    elements = parse_v1_payload(v1.payload)
    elements.extend(parse_v1_meta(v1))
    elements.extend(parse_v1_approvals(v1))
    return elements
