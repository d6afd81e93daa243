"""
Entry point: transaction in, display rows out.

A parse either returns the complete row sequence or raises. Callers must
treat an ``InvariantViolation`` as "this transaction cannot be safely
displayed" and refuse to sign it.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

import config
from display.deploy import parse_deploy
from display.element import Element
from display.v1 import parse_v1
from errors import InvariantViolation, UnexpectedItemKindError
from models.deploy import Deploy
from models.transaction_v1 import TransactionV1

logger = logging.getLogger(__name__)

Transaction = Union[Deploy, TransactionV1]


def parse_transaction(txn: Transaction) -> List[Element]:
    try:
        if isinstance(txn, Deploy):
            elements = parse_deploy(txn)
        elif isinstance(txn, TransactionV1):
            elements = parse_v1(txn)
        else:
            raise UnexpectedItemKindError(f"Unknown transaction type: {type(txn).__name__}")
    except InvariantViolation as exc:
        logger.error("Transaction %s cannot be displayed: %s", _txn_hash(txn), exc)
        raise
    logger.debug("Rendered transaction %s into %d rows", _txn_hash(txn), len(elements))
    return elements


def _txn_hash(txn: object) -> str:
    raw = getattr(txn, "hash", None)
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).hex()
    return "<unknown>"


def visible_rows(elements: Iterable[Element], expert: Optional[bool] = None) -> List[Element]:
    """Rows shown for the chosen review depth; expert review shows every row."""
    if expert is None:
        expert = config.settings.review.expert_mode
    if expert:
        return list(elements)
    return [element for element in elements if not element.is_expert]
