"""
Legacy deploy parser.

Turns a deploy header and its payment/session executable items into display
rows. Items are a closed set of variants; every dispatch below ends in a
raise so that an unknown variant can never be skipped silently.
"""
from __future__ import annotations

import logging
from typing import List

from display.element import Element, as_expert
from display.formatting import (
    content_digest,
    entrypoint,
    format_ttl,
    parse_public_key,
    parse_version,
    timestamp_to_seconds_res,
)
from display.runtime_args import (
    parse_amount,
    parse_optional_arg,
    parse_runtime_args,
    parse_transfer_args,
    remove_amount_arg,
    remove_args,
    remove_transfer_args,
)
from errors import UnexpectedItemKindError
from models.deploy import (
    STORED_ITEM_TYPES,
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

logger = logging.getLogger(__name__)

AUCTION_DELEGATE = "delegate"
AUCTION_UNDELEGATE = "undelegate"
ARG_DELEGATOR = "delegator"
ARG_VALIDATOR = "validator"
_AUCTION_ARG_KEYS = (ARG_DELEGATOR, ARG_VALIDATOR, "amount")


def _unknown_item(item: object) -> UnexpectedItemKindError:
    return UnexpectedItemKindError(f"Unknown executable deploy item: {type(item).__name__}")


def is_system_payment(phase: TxnPhase, module_bytes: bytes) -> bool:
    """Payment is the network's system payment when the module bytes are empty."""
    return phase.is_payment() and len(module_bytes) == 0


def parse_deploy_header(dh: DeployHeader) -> List[Element]:
    return [
        Element.regular("chain ID", dh.chain_name),
        Element.regular("from", parse_public_key(dh.account)),
        Element.expert("timestamp", timestamp_to_seconds_res(dh.timestamp_ms)),
        Element.expert("ttl", format_ttl(dh.ttl_ms)),
        Element.expert("gas price", str(dh.gas_price)),
        Element.expert("Deps #", str(len(dh.dependencies))),
    ]


def deploy_type(phase: TxnPhase, item: ExecutableDeployItem) -> List[Element]:
    """
    Returns the main elements describing the item: whether it is raw contract
    bytes, a call by name or by hash, versioned or not.

    Does NOT parse the arguments or entry points.
    """
    phase_label = str(phase)
    if isinstance(item, ModuleBytes):
        if is_system_payment(phase, item.module_bytes):
            return [Element.regular(phase_label, "system")]
        if not item.module_bytes:
            # Empty bytes never get a digest row.
            return [Element.regular(phase_label, "contract")]
        return [
            Element.regular(phase_label, "contract"),
            Element.regular("Cntrct hash", content_digest(item.module_bytes)),
        ]
    if isinstance(item, StoredContractByHash):
        return [
            Element.regular(phase_label, "by-hash"),
            Element.regular("address", str(item.hash)),
        ]
    if isinstance(item, StoredContractByName):
        return [
            Element.regular(phase_label, "by-name"),
            Element.regular("name", item.name),
        ]
    if isinstance(item, StoredVersionedContractByHash):
        return [
            Element.regular(phase_label, "by-hash-versioned"),
            Element.regular("address", str(item.hash)),
            parse_version(item.version),
        ]
    if isinstance(item, StoredVersionedContractByName):
        return [
            Element.regular(phase_label, "by-name-versioned"),
            Element.regular("name", item.name),
            parse_version(item.version),
        ]
    if isinstance(item, Transfer):
        return [Element.regular(phase_label, "native transfer")]
    raise _unknown_item(item)


def is_entrypoint(item: ExecutableDeployItem, expected: str) -> bool:
    if isinstance(item, (ModuleBytes, Transfer)):
        return False
    if isinstance(item, STORED_ITEM_TYPES):
        return item.entry_point == expected
    raise _unknown_item(item)


def is_delegate(item: ExecutableDeployItem) -> bool:
    """Returns `True` when the item's entry point is *literally* `delegate`."""
    return is_entrypoint(item, AUCTION_DELEGATE)


def is_undelegate(item: ExecutableDeployItem) -> bool:
    """Returns `True` when the item's entry point is *literally* `undelegate`."""
    return is_entrypoint(item, AUCTION_UNDELEGATE)


def _parse_auction(action: str, item: ExecutableDeployItem) -> List[Element]:
    if isinstance(item, (ModuleBytes, Transfer)):
        raise UnexpectedItemKindError(f"unexpected type for {action}: {type(item).__name__}")
    if not isinstance(item, STORED_ITEM_TYPES):
        raise _unknown_item(item)

    elements = [Element.regular("Auction", action)]
    # The contract details are kept for the expert review only.
    elements.extend(as_expert(deploy_type(TxnPhase.SESSION, item)))
    args = item.args
    for key in (ARG_DELEGATOR, ARG_VALIDATOR):
        row = parse_optional_arg(args, key, False)
        if row is not None:
            elements.append(row)
    amount = parse_amount(args)
    if amount is not None:
        elements.append(amount)
    elements.extend(parse_runtime_args(remove_args(args, _AUCTION_ARG_KEYS)))
    return elements


def parse_delegation(item: ExecutableDeployItem) -> List[Element]:
    return _parse_auction(AUCTION_DELEGATE, item)


def parse_undelegation(item: ExecutableDeployItem) -> List[Element]:
    return _parse_auction(AUCTION_UNDELEGATE, item)


def parse_phase(item: ExecutableDeployItem, phase: TxnPhase) -> List[Element]:
    if is_delegate(item):
        logger.debug("Rendering %s item as delegation", phase)
        return parse_delegation(item)
    if is_undelegate(item):
        logger.debug("Rendering %s item as undelegation", phase)
        return parse_undelegation(item)

    elements = deploy_type(phase, item)
    if isinstance(item, ModuleBytes):
        if is_system_payment(phase, item.module_bytes):
            # The only required argument for the system payment is `amount`.
            amount = parse_amount(item.args)
            if amount is not None:
                elements.append(amount)
            elements.extend(parse_runtime_args(remove_amount_arg(item.args)))
        else:
            elements.extend(parse_runtime_args(item.args))
    elif isinstance(item, STORED_ITEM_TYPES):
        elements.append(entrypoint(item.entry_point))
        elements.extend(parse_runtime_args(item.args))
    elif isinstance(item, Transfer):
        elements.extend(parse_transfer_args(item.args))
        elements.extend(parse_runtime_args(remove_transfer_args(item.args)))
    else:
        raise _unknown_item(item)
    return elements


def parse_approvals(deploy: Deploy) -> List[Element]:
    return [Element.regular("Approvals #", str(len(deploy.approvals)))]


def parse_deploy(deploy: Deploy) -> List[Element]:
    elements = parse_deploy_header(deploy.header)
    elements.extend(parse_phase(deploy.payment, TxnPhase.PAYMENT))
    elements.extend(parse_phase(deploy.session, TxnPhase.SESSION))
    elements.extend(parse_approvals(deploy))
    return elements
