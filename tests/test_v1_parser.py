import hashlib

import pytest

from display.deploy import deploy_type
from display.element import Element
from display.target import TransactionV1Meta, v1_type
from display.v1 import parse_v1, parse_v1_meta, parse_v1_payload
from errors import (
    MalformedFieldError,
    MissingFieldError,
    UnsupportedArgsError,
    UnsupportedEntryPointError,
)
from models.cl_value import U64, CLValue, RuntimeArgs
from models.deploy import StoredContractByHash, StoredVersionedContractByHash, TxnPhase
from models.keys import AccountHash, ContractHash, ContractPackageHash, PublicKey
from models.transaction_v1 import (
    ARGS_MAP_KEY,
    CALL,
    DELEGATE,
    ENTRY_POINT_MAP_KEY,
    REDELEGATE,
    SCHEDULING_MAP_KEY,
    TARGET_MAP_KEY,
    TRANSFER,
    UNDELEGATE,
    BytesreprArgs,
    ByHash,
    ByName,
    ByPackageHash,
    ByPackageName,
    Fixed,
    NamedArgs,
    Native,
    PaymentLimited,
    Prepaid,
    Session,
    Standard,
    Stored,
    TransactionEntryPoint,
    TransactionV1,
    TransactionV1Approval,
    TransactionV1Payload,
)

SENDER = PublicKey("ed25519", b"\x01" * 32)
DELEGATOR = PublicKey("ed25519", b"\x0d" * 32)
VALIDATOR = PublicKey("ed25519", b"\x0f" * 32)
NEW_VALIDATOR = PublicKey("secp256k1", b"\x03" + b"\x1f" * 32)


def _args(**named):
    return NamedArgs(RuntimeArgs(named.items()))


def _fields(args, target, entry_point, scheduling=None):
    return {
        ARGS_MAP_KEY: args,
        TARGET_MAP_KEY: target,
        ENTRY_POINT_MAP_KEY: entry_point,
        SCHEDULING_MAP_KEY: scheduling or Standard(),
    }


def _txn(fields, initiator=SENDER, pricing=None, approvals=1):
    payload = TransactionV1Payload(
        initiator_addr=initiator,
        timestamp_ms=1_700_000_000_000,
        ttl_ms=2 * 60 * 60 * 1000,
        chain_name="casper",
        pricing_mode=pricing or PaymentLimited(payment_amount=100_000_000),
        fields=fields,
    )
    return TransactionV1(
        hash=b"\x77" * 32,
        payload=payload,
        approvals=[TransactionV1Approval(SENDER, b"\x00" * 64)] * approvals,
    )


def test_payload_rows():
    txn = _txn(_fields(_args(), Native(), TRANSFER))
    assert parse_v1_payload(txn.payload) == [
        Element.regular("chain ID", "casper"),
        Element.regular("account", SENDER.to_hex()),
        Element.expert("timestamp", "2023-11-14T22:13:20Z"),
        Element.expert("ttl", "2h"),
        Element.expert("payment", "100000000"),
    ]


@pytest.mark.parametrize(
    "pricing, expected",
    [(PaymentLimited(payment_amount=42), "42"), (Fixed(), "Fixed"), (Prepaid(receipt=b"\x01"), "0")],
)
def test_pricing_modes(pricing, expected):
    txn = _txn(_fields(_args(), Native(), TRANSFER), pricing=pricing)
    assert parse_v1_payload(txn.payload)[-1] == Element.expert("payment", expected)


def test_account_hash_initiator():
    txn = _txn(_fields(_args(), Native(), TRANSFER), initiator=AccountHash(b"\x0c" * 32))
    assert parse_v1_payload(txn.payload)[1] == Element.regular("account", "account-hash-" + "0c" * 32)


def test_missing_field_fails_closed():
    fields = _fields(_args(), Native(), TRANSFER)
    del fields[SCHEDULING_MAP_KEY]
    with pytest.raises(MissingFieldError):
        TransactionV1Meta.deserialize_from(_txn(fields))


def test_malformed_field_fails_closed():
    fields = _fields(_args(), "native", TRANSFER)
    with pytest.raises(MalformedFieldError):
        parse_v1_meta(_txn(fields))


def test_native_transfer_rows():
    args = _args(
        target=CLValue.byte_array(b"\x0a" * 4),
        amount=CLValue.u512(2_500_000_000),
        id=CLValue.option(U64, 1),
    )
    rows = parse_v1_meta(_txn(_fields(args, Native(), TRANSFER)))
    assert rows == [
        Element.regular("target", "0a0a0a0a"),
        Element.regular("amount", "2 500 000 000 motes"),
        Element.expert("id", "1"),
    ]


def test_native_transfer_dumps_only_leftovers():
    args = _args(amount=CLValue.u512(1), memo=CLValue.string("rent"))
    rows = parse_v1_meta(_txn(_fields(args, Native(), TRANSFER)))
    assert rows == [
        Element.regular("amount", "1 motes"),
        Element.expert("arg-0-name", "memo"),
        Element.expert("arg-0-val", "rent"),
    ]


def test_native_target_rejects_other_entry_points():
    with pytest.raises(UnsupportedEntryPointError):
        parse_v1_meta(_txn(_fields(_args(), Native(), CALL)))


def test_bytesrepr_args_rejected():
    with pytest.raises(UnsupportedArgsError):
        parse_v1_meta(_txn(_fields(BytesreprArgs(b"\x00"), Native(), TRANSFER)))


def test_stored_target_rows():
    args = _args(amount=CLValue.u512(1000), recipient=CLValue.key("account-hash-00"))
    target = Stored(ByPackageName("cep18", 2))
    rows = parse_v1_meta(_txn(_fields(args, target, TransactionEntryPoint.custom("transfer_to"))))
    assert rows == [
        Element.regular("execution", "by-name-versioned"),
        Element.regular("name", "cep18"),
        Element.expert("version", "2"),
        Element.expert("entry-point", "transfer_to"),
        Element.regular("amount", "1 000 motes"),
        Element.expert("arg-0-name", "recipient"),
        Element.expert("arg-0-val", "account-hash-00"),
    ]


@pytest.mark.parametrize(
    "invocation, expected",
    [
        (ByHash(b"\xaa" * 2), [Element.regular("execution", "by-hash"), Element.regular("address", "contract-aaaa")]),
        (ByName("faucet"), [Element.regular("execution", "by-name"), Element.regular("name", "faucet")]),
        (
            ByPackageHash(b"\xbb", None),
            [
                Element.regular("execution", "by-hash-versioned"),
                Element.regular("address", "contract-package-bb"),
                Element.expert("version", "latest"),
            ],
        ),
    ],
)
def test_stored_invocation_shapes(invocation, expected):
    meta = TransactionV1Meta(_args(), Stored(invocation), CALL, Standard())
    assert v1_type(meta) == expected


def test_stored_address_matches_legacy_rendering():
    addr = b"\x93" * 32
    v1_rows = v1_type(TransactionV1Meta(_args(), Stored(ByHash(addr)), CALL, Standard()))
    legacy_rows = deploy_type(TxnPhase.SESSION, StoredContractByHash(ContractHash(addr), "call"))
    assert v1_rows[1] == legacy_rows[1]

    v1_rows = v1_type(TransactionV1Meta(_args(), Stored(ByPackageHash(addr, 3)), CALL, Standard()))
    legacy_rows = deploy_type(
        TxnPhase.SESSION, StoredVersionedContractByHash(ContractPackageHash(addr), 3, "call")
    )
    assert v1_rows[1:] == legacy_rows[1:]


def test_session_system_payment_end_to_end():
    rows = parse_v1_meta(_txn(_fields(_args(amount=CLValue.u512(500)), Session(b""), CALL)))
    assert rows == [Element.expert("fee", "500 motes")]


def test_session_system_payment_with_extra_args():
    args = _args(amount=CLValue.u512(500), note=CLValue.string("n"))
    rows = parse_v1_meta(_txn(_fields(args, Session(b""), CALL)))
    assert rows == [
        Element.expert("fee", "500 motes"),
        Element.expert("arg-0-name", "note"),
        Element.expert("arg-0-val", "n"),
    ]


def test_session_contract_rows():
    code = b"\x00asm\x01"
    args = _args(amount=CLValue.u512(7), flag=CLValue.boolean(True))
    rows = parse_v1_meta(_txn(_fields(args, Session(code), CALL)))
    assert rows == [
        Element.regular("execution", "contract"),
        Element.regular("Cntrct hash", hashlib.blake2b(code, digest_size=32).hexdigest()),
        Element.regular("amount", "7 motes"),
        Element.expert("arg-0-name", "flag"),
        Element.expert("arg-0-val", "true"),
    ]


def _staking_args(**extra):
    return _args(
        delegator=CLValue.public_key(DELEGATOR),
        validator=CLValue.public_key(VALIDATOR),
        amount=CLValue.u512(500_000_000_000),
        **extra,
    )


@pytest.mark.parametrize("entry_point, action", [(DELEGATE, "delegate"), (UNDELEGATE, "undelegate")])
def test_delegate_and_undelegate(entry_point, action):
    rows = parse_v1_meta(_txn(_fields(_staking_args(), Native(), entry_point)))
    assert rows == [
        Element.regular("Auction", action),
        Element.regular("delegator", DELEGATOR.to_hex()),
        Element.regular("validator", VALIDATOR.to_hex()),
        Element.regular("amount", "500 000 000 000 motes"),
    ]


def test_redelegate():
    args = _staking_args(new_validator=CLValue.public_key(NEW_VALIDATOR))
    rows = parse_v1_meta(_txn(_fields(args, Native(), REDELEGATE)))
    assert rows == [
        Element.regular("Auction", "redelegate"),
        Element.regular("delegator", DELEGATOR.to_hex()),
        Element.regular("validator", VALIDATOR.to_hex()),
        Element.regular("new_validator", NEW_VALIDATOR.to_hex()),
        Element.regular("amount", "500 000 000 000 motes"),
    ]


def test_auction_on_stored_target_subordinates_type_rows():
    rows = parse_v1_meta(_txn(_fields(_staking_args(), Stored(ByName("auction")), DELEGATE)))
    assert rows[:3] == [
        Element.regular("Auction", "delegate"),
        Element.expert("execution", "by-name"),
        Element.expert("name", "auction"),
    ]


def test_full_transaction_rows():
    args = _args(target=CLValue.byte_array(b"\x0a"), amount=CLValue.u512(10))
    rows = parse_v1(_txn(_fields(args, Native(), TRANSFER), approvals=2))
    assert [r.label for r in rows] == [
        "chain ID",
        "account",
        "timestamp",
        "ttl",
        "payment",
        "target",
        "amount",
        "Approvals #",
    ]
    assert rows[-1] == Element.expert("Approvals #", "2")
