"""Decoding documents into typed events."""

from __future__ import annotations

import pytest
from bson import ObjectId

from omni_events.codec import DecodeError, decode
from omni_events.models import (
    ChainKind,
    EnrichmentData,
    EvmFinTransfer,
    EvmInitTransfer,
    EvmLog,
    EvmDeployToken,
    Event,
    LegacyEvent,
    LegacyMetaEvent,
    LegacyTransactionEvent,
    MetaEvent,
    NearClaimFee,
    NearReceipt,
    NearSignClaimNativeFee,
    NearSignTransfer,
    NearTransfer,
    NotApplicable,
    NotComputed,
    PriceData,
    SolanaFinTransfer,
    SolanaInitTransfer,
    SolanaTransaction,
    TransactionEvent,
    TransferMessage,
    TransferOrigin,
    TransferStatus,
)

from tests import factories as f


# ── Transaction events ────────────────────────────────────────────


def test_decode_transaction_event():
    doc = f.transaction_event_doc(status="Finalised")
    event = decode(TransactionEvent, doc)

    assert event.id == doc["_id"]
    assert event.transaction_id == doc["transaction_id"]
    assert event.status is TransferStatus.FINALISED
    assert event.sender == f.NEAR_SENDER
    assert event.transfer_id.origin_chain is ChainKind.NEAR
    assert event.transfer_id.origin_nonce == 7
    assert isinstance(event.origin, NearReceipt)
    assert event.origin_chain is ChainKind.NEAR

    message = event.transfer_message
    assert isinstance(message, NearTransfer)
    assert message.amount == 10**24
    assert message.fee.native_fee == 1000


@pytest.mark.parametrize("message,cls", [
    (f.near_transfer_message, NearTransfer),
    (f.near_sign_transfer_message, NearSignTransfer),
    (f.near_claim_fee_message, NearClaimFee),
    (f.evm_init_transfer_message, EvmInitTransfer),
    (f.evm_fin_transfer_message, EvmFinTransfer),
    (f.solana_init_transfer_message, SolanaInitTransfer),
    (f.solana_fin_transfer_message, SolanaFinTransfer),
])
def test_decode_every_transfer_message(message, cls):
    assert isinstance(decode(TransferMessage, message()), cls)


def test_decode_near_sign_transfer_nested_payload():
    value = decode(TransferMessage, f.near_sign_transfer_message())
    assert value.signature.big_r.affine_point.startswith("02F2")
    assert value.signature.recovery_id == 1
    assert value.message_payload.transfer_id.origin_chain is ChainKind.NEAR
    assert value.message_payload.amount == 999_000


def test_decode_origins():
    assert isinstance(decode(TransferOrigin, f.near_origin()), NearReceipt)
    evm = decode(TransferOrigin, f.evm_origin("Base"))
    assert isinstance(evm, EvmLog)
    assert evm.chain_kind is ChainKind.BASE
    assert isinstance(decode(TransferOrigin, f.solana_origin()), SolanaTransaction)


# ── Optional and extra fields ─────────────────────────────────────


def test_absent_optional_fields_decode_to_none():
    origin = decode(TransferOrigin, f.evm_origin(transaction_index=None, log_index=None))
    assert origin.transaction_index is None
    assert origin.log_index is None

    doc = f.transaction_event_doc(sender=None, with_id=False)
    event = decode(TransactionEvent, doc)
    assert event.sender is None
    assert event.id is None


def test_solana_fin_transfer_optional_fields():
    value = decode(TransferMessage, {"SolanaFinTransfer": {"amount": 5, "destination_nonce": 1}})
    assert value == SolanaFinTransfer(amount=5, destination_nonce=1)


def test_unknown_fields_are_ignored():
    doc = f.transaction_event_doc()
    doc["indexed_at"] = "2024-06-10T00:00:00Z"
    doc["origin"]["NearReceipt"]["shard_id"] = 3
    event = decode(TransactionEvent, doc)
    assert event.origin.block_height == 140_000_000


def test_raw_receipt_id_back_reference():
    raw_id = ObjectId()
    origin = decode(TransferOrigin, f.near_origin(raw_receipt_id=raw_id))
    assert origin.raw_receipt_id == raw_id

    origin = decode(TransferOrigin, f.near_origin(raw_receipt_id=str(raw_id)))
    assert origin.raw_receipt_id == raw_id


def test_integer_amounts_are_accepted():
    value = decode(TransferMessage, {"SolanaFinTransfer": {"amount": 250, "destination_nonce": 9}})
    assert value.amount == 250


# ── Enrichment data ───────────────────────────────────────────────


def test_absent_enrichment_is_not_computed():
    event = decode(TransactionEvent, f.transaction_event_doc())
    assert isinstance(event.enrichment_data, NotComputed)


def test_explicit_none_enrichment_is_not_computed():
    event = decode(TransactionEvent, f.transaction_event_doc(enrichment="None"))
    assert isinstance(event.enrichment_data, NotComputed)


def test_not_applicable_enrichment():
    event = decode(TransactionEvent, f.transaction_event_doc(enrichment="NotApplicable"))
    assert isinstance(event.enrichment_data, NotApplicable)


def test_price_data_enrichment():
    data = decode(EnrichmentData, f.price_data("ETH", "USDC"))
    assert isinstance(data, PriceData)
    assert data.native_token_info.symbol == "ETH"
    assert data.transferred_token_info.decimals == 6

    native_only = decode(EnrichmentData, f.price_data("NEAR", None))
    assert native_only.transferred_token_info is None


# ── Unknown tags ──────────────────────────────────────────────────


def test_unknown_origin_tag_is_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        decode(TransferOrigin, {"BitcoinBlock": {"height": 1}})
    assert "unknown variant 'BitcoinBlock'" in str(exc_info.value)
    assert exc_info.value.path == "$"


def test_unknown_message_tag_is_decode_error():
    doc = f.transaction_event_doc(message={"EvmInitTransfer": {}})
    with pytest.raises(DecodeError) as exc_info:
        decode(TransactionEvent, doc)
    assert exc_info.value.path == "$.transfer_message"


@pytest.mark.parametrize("enrichment", ["Pending", {"Prices": {}}, "none"])
def test_unknown_enrichment_tag_is_decode_error(enrichment):
    with pytest.raises(DecodeError):
        decode(TransactionEvent, f.transaction_event_doc(enrichment=enrichment))


def test_unit_variant_with_body_tag_requires_body():
    with pytest.raises(DecodeError, match="requires a body"):
        decode(EnrichmentData, "Data")


def test_two_tags_in_one_union_value_is_decode_error():
    with pytest.raises(DecodeError, match="exactly one variant"):
        decode(TransferOrigin, {**f.near_origin(), **f.solana_origin()})


# ── Field errors ──────────────────────────────────────────────────


def test_missing_required_field_names_path():
    doc = f.transaction_event_doc()
    del doc["transfer_message"]["NearTransferMessage"]["amount"]
    with pytest.raises(DecodeError) as exc_info:
        decode(TransactionEvent, doc)
    assert exc_info.value.path == "$.transfer_message.NearTransferMessage.amount"
    assert exc_info.value.message == "missing field"


def test_unknown_status_is_decode_error():
    with pytest.raises(DecodeError, match="unknown TransferStatus"):
        decode(TransactionEvent, f.transaction_event_doc(status="Signed"))


@pytest.mark.parametrize("amount", ["-5", "1e18", "12.5", True, 2**128, "²", "١٢", "1" * 5000])
def test_bad_amounts_are_decode_errors(amount):
    with pytest.raises(DecodeError):
        decode(TransferMessage, {"SolanaFinTransfer": {"amount": amount, "destination_nonce": 1}})


def test_bool_is_not_an_integer():
    with pytest.raises(DecodeError, match="expected an integer"):
        decode(TransferMessage, {"SolanaFinTransfer": {"amount": "1", "destination_nonce": True}})


def test_address_without_chain_prefix_is_decode_error():
    doc = f.transaction_event_doc(sender="alice.near")
    with pytest.raises(DecodeError) as exc_info:
        decode(TransactionEvent, doc)
    assert exc_info.value.path == "$.sender"


def test_non_document_is_decode_error():
    with pytest.raises(DecodeError, match="expected a document"):
        decode(TransactionEvent, ["not", "a", "document"])


# ── Meta events ───────────────────────────────────────────────────


def test_decode_meta_event():
    doc = f.meta_event_doc()
    event = decode(MetaEvent, doc)
    assert isinstance(event.details, EvmDeployToken)
    assert event.details.symbol == "USDC"
    assert event.origin_chain is ChainKind.ETH


def test_decode_meta_event_with_list_field():
    event = decode(MetaEvent, f.meta_event_doc(details=f.near_sign_claim_native_fee_details()))
    assert isinstance(event.details, NearSignClaimNativeFee)
    assert event.details.nonces == [3, 4, 5]
    assert event.details.amount == 120_000


# ── Normalized and legacy events ──────────────────────────────────


def test_decode_normalized_event():
    doc = {
        "_id": ObjectId(),
        "transaction_id": "tx",
        "origin": f.solana_origin(),
        "Transaction": {
            "transfer_message": f.solana_init_transfer_message(),
            "transfer_id": {"origin_chain": "Sol", "origin_nonce": 4},
            "status": "Initialized",
            "sender": f.SOL_SENDER,
        },
    }
    event = decode(Event, doc)
    assert event.origin_chain is ChainKind.SOL
    assert isinstance(event.event.transfer_message, SolanaInitTransfer)
    assert isinstance(event.enrichment_data, NotComputed)


def test_decode_legacy_transaction_and_meta():
    tx = decode(LegacyEvent, f.legacy_transaction_doc(top_enrichment="NotApplicable"))
    assert isinstance(tx.event, LegacyTransactionEvent)
    assert isinstance(tx.enrichment_data, NotApplicable)
    assert isinstance(tx.event.enrichment_data, NotComputed)

    meta = decode(LegacyEvent, f.legacy_meta_doc())
    assert isinstance(meta.event, LegacyMetaEvent)
    assert meta.transaction_id.startswith("0x4b5a")


def test_legacy_event_without_payload_is_decode_error():
    with pytest.raises(DecodeError, match="expected one of 'Transaction' or 'Meta'"):
        decode(LegacyEvent, {"_id": ObjectId(), "enrichment_data": "NotApplicable"})


def test_legacy_event_with_both_payloads_is_decode_error():
    doc = f.legacy_transaction_doc()
    doc["Meta"] = f.legacy_meta_doc()["Meta"]
    with pytest.raises(DecodeError, match="found"):
        decode(LegacyEvent, doc)
