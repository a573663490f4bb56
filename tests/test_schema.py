"""Schema model behaviour: status ordering, origin chain, addresses."""

from __future__ import annotations

import pytest

from omni_events.models import (
    ChainKind,
    EvmLog,
    NearReceipt,
    SolanaTransaction,
    TransferStatus,
    address_chain,
    origin_chain,
)
from omni_events.models.enrichment import NOT_APPLICABLE, NOT_COMPUTED, is_none


# ── Transfer status ordering ──────────────────────────────────────


def test_status_follows_lifecycle_order():
    assert TransferStatus.INITIALIZED < TransferStatus.FINALISED_ON_ORIGIN < TransferStatus.FINALISED
    # Lexical order of the values would put "Finalised" first.
    assert sorted(TransferStatus, reverse=True)[0] is TransferStatus.FINALISED
    assert max(TransferStatus) is TransferStatus.FINALISED


def test_status_has_reached():
    assert TransferStatus.FINALISED.has_reached(TransferStatus.FINALISED_ON_ORIGIN)
    assert TransferStatus.FINALISED_ON_ORIGIN.has_reached(TransferStatus.FINALISED_ON_ORIGIN)
    assert not TransferStatus.INITIALIZED.has_reached(TransferStatus.FINALISED_ON_ORIGIN)


def test_status_comparison_with_plain_string_is_rejected():
    with pytest.raises(TypeError):
        TransferStatus.INITIALIZED < "Finalised"


# ── Origin chain ──────────────────────────────────────────────────


def test_origin_chain_per_variant():
    near = NearReceipt(
        block_height=1, block_timestamp_nanosec=2, receipt_id="r", contract_id="c",
        signer_id="s", predecessor_id="p", version=1,
    )
    evm = EvmLog(block_number=1, block_timestamp=2, chain_kind=ChainKind.ARB)
    sol = SolanaTransaction(slot=1, block_time=2, instruction_index=0)

    assert origin_chain(near) is ChainKind.NEAR
    assert origin_chain(evm) is ChainKind.ARB
    assert origin_chain(sol) is ChainKind.SOL


def test_origin_chain_rejects_non_origin():
    with pytest.raises(TypeError):
        origin_chain("NearReceipt")


# ── Addresses ─────────────────────────────────────────────────────


@pytest.mark.parametrize("address,chain", [
    ("eth:0x1f9840a85d5af5bf1d1762f925bdaddc4201f984", ChainKind.ETH),
    ("near:alice.near", ChainKind.NEAR),
    ("sol:So11111111111111111111111111111111111111112", ChainKind.SOL),
    ("base:0xabc", ChainKind.BASE),
])
def test_address_chain(address, chain):
    assert address_chain(address) is chain


@pytest.mark.parametrize("address", ["alice.near", "btc:1A1zP1eP", "eth:", ""])
def test_address_chain_rejects_bad_prefix(address):
    with pytest.raises(ValueError):
        address_chain(address)


def test_enrichment_is_none():
    assert is_none(NOT_COMPUTED)
    assert not is_none(NOT_APPLICABLE)
