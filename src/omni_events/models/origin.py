"""Where a transfer event was observed: one variant per chain family."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from bson import ObjectId

from omni_events.models.chain import ChainKind


@dataclass(frozen=True)
class NearReceipt:
    """Event read from a NEAR receipt."""

    tag: ClassVar[str] = "NearReceipt"

    block_height: int
    block_timestamp_nanosec: int
    receipt_id: str
    contract_id: str
    signer_id: str
    predecessor_id: str
    version: int
    raw_receipt_id: ObjectId | None = None  # back-reference into the raw receipts collection


@dataclass(frozen=True)
class EvmLog:
    """Event read from a log on an EVM-compatible chain."""

    tag: ClassVar[str] = "EVMLog"

    block_number: int
    block_timestamp: int
    chain_kind: ChainKind
    transaction_index: int | None = None
    log_index: int | None = None


@dataclass(frozen=True)
class SolanaTransaction:
    """Event read from a Solana transaction instruction."""

    tag: ClassVar[str] = "SolanaTransaction"

    slot: int
    block_time: int
    instruction_index: int


TransferOrigin = Union[NearReceipt, EvmLog, SolanaTransaction]


def origin_chain(origin: TransferOrigin) -> ChainKind:
    """Derive the chain an event was observed on from its origin variant."""
    if isinstance(origin, NearReceipt):
        return ChainKind.NEAR
    if isinstance(origin, EvmLog):
        return origin.chain_kind
    if isinstance(origin, SolanaTransaction):
        return ChainKind.SOL
    raise TypeError(f"not a transfer origin: {type(origin).__name__}")
