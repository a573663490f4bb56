"""Top-level event documents as written by the bridge indexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from bson import ObjectId

from omni_events.models.chain import ChainKind, OmniAddress, TransferId
from omni_events.models.enrichment import NOT_COMPUTED, EnrichmentData
from omni_events.models.fields import document_id, flattened
from omni_events.models.meta import MetaEventDetails
from omni_events.models.origin import TransferOrigin, origin_chain
from omni_events.models.transfer import TransferMessage, TransferStatus


@dataclass(frozen=True)
class TransactionEvent:
    """A transfer event document (``omni_transactions`` collection)."""

    transfer_message: TransferMessage
    transaction_id: str
    origin: TransferOrigin
    transfer_id: TransferId
    status: TransferStatus
    sender: OmniAddress | None = None
    enrichment_data: EnrichmentData = NOT_COMPUTED
    id: ObjectId | None = document_id()

    @property
    def origin_chain(self) -> ChainKind:
        return origin_chain(self.origin)


@dataclass(frozen=True)
class MetaEvent:
    """A token metadata / deployment event document (``omni_meta_events`` collection)."""

    transaction_id: str
    origin: TransferOrigin
    details: MetaEventDetails
    id: ObjectId | None = document_id()

    @property
    def origin_chain(self) -> ChainKind:
        return origin_chain(self.origin)


# ── Normalized event ───────────────────────────────────────
#
# transaction_id and origin live once on Event; the payload variants only
# carry what is specific to them.


@dataclass(frozen=True)
class TransactionEventData:
    tag: ClassVar[str] = "Transaction"

    transfer_message: TransferMessage
    transfer_id: TransferId
    status: TransferStatus
    sender: OmniAddress | None = None
    enrichment_data: EnrichmentData = NOT_COMPUTED


@dataclass(frozen=True)
class MetaEventData:
    tag: ClassVar[str] = "Meta"

    details: MetaEventDetails


EventData = Union[TransactionEventData, MetaEventData]


@dataclass(frozen=True)
class Event:
    """An event in the normalized schema."""

    transaction_id: str
    origin: TransferOrigin
    event: EventData = flattened()
    id: ObjectId | None = document_id()

    @property
    def origin_chain(self) -> ChainKind:
        return origin_chain(self.origin)

    @property
    def enrichment_data(self) -> EnrichmentData:
        if isinstance(self.event, TransactionEventData):
            return self.event.enrichment_data
        return NOT_COMPUTED
