"""Event documents as written under the previous schema.

The old layout stores transaction_id and origin inside each payload variant,
and enrichment data in two places: on the event itself and on the
transaction payload. Both are kept here as separate fields; the migration
decides which one wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from bson import ObjectId

from omni_events.models.chain import OmniAddress, TransferId
from omni_events.models.enrichment import NOT_COMPUTED, EnrichmentData
from omni_events.models.fields import document_id, flattened
from omni_events.models.meta import MetaEventDetails
from omni_events.models.origin import TransferOrigin
from omni_events.models.transfer import TransferMessage, TransferStatus


@dataclass(frozen=True)
class LegacyTransactionEvent:
    tag: ClassVar[str] = "Transaction"

    transfer_message: TransferMessage
    transaction_id: str
    origin: TransferOrigin
    transfer_id: TransferId
    status: TransferStatus
    sender: OmniAddress | None = None
    enrichment_data: EnrichmentData = NOT_COMPUTED


@dataclass(frozen=True)
class LegacyMetaEvent:
    tag: ClassVar[str] = "Meta"

    transaction_id: str
    origin: TransferOrigin
    details: MetaEventDetails


LegacyEventData = Union[LegacyTransactionEvent, LegacyMetaEvent]


@dataclass(frozen=True)
class LegacyEvent:
    event: LegacyEventData = flattened()
    enrichment_data: EnrichmentData = NOT_COMPUTED
    id: ObjectId | None = document_id()

    @property
    def transaction_id(self) -> str:
        return self.event.transaction_id

    @property
    def origin(self) -> TransferOrigin:
        return self.event.origin
