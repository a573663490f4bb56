"""Legacy -> normalized event conversion rules."""

from __future__ import annotations

from omni_events.models.chain import OmniAddress
from omni_events.models.enrichment import EnrichmentData, NotComputed
from omni_events.models.events import Event, EventData, MetaEventData, TransactionEventData
from omni_events.models.legacy import LegacyEvent, LegacyMetaEvent, LegacyTransactionEvent
from omni_events.models.transfer import (
    EvmFinTransfer,
    EvmInitTransfer,
    NearClaimFee,
    NearSignTransfer,
    NearTransfer,
    SolanaFinTransfer,
    SolanaInitTransfer,
    TransferMessage,
)


def sender_of(message: TransferMessage) -> OmniAddress | None:
    """Sender address carried by a transfer message.

    Sign and finalisation messages do not name the sender; every variant is
    listed so a new message shape fails loudly instead of defaulting.
    """
    if isinstance(message, NearTransfer):
        return message.sender
    if isinstance(message, NearSignTransfer):
        return None
    if isinstance(message, NearClaimFee):
        return message.sender
    if isinstance(message, EvmInitTransfer):
        return message.sender
    if isinstance(message, EvmFinTransfer):
        return None
    if isinstance(message, SolanaInitTransfer):
        return message.sender
    if isinstance(message, SolanaFinTransfer):
        return None
    raise TypeError(f"not a transfer message: {type(message).__name__}")


def resolve_enrichment(top_level: EnrichmentData, inner: EnrichmentData) -> EnrichmentData:
    """Event-level enrichment wins unless it is unset."""
    if isinstance(top_level, NotComputed):
        return inner
    return top_level


def convert_legacy_event(legacy: LegacyEvent) -> Event:
    """Rewrite a legacy event into the normalized schema."""
    payload = legacy.event
    data: EventData
    if isinstance(payload, LegacyTransactionEvent):
        data = TransactionEventData(
            transfer_message=payload.transfer_message,
            transfer_id=payload.transfer_id,
            status=payload.status,
            sender=sender_of(payload.transfer_message),
            enrichment_data=resolve_enrichment(legacy.enrichment_data, payload.enrichment_data),
        )
    elif isinstance(payload, LegacyMetaEvent):
        data = MetaEventData(details=payload.details)
    else:
        raise TypeError(f"not a legacy event payload: {type(payload).__name__}")

    return Event(
        id=legacy.id,
        transaction_id=legacy.transaction_id,
        origin=legacy.origin,
        event=data,
    )
