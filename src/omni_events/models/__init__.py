"""Data models for Omni bridge event documents."""

from omni_events.models.chain import (
    AffinePoint,
    ChainKind,
    Fee,
    OmniAddress,
    Scalar,
    Signature,
    TransferId,
    U128,
    address_chain,
)
from omni_events.models.origin import (
    EvmLog,
    NearReceipt,
    SolanaTransaction,
    TransferOrigin,
    origin_chain,
)
from omni_events.models.transfer import (
    EvmFinTransfer,
    EvmInitTransfer,
    NearClaimFee,
    NearSignTransfer,
    NearTransfer,
    SolanaFinTransfer,
    SolanaInitTransfer,
    TransferMessage,
    TransferMessagePayload,
    TransferStatus,
)
from omni_events.models.enrichment import (
    NOT_APPLICABLE,
    NOT_COMPUTED,
    EnrichmentData,
    NotApplicable,
    NotComputed,
    PriceData,
    TokenInfo,
)
from omni_events.models.meta import (
    EvmClaimNativeFee,
    EvmDeployToken,
    EvmLogMetadata,
    MetadataPayload,
    MetaEventDetails,
    NearBindToken,
    NearClaimNativeFee,
    NearDeployToken,
    NearLogMetadata,
    NearSignClaimNativeFee,
    SolanaDeployToken,
    SolanaLogMetadata,
)
from omni_events.models.events import (
    Event,
    EventData,
    MetaEvent,
    MetaEventData,
    TransactionEvent,
    TransactionEventData,
)
from omni_events.models.legacy import (
    LegacyEvent,
    LegacyEventData,
    LegacyMetaEvent,
    LegacyTransactionEvent,
)
from omni_events.models.records import (
    ChangeNotification,
    MigrationResult,
    WatcherState,
    WatchReport,
)
from omni_events.models.config import ToolConfig

__all__ = [
    "AffinePoint", "ChainKind", "Fee", "OmniAddress", "Scalar", "Signature",
    "TransferId", "U128", "address_chain",
    "EvmLog", "NearReceipt", "SolanaTransaction", "TransferOrigin", "origin_chain",
    "EvmFinTransfer", "EvmInitTransfer", "NearClaimFee", "NearSignTransfer",
    "NearTransfer", "SolanaFinTransfer", "SolanaInitTransfer", "TransferMessage",
    "TransferMessagePayload", "TransferStatus",
    "NOT_APPLICABLE", "NOT_COMPUTED", "EnrichmentData", "NotApplicable",
    "NotComputed", "PriceData", "TokenInfo",
    "EvmClaimNativeFee", "EvmDeployToken", "EvmLogMetadata", "MetadataPayload",
    "MetaEventDetails", "NearBindToken", "NearClaimNativeFee", "NearDeployToken",
    "NearLogMetadata", "NearSignClaimNativeFee", "SolanaDeployToken",
    "SolanaLogMetadata",
    "Event", "EventData", "MetaEvent", "MetaEventData", "TransactionEvent",
    "TransactionEventData",
    "LegacyEvent", "LegacyEventData", "LegacyMetaEvent", "LegacyTransactionEvent",
    "ChangeNotification", "MigrationResult", "WatcherState", "WatchReport",
    "ToolConfig",
]
