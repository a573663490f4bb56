"""Transfer payloads and lifecycle status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from omni_events.models.chain import Fee, OmniAddress, Signature, TransferId, U128


class TransferStatus(Enum):
    """Lifecycle stage of a transfer.

    Members compare by lifecycle order, not by their string values.
    """

    INITIALIZED = "Initialized"
    FINALISED_ON_ORIGIN = "FinalisedOnOrigin"
    FINALISED = "Finalised"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)

    def has_reached(self, stage: TransferStatus) -> bool:
        """True if this status is at or past ``stage``."""
        return self.rank >= stage.rank

    def __lt__(self, other):
        if not isinstance(other, TransferStatus):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, TransferStatus):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, TransferStatus):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, TransferStatus):
            return NotImplemented
        return self.rank >= other.rank


_STATUS_ORDER = list(TransferStatus)


# ── NEAR ───────────────────────────────────────────────────


@dataclass(frozen=True)
class NearTransfer:
    """ft_transfer_call into the bridge on NEAR (init_transfer)."""

    tag: ClassVar[str] = "NearTransferMessage"

    origin_nonce: int
    token: OmniAddress
    amount: U128
    recipient: OmniAddress
    fee: Fee
    sender: OmniAddress
    msg: str
    destination_nonce: int


@dataclass(frozen=True)
class TransferMessagePayload:
    prefix: str
    destination_nonce: int
    transfer_id: TransferId
    token_address: OmniAddress
    amount: U128
    recipient: OmniAddress
    fee_recipient: str | None = None


@dataclass(frozen=True)
class NearSignTransfer:
    """MPC signature over a transfer payload. Carries no sender."""

    tag: ClassVar[str] = "NearSignTransferEvent"

    signature: Signature
    message_payload: TransferMessagePayload


@dataclass(frozen=True)
class NearClaimFee:
    """Relayer fee claim on NEAR; shares the NEAR transfer message shape."""

    tag: ClassVar[str] = "NearClaimFeeEvent"

    origin_nonce: int
    token: OmniAddress
    amount: U128
    recipient: OmniAddress
    fee: Fee
    sender: OmniAddress
    msg: str
    destination_nonce: int


# ── EVM ────────────────────────────────────────────────────


@dataclass(frozen=True)
class EvmInitTransfer:
    tag: ClassVar[str] = "EvmInitTransferMessage"

    sender: OmniAddress
    token_address: OmniAddress
    origin_nonce: int
    amount: U128
    fee: U128
    native_token_fee: U128
    recipient: OmniAddress
    message: str


@dataclass(frozen=True)
class EvmFinTransfer:
    """Finalisation on an EVM chain. Carries no sender."""

    tag: ClassVar[str] = "EvmFinTransferMessage"

    transfer_id: TransferId
    token_address: OmniAddress
    amount: U128
    recipient: OmniAddress
    fee_recipient: str | None = None


# ── Solana ─────────────────────────────────────────────────


@dataclass(frozen=True)
class SolanaInitTransfer:
    tag: ClassVar[str] = "SolanaInitTransfer"

    amount: U128
    fee: U128
    native_fee: U128
    token: OmniAddress
    recipient: OmniAddress
    sender: OmniAddress
    origin_nonce: int
    message: str = ""
    emitter: str | None = None


@dataclass(frozen=True)
class SolanaFinTransfer:
    """Finalisation on Solana. Carries no sender."""

    tag: ClassVar[str] = "SolanaFinTransfer"

    amount: U128
    destination_nonce: int
    fee_recipient: str | None = None
    emitter: str | None = None
    sequence: int | None = None


TransferMessage = Union[
    NearTransfer,
    NearSignTransfer,
    NearClaimFee,
    EvmInitTransfer,
    EvmFinTransfer,
    SolanaInitTransfer,
    SolanaFinTransfer,
]
