"""Meta event details: token deployment, metadata logging, binding and fee claims."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from omni_events.models.chain import OmniAddress, Signature, U128


# ── EVM ────────────────────────────────────────────────────


@dataclass(frozen=True)
class EvmDeployToken:
    tag: ClassVar[str] = "EVMDeployToken"

    token_address: OmniAddress
    near_token_id: str
    name: str
    symbol: str
    decimals: int
    origin_decimals: int


@dataclass(frozen=True)
class EvmLogMetadata:
    tag: ClassVar[str] = "EVMLogMetadata"

    token_address: OmniAddress
    name: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class EvmClaimNativeFee:
    tag: ClassVar[str] = "EVMClaimNativeFee"

    recipient: OmniAddress
    amount: U128


# ── NEAR ───────────────────────────────────────────────────


@dataclass(frozen=True)
class MetadataPayload:
    prefix: str
    token: str
    name: str
    symbol: str
    decimals: int
    emitter_address: OmniAddress


@dataclass(frozen=True)
class NearLogMetadata:
    tag: ClassVar[str] = "NearLogMetadataEvent"

    signature: Signature
    metadata_payload: MetadataPayload


@dataclass(frozen=True)
class NearDeployToken:
    tag: ClassVar[str] = "NearDeployTokenEvent"

    token_id: str
    token_address: OmniAddress
    decimals: int
    origin_decimals: int


@dataclass(frozen=True)
class NearBindToken:
    tag: ClassVar[str] = "NearBindTokenEvent"

    token_id: str
    token_address: OmniAddress
    decimals: int
    origin_decimals: int


@dataclass(frozen=True)
class NearSignClaimNativeFee:
    tag: ClassVar[str] = "NearSignClaimNativeFeeEvent"

    signature: Signature
    amount: U128
    recipient: OmniAddress
    nonces: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class NearClaimNativeFee:
    tag: ClassVar[str] = "NearClaimNativeFeeEvent"

    amount: U128
    recipient: OmniAddress
    nonces: list[int] = field(default_factory=list)


# ── Solana ─────────────────────────────────────────────────


@dataclass(frozen=True)
class SolanaDeployToken:
    tag: ClassVar[str] = "SolanaDeployToken"

    token: str
    name: str
    symbol: str
    decimals: int
    emitter: str | None = None
    sequence: int | None = None


@dataclass(frozen=True)
class SolanaLogMetadata:
    tag: ClassVar[str] = "SolanaLogMetadata"

    token: str
    name: str
    symbol: str
    decimals: int
    emitter: str | None = None
    sequence: int | None = None


MetaEventDetails = Union[
    EvmDeployToken,
    EvmLogMetadata,
    EvmClaimNativeFee,
    NearLogMetadata,
    NearDeployToken,
    NearBindToken,
    NearSignClaimNativeFee,
    NearClaimNativeFee,
    SolanaDeployToken,
    SolanaLogMetadata,
]
