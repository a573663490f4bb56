"""Pricing data attached to transfers after they are recorded."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class TokenInfo:
    """Token pricing snapshot at enrichment time."""

    token_id: str  # key into the external price index
    name: str
    symbol: str
    decimals: int
    usd_price: float


@dataclass(frozen=True)
class NotComputed:
    """Enrichment has not run yet. Never persisted: absence reads back as this."""

    tag: ClassVar[str] = "None"
    omit_on_write: ClassVar[bool] = True


@dataclass(frozen=True)
class NotApplicable:
    """Enrichment does not apply to this event."""

    tag: ClassVar[str] = "NotApplicable"


@dataclass(frozen=True)
class PriceData:
    tag: ClassVar[str] = "Data"

    native_token_info: TokenInfo
    # Only set when the transferred token is not the chain's native token.
    transferred_token_info: TokenInfo | None = None


EnrichmentData = Union[NotComputed, NotApplicable, PriceData]

NOT_COMPUTED = NotComputed()
NOT_APPLICABLE = NotApplicable()


def is_none(data: EnrichmentData) -> bool:
    return isinstance(data, NotComputed)
