"""Chain-level primitives shared by transfer, origin and meta event models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType

# Token amounts are u128 on-chain; persisted as decimal strings.
U128 = NewType("U128", int)

# "<chain>:<address>", e.g. "eth:0x1f98...", "near:alice.near", "sol:9xQe..."
OmniAddress = NewType("OmniAddress", str)

U128_MAX = 2**128 - 1


class ChainKind(str, Enum):
    """Blockchain environment an event was observed on."""

    ETH = "Eth"
    NEAR = "Near"
    SOL = "Sol"
    ARB = "Arb"
    BASE = "Base"
    BNB = "Bnb"

    @property
    def address_prefix(self) -> str:
        return self.value.lower()


_PREFIXES = {kind.address_prefix: kind for kind in ChainKind}


def address_chain(address: str) -> ChainKind:
    """Return the chain an OmniAddress belongs to.

    Raises ValueError if the address has no recognised "<chain>:" prefix.
    """
    prefix, sep, rest = address.partition(":")
    if not sep or not rest:
        raise ValueError(f"address {address!r} has no chain prefix")
    try:
        return _PREFIXES[prefix]
    except KeyError:
        raise ValueError(f"unknown chain prefix {prefix!r} in address {address!r}") from None


@dataclass(frozen=True)
class TransferId:
    """Chain-scoped transfer identity: the nonce is unique per origin chain."""

    origin_chain: ChainKind
    origin_nonce: int


@dataclass(frozen=True)
class Fee:
    fee: U128
    native_fee: U128


@dataclass(frozen=True)
class AffinePoint:
    affine_point: str


@dataclass(frozen=True)
class Scalar:
    scalar: str


@dataclass(frozen=True)
class Signature:
    """MPC signature attached to NEAR sign events."""

    big_r: AffinePoint
    s: Scalar
    recovery_id: int
