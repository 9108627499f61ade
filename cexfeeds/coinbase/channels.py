"""Coinbase websocket channels and their kinds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Union

from cexfeeds.coinbase.pairs import CoinbaseTradingPair

PairLike = Union[CoinbaseTradingPair, str]


class CoinbaseWsChannelKind(enum.Enum):
    """The websocket channels Coinbase offers."""

    MATCHES = "matches"
    TICKER = "ticker"
    STATUS = "status"

    def __str__(self) -> str:
        return self.value


def _to_pair(pair: PairLike) -> CoinbaseTradingPair:
    if isinstance(pair, CoinbaseTradingPair):
        return pair
    return CoinbaseTradingPair.from_raw(pair)


@dataclass(frozen=True)
class CoinbaseWsChannel:
    """A channel together with the product ids it covers."""

    kind: CoinbaseWsChannelKind
    pairs: tuple[CoinbaseTradingPair, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is CoinbaseWsChannelKind.STATUS and self.pairs:
            raise ValueError("the status channel takes no trading pairs")

    def __str__(self) -> str:
        return str(self.kind)

    @classmethod
    def status(cls) -> CoinbaseWsChannel:
        """The status channel."""
        return cls(CoinbaseWsChannelKind.STATUS)

    @classmethod
    def matches(cls, pairs: Iterable[PairLike]) -> CoinbaseWsChannel:
        """The matches (trades) channel for ``pairs``."""
        return cls(CoinbaseWsChannelKind.MATCHES, tuple(_to_pair(p) for p in pairs))

    @classmethod
    def ticker(cls, pairs: Iterable[PairLike]) -> CoinbaseWsChannel:
        """The ticker (quotes) channel for ``pairs``."""
        return cls(CoinbaseWsChannelKind.TICKER, tuple(_to_pair(p) for p in pairs))

    @classmethod
    def parse(cls, value: str) -> CoinbaseWsChannel:
        """Look up a channel by name, ignoring case; it starts with no pairs."""
        try:
            kind = CoinbaseWsChannelKind(value.lower())
        except ValueError:
            raise ValueError(f"channel is not valid: {value}") from None
        return cls(kind)

    def count_entries(self) -> int:
        """Number of trading pairs the channel covers."""
        return len(self.pairs)