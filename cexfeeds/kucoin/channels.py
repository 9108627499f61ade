"""Kucoin websocket channels and their kinds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Union

from cexfeeds.kucoin.pairs import KucoinTradingPair

PairLike = Union[KucoinTradingPair, str]


class KucoinWsChannelKind(enum.Enum):
    """The websocket channels Kucoin offers."""

    MATCH = "match"
    TICKER = "ticker"

    def __str__(self) -> str:
        return self.value


def _to_pair(pair: PairLike) -> KucoinTradingPair:
    if isinstance(pair, KucoinTradingPair):
        return pair
    return KucoinTradingPair.from_raw(pair)


@dataclass(frozen=True)
class KucoinWsChannel:
    """A channel together with the symbols it covers."""

    kind: KucoinWsChannelKind
    pairs: tuple[KucoinTradingPair, ...] = ()

    def __str__(self) -> str:
        return str(self.kind)

    @classmethod
    def match(cls, pairs: Iterable[PairLike]) -> KucoinWsChannel:
        """The match (trades) channel for ``pairs``."""
        return cls(KucoinWsChannelKind.MATCH, tuple(_to_pair(p) for p in pairs))

    @classmethod
    def ticker(cls, pairs: Iterable[PairLike]) -> KucoinWsChannel:
        """The ticker (quotes) channel for ``pairs``."""
        return cls(KucoinWsChannelKind.TICKER, tuple(_to_pair(p) for p in pairs))

    @classmethod
    def parse(cls, value: str) -> KucoinWsChannel:
        """Look up a channel by name, ignoring case; it starts with no pairs."""
        try:
            kind = KucoinWsChannelKind(value.lower())
        except ValueError:
            raise ValueError(f"channel is not valid: {value}") from None
        return cls(kind)

    def count_entries(self) -> int:
        """Number of trading pairs the channel covers."""
        return len(self.pairs)