"""Payloads of the Kucoin match and ticker channels."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from cexfeeds.kucoin.pairs import KucoinTradingPair

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_from_nanos(nanos: int) -> datetime:
    """A UTC datetime for nanoseconds since the epoch (to microsecond precision)."""
    return _EPOCH + timedelta(microseconds=int(nanos) // 1000)


def _field(data: Mapping[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _float(data: Mapping[str, Any], name: str) -> float:
    return float(_field(data, name))


def _int(data: Mapping[str, Any], name: str) -> int:
    return int(_field(data, name))


def _str(data: Mapping[str, Any], name: str) -> str:
    value = _field(data, name)
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _mapping(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = _field(data, name)
    if not isinstance(value, Mapping):
        raise ValueError(f"field `{name}` must be an object")
    return value


@dataclass
class KucoinMatchInner:
    """The trade carried by a match message."""

    sequence: int
    kind: str
    symbol: KucoinTradingPair
    side: str
    price: float
    size: float
    trade_id: str
    taker_order_id: str
    maker_order_id: str
    timestamp: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinMatchInner:
        return cls(
            sequence=_int(data, "sequence"),
            kind=_str(data, "type"),
            symbol=KucoinTradingPair.from_topic(_str(data, "symbol")),
            side=_str(data, "side"),
            price=_float(data, "price"),
            size=_float(data, "size"),
            trade_id=_str(data, "tradeId"),
            taker_order_id=_str(data, "takerOrderId"),
            maker_order_id=_str(data, "makerOrderId"),
            timestamp=_int(data, "time"),
        )

    @property
    def time(self) -> datetime:
        """When the trade happened."""
        return timestamp_from_nanos(self.timestamp)


@dataclass
class KucoinMatch:
    """A message from the match channel."""

    kind: str
    topic: str
    subject: str
    data: KucoinMatchInner

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinMatch:
        return cls(
            kind=_str(data, "type"),
            topic=_str(data, "topic"),
            subject=_str(data, "subject"),
            data=KucoinMatchInner.from_dict(_mapping(data, "data")),
        )


@dataclass
class KucoinTickerInner:
    """The best bid/ask carried by a ticker message."""

    sequence: int
    price: float
    size: float
    best_ask_price: float
    best_ask_size: float
    best_bid_price: float
    best_bid_size: float
    timestamp: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinTickerInner:
        return cls(
            sequence=_int(data, "sequence"),
            price=_float(data, "price"),
            size=_float(data, "size"),
            best_ask_price=_float(data, "bestAsk"),
            best_ask_size=_float(data, "bestAskSize"),
            best_bid_price=_float(data, "bestBid"),
            best_bid_size=_float(data, "bestBidSize"),
            timestamp=_int(data, "time"),
        )

    @property
    def time(self) -> datetime:
        """When the quote was taken."""
        return timestamp_from_nanos(self.timestamp)


@dataclass
class KucoinTicker:
    """A message from the ticker channel."""

    kind: str
    topic: KucoinTradingPair
    subject: str
    data: KucoinTickerInner

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinTicker:
        return cls(
            kind=_str(data, "type"),
            topic=KucoinTradingPair.from_topic(_str(data, "topic")),
            subject=_str(data, "subject"),
            data=KucoinTickerInner.from_dict(_mapping(data, "data")),
        )