"""The subscribe request sent to the Coinbase websocket feed."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from cexfeeds.coinbase.channels import CoinbaseWsChannel
from cexfeeds.coinbase.pairs import CoinbaseTradingPair


@dataclass
class _SubscriptionEntry:
    name: str
    product_ids: list[CoinbaseTradingPair] = field(default_factory=list)

    @classmethod
    def from_channel(cls, channel: CoinbaseWsChannel) -> _SubscriptionEntry:
        unique = list(dict.fromkeys(channel.pairs))
        return cls(str(channel), unique)

    def remove_pair(self, pair: CoinbaseTradingPair) -> bool:
        before = len(self.product_ids)
        self.product_ids = [p for p in self.product_ids if p != pair]
        return len(self.product_ids) < before

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.product_ids:
            out["product_ids"] = [str(p) for p in self.product_ids]
        return out


@dataclass
class CoinbaseSubscription:
    """A subscribe request covering one or more channels."""

    sub_name: str = "subscribe"
    channels: list[_SubscriptionEntry] = field(default_factory=list)

    @classmethod
    def new_single_channel(cls, channel: CoinbaseWsChannel) -> CoinbaseSubscription:
        """A subscription for just ``channel``."""
        subscription = cls()
        subscription.add_channel(channel)
        return subscription

    def add_channel(self, channel: CoinbaseWsChannel) -> None:
        """Add ``channel``; duplicate product ids within it are dropped."""
        self.channels.append(_SubscriptionEntry.from_channel(channel))

    def remove_pair(self, pair: CoinbaseTradingPair) -> bool:
        """Remove ``pair`` from every channel; True if there are no channels."""
        for entry in self.channels:
            entry.remove_pair(pair)
        return not self.channels

    def to_dict(self) -> dict[str, Any]:
        """The request as it goes on the wire."""
        return {"type": self.sub_name, "channels": [c.to_dict() for c in self.channels]}

    def to_json(self) -> str:
        """The request encoded as a JSON text message."""
        return json.dumps(self.to_dict(), separators=(",", ":"))