"""Subscribe requests for the Kucoin websocket and its endpoint lookup."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from cexfeeds.kucoin.channels import KucoinWsChannel, KucoinWsChannelKind
from cexfeeds.kucoin.pairs import KucoinTradingPair


def _random_id() -> int:
    return random.getrandbits(64)


@dataclass
class KucoinSubscription:
    """A subscribe request for one channel and its symbols."""

    channel: KucoinWsChannelKind
    trading_pairs: list[KucoinTradingPair] = field(default_factory=list)
    id: int = field(default_factory=_random_id)
    method: str = "subscribe"
    private_channel: bool = False
    response: bool = False

    def add_pairs(self, pairs: Iterable[KucoinTradingPair]) -> None:
        """Append ``pairs`` to the subscribed symbols."""
        self.trading_pairs.extend(pairs)

    def add_channel(self, channel: KucoinWsChannel) -> None:
        """Switch to ``channel``'s kind, starting again with no symbols."""
        self.channel = channel.kind
        self.trading_pairs = []

    def remove_pair(self, pair: KucoinTradingPair) -> bool:
        """Remove ``pair``; True if no symbols remain."""
        self.trading_pairs = [p for p in self.trading_pairs if p != pair]
        return not self.trading_pairs

    def topic(self) -> str:
        """The topic string naming the channel and its symbols."""
        pairs = ",".join(p.value.upper() for p in self.trading_pairs)
        return f"/market/{self.channel}:{pairs}"

    def to_dict(self) -> dict[str, Any]:
        """The request as it goes on the wire."""
        return {
            "id": self.id,
            "type": self.method,
            "topic": self.topic(),
            "privateChannel": self.private_channel,
            "response": self.response,
        }

    def to_json(self) -> str:
        """The request encoded as a JSON text message."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass
class KucoinMultiSubscription:
    """One subscription per channel kind, merging symbols of the same kind."""

    subscriptions: dict[KucoinWsChannelKind, KucoinSubscription] = field(default_factory=dict)

    def add_channel(self, channel: KucoinWsChannel) -> None:
        """Add ``channel``'s symbols to the subscription for its kind."""
        subscription = self.subscriptions.get(channel.kind)
        if subscription is None:
            subscription = KucoinSubscription(channel.kind)
            self.subscriptions[channel.kind] = subscription
        subscription.add_pairs(channel.pairs)

    def all_subscriptions(self) -> list[KucoinSubscription]:
        """Every subscription held."""
        return list(self.subscriptions.values())


@dataclass(frozen=True)
class _InstanceServer:
    endpoint: str
    encrypt: bool
    protocol: str
    ping_interval: int
    ping_timeout: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> _InstanceServer:
        try:
            return cls(
                endpoint=data["endpoint"],
                encrypt=bool(data["encrypt"]),
                protocol=data["protocol"],
                ping_interval=int(data["pingInterval"]),
                ping_timeout=int(data["pingTimeout"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing field `{exc.args[0]}`") from None


@dataclass(frozen=True)
class KucoinWsEndpointResponse:
    """The answer to a request for a public websocket endpoint."""

    code: str
    token: str
    instance_servers: tuple[_InstanceServer, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinWsEndpointResponse:
        try:
            inner = data["data"]
            return cls(
                code=data["code"],
                token=inner["token"],
                instance_servers=tuple(
                    _InstanceServer.from_dict(s) for s in inner["instanceServers"]
                ),
            )
        except KeyError as exc:
            raise ValueError(f"missing field `{exc.args[0]}`") from None

    def get_ws_endpoint(self) -> str | None:
        """The first websocket endpoint offered, if any."""
        return next(
            (s.endpoint for s in self.instance_servers if s.protocol == "websocket"),
            None,
        )

    def get_token(self) -> str:
        """The token to connect with."""
        return self.token