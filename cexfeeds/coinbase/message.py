"""Messages received from the Coinbase websocket feed."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Mapping, Union

from cexfeeds.coinbase.pairs import CoinbaseTradingPair
from cexfeeds.coinbase.ws_data import CoinbaseMatches, CoinbaseStatus, CoinbaseTicker


@dataclass
class CoinbaseError:
    """An error reported by the feed, possibly naming a rejected pair."""

    message: str
    reason: str
    bad_pair: CoinbaseTradingPair | None = None

    def parse_for_bad_pair(self) -> None:
        """Set ``bad_pair`` from the first product id found in ``reason``."""
        self.bad_pair = CoinbaseTradingPair.parse_for_bad_pair(self.reason)


class CoinbaseMessageKind(enum.Enum):
    """The kinds of message the feed sends."""

    MATCHES = "matches"
    TICKER = "ticker"
    STATUS = "status"
    SUBSCRIPTIONS = "subscriptions"
    ERROR = "error"


Payload = Union[CoinbaseMatches, CoinbaseTicker, CoinbaseStatus, CoinbaseError, dict]


@dataclass
class CoinbaseWsMessage:
    """One decoded feed message and its payload."""

    kind: CoinbaseMessageKind
    value: Payload

    def make_critical(self, msg: str) -> None:
        """For an error, record the rejected pair and replace its message."""
        if self.kind is CoinbaseMessageKind.ERROR and isinstance(self.value, CoinbaseError):
            self.value.parse_for_bad_pair()
            self.value.message = msg


_KIND_BY_TAG = {
    "matches": CoinbaseMessageKind.MATCHES,
    "match": CoinbaseMessageKind.MATCHES,
    "last_match": CoinbaseMessageKind.MATCHES,
    "ticker": CoinbaseMessageKind.TICKER,
    "status": CoinbaseMessageKind.STATUS,
    "subscriptions": CoinbaseMessageKind.SUBSCRIPTIONS,
    "error": CoinbaseMessageKind.ERROR,
}


def _error_from_dict(data: Mapping[str, Any]) -> CoinbaseError:
    try:
        message = data["message"]
        reason = data["reason"]
    except KeyError as exc:
        raise ValueError(f"missing field `{exc.args[0]}`") from None
    bad_pair = data.get("bad_pair")
    return CoinbaseError(
        message=message,
        reason=reason,
        bad_pair=None if bad_pair is None else CoinbaseTradingPair(bad_pair),
    )


def parse_message(data: str | bytes | Mapping[str, Any]) -> CoinbaseWsMessage:
    """Decode a feed message from JSON text or an already decoded mapping."""
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise ValueError("a Coinbase message must be a JSON object")

    tag = data.get("type")
    if tag is None:
        raise ValueError("missing field `type`")
    kind = _KIND_BY_TAG.get(tag)
    if kind is None:
        raise ValueError(f"unknown variant `{tag}`")

    value: Payload
    if kind is CoinbaseMessageKind.MATCHES:
        value = CoinbaseMatches.from_dict(data)
    elif kind is CoinbaseMessageKind.TICKER:
        value = CoinbaseTicker.from_dict(data)
    elif kind is CoinbaseMessageKind.STATUS:
        value = CoinbaseStatus.from_dict(data)
    elif kind is CoinbaseMessageKind.SUBSCRIPTIONS:
        value = {k: v for k, v in data.items() if k != "type"}
    else:
        value = _error_from_dict(data)
    return CoinbaseWsMessage(kind, value)