"""Messages received from the Kucoin websocket feed."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Union

from cexfeeds.kucoin.ws_data import KucoinMatch, KucoinTicker


@dataclass
class KucoinSubscriptionResponse:
    """A welcome or acknowledgement sent in reply to a connection or subscription."""

    id: str
    msg: str


Payload = Union[KucoinMatch, KucoinTicker, KucoinSubscriptionResponse]

_PAYLOAD_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


@dataclass
class KucoinWsMessage:
    """One decoded feed message."""

    value: Payload

    def make_critical(self, msg: str) -> None:
        """Kucoin messages carry nothing to mark as critical."""


def parse_message(data: str | bytes | Mapping[str, Any]) -> KucoinWsMessage:
    """Decode a feed message from JSON text or an already decoded mapping."""
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise ValueError(f"Could not deserialize kucoin ws message: {data!r}")

    for payload_type in (KucoinMatch, KucoinTicker):
        try:
            return KucoinWsMessage(payload_type.from_dict(data))
        except _PAYLOAD_ERRORS:
            continue

    if "id" in data and "type" in data:
        msg_id, msg_type = data["id"], data["type"]
        if not isinstance(msg_id, str) or not isinstance(msg_type, str):
            raise ValueError(f"Could not deserialize kucoin ws message: {data!r}")
        return KucoinWsMessage(KucoinSubscriptionResponse(id=msg_id, msg=msg_type))

    raise ValueError(f"Could not deserialize kucoin ws message: {data!r}")