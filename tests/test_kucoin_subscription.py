import json

import pytest

from cexfeeds.kucoin.channels import KucoinWsChannel, KucoinWsChannelKind
from cexfeeds.kucoin.pairs import KucoinTradingPair
from cexfeeds.kucoin.subscription import (
    KucoinMultiSubscription,
    KucoinSubscription,
    KucoinWsEndpointResponse,
)

ETH = KucoinTradingPair("ETH-USDT")
BTC = KucoinTradingPair("BTC-USDC")


def _endpoint_payload(protocol="websocket"):
    return {
        "code": "200000",
        "data": {
            "token": "token",
            "instanceServers": [
                {
                    "endpoint": "wss://ws.example.com/endpoint",
                    "encrypt": True,
                    "protocol": protocol,
                    "pingInterval": 18000,
                    "pingTimeout": 10000,
                }
            ],
        },
    }


def test_topic_lists_pairs_in_order():
    sub = KucoinSubscription(KucoinWsChannelKind.MATCH)
    sub.add_pairs([ETH, BTC])
    assert sub.topic() == "/market/match:ETH-USDT,BTC-USDC"


def test_topic_upper_cases_pairs():
    sub = KucoinSubscription(KucoinWsChannelKind.TICKER, [KucoinTradingPair("eth-usdt")])
    assert sub.topic() == "/market/ticker:ETH-USDT"


def test_wire_form():
    sub = KucoinSubscription(KucoinWsChannelKind.TICKER, [ETH], id=7)
    decoded = json.loads(sub.to_json())
    assert decoded == sub.to_dict()
    assert decoded["type"] == "subscribe"
    assert decoded["id"] == 7
    assert decoded["privateChannel"] is False
    assert decoded["response"] is False
    assert decoded["topic"] == sub.topic()


def test_random_id_fits_in_64_bits():
    ids = {KucoinSubscription(KucoinWsChannelKind.MATCH).id for _ in range(20)}
    assert all(0 <= i < 2**64 for i in ids)
    assert len(ids) > 1


def test_add_channel_resets_pairs():
    sub = KucoinSubscription(KucoinWsChannelKind.MATCH, [ETH])
    sub.add_channel(KucoinWsChannel.ticker([BTC]))
    assert sub.channel is KucoinWsChannelKind.TICKER
    assert sub.trading_pairs == []


def test_remove_pair_reports_emptiness():
    sub = KucoinSubscription(KucoinWsChannelKind.MATCH, [ETH, BTC])
    assert sub.remove_pair(ETH) is False
    assert sub.trading_pairs == [BTC]
    assert sub.remove_pair(BTC) is True


def test_multi_subscription_merges_same_kind():
    multi = KucoinMultiSubscription()
    multi.add_channel(KucoinWsChannel.match([ETH]))
    multi.add_channel(KucoinWsChannel.match([BTC]))
    subs = multi.all_subscriptions()
    assert len(subs) == 1
    assert subs[0].trading_pairs == [ETH, BTC]


def test_multi_subscription_separates_kinds():
    multi = KucoinMultiSubscription()
    multi.add_channel(KucoinWsChannel.match([ETH]))
    multi.add_channel(KucoinWsChannel.ticker([BTC]))
    kinds = {s.channel for s in multi.all_subscriptions()}
    assert kinds == {KucoinWsChannelKind.MATCH, KucoinWsChannelKind.TICKER}


def test_endpoint_response():
    response = KucoinWsEndpointResponse.from_dict(_endpoint_payload())
    assert response.get_ws_endpoint() == "wss://ws.example.com/endpoint"
    assert response.get_token() == "token"


def test_endpoint_response_without_websocket_server():
    response = KucoinWsEndpointResponse.from_dict(_endpoint_payload(protocol="http"))
    assert response.get_ws_endpoint() is None


def test_endpoint_response_missing_field():
    payload = _endpoint_payload()
    del payload["data"]["token"]
    with pytest.raises(ValueError, match="token"):
        KucoinWsEndpointResponse.from_dict(payload)