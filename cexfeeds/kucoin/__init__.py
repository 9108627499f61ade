"""KuCoin trading pairs, websocket channels, subscriptions, messages and REST payloads."""