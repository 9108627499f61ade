"""Trading pairs, websocket subscriptions and payload parsing for crypto exchange market data."""

__version__ = "0.1.0"