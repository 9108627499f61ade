"""Payloads of the Coinbase matches, ticker and status channels."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

from dateutil.parser import isoparse

from cexfeeds.coinbase.pairs import CoinbaseTradingPair


def _field(data: Mapping[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _float(data: Mapping[str, Any], name: str) -> float:
    return float(_field(data, name))


def _opt_float(data: Mapping[str, Any], name: str) -> float | None:
    value = data.get(name)
    return None if value is None else float(value)


def _opt_int(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    return None if value is None else int(value)


def _time(value: str) -> datetime:
    parsed = isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _pair(data: Mapping[str, Any], name: str) -> CoinbaseTradingPair:
    return CoinbaseTradingPair(str(_field(data, name)))


@dataclass
class CoinbaseMatches:
    """A trade reported on the matches channel."""

    trade_id: int
    sequence: int
    maker_order_id: str
    taker_order_id: str
    time: datetime
    product_id: CoinbaseTradingPair
    size: float
    price: float
    side: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseMatches:
        return cls(
            trade_id=int(_field(data, "trade_id")),
            sequence=int(_field(data, "sequence")),
            maker_order_id=_field(data, "maker_order_id"),
            taker_order_id=_field(data, "taker_order_id"),
            time=_time(_field(data, "time")),
            product_id=_pair(data, "product_id"),
            size=_float(data, "size"),
            price=_float(data, "price"),
            side=_field(data, "side"),
        )


@dataclass
class CoinbaseTicker:
    """A best bid/ask update from the ticker channel."""

    sequence: int | None
    product_id: CoinbaseTradingPair
    price: float
    open_24h: float
    low_24h: float
    high_24h: float
    volume_30d: float
    best_bid: float
    best_bid_size: float
    best_ask: float
    best_ask_size: float
    side: str | None
    time: datetime
    trade_id: int | None
    last_size: float | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseTicker:
        return cls(
            sequence=_opt_int(data, "sequence"),
            product_id=_pair(data, "product_id"),
            price=_float(data, "price"),
            open_24h=_float(data, "open_24h"),
            low_24h=_float(data, "low_24h"),
            high_24h=_float(data, "high_24h"),
            volume_30d=_float(data, "volume_30d"),
            best_bid=_float(data, "best_bid"),
            best_bid_size=_float(data, "best_bid_size"),
            best_ask=_float(data, "best_ask"),
            best_ask_size=_float(data, "best_ask_size"),
            side=data.get("side"),
            time=_time(_field(data, "time")),
            trade_id=_opt_int(data, "trade_id"),
            last_size=_opt_float(data, "last_size"),
        )


@dataclass
class CoinbaseStatusProduct:
    """A product entry on the status channel."""

    id: CoinbaseTradingPair
    base_currency: str
    quote_currency: str
    base_increment: float
    quote_increment: float
    display_name: str
    status: str
    margin_enabled: bool
    status_message: str | None
    min_market_funds: float
    post_only: bool
    limit_only: bool
    cancel_only: bool
    auction_mode: bool
    kind: str
    fx_stablecoin: bool
    max_slippage_percentage: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseStatusProduct:
        return cls(
            id=_pair(data, "id"),
            base_currency=_field(data, "base_currency"),
            quote_currency=_field(data, "quote_currency"),
            base_increment=_float(data, "base_increment"),
            quote_increment=_float(data, "quote_increment"),
            display_name=_field(data, "display_name"),
            status=_field(data, "status"),
            margin_enabled=bool(_field(data, "margin_enabled")),
            status_message=data.get("status_message"),
            min_market_funds=_float(data, "min_market_funds"),
            post_only=bool(_field(data, "post_only")),
            limit_only=bool(_field(data, "limit_only")),
            cancel_only=bool(_field(data, "cancel_only")),
            auction_mode=bool(_field(data, "auction_mode")),
            kind=_field(data, "type"),
            fx_stablecoin=bool(_field(data, "fx_stablecoin")),
            max_slippage_percentage=_float(data, "max_slippage_percentage"),
        )


@dataclass
class CoinbaseSupportedNetwork:
    """A network a currency on the status channel can move over."""

    id: str
    name: str
    status: str
    contract_address: str
    crypto_address_link: str
    crypto_transaction_link: str
    min_withdrawal_amount: float
    max_withdrawal_amount: float
    network_confirmations: int
    processing_time_seconds: int
    destination_tag_regex: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseSupportedNetwork:
        return cls(
            id=_field(data, "id"),
            name=_field(data, "name"),
            status=_field(data, "status"),
            contract_address=_field(data, "contract_address"),
            crypto_address_link=_field(data, "crypto_address_link"),
            crypto_transaction_link=_field(data, "crypto_transaction_link"),
            min_withdrawal_amount=_float(data, "min_withdrawal_amount"),
            max_withdrawal_amount=_float(data, "max_withdrawal_amount"),
            network_confirmations=int(_field(data, "network_confirmations")),
            processing_time_seconds=int(_field(data, "processing_time_seconds")),
            destination_tag_regex=_field(data, "destination_tag_regex"),
        )


@dataclass
class CoinbaseStatusCurrencyDetails:
    """Extra details of a currency on the status channel."""

    kind: str
    symbol: str
    network_confirmations: int
    sort_order: int
    crypto_address_link: str
    crypto_transaction_link: str
    push_payment_methods: list[str] | None
    min_withdrawal_amount: float | None
    max_withdrawal_amount: float | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseStatusCurrencyDetails:
        methods = data.get("push_payment_methods")
        return cls(
            kind=_field(data, "type"),
            symbol=_field(data, "symbol"),
            network_confirmations=int(_field(data, "network_confirmations")),
            sort_order=int(_field(data, "sort_order")),
            crypto_address_link=_field(data, "crypto_address_link"),
            crypto_transaction_link=_field(data, "crypto_transaction_link"),
            push_payment_methods=None if methods is None else list(methods),
            min_withdrawal_amount=_opt_float(data, "min_withdrawal_amount"),
            max_withdrawal_amount=_opt_float(data, "max_withdrawal_amount"),
        )


@dataclass
class CoinbaseStatusCurrency:
    """A currency entry on the status channel."""

    id: str
    name: str
    display_name: str
    min_size: float
    status: str
    funding_account_id: str
    status_message: str | None
    max_precision: float
    convertible_to: list[str]
    details: CoinbaseStatusCurrencyDetails
    default_network: str
    supported_networks: list[CoinbaseSupportedNetwork]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseStatusCurrency:
        return cls(
            id=_field(data, "id"),
            name=_field(data, "name"),
            display_name=_field(data, "display_name"),
            min_size=_float(data, "min_size"),
            status=_field(data, "status"),
            funding_account_id=_field(data, "funding_account_id"),
            status_message=data.get("status_message"),
            max_precision=_float(data, "max_precision"),
            convertible_to=list(_field(data, "convertible_to")),
            details=CoinbaseStatusCurrencyDetails.from_dict(_field(data, "details")),
            default_network=_field(data, "default_network"),
            supported_networks=[
                CoinbaseSupportedNetwork.from_dict(net)
                for net in _field(data, "supported_networks")
            ],
        )


@dataclass
class CoinbaseStatus:
    """A status channel message listing products and currencies."""

    products: list[CoinbaseStatusProduct]
    currencies: list[CoinbaseStatusCurrency]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseStatus:
        return cls(
            products=[CoinbaseStatusProduct.from_dict(p) for p in _field(data, "products")],
            currencies=[CoinbaseStatusCurrency.from_dict(c) for c in _field(data, "currencies")],
        )