"""Coinbase REST API payloads: currencies, products and the combined response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union

from cexfeeds.coinbase.pairs import CoinbaseTradingPair


def _field(data: Mapping[str, Any], name: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _float(data: Mapping[str, Any], name: str) -> float:
    return float(_field(data, name))


def _bool(data: Mapping[str, Any], name: str) -> bool:
    value = _field(data, name)
    if not isinstance(value, bool):
        raise ValueError(f"field `{name}` must be a boolean")
    return value


def _opt_float(data: Mapping[str, Any], name: str) -> float | None:
    value = data.get(name)
    return None if value is None else float(value)


def _opt_int(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    return None if value is None else int(value)


def _none_if_empty(value: Any) -> Any:
    return None if value is None or value == "" else value


def _list(data: Mapping[str, Any], name: str) -> list[Any]:
    value = _field(data, name)
    if not isinstance(value, list):
        raise ValueError(f"field `{name}` must be a list")
    return value


def _as_list(data: Iterable[Any]) -> list[Any]:
    if not isinstance(data, list):
        raise ValueError("expected a JSON array")
    return data


@dataclass
class CoinbaseCurrencySupportedNetwork:
    """A network a currency can be moved over."""

    id: str
    name: str
    status: str
    contract_address: str | None
    crypto_address_link: str | None
    crypto_transaction_link: str | None
    min_withdrawal_amount: float | None
    max_withdrawal_amount: float | None
    network_confirmations: int | None
    processing_time_seconds: float | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseCurrencySupportedNetwork:
        return cls(
            id=_field(data, "id"),
            name=_field(data, "name"),
            status=_field(data, "status"),
            contract_address=data.get("contract_address"),
            crypto_address_link=data.get("crypto_address_link"),
            crypto_transaction_link=data.get("crypto_transaction_link"),
            min_withdrawal_amount=_opt_float(data, "min_withdrawal_amount"),
            max_withdrawal_amount=_opt_float(data, "max_withdrawal_amount"),
            network_confirmations=_opt_int(data, "network_confirmations"),
            processing_time_seconds=_opt_float(data, "processing_time_seconds"),
        )


@dataclass
class CoinbaseCurrencyDetails:
    """Extra details of a currency."""

    kind: str
    display_name: str | None
    symbol: str | None
    network_confirmations: int | None
    sort_order: int | None
    crypto_address_link: str | None
    crypto_transaction_link: str | None
    group_types: list[str]
    push_payment_methods: list[str] | None
    min_withdrawal_amount: float | None
    max_withdrawal_amount: float | None
    processing_time_seconds: float | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseCurrencyDetails:
        methods = data.get("push_payment_methods") if isinstance(data, Mapping) else None
        return cls(
            kind=_field(data, "type"),
            display_name=data.get("display_name"),
            symbol=data.get("symbol"),
            network_confirmations=_opt_int(data, "network_confirmations"),
            sort_order=_opt_int(data, "sort_order"),
            crypto_address_link=data.get("crypto_address_link"),
            crypto_transaction_link=data.get("crypto_transaction_link"),
            group_types=list(_list(data, "group_types")),
            push_payment_methods=None if methods is None else list(methods),
            min_withdrawal_amount=_opt_float(data, "min_withdrawal_amount"),
            max_withdrawal_amount=_opt_float(data, "max_withdrawal_amount"),
            processing_time_seconds=_opt_float(data, "processing_time_seconds"),
        )


@dataclass
class CoinbaseCurrency:
    """A currency listed by the currencies endpoint."""

    id: str
    name: str
    min_size: float
    status: str
    message: str
    max_precision: float
    convertible_to: list[str]
    display_name: str | None
    details: CoinbaseCurrencyDetails
    default_network: str
    supported_networks: list[CoinbaseCurrencySupportedNetwork]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseCurrency:
        return cls(
            id=_field(data, "id"),
            name=_field(data, "name"),
            min_size=_float(data, "min_size"),
            status=_field(data, "status"),
            message=_field(data, "message"),
            max_precision=_float(data, "max_precision"),
            convertible_to=list(_list(data, "convertible_to")),
            display_name=data.get("display_name"),
            details=CoinbaseCurrencyDetails.from_dict(_field(data, "details")),
            default_network=_field(data, "default_network"),
            supported_networks=[
                CoinbaseCurrencySupportedNetwork.from_dict(net)
                for net in _list(data, "supported_networks")
            ],
        )

    def is_wrapped(self) -> bool:
        """Whether this is a wrapped token, such as Wrapped Bitcoin (WBTC)."""
        return "wrapped" in self.name.lower() and self.id.lower().startswith("w")


@dataclass
class CoinbaseAllCurrencies:
    """Every currency returned by the currencies endpoint."""

    currencies: list[CoinbaseCurrency]

    @classmethod
    def from_list(cls, data: Iterable[Mapping[str, Any]]) -> CoinbaseAllCurrencies:
        return cls([CoinbaseCurrency.from_dict(c) for c in _as_list(data)])


@dataclass
class CoinbaseProduct:
    """A trading product listed by the products endpoint."""

    id: CoinbaseTradingPair
    base_currency: str
    quote_currency: str
    quote_increment: float
    base_increment: float
    display_name: str
    min_market_funds: float
    margin_enabled: bool
    post_only: bool
    limit_only: bool
    cancel_only: bool
    status: str
    status_message: str | None
    trading_disabled: bool
    fx_stablecoin: bool
    max_slippage_percentage: float
    auction_mode: bool
    high_bid_limit_percentage: float | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoinbaseProduct:
        high_bid = _none_if_empty(data.get("high_bid_limit_percentage") if isinstance(data, Mapping) else None)
        return cls(
            id=CoinbaseTradingPair(str(_field(data, "id"))),
            base_currency=_field(data, "base_currency"),
            quote_currency=_field(data, "quote_currency"),
            quote_increment=_float(data, "quote_increment"),
            base_increment=_float(data, "base_increment"),
            display_name=_field(data, "display_name"),
            min_market_funds=_float(data, "min_market_funds"),
            margin_enabled=_bool(data, "margin_enabled"),
            post_only=_bool(data, "post_only"),
            limit_only=_bool(data, "limit_only"),
            cancel_only=_bool(data, "cancel_only"),
            status=_field(data, "status"),
            status_message=_none_if_empty(data.get("status_message")),
            trading_disabled=_bool(data, "trading_disabled"),
            fx_stablecoin=_bool(data, "fx_stablecoin"),
            max_slippage_percentage=_float(data, "max_slippage_percentage"),
            auction_mode=_bool(data, "auction_mode"),
            high_bid_limit_percentage=None if high_bid is None else float(high_bid),
        )


@dataclass
class CoinbaseAllProducts:
    """Every product returned by the products endpoint."""

    products: list[CoinbaseProduct]

    @classmethod
    def from_list(cls, data: Iterable[Mapping[str, Any]]) -> CoinbaseAllProducts:
        return cls([CoinbaseProduct.from_dict(p) for p in _as_list(data)])


@dataclass
class CoinbaseRestApiResponse:
    """The answer to a Coinbase REST request: currencies or products."""

    value: Union[CoinbaseAllCurrencies, CoinbaseAllProducts]

    def take_currencies(self) -> list[CoinbaseCurrency] | None:
        """The currencies, or None if this holds products."""
        if isinstance(self.value, CoinbaseAllCurrencies):
            return list(self.value.currencies)
        return None

    def take_products(self, active_only: bool) -> list[CoinbaseProduct] | None:
        """The products, only tradable ones if ``active_only``; None if this holds currencies."""
        if not isinstance(self.value, CoinbaseAllProducts):
            return None
        if active_only:
            return [p for p in self.value.products if not p.trading_disabled]
        return list(self.value.products)