"""Kucoin REST API payloads: currencies, symbols and the combined response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from cexfeeds.kucoin.pairs import KucoinTradingPair


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _field(data: Mapping[str, Any], name: str) -> Any:
    try:
        return _mapping(data)[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _str(data: Mapping[str, Any], name: str) -> str:
    value = _field(data, name)
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _float(data: Mapping[str, Any], name: str) -> float:
    return float(_field(data, name))


def _int(data: Mapping[str, Any], name: str) -> int:
    value = _field(data, name)
    if isinstance(value, bool):
        raise ValueError(f"field `{name}` must be an integer")
    return int(value)


def _bool(data: Mapping[str, Any], name: str) -> bool:
    value = _field(data, name)
    if not isinstance(value, bool):
        raise ValueError(f"field `{name}` must be a boolean")
    return value


def _opt_float(data: Mapping[str, Any], name: str) -> float | None:
    value = _mapping(data).get(name)
    return None if value is None else float(value)


def _opt_int(data: Mapping[str, Any], name: str) -> int | None:
    value = _mapping(data).get(name)
    return None if value is None else int(value)


def _opt_str(data: Mapping[str, Any], name: str) -> str | None:
    value = _mapping(data).get(name)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _list(data: Mapping[str, Any], name: str, *, null_as_empty: bool = False) -> list[Any]:
    value = _field(data, name)
    if value is None and null_as_empty:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field `{name}` must be a list")
    return value


@dataclass
class KucoinCurrencyChain:
    """A blockchain a currency can be deposited or withdrawn on."""

    chain_name: str
    withdrawal_min_fee: float
    withdrawal_min_size: float
    withdraw_fee_rate: float | None
    deposit_min_size: float | None
    is_withdraw_enabled: bool
    is_deposit_enabled: bool
    pre_confirms: int
    contract_address: str | None
    chain_id: str
    confirms: int | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinCurrencyChain:
        address = _opt_str(data, "contractAddress")
        return cls(
            chain_name=_str(data, "chainName"),
            withdrawal_min_fee=_float(data, "withdrawalMinFee"),
            withdrawal_min_size=_float(data, "withdrawalMinSize"),
            withdraw_fee_rate=_opt_float(data, "withdrawFeeRate"),
            deposit_min_size=_opt_float(data, "depositMinSize"),
            is_withdraw_enabled=_bool(data, "isWithdrawEnabled"),
            is_deposit_enabled=_bool(data, "isDepositEnabled"),
            pre_confirms=_int(data, "preConfirms"),
            contract_address=address or None,
            chain_id=_str(data, "chainId"),
            confirms=_opt_int(data, "confirms"),
        )


@dataclass
class KucoinCurrency:
    """A currency listed by the currencies endpoint."""

    currency: str
    name: str
    full_name: str
    precision: int
    confirms: int | None
    contract_address: str | None
    is_margin_enabled: bool
    is_debit_enabled: bool
    chains: list[KucoinCurrencyChain]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinCurrency:
        return cls(
            currency=_str(data, "currency"),
            name=_str(data, "name"),
            full_name=_str(data, "fullName"),
            precision=_int(data, "precision"),
            confirms=_opt_int(data, "confirms"),
            contract_address=_opt_str(data, "contractAddress"),
            is_margin_enabled=_bool(data, "isMarginEnabled"),
            is_debit_enabled=_bool(data, "isDebitEnabled"),
            chains=[
                KucoinCurrencyChain.from_dict(chain)
                for chain in _list(data, "chains", null_as_empty=True)
            ],
        )

    def is_wrapped(self) -> bool:
        """Whether this is a wrapped token, such as Wrapped Bitcoin (WBTC)."""
        return "wrapped" in self.full_name.lower() and self.currency.lower().startswith("w")


@dataclass
class KucoinAllCurrencies:
    """Every currency returned by the currencies endpoint."""

    currencies: list[KucoinCurrency]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinAllCurrencies:
        return cls([KucoinCurrency.from_dict(c) for c in _list(data, "data")])


@dataclass
class KucoinSymbol:
    """A trading symbol listed by the symbols endpoint."""

    symbol: KucoinTradingPair
    name: str
    base_currency: str
    quote_currency: str
    fee_currency: str
    market: str
    base_min_size: float
    quote_min_size: float
    base_max_size: float
    quote_max_size: float
    base_increment: float
    quote_increment: float
    price_increment: float
    price_limit_rate: float
    min_funds: float | None
    is_margin_enabled: bool
    enable_trading: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinSymbol:
        return cls(
            symbol=KucoinTradingPair.from_topic(_str(data, "symbol")),
            name=_str(data, "name"),
            base_currency=_str(data, "baseCurrency"),
            quote_currency=_str(data, "quoteCurrency"),
            fee_currency=_str(data, "feeCurrency"),
            market=_str(data, "market"),
            base_min_size=_float(data, "baseMinSize"),
            quote_min_size=_float(data, "quoteMinSize"),
            base_max_size=_float(data, "baseMaxSize"),
            quote_max_size=_float(data, "quoteMaxSize"),
            base_increment=_float(data, "baseIncrement"),
            quote_increment=_float(data, "quoteIncrement"),
            price_increment=_float(data, "priceIncrement"),
            price_limit_rate=_float(data, "priceLimitRate"),
            min_funds=_opt_float(data, "minFunds"),
            is_margin_enabled=_bool(data, "isMarginEnabled"),
            enable_trading=_bool(data, "enableTrading"),
        )


@dataclass
class KucoinAllSymbols:
    """Every symbol returned by the symbols endpoint."""

    symbols: list[KucoinSymbol]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KucoinAllSymbols:
        return cls([KucoinSymbol.from_dict(s) for s in _list(data, "data")])


@dataclass
class KucoinRestApiResponse:
    """The answer to a Kucoin REST request: currencies or symbols."""

    value: Union[KucoinAllCurrencies, KucoinAllSymbols]

    def take_currencies(self) -> list[KucoinCurrency] | None:
        """The currencies, or None if this holds symbols."""
        if isinstance(self.value, KucoinAllCurrencies):
            return list(self.value.currencies)
        return None

    def take_symbols(self, active_only: bool) -> list[KucoinSymbol] | None:
        """The symbols, only tradable ones if ``active_only``; None if this holds currencies."""
        if not isinstance(self.value, KucoinAllSymbols):
            return None
        if active_only:
            return [s for s in self.value.symbols if s.enable_trading]
        return list(self.value.symbols)