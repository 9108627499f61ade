import copy

import pytest

from cexfeeds.kucoin.pairs import KucoinTradingPair
from cexfeeds.kucoin.rest import (
    KucoinAllCurrencies,
    KucoinAllSymbols,
    KucoinCurrency,
    KucoinCurrencyChain,
    KucoinRestApiResponse,
    KucoinSymbol,
)

CHAIN = {
    "chainName": "ERC20",
    "withdrawalMinFee": "0.001",
    "withdrawalMinSize": "0.01",
    "withdrawFeeRate": "0",
    "depositMinSize": None,
    "isWithdrawEnabled": True,
    "isDepositEnabled": False,
    "preConfirms": 12,
    "contractAddress": "",
    "chainId": "eth",
    "confirms": 64,
}

CURRENCY = {
    "currency": "WBTC",
    "name": "WBTC",
    "fullName": "Wrapped Bitcoin",
    "precision": 8,
    "confirms": None,
    "contractAddress": None,
    "isMarginEnabled": False,
    "isDebitEnabled": True,
    "chains": [CHAIN],
}


def _symbol(name, enabled, margin=False):
    base, quote = name.split("-")
    return {
        "symbol": name,
        "name": name,
        "baseCurrency": base,
        "quoteCurrency": quote,
        "feeCurrency": quote,
        "market": "USDS",
        "baseMinSize": "0.1",
        "quoteMinSize": "0.1",
        "baseMaxSize": "10000",
        "quoteMaxSize": "99999999",
        "baseIncrement": "0.0001",
        "quoteIncrement": "0.0001",
        "priceIncrement": "0.0001",
        "priceLimitRate": "0.1",
        "minFunds": "0.1",
        "isMarginEnabled": margin,
        "enableTrading": enabled,
    }


def test_chain_from_dict_reads_strings_as_numbers():
    chain = KucoinCurrencyChain.from_dict(CHAIN)
    assert chain.chain_name == "ERC20"
    assert chain.withdrawal_min_fee == float("0.001")
    assert chain.withdrawal_min_size == float("0.01")
    assert chain.deposit_min_size is None
    assert chain.pre_confirms == 12
    assert chain.is_deposit_enabled is False


def test_chain_empty_contract_address_is_none():
    assert KucoinCurrencyChain.from_dict(CHAIN).contract_address is None
    data = dict(CHAIN, contractAddress="0xabc")
    assert KucoinCurrencyChain.from_dict(data).contract_address == "0xabc"


def test_currency_from_dict():
    currency = KucoinCurrency.from_dict(CURRENCY)
    assert currency.currency == "WBTC"
    assert currency.full_name == "Wrapped Bitcoin"
    assert currency.precision == 8
    assert len(currency.chains) == 1
    assert currency.chains[0] == KucoinCurrencyChain.from_dict(CHAIN)


def test_currency_null_chains_become_empty():
    data = dict(CURRENCY, chains=None)
    assert KucoinCurrency.from_dict(data).chains == []


def test_currency_missing_field_raises():
    data = copy.deepcopy(CURRENCY)
    del data["fullName"]
    with pytest.raises(ValueError, match="fullName"):
        KucoinCurrency.from_dict(data)


def test_is_wrapped():
    assert KucoinCurrency.from_dict(CURRENCY).is_wrapped() is True
    plain = dict(CURRENCY, currency="BTC", name="BTC", fullName="Bitcoin")
    assert KucoinCurrency.from_dict(plain).is_wrapped() is False
    wrapped_name_only = dict(CURRENCY, currency="XBT")
    assert KucoinCurrency.from_dict(wrapped_name_only).is_wrapped() is False


def test_all_currencies_reads_data_key():
    all_currencies = KucoinAllCurrencies.from_dict({"code": "200000", "data": [CURRENCY, CURRENCY]})
    assert len(all_currencies.currencies) == 2
    assert all_currencies.currencies[0].currency == "WBTC"


def test_all_currencies_without_data_raises():
    with pytest.raises(ValueError):
        KucoinAllCurrencies.from_dict({"code": "200000"})


def test_symbol_from_dict():
    symbol = KucoinSymbol.from_dict(_symbol("BTC-USDT", True))
    assert symbol.symbol == KucoinTradingPair("BTC-USDT")
    assert symbol.base_currency == "BTC"
    assert symbol.quote_currency == "USDT"
    assert symbol.min_funds == float("0.1")
    assert symbol.enable_trading is True


def test_symbol_strips_ticker_topic_prefix():
    data = _symbol("ETH-USDT", True)
    data["symbol"] = "/market/ticker:ETH-USDT"
    assert KucoinSymbol.from_dict(data).symbol == KucoinTradingPair("ETH-USDT")


def test_symbol_rejects_non_boolean_flag():
    data = _symbol("ETH-USDT", True)
    data["enableTrading"] = "yes"
    with pytest.raises(ValueError):
        KucoinSymbol.from_dict(data)


def test_take_symbols_filters_inactive():
    symbols = KucoinAllSymbols.from_dict(
        {"data": [_symbol("BTC-USDT", True), _symbol("LOOM-USDT", False)]}
    )
    response = KucoinRestApiResponse(symbols)
    active = response.take_symbols(True)
    assert [s.symbol for s in active] == [KucoinTradingPair("BTC-USDT")]
    assert len(response.take_symbols(False)) == 2
    assert response.take_currencies() is None


def test_take_currencies():
    response = KucoinRestApiResponse(KucoinAllCurrencies.from_dict({"data": [CURRENCY]}))
    currencies = response.take_currencies()
    assert [c.currency for c in currencies] == ["WBTC"]
    assert response.take_symbols(False) is None