import pytest

from cexfeeds.kucoin.pairs import KucoinTradingPair


@pytest.mark.parametrize("value", ["ETH_USDT", "ETH/USDT", "ETHUSDT"])
def test_is_valid_rejects(value):
    assert KucoinTradingPair.is_valid(value) is False


def test_is_valid_has_no_length_limit():
    assert KucoinTradingPair.is_valid("A-B") is True


def test_new_checked_keeps_value():
    assert KucoinTradingPair.new_checked("eth-usdt").value == "eth-usdt"


def test_parse_matches_checked_uppercase():
    assert KucoinTradingPair.parse("btc-usdc") == KucoinTradingPair.new_checked("btc-usdc".upper())


@pytest.mark.parametrize("value", ["ETH_USDT", "ETHUSDT"])
def test_parse_invalid(value):
    with pytest.raises(ValueError, match="INVALID Kucoin trading pair"):
        KucoinTradingPair.parse(value)


def test_from_topic_strips_prefix():
    assert KucoinTradingPair.from_topic("/market/ticker:BTC-USDT") == KucoinTradingPair("BTC-USDT")


def test_from_topic_plain_symbol_unchanged():
    assert KucoinTradingPair.from_topic("ETH-BTC").value == "ETH-BTC"


def test_from_raw_delimiter_matches_base_quote():
    assert KucoinTradingPair.from_raw("ETH_USDt", "_") == KucoinTradingPair.from_base_quote("eth", "usdt")


def test_from_raw_dash_matches_parse():
    assert KucoinTradingPair.from_raw("btc-usdc") == KucoinTradingPair.parse("btc-usdc")


def test_from_raw_replaces_separators():
    assert KucoinTradingPair.from_raw("xlm/eur") == KucoinTradingPair.from_base_quote("xlm", "eur")


def test_from_raw_invalid():
    with pytest.raises(ValueError, match="contains no '-'"):
        KucoinTradingPair.from_raw("ethusdt")


def test_split_round_trip():
    pair = KucoinTradingPair.from_base_quote("sol", "usdt")
    assert KucoinTradingPair.from_base_quote(*pair.split()) == pair


def test_split_invalid():
    with pytest.raises(ValueError):
        KucoinTradingPair("ETHUSDT").split()


def test_pairs_are_hashable_and_deduplicate():
    pairs = {KucoinTradingPair.parse("eth-usdt"), KucoinTradingPair.from_raw("ETH_USDT", "_")}
    assert len(pairs) == 1