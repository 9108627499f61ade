import pytest

from cexfeeds.coinbase.channels import CoinbaseWsChannel, CoinbaseWsChannelKind
from cexfeeds.coinbase.pairs import CoinbaseTradingPair


def test_parse_ignores_case():
    assert CoinbaseWsChannel.parse("STATUS") == CoinbaseWsChannel.status()
    assert CoinbaseWsChannel.parse("Matches") == CoinbaseWsChannel.matches([])
    assert CoinbaseWsChannel.parse("ticker") == CoinbaseWsChannel.ticker([])


def test_parse_rejects_unknown_channel():
    with pytest.raises(ValueError, match="channel is not valid: bogus"):
        CoinbaseWsChannel.parse("bogus")


def test_display_names():
    assert str(CoinbaseWsChannel.status()) == "status"
    assert str(CoinbaseWsChannel.matches([])) == "matches"
    assert str(CoinbaseWsChannel.ticker([])) == "ticker"


def test_count_entries():
    pairs = [CoinbaseTradingPair("ETH-USD"), CoinbaseTradingPair("BTC-USD")]
    assert CoinbaseWsChannel.matches(pairs).count_entries() == len(pairs)
    assert CoinbaseWsChannel.ticker(pairs[:1]).count_entries() == 1
    assert CoinbaseWsChannel.status().count_entries() == 0


def test_strings_are_converted_to_pairs():
    channel = CoinbaseWsChannel.ticker(["eth_usd", "BTC-usd"])
    assert channel.pairs == (
        CoinbaseTradingPair.from_raw("eth_usd"),
        CoinbaseTradingPair.from_raw("BTC-usd"),
    )
    assert channel.kind is CoinbaseWsChannelKind.TICKER


def test_status_rejects_pairs():
    with pytest.raises(ValueError):
        CoinbaseWsChannel(CoinbaseWsChannelKind.STATUS, (CoinbaseTradingPair("ETH-USD"),))


def test_kind_round_trip():
    for kind in CoinbaseWsChannelKind:
        assert CoinbaseWsChannel.parse(str(kind)).kind is kind