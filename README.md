# cexfeeds

Typed building blocks for market data from two centralized crypto exchanges,
Coinbase and KuCoin: trading-pair symbols, websocket channel and subscription
descriptions, and parsers for websocket messages and REST API payloads.

## What it does

### Trading pairs

`cexfeeds.coinbase.pairs.CoinbaseTradingPair` and
`cexfeeds.kucoin.pairs.KucoinTradingPair` hold symbols in the `BASE-QUOTE`
form.

- `is_valid(value)` checks the form (a `-`, no `_` or `/`; Coinbase also
  requires more than four characters).
- `new_checked(value)` validates and keeps the text as given; `parse(value)`
  validates and upper-cases it. Both raise `ValueError` on a bad symbol.
- `from_base_quote(base, quote)` and `from_raw(raw, delimiter)` build a pair
  from parts or from a string with another delimiter such as `_` or `/`.
- `split()` returns `(base, quote)`.
- `CoinbaseTradingPair.parse_for_bad_pair(text)` finds the first product id
  named in an error message; `KucoinTradingPair.from_topic(value)` drops a
  `/market/ticker:` prefix.

### Websocket channels and subscriptions

- `cexfeeds.coinbase.channels`: `CoinbaseWsChannelKind` (matches, ticker,
  status) and `CoinbaseWsChannel` with `matches(pairs)`, `ticker(pairs)`,
  `status()`, `parse(name)` and `count_entries()`.
- `cexfeeds.kucoin.channels`: `KucoinWsChannelKind` (match, ticker) and
  `KucoinWsChannel` with `match(pairs)`, `ticker(pairs)`, `parse(name)` and
  `count_entries()`.
- `cexfeeds.coinbase.subscription.CoinbaseSubscription` collects channels
  (dropping duplicate product ids), removes pairs with `remove_pair`, and
  renders the subscribe request with `to_dict()` / `to_json()`.
- `cexfeeds.kucoin.subscription.KucoinSubscription` renders a subscribe
  request whose topic is `/market/<channel>:<PAIR,PAIR,...>`;
  `KucoinMultiSubscription` keeps one subscription per channel kind, and
  `KucoinWsEndpointResponse.from_dict` reads the public-endpoint answer,
  exposing `get_ws_endpoint()` and `get_token()`.

### Websocket messages

- `cexfeeds.coinbase.message.parse_message(data)` accepts JSON text or a
  decoded mapping and returns a `CoinbaseWsMessage` whose `kind` is a
  `CoinbaseMessageKind` and whose `value` is a `CoinbaseMatches`,
  `CoinbaseTicker`, `CoinbaseStatus`, `CoinbaseError` or a subscriptions
  mapping. `make_critical(msg)` on an error records the rejected pair.
- `cexfeeds.kucoin.message.parse_message(data)` returns a `KucoinWsMessage`
  holding a `KucoinMatch`, `KucoinTicker` or `KucoinSubscriptionResponse`.
- Payload classes live in `cexfeeds.coinbase.ws_data` and
  `cexfeeds.kucoin.ws_data`; `timestamp_from_nanos` converts KuCoin
  nanosecond timestamps to UTC datetimes.

Malformed input raises `ValueError`.

### REST payloads

- `cexfeeds.coinbase.rest`: `CoinbaseAllCurrencies.from_list` and
  `CoinbaseAllProducts.from_list` parse the currencies and products
  endpoints; `CoinbaseRestApiResponse` offers `take_currencies()` and
  `take_products(active_only)`.
- `cexfeeds.kucoin.rest`: `KucoinAllCurrencies.from_dict` and
  `KucoinAllSymbols.from_dict` parse the currencies and symbols endpoints;
  `KucoinRestApiResponse` offers `take_currencies()` and
  `take_symbols(active_only)`.
- `is_wrapped()` on a currency tells whether it is a wrapped token.

## Example

```python
from cexfeeds.coinbase.channels import CoinbaseWsChannel
from cexfeeds.coinbase.message import parse_message
from cexfeeds.coinbase.subscription import CoinbaseSubscription

subscription = CoinbaseSubscription.new_single_channel(
    CoinbaseWsChannel.matches(["eth-usd", "BTC_USD"])
)
print(subscription.to_json())

message = parse_message('{"type": "error", "message": "Failed to subscribe", '
                        '"reason": "LOOM-USDC is delisted"}')
message.make_critical("subscription rejected")
print(message.value.bad_pair)  # LOOM-USDC
```

## What it does not do

The package does no networking. It does not call the exchanges' REST APIs,
open websocket connections, fetch KuCoin connection tokens, or manage
reconnects and multiple streams. Fetch the data with the HTTP or websocket
client of your choice and hand the decoded JSON to the parsers above; send
the output of `to_json()` as the subscribe message.

## Install

```
pip install cexfeeds
```

For running the test suite:

```
pip install "cexfeeds[test]"
pytest
```