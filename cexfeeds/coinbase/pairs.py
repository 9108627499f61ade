"""Coinbase trading pair symbols such as ``BTC-USD``."""

from __future__ import annotations

from dataclasses import dataclass

_INVALID_MESSAGE = (
    "INVALID Coinbase trading pair '{}' contains either: "
    "1) '_', and/or '/' - OR -  2) no '-'"
)


@dataclass(frozen=True, order=True)
class CoinbaseTradingPair:
    """A product id in the ``BASE-QUOTE`` form Coinbase uses."""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Whether ``value`` looks like a Coinbase product id."""
        return "-" in value and "_" not in value and "/" not in value and len(value) > 4

    @classmethod
    def new_checked(cls, value: str) -> CoinbaseTradingPair:
        """Validate ``value`` and keep it exactly as given."""
        if not cls.is_valid(value):
            raise ValueError(_INVALID_MESSAGE.format(value))
        return cls(value)

    @classmethod
    def parse(cls, value: str) -> CoinbaseTradingPair:
        """Validate ``value`` and upper-case it."""
        if not cls.is_valid(value):
            raise ValueError(_INVALID_MESSAGE.format(value))
        return cls(value.upper())

    @classmethod
    def parse_for_bad_pair(cls, value: str) -> CoinbaseTradingPair | None:
        """Find the first product id mentioned in an error message, if any."""
        cleaned = value.replace("'", " ").replace('"', " ")
        for token in cleaned.split(" "):
            if cls.is_valid(token):
                return cls(token.upper())
        return None

    @classmethod
    def from_base_quote(cls, base: str, quote: str) -> CoinbaseTradingPair:
        """Build a pair from its base and quote symbols."""
        return cls(f"{base.upper()}-{quote.upper()}")

    @classmethod
    def from_raw(cls, raw: str, delimiter: str | None = None) -> CoinbaseTradingPair:
        """Build a pair from a raw symbol that may use another delimiter."""
        upper = raw.upper()
        if cls.is_valid(upper):
            return cls(upper)

        if delimiter:
            parts = upper.split(delimiter)
            if len(parts) < 2:
                raise ValueError(
                    f"INVALID Coinbase trading pair '{raw}' does not contain '{delimiter}'"
                )
            return cls(f"{parts[0]}-{parts[1]}")

        replaced = upper.replace("_", "-").replace("/", "-")
        if cls.is_valid(replaced):
            return cls(replaced)

        raise ValueError(f"INVALID Coinbase trading pair '{raw}' contains no '-'")

    def split(self) -> tuple[str, str]:
        """Return the ``(base, quote)`` symbols."""
        parts = self.value.split("-")
        if len(parts) < 2:
            raise ValueError(f"INVALID Coinbase trading pair '{self.value}' contains no '-'")
        return parts[0], parts[1]