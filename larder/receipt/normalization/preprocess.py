"""Noise removal for raw receipt item names."""

from __future__ import annotations

import re

# Whole-word abbreviations expanded before modifier extraction
ABBREVIATIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bORG\b", re.IGNORECASE), "ORGANIC"),
    (re.compile(r"\bBIO\b", re.IGNORECASE), "ORGANIC"),
)

_MULTIPLIER = re.compile(r"\d+\s*[xX]\s*\d+\s*(?:pcs|pieces|τεμ)", re.IGNORECASE)
_PIECE_COUNT = re.compile(r"\d+\s*(?:pcs|pieces|τεμ)", re.IGNORECASE)
_PACK_OF = re.compile(r"(?:pack of|συσκευασία)\s*\d+", re.IGNORECASE)
_PARENTHETICAL = re.compile(r"\([^)]*\)")
_WHITESPACE = re.compile(r"\s+")

# Currency code -> symbols a receipt may print after a price
CURRENCY_SYMBOLS: dict[str, tuple[str, ...]] = {
    "EUR": ("€", "EUR", "EURO", "ΕΥΡΩ"),
    "USD": ("$", "USD"),
    "GBP": ("£", "GBP"),
}

_CURRENCY_ALIASES: dict[str, str] = {
    symbol.upper(): code for code, symbols in CURRENCY_SYMBOLS.items() for symbol in symbols
}

DEFAULT_CURRENCY = "EUR"


def standardize_currency(raw_currency: str | None) -> str:
    """Convert a currency symbol or name to its code.

    Unknown values are returned upper-cased; empty input maps to EUR.
    """
    currency = (raw_currency or "").strip().upper()
    if not currency:
        return DEFAULT_CURRENCY
    return _CURRENCY_ALIASES.get(currency, currency)


def _price_pattern(currency: str | None) -> re.Pattern[str]:
    symbols = ["€", "EUR"]
    if currency is not None:
        code = standardize_currency(currency)
        for symbol in CURRENCY_SYMBOLS.get(code, (code,)):
            if symbol not in symbols:
                symbols.append(symbol)
    # Longer symbols first so "EURO" is not cut down to "EUR"
    alternatives = "|".join(re.escape(s) for s in sorted(symbols, key=len, reverse=True))
    return re.compile(rf"\d+[.,]\d+\s*(?:{alternatives})", re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def preprocess_item_name(raw_name: str | None, currency: str | None = None) -> str:
    """Strip quantities, prices and asides from a receipt item name.

    Args:
        raw_name: Item text as extracted from the receipt.
        currency: Optional receipt currency; prices in it are removed along
            with euro prices.

    Returns:
        The cleaned name with single spaces, possibly empty.
    """
    if not raw_name:
        return ""

    processed = raw_name.strip()
    for pattern, expansion in ABBREVIATIONS:
        processed = pattern.sub(expansion, processed)

    processed = _MULTIPLIER.sub("", processed)
    processed = _PIECE_COUNT.sub("", processed)
    processed = _PACK_OF.sub("", processed)
    processed = _price_pattern(currency).sub("", processed)
    processed = _PARENTHETICAL.sub("", processed)

    return collapse_whitespace(processed)
