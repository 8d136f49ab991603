"""Conversion between extraction-service JSON and receipt models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict
from decimal import Decimal, InvalidOperation
from typing import Any

from larder.domain.receipt import Receipt, ReceiptItem


def _parse_decimal(value: Any, field_name: str) -> Decimal:
    """Parse a JSON number or string ("1,20" included) into a Decimal."""
    text = str(value).strip().replace(",", ".")
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid {field_name}: {value!r}") from exc


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_extracted_receipt(data: Mapping[str, Any]) -> Receipt:
    """
    Build a Receipt from the extraction service payload.

    Expected shape:
        {"store": "LIDL", "currency": "EUR",
         "items": [{"name": "ΜΠΑΝΑΝΕΣ", "price": 1.20, "quantity": 1}]}

    Raises:
        ValueError: The payload is not an object, or an item is malformed.
    """
    if not isinstance(data, Mapping):
        raise ValueError("Receipt payload must be a JSON object")

    raw_items = data.get("items") or []
    if not isinstance(raw_items, list):
        raise ValueError("Receipt 'items' must be a list")

    items: list[ReceiptItem] = []
    for index, raw in enumerate(raw_items):
        if isinstance(raw, str):
            items.append(ReceiptItem(name=raw))
            continue
        if not isinstance(raw, Mapping) or "name" not in raw:
            raise ValueError(f"Receipt item {index} must be a string or an object with a 'name'")

        price = raw.get("price")
        quantity = raw.get("quantity")
        items.append(
            ReceiptItem(
                name=str(raw["name"] or ""),
                price=_parse_decimal(price, f"price of item {index}") if price is not None else None,
                quantity=_parse_decimal(quantity, f"quantity of item {index}") if quantity is not None else Decimal("1"),
            )
        )

    return Receipt(
        store=_optional_str(data.get("store")),
        currency=_optional_str(data.get("currency")),
        items=items,
    )


def receipt_to_dict(receipt: Receipt) -> dict[str, Any]:
    """JSON-ready dict of a receipt and its item normalizations."""
    return {
        "store": receipt.store,
        "currency": receipt.currency,
        "items": [
            {
                "name": item.name,
                "price": str(item.price) if item.price is not None else None,
                "quantity": str(item.quantity),
                "needs_review": item.needs_review,
                "normalization": asdict(item.normalization) if item.normalization is not None else None,
            }
            for item in receipt.items
        ],
    }
