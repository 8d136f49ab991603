"""Plain-text rendering of normalization results for the terminal."""

from __future__ import annotations

from larder.domain.item_normalization import NormalizationResult
from larder.domain.receipt import Receipt

REVIEW_MARKER = "?"


def format_normalization(result: NormalizationResult) -> str:
    """One line: original -> normalized [category] (confidence)."""
    category = result.category or "-"
    line = f"{result.original_name} -> {result.normalized_name} [{category}] ({result.confidence:.2f})"
    if result.modifiers:
        line += f" modifiers: {', '.join(result.modifiers)}"
    return line


def format_normalization_table(results: list[NormalizationResult]) -> list[str]:
    """
    Format results as aligned columns.

    Args:
        results: Normalization results in input order

    Returns:
        Lines with original names, normalized names and categories aligned
    """
    if not results:
        return []

    max_original = max(len(r.original_name) for r in results)
    max_normalized = max(len(r.normalized_name) for r in results)

    lines = []
    for r in results:
        original = r.original_name.ljust(max_original)
        normalized = r.normalized_name.ljust(max_normalized)
        lines.append(f"{original}  {normalized}  {r.confidence:.2f}  {r.category or '-'}")
    return lines


def format_normalized_receipt(receipt: Receipt) -> str:
    """Render a normalized receipt, marking items that need manual review."""
    header = f"Store: {receipt.store or 'unknown'}"
    if receipt.currency:
        header += f"  Currency: {receipt.currency}"
    lines = [header]

    for item in receipt.items:
        marker = REVIEW_MARKER if item.needs_review else " "
        price = f"  {item.price}" if item.price is not None else ""
        if item.normalization is None:
            lines.append(f"{marker} {item.name}{price}")
            continue
        lines.append(f"{marker} {format_normalization(item.normalization)}{price}")

    review_count = len(receipt.review_items)
    if review_count:
        lines.append(f"{review_count} item(s) need review ({REVIEW_MARKER})")
    return "\n".join(lines)
