"""Item name normalization workflow orchestration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from larder.domain.item_normalization import NormalizationResult
from larder.domain.receipt import Receipt
from larder.receipt.normalization import NormalizationRuleSet, resolve_store_key
from larder.receipt.normalization import normalize_item_name as _normalize_with_rules
from larder.runtime import get_logger, load_name_rule_set

logger = get_logger(__name__)


def normalize_item_name(
    original_name: str | None,
    store_name: str | None = None,
    *,
    currency: str | None = None,
    rule_set: NormalizationRuleSet | None = None,
) -> NormalizationResult:
    """Normalize one item name with the loaded rule tables unless ``rule_set`` is given."""
    rules = rule_set if rule_set is not None else load_name_rule_set()
    result = _normalize_with_rules(original_name, store_name, rule_set=rules, currency=currency)
    logger.debug(
        "Normalized '%s' -> '%s' (category=%s, confidence=%.2f)",
        result.original_name,
        result.normalized_name,
        result.category,
        result.confidence,
    )
    return result


def normalize_item_names(
    names: Iterable[str],
    store_name: str | None = None,
    *,
    currency: str | None = None,
    rule_set: NormalizationRuleSet | None = None,
) -> list[NormalizationResult]:
    """Normalize a batch of names from the same receipt, preserving order."""
    rules = rule_set if rule_set is not None else load_name_rule_set()
    if store_name and resolve_store_key(store_name, rules) is None:
        logger.info("No store rules for '%s', using default rules only", store_name)
    return [normalize_item_name(name, store_name, currency=currency, rule_set=rules) for name in names]


def normalize_receipt(receipt: Receipt, *, rule_set: NormalizationRuleSet | None = None) -> Receipt:
    """
    Attach a normalization to every item of an extracted receipt.

    The receipt's store and currency are used as context for each item.
    The input receipt is left untouched.

    Returns:
        New Receipt with ``normalization`` set on each item.
    """
    results = normalize_item_names(
        (item.name for item in receipt.items),
        receipt.store,
        currency=receipt.currency,
        rule_set=rule_set,
    )
    items = [replace(item, normalization=result) for item, result in zip(receipt.items, results)]
    normalized = replace(receipt, items=items)

    for item in normalized.review_items:
        assert item.normalization is not None
        logger.info(
            "Low confidence for '%s' -> '%s' (%.2f), needs review",
            item.name,
            item.normalization.normalized_name,
            item.normalization.confidence,
        )
    logger.info(
        "Normalized %d item(s) from %s, %d need review",
        len(items),
        receipt.store or "unknown store",
        len(normalized.review_items),
    )
    return normalized
