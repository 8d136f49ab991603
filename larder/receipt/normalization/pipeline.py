"""Receipt item name normalization pipeline.

raw name -> preprocess -> extract modifiers -> store rules -> default rules
-> transliterate leftover Greek -> description -> confidence

Every stage is a pure function over the supplied rule set. The pipeline
never raises for string input; poor normalizations show up as low
confidence instead.
"""

from __future__ import annotations

from larder.domain.item_normalization import NormalizationResult
from larder.receipt.normalization.modifiers import extract_modifiers
from larder.receipt.normalization.preprocess import preprocess_item_name
from larder.receipt.normalization.rules import NormalizationRuleSet, apply_default_rules, apply_store_rules
from larder.receipt.normalization.scoring import calculate_confidence, create_item_description
from larder.receipt.normalization.transliteration import (
    contains_greek_characters,
    transliterate_greek_to_latin,
)


def normalize_item_name(
    original_name: str | None,
    store_name: str | None = None,
    *,
    rule_set: NormalizationRuleSet,
    currency: str | None = None,
) -> NormalizationResult:
    """
    Normalize one receipt item name.

    Args:
        original_name: Item name as extracted (e.g., "ΜΠΑΝΑΝΕΣ 1.20 €")
        store_name: Store the receipt came from, used to pick store rules
        rule_set: Rule tables to apply
        currency: Receipt currency, widens price-token removal

    Returns:
        NormalizationResult; empty input gives the zero-value result.
    """
    if not original_name:
        return NormalizationResult.empty()

    preprocessed = preprocess_item_name(original_name, currency=currency)
    modifiers, clean_name = extract_modifiers(preprocessed, rule_set.modifier_patterns)

    # Default rules only run when the store pass left the name unchanged.
    store_match = apply_store_rules(clean_name, store_name, rule_set)
    if store_match.normalized_name != clean_name:
        rule_match = store_match
    else:
        rule_match = apply_default_rules(clean_name, rule_set)

    normalized_name = rule_match.normalized_name
    if contains_greek_characters(normalized_name):
        normalized_name = transliterate_greek_to_latin(normalized_name)

    return NormalizationResult(
        normalized_name=normalized_name,
        original_name=original_name,
        category=rule_match.category,
        description=create_item_description(normalized_name, original_name, modifiers),
        modifiers=modifiers,
        confidence=calculate_confidence(original_name, normalized_name, rule_match.category is not None),
    )
