"""Tests for the end-to-end item name normalization pipeline."""

from __future__ import annotations

import pytest

from larder.domain import NormalizationResult
from larder.receipt.normalization import (
    NormalizationRuleSet,
    apply_rules,
    build_name_rule_set,
    contains_greek_characters,
    normalize_item_name,
)


@pytest.mark.parametrize("empty", ["", None])
def test_empty_name_gives_zero_value_result(rule_set: NormalizationRuleSet, empty: str | None) -> None:
    assert normalize_item_name(empty, "LIDL", rule_set=rule_set) == NormalizationResult(
        normalized_name="",
        original_name="",
        category=None,
        description=None,
        modifiers=[],
        confidence=0.0,
    )


def test_store_rule_for_bananas(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("ΜΠΑΝΑΝΕΣ", "ALPHAMEGA", rule_set=rule_set)

    assert result.normalized_name == "Bananas"
    assert result.category == "Fruits"
    assert result.original_name == "ΜΠΑΝΑΝΕΣ"
    assert result.description == "Bananas (ΜΠΑΝΑΝΕΣ)"


def test_modifier_extraction_precedes_rule_matching(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("organic ΜΗΛΑ", rule_set=rule_set)

    assert result.modifiers == ["organic"]
    assert result.normalized_name == "Apples"
    assert result.category == "Fruits"


def test_greek_name_without_store_ends_up_latin(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("μπανάνες", rule_set=rule_set)

    assert result.normalized_name == "Bananas"
    assert not contains_greek_characters(result.normalized_name)


def test_unmatched_greek_name_is_transliterated(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("ΚΟΥΝΟΥΠΙΔΙ", rule_set=rule_set)

    assert result.normalized_name == "KOYNOYPIDI"
    assert result.category is None
    assert result.description == "KOYNOYPIDI (ΚΟΥΝΟΥΠΙΔΙ)"
    assert result.confidence == pytest.approx(0.5)


def test_description_keeps_original_when_rewritten(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("ΦΡΕΣΚΟ ΨΩΜΙ", "ALPHAMEGA", rule_set=rule_set)

    assert result.normalized_name == "Fresh Bread"
    assert result.category == "Bakery"
    assert result.modifiers == []
    assert result.description == "Fresh Bread (ΦΡΕΣΚΟ ΨΩΜΙ)"


def test_noise_and_modifiers_are_removed_before_matching(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("BIO Milk 1.99 €", rule_set=rule_set)

    assert result.normalized_name == "Milk"
    assert result.category == "Dairy"
    assert result.modifiers == ["ORGANIC"]
    assert result.description == "ORGANIC Milk"
    assert result.confidence == pytest.approx(0.85)


def test_repeated_qualifier_does_not_hide_the_product(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("BIO ORGANIC ΓΑΛΑ", rule_set=rule_set)

    assert result.modifiers == ["ORGANIC"]
    assert result.normalized_name == "Milk"
    assert result.category == "Dairy"


def test_store_name_as_printed_on_receipt(rule_set: NormalizationRuleSet) -> None:
    result = normalize_item_name("Whole Grain ΨΩΜΙ", "LIDL Nicosia", rule_set=rule_set)

    assert result.modifiers == ["Whole Grain"]
    assert result.normalized_name == "Bread"
    assert result.category == "Bakery"


def test_currency_context_strips_foreign_prices(rule_set: NormalizationRuleSet) -> None:
    assert normalize_item_name("ΓΑΛΑ 1.20 $", rule_set=rule_set).normalized_name == "Milk 1.20 $"
    assert normalize_item_name("ΓΑΛΑ 1.20 $", rule_set=rule_set, currency="USD").normalized_name == "Milk"


@pytest.mark.parametrize(
    ("name", "store"),
    [
        ("ΜΠΑΝΑΝΕΣ", "ALPHAMEGA"),
        ("organic ΜΗΛΑ", None),
        ("ΚΟΥΝΟΥΠΙΔΙ", None),
        ("bananas", None),
        ("x", "LIDL"),
        ("2 x 3 pcs", None),
        ("(only a note)", None),
        ("$$$ 1.00 €", "ALPHAMEGA"),
        ("Ω", None),
    ],
)
def test_confidence_stays_in_range(rule_set: NormalizationRuleSet, name: str, store: str | None) -> None:
    confidence = normalize_item_name(name, store, rule_set=rule_set).confidence
    assert 0.0 <= confidence <= 0.99


@pytest.mark.parametrize(
    ("name", "store"),
    [
        ("μπανάνες", None),
        ("organic ΜΗΛΑ", None),
        ("BIO Milk 1.99 €", None),
        ("ΤΥΡΙ", "LIDL"),
        ("ΨΩΜΙ", "LIDL"),
        ("χαρτί", None),
        ("Toilet Paper", None),
    ],
)
def test_canonical_names_are_fixed_points(rule_set: NormalizationRuleSet, name: str, store: str | None) -> None:
    first = normalize_item_name(name, store, rule_set=rule_set).normalized_name
    second = normalize_item_name(first, rule_set=rule_set).normalized_name
    assert second == first


def _shop_rule_set(store_replacement: str) -> NormalizationRuleSet:
    return build_name_rule_set(
        [
            {
                "default_rules": [{"pattern": "milk", "replacement": "Milk", "category": "Dairy"}],
                "stores": [
                    {
                        "key": "SHOP",
                        "rules": [{"pattern": "milk", "replacement": store_replacement, "category": "Shop Dairy"}],
                    }
                ],
            }
        ]
    )


def test_store_rule_beats_conflicting_default_rule() -> None:
    result = normalize_item_name("milk", "SHOP", rule_set=_shop_rule_set("Shop Milk"))

    assert result.normalized_name == "Shop Milk"
    assert result.category == "Shop Dairy"


def test_store_rule_that_leaves_name_unchanged_falls_back_to_default_rules() -> None:
    rule_set = _shop_rule_set("milk")

    # The store rule matched, but default rules still run because the name did not change.
    assert apply_rules("milk", "SHOP", rule_set).category == "Shop Dairy"
    assert normalize_item_name("milk", "SHOP", rule_set=rule_set).category == "Dairy"


def test_category_match_scores_higher_than_uncategorized_match() -> None:
    with_category = build_name_rule_set(
        [{"default_rules": [{"pattern": "kiwi", "replacement": "Kiwi", "category": "Fruits"}]}]
    )
    without_category = build_name_rule_set([{"default_rules": [{"pattern": "kiwi", "replacement": "Kiwi"}]}])

    categorized = normalize_item_name("kiwi gold", rule_set=with_category)
    uncategorized = normalize_item_name("kiwi gold", rule_set=without_category)

    assert categorized.normalized_name == uncategorized.normalized_name
    assert categorized.confidence > uncategorized.confidence
