"""Tests for confidence scoring and review descriptions."""

from __future__ import annotations

import pytest

from larder.receipt.normalization import calculate_confidence, create_item_description
from larder.receipt.normalization.scoring import word_overlap


@pytest.mark.parametrize(
    ("original", "normalized", "has_category", "expected"),
    [
        ("ΜΠΑΝΑΝΕΣ", "Bananas", True, 0.8),
        ("xyz", "abc", False, 0.5),
        ("Organic Milk", "Milk", False, 0.6),
        ("BIO Milk 1.99 €", "Milk", True, 0.85),
        ("", "", False, 0.5),
    ],
)
def test_calculate_confidence(original: str, normalized: str, has_category: bool, expected: float) -> None:
    assert calculate_confidence(original, normalized, has_category) == pytest.approx(expected)


def test_confidence_is_capped_below_certainty() -> None:
    assert calculate_confidence("bananas", "Bananas", True) == 0.99


def test_category_raises_confidence() -> None:
    assert calculate_confidence("kiwi gold", "Kiwi", True) > calculate_confidence("kiwi gold", "Kiwi", False)


def test_word_overlap_counts_containment_both_ways() -> None:
    # "tomato" is contained in "tomatoes"; "cherries" contains "cherr"
    assert word_overlap("tomato cherries", "Tomatoes cherr") == 1.0
    assert word_overlap("tomato salad", "Tomatoes") == 0.5


@pytest.mark.parametrize(
    ("normalized", "original", "modifiers", "expected"),
    [
        ("Bananas", "ΜΠΑΝΑΝΕΣ", [], "Bananas (ΜΠΑΝΑΝΕΣ)"),
        ("Milk", "BIO Milk 1.99 €", ["ORGANIC"], "ORGANIC Milk"),
        ("Apples", "organic ΜΗΛΑ", ["organic"], "organic Apples (organic ΜΗΛΑ)"),
        ("milk", "MILK", [], "milk"),
        ("Milk", "organic fresh milk", ["organic", "fresh"], "organic, fresh Milk"),
        ("", "", [], ""),
    ],
)
def test_create_item_description(normalized: str, original: str, modifiers: list[str], expected: str) -> None:
    assert create_item_description(normalized, original, modifiers) == expected
