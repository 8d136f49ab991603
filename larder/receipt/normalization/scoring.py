"""Confidence scoring and review descriptions for normalized names."""

from __future__ import annotations

from collections.abc import Sequence

BASE_CONFIDENCE = 0.5
CATEGORY_BONUS = 0.3
WORD_OVERLAP_WEIGHT = 0.2
# Normalization is a heuristic; never report certainty.
MAX_CONFIDENCE = 0.99


def word_overlap(original_name: str, normalized_name: str) -> float:
    """Share of original words that contain, or are contained in, a normalized word."""
    original_words = original_name.lower().split()
    normalized_words = normalized_name.lower().split()

    common = [
        word
        for word in original_words
        if any(word in n_word or n_word in word for n_word in normalized_words)
    ]
    return len(common) / max(len(original_words), 1)


def calculate_confidence(original_name: str, normalized_name: str, has_category: bool) -> float:
    """Score how much to trust a normalization, in [0, 0.99].

    Args:
        original_name: Item name as printed on the receipt.
        normalized_name: Final normalized name.
        has_category: Whether rule matching assigned a category.
    """
    confidence = BASE_CONFIDENCE
    if has_category:
        confidence += CATEGORY_BONUS
    confidence += word_overlap(original_name, normalized_name) * WORD_OVERLAP_WEIGHT
    return min(confidence, MAX_CONFIDENCE)


def create_item_description(normalized_name: str, original_name: str, modifiers: Sequence[str]) -> str:
    """Build the review text: modifiers, normalized name, then the original when it was rewritten."""
    modifier_text = ", ".join(modifiers) + " " if modifiers else ""
    description = modifier_text + normalized_name

    normalized_lower = normalized_name.lower()
    original_lower = original_name.lower()
    if normalized_lower != original_lower and normalized_lower not in original_lower:
        return f"{description} ({original_name})"

    return description
