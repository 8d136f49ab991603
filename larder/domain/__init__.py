"""Core domain models for larder.

This module provides the value types used throughout the project:
- NormalizationRule, RuleMatch, NormalizationResult: item name normalization
- Receipt, ReceiptItem: extracted receipt models

Usage:
    from larder.domain import NormalizationResult, Receipt, ReceiptItem
"""

from larder.domain.item_normalization import NormalizationResult, NormalizationRule, RuleMatch
from larder.domain.receipt import LOW_CONFIDENCE_THRESHOLD, Receipt, ReceiptItem

__all__ = [
    "NormalizationRule",
    "NormalizationResult",
    "RuleMatch",
    "LOW_CONFIDENCE_THRESHOLD",
    "Receipt",
    "ReceiptItem",
]
