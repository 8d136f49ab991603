"""Receipt item name normalization.

Pure stages, no file I/O. Rule tables are passed in explicitly; load them
with ``larder.runtime.load_name_rule_set()``.
"""

from larder.receipt.normalization.modifiers import extract_modifiers
from larder.receipt.normalization.pipeline import normalize_item_name
from larder.receipt.normalization.preprocess import preprocess_item_name, standardize_currency
from larder.receipt.normalization.rules import (
    NormalizationRuleSet,
    apply_default_rules,
    apply_rules,
    apply_store_rules,
    build_name_rule_set,
    expand_replacement,
    resolve_store_key,
)
from larder.receipt.normalization.scoring import calculate_confidence, create_item_description
from larder.receipt.normalization.transliteration import (
    contains_greek_characters,
    transliterate_greek_to_latin,
)

__all__ = [
    "NormalizationRuleSet",
    "apply_default_rules",
    "apply_rules",
    "apply_store_rules",
    "build_name_rule_set",
    "calculate_confidence",
    "contains_greek_characters",
    "create_item_description",
    "expand_replacement",
    "extract_modifiers",
    "normalize_item_name",
    "preprocess_item_name",
    "resolve_store_key",
    "standardize_currency",
    "transliterate_greek_to_latin",
]
