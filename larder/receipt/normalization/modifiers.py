"""Qualifier extraction (organic, fresh, gluten free, ...)."""

from __future__ import annotations

import re
from collections.abc import Sequence

from larder.receipt.normalization.preprocess import collapse_whitespace


def _remove_all(pattern: re.Pattern[str], text: str) -> str:
    # Repeat until stable: a removal can join two halves into a new match.
    while True:
        text, removed = pattern.subn("", text)
        if not removed:
            return text


def extract_modifiers(name: str, patterns: Sequence[re.Pattern[str]]) -> tuple[list[str], str]:
    """Pull qualifier terms out of ``name``.

    Patterns are tried one after another against the progressively cleaned
    name. Each matching pattern contributes its first match as the modifier,
    and every occurrence of the pattern is removed from the clean name.

    Returns:
        Tuple of (modifiers in pattern order, clean name).
    """
    modifiers: list[str] = []
    clean_name = name

    for pattern in patterns:
        match = pattern.search(clean_name)
        if match:
            modifiers.append(match.group(0))
            clean_name = _remove_all(pattern, clean_name).strip()

    return modifiers, collapse_whitespace(clean_name)
