"""Value types for receipt item name normalization."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class NormalizationRule:
    """A single pattern -> canonical name mapping.

    String patterns match by substring containment and replace the whole name.
    Compiled patterns replace their first match, honoring ``$1``-style
    back-references in ``replacement``.
    """

    pattern: re.Pattern[str] | str
    replacement: str
    category: str | None = None


@dataclass(frozen=True)
class RuleMatch:
    """Outcome of one rule-matching pass over a name."""

    normalized_name: str
    category: str | None = None
    description: str | None = None
    matched: bool = False


@dataclass
class NormalizationResult:
    """Normalized view of one receipt item name."""

    normalized_name: str
    original_name: str
    category: str | None = None
    description: str | None = None
    modifiers: list[str] = field(default_factory=list)
    confidence: float = 0.0

    @classmethod
    def empty(cls) -> NormalizationResult:
        return cls(normalized_name="", original_name="")
