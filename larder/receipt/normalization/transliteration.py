"""Greek to Latin transliteration for names no rule could translate."""

import re

_GREEK = re.compile(r"[\u0370-\u03FF]")

# Unmapped characters pass through unchanged.
GREEK_TO_LATIN: dict[str, str] = {
    "α": "a", "β": "b", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "i", "θ": "th",
    "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "x", "ο": "o", "π": "p",
    "ρ": "r", "σ": "s", "ς": "s", "τ": "t", "υ": "y", "φ": "f", "χ": "ch", "ψ": "ps",
    "ω": "o",
    "Α": "A", "Β": "B", "Γ": "G", "Δ": "D", "Ε": "E", "Ζ": "Z", "Η": "I", "Θ": "TH",
    "Ι": "I", "Κ": "K", "Λ": "L", "Μ": "M", "Ν": "N", "Ξ": "X", "Ο": "O", "Π": "P",
    "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y", "Φ": "F", "Χ": "CH", "Ψ": "PS", "Ω": "O",
    "ά": "a", "έ": "e", "ί": "i", "ή": "i", "ό": "o", "ύ": "y", "ώ": "o",
    "Ά": "A", "Έ": "E", "Ί": "I", "Ή": "I", "Ό": "O", "Ύ": "Y", "Ώ": "O",
    "ϊ": "i", "ϋ": "y", "ΐ": "i", "ΰ": "y", "Ϊ": "I", "Ϋ": "Y",
}  # fmt: skip


def contains_greek_characters(text: str) -> bool:
    """True if any character lies in the Greek and Coptic block."""
    return bool(_GREEK.search(text))


def transliterate_greek_to_latin(text: str) -> str:
    if not text:
        return ""
    return "".join(GREEK_TO_LATIN.get(char, char) for char in text)
