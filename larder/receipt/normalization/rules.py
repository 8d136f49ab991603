"""Normalization rule tables and first-match rule dispatch.

Rule tables come from TOML layers (see ``rules/default_name_rules.toml``)
and are merged into one immutable ``NormalizationRuleSet``:

- store rules: tried first for a recognised store, in declaration order
- default rules: tried when no store rule applies, in declaration order
- modifier patterns: qualifier terms pulled out before rule matching

Order is part of the contract. The first matching rule wins, so more
specific patterns must be listed before general ones.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from larder.domain.item_normalization import NormalizationRule, RuleMatch

# JavaScript-style replacement tokens: $$, $&, $`, $' and $1..$99
_REPLACEMENT_TOKEN = re.compile(r"\$(\$|&|`|'|\d{1,2})")


@dataclass(frozen=True)
class NormalizationRuleSet:
    """Immutable, merged normalization rule tables."""

    default_rules: tuple[NormalizationRule, ...] = ()
    store_rules: Mapping[str, tuple[NormalizationRule, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    # Case-folded store key or alias -> store key
    store_aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    modifier_patterns: tuple[re.Pattern[str], ...] = ()


def _fold(value: str) -> str:
    return " ".join(value.split()).casefold()


def _compile_pattern(raw: Any, ignore_case: bool = True) -> re.Pattern[str]:
    """Compile a pattern from config, raising ValueError for bad input."""
    if not isinstance(raw, str) or not raw:
        raise ValueError(f"Pattern must be a non-empty string, got {raw!r}")
    try:
        return re.compile(raw, re.IGNORECASE if ignore_case else 0)
    except re.error as exc:
        raise ValueError(f"Invalid pattern {raw!r}: {exc}") from exc


def _build_rule(raw: Any) -> NormalizationRule:
    """Build one rule from a TOML table."""
    if not isinstance(raw, Mapping):
        raise ValueError(f"Rule must be a table, got {raw!r}")
    if "pattern" not in raw or "replacement" not in raw:
        raise ValueError(f"Rule requires 'pattern' and 'replacement': {dict(raw)!r}")

    replacement = str(raw["replacement"])
    category = str(raw.get("category") or "").strip() or None

    if bool(raw.get("regex", True)):
        pattern: re.Pattern[str] | str = _compile_pattern(raw["pattern"], bool(raw.get("ignore_case", True)))
    else:
        pattern = str(raw["pattern"])
        if not pattern:
            raise ValueError("Literal rule pattern must be non-empty")

    return NormalizationRule(pattern=pattern, replacement=replacement, category=category)


def _list_field(table: Mapping[str, Any], name: str, where: str) -> list[Any]:
    """Return ``table[name]`` as a list, raising ValueError for any other shape."""
    value = table.get(name, [])
    if not isinstance(value, list):
        raise ValueError(f"'{name}' in {where} must be an array, got {type(value).__name__}")
    return value


def build_name_rule_set(configs: Sequence[Mapping[str, Any]] | None = None) -> NormalizationRuleSet:
    """Merge TOML rule configs into one rule set.

    Later configs take priority: their default and store rules are tried
    before the rules of earlier configs. Modifier patterns are appended
    in config order.

    Raises:
        ValueError: A config, store or rule has the wrong shape, or a
            pattern does not compile.
    """
    default_rules: list[NormalizationRule] = []
    store_rules: dict[str, list[NormalizationRule]] = {}
    aliases: dict[str, str] = {}
    modifiers: list[re.Pattern[str]] = []

    for config in configs or ():
        if not isinstance(config, Mapping):
            raise ValueError(f"Rule config must be a table, got {type(config).__name__}")

        layer_defaults = [_build_rule(raw) for raw in _list_field(config, "default_rules", "rule config")]
        default_rules[:0] = layer_defaults

        for store in _list_field(config, "stores", "rule config"):
            if not isinstance(store, Mapping):
                raise ValueError(f"Store rule set must be a table, got {store!r}")
            key = str(store.get("key") or "").strip()
            if not key:
                raise ValueError(f"Store rule set requires a 'key': {dict(store)!r}")
            layer_rules = [_build_rule(raw) for raw in _list_field(store, "rules", f"store {key}")]
            store_rules[key] = layer_rules + store_rules.get(key, [])
            aliases[_fold(key)] = key
            for alias in _list_field(store, "aliases", f"store {key}"):
                alias_str = str(alias).strip()
                if alias_str:
                    aliases[_fold(alias_str)] = key

        for raw in _list_field(config, "modifiers", "rule config"):
            modifiers.append(_compile_pattern(raw))

    return NormalizationRuleSet(
        default_rules=tuple(default_rules),
        store_rules=MappingProxyType({key: tuple(rules) for key, rules in store_rules.items()}),
        store_aliases=MappingProxyType(aliases),
        modifier_patterns=tuple(modifiers),
    )


def expand_replacement(template: str, match: re.Match[str]) -> str:
    """Expand a JavaScript-style replacement template against a match."""
    group_count = match.re.groups
    source = match.string

    def _token(token: re.Match[str]) -> str:
        code = token.group(1)
        if code == "$":
            return "$"
        if code == "&":
            return match.group(0)
        if code == "`":
            return source[: match.start()]
        if code == "'":
            return source[match.end() :]
        if len(code) == 2 and 1 <= int(code) <= group_count:
            return match.group(int(code)) or ""
        index = int(code[0])
        if 1 <= index <= group_count:
            return (match.group(index) or "") + code[1:]
        # Unknown group references stay literal
        return token.group(0)

    return _REPLACEMENT_TOKEN.sub(_token, template)


def apply_rule(rule: NormalizationRule, name: str) -> str | None:
    """Return the rewritten name if ``rule`` matches, otherwise None."""
    if isinstance(rule.pattern, str):
        return rule.replacement if rule.pattern in name else None

    match = rule.pattern.search(name)
    if match is None:
        return None
    return name[: match.start()] + expand_replacement(rule.replacement, match) + name[match.end() :]


def _apply_rule_list(name: str, rules: Sequence[NormalizationRule]) -> RuleMatch:
    if not name:
        return RuleMatch(normalized_name="")

    for rule in rules:
        normalized = apply_rule(rule, name)
        if normalized is not None:
            return RuleMatch(
                normalized_name=normalized,
                category=rule.category,
                description=name if name != normalized else None,
                matched=True,
            )

    return RuleMatch(normalized_name=name)


def _contains_word_sequence(text: str, words: str) -> bool:
    return re.search(rf"(?<!\w){re.escape(words)}(?!\w)", text) is not None


def resolve_store_key(store_name: str | None, rule_set: NormalizationRuleSet) -> str | None:
    """Map a store name as printed on a receipt to a store rule key.

    Exact keys win; then keys and aliases are compared case-insensitively
    with the whole name, and finally looked for inside it as whole words
    ("LIDL Nicosia", "SUPERMARKET ΑΛΦΑΜΕΓΑ"). The longest contained alias wins.
    """
    if not store_name:
        return None
    if store_name in rule_set.store_rules:
        return store_name

    folded = _fold(store_name)
    if not folded:
        return None
    if folded in rule_set.store_aliases:
        return rule_set.store_aliases[folded]

    contained = [alias for alias in rule_set.store_aliases if _contains_word_sequence(folded, alias)]
    if not contained:
        return None
    return rule_set.store_aliases[max(contained, key=len)]


def apply_store_rules(name: str, store_name: str | None, rule_set: NormalizationRuleSet) -> RuleMatch:
    """Apply the rules of ``store_name`` only; unknown stores leave the name unchanged."""
    store_key = resolve_store_key(store_name, rule_set)
    if store_key is None:
        return RuleMatch(normalized_name=name)
    return _apply_rule_list(name, rule_set.store_rules.get(store_key, ()))


def apply_default_rules(name: str, rule_set: NormalizationRuleSet) -> RuleMatch:
    """Apply the store-independent rules."""
    return _apply_rule_list(name, rule_set.default_rules)


def apply_rules(name: str, store_name: str | None, rule_set: NormalizationRuleSet) -> RuleMatch:
    """Store rules first, default rules when no store rule matched."""
    store_match = apply_store_rules(name, store_name, rule_set)
    if store_match.matched:
        return store_match
    return apply_default_rules(name, rule_set)
