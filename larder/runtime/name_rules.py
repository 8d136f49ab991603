"""Runtime loader for item name normalization rules."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from larder.receipt.normalization.rules import NormalizationRuleSet, build_name_rule_set
from larder.runtime.logging import get_logger
from larder.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_name_rule_set(rule_paths: tuple[str, ...] | None = None) -> NormalizationRuleSet:
    """
    Load normalization rules into an immutable rule set.

    The bundled defaults are always loaded first. With no ``rule_paths`` the
    project's config/name_rules.toml is layered on top when it exists;
    otherwise each given path is layered on top in order and must exist.
    Later layers take priority.

    Raises:
        FileNotFoundError: A requested rule file does not exist.
        ValueError: A rule file contains an invalid rule or pattern.
    """
    p = get_paths()

    layer_files = [p.default_name_rules]
    if rule_paths is None:
        if p.name_rules.exists():
            layer_files.append(p.name_rules)
        else:
            logger.debug("No project rules at %s, using bundled defaults", p.name_rules)
    else:
        for raw_path in rule_paths:
            path = Path(raw_path)
            if not path.exists():
                raise FileNotFoundError(f"Name rules file not found: {path}")
            layer_files.append(path)

    configs = [_load_toml(path) for path in layer_files]
    try:
        rule_set = build_name_rule_set(configs)
    except ValueError as exc:
        raise ValueError(f"Invalid name rules in {', '.join(str(f) for f in layer_files)}: {exc}") from exc

    logger.debug(
        "Loaded %d default rules, %d store rule sets, %d modifiers from %d file(s)",
        len(rule_set.default_rules),
        len(rule_set.store_rules),
        len(rule_set.modifier_patterns),
        len(layer_files),
    )
    return rule_set
