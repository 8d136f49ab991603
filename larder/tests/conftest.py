"""Shared pytest fixtures for larder tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from larder.receipt.normalization import NormalizationRuleSet
from larder.runtime import load_name_rule_set
from larder.runtime import paths as runtime_paths


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Isolated project root with no config/name_rules.toml."""
    monkeypatch.setattr(runtime_paths, "_paths", runtime_paths.ProjectPaths(root=tmp_path))
    load_name_rule_set.cache_clear()
    yield tmp_path
    load_name_rule_set.cache_clear()


@pytest.fixture
def rule_set(project_root: Path) -> NormalizationRuleSet:
    """Bundled default rule tables."""
    return load_name_rule_set()
