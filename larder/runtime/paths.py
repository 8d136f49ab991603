"""Centralized path management for larder.

This module provides a single source of truth for project and package
paths, so rule files resolve the same way regardless of caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Project root: LARDER_HOME if set, otherwise the working directory."""
    env_root = os.environ.get("LARDER_HOME", "").strip()
    return Path(env_root).expanduser() if env_root else Path.cwd()


@dataclass
class ProjectPaths:
    """Container for project-related paths.

    Project paths hang off ``root``; package paths are fixed to the
    installed larder package.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Package paths ---
    @property
    def src(self) -> Path:
        """Installed larder package directory."""
        return Path(__file__).resolve().parents[1]

    @property
    def default_name_rules(self) -> Path:
        """Bundled default item name normalization rules."""
        return self.src / "receipt" / "rules" / "default_name_rules.toml"

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def name_rules(self) -> Path:
        """Project-level normalization rules, tried before the bundled defaults."""
        return self.config / "name_rules.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def set_project_root(root: str | Path) -> None:
    """Point path resolution at a different project root.

    Args:
        root: New project root directory.
    """
    global _paths
    _paths = ProjectPaths(root=Path(root))
