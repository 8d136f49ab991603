"""Runtime infrastructure for larder.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Normalization rule loading via load_name_rule_set()

Usage:
    from larder.runtime import get_logger, get_paths, load_name_rule_set

    logger = get_logger(__name__)
    rule_set = load_name_rule_set()
"""

from larder.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from larder.runtime.name_rules import load_name_rule_set
from larder.runtime.paths import (
    ProjectPaths,
    get_paths,
    set_project_root,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_name_rule_set",
    # Paths
    "get_paths",
    "set_project_root",
    "ProjectPaths",
]
