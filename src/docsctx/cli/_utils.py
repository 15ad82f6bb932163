"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable

from docsctx.core.config import ConfigManager
from docsctx.core.rules import RuleCatalog, RuleTables
from docsctx.core.task.models import MetadataGap
from docsctx.core.utils.paths import resolve_project_root

from ._output import OutputFormatter


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get repository root from ``--repo-root`` or auto-detect."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return resolve_project_root()


@dataclass(frozen=True)
class ProjectContext:
    """Configuration-derived objects a command works with."""

    repo_root: Path
    config: Dict[str, Any]
    tables: RuleTables
    catalog: RuleCatalog


def load_project_context(args: argparse.Namespace) -> ProjectContext:
    """Load config for the project and build rule tables and catalog.

    Raises:
        ConfigError: If configuration is invalid
    """
    repo_root = get_repo_root(args)
    config = ConfigManager(repo_root).load_config()
    return ProjectContext(
        repo_root=repo_root,
        config=config,
        tables=RuleTables.from_config(config),
        catalog=RuleCatalog.from_config(config, repo_root),
    )


def metadata_overrides(args: argparse.Namespace) -> Dict[str, str]:
    """Metadata values given as CLI flags (only those actually set)."""
    mapping = {
        "type": getattr(args, "task_type", None),
        "context": getattr(args, "task_context", None),
        "stack": getattr(args, "stack", None),
        "description": getattr(args, "description", None),
        "priority": getattr(args, "priority", None),
    }
    return {k: v for k, v in mapping.items() if v is not None}


def report_gaps(formatter: OutputFormatter, gaps: Iterable[MetadataGap]) -> None:
    """Ask the user to fill metadata gaps (stderr, text mode only)."""
    for gap in gaps:
        formatter.warning(f"{gap.describe()}. Add it to the task to make the selection explicit.")


__all__ = [
    "get_repo_root",
    "ProjectContext",
    "load_project_context",
    "metadata_overrides",
    "report_gaps",
]
