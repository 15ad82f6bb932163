"""Resolve rule ids to the rule documents that hold them.

A rule id maps to ``<directory>/<id><extension>`` under the project root,
so ``stacks/react`` resolves to ``.cursor/rules/stacks/react.mdc`` with the
bundled defaults.
"""
from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Any, Iterable, List, Mapping, Optional

from .models import RuleEntry
from .tables import RuleTables

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = ".cursor/rules"
DEFAULT_EXTENSION = ".mdc"
DEFAULT_HEADING = "Rules to apply"


class RuleCatalog:
    """Rule documents of one project."""

    def __init__(
        self,
        project_root: Path,
        directory: str = DEFAULT_DIRECTORY,
        extension: str = DEFAULT_EXTENSION,
        heading: str = DEFAULT_HEADING,
    ) -> None:
        self.project_root = Path(project_root)
        self.directory = directory
        self.extension = extension
        self.heading = heading

    @classmethod
    def from_config(cls, config: Mapping[str, Any], project_root: Path) -> "RuleCatalog":
        rules = config.get("rules") if isinstance(config.get("rules"), dict) else {}
        section = rules.get("catalog") if isinstance(rules.get("catalog"), dict) else {}
        return cls(
            project_root,
            directory=str(section.get("directory") or DEFAULT_DIRECTORY),
            extension=str(section.get("extension", DEFAULT_EXTENSION) or ""),
            heading=str(section.get("heading") or DEFAULT_HEADING),
        )

    @property
    def rules_dir(self) -> Path:
        return self.project_root / self.directory

    def relative_path(self, rule_id: str) -> PurePosixPath:
        """Path of the rule document relative to the project root."""
        return PurePosixPath(self.directory) / f"{rule_id}{self.extension}"

    def path_for(self, rule_id: str) -> Path:
        return self.project_root / Path(str(self.relative_path(rule_id)))

    def exists(self, rule_id: str) -> bool:
        return self.path_for(rule_id).is_file()

    def discover(self) -> List[str]:
        """Rule ids of the documents present under the rules directory."""
        root = self.rules_dir
        if not root.is_dir():
            return []
        ids: List[str] = []
        for path in sorted(root.rglob(f"*{self.extension}")):
            if not path.is_file():
                continue
            rel = path.relative_to(root).as_posix()
            if self.extension and rel.endswith(self.extension):
                rel = rel[: -len(self.extension)]
            ids.append(rel)
        return ids

    def known_rule_ids(self, tables: RuleTables) -> List[str]:
        """Rule ids referenced by ``tables`` plus those found on disk, sorted."""
        return sorted(set(tables.all_rule_ids()) | set(self.discover()))

    def entries(self, tables: Optional[RuleTables] = None, rule_ids: Optional[Iterable[str]] = None) -> List[RuleEntry]:
        if rule_ids is None:
            if tables is None:
                raise ValueError("entries() needs tables or rule_ids")
            rule_ids = self.known_rule_ids(tables)
        return [
            RuleEntry(id=rid, path=str(self.relative_path(rid)), exists=self.exists(rid))
            for rid in rule_ids
        ]

    def missing(self, rule_ids: Iterable[str]) -> List[str]:
        """Rule ids whose documents do not exist, in input order."""
        out = [rid for rid in rule_ids if not self.exists(rid)]
        for rid in out:
            logger.debug("Rule document missing for %s: %s", rid, self.relative_path(rid))
        return out


__all__ = ["RuleCatalog", "DEFAULT_DIRECTORY", "DEFAULT_EXTENSION", "DEFAULT_HEADING"]
