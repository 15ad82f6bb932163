"""
Data models for rule selection.

- RuleSelection: the selected rule ids with the reasons each was selected
- RuleEntry: a rule id resolved against the rule documents on disk
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple

from docsctx.core.task.models import MetadataGap, TaskMetadata


@dataclass(frozen=True)
class RuleSelection:
    """Rules selected for one task.

    ``reasons`` maps each rule id to the reasons it was selected, in the
    order the selection steps first reached it (universal, type, context,
    stack, keywords). ``rules`` is the plain set view.
    """

    metadata: TaskMetadata
    reasons: Mapping[str, Tuple[str, ...]]
    gaps: Tuple[MetadataGap, ...] = field(default=())

    @property
    def rules(self) -> FrozenSet[str]:
        return frozenset(self.reasons)

    @property
    def ordered(self) -> List[str]:
        return list(self.reasons)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self.reasons

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "rules": self.ordered,
            "reasons": {rid: list(why) for rid, why in self.reasons.items()},
            "gaps": [g.to_dict() for g in self.gaps],
        }


@dataclass(frozen=True)
class RuleEntry:
    """A rule id and the document it resolves to."""

    id: str
    path: str
    exists: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "path": self.path, "exists": self.exists}


__all__ = ["RuleSelection", "RuleEntry"]
