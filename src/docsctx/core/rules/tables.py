"""Rule selection tables.

The tables are plain lookups built from the ``rules`` and ``metadata``
configuration sections: the universal rule list, type and context tables,
keyword groups scanned against task descriptions, and the prefix used for
stack rules.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from docsctx.core.task.models import MetadataVocabulary, default_vocabulary


@dataclass(frozen=True)
class KeywordGroup:
    """A rule added when any of ``terms`` occurs in a task description."""

    name: str
    rule: str
    terms: Tuple[str, ...]

    def match(self, text: str) -> Optional[str]:
        """Return the first term found in ``text`` (case-insensitive), if any."""
        haystack = (text or "").lower()
        for term in self.terms:
            if term in haystack:
                return term
        return None


@dataclass(frozen=True)
class RuleTables:
    universal: Tuple[str, ...]
    by_type: Mapping[str, Tuple[str, ...]]
    by_context: Mapping[str, Tuple[str, ...]]
    keywords: Tuple[KeywordGroup, ...] = ()
    stack_prefix: str = "stacks/"
    vocabulary: MetadataVocabulary = field(default_factory=default_vocabulary)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RuleTables":
        section = config.get("rules") if isinstance(config.get("rules"), dict) else {}

        def _table(raw: Any) -> Dict[str, Tuple[str, ...]]:
            out: Dict[str, Tuple[str, ...]] = {}
            for key, ids in (raw or {}).items():
                out[str(key).strip().lower()] = _ids(ids)
            return out

        groups = []
        for name, entry in (section.get("keywords") or {}).items():
            if not isinstance(entry, dict):
                continue
            terms = tuple(str(t).strip().lower() for t in (entry.get("terms") or []) if str(t).strip())
            rule = str(entry.get("rule") or name).strip()
            if rule and terms:
                groups.append(KeywordGroup(name=str(name), rule=rule, terms=terms))

        return cls(
            universal=_ids(section.get("universal")),
            by_type=_table(section.get("byType")),
            by_context=_table(section.get("byContext")),
            keywords=tuple(groups),
            stack_prefix=str(section.get("stackPrefix", "stacks/")),
            vocabulary=MetadataVocabulary.from_config(config),
        )

    def stack_rule(self, stack: str) -> str:
        return f"{self.stack_prefix}{stack}"

    def all_rule_ids(self) -> FrozenSet[str]:
        """Every rule id the tables can produce, excluding stack rules."""
        ids = set(self.universal)
        for table in (self.by_type, self.by_context):
            for rule_ids in table.values():
                ids.update(rule_ids)
        ids.update(g.rule for g in self.keywords)
        return frozenset(ids)


def _ids(raw: Any) -> Tuple[str, ...]:
    """Clean a list of rule ids, dropping blanks and duplicates (order kept)."""
    seen: Dict[str, None] = {}
    for item in raw or []:
        rid = str(item).strip()
        if rid:
            seen.setdefault(rid, None)
    return tuple(seen)


@lru_cache(maxsize=1)
def default_tables() -> RuleTables:
    """Tables built from the bundled defaults (cached)."""
    from docsctx.core.config.manager import load_bundled_config

    return RuleTables.from_config(load_bundled_config())


__all__ = ["KeywordGroup", "RuleTables", "default_tables"]
