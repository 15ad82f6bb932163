"""
Rule selection.

Maps task metadata to the set of rule ids that apply to the task:

1. the universal rules, always;
2. the rules registered for the task type;
3. the rules registered for the task context;
4. ``<stackPrefix><stack>`` when a stack is named;
5. the rule of every keyword group with a term in the description.

Missing or unrecognized type, context and priority values are replaced by
their defaults before the lookup, so selection never fails on bad metadata.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union

from docsctx.core.task.models import TaskMetadata, normalize_metadata

from .models import RuleSelection
from .tables import RuleTables, default_tables

logger = logging.getLogger(__name__)

MetadataLike = Union[TaskMetadata, Mapping[str, Any]]


def _coerce(metadata: Optional[MetadataLike]) -> TaskMetadata:
    if metadata is None:
        return TaskMetadata()
    if isinstance(metadata, TaskMetadata):
        return metadata
    return TaskMetadata.from_mapping(metadata)


def explain_rules(metadata: Optional[MetadataLike], tables: Optional[RuleTables] = None) -> RuleSelection:
    """Select rules for ``metadata`` and record why each rule was selected."""
    tables = tables or default_tables()
    meta, gaps = normalize_metadata(_coerce(metadata), tables.vocabulary, stack_prefix=tables.stack_prefix)

    reasons: Dict[str, List[str]] = {}

    def _add(rule_id: str, reason: str) -> None:
        reasons.setdefault(rule_id, []).append(reason)

    for rule_id in tables.universal:
        _add(rule_id, "universal")
    for rule_id in tables.by_type.get(meta.type or "", ()):
        _add(rule_id, f"type:{meta.type}")
    for rule_id in tables.by_context.get(meta.context or "", ()):
        _add(rule_id, f"context:{meta.context}")
    if meta.stack:
        _add(tables.stack_rule(meta.stack), f"stack:{meta.stack}")
    for group in tables.keywords:
        term = group.match(meta.description)
        if term is not None:
            _add(group.rule, f"keyword:{group.name}:{term}")

    logger.debug(
        "Selected %d rules for type=%s context=%s stack=%s",
        len(reasons),
        meta.type,
        meta.context,
        meta.stack,
    )
    return RuleSelection(
        metadata=meta,
        reasons={rid: tuple(why) for rid, why in reasons.items()},
        gaps=tuple(gaps),
    )


def select_rules(metadata: Optional[MetadataLike], tables: Optional[RuleTables] = None) -> FrozenSet[str]:
    """Return the set of rule ids that apply to ``metadata``.

    Pure and deterministic: identical input always yields an identical set,
    and the universal rules are always included.

    Example:
        >>> sorted(select_rules({"type": "bug", "context": "api"}))
        ['api-development', 'bug-fix', 'code-quality', 'documentation', 'security', 'testing']
    """
    return explain_rules(metadata, tables).rules


__all__ = ["select_rules", "explain_rules", "MetadataLike"]
