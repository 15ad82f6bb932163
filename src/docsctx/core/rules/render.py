"""Render selected rules as a Markdown "Rules to apply" section."""
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from docsctx.core.utils.text import replace_section

from .catalog import DEFAULT_HEADING, RuleCatalog
from .models import RuleSelection

RulesLike = Union[RuleSelection, Iterable[str]]


def _ordered_ids(rules: RulesLike) -> List[str]:
    if isinstance(rules, RuleSelection):
        return rules.ordered
    if isinstance(rules, (set, frozenset)):
        return sorted(rules)
    return list(dict.fromkeys(rules))


def render_rules_section(
    rules: RulesLike,
    catalog: Optional[RuleCatalog] = None,
    *,
    heading: Optional[str] = None,
    level: int = 2,
    with_reasons: bool = False,
) -> str:
    """Render ``rules`` as a Markdown section.

    Items are rule document paths when a catalog is given and bare rule ids
    otherwise. A RuleSelection keeps its selection order; a plain set is
    sorted.
    """
    title = heading or (catalog.heading if catalog else DEFAULT_HEADING)
    lines = [f"{'#' * level} {title}", ""]
    for rule_id in _ordered_ids(rules):
        target = str(catalog.relative_path(rule_id)) if catalog else rule_id
        line = f"- `{target}`"
        if with_reasons and isinstance(rules, RuleSelection):
            line += f" ({', '.join(rules.reasons[rule_id])})"
        lines.append(line)
    return "\n".join(lines) + "\n"


def inject_rules_section(document: str, section: str, *, heading: str = DEFAULT_HEADING) -> str:
    """Replace the document's ``heading`` section with ``section`` (append when absent)."""
    return replace_section(document, heading, section)


__all__ = ["render_rules_section", "inject_rules_section"]
