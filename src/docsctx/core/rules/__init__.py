"""
docsctx rule selection.

- tables: the lookup tables (universal, by type, by context, keywords, stack prefix)
- selector: select_rules / explain_rules over task metadata
- catalog: rule id → rule document resolution
- render: the "Rules to apply" Markdown section
"""
from __future__ import annotations

from .catalog import RuleCatalog
from .models import RuleEntry, RuleSelection
from .render import inject_rules_section, render_rules_section
from .selector import explain_rules, select_rules
from .tables import KeywordGroup, RuleTables, default_tables

__all__ = [
    "RuleCatalog",
    "RuleEntry",
    "RuleSelection",
    "inject_rules_section",
    "render_rules_section",
    "explain_rules",
    "select_rules",
    "KeywordGroup",
    "RuleTables",
    "default_tables",
]
