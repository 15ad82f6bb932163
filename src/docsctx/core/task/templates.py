"""New task documents.

A generated task carries its metadata as front-matter, the description
under a "Description" heading (where the metadata parser reads it back),
the selected rules and an acceptance-criteria checklist.

The layout is a Jinja2 template. Projects may replace the bundled one with
``.docsctx/templates/task.md.j2``.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment

from docsctx.core.rules.catalog import RuleCatalog
from docsctx.core.rules.models import RuleSelection
from docsctx.core.rules.render import render_rules_section
from docsctx.core.utils.paths import get_project_config_dir
from docsctx.core.utils.text import format_frontmatter
from docsctx.data import get_data_path

from .metadata import DESCRIPTION_HEADING

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "task.md.j2"

DESCRIPTION_PLACEHOLDER = "<!-- Describe the task: expected behaviour, scope, constraints. -->"

DEFAULT_ACCEPTANCE = ("Tests cover the change", "Documentation is updated")


def slugify(text: str) -> str:
    """Lower-case, hyphen-separated file stem for a task title.

    Example:
        >>> slugify("Fix: Submit button not responding!")
        'fix-submit-button-not-responding'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", (text or "").lower()).strip("-")
    return slug or "task"


def load_task_template(repo_root: Optional[Path] = None) -> str:
    """Return the task template text, preferring the project's copy."""
    if repo_root is not None:
        candidate = get_project_config_dir(repo_root) / "templates" / TEMPLATE_NAME
        if candidate.is_file():
            logger.debug("Using project task template %s", candidate)
            return candidate.read_text(encoding="utf-8")
    return get_data_path("templates", TEMPLATE_NAME).read_text(encoding="utf-8")


def render_task_template(
    selection: RuleSelection,
    catalog: Optional[RuleCatalog] = None,
    *,
    acceptance: Optional[List[str]] = None,
    template: Optional[str] = None,
) -> str:
    meta = selection.metadata
    front = {
        "id": meta.id,
        "title": meta.title,
        "type": meta.type,
        "context": meta.context,
        "stack": meta.stack,
        "priority": meta.priority,
    }

    # Block tags sit on their own lines; trimming keeps them from leaving blank lines.
    env = Environment(trim_blocks=True, lstrip_blocks=True)
    tmpl = env.from_string(template if template is not None else load_task_template())
    rendered = tmpl.render(
        frontmatter=format_frontmatter(front),
        title=meta.title or "Untitled task",
        description_heading=DESCRIPTION_HEADING,
        description=meta.description or DESCRIPTION_PLACEHOLDER,
        rules_section=render_rules_section(selection, catalog).rstrip("\n"),
        criteria=list(acceptance or DEFAULT_ACCEPTANCE),
        metadata=meta,
        rules=selection.ordered,
    )
    return rendered.rstrip() + "\n"


__all__ = [
    "render_task_template",
    "load_task_template",
    "slugify",
    "DESCRIPTION_PLACEHOLDER",
]
