from __future__ import annotations

from docsctx.core.rules import RuleCatalog, explain_rules
from docsctx.core.task import parse_task_metadata
from docsctx.core.task.templates import DESCRIPTION_PLACEHOLDER, render_task_template, slugify


def test_slugify():
    assert slugify("Fix: Submit button not responding!") == "fix-submit-button-not-responding"
    assert slugify("???") == "task"


def test_template_reads_back_to_same_metadata(tmp_path):
    selection = explain_rules(
        {"title": "Fix login", "type": "bug", "context": "api", "description": "Users cannot log in"}
    )

    document = render_task_template(selection, RuleCatalog(tmp_path))
    parsed = parse_task_metadata(document)

    assert document.startswith("---\ntitle: Fix login\n")
    assert "- `.cursor/rules/bug-fix.mdc`" in document
    assert "## Acceptance Criteria" in document
    assert parsed.metadata.type == "bug"
    assert parsed.metadata.context == "api"
    assert parsed.metadata.title == "Fix login"
    assert parsed.metadata.description == "Users cannot log in"


def test_template_placeholder_description_stays_a_gap():
    document = render_task_template(explain_rules({"title": "Tidy up", "type": "chore"}))

    assert DESCRIPTION_PLACEHOLDER in document
    assert "description" in {g.field for g in parse_task_metadata(document).gaps}


def test_template_custom_acceptance_criteria():
    document = render_task_template(explain_rules({"title": "x"}), acceptance=["Ships behind a flag"])

    assert document.rstrip("\n").endswith("- [ ] Ships behind a flag")
    assert "Tests cover the change" not in document


def test_project_template_overrides_bundled(tmp_path):
    from docsctx.core.task.templates import load_task_template

    (tmp_path / ".docsctx" / "templates").mkdir(parents=True)
    (tmp_path / ".docsctx" / "templates" / "task.md.j2").write_text(
        "# {{ title }} [{{ metadata.type }}]\n\n{% for rule in rules %}\n* {{ rule }}\n{% endfor %}\n",
        encoding="utf-8",
    )

    template = load_task_template(tmp_path)
    document = render_task_template(explain_rules({"title": "Tidy", "type": "chore", "context": "ai"}), template=template)

    assert document == "# Tidy [chore]\n\n* code-quality\n* testing\n* documentation\n"


def test_bundled_template_without_project_copy(tmp_path):
    from docsctx.core.task.templates import load_task_template

    assert "{{ rules_section }}" in load_task_template(tmp_path)
