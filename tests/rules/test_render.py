from __future__ import annotations

from docsctx.core.rules import RuleCatalog, explain_rules, inject_rules_section, render_rules_section


def test_render_plain_set_is_sorted():
    assert render_rules_section({"testing", "bug-fix"}) == "## Rules to apply\n\n- `bug-fix`\n- `testing`\n"


def test_render_selection_with_catalog_paths(tmp_path):
    selection = explain_rules({"type": "chore", "context": "desktop"})

    text = render_rules_section(selection, RuleCatalog(tmp_path))

    assert text.splitlines() == [
        "## Rules to apply",
        "",
        "- `.cursor/rules/code-quality.mdc`",
        "- `.cursor/rules/testing.mdc`",
        "- `.cursor/rules/documentation.mdc`",
    ]


def test_render_with_reasons():
    selection = explain_rules({"type": "chore", "context": "desktop", "stack": "electron"})

    text = render_rules_section(selection, with_reasons=True, heading="Rules", level=3)

    assert text.startswith("### Rules\n\n")
    assert "- `stacks/electron` (stack:electron)" in text


def test_inject_appends_missing_section():
    doc = "# Task\n\nbody\n"

    out = inject_rules_section(doc, "## Rules to apply\n\n- `testing`\n")

    assert out == "# Task\n\nbody\n\n## Rules to apply\n\n- `testing`\n"


def test_inject_replaces_existing_section_and_keeps_following_ones():
    doc = "# Task\n\n## Rules to apply\n\n- `old`\n\n## Notes\n\nkeep\n"

    out = inject_rules_section(doc, "## Rules to apply\n\n- `new`\n")

    assert out == "# Task\n\n## Rules to apply\n\n- `new`\n\n## Notes\n\nkeep\n"
    assert out.count("## Rules to apply") == 1


def test_inject_is_idempotent():
    section = "## Rules to apply\n\n- `a`\n"
    once = inject_rules_section("# Task\n", section)

    assert inject_rules_section(once, section) == once
