from __future__ import annotations

import pytest

from docsctx.core.utils.text import format_frontmatter, has_frontmatter, parse_frontmatter


def test_parse_frontmatter():
    doc = parse_frontmatter("---\ntype: bug\nstack: react\n---\n\n# Title\n")

    assert doc.frontmatter == {"type": "bug", "stack": "react"}
    assert doc.content.strip() == "# Title"
    assert doc.raw_frontmatter == "type: bug\nstack: react"


def test_no_frontmatter():
    doc = parse_frontmatter("# Title\n")

    assert doc.frontmatter == {}
    assert doc.content == "# Title\n"
    assert not has_frontmatter("# Title\n")


def test_empty_frontmatter_is_empty_mapping():
    assert parse_frontmatter("---\n\n---\nbody\n").frontmatter == {}


def test_invalid_frontmatter():
    with pytest.raises(ValueError, match="Invalid YAML"):
        parse_frontmatter("---\na: [b\n---\n")


def test_format_frontmatter_keeps_order_and_drops_none():
    text = format_frontmatter({"type": "bug", "stack": None, "context": "web"})

    assert text == "---\ntype: bug\ncontext: web\n---\n"
    assert has_frontmatter(text)
