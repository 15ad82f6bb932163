"""Text processing utilities.

- frontmatter: YAML front-matter parsing and formatting
- markdown: heading sections and inline key-value metadata lines
"""
from __future__ import annotations

from .frontmatter import (
    FRONTMATTER_PATTERN,
    ParsedDocument,
    format_frontmatter,
    has_frontmatter,
    parse_frontmatter,
)
from .markdown import (
    Section,
    find_section,
    parse_key_value_lines,
    parse_title,
    replace_section,
    section_body,
)

__all__ = [
    "FRONTMATTER_PATTERN",
    "ParsedDocument",
    "format_frontmatter",
    "has_frontmatter",
    "parse_frontmatter",
    "Section",
    "find_section",
    "parse_key_value_lines",
    "parse_title",
    "replace_section",
    "section_body",
]
