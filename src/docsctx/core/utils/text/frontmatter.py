"""YAML front-matter parsing utilities.

Task documents may carry their metadata as YAML front-matter delimited by
'---' markers at the start of the file.

Example:
    ```yaml
    ---
    type: bug
    context: web
    stack: react
    ---

    # Submit button not responding
    ```
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict

import yaml


# Matches content between the first pair of '---' markers at the start of a file
FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---\s*(?:\n|$)",
    re.DOTALL,
)


@dataclass
class ParsedDocument:
    """Result of parsing a document with YAML front-matter.

    Attributes:
        frontmatter: Parsed YAML front-matter as a dictionary
        content: The markdown content after the front-matter
        raw_frontmatter: The raw YAML string
    """
    frontmatter: Dict[str, Any]
    content: str
    raw_frontmatter: str


def parse_frontmatter(content: str) -> ParsedDocument:
    """Parse YAML front-matter from markdown content.

    Returns an empty mapping and the full content when no front-matter is
    present.

    Raises:
        ValueError: If the front-matter YAML is invalid or not a mapping

    Example:
        >>> doc = parse_frontmatter('''---
        ... type: bug
        ... ---
        ...
        ... # Title
        ... ''')
        >>> doc.frontmatter['type']
        'bug'
        >>> doc.content.strip()
        '# Title'
    """
    match = FRONTMATTER_PATTERN.match(content)

    if not match:
        return ParsedDocument(frontmatter={}, content=content, raw_frontmatter="")

    raw_yaml = match.group(1)
    remaining_content = content[match.end():]

    try:
        parsed = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in frontmatter: {e}") from e
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Frontmatter must be a YAML mapping, got {type(parsed).__name__}")

    return ParsedDocument(
        frontmatter=parsed,
        content=remaining_content,
        raw_frontmatter=raw_yaml,
    )


def format_frontmatter(data: Dict[str, Any], *, exclude_none: bool = True) -> str:
    """Format a dictionary as YAML front-matter wrapped in '---' delimiters.

    Example:
        >>> print(format_frontmatter({'type': 'bug', 'context': 'web'}))
        ---
        type: bug
        context: web
        ---
        <BLANKLINE>
    """
    if exclude_none:
        data = {k: v for k, v in data.items() if v is not None}

    yaml_content = yaml.safe_dump(
        data,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )

    return f"---\n{yaml_content}---\n"


def has_frontmatter(content: str) -> bool:
    """Check if content starts with YAML front-matter."""
    return bool(FRONTMATTER_PATTERN.match(content))


__all__ = [
    "ParsedDocument",
    "parse_frontmatter",
    "format_frontmatter",
    "has_frontmatter",
    "FRONTMATTER_PATTERN",
]
