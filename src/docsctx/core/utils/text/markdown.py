"""Markdown helpers for task documents.

Task documents are plain Markdown. Besides YAML front-matter, metadata may be
written as inline key-value lines, which this module recognises in the common
shapes authors use:

    type: bug
    - **Context**: web
    **Stack:** react

Heading helpers locate and replace whole sections (a heading plus everything
up to the next heading of the same or higher level). Fenced code blocks are
skipped by both.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<title>.+?)\s*#*\s*$")

KEY_VALUE_PATTERN = re.compile(
    r"^\s*(?:[-*+]\s+)?(?:\*\*|__)?"
    r"(?P<key>[A-Za-z][A-Za-z _-]*?)"
    r"(?::(?:\*\*|__)|(?:\*\*|__)?:)"
    r"\s*(?P<value>.*?)\s*$"
)

_FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")


@dataclass(frozen=True)
class Section:
    """A heading section located in a document.

    ``start``/``end`` are line indexes: ``lines[start]`` is the heading and
    ``lines[end]`` is the first line after the section.
    """

    title: str
    level: int
    start: int
    end: int


def _iter_unfenced(lines: List[str]) -> Iterator[Tuple[int, str]]:
    in_fence = False
    for idx, line in enumerate(lines):
        if _FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if not in_fence:
            yield idx, line


def _iter_headings(lines: List[str]) -> Iterator[Tuple[int, int, str]]:
    for idx, line in _iter_unfenced(lines):
        m = HEADING_PATTERN.match(line)
        if m:
            yield idx, len(m.group("hashes")), m.group("title").strip()


def parse_title(content: str) -> Optional[str]:
    """Return the text of the first level-1 heading, if any."""
    for _, level, title in _iter_headings(content.splitlines()):
        if level == 1:
            return title
    return None


def find_section(content: str, title: str) -> Optional[Section]:
    """Locate the first section whose heading matches ``title`` (case-insensitive)."""
    lines = content.splitlines()
    wanted = title.strip().lower()
    headings = list(_iter_headings(lines))
    for pos, (idx, level, heading) in enumerate(headings):
        if heading.lower() != wanted:
            continue
        end = len(lines)
        for next_idx, next_level, _ in headings[pos + 1:]:
            if next_level <= level:
                end = next_idx
                break
        return Section(title=heading, level=level, start=idx, end=end)
    return None


def section_body(content: str, title: str) -> Optional[str]:
    """Return the stripped text under heading ``title`` or None when absent."""
    section = find_section(content, title)
    if section is None:
        return None
    lines = content.splitlines()
    return "\n".join(lines[section.start + 1:section.end]).strip()


def replace_section(content: str, title: str, replacement: str) -> str:
    """Replace the section headed ``title`` with ``replacement``.

    When the section does not exist the replacement is appended, separated
    from the existing content by one blank line.
    """
    block = replacement.strip("\n")
    section = find_section(content, title)
    if section is None:
        base = content.rstrip("\n")
        if not base:
            return block + "\n"
        return f"{base}\n\n{block}\n"

    lines = content.splitlines()
    before = _trim_blank(lines[:section.start], trailing=True)
    after = _trim_blank(lines[section.end:], trailing=False)
    # One blank line on each side of the block.
    parts = (before + [""] if before else []) + block.splitlines()
    if after:
        parts += [""] + after
    return "\n".join(parts).rstrip("\n") + "\n"


def _trim_blank(lines: List[str], *, trailing: bool) -> List[str]:
    out = list(lines)
    idx = -1 if trailing else 0
    while out and not out[idx].strip():
        out.pop(idx)
    return out


def parse_key_value_lines(content: str, keys: Iterable[str]) -> Dict[str, str]:
    """Collect ``key: value`` lines for the given ``keys``.

    Keys match case-insensitively; the first occurrence of a key wins.
    Surrounding backticks and quotes are stripped from values and empty
    values are ignored.
    """
    wanted = {k.lower() for k in keys}
    found: Dict[str, str] = {}
    for _, line in _iter_unfenced(content.splitlines()):
        m = KEY_VALUE_PATTERN.match(line)
        if not m:
            continue
        key = m.group("key").strip().lower()
        if key not in wanted or key in found:
            continue
        value = m.group("value").strip().strip("`\"'").strip()
        if value:
            found[key] = value
    return found


__all__ = [
    "Section",
    "find_section",
    "section_body",
    "replace_section",
    "parse_key_value_lines",
    "parse_title",
]
