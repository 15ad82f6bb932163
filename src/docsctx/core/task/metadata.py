"""Read task metadata out of task documents.

Metadata is taken from YAML front-matter when present and from inline
``key: value`` lines in the body otherwise (lines inside the "Description"
section are not metadata); front-matter wins when both name the same key.
A task without a ``description`` field uses the text of its "Description"
section, and one without a ``title`` uses its first level-1 heading.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from docsctx.core.exceptions import TaskFileError
from docsctx.core.schemas.validation import validate_payload_safe
from docsctx.core.utils.text import (
    find_section,
    parse_frontmatter,
    parse_key_value_lines,
    parse_title,
    section_body,
)

from .models import MetadataGap, MetadataVocabulary, TaskMetadata, normalize_metadata

logger = logging.getLogger(__name__)

METADATA_KEYS = ("id", "title", "type", "context", "stack", "description", "priority")

DESCRIPTION_HEADING = "Description"

_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)


@dataclass(frozen=True)
class ParsedTask:
    """A task document with its normalised metadata.

    Attributes:
        metadata: Normalised metadata (defaults substituted)
        gaps: Fields that were missing or unrecognized
        raw: Metadata exactly as found in the document
        content: Full document text
        schema_errors: Shape problems reported by the task-metadata schema
        path: Source file, when loaded from disk
    """

    metadata: TaskMetadata
    gaps: Tuple[MetadataGap, ...]
    raw: Dict[str, Any]
    content: str
    schema_errors: Tuple[str, ...] = ()
    path: Optional[Path] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path) if self.path else None,
            "metadata": self.metadata.to_dict(),
            "raw": self.raw,
            "gaps": [g.to_dict() for g in self.gaps],
            "schemaErrors": list(self.schema_errors),
        }


def _without_section(content: str, title: str) -> str:
    section = find_section(content, title)
    if section is None:
        return content
    lines = content.splitlines()
    return "\n".join(lines[:section.start] + lines[section.end:])


def extract_raw_metadata(text: str) -> Dict[str, Any]:
    """Collect metadata from front-matter, inline lines and headings.

    Raises:
        ValueError: If the front-matter is not valid YAML or not a mapping
    """
    doc = parse_frontmatter(text)
    # Description prose may contain "Word: ..." sentences; only scan outside it.
    scanned = _without_section(doc.content, DESCRIPTION_HEADING)
    raw: Dict[str, Any] = dict(parse_key_value_lines(scanned, METADATA_KEYS))
    for key, value in doc.frontmatter.items():
        if str(key).strip().lower() in METADATA_KEYS:
            raw[str(key).strip().lower()] = value

    if not raw.get("description"):
        body = section_body(doc.content, DESCRIPTION_HEADING)
        if body:
            body = _HTML_COMMENT.sub("", body).strip()
            if body:
                raw["description"] = body
    if not raw.get("title"):
        title = parse_title(doc.content)
        if title:
            raw["title"] = title
    return raw


def parse_task_metadata(
    text: str,
    vocabulary: Optional[MetadataVocabulary] = None,
    *,
    path: Optional[Path] = None,
) -> ParsedTask:
    """Parse and normalise the metadata of a task document.

    Missing or unrecognized values never fail; they are replaced by defaults
    and listed in ``gaps``.

    Raises:
        TaskFileError: If the front-matter is malformed YAML
    """
    try:
        raw = extract_raw_metadata(text)
    except ValueError as exc:
        raise TaskFileError(
            f"Malformed front-matter{f' in {path}' if path else ''}: {exc}",
            context={"path": str(path) if path else None},
        ) from exc

    schema_errors = tuple(validate_payload_safe(raw, "task-metadata"))
    for message in schema_errors:
        logger.warning("Task metadata schema: %s", message)

    metadata, gaps = normalize_metadata(TaskMetadata.from_mapping(raw), vocabulary)
    for gap in gaps:
        logger.debug("Task metadata gap: %s", gap.describe())

    return ParsedTask(
        metadata=metadata,
        gaps=tuple(gaps),
        raw=raw,
        content=text,
        schema_errors=schema_errors,
        path=path,
    )


def load_task_file(path: Path, vocabulary: Optional[MetadataVocabulary] = None) -> ParsedTask:
    """Read ``path`` (UTF-8) and parse its metadata.

    Raises:
        TaskFileError: If the file cannot be read or its front-matter is malformed
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TaskFileError(f"Cannot read task file {p}: {exc}", context={"path": str(p)}) from exc
    return parse_task_metadata(text, vocabulary, path=p)


__all__ = [
    "METADATA_KEYS",
    "ParsedTask",
    "extract_raw_metadata",
    "parse_task_metadata",
    "load_task_file",
]
