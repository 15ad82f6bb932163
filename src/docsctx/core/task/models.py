"""
Data models for task metadata.

This module defines:
- TaskMetadata: the metadata record attached to a task document
- MetadataGap: a missing or unrecognized field and the default used instead
- MetadataVocabulary: the accepted values, aliases and defaults per field
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field, replace
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Tuple

# Fields whose values come from a closed vocabulary.
ENUM_FIELDS = ("type", "context", "priority")


@dataclass(frozen=True)
class TaskMetadata:
    """Metadata attached to a task document.

    Attributes:
        type: feature|bug|deploy|refactor|test|chore|documentation
        context: api|mobile|web|desktop|ai|mcp|fullstack
        stack: Optional free-text stack identifier (e.g. "nestjs")
        description: Free text describing the task
        priority: low|medium|high|critical
        title: Optional task title
        id: Optional task identifier
    """

    type: Optional[str] = None
    context: Optional[str] = None
    stack: Optional[str] = None
    description: str = ""
    priority: Optional[str] = None
    title: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TaskMetadata":
        """Build raw (un-normalised) metadata from a mapping.

        Keys match case-insensitively; unknown keys are ignored and
        non-string scalar values are converted with ``str``.
        """
        lowered = {str(k).strip().lower(): v for k, v in (data or {}).items()}

        def _text(key: str) -> Optional[str]:
            value = lowered.get(key)
            if value is None:
                return None
            return str(value)

        return cls(
            type=_text("type"),
            context=_text("context"),
            stack=_text("stack"),
            description=_text("description") or "",
            priority=_text("priority"),
            title=_text("title"),
            id=_text("id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MetadataGap:
    """A metadata field that was missing or unrecognized."""

    field: str
    reason: str  # 'missing' or 'unrecognized'
    value: Optional[str] = None
    default: Optional[str] = None

    def describe(self) -> str:
        if self.reason == "missing":
            if self.default:
                return f"{self.field} is missing; using default '{self.default}'"
            return f"{self.field} is missing"
        return f"{self.field} '{self.value}' is not recognized; using default '{self.default}'"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MetadataVocabulary:
    """Accepted values, aliases and defaults for the enumerated fields."""

    types: Tuple[str, ...]
    contexts: Tuple[str, ...]
    priorities: Tuple[str, ...]
    defaults: Mapping[str, str] = field(default_factory=dict)
    aliases: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "MetadataVocabulary":
        section = config.get("metadata") if isinstance(config.get("metadata"), dict) else {}

        def _values(key: str) -> Tuple[str, ...]:
            return tuple(_norm(v) for v in (section.get(key) or []) if _norm(v))

        aliases: Dict[str, Dict[str, str]] = {}
        for fname, table in (section.get("aliases") or {}).items():
            if isinstance(table, dict):
                aliases[str(fname)] = {_norm(k): _norm(v) for k, v in table.items()}

        return cls(
            types=_values("types"),
            contexts=_values("contexts"),
            priorities=_values("priorities"),
            defaults={str(k): _norm(v) for k, v in (section.get("defaults") or {}).items()},
            aliases=aliases,
        )

    def allowed(self, field_name: str) -> Tuple[str, ...]:
        return {
            "type": self.types,
            "context": self.contexts,
            "priority": self.priorities,
        }[field_name]

    def resolve(self, field_name: str, raw: Optional[str]) -> Tuple[str, Optional[MetadataGap]]:
        """Normalise one enumerated field, substituting its default when needed."""
        default = self.defaults.get(field_name, "")
        value = _norm(raw)
        if not value:
            return default, MetadataGap(field=field_name, reason="missing", default=default)
        value = self.aliases.get(field_name, {}).get(value, value)
        if value in self.allowed(field_name):
            return value, None
        return default, MetadataGap(field=field_name, reason="unrecognized", value=raw, default=default)


def _norm(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def normalize_stack(raw: Optional[str], prefix: str = "stacks/") -> Optional[str]:
    """Turn a free-text stack name into a path-safe identifier.

    Examples:
        >>> normalize_stack(" React Native ")
        'react-native'
        >>> normalize_stack("stacks/nestjs")
        'nestjs'
        >>> normalize_stack("   ") is None
        True
        >>> normalize_stack("../../etc/passwd")
        'etc/passwd'
    """
    value = _norm(raw)
    if prefix and value.startswith(prefix):
        value = value[len(prefix):]
    value = re.sub(r"\s+", "-", value)
    # Stack rules must stay under the rules directory.
    segments = [s.strip("-") for s in value.replace("\\", "/").split("/")]
    value = "/".join(s for s in segments if s and s not in (".", ".."))
    return value or None


def normalize_metadata(
    metadata: TaskMetadata,
    vocabulary: Optional[MetadataVocabulary] = None,
    *,
    stack_prefix: str = "stacks/",
) -> Tuple[TaskMetadata, List[MetadataGap]]:
    """Return normalised metadata plus the gaps that were filled with defaults.

    Enumerated fields are lower-cased, aliases resolved and unknown or
    missing values replaced by their defaults. Never raises on bad values.
    """
    vocab = vocabulary or default_vocabulary()
    gaps: List[MetadataGap] = []
    resolved: Dict[str, str] = {}
    for fname in ENUM_FIELDS:
        value, gap = vocab.resolve(fname, getattr(metadata, fname))
        resolved[fname] = value
        if gap is not None:
            gaps.append(gap)

    description = (metadata.description or "").strip()
    if not description:
        gaps.append(MetadataGap(field="description", reason="missing"))

    normalized = replace(
        metadata,
        type=resolved["type"],
        context=resolved["context"],
        priority=resolved["priority"],
        stack=normalize_stack(metadata.stack, stack_prefix),
        description=description,
        title=(metadata.title or "").strip() or None,
        id=(metadata.id or "").strip() or None,
    )
    return normalized, gaps


@lru_cache(maxsize=1)
def default_vocabulary() -> MetadataVocabulary:
    """Vocabulary built from the bundled defaults (cached)."""
    from docsctx.core.config.manager import load_bundled_config

    return MetadataVocabulary.from_config(load_bundled_config())


__all__ = [
    "TaskMetadata",
    "MetadataGap",
    "MetadataVocabulary",
    "normalize_metadata",
    "normalize_stack",
    "default_vocabulary",
]
