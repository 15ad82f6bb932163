"""Task documents and their metadata."""
from __future__ import annotations

from .metadata import METADATA_KEYS, ParsedTask, extract_raw_metadata, load_task_file, parse_task_metadata
from .models import (
    MetadataGap,
    MetadataVocabulary,
    TaskMetadata,
    default_vocabulary,
    normalize_metadata,
    normalize_stack,
)

__all__ = [
    "METADATA_KEYS",
    "ParsedTask",
    "extract_raw_metadata",
    "load_task_file",
    "parse_task_metadata",
    "MetadataGap",
    "MetadataVocabulary",
    "TaskMetadata",
    "default_vocabulary",
    "normalize_metadata",
    "normalize_stack",
]
