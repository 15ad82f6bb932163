from __future__ import annotations

import dataclasses

import pytest

from docsctx.core.task import MetadataGap, TaskMetadata, default_vocabulary, normalize_metadata, normalize_stack


def test_from_mapping_is_case_insensitive_and_stringifies():
    meta = TaskMetadata.from_mapping({"Type": "bug", "ID": 42, "unknown": "x"})

    assert meta.type == "bug"
    assert meta.id == "42"
    assert meta.description == ""


def test_task_metadata_is_frozen():
    meta = TaskMetadata(type="bug")
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.type = "feature"  # type: ignore[misc]


def test_normalize_lowercases_and_strips():
    meta, gaps = normalize_metadata(
        TaskMetadata(type=" BUG ", context="Web", priority="HIGH", description="  fix it ")
    )

    assert (meta.type, meta.context, meta.priority) == ("bug", "web", "high")
    assert meta.description == "fix it"
    assert gaps == []


def test_normalize_reports_unrecognized_value():
    meta, gaps = normalize_metadata(TaskMetadata(type="spike", context="api", priority="low", description="x"))

    assert meta.type == "feature"
    assert gaps == [MetadataGap(field="type", reason="unrecognized", value="spike", default="feature")]


def test_normalize_resolves_aliases():
    meta, _ = normalize_metadata(TaskMetadata(type="hotfix", context="iOS", priority="urgent"))

    assert (meta.type, meta.context, meta.priority) == ("bug", "mobile", "critical")


def test_empty_description_is_a_gap_without_default():
    _, gaps = normalize_metadata(TaskMetadata(type="bug", context="api", priority="low"))

    assert gaps == [MetadataGap(field="description", reason="missing")]
    assert gaps[0].describe() == "description is missing"


def test_gap_descriptions():
    missing = MetadataGap(field="type", reason="missing", default="feature")
    unknown = MetadataGap(field="context", reason="unrecognized", value="tv", default="web")

    assert missing.describe() == "type is missing; using default 'feature'"
    assert unknown.describe() == "context 'tv' is not recognized; using default 'web'"
    assert unknown.to_dict() == {"field": "context", "reason": "unrecognized", "value": "tv", "default": "web"}


def test_normalize_stack():
    assert normalize_stack(" React Native ") == "react-native"
    assert normalize_stack("stacks/NestJS") == "nestjs"
    assert normalize_stack("stack/vue", prefix="stack/") == "vue"
    assert normalize_stack("") is None
    assert normalize_stack(None) is None
    assert normalize_stack("../x") == "x"
    assert normalize_stack("../../etc/passwd") == "etc/passwd"
    assert normalize_stack("python/./django") == "python/django"
    assert normalize_stack("..") is None


def test_default_vocabulary():
    vocab = default_vocabulary()

    assert "fullstack" in vocab.contexts
    assert vocab.defaults == {"type": "feature", "context": "web", "priority": "medium"}
    assert vocab.resolve("context", "frontend") == ("web", None)
