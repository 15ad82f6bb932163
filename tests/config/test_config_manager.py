from __future__ import annotations

import pytest

from docsctx.core.config import ConfigManager, load_config
from docsctx.core.exceptions import ConfigError
from docsctx.core.rules import RuleTables

from conftest import write_file


def test_bundled_defaults(project):
    cfg = ConfigManager(project).load_config()

    assert cfg["rules"]["universal"] == ["code-quality", "testing", "documentation"]
    assert cfg["metadata"]["defaults"]["context"] == "web"
    assert cfg["paths"]["tasks_dir"] == "tasks"
    assert cfg["logging"]["enabled"] is False


def test_project_config_appends_with_plus_marker(project):
    write_file(
        project / ".docsctx" / "config" / "rules.yaml",
        """
        rules:
          byContext:
            mobile: ["+", expo-router]
            desktop: [electron-security]
        """,
    )

    tables = RuleTables.from_config(load_config(project))

    assert tables.by_context["mobile"] == ("mobile-development", "accessibility", "expo-router")
    assert tables.by_context["desktop"] == ("electron-security",)
    assert tables.by_context["api"] == ("api-development", "security")


def test_local_config_wins_over_project_config(project):
    write_file(project / ".docsctx" / "config" / "paths.yaml", "paths:\n  tasks_dir: work\n")
    write_file(project / ".docsctx" / "config.local" / "paths.yaml", "paths:\n  tasks_dir: mine\n")

    assert load_config(project)["paths"]["tasks_dir"] == "mine"


def test_env_overrides_match_keys_case_insensitively(project, monkeypatch):
    monkeypatch.setenv("DOCSCTX_rules__stackPrefix", "stack/")
    monkeypatch.setenv("DOCSCTX_LOGGING__ENABLED", "true")
    monkeypatch.setenv("DOCSCTX_rules__universal", '["code-quality"]')

    cfg = load_config(project)

    assert cfg["rules"]["stackPrefix"] == "stack/"
    assert "stackprefix" not in cfg["rules"]
    assert cfg["logging"]["enabled"] is True
    assert cfg["rules"]["universal"] == ["code-quality"]


def test_project_root_env_is_not_merged(project, monkeypatch):
    monkeypatch.setenv("DOCSCTX_PROJECT_ROOT", str(project))

    cfg = load_config(project)

    assert "project" not in cfg
    assert "project_root" not in cfg


def test_malformed_env_key_is_rejected(project, monkeypatch):
    monkeypatch.setenv("DOCSCTX_rules____universal", "x")

    with pytest.raises(ConfigError):
        load_config(project)


def test_invalid_yaml_raises_config_error(project):
    path = write_file(project / ".docsctx" / "config" / "rules.yaml", "rules: [unclosed\n")

    with pytest.raises(ConfigError) as exc:
        load_config(project)

    assert exc.value.context == {"path": str(path)}


def test_non_mapping_file_raises_config_error(project):
    write_file(project / ".docsctx" / "config" / "rules.yaml", "- a\n- b\n")

    with pytest.raises(ConfigError, match="must contain a YAML mapping"):
        load_config(project)


def test_schema_violation_raises_config_error(project):
    write_file(project / ".docsctx" / "config" / "rules.yaml", "rules:\n  universal: not-a-list\n")

    with pytest.raises(ConfigError, match="rules/universal"):
        load_config(project)

    assert load_config(project, validate=False)["rules"]["universal"] == "not-a-list"
