from __future__ import annotations

from docsctx.core.utils.paths import get_project_config_dir, resolve_project_root


def test_resolve_walks_up_to_marker(tmp_path):
    (tmp_path / ".docsctx").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert resolve_project_root(nested) == tmp_path.resolve()


def test_resolve_prefers_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCSCTX_PROJECT_ROOT", str(tmp_path))

    assert resolve_project_root(tmp_path / "elsewhere") == tmp_path.resolve()


def test_project_config_dir(tmp_path, monkeypatch):
    assert get_project_config_dir(tmp_path) == tmp_path / ".docsctx"
    assert get_project_config_dir(tmp_path, "conf") == tmp_path / "conf"

    monkeypatch.setenv("DOCSCTX_paths__project_config_dir", ".ctx")
    assert get_project_config_dir(tmp_path) == tmp_path / ".ctx"


def test_project_config_dir_from_project_yaml(tmp_path):
    config_dir = tmp_path / ".docsctx" / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "paths.yaml").write_text("paths:\n  project_config_dir: .ctx\n", encoding="utf-8")

    assert get_project_config_dir(tmp_path) == tmp_path / ".ctx"


def test_env_wins_over_project_yaml(tmp_path, monkeypatch):
    config_dir = tmp_path / ".docsctx" / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "paths.yaml").write_text("paths:\n  project_config_dir: .ctx\n", encoding="utf-8")
    monkeypatch.setenv("DOCSCTX_paths__project_config_dir", ".other")

    assert get_project_config_dir(tmp_path) == tmp_path / ".other"
