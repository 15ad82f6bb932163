"""Project root and project config directory resolution.

The project config directory name is ``paths.project_config_dir``, resolved
with this precedence (highest to lowest):

1. Environment variable: ``DOCSCTX_paths__project_config_dir``
2. Project overrides: ``{repo_root}/.docsctx/config/*.yaml``
3. Bundled defaults: ``docsctx.data/config/paths.yaml``
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from docsctx.core.utils.io import iter_yaml_files, read_yaml
from docsctx.data import get_data_path

DEFAULT_PROJECT_CONFIG_DIR = ".docsctx"

# Markers checked (in order) in each directory while walking upwards.
PROJECT_MARKERS = (DEFAULT_PROJECT_CONFIG_DIR, ".git")


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """Resolve the project root.

    Resolution priority:
    1. ``DOCSCTX_PROJECT_ROOT`` environment variable
    2. Nearest ancestor of ``start`` (default: cwd) holding a ``.docsctx``
       directory or a ``.git`` entry
    3. ``start`` itself
    """
    env_root = os.environ.get("DOCSCTX_PROJECT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    origin = Path(start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
    return origin


def _load_project_dir_from_yaml(path: Path) -> Optional[str]:
    """Extract ``paths.project_config_dir`` from a YAML file when present."""
    data = read_yaml(path, default={})
    if not isinstance(data, dict):
        return None
    section = data.get("paths")
    if isinstance(section, dict):
        value = section.get("project_config_dir")
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _resolve_project_dir_name(repo_root: Path) -> str:
    env_override = os.environ.get("DOCSCTX_paths__project_config_dir")
    if env_override and env_override.strip():
        return env_override.strip()

    value = _load_project_dir_from_yaml(get_data_path("config", "paths.yaml"))

    # The default directory bootstraps the lookup of its own override.
    for yaml_path in iter_yaml_files(Path(repo_root) / DEFAULT_PROJECT_CONFIG_DIR / "config"):
        found = _load_project_dir_from_yaml(yaml_path)
        if found is not None:
            value = found

    return value or DEFAULT_PROJECT_CONFIG_DIR


def get_project_config_dir(repo_root: Path, dirname: Optional[str] = None) -> Path:
    """Return ``<repo_root>/.docsctx`` (or the configured directory name)."""
    return Path(repo_root) / (dirname or _resolve_project_dir_name(repo_root))


__all__ = ["resolve_project_root", "get_project_config_dir", "DEFAULT_PROJECT_CONFIG_DIR"]
