"""
docsctx configuration management (layered YAML).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml

from docsctx.core.exceptions import ConfigError, SchemaValidationError
from docsctx.core.utils.io import iter_yaml_files, read_yaml
from docsctx.core.utils.merge import deep_merge
from docsctx.core.utils.paths import get_project_config_dir, resolve_project_root
from docsctx.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "DOCSCTX_"

# Env vars under the prefix that are read directly and never merged into config.
RESERVED_ENV_KEYS = frozenset({"PROJECT_ROOT"})


class ConfigManager:
    """Load, merge, and validate docsctx configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: DOCSCTX_*
    2. Project-local config: <project>/.docsctx/config.local/*.yaml (uncommitted)
    3. Project config: <project>/.docsctx/config/*.yaml
    4. Bundled defaults: docsctx.data/config/*.yaml

    Files in each directory are merged in alphabetical order.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else resolve_project_root()

        project_root_dir = get_project_config_dir(self.repo_root)
        self.core_config_dir = get_data_path("config")
        self.project_config_dir = project_root_dir / "config"
        self.project_local_config_dir = project_root_dir / "config.local"

    @property
    def project_root(self) -> Path:
        return self.repo_root

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a YAML mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in iter_yaml_files(directory):
            logger.debug("Merging config file %s", path)
            cfg = deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ---------------------------------------------------------------- env

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str, *, strict: bool) -> List[Union[str, int]]:
        segs = raw.split("__") if "__" in raw else raw.split("_")
        processed: List[Union[str, int]] = []
        for seg in segs:
            if seg == "":
                if strict:
                    raise ConfigError(f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.")
                return []
            processed.append(int(seg) if seg.isdigit() else seg.lower())
        return processed

    def _iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[List[Union[str, int]], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw or raw in RESERVED_ENV_KEYS:
                continue
            path = self._parse_env_key(raw, strict=strict)
            if path:
                yield path, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[Union[str, int]], value: Any) -> None:
        """Assign ``value`` at ``path``, matching existing keys case-insensitively."""
        cur: Any = root
        for i, part in enumerate(path):
            is_last = i == len(path) - 1
            if isinstance(part, int):
                if not isinstance(cur, list):
                    raise ConfigError("Index assignment requires list")
                while len(cur) <= part:
                    cur.append(None)
                if is_last:
                    cur[part] = value
                    return
                if not isinstance(cur[part], (dict, list)):
                    cur[part] = {}
                cur = cur[part]
                continue

            if not isinstance(cur, dict):
                raise ConfigError("Path traverses non-dict container")
            lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key = lower_map.get(part.lower(), part)
            if is_last:
                cur[key] = value
                return
            if key not in cur or not isinstance(cur[key], (dict, list)):
                cur[key] = [] if isinstance(path[i + 1], int) else {}
            cur = cur[key]

    def apply_env_overrides(self, cfg: Dict[str, Any], *, strict: bool) -> None:
        for path, typed_value in self._iter_env_overrides(strict=strict):
            logger.debug("Applying env override %s", ".".join(str(p) for p in path))
            self._set_nested(cfg, path, typed_value)

    # --------------------------------------------------------------- load

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from all sources.

        Raises:
            ConfigError: If a YAML file is invalid or, when ``validate`` is
                set, the merged config fails the bundled schema.
        """
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        cfg = self._load_directory(self.project_local_config_dir, cfg)
        self.apply_env_overrides(cfg, strict=validate)

        if validate:
            self.validate_schema(cfg, "config")
        return cfg

    def validate_schema(self, config: Dict[str, Any], schema_name: str) -> None:
        from docsctx.core.schemas.validation import validate_payload

        try:
            validate_payload(config, schema_name, repo_root=self.repo_root)
        except SchemaValidationError as exc:
            raise ConfigError(str(exc), context=exc.context) from exc


def load_bundled_config() -> Dict[str, Any]:
    """Merge only the bundled defaults (no project layers, no env overrides)."""
    cfg: Dict[str, Any] = {}
    for path in iter_yaml_files(get_data_path("config")):
        cfg = deep_merge(cfg, read_yaml(path, default={}, raise_on_error=True))
    return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "load_bundled_config"]
