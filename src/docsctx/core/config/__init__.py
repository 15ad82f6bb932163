"""Layered configuration (bundled defaults, project overlays, env overrides)."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from .manager import ENV_PREFIX, ConfigManager, load_bundled_config


def load_config(repo_root: Optional[Path] = None, *, validate: bool = True) -> Dict[str, Any]:
    """Shortcut for ``ConfigManager(repo_root).load_config(validate=validate)``."""
    return ConfigManager(repo_root).load_config(validate=validate)


__all__ = ["ConfigManager", "ENV_PREFIX", "load_config", "load_bundled_config"]
