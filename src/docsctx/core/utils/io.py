"""File I/O helpers: YAML reading and atomic text writes."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, List

import yaml


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) if missing and return it."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Examples:
        >>> config = read_yaml(Path("config.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def iter_yaml_files(directory: Path) -> List[Path]:
    """Return ``*.yaml`` / ``*.yml`` files in ``directory`` in alphabetical order."""
    d = Path(directory)
    if not d.is_dir():
        return []
    files = [p for p in d.iterdir() if p.is_file() and p.suffix in (".yaml", ".yml")]
    return sorted(files, key=lambda p: p.name)


def write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write ``content`` to ``path`` atomically (temp file + fsync + rename)."""
    path = Path(path)
    ensure_directory(path.parent)
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_path = Path(fh.name)
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, path)
        tmp_path = None
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()


__all__ = ["ensure_directory", "read_yaml", "iter_yaml_files", "write_text"]
