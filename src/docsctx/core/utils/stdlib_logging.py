from __future__ import annotations

import logging
import sys
from pathlib import Path

from docsctx.core.utils.io import ensure_directory

_CONFIGURED_LOG_PATH: str | None = None
_DOCSCTX_FILE_HANDLER: logging.Handler | None = None
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, log_path: Path, level: str = "INFO") -> None:
    """Configure stdlib logging to write to ``log_path`` (no stderr handler).

    Idempotent per-process: if already configured for the same file, no-op.
    """
    global _CONFIGURED_LOG_PATH, _DOCSCTX_FILE_HANDLER

    resolved = str(Path(log_path).resolve())
    if _CONFIGURED_LOG_PATH == resolved and _DOCSCTX_FILE_HANDLER is not None:
        return

    ensure_directory(Path(resolved).parent)

    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    # FileHandler is also a StreamHandler: only drop the stdout/stderr ones.
    for h in list(root.handlers):
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) in (sys.stdout, sys.stderr):
            root.removeHandler(h)
            h.close()

    if _DOCSCTX_FILE_HANDLER is not None:
        root.removeHandler(_DOCSCTX_FILE_HANDLER)
        _DOCSCTX_FILE_HANDLER.close()
        _DOCSCTX_FILE_HANDLER = None

    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(_level_from_name(level))
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(fh)

    _DOCSCTX_FILE_HANDLER = fh
    _CONFIGURED_LOG_PATH = resolved


def configure_from_config(config: dict, *, repo_root: Path) -> bool:
    """Install file logging when ``logging.enabled`` is set. Returns True if configured."""
    section = config.get("logging") if isinstance(config.get("logging"), dict) else {}
    if not section.get("enabled", False):
        return False
    raw_path = Path(str(section.get("path") or ".docsctx/logs/docsctx.log"))
    log_path = raw_path if raw_path.is_absolute() else Path(repo_root) / raw_path
    configure_stdlib_logging(log_path=log_path, level=str(section.get("level") or "INFO"))
    return True


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: clear configured handlers."""
    global _CONFIGURED_LOG_PATH, _DOCSCTX_FILE_HANDLER, _JSON_MODE_NULL_HANDLER_INSTALLED
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    _CONFIGURED_LOG_PATH = None
    _DOCSCTX_FILE_HANDLER = None
    _JSON_MODE_NULL_HANDLER_INSTALLED = False


def suppress_lastresort_in_json_mode() -> None:
    """Keep stdlib logging's lastResort handler from polluting JSON output.

    Without configured handlers, WARNING+ records go to stderr via
    ``logging.lastResort``. Installing a NullHandler on the root logger
    keeps ``--json`` output machine-readable.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


__all__ = [
    "configure_stdlib_logging",
    "configure_from_config",
    "reset_stdlib_logging_for_tests",
    "suppress_lastresort_in_json_mode",
]
