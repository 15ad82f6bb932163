from __future__ import annotations

import logging

from docsctx.core.utils.stdlib_logging import (
    configure_from_config,
    configure_stdlib_logging,
    suppress_lastresort_in_json_mode,
)


def test_configure_writes_to_file(tmp_path):
    log_path = tmp_path / "logs" / "docsctx.log"

    configure_stdlib_logging(log_path=log_path, level="DEBUG")
    logging.getLogger("docsctx.test").debug("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello from test" in log_path.read_text(encoding="utf-8")


def test_configure_is_idempotent(tmp_path):
    log_path = tmp_path / "docsctx.log"

    configure_stdlib_logging(log_path=log_path)
    configure_stdlib_logging(log_path=log_path)

    file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1


def test_configure_from_config_respects_enabled_flag(tmp_path):
    assert configure_from_config({"logging": {"enabled": False}}, repo_root=tmp_path) is False
    assert configure_from_config({}, repo_root=tmp_path) is False

    assert configure_from_config(
        {"logging": {"enabled": True, "path": "out/run.log", "level": "WARNING"}},
        repo_root=tmp_path,
    )
    assert (tmp_path / "out").is_dir()


def test_suppress_lastresort_installs_null_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])

    suppress_lastresort_in_json_mode()
    suppress_lastresort_in_json_mode()

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.NullHandler)
