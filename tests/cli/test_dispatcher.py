"""Tests for the auto-discovery dispatcher."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from docsctx.cli._dispatcher import build_parser, discover_commands, discover_domains, main


def test_discovers_domains_and_commands() -> None:
    assert set(discover_domains()) == {"config", "rules", "task"}
    assert set(discover_commands("rules")) == {"select", "list", "inject"}
    assert set(discover_commands("task")) == {"new", "show"}


def test_parser_routes_to_command_main() -> None:
    args = build_parser().parse_args(["rules", "select", "--type", "bug"])

    assert args.domain == "rules"
    assert args.command == "select"
    assert args.task_type == "bug"
    assert callable(args._func)


def test_main_runs_command(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    code = main(["rules", "select", "--type", "bug", "--context", "api", "--json", "--repo-root", str(tmp_path)])

    assert code == 0
    assert "bug-fix" in json.loads(capsys.readouterr().out)["rules"]


def test_main_without_domain_prints_help(capsys: pytest.CaptureFixture) -> None:
    assert main([]) == 0
    assert "usage: docsctx" in capsys.readouterr().out


def test_main_without_command_prints_domain_help(capsys: pytest.CaptureFixture) -> None:
    assert main(["rules"]) == 0
    assert "select" in capsys.readouterr().out


def test_version(capsys: pytest.CaptureFixture) -> None:
    from docsctx import __version__

    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_file_logging_when_enabled(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCSCTX_LOGGING__ENABLED", "true")

    assert main(["rules", "select", "--type", "bug", "--repo-root", str(tmp_path)]) == 0

    log_file = tmp_path / ".docsctx" / "logs" / "docsctx.log"
    assert "Running rules select" in log_file.read_text(encoding="utf-8")


def test_unexpected_errors_become_exit_code_1(tmp_path: Path, capsys: pytest.CaptureFixture, monkeypatch) -> None:
    from docsctx.cli.rules import select

    def boom(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(select, "explain_rules", boom)

    assert main(["rules", "select", "--repo-root", str(tmp_path)]) == 1
    assert "Error: boom" in capsys.readouterr().err
