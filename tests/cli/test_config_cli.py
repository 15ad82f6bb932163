"""Tests for 'docsctx config show'."""
from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from conftest import write_file


def _run(argv) -> int:
    from docsctx.cli.config import show

    parser = argparse.ArgumentParser()
    show.register_args(parser)
    return show.main(parser.parse_args(argv))


def test_show_section_json(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert _run(["rules", "--json", "--repo-root", str(tmp_path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert list(payload) == ["rules"]
    assert payload["rules"]["stackPrefix"] == "stacks/"


def test_show_all_as_yaml(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert _run(["--repo-root", str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "universal:" in out
    assert "defaults:" in out


def test_unknown_section(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert _run(["nope", "--repo-root", str(tmp_path)]) == 1
    assert "Unknown config section: nope" in capsys.readouterr().err


def test_invalid_config_and_no_validate(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    write_file(tmp_path / ".docsctx" / "config" / "rules.yaml", "rules:\n  universal: nope\n")

    assert _run(["--json", "--repo-root", str(tmp_path)]) == 1
    error = json.loads(capsys.readouterr().err)
    assert error["error"] == "config_invalid"
    assert error["code"] == "ConfigError"

    assert _run(["rules", "--no-validate", "--json", "--repo-root", str(tmp_path)]) == 0
    assert json.loads(capsys.readouterr().out)["rules"]["universal"] == "nope"
