import os
import sys
import textwrap
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'docsctx' without an install
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from docsctx.core.utils.stdlib_logging import reset_stdlib_logging_for_tests  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_docsctx_env(monkeypatch):
    """Drop DOCSCTX_* variables inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("DOCSCTX_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project root (marked by a .docsctx directory)."""
    (tmp_path / ".docsctx").mkdir()
    return tmp_path


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path
