"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import os
import sys
from pathlib import Path

import pytest

# Ensure src is on path so imports like dirconfig.* work without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.chdir(PROJECT_ROOT)

TESTDATA = Path(__file__).resolve().parent / "testdata"


@pytest.fixture
def testdata_path() -> str:
    """Search path over testdata/1 and testdata/2."""
    return os.pathsep.join([str(TESTDATA / "1"), str(TESTDATA / "2")])


@pytest.fixture(autouse=True)
def _fresh_default_loader(monkeypatch):
    """Each test starts without a process-wide loader and without CONFIG_PATH."""
    monkeypatch.setattr("dirconfig.config._default_loader", None)
    monkeypatch.delenv("CONFIG_PATH", raising=False)
