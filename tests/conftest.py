from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path so `cli`, `core` and `adapters` import without an install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty tmp cwd with no PUBKIT_* variables set."""
    for key in list(os.environ):
        if key.upper().startswith("PUBKIT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
