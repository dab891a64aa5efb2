"""
Shared pytest fixtures:
- TX3_TRP_* environment isolation (a developer's shell never leaks into tests)
- A TIR descriptor file for CLI tests
"""
from __future__ import annotations

import json
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_trp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("TX3_TRP_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tir_file(tmp_path: Path) -> Path:
    path = tmp_path / "transfer.tir.json"
    path.write_text(json.dumps({"version": "v1alpha", "content": "deadbeef", "encoding": "hex"}))
    return path
