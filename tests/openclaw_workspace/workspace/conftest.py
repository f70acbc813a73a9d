"""Shared test helpers for workspace tests."""

import json
from pathlib import Path

import pytest


def write_workspace_file(workspace: Path, name: str, content: str) -> Path:
    """Write a file under the workspace, creating parent dirs. Returns the path."""
    path = workspace / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def read_state_json(workspace: Path) -> dict:
    """Read the raw on-disk onboarding state."""
    path = workspace / ".openclaw" / "workspace-state.json"
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty workspace directory."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws
