"""Workspace onboarding state — persisted at .openclaw/workspace-state.json.

The record is loaded and saved at call boundaries; nothing is cached in
memory between calls. A missing or unparseable file reads as "no state".
Permission and other I/O errors propagate.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..settings import CONFIG_DIRNAME
from ..utils import atomic_write_json

logger = logging.getLogger(__name__)

STATE_VERSION = 1
STATE_FILENAME = "workspace-state.json"


def state_path(workspace_dir: Path) -> Path:
    return workspace_dir / CONFIG_DIRNAME / STATE_FILENAME


def now_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


@dataclass
class WorkspaceState:
    """Onboarding markers for one workspace."""

    version: int = STATE_VERSION
    bootstrap_seeded_at: str | None = None  # ISO 8601, set when seed is written
    onboarding_completed_at: str | None = None  # ISO 8601, terminal once set

    @property
    def is_onboarded(self) -> bool:
        return self.onboarding_completed_at is not None

    @property
    def is_seeded(self) -> bool:
        return self.bootstrap_seeded_at is not None

    @property
    def has_markers(self) -> bool:
        return self.is_seeded or self.is_onboarded

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"version": self.version}
        if self.bootstrap_seeded_at:
            d["bootstrapSeededAt"] = self.bootstrap_seeded_at
        if self.onboarding_completed_at:
            d["onboardingCompletedAt"] = self.onboarding_completed_at
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WorkspaceState:
        version = data.get("version", STATE_VERSION)
        if not isinstance(version, int) or isinstance(version, bool):
            version = STATE_VERSION
        return cls(
            version=version,
            bootstrap_seeded_at=_optional_str(data.get("bootstrapSeededAt")),
            onboarding_completed_at=_optional_str(data.get("onboardingCompletedAt")),
        )


def load_state(workspace_dir: Path) -> WorkspaceState | None:
    """Load the state record, or None when absent or corrupt."""
    path = state_path(workspace_dir)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as e:
        logger.warning("Ignoring unreadable workspace state %s: %s", path, e)
        return None

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring corrupt workspace state %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring workspace state %s: expected a JSON object", path)
        return None
    return WorkspaceState.from_dict(data)


def save_state(workspace_dir: Path, state: WorkspaceState) -> None:
    """Rewrite the state record wholesale."""
    path = state_path(workspace_dir)
    atomic_write_json(path, state.to_dict())
    logger.debug("Wrote workspace state %s", path)
