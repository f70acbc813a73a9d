"""Workspace directory initialization and onboarding state reconciliation.

Manages one agent workspace directory:
  - ensure(): create the directory, deploy missing template files, and move
    the onboarding state forward (new → seeded → completed, or legacy →
    completed).
  - The seed document (BOOTSTRAP.md) is written at most once, for a brand-new
    workspace, and is never recreated after onboarding completes.

Key class: WorkspaceManager.
Key function: ensure_workspace().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..utils import resolve_user_path
from .catalog import (
    DEFAULT_AGENTS_FILENAME,
    DEFAULT_BOOTSTRAP_FILENAME,
    DEFAULT_HEARTBEAT_FILENAME,
    DEFAULT_IDENTITY_FILENAME,
    DEFAULT_SOUL_FILENAME,
    DEFAULT_TOOLS_FILENAME,
    DEFAULT_USER_FILENAME,
)
from .detect import WorkspaceMaturity, classify_workspace
from .state import STATE_VERSION, WorkspaceState, load_state, now_iso, save_state

logger = logging.getLogger(__name__)

# Template files bundled with the package
_TEMPLATES_DIR = Path(__file__).parent / "templates"

# Files kept present in every workspace (recreated if the user deletes them)
_REQUIRED_TEMPLATE_FILES = [
    DEFAULT_AGENTS_FILENAME,
    DEFAULT_SOUL_FILENAME,
    DEFAULT_TOOLS_FILENAME,
    DEFAULT_IDENTITY_FILENAME,
    DEFAULT_USER_FILENAME,
    DEFAULT_HEARTBEAT_FILENAME,
]


def strip_front_matter(text: str) -> str:
    """Drop a leading ``---`` fenced front-matter block, if any."""
    if not text.startswith("---"):
        return text
    end = text.find("\n---", 3)
    if end == -1:
        return text
    body = text[end + len("\n---") :]
    return body.lstrip()


def load_template(filename: str) -> str:
    """Read a bundled template with its front matter removed.

    Raises:
        FileNotFoundError: If the package ships no such template.
    """
    path = _TEMPLATES_DIR / filename
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Missing workspace template: {path}") from None
    return strip_front_matter(text)


def _write_if_missing(path: Path, content: str) -> bool:
    """Create path with content unless it already exists. Returns True if written."""
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        return False
    return True


@dataclass
class EnsureResult:
    """Outcome of one ensure() call."""

    workspace_dir: Path
    state: WorkspaceState
    maturity: WorkspaceMaturity  # classification observed at call start
    created: list[Path] = field(default_factory=list)
    state_written: bool = False

    @property
    def bootstrap_path(self) -> Path:
        return self.workspace_dir / DEFAULT_BOOTSTRAP_FILENAME


class WorkspaceManager:
    """Manages one agent workspace directory and its onboarding state."""

    def __init__(self, workspace_dir: Path) -> None:
        self.workspace_dir = workspace_dir

    def _deploy(self, filename: str) -> Path | None:
        dest = self.workspace_dir / filename
        if dest.exists():
            return None
        if _write_if_missing(dest, load_template(filename)):
            logger.info("Deployed workspace template: %s", dest)
            return dest
        return None

    def _deploy_required(self) -> list[Path]:
        created: list[Path] = []
        for filename in _REQUIRED_TEMPLATE_FILES:
            path = self._deploy(filename)
            if path is not None:
                created.append(path)
        return created

    def ensure(self, ensure_bootstrap_files: bool = True) -> EnsureResult:
        """Initialize the workspace and advance its onboarding state.

        Safe to call on every session start. With ensure_bootstrap_files
        False, no template files are written and only state transitions that
        need no new files are applied.

        Raises:
            OSError: If a template or the state file cannot be written.
        """
        self.workspace_dir.mkdir(parents=True, exist_ok=True)

        loaded = load_state(self.workspace_dir)
        state = loaded if loaded is not None else WorkspaceState()
        maturity = classify_workspace(self.workspace_dir, loaded)
        created: list[Path] = []
        changed = False

        if state.is_onboarded:
            logger.debug("Workspace %s already onboarded", self.workspace_dir)
        elif state.is_seeded:
            # Seed has had its session; retire it regardless of presence
            state.onboarding_completed_at = now_iso()
            changed = True
            logger.info("Onboarding completed for %s", self.workspace_dir)
        elif maturity is WorkspaceMaturity.LEGACY:
            state.onboarding_completed_at = now_iso()
            changed = True
            logger.info(
                "Existing workspace detected at %s, skipping bootstrap seed",
                self.workspace_dir,
            )
        elif ensure_bootstrap_files:
            seed = self._deploy(DEFAULT_BOOTSTRAP_FILENAME)
            if seed is not None:
                created.append(seed)
            state.bootstrap_seeded_at = now_iso()
            changed = True
            logger.info("Seeded new workspace at %s", self.workspace_dir)

        if ensure_bootstrap_files:
            created.extend(self._deploy_required())

        if changed:
            state.version = STATE_VERSION
            save_state(self.workspace_dir, state)

        return EnsureResult(
            workspace_dir=self.workspace_dir,
            state=state,
            maturity=maturity,
            created=created,
            state_written=changed,
        )


def ensure_workspace(
    workspace_dir: str | Path, ensure_bootstrap_files: bool = True
) -> EnsureResult:
    """Ensure the workspace at workspace_dir (``~`` expanded). See WorkspaceManager."""
    manager = WorkspaceManager(resolve_user_path(workspace_dir))
    return manager.ensure(ensure_bootstrap_files=ensure_bootstrap_files)
