"""Workspace maturity detection.

Classifies a directory as NEW, LEGACY (prior use but no state record) or
TRACKED (state record carries a marker). Prior use is inferred from
independent evidence probes; template files are never consulted since users
edit them freely.

Key entities: WorkspaceMaturity, EVIDENCE_PROBES, classify_workspace().
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .catalog import (
    DEFAULT_MEMORY_ALT_FILENAME,
    DEFAULT_MEMORY_FILENAME,
    MEMORY_DIRNAME,
)
from .state import WorkspaceState

logger = logging.getLogger(__name__)

# Version-control metadata dirs (.git may also be a file in worktrees)
_VCS_MARKERS = (".git",)


class WorkspaceMaturity(Enum):
    NEW = "new"
    LEGACY = "legacy"
    TRACKED = "tracked"


def _has_memory_dir(workspace_dir: Path) -> bool:
    """memory/ exists and holds at least one entry."""
    memory_dir = workspace_dir / MEMORY_DIRNAME
    try:
        if not memory_dir.is_dir():
            return False
        return any(memory_dir.iterdir())
    except OSError:
        return False


def _has_memory_document(workspace_dir: Path) -> bool:
    """MEMORY.md (or memory.md) with non-whitespace content."""
    for name in (DEFAULT_MEMORY_FILENAME, DEFAULT_MEMORY_ALT_FILENAME):
        try:
            content = (workspace_dir / name).read_text(
                encoding="utf-8", errors="replace"
            )
            if content.strip():
                return True
        except OSError:
            continue
    return False


def _has_vcs_metadata(workspace_dir: Path) -> bool:
    for marker in _VCS_MARKERS:
        try:
            if (workspace_dir / marker).exists():
                return True
        except OSError:
            continue
    return False


# name -> probe; any positive probe marks the workspace as previously used
EVIDENCE_PROBES: dict[str, Callable[[Path], bool]] = {
    "memory_dir": _has_memory_dir,
    "memory_document": _has_memory_document,
    "vcs_metadata": _has_vcs_metadata,
}


def find_prior_use_evidence(workspace_dir: Path) -> list[str]:
    """Return the names of all evidence probes that fire for workspace_dir."""
    return [name for name, probe in EVIDENCE_PROBES.items() if probe(workspace_dir)]


def classify_workspace(
    workspace_dir: Path, state: WorkspaceState | None = None
) -> WorkspaceMaturity:
    """Classify workspace_dir given its (already loaded) state record."""
    if state is not None and state.has_markers:
        return WorkspaceMaturity.TRACKED

    evidence = find_prior_use_evidence(workspace_dir)
    if evidence:
        logger.debug(
            "Prior-use evidence in %s: %s", workspace_dir, ", ".join(evidence)
        )
        return WorkspaceMaturity.LEGACY
    return WorkspaceMaturity.NEW
