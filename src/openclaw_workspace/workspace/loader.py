"""Bootstrap file loading — the ordered document set for an agent session.

Walks BOOTSTRAP_CATALOG in order and reads each entry from the workspace.
Required entries always appear (missing=True when absent); conditional
entries appear only when active and one of their candidate files exists.
Nothing is cached: every call re-resolves every entry from disk.

Key class: WorkspaceBootstrapFile.
Key function: load_bootstrap_files().
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ..utils import resolve_user_path
from .catalog import BOOTSTRAP_CATALOG, BootstrapFileSpec

logger = logging.getLogger(__name__)


@dataclass
class WorkspaceBootstrapFile:
    """One document handed to the agent runtime."""

    name: str
    path: Path
    content: str = ""
    missing: bool = False
    kind: str = ""  # catalog key, e.g. "profile"


def _read_file(path: Path) -> str | None:
    """Read a file, returning None if it doesn't exist.

    Undecodable bytes become U+FFFD rather than failing the whole load.

    Permission and other I/O errors propagate.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        return None


def _resolve_entry(
    workspace_dir: Path, spec: BootstrapFileSpec, env: Mapping[str, str]
) -> WorkspaceBootstrapFile | None:
    if not spec.applies(env):
        return None
    candidates = spec.candidates(env)
    if not candidates:
        return None

    for name in candidates:
        path = workspace_dir / name
        content = _read_file(path)
        if content is not None:
            return WorkspaceBootstrapFile(
                name=name, path=path, content=content, kind=spec.key
            )

    if not spec.required:
        return None
    name = candidates[0]
    return WorkspaceBootstrapFile(
        name=name, path=workspace_dir / name, missing=True, kind=spec.key
    )


def load_bootstrap_files(
    workspace_dir: str | Path, env: Mapping[str, str] | None = None
) -> list[WorkspaceBootstrapFile]:
    """Load the session document set for workspace_dir.

    Args:
        workspace_dir: Workspace root (``~`` expanded).
        env: Environment mapping for the profile selector; defaults to
             ``os.environ``.

    Returns:
        Entries in catalog order.
    """
    if env is None:
        env = os.environ
    root = resolve_user_path(workspace_dir)

    files: list[WorkspaceBootstrapFile] = []
    for spec in BOOTSTRAP_CATALOG:
        entry = _resolve_entry(root, spec, env)
        if entry is not None:
            files.append(entry)

    logger.debug(
        "Loaded %d bootstrap files from %s (%d missing)",
        len(files),
        root,
        sum(1 for f in files if f.missing),
    )
    return files
