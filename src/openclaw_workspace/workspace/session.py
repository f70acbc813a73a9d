"""Session-aware filtering of loaded bootstrap files.

Session keys look like ``agent:<agentId>:main``, ``agent:<agentId>:subagent:<id>``
or ``agent:<agentId>:cron:<jobId>``. Only the role segment matters here.

Main sessions receive every loaded document. Subagent and cron runs get a
smaller set: persona, instructions and tools, plus the active profile.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from .catalog import (
    KIND_AGENTS,
    KIND_IDENTITY,
    KIND_PROFILE,
    KIND_SOUL,
    KIND_TOOLS,
    KIND_USER,
    kind_for_filename,
)
from .loader import WorkspaceBootstrapFile


class SessionRole(Enum):
    MAIN = "main"
    SUBAGENT = "subagent"
    CRON = "cron"


_AGENT_PREFIX = "agent"

# Kinds kept for sessions that are not the user's main conversation
_MINIMAL_KINDS = frozenset(
    {KIND_AGENTS, KIND_SOUL, KIND_TOOLS, KIND_IDENTITY, KIND_USER, KIND_PROFILE}
)


def parse_session_role(session_key: str | None) -> SessionRole:
    """Return the role encoded in session_key (MAIN when absent or unknown)."""
    if not session_key:
        return SessionRole.MAIN
    parts = [p for p in session_key.strip().split(":") if p]
    if len(parts) >= 2 and parts[0].lower() == _AGENT_PREFIX:
        parts = parts[2:]
    if not parts:
        return SessionRole.MAIN
    head = parts[0].lower()
    if head == SessionRole.SUBAGENT.value:
        return SessionRole.SUBAGENT
    if head == SessionRole.CRON.value:
        return SessionRole.CRON
    return SessionRole.MAIN


def _keep_all(_file: WorkspaceBootstrapFile) -> bool:
    return True


def _keep_minimal(file: WorkspaceBootstrapFile) -> bool:
    # Entries built outside the loader may carry no kind
    return (file.kind or kind_for_filename(file.name)) in _MINIMAL_KINDS


# role -> inclusion predicate
ROLE_FILTERS: dict[SessionRole, Callable[[WorkspaceBootstrapFile], bool]] = {
    SessionRole.MAIN: _keep_all,
    SessionRole.SUBAGENT: _keep_minimal,
    SessionRole.CRON: _keep_minimal,
}


def filter_bootstrap_files_for_session(
    files: Sequence[WorkspaceBootstrapFile], session_key: str | None
) -> list[WorkspaceBootstrapFile]:
    """Return the subset of files the given session should receive, in order."""
    keep = ROLE_FILTERS[parse_session_role(session_key)]
    return [f for f in files if keep(f)]
