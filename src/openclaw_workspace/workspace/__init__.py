"""Workspace management — initialization, onboarding state, and bootstrap file loading.

Provides ensure_workspace() for seeding and reconciling a workspace directory,
load_bootstrap_files() for the ordered session document set, and
filter_bootstrap_files_for_session() for role-specific trimming.
"""

from .catalog import (
    DEFAULT_AGENTS_FILENAME,
    DEFAULT_BOOTSTRAP_FILENAME,
    DEFAULT_HEARTBEAT_FILENAME,
    DEFAULT_IDENTITY_FILENAME,
    DEFAULT_MEMORY_ALT_FILENAME,
    DEFAULT_MEMORY_FILENAME,
    DEFAULT_SOUL_FILENAME,
    DEFAULT_TOOLS_FILENAME,
    DEFAULT_USER_FILENAME,
    profile_filename,
)
from .detect import WorkspaceMaturity, classify_workspace
from .loader import WorkspaceBootstrapFile, load_bootstrap_files
from .manager import EnsureResult, WorkspaceManager, ensure_workspace
from .session import SessionRole, filter_bootstrap_files_for_session, parse_session_role
from .state import WorkspaceState, load_state, save_state

__all__ = [
    "DEFAULT_AGENTS_FILENAME",
    "DEFAULT_BOOTSTRAP_FILENAME",
    "DEFAULT_HEARTBEAT_FILENAME",
    "DEFAULT_IDENTITY_FILENAME",
    "DEFAULT_MEMORY_ALT_FILENAME",
    "DEFAULT_MEMORY_FILENAME",
    "DEFAULT_SOUL_FILENAME",
    "DEFAULT_TOOLS_FILENAME",
    "DEFAULT_USER_FILENAME",
    "EnsureResult",
    "SessionRole",
    "WorkspaceBootstrapFile",
    "WorkspaceManager",
    "WorkspaceMaturity",
    "WorkspaceState",
    "classify_workspace",
    "ensure_workspace",
    "filter_bootstrap_files_for_session",
    "load_bootstrap_files",
    "load_state",
    "parse_session_role",
    "profile_filename",
    "save_state",
]
