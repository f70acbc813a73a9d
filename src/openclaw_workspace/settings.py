"""Environment settings — resolves the home dir, profile, and default workspace.

Reads OPENCLAW_HOME / OPENCLAW_PROFILE from the process environment, after
loading optional ``.env`` files (cwd first, then ``<home>/.openclaw/.env``).
Variables already present in the environment always win over ``.env`` values.

Key entities:
  - WorkspaceSettings: frozen dataclass with resolved paths for one process.
  - load_settings(): parse environment (+ .env) → WorkspaceSettings.
  - resolve_default_workspace_dir(): default workspace path for an env mapping.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .utils import resolve_user_path

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "OPENCLAW_HOME"
PROFILE_ENV_VAR = "OPENCLAW_PROFILE"

# Profile selector value that means "no profile"
DEFAULT_PROFILE = "default"

# Hidden per-home and per-workspace config directory name
CONFIG_DIRNAME = ".openclaw"


def resolve_home_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the home directory: OPENCLAW_HOME > HOME > Path.home()."""
    if env is None:
        env = os.environ
    override = env.get(HOME_ENV_VAR, "").strip()
    if override:
        if override.startswith("~"):
            base = env.get("HOME", "").strip() or str(Path.home())
            override = base + override[1:]
        return resolve_user_path(override)
    home = env.get("HOME", "").strip()
    if home:
        return resolve_user_path(home)
    return Path.home()


def resolve_profile(env: Mapping[str, str] | None = None) -> str | None:
    """Return the active profile selector, or None when unset or "default"."""
    if env is None:
        env = os.environ
    profile = env.get(PROFILE_ENV_VAR, "").strip()
    if not profile or profile.lower() == DEFAULT_PROFILE:
        return None
    return profile


def resolve_default_workspace_dir(env: Mapping[str, str] | None = None) -> Path:
    """Default workspace: <home>/.openclaw/workspace[-<profile>]."""
    home = resolve_home_dir(env)
    profile = resolve_profile(env)
    if profile:
        return home / CONFIG_DIRNAME / f"workspace-{profile}"
    return home / CONFIG_DIRNAME / "workspace"


@dataclass(frozen=True)
class WorkspaceSettings:
    """Resolved settings for the current process.

    All paths are absolute; no further env lookups needed.
    """

    home_dir: Path
    workspace_dir: Path
    profile: str | None = None

    @property
    def config_dir(self) -> Path:
        """Home-level config directory (holds the optional .env)."""
        return self.home_dir / CONFIG_DIRNAME

    @property
    def state_dir(self) -> Path:
        """Workspace-level hidden directory holding workspace-state.json."""
        return self.workspace_dir / CONFIG_DIRNAME


def _load_env_files(env: Mapping[str, str]) -> None:
    """Load cwd .env, then <home>/.openclaw/.env, without overriding."""
    local_env = Path(".env")
    if local_env.is_file():
        load_dotenv(local_env, override=False)
        logger.debug("Loaded %s", local_env.resolve())
    global_env = resolve_home_dir(env) / CONFIG_DIRNAME / ".env"
    if global_env.is_file():
        load_dotenv(global_env, override=False)
        logger.debug("Loaded %s", global_env)


def load_settings(
    env: Mapping[str, str] | None = None,
    workspace_dir: str | Path | None = None,
) -> WorkspaceSettings:
    """Resolve settings from an env mapping.

    Args:
        env: Environment mapping. When None, ``.env`` files are loaded into
             ``os.environ`` first and ``os.environ`` is used.
        workspace_dir: Explicit workspace path; overrides the default.

    Returns:
        WorkspaceSettings with absolute paths.
    """
    if env is None:
        _load_env_files(os.environ)
        env = os.environ

    home_dir = resolve_home_dir(env)
    if workspace_dir is not None:
        resolved_workspace = resolve_user_path(workspace_dir)
    else:
        resolved_workspace = resolve_default_workspace_dir(env)

    return WorkspaceSettings(
        home_dir=home_dir,
        workspace_dir=resolved_workspace,
        profile=resolve_profile(env),
    )
