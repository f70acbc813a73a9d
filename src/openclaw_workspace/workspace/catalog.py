"""Bootstrap file catalog — canonical filenames and the ordered entry table.

Each BootstrapFileSpec describes one candidate document the loader may emit:
  - required entries are always emitted (with missing=True if absent),
  - conditional entries carry an activation predicate and/or an ordered list
    of candidate filenames; the first existing candidate wins, and an
    inapplicable entry is omitted entirely.

Key entities: BootstrapFileSpec, BOOTSTRAP_CATALOG.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from ..settings import resolve_profile

logger = logging.getLogger(__name__)

DEFAULT_AGENTS_FILENAME = "AGENTS.md"
DEFAULT_SOUL_FILENAME = "SOUL.md"
DEFAULT_TOOLS_FILENAME = "TOOLS.md"
DEFAULT_IDENTITY_FILENAME = "IDENTITY.md"
DEFAULT_USER_FILENAME = "USER.md"
DEFAULT_HEARTBEAT_FILENAME = "HEARTBEAT.md"
DEFAULT_BOOTSTRAP_FILENAME = "BOOTSTRAP.md"
DEFAULT_MEMORY_FILENAME = "MEMORY.md"
DEFAULT_MEMORY_ALT_FILENAME = "memory.md"

MEMORY_DIRNAME = "memory"

PROFILE_FILENAME_PREFIX = "PROFILE-"

# Catalog keys (also exposed on loaded files as ``kind``)
KIND_AGENTS = "agents"
KIND_SOUL = "soul"
KIND_TOOLS = "tools"
KIND_IDENTITY = "identity"
KIND_USER = "user"
KIND_PROFILE = "profile"
KIND_HEARTBEAT = "heartbeat"
KIND_BOOTSTRAP = "bootstrap"
KIND_MEMORY = "memory"

EnvPredicate = Callable[[Mapping[str, str]], bool]
EnvFilenames = Callable[[Mapping[str, str]], tuple[str, ...]]


def profile_filename(selector: str) -> str:
    """Return the profile document name for a selector, e.g. PROFILE-mini1.md."""
    return f"{PROFILE_FILENAME_PREFIX}{selector}.md"


def _is_safe_selector(selector: str) -> bool:
    return not ("/" in selector or "\\" in selector or selector in (".", ".."))


def _profile_active(env: Mapping[str, str]) -> bool:
    return resolve_profile(env) is not None


def _profile_filenames(env: Mapping[str, str]) -> tuple[str, ...]:
    selector = resolve_profile(env)
    if selector is None:
        return ()
    if not _is_safe_selector(selector):
        logger.warning("Ignoring profile selector with path separators: %r", selector)
        return ()
    return (profile_filename(selector),)


@dataclass(frozen=True)
class BootstrapFileSpec:
    """One static catalog entry.

    ``filenames`` is the ordered fallback chain; ``resolve_filenames`` replaces
    it for entries whose name depends on the environment. ``is_active`` gates
    conditional entries before any filesystem access.
    """

    key: str
    filenames: tuple[str, ...] = ()
    required: bool = True
    is_active: EnvPredicate | None = None
    resolve_filenames: EnvFilenames | None = None

    def applies(self, env: Mapping[str, str]) -> bool:
        return self.is_active is None or self.is_active(env)

    def candidates(self, env: Mapping[str, str]) -> tuple[str, ...]:
        if self.resolve_filenames is not None:
            return self.resolve_filenames(env)
        return self.filenames


# Load order for session injection
BOOTSTRAP_CATALOG: tuple[BootstrapFileSpec, ...] = (
    BootstrapFileSpec(KIND_AGENTS, (DEFAULT_AGENTS_FILENAME,)),
    BootstrapFileSpec(KIND_SOUL, (DEFAULT_SOUL_FILENAME,)),
    BootstrapFileSpec(KIND_TOOLS, (DEFAULT_TOOLS_FILENAME,)),
    BootstrapFileSpec(KIND_IDENTITY, (DEFAULT_IDENTITY_FILENAME,)),
    BootstrapFileSpec(KIND_USER, (DEFAULT_USER_FILENAME,)),
    BootstrapFileSpec(
        KIND_PROFILE,
        required=False,
        is_active=_profile_active,
        resolve_filenames=_profile_filenames,
    ),
    BootstrapFileSpec(KIND_HEARTBEAT, (DEFAULT_HEARTBEAT_FILENAME,)),
    BootstrapFileSpec(KIND_BOOTSTRAP, (DEFAULT_BOOTSTRAP_FILENAME,)),
    BootstrapFileSpec(
        KIND_MEMORY,
        (DEFAULT_MEMORY_FILENAME, DEFAULT_MEMORY_ALT_FILENAME),
        required=False,
    ),
)


_KIND_BY_FILENAME: dict[str, str] = {
    name: spec.key for spec in BOOTSTRAP_CATALOG for name in spec.filenames
}


def kind_for_filename(name: str) -> str:
    """Catalog key for a document filename, or "" if it is not in the catalog."""
    if name.startswith(PROFILE_FILENAME_PREFIX) and name.endswith(".md"):
        return KIND_PROFILE
    return _KIND_BY_FILENAME.get(name, "")
