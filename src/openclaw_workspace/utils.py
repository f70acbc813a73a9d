"""Shared helpers: user path expansion and atomic JSON writes."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def resolve_user_path(path: str | Path) -> Path:
    """Expand ``~`` and return an absolute path (symlinks left as-is)."""
    return Path(os.path.abspath(Path(path).expanduser()))


def atomic_write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON to ``path`` via a temp file + rename.

    Creates parent directories as needed. The temp file lives next to the
    target so ``os.replace`` stays on one filesystem.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"

    fd, tmp_name = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
