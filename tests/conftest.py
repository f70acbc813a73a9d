"""Root conftest — isolates environment variables BEFORE any module import.

Settings read OPENCLAW_HOME / OPENCLAW_PROFILE from the process environment,
so real values must not leak into tests.
"""

import os
import tempfile

# Force-set (not setdefault) to prevent real env vars from leaking into tests
os.environ["OPENCLAW_HOME"] = tempfile.mkdtemp(prefix="openclaw-test-")
os.environ.pop("OPENCLAW_PROFILE", None)
