"""Module-name derivation from repository paths.

Both helpers expect forward-slash separated paths and raise
``ModulePathError`` instead of guessing when the expected segment is absent.
"""

from __future__ import annotations

from ci_filter.constants import SRC_MARKER
from ci_filter.errors import ModulePathError


def to_posix(path: str) -> str:
    return path.replace("\\", "/")


def module_from_changed_path(path: str) -> str:
    """Return the segment after the first ``/``: ``src/Storage/x.cs`` -> ``Storage``."""
    _, sep, rest = path.partition("/")
    if not sep:
        raise ModulePathError(path, "no '/' separator")
    module = rest.split("/", 1)[0]
    if not module:
        raise ModulePathError(path, "empty module segment")
    return module


def module_from_project_path(path: str) -> str:
    """Return the segment after the first ``src/`` marker of a project path."""
    normalized = to_posix(path)
    _, sep, rest = normalized.partition(SRC_MARKER)
    if not sep:
        raise ModulePathError(path, f"no '{SRC_MARKER}' marker")
    module = rest.split("/", 1)[0]
    if not module:
        raise ModulePathError(path, "empty module segment")
    return module
