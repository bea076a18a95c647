from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the scoped working-directory switch used by the traversal engine,
immediate-child directory listing and workspace root resolution. Acts as
the only place in the package that reads or mutates the process-wide
current directory.
"""

import logging
import os
from contextlib import contextmanager
from typing import Iterator, List, Optional

from wasm_test_runner.domain.constants import WORKSPACE_ROOT_NAME

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SCOPED WORKING DIRECTORY
# -----------------------------------------------------------------------------

@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """
    Temporarily switch the process-wide current directory.

    The previous directory is restored when the block exits, whether it
    completes or raises. Nested blocks unwind in LIFO order, so every inner
    scope restores its own predecessor before the enclosing one does. Not
    safe to interleave across threads: the current directory is global.

    Args:
        path: Directory to enter.

    Yields:
        str: The absolute path of the entered directory.
    """
    previous = os.getcwd()
    target = os.path.abspath(path)
    os.chdir(target)
    logger.debug(f"Entered {target}")
    try:
        yield target
    finally:
        os.chdir(previous)
        logger.debug(f"Restored {previous}")


# -----------------------------------------------------------------------------
# DIRECTORY LISTING
# -----------------------------------------------------------------------------

def list_child_dirs(path: str) -> List[str]:
    """
    List the names of the immediate subdirectories of ``path``.

    Files and other non-directory entries are ignored; symlinks pointing to
    directories count as directories. Errors from the OS propagate.

    Args:
        path: Directory to inspect.

    Returns:
        List[str]: Subdirectory names, sorted lexicographically.
    """
    with os.scandir(path) as it:
        names = [entry.name for entry in it if entry.is_dir()]
    names.sort()
    return names


# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Expands ``~`` and environment variables. Reverts to ``fallback`` when the
    input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when ``path`` is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def resolve_workspace_root(anchor: str, root_name: str = WORKSPACE_ROOT_NAME) -> str:
    """
    Build the absolute workspace root from the runner's location.

    The result depends only on ``anchor``, never on the caller's current
    directory.

    Args:
        anchor: Directory the runner is installed in.
        root_name: Name of the top-level packages directory below ``anchor``.

    Returns:
        str: Absolute path of the workspace root.
    """
    return os.path.abspath(os.path.join(anchor, root_name))
