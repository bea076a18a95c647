from __future__ import annotations

"""
Test-Wasm Driver.

Top-level entry of the discovery engine: enumerates the workspace root and
starts one independent traversal per top-level child.
"""

import logging
import os
from typing import List

from wasm_test_runner.core.walker import discover, walk
from wasm_test_runner.domain.constants import EXIT_OK
from wasm_test_runner.domain.errors import WorkspaceNotFoundError
from wasm_test_runner.domain.models import Invoker
from wasm_test_runner.infra.fs import list_child_dirs, working_directory

logger = logging.getLogger(__name__)


def _top_level_children(root: str) -> List[str]:
    if not os.path.isdir(root):
        raise WorkspaceNotFoundError(root)
    return [os.path.join(root, name) for name in list_child_dirs(root)]


def run_test_wasm(root: str, invoke: Invoker) -> int:
    """
    Run the harness in every leaf package under ``root``.

    Top-level children are processed in name order. The first failing
    invocation ends the run; later siblings are never visited.

    Args:
        root: Absolute workspace root.
        invoke: Runs the harness in a leaf directory.

    Returns:
        int: 0 on success, otherwise the first failing harness's exit status.

    Raises:
        WorkspaceNotFoundError: If ``root`` is not a directory.
    """
    root = os.path.abspath(root)
    children = _top_level_children(root)
    logger.debug(f"Workspace {root}: {len(children)} top-level entries")

    for child in children:
        with working_directory(child):
            failure = walk(child, invoke)
        if failure is not None:
            return failure.exit_status

    logger.info("All wasm test suites passed.")
    return EXIT_OK


def list_test_packages(root: str) -> List[str]:
    """Return every leaf package under ``root`` in run order, without testing."""
    root = os.path.abspath(root)
    packages: List[str] = []
    for child in _top_level_children(root):
        packages.extend(discover(child))
    return packages
