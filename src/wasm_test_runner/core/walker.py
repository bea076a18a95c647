from __future__ import annotations

"""
Recursive Workspace Walker.

Drives classification and harness invocation over a package tree. Every
descent happens inside a ``working_directory`` scope, so the process-wide
current directory always matches the node being processed and is restored
on the way back up, including when a run fails or raises.

Failures are returned rather than raised: the first failing invocation
stops the traversal and travels up the call stack to the driver, which
picks the process exit status once every scope has unwound.
"""

import logging
from typing import List, Optional

from wasm_test_runner.core.classifier import classify
from wasm_test_runner.domain.models import InvocationOutcome, Invoker, Leaf, Redirect
from wasm_test_runner.infra.fs import working_directory

logger = logging.getLogger(__name__)


def walk(directory: str, invoke: Invoker) -> Optional[InvocationOutcome]:
    """
    Test every leaf package below ``directory`` in a deterministic order.

    Args:
        directory: Node to process. Must already be the current directory
                   when called through the driver.
        invoke: Runs the harness in a leaf directory.

    Returns:
        Optional[InvocationOutcome]: The first failing outcome, or None
                                     if everything passed.
    """
    node = classify(directory)

    if isinstance(node, Leaf):
        outcome = invoke(node.path)
        return None if outcome.ok else outcome

    if isinstance(node, Redirect):
        with working_directory(node.target):
            return walk(node.target, invoke)

    for child in node.children:
        with working_directory(child):
            failure = walk(child, invoke)
        if failure is not None:
            return failure
    return None


def discover(directory: str) -> List[str]:
    """
    List the leaf packages below ``directory`` in the order ``walk`` visits them.

    Nothing is invoked and the current directory is left untouched.

    Args:
        directory: Node to start from.

    Returns:
        List[str]: Absolute paths of leaf package directories.
    """
    node = classify(directory)

    if isinstance(node, Leaf):
        return [node.path]
    if isinstance(node, Redirect):
        return discover(node.target)

    leaves: List[str] = []
    for child in node.children:
        leaves.extend(discover(child))
    return leaves
