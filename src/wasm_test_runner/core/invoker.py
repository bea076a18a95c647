from __future__ import annotations

"""
Test Harness Invoker.

Runs the external harness synchronously inside one package directory.
Standard streams are inherited, never captured, so browser test output is
shown live. The call blocks until the harness exits; there is no timeout.
"""

import logging
import os
import subprocess
from typing import List, Sequence

from wasm_test_runner.domain.errors import HarnessNotFoundError
from wasm_test_runner.domain.models import InvocationOutcome, Invoker

logger = logging.getLogger(__name__)


def run_harness(directory: str, command: Sequence[str]) -> InvocationOutcome:
    """
    Execute ``command`` with ``directory`` as its working directory.

    Args:
        directory: Leaf package directory.
        command: Executable followed by its arguments.

    Returns:
        InvocationOutcome: The harness's real exit status.

    Raises:
        HarnessNotFoundError: If the executable cannot be started.
    """
    cmd: List[str] = list(command)
    cwd = os.path.abspath(directory)
    logger.info(f"Testing {cwd}")
    logger.debug(f"Command: {' '.join(cmd)}")

    try:
        completed = subprocess.run(cmd, cwd=cwd, check=False)
    except (FileNotFoundError, PermissionError) as e:
        raise HarnessNotFoundError(cmd, cwd, e.strerror) from e

    outcome = InvocationOutcome(directory=cwd, command=cmd, returncode=completed.returncode)
    if not outcome.ok:
        logger.error(f"Tests failed in {cwd} (exit status {completed.returncode})")
    return outcome


def make_invoker(command: Sequence[str]) -> Invoker:
    """Bind a fixed command line into the single-argument invoker the walker expects."""
    cmd = list(command)

    def invoke(directory: str) -> InvocationOutcome:
        return run_harness(directory, cmd)

    return invoke
