from __future__ import annotations

"""
Domain Exception Hierarchy.

All failures raised deliberately by the runner derive from RunnerError so
the CLI layer can map them onto process exit codes in a single place.
"""

from typing import List, Optional


class RunnerError(Exception):
    """Base class for every error raised by the test runner."""


class ConfigError(RunnerError):
    """Raised when a configuration source cannot be read or parsed."""


class WorkspaceNotFoundError(RunnerError):
    """Raised when the workspace root directory does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Workspace root not found: {path}")
        self.path = path


class HarnessNotFoundError(RunnerError):
    """
    Raised when the external test harness cannot be started at all.

    Attributes:
        command: The full command line that failed to launch.
        directory: The package directory the harness was meant to run in.
    """

    def __init__(self, command: List[str], directory: str, reason: Optional[str] = None) -> None:
        msg = f"Unable to launch test harness '{command[0]}' in {directory}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.command = list(command)
        self.directory = directory
