from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides helpers to build package trees and a recording harness stub.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from wasm_test_runner.domain.models import InvocationOutcome  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class RecordingInvoker:
    """
    Harness stand-in that records where it was called.

    Attributes:
        calls: Directories passed to the invoker, in call order.
        cwds: Process working directory observed at each call.
        statuses: Exit status to report per directory name (default 0).
    """

    def __init__(self, statuses: Dict[str, int] | None = None) -> None:
        self.calls: List[str] = []
        self.cwds: List[str] = []
        self.statuses = statuses or {}

    def __call__(self, directory: str) -> InvocationOutcome:
        self.calls.append(directory)
        self.cwds.append(os.getcwd())
        code = self.statuses.get(os.path.basename(directory), 0)
        return InvocationOutcome(directory=directory, command=["fake-harness"], returncode=code)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """
    Return a builder that creates directories under ``tmp_path / 'root'``.

    Each entry is a '/'-separated relative path; a trailing file name is
    created as a file when it contains a dot.
    """

    def _build(paths: Iterable[str]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for rel in paths:
            target = root / rel
            if "." in target.name:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("", encoding="utf-8")
            else:
                target.mkdir(parents=True, exist_ok=True)
        return root.resolve()

    return _build


@pytest.fixture
def recording_invoker() -> RecordingInvoker:
    return RecordingInvoker()


@pytest.fixture(autouse=True)
def restore_cwd() -> Iterable[None]:
    """Guarantee each test starts and ends in the same working directory."""
    start = os.getcwd()
    yield
    os.chdir(start)
