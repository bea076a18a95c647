from __future__ import annotations

"""
Discovery Domain Data Models.

Defines the classification outcomes produced for each inspected directory
and the result of a single harness invocation. All models are immutable and
computed on demand; nothing here is cached between runs.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Tuple, Union

# -----------------------------------------------------------------------------
# CLASSIFICATION RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """A package directory that is tested in place."""
    path: str


@dataclass(frozen=True)
class Redirect:
    """
    A wrapper directory whose real package lives one level below.

    Attributes:
        path: The wrapper directory.
        target: The directory to classify next (``<path>/impl``).
    """
    path: str
    target: str


@dataclass(frozen=True)
class Container:
    """
    A directory whose subdirectories are classified independently.

    Attributes:
        path: The container directory.
        children: Absolute paths of the subdirectories, sorted by name.
    """
    path: str
    children: Tuple[str, ...] = field(default_factory=tuple)


Classification = Union[Leaf, Redirect, Container]

# -----------------------------------------------------------------------------
# INVOCATION RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InvocationOutcome:
    """
    Exit status of one harness run.

    Attributes:
        directory: Working directory the harness ran in.
        command: Command line that was executed.
        returncode: Raw status reported by the child process. Negative
                    values mean the child was killed by that signal.
    """
    directory: str
    command: List[str]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def exit_status(self) -> int:
        """Status suitable for ``sys.exit``, using the shell's 128+N rule for signals."""
        if self.returncode < 0:
            return 128 + abs(self.returncode)
        return self.returncode


# Callable that runs the harness in a leaf package directory.
Invoker = Callable[[str], InvocationOutcome]
