from __future__ import annotations

"""
Global Constants.

Directory-layout markers and harness defaults shared by the discovery
engine, the configuration layer and the CLI.
"""

from typing import List

# -----------------------------------------------------------------------------
# WORKSPACE LAYOUT
# -----------------------------------------------------------------------------

# A package directory owning this child is tested directly.
SOURCE_DIR_NAME: str = "src"

# A wrapper directory owning this child is redirected one level down.
IMPL_DIR_NAME: str = "impl"

# Top-level directory scanned by the driver, relative to the runner location.
WORKSPACE_ROOT_NAME: str = "src"

# -----------------------------------------------------------------------------
# TEST HARNESS
# -----------------------------------------------------------------------------

DEFAULT_HARNESS: str = "wasm-pack"
DEFAULT_HARNESS_ARGS: List[str] = ["test", "--headless", "--chrome"]

# -----------------------------------------------------------------------------
# CLI / ENVIRONMENT
# -----------------------------------------------------------------------------

TEST_WASM_FLAG: str = "--test-wasm"

ENV_ROOT: str = "WASM_TEST_RUNNER_ROOT"
ENV_HARNESS: str = "WASM_TEST_RUNNER_HARNESS"
ENV_HARNESS_ARGS: str = "WASM_TEST_RUNNER_HARNESS_ARGS"

# -----------------------------------------------------------------------------
# EXIT CODES
# -----------------------------------------------------------------------------

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_USAGE: int = 2
EXIT_HARNESS_NOT_FOUND: int = 127
EXIT_INTERRUPTED: int = 130
