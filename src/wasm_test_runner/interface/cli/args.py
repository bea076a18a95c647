from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed namespaces into
configuration overrides. Unrecognized arguments are tolerated: the runner
is usually invoked from wrapper scripts that forward their whole argv.
"""

import argparse
from typing import Any, Dict, List, Optional, Tuple

from wasm_test_runner.domain.config import split_csv
from wasm_test_runner.domain.constants import TEST_WASM_FLAG

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the runner.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wasm-test-runner",
        description="Run the WebAssembly test suites of every package in the workspace.",
    )

    p.add_argument(
        TEST_WASM_FLAG,
        dest="test_wasm",
        action="store_true",
        help="Run wasm tests for all packages. Without it the command does nothing.",
    )

    # --- Workspace and Harness ---
    p.add_argument(
        "--root",
        dest="workspace_root",
        default=None,
        help="Workspace directory holding the packages (default: 'src' next to the runner).",
    )
    p.add_argument(
        "--harness",
        dest="harness",
        default=None,
        help="Test harness executable (default: wasm-pack).",
    )
    p.add_argument(
        "--harness-args",
        dest="harness_args",
        default=None,
        help="Comma-separated harness arguments (default: test,--headless,--chrome).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with workspace_root, harness and harness_args settings.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="List the packages that would be tested and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse ``argv`` keeping unknown arguments aside instead of failing.

    Returns:
        Tuple[argparse.Namespace, List[str]]: Known options and the ignored rest.
    """
    return build_parser().parse_known_args(argv)

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None so the merge step keeps lower-precedence
    values.
    """
    overrides: Dict[str, Any] = {
        "workspace_root": args.workspace_root,
        "harness": args.harness,
        "harness_args": None,
    }
    if args.harness_args is not None:
        overrides["harness_args"] = split_csv(args.harness_args)
    return overrides
