from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Installs a last-resort exception hook and delegates to the CLI controller.
Expected failures are mapped to exit codes by the controller itself; the
hook only sees genuine bugs.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from wasm_test_runner.domain.constants import EXIT_ERROR  # noqa: E402

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception with its traceback and exit with status 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("wasm_test_runner.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (WASM TEST RUNNER)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(EXIT_ERROR)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, runner_home: Optional[str] = None) -> int:
    """
    Run the CLI under the global supervisor.

    Args:
        argv: Command line arguments. Defaults to ``sys.argv[1:]``.
        runner_home: Directory whose ``src`` child is the default workspace.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    from wasm_test_runner.interface.cli.app import main as cli_main
    try:
        return cli_main(argv, runner_home=runner_home)
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
