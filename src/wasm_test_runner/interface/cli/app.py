from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration layering (defaults, JSON file, environment, CLI overrides),
test-run execution and the mapping of every outcome onto an exit status.
"""

import sys
from typing import Any, Dict, List, Mapping, Optional

from wasm_test_runner.core.driver import list_test_packages, run_test_wasm
from wasm_test_runner.core.invoker import make_invoker
from wasm_test_runner.domain.config import (
    config_from_env,
    get_default_config,
    harness_command,
    load_config,
    merge_config,
    validate_config,
)
from wasm_test_runner.domain.constants import (
    ENV_ROOT,
    EXIT_ERROR,
    EXIT_HARNESS_NOT_FOUND,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
)
from wasm_test_runner.domain.errors import ConfigError, HarnessNotFoundError, WorkspaceNotFoundError
from wasm_test_runner.infra.fs import normalize_path, resolve_workspace_root
from wasm_test_runner.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from wasm_test_runner.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        *,
        runner_home: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to ``sys.argv[1:]``.
        runner_home: Directory the runner is installed in; the default
                     workspace root is resolved below it. When None, a
                     root must come from --root, the environment or --config.
        environ: Environment used for overrides. Defaults to ``os.environ``.

    Returns:
        int: Process exit code.
    """
    args, ignored = cli_args.parse_args(argv)

    if not args.test_wasm:
        return EXIT_OK

    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=args.log_file,
    ))
    try:
        return _run(args, ignored, runner_home, environ)
    finally:
        shutdown_logging()


def _run(
        args: Any,
        ignored: List[str],
        runner_home: Optional[str],
        environ: Optional[Mapping[str, str]],
) -> int:
    if ignored:
        logger.debug(f"Ignoring unrecognized arguments: {' '.join(ignored)}")

    # 1. Resolve configuration hierarchy
    try:
        conf = _resolve_config(args, runner_home, environ)
    except ConfigError as e:
        logger.error(str(e))
        return EXIT_USAGE

    root = conf["workspace_root"]
    logger.debug(f"Workspace root: {root}")

    # 2. Discovery-only mode
    if args.dry_run:
        try:
            packages = list_test_packages(root)
        except WorkspaceNotFoundError as e:
            logger.error(str(e))
            return EXIT_USAGE
        for path in packages:
            print(path)
        return EXIT_OK

    # 3. Test execution
    invoke = make_invoker(harness_command(conf))
    try:
        status = run_test_wasm(root, invoke)
    except WorkspaceNotFoundError as e:
        logger.error(str(e))
        return EXIT_USAGE
    except HarnessNotFoundError as e:
        logger.error(str(e))
        return EXIT_HARNESS_NOT_FOUND
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.critical(f"Filesystem error during traversal: {e}", exc_info=True)
        return EXIT_ERROR

    if status != EXIT_OK:
        logger.error(f"Stopping: wasm tests failed with exit status {status}.")
    return status

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _resolve_config(
        args: Any,
        runner_home: Optional[str],
        environ: Optional[Mapping[str, str]],
) -> Dict[str, Any]:
    """
    Layer defaults < config file < environment < CLI flags and validate.

    Without an explicit root the workspace is ``<runner_home>/src``. Packaged
    entry points have no meaningful home, so they must be given a root.

    Raises:
        ConfigError: If neither a root nor a runner home is available.
    """
    conf = get_default_config()
    if args.config_file:
        conf = merge_config(conf, load_config(args.config_file))
    conf = merge_config(conf, config_from_env(environ))
    conf = merge_config(conf, cli_args.args_to_overrides(args))

    clean, warnings = validate_config(conf)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if clean["workspace_root"]:
        clean["workspace_root"] = normalize_path(clean["workspace_root"], "")
    elif runner_home is not None:
        clean["workspace_root"] = resolve_workspace_root(runner_home)
    else:
        raise ConfigError(
            f"No workspace root configured: pass --root, set {ENV_ROOT}, "
            "or launch through run.py at the workspace root."
        )
    return clean

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
