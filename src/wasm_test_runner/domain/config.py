from __future__ import annotations

"""
Configuration Domain Management.

Builds the runtime configuration dictionary from layered sources: built-in
defaults, an optional JSON file, environment variables and, finally, CLI
overrides applied by the interface layer. Validation normalizes every key
so downstream components can rely on strict types.
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from wasm_test_runner.domain.constants import (
    DEFAULT_HARNESS,
    DEFAULT_HARNESS_ARGS,
    ENV_HARNESS,
    ENV_HARNESS_ARGS,
    ENV_ROOT,
)
from wasm_test_runner.domain.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_KEYS: Tuple[str, ...] = ("workspace_root", "harness", "harness_args")

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    ``workspace_root`` is left empty: the CLI resolves it relative to the
    runner's own location when no source provides one.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "workspace_root": "",
        "harness": DEFAULT_HARNESS,
        "harness_args": list(DEFAULT_HARNESS_ARGS),
    }


# -----------------------------------------------------------------------------
# Sources
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Read configuration values from a JSON file.

    Unknown keys are dropped with a warning.

    Args:
        path: Path to the JSON document.

    Returns:
        Dict[str, Any]: The recognized subset of the file's keys.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot load config file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a JSON object.")

    out: Dict[str, Any] = {}
    for key, value in data.items():
        if key in CONFIG_KEYS:
            out[key] = value
        else:
            logger.warning(f"Ignoring unknown config key '{key}' in {path}")
    return out


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Collect overrides from ``WASM_TEST_RUNNER_*`` environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Dict[str, Any]: Overrides for every variable that is set and non-empty.
    """
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}

    root = env.get(ENV_ROOT, "").strip()
    if root:
        out["workspace_root"] = root

    harness = env.get(ENV_HARNESS, "").strip()
    if harness:
        out["harness"] = harness

    raw_args = env.get(ENV_HARNESS_ARGS)
    if raw_args is not None and raw_args.strip():
        out["harness_args"] = split_csv(raw_args)

    return out


def merge_config(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into ``base``.

    Args:
        base: Lower-precedence configuration.
        overrides: Higher-precedence values.

    Returns:
        Dict[str, Any]: A new merged dictionary.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Normalize a configuration dictionary.

    Coerces types, fills missing keys with defaults and collects a warning
    for every value that had to be replaced.

    Args:
        config: Raw configuration data.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized config and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        warnings.append(f"Invalid config type: expected dict, received {type(config).__name__}. Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    root = merged.get("workspace_root")
    if root is None:
        root = ""
    if not isinstance(root, str):
        warnings.append(f"workspace_root must be a string, got {type(root).__name__}. Ignoring.")
        root = ""
    merged["workspace_root"] = root.strip()

    harness = merged.get("harness")
    if not isinstance(harness, str) or not harness.strip():
        warnings.append(f"Invalid harness {harness!r}. Falling back to '{DEFAULT_HARNESS}'.")
        harness = DEFAULT_HARNESS
    merged["harness"] = harness.strip()

    args = merged.get("harness_args")
    if isinstance(args, str):
        args = split_csv(args)
    elif isinstance(args, (list, tuple)):
        args = [str(a) for a in args]
    else:
        warnings.append(f"Invalid harness_args {args!r}. Using defaults.")
        args = list(DEFAULT_HARNESS_ARGS)
    merged["harness_args"] = args

    for extra in [k for k in merged if k not in CONFIG_KEYS]:
        warnings.append(f"Unknown config key '{extra}' dropped.")
        del merged[extra]

    return merged, warnings


def harness_command(config: Mapping[str, Any]) -> List[str]:
    """Return the full harness command line described by ``config``."""
    return [config["harness"], *config["harness_args"]]


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def split_csv(value: Optional[str]) -> List[str]:
    """Convert a comma-separated string into a list of trimmed, non-empty items."""
    if value is None:
        return []
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
