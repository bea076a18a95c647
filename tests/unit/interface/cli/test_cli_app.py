from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Exercises the full controller with a stubbed harness: flag gating,
configuration precedence, dry-run listing and exit-code mapping.
"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from wasm_test_runner.domain.errors import HarnessNotFoundError
from wasm_test_runner.interface.cli.app import main

APP = "wasm_test_runner.interface.cli.app"


@pytest.fixture
def workspace(make_tree) -> Path:
    """A runner home whose 'src' holds one leaf, one redirect and one empty dir."""
    root = make_tree(["src/a/src", "src/b/impl/src", "src/c"])
    return root


def test_no_flag_is_noop(workspace: Path, recording_invoker) -> None:
    with patch(f"{APP}.make_invoker", return_value=recording_invoker) as mock_make:
        assert main(["--debug", "whatever"], runner_home=str(workspace), environ={}) == 0

    mock_make.assert_not_called()
    assert recording_invoker.calls == []


def test_default_root_is_relative_to_runner_home(workspace: Path, recording_invoker, tmp_path: Path) -> None:
    os.chdir(tmp_path)
    with patch(f"{APP}.make_invoker", return_value=recording_invoker):
        status = main(["--test-wasm"], runner_home=str(workspace), environ={})

    assert status == 0
    assert recording_invoker.calls == [
        str(workspace / "src" / "a"),
        str(workspace / "src" / "b" / "impl"),
    ]


def test_failing_harness_status_is_returned(workspace: Path, recording_invoker) -> None:
    recording_invoker.statuses["a"] = 3
    with patch(f"{APP}.make_invoker", return_value=recording_invoker):
        status = main(["--test-wasm"], runner_home=str(workspace), environ={})

    assert status == 3
    assert len(recording_invoker.calls) == 1


def test_harness_command_precedence(workspace: Path, recording_invoker, tmp_path: Path) -> None:
    conf_file = tmp_path / "runner.json"
    conf_file.write_text(json.dumps({"harness": "from-file", "harness_args": ["file-arg"]}), encoding="utf-8")
    env = {"WASM_TEST_RUNNER_HARNESS": "from-env"}

    with patch(f"{APP}.make_invoker", return_value=recording_invoker) as mock_make:
        main(
            ["--test-wasm", "--config", str(conf_file), "--harness-args", "cli-arg"],
            runner_home=str(workspace),
            environ=env,
        )

    mock_make.assert_called_once_with(["from-env", "cli-arg"])


def test_root_option_overrides_home(make_tree, recording_invoker, tmp_path: Path) -> None:
    other = make_tree(["elsewhere/pkg/src"]) / "elsewhere"
    with patch(f"{APP}.make_invoker", return_value=recording_invoker):
        status = main(["--test-wasm", "--root", str(other)], runner_home=str(tmp_path), environ={})

    assert status == 0
    assert recording_invoker.calls == [str(other / "pkg")]


def test_dry_run_lists_packages(workspace: Path, capsys) -> None:
    with patch(f"{APP}.run_test_wasm") as mock_run:
        status = main(["--test-wasm", "--dry-run"], runner_home=str(workspace), environ={})

    assert status == 0
    mock_run.assert_not_called()
    out = capsys.readouterr().out.splitlines()
    assert out == [str(workspace / "src" / "a"), str(workspace / "src" / "b" / "impl")]


def test_missing_root_is_usage_error(tmp_path: Path) -> None:
    assert main(["--test-wasm"], runner_home=str(tmp_path / "nowhere"), environ={}) == 2


def test_bad_config_file_is_usage_error(workspace: Path, tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")

    assert main(["--test-wasm", "--config", str(bad)], runner_home=str(workspace), environ={}) == 2


def test_missing_harness_maps_to_127(workspace: Path) -> None:
    def invoke(directory: str):
        raise HarnessNotFoundError(["wasm-pack"], directory, "No such file or directory")

    with patch(f"{APP}.make_invoker", return_value=invoke):
        assert main(["--test-wasm"], runner_home=str(workspace), environ={}) == 127


def test_keyboard_interrupt_maps_to_130(workspace: Path) -> None:
    def invoke(directory: str):
        raise KeyboardInterrupt

    start = os.getcwd()
    with patch(f"{APP}.make_invoker", return_value=invoke):
        assert main(["--test-wasm"], runner_home=str(workspace), environ={}) == 130
    assert os.getcwd() == start


def test_no_root_without_home_is_usage_error(make_tree, recording_invoker, capsys) -> None:
    """Neither the launcher path nor the current directory is used to guess a root."""
    caller = make_tree(["src/pkg/src"])
    os.chdir(caller)

    with patch.object(sys, "argv", ["/opt/venv/bin/wasm-test-runner", "--test-wasm"]), \
            patch(f"{APP}.make_invoker", return_value=recording_invoker):
        status = main(["--test-wasm"], environ={})

    assert status == 2
    assert recording_invoker.calls == []
    assert "No workspace root configured" in capsys.readouterr().err


def test_env_root_used_without_home(make_tree, recording_invoker) -> None:
    root = make_tree(["pkg/src"])
    with patch(f"{APP}.make_invoker", return_value=recording_invoker):
        status = main(["--test-wasm"], environ={"WASM_TEST_RUNNER_ROOT": str(root)})

    assert status == 0
    assert recording_invoker.calls == [str(root / "pkg")]
