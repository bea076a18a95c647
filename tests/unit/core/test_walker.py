from __future__ import annotations

"""
Unit tests for the Recursive Walker.

Verifies invocation order, working-directory scoping at every depth,
early stop on the first failure and the side-effect-free discovery mode.
"""

import os

import pytest

from wasm_test_runner.core.walker import discover, walk
from wasm_test_runner.domain.models import InvocationOutcome


def test_walk_empty_directory_invokes_nothing(make_tree, recording_invoker) -> None:
    root = make_tree(["empty"])

    assert walk(str(root / "empty"), recording_invoker) is None
    assert recording_invoker.calls == []


def test_walk_leaf_invokes_once(make_tree, recording_invoker) -> None:
    root = make_tree(["pkg/src"])
    os.chdir(root / "pkg")

    assert walk(str(root / "pkg"), recording_invoker) is None
    assert recording_invoker.calls == [str(root / "pkg")]


def test_walk_cwd_matches_leaf_at_any_depth(make_tree, recording_invoker) -> None:
    root = make_tree([
        "top/a/src",
        "top/b/impl/src",
        "top/c/d/e/src",
        "top/c/f/impl/g/src",
    ])
    os.chdir(root / "top")

    walk(str(root / "top"), recording_invoker)

    assert recording_invoker.calls == [
        str(root / "top" / "a"),
        str(root / "top" / "b" / "impl"),
        str(root / "top" / "c" / "d" / "e"),
        str(root / "top" / "c" / "f" / "impl" / "g"),
    ]
    assert recording_invoker.cwds == recording_invoker.calls


def test_walk_restores_cwd_after_success(make_tree, recording_invoker) -> None:
    root = make_tree(["top/x/impl/y/src", "top/z"])
    os.chdir(root / "top")

    walk(str(root / "top"), recording_invoker)

    assert os.getcwd() == str(root / "top")


def test_walk_stops_at_first_failure(make_tree, recording_invoker) -> None:
    root = make_tree(["top/one/src", "top/two/src", "top/three/src"])
    recording_invoker.statuses["two"] = 3
    os.chdir(root / "top")

    failure = walk(str(root / "top"), recording_invoker)

    assert isinstance(failure, InvocationOutcome)
    assert failure.returncode == 3
    assert failure.directory == str(root / "top" / "two")
    # 'one' < 'three' < 'two' lexicographically, so 'two' is visited last
    assert [os.path.basename(c) for c in recording_invoker.calls] == ["one", "three", "two"]
    assert os.getcwd() == str(root / "top")


def test_walk_failure_skips_later_siblings(make_tree, recording_invoker) -> None:
    root = make_tree(["top/a/src", "top/b/src", "top/c/src"])
    recording_invoker.statuses["b"] = 3

    failure = walk(str(root / "top"), recording_invoker)

    assert failure is not None and failure.returncode == 3
    assert [os.path.basename(c) for c in recording_invoker.calls] == ["a", "b"]


def test_walk_restores_cwd_when_invoker_raises(make_tree) -> None:
    root = make_tree(["top/pkg/src"])
    os.chdir(root)

    def boom(directory: str) -> InvocationOutcome:
        raise RuntimeError("harness exploded")

    with pytest.raises(RuntimeError):
        walk(str(root / "top"), boom)

    assert os.getcwd() == str(root)


def test_discover_lists_leaves_without_side_effects(make_tree) -> None:
    root = make_tree(["top/b/impl/src", "top/a/src", "top/c/empty"])
    os.chdir(root)

    leaves = discover(str(root / "top"))

    assert leaves == [str(root / "top" / "a"), str(root / "top" / "b" / "impl")]
    assert os.getcwd() == str(root)
