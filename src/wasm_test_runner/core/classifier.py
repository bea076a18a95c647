from __future__ import annotations

"""
Directory Classification Service.

Decides how the traversal treats a single directory by looking at the names
of its immediate subdirectories. Rules apply in strict priority order:
a ``src`` child makes the directory a testable leaf, otherwise an ``impl``
child redirects one level down, otherwise every subdirectory is visited.
"""

import logging
import os

from wasm_test_runner.domain.constants import IMPL_DIR_NAME, SOURCE_DIR_NAME
from wasm_test_runner.domain.models import Classification, Container, Leaf, Redirect
from wasm_test_runner.infra.fs import list_child_dirs

logger = logging.getLogger(__name__)


def classify(directory: str) -> Classification:
    """
    Classify ``directory`` from its immediate child directories.

    The result is computed fresh on every call. A redirect target is not
    trusted to be a leaf; callers must classify it again.

    Args:
        directory: Directory to inspect.

    Returns:
        Classification: ``Leaf``, ``Redirect`` or ``Container``.

    Raises:
        OSError: If the directory cannot be listed.
    """
    path = os.path.abspath(directory)
    names = list_child_dirs(path)

    if SOURCE_DIR_NAME in names:
        result: Classification = Leaf(path)
    elif IMPL_DIR_NAME in names:
        result = Redirect(path, os.path.join(path, IMPL_DIR_NAME))
    else:
        result = Container(path, tuple(os.path.join(path, n) for n in names))

    logger.debug(f"{path} -> {type(result).__name__}")
    return result
