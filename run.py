"""
Workspace launcher.

Kept at the workspace root so that ``python run.py --test-wasm`` tests the
packages under ``./src`` regardless of the directory it is called from.
"""

import os
import sys

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

from wasm_test_runner.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(runner_home=ROOT_DIR))
