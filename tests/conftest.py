import os
import sys
from pathlib import Path

import pytest

# Ensure project root is first on sys.path so local packages like `core` are used
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def write_tree(tmp_path):
    """Create files under tmp_path from a {relative_path: text} mapping."""
    def _write(files):
        for rel, text in files.items():
            path = Path(tmp_path, rel)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path
    return _write
