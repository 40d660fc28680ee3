"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import harvest_engine' and
'import run_harvest' work without installing the package.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path, byte for byte, and return its path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write
