# FILE: tests/conftest.py
"""
Pytest configuration for the minigrep test suite.

Provides small directory-tree fixtures shared by the walker, engine and
command line tests.
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write text (or bytes) to a path relative to tmp_path, creating parents."""
    def _write(relative: str, content) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def sample_tree(tmp_path, write_file):
    """
    tmp_path/
        a.txt           "foo\\nbar\\n"
        b.txt           "nothing here\\n"
        sub/
            c.txt       "foobar\\nbaz\\n"
            deeper/
                d.txt   "FOO\\n"
        z.txt           "last foo\\n"
    """
    write_file("a.txt", "foo\nbar\n")
    write_file("b.txt", "nothing here\n")
    write_file("sub/c.txt", "foobar\nbaz\n")
    write_file("sub/deeper/d.txt", "FOO\n")
    write_file("z.txt", "last foo\n")
    return tmp_path
