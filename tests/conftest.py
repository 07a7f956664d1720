import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture
def checker_home(tmp_path):
    """Install layout: checkers.jar with javac.jar and both jdk jars under binary/."""
    (tmp_path / "checkers.jar").write_bytes(b"")
    binary = tmp_path / "binary"
    binary.mkdir()
    for name in ("javac.jar", "jdk6.jar", "jdk7.jar"):
        (binary / name).write_bytes(b"")
    return tmp_path
