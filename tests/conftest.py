import os
import sys
from pathlib import Path

import pytest

POSIX_ONLY = pytest.mark.skipif(sys.platform == "win32", reason="POSIX-only")


def make_executable(directory: Path, name: str, content: str = "") -> Path:
    """Create an executable file `name` in `directory` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content)
    path.chmod(0o755)
    return path


@pytest.fixture
def bin_dir(tmp_path):
    """An empty directory to populate with fake interpreters."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def clean_environ(monkeypatch):
    """Remove every variable the launcher reads from the process environment."""
    for name in list(os.environ):
        if name in ("PATH", "VIRTUAL_ENV", "PY_PYTHON", "PYLAUNCH_DEBUG") or (
            name.startswith("PY_PYTHON")
        ):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
