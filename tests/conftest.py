# tests/conftest.py

import importlib
import sys
import tempfile
import zipfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def import_from(monkeypatch):
    """Import a module from an extra sys.path entry, dropping it again afterwards."""
    roots: set[str] = set()

    def _import(entry: Path, name: str):
        monkeypatch.syspath_prepend(str(entry))
        roots.add(name.split(".")[0])
        return importlib.import_module(name)

    yield _import

    for key in list(sys.modules):
        if key.split(".")[0] in roots:
            del sys.modules[key]


@pytest.fixture
def fs_package(tmp_path):
    """A two-level package laid out on disk: <root>/<name>/sub/hoge.py."""

    def _make(name: str) -> Path:
        root = tmp_path / "root"
        sub = root / name / "sub"
        sub.mkdir(parents=True)
        (root / name / "__init__.py").write_text("")
        (sub / "__init__.py").write_text("")
        (sub / "hoge.py").write_text("class Hoge:\n    def run(self):\n        return 1\n\n\ndef helper():\n    return 2\n")
        return root

    return _make


@pytest.fixture
def zip_package(tmp_path):
    """The same package layout packed into a zip archive."""

    def _make(name: str) -> Path:
        archive = tmp_path / f"{name}.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr(f"{name}/__init__.py", "")
            zf.writestr(f"{name}/hoge.py", "class Hoge:\n    pass\n")
        return archive

    return _make
