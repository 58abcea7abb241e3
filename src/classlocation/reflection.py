# src/classlocation/reflection.py
"""Runtime reflection used by the resolver.

The resolver only needs four questions answered about a loaded unit; they are
gathered behind :class:`Reflection` so the resolution logic can run against a
stub as well as against the live interpreter.
"""

from __future__ import annotations

import os
import sys
import zipimport
from importlib.machinery import BYTECODE_SUFFIXES, EXTENSION_SUFFIXES, SOURCE_SUFFIXES
from pathlib import PurePath
from types import ModuleType
from typing import Any, Protocol
from urllib.parse import quote

from .catalog import ARCHIVE_SEPARATOR, PathPrefix, PathSuffix


class Reflection(Protocol):
    def code_source(self, unit: Any) -> str | None:
        """Return the embedded origin of ``unit`` (its sys.path entry), if known."""
        ...

    def find_resource(self, unit: Any, name: str) -> str | None:
        """Locate resource ``name`` relative to ``unit`` and return it as a URL."""
        ...

    def simple_name(self, unit: Any) -> str: ...

    def qualified_name(self, unit: Any) -> str: ...

    def definition_suffix(self, unit: Any) -> PathSuffix | str:
        """Catalog member or raw suffix of the unit's defining file."""
        ...


def path_to_location(path: str | os.PathLike[str]) -> str:
    """Render a filesystem path as a ``file:/`` location string.

    Examples:
        >>> path_to_location("/path/to/root")
        'file:/path/to/root'
    """
    posix = PurePath(os.path.abspath(path)).as_posix()
    return PathPrefix.file() + quote(posix.lstrip("/"), safe="/:")


# Longest first so ".cpython-312-x86_64-linux-gnu.so" wins over ".so"
_DEFINITION_SUFFIXES = sorted(
    set(SOURCE_SUFFIXES + BYTECODE_SUFFIXES + EXTENSION_SUFFIXES),
    key=len,
    reverse=True,
)


def _module_of(unit: Any) -> ModuleType | None:
    if isinstance(unit, ModuleType):
        return unit
    name = getattr(unit, "__module__", None)
    if name is None:
        return None
    return sys.modules.get(name)


def _module_name(module: ModuleType) -> str:
    name = module.__name__
    # Modules run with ``python -m`` are registered as __main__
    if name == "__main__" and getattr(module, "__spec__", None) is not None:
        name = module.__spec__.name
    if hasattr(module, "__path__"):
        name += ".__init__"
    return name


def _zip_archive(module: ModuleType) -> str | None:
    loader = getattr(module, "__loader__", None)
    if isinstance(loader, zipimport.zipimporter):
        return loader.archive
    return None


class PythonReflection:
    """Reflection over modules, classes and functions of the running interpreter."""

    def code_source(self, unit: Any) -> str | None:
        module = _module_of(unit)
        if module is None:
            return None
        archive = _zip_archive(module)
        if archive is None:
            return None
        return path_to_location(archive)

    def find_resource(self, unit: Any, name: str) -> str | None:
        module = _module_of(unit)
        filename = getattr(module, "__file__", None) if module is not None else None
        if not filename or os.path.basename(filename) != name:
            return None

        archive = _zip_archive(module)
        if archive is None:
            return path_to_location(filename)

        entry = PurePath(os.path.relpath(filename, archive)).as_posix()
        return PathPrefix.jar() + path_to_location(archive) + ARCHIVE_SEPARATOR + quote(entry, safe="/")

    def simple_name(self, unit: Any) -> str:
        return self.qualified_name(unit).rpartition(".")[2]

    def qualified_name(self, unit: Any) -> str:
        module = _module_of(unit)
        if module is None:
            return getattr(unit, "__qualname__", type(unit).__qualname__)
        return _module_name(module)

    def definition_suffix(self, unit: Any) -> PathSuffix | str:
        """Return the suffix the unit's defining file actually carries.

        Source and sourceless modules map onto the catalog. Extension modules
        report their full platform tag, e.g. ``.cpython-312-x86_64-linux-gnu.so``.
        """
        module = _module_of(unit)
        filename = getattr(module, "__file__", None) or ""
        for suffix in _DEFINITION_SUFFIXES:
            if filename.endswith(suffix):
                if suffix == PathSuffix.compiled():
                    return PathSuffix.COMPILED
                if suffix == PathSuffix.source():
                    return PathSuffix.SOURCE
                return suffix
        return PathSuffix.SOURCE
