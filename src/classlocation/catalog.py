# src/classlocation/catalog.py
"""Fixed catalogs of path tokens recognised by the resolver."""

from __future__ import annotations

from enum import Enum


class _Catalog(Enum):
    """Enum whose members carry a stable numeric code and a literal string."""

    def __init__(self, code: int, literal: str):
        self.code = code
        self.literal = literal

    @classmethod
    def from_code(cls, code: int):
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"No {cls.__name__} with code {code}")

    def __str__(self) -> str:
        return self.literal


class PathPrefix(_Catalog):
    JAR = (0, "jar:")
    FILE = (1, "file:/")

    @classmethod
    def jar(cls) -> str:
        return cls.JAR.literal

    @classmethod
    def file(cls) -> str:
        return cls.FILE.literal


class PathSuffix(_Catalog):
    CLASS = (0, ".class")
    SOURCE = (1, ".py")
    COMPILED = (2, ".pyc")

    @classmethod
    def clazz(cls) -> str:
        return cls.CLASS.literal

    @classmethod
    def source(cls) -> str:
        return cls.SOURCE.literal

    @classmethod
    def compiled(cls) -> str:
        return cls.COMPILED.literal


# Boundary between an archive's own path and the entry inside it.
ARCHIVE_SEPARATOR = "!/"
