# tests/test_catalog.py

import pytest

from classlocation.catalog import ARCHIVE_SEPARATOR, PathPrefix, PathSuffix


class TestPathPrefix:
    def test_literals(self):
        assert PathPrefix.jar() == "jar:"
        assert PathPrefix.file() == "file:/"

    def test_codes(self):
        assert PathPrefix.JAR.code == 0
        assert PathPrefix.FILE.code == 1

    def test_from_code(self):
        assert PathPrefix.from_code(1) is PathPrefix.FILE

    def test_unknown_code(self):
        with pytest.raises(ValueError, match="No PathPrefix with code 7"):
            PathPrefix.from_code(7)

    def test_closed_set(self):
        assert [m.name for m in PathPrefix] == ["JAR", "FILE"]

    def test_str_is_literal(self):
        assert f"{PathPrefix.JAR}file:/x" == "jar:file:/x"


class TestPathSuffix:
    def test_class_suffix(self):
        assert PathSuffix.CLASS.code == 0
        assert PathSuffix.clazz() == ".class"

    def test_python_suffixes(self):
        assert PathSuffix.source() == ".py"
        assert PathSuffix.compiled() == ".pyc"
        assert PathSuffix.from_code(2) is PathSuffix.COMPILED

    def test_members_are_constant(self):
        with pytest.raises(AttributeError):
            PathSuffix.CLASS = (0, ".jar")


def test_archive_separator():
    assert ARCHIVE_SEPARATOR == "!/"
