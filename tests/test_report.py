# tests/test_report.py

from pathlib import Path

import pytest
from pydantic import ValidationError

from classlocation.platform import FixedPlatform
from classlocation.report import LocationReport, locate
from classlocation.resolver import InvalidLocationError


def test_locate_directory_module(fs_package, import_from):
    root = fs_package("cl_report_a")
    module = import_from(root, "cl_report_a.sub.hoge")

    report = locate(module.helper, platform=FixedPlatform(False))

    assert report.target == "helper"
    assert report.file == root
    assert report.archive is False


def test_locate_archive_module(zip_package, import_from):
    archive = zip_package("cl_report_b")
    module = import_from(archive, "cl_report_b")

    report = locate(module, "cl_report_b")

    assert report.target == "cl_report_b"
    assert report.file == archive
    assert report.archive is True


def test_locate_requires_a_unit():
    with pytest.raises(TypeError):
        locate(None)


def test_locate_propagates_resolution_errors():
    import sys

    with pytest.raises(InvalidLocationError):
        locate(sys)


def test_report_is_frozen():
    report = LocationReport(target="x", location="file:/x", file=Path("/x"), archive=False)

    with pytest.raises(ValidationError):
        report.location = "file:/y"


def test_report_json():
    report = LocationReport(target="x", location="file:/x", file=Path("/x"), archive=False)

    assert '"location":"file:/x"' in report.model_dump_json()
