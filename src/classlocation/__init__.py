"""Resolve the directory root or archive a loaded Python unit came from."""

from .catalog import ARCHIVE_SEPARATOR, PathPrefix, PathSuffix
from .platform import FixedPlatform, HostPlatform, Platform
from .reflection import PythonReflection, Reflection, path_to_location
from .report import LocationReport, locate
from .resolver import (
    ClassLocation,
    InvalidLocationError,
    LocationRequest,
    normalize_file_location,
    resolve_to_file,
    resolve_to_location,
)

__all__ = [
    "ARCHIVE_SEPARATOR",
    "ClassLocation",
    "FixedPlatform",
    "HostPlatform",
    "InvalidLocationError",
    "LocationReport",
    "LocationRequest",
    "PathPrefix",
    "PathSuffix",
    "Platform",
    "PythonReflection",
    "Reflection",
    "locate",
    "normalize_file_location",
    "path_to_location",
    "resolve_to_file",
    "resolve_to_location",
]
