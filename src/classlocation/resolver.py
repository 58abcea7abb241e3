# src/classlocation/resolver.py
"""Resolve where a loaded module, class or function was loaded from.

Two views are offered for a unit:

- a location string such as ``file:/path/to/root`` naming the sys.path entry
  (directory root or archive) that provided the unit;
- a :class:`pathlib.Path` of that directory or archive file.

Example:
    >>> import json.decoder
    >>> resolve_to_location(LocationRequest(json.decoder))  # doctest: +SKIP
    'file:/usr/lib/python3.12'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import quote, urlsplit
from urllib.request import url2pathname

from .catalog import ARCHIVE_SEPARATOR, PathPrefix
from .platform import HostPlatform, Platform
from .reflection import PythonReflection, Reflection

# A drive letter straight after "file:" with no separating slash
_DRIVE_LOCATION = re.compile(r"file:[A-Za-z]:.*", re.DOTALL)

# Characters a strict URI parser refuses, plus broken percent escapes
_URI_ILLEGAL = re.compile(r'[\s\\<>"{}|^`]|%(?![0-9A-Fa-f]{2})')

_FILE_SCHEME = "file:"


class InvalidLocationError(ValueError):
    """The location of a unit could not be determined or parsed."""


@dataclass(frozen=True, slots=True)
class LocationRequest:
    unit: Any

    def __post_init__(self) -> None:
        if self.unit is None:
            raise TypeError("unit must not be None")


def resolve_to_location(request: LocationRequest, *, reflection: Reflection | None = None, verbose: int = 0) -> str:
    """Return the location string of the sys.path entry that provided the unit.

    Embedded origin metadata wins when the runtime has it. Otherwise the unit's
    defining file is looked up and the fully-qualified part of its URL is cut
    away, leaving the directory root or the archive path.

    Examples:
        ``file:/path/to/root/package/Hoge.py`` -> ``file:/path/to/root``
        ``jar:file:/path/to/hoge.zip!/root/package/Hoge.py`` -> ``file:/path/to/hoge.zip``

    Raises:
        InvalidLocationError: If the defining file cannot be found, does not
            end with the unit's qualified path, or leaves a malformed location.
    """
    reflection = reflection or PythonReflection()
    unit = request.unit

    code_source = reflection.code_source(unit)
    if code_source is not None:
        if verbose >= 1:
            print(f"[resolve] code source: {code_source}")
        return code_source

    suffix = str(reflection.definition_suffix(unit))
    resource_name = reflection.simple_name(unit) + suffix
    resource = reflection.find_resource(unit, resource_name)
    if resource is None:
        raise InvalidLocationError(f"{resource_name} not found")

    url = str(resource)
    # Resource URLs are percent-encoded; non-ASCII module names must be too
    expected = quote(reflection.qualified_name(unit).replace(".", "/") + suffix, safe="/")
    if not url.endswith(expected) or not url[: -len(expected)].endswith("/"):
        raise InvalidLocationError(f"Invalid suffix was detected in {url}")

    location = _strip_archive(url[: -len(expected)])
    _check_location(location)

    if verbose >= 2:
        print(f"[resolve] {url} -> {location}")
    return location


def _strip_archive(path: str) -> str:
    if path.startswith(PathPrefix.jar()):
        # Zips on sys.path may carry an inner prefix: a.zip!/lib/
        path = path[len(PathPrefix.jar()) :].split(ARCHIVE_SEPARATOR, 1)[0]
    if path.endswith("/") and path != PathPrefix.file():
        path = path[:-1]
    return path


def _check_location(location: str) -> None:
    try:
        scheme = urlsplit(location).scheme
    except ValueError as e:
        raise InvalidLocationError(f"Malformed location {location!r}: {e}") from e
    # Single letter schemes are drive letters, not protocols
    if len(scheme) < 2:
        raise InvalidLocationError(f"Malformed location {location!r}: no protocol")


def normalize_file_location(location: str, platform: Platform) -> str:
    """Reduce a location to the string handed to the path conversion.

    Archive locations keep only the archive's own path. On Windows,
    ``file:C:\\data`` gets the missing slash: ``file:/C:\\data``. This is a
    narrow fix for that one shape, not a general Windows path normalizer.
    """
    path = location
    if path.startswith(PathPrefix.jar()):
        path = path[len(PathPrefix.jar()) :].split(ARCHIVE_SEPARATOR, 1)[0]

    if platform.is_windows() and _DRIVE_LOCATION.fullmatch(path):
        path = PathPrefix.file() + path[len(_FILE_SCHEME) :]
    return path


def _file_url_to_path(url: str) -> Path:
    if _URI_ILLEGAL.search(url):
        raise ValueError(f"Illegal character in {url!r}")
    parts = urlsplit(url)
    if parts.scheme != "file":
        raise ValueError(f"URI scheme is not 'file': {url!r}")
    if parts.netloc not in ("", "localhost"):
        raise ValueError(f"URI has an authority component: {url!r}")
    if parts.query or parts.fragment:
        raise ValueError(f"URI has a query or fragment component: {url!r}")
    if not parts.path.startswith("/"):
        raise ValueError(f"URI is not hierarchical: {url!r}")
    return Path(url2pathname(parts.path))


def resolve_to_file(
    request: LocationRequest,
    *,
    reflection: Reflection | None = None,
    platform: Platform | None = None,
    verbose: int = 0,
) -> Path:
    """Return the directory root or archive file that provided the unit.

    Raises:
        InvalidLocationError: As :func:`resolve_to_location`, or when the
            location is neither a valid ``file`` URL nor ``file:/``-prefixed.
    """
    location = resolve_to_location(request, reflection=reflection, verbose=verbose)
    path = normalize_file_location(location, platform or HostPlatform())

    try:
        result = _file_url_to_path(path)
    except ValueError as e:
        if not path.startswith(PathPrefix.file()):
            raise InvalidLocationError(f"Invalid URL -> {location}") from e
        if verbose >= 1:
            print(f"[file] {e}; using raw path")
        result = Path(path[len(_FILE_SCHEME) :])

    if verbose >= 2:
        print(f"[file] {location} -> {result}")
    return result


class ClassLocation:
    """Location of one unit, bundling the request with its collaborators."""

    __slots__ = ("request", "reflection", "platform")

    def __init__(self, unit: Any, *, reflection: Reflection | None = None, platform: Platform | None = None):
        self.request = LocationRequest(unit)
        self.reflection = reflection or PythonReflection()
        self.platform = platform or HostPlatform()

    @classmethod
    def of(cls, unit: Any, **kwargs: Any) -> ClassLocation:
        return cls(unit, **kwargs)

    def to_url(self) -> str:
        return resolve_to_location(self.request, reflection=self.reflection)

    def to_file(self) -> Path:
        return resolve_to_file(self.request, reflection=self.reflection, platform=self.platform)

    def __repr__(self) -> str:
        return f"ClassLocation({self.request.unit!r})"
