# src/classlocation/report.py
from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from .platform import Platform
from .reflection import Reflection
from .resolver import LocationRequest, resolve_to_file, resolve_to_location


class LocationReport(BaseModel):
    """Both views of a resolved unit, ready for JSON output."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    target: str
    location: str
    file: Path
    archive: bool


def locate(
    unit: Any,
    target: str | None = None,
    *,
    reflection: Reflection | None = None,
    platform: Platform | None = None,
    verbose: int = 0,
) -> LocationReport:
    request = LocationRequest(unit)
    location = resolve_to_location(request, reflection=reflection, verbose=verbose)
    file = resolve_to_file(request, reflection=reflection, platform=platform, verbose=verbose)

    if target is None:
        target = getattr(unit, "__qualname__", None) or getattr(unit, "__name__", repr(unit))

    return LocationReport(target=target, location=location, file=file, archive=file.is_file())
