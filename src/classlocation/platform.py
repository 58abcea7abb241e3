# src/classlocation/platform.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol


class Platform(Protocol):
    def is_windows(self) -> bool: ...


class HostPlatform:
    """Answers for the interpreter this process runs on."""

    def is_windows(self) -> bool:
        return os.name == "nt"


@dataclass(frozen=True, slots=True)
class FixedPlatform:
    windows: bool

    def is_windows(self) -> bool:
        return self.windows
