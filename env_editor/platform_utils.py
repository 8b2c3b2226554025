"""Host platform detection: Windows or POSIX-like."""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional


class Platform(str, Enum):
    WINDOWS = "windows"
    POSIX = "posix"


def detect_platform() -> Platform:
    return Platform.WINDOWS if os.name == "nt" else Platform.POSIX


def is_windows(platform: Optional[Platform] = None) -> bool:
    return (platform or detect_platform()) == Platform.WINDOWS


def path_delimiter(platform: Optional[Platform] = None) -> str:
    """';' on Windows, ':' everywhere else."""
    return ";" if is_windows(platform) else ":"
