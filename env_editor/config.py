"""
env_editor/config.py

Constants and environment-driven settings.

Overrides (all optional):
  ENV_EDITOR_PROFILE     explicit profile file used for POSIX persistence
  ENV_EDITOR_POWERSHELL  PowerShell executable used on Windows (default: powershell)
  ENV_EDITOR_VERBOSE     1/true/yes enables info-level console output
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

PROFILE_FILENAME = ".profile"
PROFILE_HEADER = "# created by env-editor"
ADDED_MARKER = "# added by env-editor"
DEFAULT_POWERSHELL = "powershell"

ENV_PROFILE = "ENV_EDITOR_PROFILE"
ENV_POWERSHELL = "ENV_EDITOR_POWERSHELL"
ENV_VERBOSE = "ENV_EDITOR_VERBOSE"

_TRUTHY = ("1", "true", "yes", "on")


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    profile_override: Optional[Path] = None
    powershell: str = DEFAULT_POWERSHELL
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        profile = env.get(ENV_PROFILE, "").strip()
        return cls(
            profile_override=Path(profile).expanduser() if profile else None,
            powershell=env.get(ENV_POWERSHELL, "").strip() or DEFAULT_POWERSHELL,
            verbose=_truthy(env.get(ENV_VERBOSE)),
        )
