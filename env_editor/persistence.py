"""
env_editor/persistence.py

Persisted (user-level) environment storage.

Two backends share one small interface:
  - WindowsBackend: user-scope variables via PowerShell's
    [Environment]::Get/SetEnvironmentVariable(..., 'User').
  - PosixBackend: `export NAME="VALUE"` lines in ~/.profile.

get_backend() picks one from the host platform. Every failure surfaces as
PersistenceError; callers decide whether that is fatal.
"""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Mapping, Optional

from . import path_list
from .backup import backup_file
from .config import PROFILE_FILENAME, PROFILE_HEADER, Settings
from .errors import PersistenceError
from .platform_utils import Platform, detect_platform
from .profile_patch import export_pattern, find_export_value, format_export, replace_or_append
from .ui import log_info


class PersistenceBackend(ABC):
    """Read and write variables in the persisted user environment."""

    platform: Platform

    @property
    def location(self) -> str:
        """Human-readable name of where values are persisted."""
        return "user environment"

    @abstractmethod
    def get_user(self, name: str) -> str:
        ...

    @abstractmethod
    def set_user(self, name: str, value: str) -> None:
        ...

    def edit_list(self, name: str, entry: str, action: str) -> bool:
        """
        Append or remove `entry` in the persisted path-like value of `name`.
        Writes back only when the list changed; returns whether it did.
        """
        entries = path_list.decode(self.get_user(name), self.platform)
        changed = path_list.apply_action(entries, entry, action)
        if changed:
            self.set_user(name, path_list.encode(entries, self.platform))
        return changed


# ---------------------------------------------------------------------------
# Windows
# ---------------------------------------------------------------------------

def _ps_literal(text: str) -> str:
    """Single-quoted PowerShell string literal."""
    return "'" + text.replace("'", "''") + "'"


class WindowsBackend(PersistenceBackend):
    platform = Platform.WINDOWS

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    @property
    def location(self) -> str:
        return "User environment (Windows)"

    def _run_powershell(self, script: str) -> str:
        cmd = [self.settings.powershell, "-NoProfile", "-NonInteractive", "-Command", script]
        log_info(f"Running: {' '.join(cmd)}")
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            raise PersistenceError(f"Could not run {self.settings.powershell}: {e}") from e
        if proc.returncode != 0:
            detail = (proc.stderr or "").strip()
            raise PersistenceError(
                f"{self.settings.powershell} exited with code {proc.returncode}"
                + (f": {detail}" if detail else "")
            )
        return proc.stdout or ""

    def get_user(self, name: str) -> str:
        script = f"[Environment]::GetEnvironmentVariable({_ps_literal(name)}, 'User')"
        return self._run_powershell(script).strip()

    def set_user(self, name: str, value: str) -> None:
        script = (
            f"[Environment]::SetEnvironmentVariable("
            f"{_ps_literal(name)}, {_ps_literal(value)}, 'User')"
        )
        self._run_powershell(script)


# ---------------------------------------------------------------------------
# POSIX
# ---------------------------------------------------------------------------

class PosixBackend(PersistenceBackend):
    platform = Platform.POSIX

    def __init__(
        self,
        settings: Optional[Settings] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings or Settings()
        self.environ = os.environ if environ is None else environ

    @property
    def profile_path(self) -> Path:
        if self.settings.profile_override is not None:
            return self.settings.profile_override
        home = self.environ.get("HOME", "")
        if not home:
            raise PersistenceError("home directory unknown: HOME is not set")
        return Path(home) / PROFILE_FILENAME

    @property
    def location(self) -> str:
        return str(self.profile_path)

    # newline="" keeps CRLF and any other line endings exactly as found.
    def _read(self, path: Path) -> str:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read {path}: {e}") from e

    def _write(self, path: Path, content: str) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise PersistenceError(f"Could not write {path}: {e}") from e

    def _current_value(self, content: str, name: str) -> str:
        value = find_export_value(content, name)
        if value is None:
            return self.environ.get(name, "")
        return value

    def get_user(self, name: str) -> str:
        return self._current_value(self._read(self.profile_path), name)

    def set_user(self, name: str, value: str) -> None:
        profile = self.profile_path
        line = format_export(name, value)
        if not profile.exists():
            self._write(profile, f"{PROFILE_HEADER}\n{line}\n")
            log_info(f"Wrote new {profile}")
            return
        content = self._read(profile)
        backup_file(profile)
        self._write(profile, replace_or_append(content, export_pattern(name), line))
        log_info(f"Updated {profile}")

    def edit_list(self, name: str, entry: str, action: str) -> bool:
        """
        Same list logic as the base class, applied to the profile file.
        The profile is always rewritten (and created if missing).
        """
        profile = self.profile_path
        backup_file(profile)
        content = self._read(profile)
        entries: List[str] = path_list.decode(self._current_value(content, name), self.platform)
        changed = path_list.apply_action(entries, entry, action)
        line = format_export(name, path_list.encode(entries, self.platform))
        self._write(profile, replace_or_append(content, export_pattern(name), line))
        log_info(f"Persisted {name} in {profile}")
        return changed


def get_backend(
    platform: Optional[Platform] = None,
    settings: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> PersistenceBackend:
    platform = platform or detect_platform()
    if platform == Platform.WINDOWS:
        return WindowsBackend(settings)
    return PosixBackend(settings, environ)
