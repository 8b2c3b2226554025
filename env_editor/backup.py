"""
env_editor/backup.py

Best-effort, timestamped backups of files about to be rewritten.

  <file>.bak.2026-10-19T12-30-05-123Z

Backups are never cleaned up by env-editor.
"""

from __future__ import annotations

import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .ui import log_info, log_notice


def backup_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with milliseconds; ':' and '.' become '-'."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S") + f".{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def backup_file(path: Union[str, Path]) -> Optional[Path]:
    """
    Copy `path` to a timestamped sibling. Any failure (missing file,
    permissions) is ignored and None is returned.
    """
    src = Path(path)
    dest = src.with_name(f"{src.name}.bak.{backup_timestamp()}")
    try:
        shutil.copy2(src, dest)
    except OSError as e:
        log_info(f"No backup of {src}: {e}")
        return None
    log_notice(f"Backup created: {dest}")
    return dest
