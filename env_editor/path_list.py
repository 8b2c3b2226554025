"""
env_editor/path_list.py

Split / join path-like variable values (PATH, PYTHONPATH, ...).

Entries are trimmed, empty entries dropped, order preserved. Comparison is
exact string equality: no case folding, no slash or trailing-separator
normalization.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .platform_utils import Platform, path_delimiter


def decode(raw: Optional[str], platform: Optional[Platform] = None) -> List[str]:
    if not raw:
        return []
    parts = (p.strip() for p in raw.split(path_delimiter(platform)))
    return [p for p in parts if p]


def encode(entries: Iterable[str], platform: Optional[Platform] = None) -> str:
    return path_delimiter(platform).join(entries)


def append_entry(entries: List[str], entry: str) -> bool:
    """Push `entry` unless already present. Returns True if the list changed."""
    if entry in entries:
        return False
    entries.append(entry)
    return True


def remove_entry(entries: List[str], entry: str) -> bool:
    """Drop the first occurrence of `entry`. Returns True if the list changed."""
    try:
        entries.remove(entry)
    except ValueError:
        return False
    return True


def contains_entry(raw: Optional[str], entry: str, platform: Optional[Platform] = None) -> bool:
    return entry in decode(raw, platform)


def apply_action(entries: List[str], entry: str, action: str) -> bool:
    """Run "append" or "remove" on `entries` in place."""
    if action == "append":
        return append_entry(entries, entry)
    if action == "remove":
        return remove_entry(entries, entry)
    raise ValueError(f"Unknown list action: {action!r}")
