"""
env_editor/profile_patch.py

Text helpers for `export NAME="VALUE"` lines in shell profile files.

The core operation is replace_or_append: find the first line matching a
pattern and replace it, otherwise append the line. Everything else in the
file is preserved byte-for-byte.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern

from .config import ADDED_MARKER

_QUOTES = ('"', "'")
# Double-quoted values: `"` and `\` are backslash-escaped, `$` and backticks pass through.
_ESCAPE_RE = re.compile(r'(["\\])')
_UNESCAPE_RE = re.compile(r'\\(["\\])')


def export_pattern(name: str) -> Pattern[str]:
    """Multi-line regex for `export NAME=...`; group 1 is the raw value."""
    return re.compile(rf"^[ \t]*export[ \t]+{re.escape(name)}=([^\r\n]*)", re.MULTILINE)


def format_export(name: str, value: str) -> str:
    escaped = _ESCAPE_RE.sub(r"\\\1", value)
    return f'export {name}="{escaped}"'


def unquote(raw: str) -> str:
    """
    Strip trailing whitespace and one matching pair of surrounding quotes.
    Double-quoted values also lose the escaping added by format_export.
    """
    value = raw.rstrip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        inner = value[1:-1]
        if value[0] == '"':
            return _UNESCAPE_RE.sub(r"\1", inner)
        return inner
    return value


def find_export_value(content: str, name: str) -> Optional[str]:
    """Value of the first `export NAME=` line, or None if there is none."""
    match = export_pattern(name).search(content)
    if match is None:
        return None
    return unquote(match.group(1))


def replace_or_append(
    content: str,
    pattern: Pattern[str],
    line: str,
    marker: Optional[str] = ADDED_MARKER,
) -> str:
    """
    Replace the first line matching `pattern` with `line`, or append `line`
    (preceded by `marker` as a comment) when nothing matches.
    """
    # Callable replacement: values may contain backslashes.
    new_content, count = pattern.subn(lambda _m: line, content, count=1)
    if count:
        return new_content
    block = f"{marker}\n{line}\n" if marker else f"{line}\n"
    return f"{content}\n{block}"
