"""Exception types and process exit codes for env-editor."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    NOT_FOUND = 1  # `contains` miss
    USAGE = 2
    FATAL = 3


class EnvEditorError(Exception):
    """Base class for errors raised by env-editor."""


class UsageError(EnvEditorError):
    """Bad or missing command-line arguments."""

    exit_code = ExitCode.USAGE


class PersistenceError(EnvEditorError):
    """
    Writing to (or reading from) the persisted user environment failed.

    Raised by the persistence backends for a missing PowerShell, a non-zero
    exit status, or profile file I/O errors. The dispatcher reports it and
    carries on: the process-level change has already been applied.
    """
