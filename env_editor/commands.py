"""
env_editor/commands.py

Command dispatcher: list, get, set, append, remove, contains.

Each command mutates (or reads) the process environment first. With
--persist, the same change is then applied to the persisted user
environment through a PersistenceBackend. The persisted value is read
separately from the process value, so the two can legitimately differ.
The persisted edit runs whenever --persist is given, even when the
process-level append or remove was a no-op (the entry was already present,
or already absent, in the process value).

Persistence failures are reported and swallowed; the process-level change
already happened and the command still exits 0.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Dict, MutableMapping, Optional

from . import path_list
from .config import Settings
from .errors import ExitCode, PersistenceError, UsageError
from .persistence import PersistenceBackend, get_backend
from .platform_utils import Platform, detect_platform
from .ui import log_error, log_notice, log_success, print_value

COMMANDS = ("list", "get", "set", "append", "remove", "contains")


@dataclass
class CommandRequest:
    command: str
    name: Optional[str] = None
    value: Optional[str] = None
    persist: bool = False
    yes: bool = False


class Dispatcher:
    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        backend: Optional[PersistenceBackend] = None,
        platform: Optional[Platform] = None,
        settings: Optional[Settings] = None,
    ):
        self.environ = os.environ if environ is None else environ
        self.platform = platform or detect_platform()
        self.settings = settings or Settings.from_env(self.environ)
        self._backend = backend

    @property
    def backend(self) -> PersistenceBackend:
        if self._backend is None:
            self._backend = get_backend(self.platform, self.settings, self.environ)
        return self._backend

    def run(self, request: CommandRequest) -> int:
        handlers: Dict[str, Callable[[CommandRequest], int]] = {
            "list": self.cmd_list,
            "get": self.cmd_get,
            "set": self.cmd_set,
            "append": self.cmd_append,
            "remove": self.cmd_remove,
            "contains": self.cmd_contains,
        }
        handler = handlers.get(request.command)
        if handler is None:
            raise UsageError(f"Unknown command: {request.command}")
        if request.command != "list" and not request.name:
            raise UsageError("Name is required for this command")
        return handler(request)

    # ------------------------------------------------------------------
    # read-only commands
    # ------------------------------------------------------------------

    def cmd_list(self, request: CommandRequest) -> int:
        if request.name:
            print_value(f"{request.name}={self.environ.get(request.name, '')}")
            return ExitCode.OK
        for key in sorted(self.environ):
            print_value(f"{key}={self.environ[key]}")
        return ExitCode.OK

    def cmd_get(self, request: CommandRequest) -> int:
        print_value(self.environ.get(request.name, ""))
        return ExitCode.OK

    def cmd_contains(self, request: CommandRequest) -> int:
        if not request.value:
            raise UsageError("Value required for contains")
        current = self.environ.get(request.name, "")
        if path_list.contains_entry(current, request.value, self.platform):
            return ExitCode.OK
        return ExitCode.NOT_FOUND

    # ------------------------------------------------------------------
    # mutating commands
    # ------------------------------------------------------------------

    def cmd_set(self, request: CommandRequest) -> int:
        if request.value is None:
            raise UsageError("Value required for set")
        name, value = request.name, request.value
        self.environ[name] = value
        log_success(f"Set {name} for current process.")
        if request.persist:
            self._persist_notice(request)
            try:
                self.backend.set_user(name, value)
                log_success(f"Persisted {name} to {self.backend.location}.")
            except PersistenceError as e:
                log_error(f"Failed to persist {name}: {e}")
        return ExitCode.OK

    def cmd_append(self, request: CommandRequest) -> int:
        if not request.value:
            raise UsageError("Value required for append/remove")
        entries = path_list.decode(self.environ.get(request.name, ""), self.platform)
        if path_list.append_entry(entries, request.value):
            self.environ[request.name] = path_list.encode(entries, self.platform)
            log_success(f"Appended to {request.name} for current process.")
        else:
            log_notice("Entry already present, nothing to do.")
        if request.persist:
            self._persist_list(request, "append")
        return ExitCode.OK

    def cmd_remove(self, request: CommandRequest) -> int:
        if not request.value:
            raise UsageError("Value required for append/remove")
        entries = path_list.decode(self.environ.get(request.name, ""), self.platform)
        if path_list.remove_entry(entries, request.value):
            self.environ[request.name] = path_list.encode(entries, self.platform)
            log_success(f"Removed entry from {request.name} for current process.")
        else:
            log_notice("Entry not present, nothing to remove.")
        if request.persist:
            self._persist_list(request, "remove")
        return ExitCode.OK

    # ------------------------------------------------------------------
    # persistence helpers
    # ------------------------------------------------------------------

    def _persist_notice(self, request: CommandRequest) -> None:
        if not request.yes:
            log_notice(
                "Persisting to user environment (a backup is created). "
                "Use --yes to skip this message."
            )

    def _persist_list(self, request: CommandRequest, action: str) -> None:
        self._persist_notice(request)
        try:
            changed = self.backend.edit_list(request.name, request.value, action)
            location = self.backend.location
        except PersistenceError as e:
            log_error(f"Failed to persist {action} for {request.name}: {e}")
            return
        if changed:
            log_success(f"Persisted {action} to {request.name} in {location}.")
        elif action == "append":
            log_notice("User-level already contains the entry, no change.")
        else:
            log_notice("User-level did not contain entry, no change.")


def dispatch(
    request: CommandRequest,
    environ: Optional[MutableMapping[str, str]] = None,
    backend: Optional[PersistenceBackend] = None,
    platform: Optional[Platform] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Run one command and return its exit code."""
    dispatcher = Dispatcher(environ=environ, backend=backend, platform=platform, settings=settings)
    return dispatcher.run(request)
