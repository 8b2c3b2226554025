"""
env_editor/ui.py

Console output for env-editor, built on Rich.
  - Standard logging functions: log_info, log_error, log_success, log_notice.
  - print_value for raw, machine-readable output (get / list).
  - A global verbosity switch; log_info is silent unless verbose.

Errors go to stderr so `env-editor get NAME` stays usable in pipes.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# ---------- Console + Theme ----------

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.success": "green bold",
        "ui.error": "red bold",
        "ui.dim": "dim",
    }
)

console = Console(theme=_THEME, highlight=False)
err_console = Console(theme=_THEME, highlight=False, stderr=True)

# ---------- Global State ----------

VERBOSE = False


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


# ---------- Logging ----------


def log_info(message: str) -> None:
    """Info is suppressed unless VERBOSE is True."""
    if VERBOSE:
        console.print(f"[ui.info]ℹ  {escape(message)}[/]", soft_wrap=True, emoji=False)


def log_error(message: str) -> None:
    err_console.print(f"[ui.error]❌ {escape(message)}[/]", soft_wrap=True, emoji=False)


def log_success(message: str) -> None:
    console.print(f"[ui.success]✅ {escape(message)}[/]", soft_wrap=True, emoji=False)


def log_notice(message: str) -> None:
    """Dim one-liner for hints that are not warnings."""
    console.print(f"[ui.dim]{escape(message)}[/]", soft_wrap=True, emoji=False)


# ---------- Raw output ----------


def print_value(text: str) -> None:
    """
    Write text to stdout unchanged (tabs, carriage returns, escape codes).
    Bypasses Rich rendering; used for values other tools may parse.
    """
    out = console.file
    out.write(text + "\n")
    out.flush()


def print_usage(text: str) -> None:
    err_console.print(text, markup=False, highlight=False, soft_wrap=True, emoji=False)
