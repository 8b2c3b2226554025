#!/usr/bin/env python
"""
Main CLI entry point for env-editor.

    env-editor <command> [NAME] [VALUE] [--persist] [--yes] [--verbose]

Exit codes: 0 ok, 1 `contains` miss, 2 usage error, 3 fatal error.
"""
from __future__ import annotations

import argparse
import re
import sys
from typing import List, Sequence

import argcomplete
from argcomplete.completers import ChoicesCompleter, EnvironCompleter

from .commands import COMMANDS, CommandRequest, dispatch
from .config import Settings
from .errors import ExitCode, UsageError
from .ui import log_error, print_usage, set_verbose

EPILOG = """\
Commands:
  list [NAME]              List environment variables or a specific NAME
  get NAME                 Print the effective value of NAME
  set NAME VALUE           Set NAME to VALUE (process). --persist makes it user-level.
  append NAME VALUE        Append VALUE to NAME (path-like). Avoids duplicates.
  remove NAME VALUE        Remove VALUE from NAME (if present).
  contains NAME VALUE      Exit 0 if VALUE is present, else 1.

Examples:
  env-editor append PATH ~/.local/bin --persist
  env-editor append Path "C:\\msys64\\ucrt64\\bin" --persist --yes
  env-editor get PATH
  env-editor list
  env-editor set CFLAGS -O2
  env-editor set OPTS -- --no-color    (values starting with -- go after --)
"""

_SHORT_FLAGS_RE = re.compile(r"^-[pyvh]+$")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="env-editor",
        description="Edit process and persisted user environment variables.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        nargs="?",
        metavar="COMMAND",
        help=f"One of: {', '.join(COMMANDS)}.",
    ).completer = ChoicesCompleter(COMMANDS)
    parser.add_argument(
        "name",
        nargs="?",
        metavar="NAME",
        help="Environment variable name.",
    ).completer = EnvironCompleter
    parser.add_argument(
        "value",
        nargs="?",
        metavar="VALUE",
        help="Value to set, or entry to append/remove/test.",
    )
    parser.add_argument(
        "-p",
        "--persist",
        action="store_true",
        help="Persist the change to the user environment (Windows registry or ~/.profile).",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip the persistence notice (useful for scripts).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (backups, external commands).",
    )
    return parser


def split_argv(argv: Sequence[str]) -> List[str]:
    """
    Reorder argv as flags, then `--`, then positionals.

    Single-dash tokens that are not one of -p/-y/-v/-h (e.g. `-O2`, `-x`) are
    positionals, so values may start with a dash. Any other `--long` token
    stays a flag and argparse rejects it. Everything after an explicit `--`
    is positional.
    """
    flags: List[str] = []
    positionals: List[str] = []
    tokens = list(argv)
    for i, token in enumerate(tokens):
        if token == "--":
            positionals.extend(tokens[i + 1 :])
            break
        if token.startswith("--") or _SHORT_FLAGS_RE.match(token):
            flags.append(token)
        else:
            positionals.append(token)
    if positionals:
        return flags + ["--"] + positionals
    return flags


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(split_argv(argv))

    settings = Settings.from_env()
    set_verbose(args.verbose or settings.verbose)

    if not args.command:
        print_usage(parser.format_help())
        return ExitCode.USAGE

    request = CommandRequest(
        command=args.command,
        name=args.name,
        value=args.value,
        persist=args.persist,
        yes=args.yes,
    )
    try:
        return int(dispatch(request, settings=settings))
    except UsageError as e:
        log_error(str(e))
        print_usage(parser.format_usage())
        return e.exit_code
    except Exception as e:  # noqa: BLE001
        log_error(f"Fatal: {e}")
        return ExitCode.FATAL


if __name__ == "__main__":
    sys.exit(main())
