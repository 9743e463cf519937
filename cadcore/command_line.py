"""Parsing of the application's command-line options."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

_PROG = "cadcore"


@dataclass
class CommandLine:
    """The options the application was started with."""

    enable_sandbox: bool = False
    no_welcome_dialog: bool = False
    path_to_open: str = ""
    script_to_run: str = ""
    help_requested: bool = False

    def has_path_to_open(self) -> bool:
        return bool(self.path_to_open)

    def has_script_to_run(self) -> bool:
        return bool(self.script_to_run)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description=" - Command line options",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("--sandbox", action="store_true", help="Enable sandbox")
    parser.add_argument("--nowelcome", action="store_true", help="Disable welcome")
    parser.add_argument("--runscript", default="", help="Script to run")
    parser.add_argument("--input", default="", help="Path to open")
    parser.add_argument("--help", action="store_true", help="Show help")
    parser.add_argument("positional", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_command_line(argv: list[str] | None = None) -> CommandLine:
    """Parse ``argv`` (without the program name; defaults to ``sys.argv[1:]``).

    With ``--help`` the help text goes to stdout. A parse error is reported on
    stderr and the defaults are returned.
    """
    args_list = sys.argv[1:] if argv is None else list(argv)
    parser = _build_parser()
    try:
        args, extras = parser.parse_known_args(args_list)
        unknown = [arg for arg in extras if arg.startswith("-")]
        if unknown:
            raise argparse.ArgumentError(None, f"Option '{unknown[0]}' does not exist")
    except argparse.ArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return CommandLine()

    result = CommandLine(
        enable_sandbox=args.sandbox,
        no_welcome_dialog=args.nowelcome,
        path_to_open=args.input,
        script_to_run=args.runscript,
        help_requested=args.help,
    )
    if args.help:
        print(parser.format_help())
        return result

    unmatched = args.positional + extras
    if unmatched:
        result.path_to_open = unmatched[0]
    return result