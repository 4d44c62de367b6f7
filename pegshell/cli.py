"""Command-line interface for pegshell."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .exceptions import ParseError
from .frontend import ShellFrontend
from .log import set_level


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-glob",
        action="store_true",
        help="Leave glob patterns in arguments unexpanded.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report syntax errors instead of treating the script as empty.",
    )


def _read_script(args: argparse.Namespace) -> str:
    if args.file is not None:
        return Path(args.file).read_text()
    if args.script is None:
        raise ValueError("Expected a script argument or --file")
    return args.script


def _build_frontend(args: argparse.Namespace) -> ShellFrontend:
    return ShellFrontend(expand_globs=not args.no_glob, strict=args.strict)


def _run_parse(args: argparse.Namespace) -> int:
    frontend = _build_frontend(args)
    try:
        pipelines = frontend.prepare(_read_script(args))
    except ParseError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    json.dump([pipeline.to_dict() for pipeline in pipelines], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def _run_exec(args: argparse.Namespace) -> int:
    frontend = _build_frontend(args)
    result = frontend.exec(_read_script(args))
    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.stderr:
        sys.stderr.write(result.stderr)
        if not result.stderr.endswith("\n"):
            sys.stderr.write("\n")
    frontend.runner.wait_background()
    return result.exit_code


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="pegshell")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    parse_parser = subparsers.add_parser("parse", help="Print the parsed pipelines as JSON")
    _add_common_flags(parse_parser)
    parse_parser.add_argument("script", nargs="?", help="Script text to parse")
    parse_parser.add_argument("--file", help="Read the script from a file")
    parse_parser.set_defaults(func=_run_parse)

    exec_parser = subparsers.add_parser("exec", help="Run a script")
    _add_common_flags(exec_parser)
    exec_parser.add_argument("script", nargs="?", help="Script text to run")
    exec_parser.add_argument("--file", help="Read the script from a file")
    exec_parser.set_defaults(func=_run_exec)

    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    try:
        exit_code = args.func(args)
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"pegshell: {exc}\n")
        exit_code = 1
    raise SystemExit(exit_code)


__all__ = ["main"]
