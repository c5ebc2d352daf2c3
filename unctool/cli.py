"""
UNC Tool - seamlessly convert between Linux and Windows UNC paths.

Subcommands:
- convert:     UNC path -> UNC path of the other (or same) convention
- local-path:  UNC path -> local mounted filesystem path
- remote-path: local mounted filesystem path -> UNC path
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.exceptions import UncToolError
from .dependencies import get_path_resolver, get_settings
from .logging_config import setup_logging
from .messages import describe_error
from .models import PathType
from .services.paths import convert_unc
from .utils.local_paths import absolute_local_path, local_path_exists


def _path_type(value: str) -> PathType:
    try:
        return PathType.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unctool",
        description="UNC Tool - Seamlessly convert between Linux and Windows UNC paths. "
        "Convert local Linux path to Windows/Linux UNC and vice versa.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    local_parser = subparsers.add_parser(
        "local-path",
        help="Convert remote Windows/Linux UNC path to local Linux filesystem path",
    )
    local_parser.add_argument(
        "remote_path",
        help=r"remote UNC path in \\windows-share\path or smb://linux-share/path format",
    )

    remote_parser = subparsers.add_parser(
        "remote-path",
        help="Convert local Linux filesystem path to remote Windows/Linux UNC path",
    )
    remote_parser.add_argument("local_path", help="local Linux filesystem path")
    remote_parser.add_argument(
        "-t",
        "--path-type",
        type=_path_type,
        required=True,
        help="destination UNC path type: windows or linux",
    )

    convert_parser = subparsers.add_parser(
        "convert", help="Convert src UNC path to dst UNC path"
    )
    convert_parser.add_argument(
        "path",
        help=r"remote UNC path in \\windows-share\path or smb://linux-share/path format",
    )
    convert_parser.add_argument(
        "-t",
        "--path-type",
        type=_path_type,
        required=True,
        help="destination UNC path type: windows or linux",
    )

    return parser


def _print_error(message: str) -> None:
    print(f"[Error] {message}", file=sys.stderr)


def _run_command(args: argparse.Namespace) -> int:
    if args.command == "convert":
        result = convert_unc(args.path, args.path_type)

    elif args.command == "local-path":
        result = get_path_resolver().local_path(args.remote_path)

    else:
        path = args.local_path
        if not local_path_exists(path):
            _print_error(f"Path does not exist or access denied: '{path}'")
            return 1

        abs_path = absolute_local_path(path)
        if abs_path is None:
            _print_error(f"Failed to get an absolute path for '{path}'")
            return 1

        result = get_path_resolver().remote_path(abs_path, args.path_type)

    print(result)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    try:
        setup_logging(settings)
    except OSError as e:
        _print_error(f"Failed to set up logging: {e}")
        return 1

    try:
        return _run_command(args)
    except UncToolError as e:
        logging.debug(f"{args.command} failed with {e.kind.value}")
        _print_error(describe_error(e.kind))
        return 1


def run() -> None:
    sys.exit(main())
