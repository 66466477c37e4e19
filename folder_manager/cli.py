"""
Command-line interface for folder-manager.

This module is responsible for argument parsing and delegating to the
orchestration in the app module.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .app import run_folder_manager
from .config import Config
from .errors import FolderManagerError
from .logging_utils import configure_logging

PROG = "folder-manager"


class UsageError(Exception):
    """Raised instead of argparse's exit(2) for bad command lines."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description=(
            "Create (or reuse) a project folder under your configured base "
            "directory and open it next to your Downloads folder."
        ),
    )

    parser.add_argument(
        "folder_name",
        nargs="?",
        help=(
            "Name of the project folder; unsafe characters are removed after "
            "confirmation. Put -- before a name that starts with a dash."
        ),
    )
    parser.add_argument(
        "--no-open",
        dest="open_folders",
        action="store_false",
        help="Do not open the project or Downloads folder in the file browser.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
        if args.folder_name is None:
            raise UsageError("the following arguments are required: folder_name")
    except UsageError as exc:
        # Bad command lines fail with 1 like every other error, not argparse's 2.
        parser.print_usage(sys.stderr)
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1

    config = Config(
        folder_name=args.folder_name,
        open_folders=args.open_folders,
        verbosity=args.verbose,
    )

    configure_logging(verbosity=config.verbosity)

    try:
        run_folder_manager(config)
    except KeyboardInterrupt:
        return 130
    except FolderManagerError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
