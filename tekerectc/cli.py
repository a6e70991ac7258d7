"""Command line entry point: judge a program against the saved test cases."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .errors import handle_error
from .judge import DEFAULT_DIRECTORY, judge

DEFAULT_COMMAND = "bb ./tests/main.clj"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tekerectc",
        description="Run a program against the saved test cases.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=DEFAULT_COMMAND,
        help="shell command that runs the solution (default: %(default)s)",
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=DEFAULT_DIRECTORY,
        help="directory holding the test case files (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the judge and return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        judge(args.command, args.directory)
    except OSError as exc:
        handle_error(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())