"""Command-line frontend: ``sqlvalid [-sqlite] <directory>``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from sqlvalid.config import get_settings
from sqlvalid.core import Dialect, WalkError, render_report, validate_tree
from sqlvalid.core.errors import UsageError

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

USAGE = "Usage: sqlvalid [-sqlite] <directory>"

logger = logging.getLogger("sqlvalid")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlvalid",
        description="Validate the syntax of every .sql file under a directory",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-sqlite",
        "--sqlite",
        dest="sqlite",
        action="store_true",
        help="Validate SQLite SQL (default: PostgreSQL)",
    )
    # Flags are only read before the directory; anything after it is ignored.
    parser.add_argument("directory", nargs=argparse.REMAINDER, help="Directory to search for .sql files")
    return parser


def _root_from_args(args: argparse.Namespace) -> str:
    if not args.directory:
        raise UsageError(USAGE)
    if len(args.directory) > 1:
        logger.debug("Ignoring extra arguments: %s", args.directory[1:])
    return args.directory[0]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    _configure_logging(settings.debug)

    try:
        root = _root_from_args(args)
    except UsageError as exc:
        print(exc)
        return 1

    dialect = Dialect.from_flag(args.sqlite)
    logger.debug("Validating %s as %s", root, dialect.value)
    try:
        report = validate_tree(root, dialect=dialect)
    except WalkError as exc:
        print(f"✗ {exc}", flush=True)
        return 1
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")
    return render_report(report)


if __name__ == "__main__":
    raise SystemExit(main())
