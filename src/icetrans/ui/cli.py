from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from icetrans.app import import_archives, import_translation_csv
from icetrans.config import configure_logging, get_database_config
from icetrans.domain.merge import import_mode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge game text into the localization catalog")
    parser.add_argument(
        "--database",
        type=Path,
        help="SQLite catalog file (defaults to DATABASE_URI or the data directory)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    archives = subparsers.add_parser("archives", help="Import text files from game archives")
    archives.add_argument(
        "--version",
        type=int,
        required=True,
        help="Import version tag stored on new or changed base strings",
    )
    archives.add_argument(
        "--translation",
        type=str,
        help="Translation set name (eng, story-eng, ...); imports overrides instead of base text",
    )
    archives.add_argument(
        "archives",
        nargs="+",
        type=Path,
        help="Archive files to import",
    )

    csv_import = subparsers.add_parser("csv", help="Import translations from an AIDA strings CSV")
    csv_import.add_argument(
        "--translation",
        type=str,
        required=True,
        help="Translation set name receiving the imported strings",
    )
    csv_import.add_argument(
        "--archive-list",
        type=Path,
        required=True,
        help="Archive list mapping CSV archive labels to archive names",
    )
    csv_import.add_argument(
        "--strings",
        type=Path,
        required=True,
        help="Strings CSV (path,type,zeroUnk,identifier,value)",
    )

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.command == "archives" and args.version <= 0:
        raise ValueError("--version must be a positive integer")
    translation = getattr(args, "translation", None)
    if translation is not None and not translation.strip():
        raise ValueError("--translation must not be blank")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    database_uri = (
        get_database_config(database_path=parsed_args.database).uri
        if parsed_args.database is not None
        else None
    )

    try:
        if parsed_args.command == "archives":
            import_archives(
                parsed_args.archives,
                mode=import_mode(version=parsed_args.version, translation=parsed_args.translation),
                database_uri=database_uri,
            )
        elif parsed_args.command == "csv":
            import_translation_csv(
                archive_list=parsed_args.archive_list,
                strings=parsed_args.strings,
                translation=parsed_args.translation,
                database_uri=database_uri,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during import")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
