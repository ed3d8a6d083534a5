"""Command line entry point: sp-importer <script dir> <spreadsheet dir>."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from . import __version__
from .batch import run, write_report
from .rules import REPORT_FILENAME

log = logging.getLogger(__name__)


def build_date() -> str:
    """Date the installed package files were written."""
    return date.fromtimestamp(Path(__file__).stat().st_mtime).isoformat()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sp-importer",
        description="Import existing translations from script dumps into CSV translation files.",
    )
    parser.add_argument("script_dir", nargs="?", help="Directory with script dump files.")
    parser.add_argument("work_dir", nargs="?", help="Directory with CSV translation files.")
    parser.add_argument(
        "--report",
        default=REPORT_FILENAME,
        help=f"Report file to write (default: {REPORT_FILENAME} in the current directory).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of spreadsheets imported in parallel.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.script_dir is None or args.work_dir is None:
        parser.print_usage(sys.stdout)
        print(f"sp-importer {__version__} ({build_date()})")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    for d in (args.script_dir, args.work_dir):
        if not Path(d).is_dir():
            log.error("Not a directory: %s", d)
            return 1

    report = run(Path(args.script_dir), Path(args.work_dir), max_workers=args.workers)
    write_report(report, Path(args.report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
