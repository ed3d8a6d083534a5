"""
Batch run over a script directory and a spreadsheet directory.

The index is built completely before any spreadsheet is read. Spreadsheets
are then imported on a thread pool; each worker returns its own result and
the report is folded together after all workers have finished.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from .importer import import_file
from .index import TranslationMemory, build_index
from .models import BatchReport
from .rules import REPORT_FILENAME, SPREADSHEET_EXTENSIONS

log = logging.getLogger(__name__)


def discover_script_files(script_dir: Path) -> List[Path]:
    """Every regular file below `script_dir`, sorted so index order is stable."""
    return sorted(p for p in Path(script_dir).rglob("*") if p.is_file())


def discover_spreadsheets(work_dir: Path) -> List[Path]:
    return sorted(
        p for p in Path(work_dir).rglob("*")
        if p.is_file() and p.suffix in SPREADSHEET_EXTENSIONS
    )


def import_all(
    spreadsheets: List[Path],
    index: TranslationMemory,
    max_workers: Optional[int] = None,
) -> BatchReport:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(lambda p: import_file(p, index), spreadsheets))
    return BatchReport(entries_indexed=len(index), results=results)


def run(script_dir: Path, work_dir: Path, max_workers: Optional[int] = None) -> BatchReport:
    index = build_index(discover_script_files(script_dir))
    log.info("Loaded %d entries from %s", len(index), script_dir)
    return import_all(discover_spreadsheets(work_dir), index, max_workers=max_workers)


def write_report(report: BatchReport, path: Path = Path(REPORT_FILENAME)) -> bool:
    """Write the aggregate report; nothing is written when no file changed."""
    text = report.render()
    if not text:
        return False
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        log.error("Can't write report %s (%s)", os.fspath(path), e)
        return False
    log.info("Report saved to %s", os.fspath(path))
    return True
