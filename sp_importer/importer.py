"""
Spreadsheet importer.

Rows look like `original;translation;comment;flag`. Each row's first field is
looked up in the translation memory and the row is regenerated:

- match:    `original;<translation>;imported from <script file>;`
- no match: `original;original;;`

Once a row matches, the rest of the spreadsheet only accepts matches from the
same script file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from .decoding import read_lines, write_text
from .fuzzy import normalize
from .index import TranslationMemory
from .models import ImportResult
from .rules import CSV_DELIMITER, IMPORT_COMMENT_PREFIX, SENTINEL_ROW

log = logging.getLogger(__name__)


def _first_field(line: str) -> str:
    return line.split(CSV_DELIMITER, 1)[0]


def import_lines(lines: Sequence[str], index: TranslationMemory, path: str = "") -> ImportResult:
    """
    Regenerate a spreadsheet from its lines without touching the disk.

    The returned result carries the new text in `content`.
    """
    if not lines:
        return ImportResult(path=path, content="")

    output: List[str] = [lines[0]]
    matched = 0
    pinned = None

    for line in lines[1:]:
        if not line:
            continue
        if line == SENTINEL_ROW:
            output.append(line)
            continue

        original = _first_field(line)
        entry = index.find(normalize(original), pinned_source=pinned)
        if entry is None:
            output.append(f"{original};{original};;")
            continue

        if pinned is None:
            log.debug("%s pinned to %s", path or "<spreadsheet>", entry.source_file)
        pinned = entry.source_file
        matched += 1
        output.append(f"{original};{entry.translation};{IMPORT_COMMENT_PREFIX}{entry.source_file};")

    return ImportResult(
        path=path,
        matched=matched,
        modified=matched > 0,
        pinned_source=pinned,
        content="\n".join(output),
    )


def import_file(path: Path, index: TranslationMemory) -> ImportResult:
    """
    Import translations into the spreadsheet at `path`.

    The file is overwritten in place only when at least one row matched.
    Unreadable or unwritable files are logged and reported as unchanged.
    """
    try:
        lines, encoding = read_lines(path)
    except OSError as e:
        log.warning("Can't open %s (%s)", path, e)
        return ImportResult(path=str(path))

    result = import_lines(lines, index, path=str(path))
    if not result.modified:
        log.info("No changes in %s", path)
        return result

    try:
        result.encoding = write_text(path, result.content, encoding)
    except OSError as e:
        log.warning("Can't write %s (%s)", path, e)
        return ImportResult(path=str(path))

    log.info(result.report_line())
    return result
