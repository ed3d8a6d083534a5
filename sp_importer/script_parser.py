"""
Script dump parser.

After a header that ends with the first line starting with `#`, a dump is a
sequence of blocks separated by blank lines:

    Speaker
    original line
    translated line
    original continuation
    translated continuation

Original and translated lines strictly alternate. A `Choice: ` line met in
place of an original line starts a new block without a speaker line.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Iterable, List

from .decoding import read_lines
from .fuzzy import normalize
from .models import Entry
from .rules import (
    CHOICE_PREFIX,
    COMMENT_PREFIX,
    HEADER_MARKER,
    LINE_BREAK_MARKER,
    NAME_ANCHOR_PREFIX,
)

log = logging.getLogger(__name__)


class ParserState(enum.Enum):
    AWAITING_SECTION_NAME = "awaiting_section_name"
    AWAITING_ORIGINAL = "awaiting_original"
    AWAITING_TRANSLATION = "awaiting_translation"


def _strip_prefix(line: str, prefix: str) -> str:
    if line.startswith(prefix):
        return line[len(prefix):]
    return line


class ScriptParser:
    """Line-driven parser for one script dump; call `feed` per line, then `finish`."""

    def __init__(self, source_file: str):
        self.source_file = source_file
        self.state = ParserState.AWAITING_SECTION_NAME
        self.entries: List[Entry] = []
        self._original = ""
        self._translation = ""

    def _flush(self) -> None:
        # consecutive separators would otherwise produce empty keys
        if self._original or self._translation:
            self.entries.append(
                Entry(
                    original=normalize(self._original),
                    translation=self._translation,
                    source_file=self.source_file,
                )
            )
        self._original = ""
        self._translation = ""

    def feed(self, line: str) -> ParserState:
        """Consume one line and return the state it leads to."""
        self.state = self._transition(self.state, line)
        return self.state

    def _transition(self, state: ParserState, line: str) -> ParserState:
        if not line:
            self._flush()
            return ParserState.AWAITING_SECTION_NAME

        if state is ParserState.AWAITING_SECTION_NAME:
            # speaker names are dropped; "# [" lines are section anchors, not names
            if line.startswith(NAME_ANCHOR_PREFIX):
                return ParserState.AWAITING_SECTION_NAME
            return ParserState.AWAITING_ORIGINAL

        text = _strip_prefix(line, COMMENT_PREFIX)
        is_choice = text.startswith(CHOICE_PREFIX)
        text = _strip_prefix(text, CHOICE_PREFIX)

        if state is ParserState.AWAITING_ORIGINAL:
            if is_choice:
                self._flush()
            self._original += text
            return ParserState.AWAITING_TRANSLATION

        if self._translation:
            self._translation += LINE_BREAK_MARKER
        self._translation += text
        return ParserState.AWAITING_ORIGINAL

    def finish(self) -> List[Entry]:
        self._flush()
        return self.entries


def _skip_header(lines: Iterable[str]) -> Iterable[str]:
    it = iter(lines)
    for line in it:
        if line.startswith(HEADER_MARKER):
            break
    return it


def parse(lines: Iterable[str], source_file: str) -> List[Entry]:
    """Parse the lines of one script dump into Entries tagged with `source_file`."""
    parser = ScriptParser(source_file)
    for line in _skip_header(lines):
        parser.feed(line)
    return parser.finish()


def load_script_file(path: Path) -> List[Entry]:
    """
    Parse the script dump at `path`.

    An unreadable file is logged and contributes no entries.
    """
    path = Path(path)
    try:
        lines, _ = read_lines(path)
    except OSError as e:
        log.warning("Can't open %s (%s)", path, e)
        return []

    entries = parse(lines, path.name)
    log.debug("Parsed %d entries from %s", len(entries), path)
    return entries
