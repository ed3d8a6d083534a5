"""Translation memory built from every script dump, read-only once built."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .fuzzy import similar
from .models import Entry
from .script_parser import load_script_file

log = logging.getLogger(__name__)


class TranslationMemory:
    """
    Flat, ordered collection of Entries.

    No deduplication: several entries may share a key, and lookups return the
    first one in insertion order.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: Tuple[Entry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def source_files(self) -> List[str]:
        seen = {}
        for e in self._entries:
            seen.setdefault(e.source_file, None)
        return list(seen)

    def find(self, original: str, pinned_source: Optional[str] = None) -> Optional[Entry]:
        """
        Return the first entry whose key is similar to the normalized `original`.

        With `pinned_source` set, entries from any other script file are ignored.
        """
        for entry in self._entries:
            if pinned_source is not None and entry.source_file != pinned_source:
                continue
            if similar(original, entry.original):
                return entry
        return None


def build_index(script_paths: Iterable[Path]) -> TranslationMemory:
    """Parse each script file in order and concatenate the results."""
    entries = []
    for path in script_paths:
        entries.extend(load_script_file(path))
    index = TranslationMemory(entries)
    log.debug("Indexed %d entries", len(index))
    return index
