"""
Reading and writing the text files the importer works on.

Responsibilities:
- encoding detection, so files can be rewritten in the encoding they came in
- newline normalization (CRLF/CR -> LF) before splitting into lines
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from charset_normalizer import from_bytes

log = logging.getLogger(__name__)


def decode_bytes(raw: bytes) -> Tuple[str, str]:
    """
    Decode `raw` and return (text, encoding used).

    Rules:
    - UTF-8 with a BOM decodes as utf-8-sig so the BOM survives a rewrite.
    - Plain UTF-8 is tried next.
    - Otherwise use the charset-normalizer best guess.
    - If that fails too, decode as latin-1, which maps every byte and
      writes the same bytes back for rows that are not rewritten.

    Decoding is always strict; replacement characters are never produced.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        try:
            return raw.decode("utf-8-sig"), "utf-8-sig"
        except UnicodeDecodeError:
            pass

    try:
        return raw.decode("utf-8"), "utf-8"
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is not None:
        try:
            return raw.decode(match.encoding), match.encoding
        except (LookupError, UnicodeDecodeError):
            log.debug("detected encoding %s failed to decode", match.encoding)

    return raw.decode("latin-1"), "latin-1"


def encode_text(text: str, encoding: str) -> Tuple[bytes, str]:
    """
    Encode `text` strictly in `encoding` and return (bytes, encoding used).

    Text the original encoding cannot represent (recovered translations in a
    legacy codepage file, for example) is written as UTF-8 instead.
    """
    try:
        return text.encode(encoding), encoding
    except UnicodeEncodeError:
        log.info("%s cannot represent the imported text, writing utf-8", encoding)
        return text.encode("utf-8"), "utf-8"
    except LookupError:
        return text.encode("utf-8"), "utf-8"


def split_lines(text: str) -> List[str]:
    """Split on LF, CRLF or CR. A trailing newline yields a final empty line."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def read_lines(path: Path) -> Tuple[List[str], str]:
    """Read a file and return (lines, encoding). Raises OSError when unreadable."""
    text, encoding = decode_bytes(Path(path).read_bytes())
    return split_lines(text), encoding


def write_text(path: Path, text: str, encoding: str) -> str:
    """Write `text` to `path` and return the encoding actually used."""
    data, used = encode_text(text, encoding)
    Path(path).write_bytes(data)
    return used
