"""
iparams Filesystem Record Store.

File I/O uses the standard library only; the accepted type tags come from
the value kind registry unless passed in.

The whole file is read into memory for every operation. Updates rewrite the
file in one pass; first writes of a (key, type tag) only append. New content
is fully encoded before the file is opened for writing, so an unencodable
value raises without touching the file. Undecodable bytes are carried through
reads and rewrites unchanged and their lines count as malformed.
"""
from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Union

from .codec import Record, encode, key_of, parse_record
from .interfaces import RecordStore

logger = logging.getLogger(__name__)

# Code points produced by errors="surrogateescape" for undecodable bytes
_UNDECODABLE = re.compile("[\udc80-\udcff]")
_ERRORS = "surrogateescape"


class FileRecordStore(RecordStore):
    """
    Line-record storage in a single text file.

    Malformed lines are skipped by every lookup and count, and survive until
    an operation rewrites them away (delete-all, delete-all-for-key).
    """

    def __init__(
        self,
        path: Union[str, Path],
        known_tags: Optional[Iterable[str]] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize the store. The file itself is created on first access.

        Args:
            path: Backing file path
            known_tags: Type tags accepted as well-formed (default: all value kinds)
            encoding: Text encoding of the file
        """
        if known_tags is None:
            from ..values.registry import known_tags as registry_tags
            known_tags = registry_tags()
        self.path = Path(path)
        self.known_tags: FrozenSet[str] = frozenset(known_tags)
        self.encoding = encoding

    # ── file primitives ───────────────────────────────────────────────────

    def ensure_file_exists(self) -> None:
        """Create an empty file if absent."""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "ab"):
            pass
        logger.debug(f"Created store file: {self.path}")

    def read_lines(self) -> List[str]:
        """Read every line (without terminators)."""
        self.ensure_file_exists()
        with open(self.path, "r", encoding=self.encoding, errors=_ERRORS) as f:
            content = f.read()
        if not content:
            return []
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def _encode_lines(self, lines: List[str]) -> bytes:
        return "".join(line + os.linesep for line in lines).encode(self.encoding, _ERRORS)

    def write_lines(self, lines: List[str]) -> None:
        """Overwrite the file with ``lines``."""
        data = self._encode_lines(lines)
        with open(self.path, "wb") as f:
            f.write(data)
        logger.debug(f"Rewrote store file: {self.path} ({len(lines)} lines)")

    def _ends_without_newline(self) -> bool:
        with open(self.path, "rb") as f:
            f.seek(0, 2)
            if f.tell() == 0:
                return False
            f.seek(-1, 2)
            return f.read(1) not in (b"\n", b"\r")

    def _parse(self, line: str) -> Optional[Record]:
        if _UNDECODABLE.search(line):
            return None
        return parse_record(line, self.known_tags)

    # ── lookups ───────────────────────────────────────────────────────────

    def _match_index(self, lines: List[str], key: str, type_tag: str) -> Optional[int]:
        for index, line in enumerate(lines):
            record = self._parse(line)
            if record is not None and record.key == key and record.type_tag == type_tag:
                return index
        return None

    def iter_records(self) -> Iterator[Record]:
        """Yield well-formed records in file order."""
        for line in self.read_lines():
            record = self._parse(line)
            if record is not None:
                yield record

    def find_record_index(self, key: str, type_tag: str) -> Optional[int]:
        """Line index of the first well-formed match, or None."""
        return self._match_index(self.read_lines(), key, type_tag)

    def find_record(self, key: str, type_tag: str) -> Optional[Record]:
        """First well-formed match, or None."""
        lines = self.read_lines()
        index = self._match_index(lines, key, type_tag)
        if index is None:
            return None
        return self._parse(lines[index])

    # ── mutations ─────────────────────────────────────────────────────────

    def append_record(self, key: str, text_value: str, type_tag: str) -> None:
        """Append one line at the end of the file."""
        data = self._encode_lines([encode(key, text_value, type_tag)])
        self.ensure_file_exists()
        # A hand-edited file may lack the final newline
        if self._ends_without_newline():
            data = os.linesep.encode(self.encoding) + data
        with open(self.path, "ab") as f:
            f.write(data)
        logger.debug(f"Appended {type_tag} record '{key}' to {self.path}")

    def replace_or_append(self, key: str, text_value: str, type_tag: str) -> None:
        """
        Upsert the record for (key, type_tag).

        An existing record is removed and the new one goes to the end of the
        file (full rewrite). Otherwise only the new line is appended.
        """
        lines = self.read_lines()
        index = self._match_index(lines, key, type_tag)
        if index is None:
            self.append_record(key, text_value, type_tag)
            return
        del lines[index]
        lines.append(encode(key, text_value, type_tag))
        self.write_lines(lines)

    def delete_record(self, key: str, type_tag: str) -> bool:
        """Delete the record for (key, type_tag). Returns False if absent."""
        lines = self.read_lines()
        index = self._match_index(lines, key, type_tag)
        if index is None:
            return False
        del lines[index]
        self.write_lines(lines)
        return True

    def delete_all_for_key(self, key: str) -> int:
        """
        Delete every line whose key segment is ``key``.

        Matching is lenient: a line only needs a key segment, so corrupted
        lines for the key are removed too. Returns the number of lines removed.
        """
        lines = self.read_lines()
        kept = [line for line in lines if key_of(line) != key]
        removed = len(lines) - len(kept)
        if removed:
            self.write_lines(kept)
        return removed

    def truncate(self) -> None:
        """Reset the file to zero length."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "wb"):
            pass
        logger.debug(f"Truncated store file: {self.path}")
