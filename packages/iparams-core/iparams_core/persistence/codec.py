"""
Record codec - one key/value entry per line.

Line layout:

    |~-~|<key>|~-~|<text value>|~-~|<type tag>|~-~|

Nothing is escaped. A key or value containing the delimiter (or a newline)
produces a line whose fields cannot be recovered; such lines end up treated
as corrupted by the store.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

DELIMITER = "|~-~|"

# Segment positions after splitting on DELIMITER
KEY_INDEX = 1
VALUE_INDEX = 2
TAG_INDEX = 3
MIN_SEGMENTS = 4


@dataclass(frozen=True)
class Record:
    """One decoded, well-formed line."""
    key: str
    value: str
    type_tag: str

    def encode(self) -> str:
        return encode(self.key, self.value, self.type_tag)


def encode(key: str, text_value: str, type_tag: str) -> str:
    """Serialize a record to a line (without terminator)."""
    return f"{DELIMITER}{key}{DELIMITER}{text_value}{DELIMITER}{type_tag}{DELIMITER}"


def decode(line: str) -> List[str]:
    """Split a line into its raw segments."""
    return line.split(DELIMITER)


def key_of(line: str) -> Optional[str]:
    """Key segment of a line, or None if the line has no key segment."""
    segments = decode(line)
    if len(segments) <= KEY_INDEX:
        return None
    return segments[KEY_INDEX]


def parse_record(line: str, known_tags: Iterable[str]) -> Optional[Record]:
    """
    Decode a line into a Record if it is well-formed.

    Well-formed means at least four segments, a non-empty key and a type tag
    from ``known_tags``. Anything else returns None.
    """
    segments = decode(line)
    if len(segments) < MIN_SEGMENTS:
        return None
    key = segments[KEY_INDEX]
    tag = segments[TAG_INDEX]
    if not key or tag not in known_tags:
        return None
    return Record(key=key, value=segments[VALUE_INDEX], type_tag=tag)
