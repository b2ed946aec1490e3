"""
iparams Persistence - line-record codec, storage interface and file store.

File I/O uses the standard library only.
"""
from .codec import DELIMITER, Record, encode, decode, parse_record
from .interfaces import RecordStore
from .fs_store import FileRecordStore

__all__ = [
    # Codec
    "DELIMITER",
    "Record",
    "encode",
    "decode",
    "parse_record",
    # Interfaces
    "RecordStore",
    # Implementations
    "FileRecordStore",
]
