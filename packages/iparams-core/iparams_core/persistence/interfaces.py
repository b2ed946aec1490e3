"""
iparams Persistence Interfaces.

Abstract base class for record storage backends.
"""
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .codec import Record


class RecordStore(ABC):
    """Interface for line-record storage keyed by (key, type tag)."""

    @abstractmethod
    def ensure_file_exists(self) -> None:
        """Create the backing storage if it is absent."""
        pass

    @abstractmethod
    def iter_records(self) -> Iterator[Record]:
        """Yield every well-formed record in storage order."""
        pass

    @abstractmethod
    def find_record_index(self, key: str, type_tag: str) -> Optional[int]:
        """Position of the first well-formed (key, type_tag) match."""
        pass

    @abstractmethod
    def find_record(self, key: str, type_tag: str) -> Optional[Record]:
        """First well-formed (key, type_tag) match."""
        pass

    @abstractmethod
    def append_record(self, key: str, text_value: str, type_tag: str) -> None:
        """Append one record without rewriting existing ones."""
        pass

    @abstractmethod
    def replace_or_append(self, key: str, text_value: str, type_tag: str) -> None:
        """Upsert the record for (key, type_tag)."""
        pass

    @abstractmethod
    def delete_record(self, key: str, type_tag: str) -> bool:
        """Delete the record for (key, type_tag)."""
        pass

    @abstractmethod
    def delete_all_for_key(self, key: str) -> int:
        """Delete every line carrying ``key``, whatever its type tag."""
        pass

    @abstractmethod
    def truncate(self) -> None:
        """Delete every record."""
        pass

    def has_key(self, key: str) -> bool:
        """Check if any well-formed record uses ``key``."""
        return any(record.key == key for record in self.iter_records())

    def count_well_formed(self) -> int:
        """Number of well-formed records."""
        return sum(1 for _ in self.iter_records())
