"""
iparams Key-Value Facade.

ParamStore exposes Set/Get/Has/Delete per value kind on top of a record
store. Get is read-or-initialize: a missing or unreadable record is replaced
by the kind's default, which is then returned.

The module-level functions at the bottom act on a lazily created
process-wide default ParamStore.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .errors import ValueParseError
from .persistence import FileRecordStore
from .services.config_service import StoreSettings, get_store_settings, resolve_store_path
from .values import TypedValue, ValueKind, Vector3, get_codec

logger = logging.getLogger(__name__)

KindLike = Union[ValueKind, str]
Vector3Like = Union[Vector3, Sequence[float]]


def _check_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError(f"Key must be a non-empty string, got {key!r}")


class ParamStore:
    """
    Typed key-value settings persisted in one line-record file.

    Each (key, kind) pair holds at most one record, so the same key can carry
    e.g. an Int and a String at the same time.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        settings: Optional[StoreSettings] = None,
    ):
        """
        Args:
            path: Store file. Relative paths resolve under ``settings.storage_dir``.
                  Defaults to ``settings.file_name``.
            settings: Store settings (default: from iparams.yaml / environment)
        """
        self.settings = settings if settings is not None else get_store_settings()
        self._records: FileRecordStore = self._open(path if path is not None else self.settings.file_name)

    def _open(self, name: Union[str, Path]) -> FileRecordStore:
        return FileRecordStore(resolve_store_path(name, self.settings), encoding=self.settings.encoding)

    @property
    def path(self) -> Path:
        return self._records.path

    @property
    def records(self) -> FileRecordStore:
        """The underlying record store."""
        return self._records

    def set_file_name(self, name: Union[str, Path]) -> None:
        """
        Point the store at another file. Existing data is not migrated.
        """
        self._records = self._open(name)
        logger.debug(f"Store target set to {self._records.path}")

    # ── generic operations ────────────────────────────────────────────────

    def set_value(self, key: str, kind: KindLike, value: Any) -> None:
        """Upsert ``value`` as ``kind`` under ``key``."""
        _check_key(key)
        typed = TypedValue(kind, value)
        codec = get_codec(typed.kind)
        self._records.replace_or_append(key, codec.format(typed.value), codec.tag)

    def get_value(self, key: str, kind: KindLike) -> Any:
        """Stored value of ``kind`` under ``key``, initializing it to the default."""
        _check_key(key)
        codec = get_codec(kind)
        record = self._records.find_record(key, codec.tag)
        if record is None:
            value = codec.default()
            self._records.append_record(key, codec.format(value), codec.tag)
            return value
        try:
            return codec.parse(record.value)
        except ValueParseError as e:
            logger.warning(f"Corrupted {codec.tag} record '{key}' in {self.path}: {e}; resetting to default")
            value = codec.default()
            self._records.replace_or_append(key, codec.format(value), codec.tag)
            return value

    def has_key_of_kind(self, key: str, kind: KindLike) -> bool:
        return self._records.find_record_index(key, get_codec(kind).tag) is not None

    def delete_key_of_kind(self, key: str, kind: KindLike) -> None:
        self._records.delete_record(key, get_codec(kind).tag)

    # ── whole-store operations ────────────────────────────────────────────

    def has_key(self, key: str) -> bool:
        """True if a record of any kind exists for ``key``."""
        return self._records.has_key(key)

    def delete_all_keys(self, key: str) -> None:
        """Remove every record for ``key``, whatever its kind."""
        self._records.delete_all_for_key(key)

    def pairs_count(self) -> int:
        """Number of well-formed records."""
        return self._records.count_well_formed()

    def delete_all(self) -> None:
        """Remove every record."""
        self._records.truncate()

    # ── String ────────────────────────────────────────────────────────────

    def set_string(self, key: str, value: str) -> None:
        self.set_value(key, ValueKind.STRING, value)

    def get_string(self, key: str) -> str:
        return self.get_value(key, ValueKind.STRING)

    def has_key_string(self, key: str) -> bool:
        return self.has_key_of_kind(key, ValueKind.STRING)

    def delete_key_string(self, key: str) -> None:
        self.delete_key_of_kind(key, ValueKind.STRING)

    # ── Int ───────────────────────────────────────────────────────────────

    def set_int(self, key: str, value: int) -> None:
        self.set_value(key, ValueKind.INT, value)

    def get_int(self, key: str) -> int:
        return self.get_value(key, ValueKind.INT)

    def has_key_int(self, key: str) -> bool:
        return self.has_key_of_kind(key, ValueKind.INT)

    def delete_key_int(self, key: str) -> None:
        self.delete_key_of_kind(key, ValueKind.INT)

    # ── Float ─────────────────────────────────────────────────────────────

    def set_float(self, key: str, value: float) -> None:
        self.set_value(key, ValueKind.FLOAT, value)

    def get_float(self, key: str) -> float:
        return self.get_value(key, ValueKind.FLOAT)

    def has_key_float(self, key: str) -> bool:
        return self.has_key_of_kind(key, ValueKind.FLOAT)

    def delete_key_float(self, key: str) -> None:
        self.delete_key_of_kind(key, ValueKind.FLOAT)

    # ── Bool ──────────────────────────────────────────────────────────────

    def set_bool(self, key: str, value: bool) -> None:
        self.set_value(key, ValueKind.BOOL, value)

    def get_bool(self, key: str) -> bool:
        return self.get_value(key, ValueKind.BOOL)

    def has_key_bool(self, key: str) -> bool:
        return self.has_key_of_kind(key, ValueKind.BOOL)

    def delete_key_bool(self, key: str) -> None:
        self.delete_key_of_kind(key, ValueKind.BOOL)

    # ── Vector3 ───────────────────────────────────────────────────────────

    def set_vector3(self, key: str, value: Vector3Like) -> None:
        self.set_value(key, ValueKind.VECTOR3, value)

    def get_vector3(self, key: str) -> Vector3:
        return self.get_value(key, ValueKind.VECTOR3)

    def has_key_vector3(self, key: str) -> bool:
        return self.has_key_of_kind(key, ValueKind.VECTOR3)

    def delete_key_vector3(self, key: str) -> None:
        self.delete_key_of_kind(key, ValueKind.VECTOR3)


# =============================================================================
# DEFAULT STORE
# =============================================================================

_default_store: Optional[ParamStore] = None


def default_store() -> ParamStore:
    """Process-wide store, created from settings on first use."""
    global _default_store
    if _default_store is None:
        _default_store = ParamStore()
    return _default_store


def reset_default_store() -> None:
    """Forget the default store (primarily for tests)."""
    global _default_store
    _default_store = None


def set_file_name(name: Union[str, Path]) -> None:
    default_store().set_file_name(name)


def set_string(key: str, value: str) -> None:
    default_store().set_string(key, value)


def get_string(key: str) -> str:
    return default_store().get_string(key)


def has_key_string(key: str) -> bool:
    return default_store().has_key_string(key)


def delete_key_string(key: str) -> None:
    default_store().delete_key_string(key)


def set_int(key: str, value: int) -> None:
    default_store().set_int(key, value)


def get_int(key: str) -> int:
    return default_store().get_int(key)


def has_key_int(key: str) -> bool:
    return default_store().has_key_int(key)


def delete_key_int(key: str) -> None:
    default_store().delete_key_int(key)


def set_float(key: str, value: float) -> None:
    default_store().set_float(key, value)


def get_float(key: str) -> float:
    return default_store().get_float(key)


def has_key_float(key: str) -> bool:
    return default_store().has_key_float(key)


def delete_key_float(key: str) -> None:
    default_store().delete_key_float(key)


def set_bool(key: str, value: bool) -> None:
    default_store().set_bool(key, value)


def get_bool(key: str) -> bool:
    return default_store().get_bool(key)


def has_key_bool(key: str) -> bool:
    return default_store().has_key_bool(key)


def delete_key_bool(key: str) -> None:
    default_store().delete_key_bool(key)


def set_vector3(key: str, value: Vector3Like) -> None:
    default_store().set_vector3(key, value)


def get_vector3(key: str) -> Vector3:
    return default_store().get_vector3(key)


def has_key_vector3(key: str) -> bool:
    return default_store().has_key_vector3(key)


def delete_key_vector3(key: str) -> None:
    default_store().delete_key_vector3(key)


def has_key(key: str) -> bool:
    return default_store().has_key(key)


def delete_all_keys(key: str) -> None:
    default_store().delete_all_keys(key)


def pairs_count() -> int:
    return default_store().pairs_count()


def delete_all() -> None:
    default_store().delete_all()
