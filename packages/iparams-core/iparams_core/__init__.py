"""
iparams Core Library.

A small persistent typed key-value store for application settings:
- String, Int, Float, Bool and Vector3 values under string keys
- One line per record in a flat text file, no index or database engine
- Corrupted records are skipped by lookups and reset to defaults on read
"""

__version__ = "0.1.0"

from .errors import ParamsError, UnsupportedKindError, ValueParseError
from .values import ValueKind, Vector3, TypedValue
from .params import (
    ParamStore,
    default_store,
    reset_default_store,
    set_file_name,
    set_string,
    get_string,
    has_key_string,
    delete_key_string,
    set_int,
    get_int,
    has_key_int,
    delete_key_int,
    set_float,
    get_float,
    has_key_float,
    delete_key_float,
    set_bool,
    get_bool,
    has_key_bool,
    delete_key_bool,
    set_vector3,
    get_vector3,
    has_key_vector3,
    delete_key_vector3,
    has_key,
    delete_all_keys,
    pairs_count,
    delete_all,
)

__all__ = [
    "__version__",
    # Errors
    "ParamsError",
    "UnsupportedKindError",
    "ValueParseError",
    # Values
    "ValueKind",
    "Vector3",
    "TypedValue",
    # Store
    "ParamStore",
    "default_store",
    "reset_default_store",
    "set_file_name",
    # Per-kind accessors
    "set_string",
    "get_string",
    "has_key_string",
    "delete_key_string",
    "set_int",
    "get_int",
    "has_key_int",
    "delete_key_int",
    "set_float",
    "get_float",
    "has_key_float",
    "delete_key_float",
    "set_bool",
    "get_bool",
    "has_key_bool",
    "delete_key_bool",
    "set_vector3",
    "get_vector3",
    "has_key_vector3",
    "delete_key_vector3",
    # Whole-store
    "has_key",
    "delete_all_keys",
    "pairs_count",
    "delete_all",
]
