"""
iparams Values - value kinds, Vector3 and the kind codec registry.
"""
from .kinds import ValueKind, Vector3, TypedValue
from .registry import (
    KindCodec,
    get_codec,
    known_tags,
    default_for,
    format_value,
    parse_value,
)

__all__ = [
    "ValueKind",
    "Vector3",
    "TypedValue",
    "KindCodec",
    "get_codec",
    "known_tags",
    "default_for",
    "format_value",
    "parse_value",
]
