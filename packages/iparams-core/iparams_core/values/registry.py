"""
Kind Registry - text codecs, defaults and parsers for every value kind.

Each ValueKind maps to one KindCodec. Lookups outside the closed set fail
immediately with UnsupportedKindError; parse failures raise ValueParseError,
which callers treat as recoverable.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Union

from ..errors import ValueParseError
from .kinds import TypedValue, ValueKind, Vector3

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Parsers / formatters
# ---------------------------------------------------------------------------

def _parse_string(text: str) -> str:
    return text


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueParseError(ValueKind.INT.value, text)
    try:
        return int(text)
    except ValueError:
        # Digit count above the interpreter's int/str conversion limit
        raise ValueParseError(ValueKind.INT.value, text) from None


def _to_float(text: str, kind: ValueKind) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueParseError(kind.value, text)
    return float(text)


def _parse_float(text: str) -> float:
    return _to_float(text, ValueKind.FLOAT)


def _format_float(value: float) -> str:
    return repr(float(value))


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueParseError(ValueKind.BOOL.value, text)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_vector3(text: str) -> Vector3:
    if not (text.startswith("(") and text.endswith(")")):
        raise ValueParseError(ValueKind.VECTOR3.value, text)
    parts = text[1:-1].split(", ")
    if len(parts) != 3:
        raise ValueParseError(ValueKind.VECTOR3.value, text)
    # Files written under a comma-decimal locale hold "1,5" components
    x, y, z = (_to_float(p.replace(",", "."), ValueKind.VECTOR3) for p in parts)
    return Vector3(x, y, z)


def _format_vector3(value: Vector3) -> str:
    return f"({_format_float(value.x)}, {_format_float(value.y)}, {_format_float(value.z)})"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KindCodec:
    """Text representation rules for one value kind."""
    kind: ValueKind
    default: Callable[[], Any]
    format: Callable[[Any], str]
    parse: Callable[[str], Any]

    @property
    def tag(self) -> str:
        return self.kind.value


_REGISTRY: Dict[ValueKind, KindCodec] = {
    codec.kind: codec
    for codec in (
        KindCodec(ValueKind.STRING, lambda: "", str, _parse_string),
        KindCodec(ValueKind.INT, lambda: 0, str, _parse_int),
        KindCodec(ValueKind.FLOAT, lambda: 0.0, _format_float, _parse_float),
        KindCodec(ValueKind.BOOL, lambda: False, _format_bool, _parse_bool),
        KindCodec(ValueKind.VECTOR3, Vector3.zero, _format_vector3, _parse_vector3),
    )
}


def get_codec(kind: Union[ValueKind, str]) -> KindCodec:
    """Codec for ``kind``. Raises UnsupportedKindError outside the closed set."""
    return _REGISTRY[ValueKind.coerce(kind)]


def known_tags() -> FrozenSet[str]:
    """Every type tag a well-formed record may carry."""
    return frozenset(codec.tag for codec in _REGISTRY.values())


def default_for(kind: Union[ValueKind, str]) -> Any:
    """Default (and recovery) value of ``kind``."""
    return get_codec(kind).default()


def format_value(typed: TypedValue) -> str:
    """Canonical text of a typed value."""
    return get_codec(typed.kind).format(typed.value)


def parse_value(text: str, kind: Union[ValueKind, str]) -> Any:
    """Parse stored text as ``kind``. Raises ValueParseError on failure."""
    return get_codec(kind).parse(text)
