"""
iparams Value Kinds.

The closed set of storable kinds and the tagged value that carries a payload
of one of them. The kind is always chosen by the caller (the typed accessor
that was invoked), never guessed from the payload.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..errors import UnsupportedKindError


class ValueKind(str, Enum):
    """Kind of stored value. The enum value is the on-disk type tag."""
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOL = "Bool"
    VECTOR3 = "Vector3"

    @classmethod
    def coerce(cls, kind: Union["ValueKind", str]) -> "ValueKind":
        """
        Resolve a kind from an enum member, a type tag or a member name.

        Names and tags are matched case-insensitively ("int", "Int", "INT").
        Raises UnsupportedKindError for anything else.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            lowered = kind.lower()
            for member in cls:
                if lowered in (member.value.lower(), member.name.lower()):
                    return member
        raise UnsupportedKindError(
            f"Unsupported value kind {kind!r}. Valid: {[m.value for m in cls]}"
        )


class Vector3(BaseModel):
    """Immutable three-component float vector."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, **data: Any):
        super().__init__(x=x, y=y, z=z, **data)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (tuple, list)):
            return self.as_tuple() == tuple(other)
        return super().__eq__(other)

    def __hash__(self) -> int:
        # Equal to the matching tuple, so hash like it
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_payload(kind: ValueKind, value: Any) -> Any:
    """Validate (and normalize) a payload for ``kind``."""
    if kind is ValueKind.STRING and isinstance(value, str):
        return value
    if kind is ValueKind.INT and isinstance(value, int) and not isinstance(value, bool):
        try:
            str(value)
        except ValueError:
            raise ValueError(f"Int value too large to store as text ({value.bit_length()} bits)") from None
        return value
    if kind is ValueKind.FLOAT and _is_number(value):
        return float(value)
    if kind is ValueKind.BOOL and isinstance(value, bool):
        return value
    if kind is ValueKind.VECTOR3:
        if isinstance(value, Vector3):
            return value
        if isinstance(value, (tuple, list)) and len(value) == 3 and all(_is_number(c) for c in value):
            return Vector3(*value)
    raise UnsupportedKindError(
        f"Cannot store {type(value).__name__} value as {kind.value}"
    )


@dataclass(frozen=True)
class TypedValue:
    """A payload tagged with its kind; validated on construction."""
    kind: ValueKind
    value: Any

    def __post_init__(self):
        kind = ValueKind.coerce(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", _check_payload(kind, self.value))

    @property
    def tag(self) -> str:
        return self.kind.value
