# =============================================================================
# jsonrift/core/value.py
# Generic JSON value model -- the tagged union the comparator operates on.
# =============================================================================
#
# SCOPE
# -----
# Six frozen variants, one per JSON kind:
#
#   JsonNull    -- null
#   JsonBool    -- true / false
#   JsonNumber  -- finite int or float, kept as decoded
#   JsonString  -- str
#   JsonArray   -- ordered tuple of JsonValue
#   JsonObject  -- string-keyed mapping of JsonValue
#
# Every variant carries a ValueKind tag. Callers dispatch on .kind, never on
# isinstance() of native Python types, so bool is never mistaken for int.
#
# NUMERIC EQUALITY
# ----------------
# Numbers keep their decoded Python type. int and float never compare equal,
# so 1 and 1.0 are different values. Non-finite floats are rejected on the
# way in. The comparator uses values_equal() for every scalar pair.
#
# No I/O. No logging. No module-level mutable state.
# =============================================================================

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, unique
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple, Union

from jsonrift.core.exceptions import EncodeError


@unique
class ValueKind(str, Enum):
    """Discriminator for the JsonValue variants."""
    NULL   = "NULL"
    BOOL   = "BOOL"
    NUMBER = "NUMBER"
    STRING = "STRING"
    ARRAY  = "ARRAY"
    OBJECT = "OBJECT"


class JsonValue:
    """
    Base class of the generic value union. Never instantiated directly.

    Equality (==) is structural and delegates to values_equal().
    Values are not hashable because JsonObject wraps a mapping.
    """
    kind: ValueKind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return values_equal(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class JsonNull(JsonValue):
    kind: ValueKind = field(default=ValueKind.NULL, init=False)

    def __repr__(self) -> str:
        return "JsonNull()"


@dataclass(frozen=True, eq=False)
class JsonBool(JsonValue):
    value: bool
    kind:  ValueKind = field(default=ValueKind.BOOL, init=False)


@dataclass(frozen=True, eq=False)
class JsonNumber(JsonValue):
    value: Union[int, float]
    kind:  ValueKind = field(default=ValueKind.NUMBER, init=False)


@dataclass(frozen=True, eq=False)
class JsonString(JsonValue):
    value: str
    kind:  ValueKind = field(default=ValueKind.STRING, init=False)


@dataclass(frozen=True, eq=False)
class JsonArray(JsonValue):
    items: Tuple[JsonValue, ...] = ()
    kind:  ValueKind = field(default=ValueKind.ARRAY, init=False)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]


@dataclass(frozen=True, eq=False)
class JsonObject(JsonValue):
    """
    String-keyed mapping. The members mapping is wrapped read-only on
    construction; insertion order is preserved but never relied upon.
    """
    members: Mapping[str, JsonValue] = field(default_factory=dict)
    kind:    ValueKind = field(default=ValueKind.OBJECT, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def sorted_keys(self) -> Tuple[str, ...]:
        return tuple(sorted(self.members))


# Shared singleton; JsonNull has no payload.
NULL = JsonNull()


# =============================================================================
# EQUALITY
# =============================================================================

def _numbers_equal(a: Union[int, float], b: Union[int, float]) -> bool:
    if type(a) is not type(b):
        return False
    return a == b


def values_equal(a: JsonValue, b: JsonValue) -> bool:
    """
    Deep structural equality.

    Kinds must match. Numbers must match in both Python type and value.
    Objects are equal when they hold the same key set and every member is
    equal; key order is irrelevant. Arrays are compared position by position.
    """
    if a.kind is not b.kind:
        return False
    kind = a.kind
    if kind is ValueKind.NULL:
        return True
    if kind is ValueKind.BOOL or kind is ValueKind.STRING:
        return a.value == b.value  # type: ignore[attr-defined]
    if kind is ValueKind.NUMBER:
        return _numbers_equal(a.value, b.value)  # type: ignore[attr-defined]
    if kind is ValueKind.ARRAY:
        if len(a.items) != len(b.items):  # type: ignore[attr-defined]
            return False
        for x, y in zip(a.items, b.items):  # type: ignore[attr-defined]
            if not values_equal(x, y):
                return False
        return True
    if kind is ValueKind.OBJECT:
        members_a = a.members  # type: ignore[attr-defined]
        members_b = b.members  # type: ignore[attr-defined]
        if members_a.keys() != members_b.keys():
            return False
        for k in members_a:
            if not values_equal(members_a[k], members_b[k]):
                return False
        return True
    raise TypeError(f"values_equal: unknown value kind {kind!r}")


# =============================================================================
# NATIVE CONVERSION
# =============================================================================

def from_native(obj: Any, path: str = "$") -> JsonValue:
    """
    Convert a decoded native structure (as produced by json.loads) into a
    JsonValue tree.

    Raises EncodeError on non-string mapping keys, non-finite floats or
    unsupported types. Number subclasses (IntEnum members, for instance) are
    stored as plain int / float. The path argument only feeds error messages.
    """
    if obj is None:
        return NULL
    # bool before int: bool is an int subclass.
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise EncodeError(
                f"EncodeError: non-finite float {obj!r} at {path} has no JSON representation",
                source=path,
            )
        return JsonNumber(float(obj))
    if isinstance(obj, int):
        return JsonNumber(int(obj))
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, (list, tuple)):
        items = []
        for i, item in enumerate(obj):
            items.append(from_native(item, f"{path}[{i}]"))
        return JsonArray(tuple(items))
    if isinstance(obj, dict):
        members: Dict[str, JsonValue] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise EncodeError(
                    f"EncodeError: mapping key {key!r} at {path} is not a string",
                    source=path,
                )
            members[key] = from_native(item, f"{path}.{key}")
        return JsonObject(members)
    raise EncodeError(
        f"EncodeError: value of type {type(obj).__name__} at {path} "
        "has no JSON representation",
        source=path,
    )


def to_native(value: JsonValue) -> Any:
    """Inverse of from_native(). Objects become dicts, arrays become lists."""
    kind = value.kind
    if kind is ValueKind.NULL:
        return None
    if kind in (ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING):
        return value.value  # type: ignore[attr-defined]
    # Plain loops: one stack frame per nesting level.
    if kind is ValueKind.ARRAY:
        items = []
        for item in value.items:  # type: ignore[attr-defined]
            items.append(to_native(item))
        return items
    if kind is ValueKind.OBJECT:
        members = {}
        for k, v in value.members.items():  # type: ignore[attr-defined]
            members[k] = to_native(v)
        return members
    raise TypeError(f"to_native: unknown value kind {kind!r}")
