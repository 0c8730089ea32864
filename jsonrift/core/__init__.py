# jsonrift/core/__init__.py
# Generic value model and error taxonomy.
#
# Standard import pattern:
#   from jsonrift.core import JsonValue, ValueKind, from_native, to_native
#   from jsonrift.core import DecodeError, EncodeError, LoadError

from .exceptions import (
    JsonDiffError,
    EncodeError,
    DecodeError,
    LoadError,
)
from .value import (
    NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    ValueKind,
    from_native,
    to_native,
    values_equal,
)

__all__ = [
    # Exceptions
    "JsonDiffError",
    "EncodeError",
    "DecodeError",
    "LoadError",
    # Value model
    "ValueKind",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "NULL",
    # Helpers
    "values_equal",
    "from_native",
    "to_native",
]
