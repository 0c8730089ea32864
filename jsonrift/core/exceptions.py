# =============================================================================
# jsonrift/core/exceptions.py
# Exception hierarchy for value encoding, decoding and loading.
# =============================================================================
#
# EXCEPTION HIERARCHY
# -------------------
#   JsonDiffError(Exception)        -- base; never raised directly
#     EncodeError(JsonDiffError)    -- native value has no JSON representation
#     DecodeError(JsonDiffError)    -- payload is neither a JSON object nor array
#     LoadError(JsonDiffError)      -- file could not be read
#
# These are raised only by the decode/load collaborator. The comparator and
# renderer never raise for data: a mismatch is a NOT_EQUAL item.
#
# MESSAGE CONTRACT
# ----------------
# Every message is deterministic, non-empty, and names the offending source
# (a file path, "<memory>", or a value path such as "$.a[0]").
# =============================================================================

from __future__ import annotations

from typing import Optional


class JsonDiffError(Exception):
    """
    Base class for all jsonrift errors.

    Attributes:
        message:  Human-readable description. Always non-empty.
        source:   Where the failure happened, or empty string if unknown.
        cause:    The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        source:  str = "",
        cause:   Optional[BaseException] = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "JsonDiffError: message must be a non-empty string"
            )
        if not isinstance(source, str):
            raise ValueError(
                "JsonDiffError: source must be a string"
            )
        super().__init__(message)
        self.message: str = message
        self.source:  str = source
        self.cause:   Optional[BaseException] = cause

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(source=" + repr(self.source)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonDiffError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.source == other.source
            and self.message == other.message
        )

    __hash__ = Exception.__hash__


class EncodeError(JsonDiffError):
    """
    Raised when a native value cannot be serialized to JSON.

    Typical triggers: non-string mapping keys, NaN or Inf floats, objects
    with no JSON representation.
    """


class DecodeError(JsonDiffError):
    """
    Raised when a payload is not valid JSON, or is valid JSON whose top
    level is neither an object nor an array.
    """


class LoadError(JsonDiffError):
    """
    Raised when a file cannot be read. The OSError is kept in .cause.
    """
