# =============================================================================
# jsonrift/loader.py
# Decode/load collaborator and the byte-, file- and memory-level entry points.
# =============================================================================
#
# DECODING
# --------
# A payload is interpreted as a JSON object first; a payload that is not an
# object is accepted as a JSON array; anything else is a DecodeError. Each
# side is decoded on its own, so the document shape is detected, never
# declared. NaN / Infinity literals are rejected (strict JSON).
#
# ERROR POLICY
# ------------
# read_file(), to_json_bytes() and decode_document() raise. The compare_*
# entry points catch JsonDiffError (and RecursionError from compare()), log
# it, and return DiffResult.failure(error): has_diff=True, no items, error
# attached.
# Every abort path behaves the same way, including the case where neither
# side parses. A document nested deeper than the recursion limit allows is
# a DecodeError too, whether json.loads or the comparator hits the limit.
#
# File reads are plain synchronous reads. No retry. No timeout.
# =============================================================================

from __future__ import annotations

import dataclasses
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Tuple, Union

from jsonrift.core.exceptions import DecodeError, EncodeError, JsonDiffError, LoadError
from jsonrift.core.value import JsonValue, from_native
from jsonrift.diff.comparator import compare
from jsonrift.diff.models import DiffResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Payload  = Union[bytes, str]

MEMORY_SOURCE: str = "<memory>"


# =============================================================================
# SECTION 1 -- COLLABORATORS
# =============================================================================

def read_file(path: PathLike) -> bytes:
    """Read a whole file. Raises LoadError wrapping the OSError."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise LoadError(
            f"LoadError: unable to open {path}: {exc.strerror or exc}",
            source=str(path),
            cause=exc,
        ) from exc


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json_bytes(obj: Any, source: str = MEMORY_SOURCE) -> bytes:
    """
    Marshal a native structure to UTF-8 JSON bytes.

    Dataclass instances are expanded with dataclasses.asdict(); Enum members
    are written as their .value. Non-finite floats, circular references,
    excessive nesting and unsupported types raise EncodeError.
    """
    try:
        text = json.dumps(
            obj,
            default=_encode_default,
            allow_nan=False,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(
            f"EncodeError: unable to marshal {source}: {exc}",
            source=source,
            cause=exc,
        ) from exc
    except RecursionError as exc:
        raise EncodeError(
            f"EncodeError: unable to marshal {source}: nested too deeply",
            source=source,
            cause=exc,
        ) from exc
    return text.encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _too_deep(label: str, source: str, exc: RecursionError) -> DecodeError:
    return DecodeError(
        f"DecodeError: {label} is nested too deeply",
        source=source,
        cause=exc,
    )


def _to_value(native: Any, label: str, source: str) -> JsonValue:
    # json.loads turns out-of-range literals such as 1e400 into inf.
    try:
        return from_native(native)
    except EncodeError as exc:
        raise DecodeError(
            f"DecodeError: {label} holds a number outside the float range",
            source=source,
            cause=exc,
        ) from exc
    except RecursionError as exc:
        raise _too_deep(label, source, exc) from exc


def decode_document(payload: Payload, source: str = "") -> JsonValue:
    """
    Decode a payload into a JsonObject or, failing that, a JsonArray.

    Raises DecodeError when the payload is not strict JSON, its top level
    is a scalar, or it is nested deeper than the interpreter can follow.
    """
    label = source or "payload"
    try:
        native = json.loads(payload, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(
            f"DecodeError: unable to parse {label}: {exc}",
            source=source,
            cause=exc,
        ) from exc
    except RecursionError as exc:
        raise _too_deep(label, source, exc) from exc

    if isinstance(native, dict):
        return _to_value(native, label, source)
    logger.debug("%s is not a JSON object, retrying as array", label)
    if isinstance(native, list):
        return _to_value(native, label, source)
    raise DecodeError(
        f"DecodeError: {label} is neither a JSON object nor a JSON array "
        f"(top level is {type(native).__name__})",
        source=source,
    )


# =============================================================================
# SECTION 2 -- ENTRY POINTS
# =============================================================================

def _abort(error: JsonDiffError) -> DiffResult:
    logger.warning("comparison aborted: %s", error.message)
    return DiffResult.failure(error)


def _compare_guarded(value_a: JsonValue, value_b: JsonValue, label: str) -> DiffResult:
    try:
        return compare(value_a, value_b)
    except RecursionError as exc:
        return _abort(DecodeError(
            f"DecodeError: {label} are nested too deeply to compare",
            cause=exc,
        ))


def _decode_pair(
    payload_a: Payload,
    payload_b: Payload,
    source_a:  str,
    source_b:  str,
) -> Tuple[JsonValue, JsonValue]:
    return decode_document(payload_a, source_a), decode_document(payload_b, source_b)


def compare_bytes(
    payload_a: Payload,
    payload_b: Payload,
    source_a:  str = "a",
    source_b:  str = "b",
) -> DiffResult:
    """Decode two payloads (object first, array fallback) and compare them."""
    try:
        value_a, value_b = _decode_pair(payload_a, payload_b, source_a, source_b)
    except JsonDiffError as exc:
        return _abort(exc)
    return _compare_guarded(value_a, value_b, f"{source_a} and {source_b}")


def compare_native(a: Any, b: Any) -> DiffResult:
    """
    Compare two native structures by marshaling them to JSON first.

    Both sides must marshal to a JSON object or array.
    """
    try:
        payload_a = to_json_bytes(a, source=MEMORY_SOURCE + " a")
        payload_b = to_json_bytes(b, source=MEMORY_SOURCE + " b")
        value_a, value_b = _decode_pair(
            payload_a, payload_b, MEMORY_SOURCE + " a", MEMORY_SOURCE + " b"
        )
    except JsonDiffError as exc:
        return _abort(exc)
    return _compare_guarded(value_a, value_b, f"{MEMORY_SOURCE} a and b")


def compare_files(path_a: PathLike, path_b: PathLike) -> DiffResult:
    """Read two JSON files and compare them."""
    try:
        payload_a = read_file(path_a)
        payload_b = read_file(path_b)
        value_a, value_b = _decode_pair(payload_a, payload_b, str(path_a), str(path_b))
    except JsonDiffError as exc:
        return _abort(exc)
    return _compare_guarded(value_a, value_b, f"{path_a} and {path_b}")


def compare_mem_to_file(obj: Any, path: PathLike) -> DiffResult:
    """
    Compare an in-memory structure with a reference JSON file on disk.

    Intended for tests that build a structure and keep the expected copy in
    a fixtures directory:

        result = compare_mem_to_file(built, "tests/fixtures/expected.json")
        assert not result.has_diff, format_diff(result).decode()
    """
    try:
        payload_a = to_json_bytes(obj)
        payload_b = read_file(path)
        value_a, value_b = _decode_pair(payload_a, payload_b, MEMORY_SOURCE, str(path))
    except JsonDiffError as exc:
        return _abort(exc)
    return _compare_guarded(value_a, value_b, f"{MEMORY_SOURCE} and {path}")
