# =============================================================================
# jsonrift/render/renderer.py
# Deterministic rendering of a DiffResult into a JSON-shaped report.
# =============================================================================
#
# LAYOUT
# ------
#   {                               <- frame from the level's is_array flag
#       "same": 1,                  <- EQUAL, no marker
#   <>  "changed": 1,               <- NOT_EQUAL, left value   } CHANGED band
#   **  "changed": 2,               <- NOT_EQUAL, right value  }
#   <<  "new": true,                <- ADDED, right value, ADDED band
#   >>  "old": null,                <- REMOVED, left value, REMOVED band
#       "nested": {                 <- DIFF, recursive render at depth + 1
#           ...
#       }
#   }
#
# The marker is written after the indent, so the exact form of the banded
# lines above is "    <> "changed": 1,". Array levels omit "key": .
#
# Items at depth d are indented by d + 1 units of INDENTATION. The closing
# brace/bracket of a level sits on its own line at depth d. Every item but
# the last of its level ends with a comma; for banded items the comma is
# inside the band.
#
# Values are written as compact JSON with sorted keys, so the same result
# always renders to the same text. No I/O. No logging.
# =============================================================================

from __future__ import annotations

import json
from typing import List

from jsonrift.core.value import JsonValue, to_native
from jsonrift.diff.models import DiffItem, DiffResult, Resolution
from jsonrift.render.segments import Segment, SegmentKind, coalesce, join_plain

INDENTATION: str = "    "

MARKER_NOT_EQUAL_A: str = "<> "
MARKER_NOT_EQUAL_B: str = "** "
MARKER_ADDED:       str = "<< "
MARKER_REMOVED:     str = ">> "


def serialize_value(value: JsonValue) -> str:
    """Compact, key-sorted JSON text for a single value."""
    return json.dumps(
        to_native(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def _entry(key: str, value: JsonValue, is_array: bool) -> str:
    if is_array:
        return serialize_value(value)
    return json.dumps(key, ensure_ascii=False) + ": " + serialize_value(value)


def _write_leaf(
    out:      List[Segment],
    item:     DiffItem,
    indent:   str,
    is_array: bool,
    trailer:  str,
) -> None:
    resolution = item.resolution

    if resolution is Resolution.EQUAL:
        out.append(Segment(
            SegmentKind.NEUTRAL,
            indent + _entry(item.key, item.value_a, is_array) + trailer,
        ))
    elif resolution is Resolution.NOT_EQUAL:
        out.append(Segment(
            SegmentKind.CHANGED,
            indent + MARKER_NOT_EQUAL_A + _entry(item.key, item.value_a, is_array) + trailer
            + "\n"
            + indent + MARKER_NOT_EQUAL_B + _entry(item.key, item.value_b, is_array) + trailer,
        ))
    elif resolution is Resolution.ADDED:
        out.append(Segment(
            SegmentKind.ADDED,
            indent + MARKER_ADDED + _entry(item.key, item.value_b, is_array) + trailer,
        ))
    elif resolution is Resolution.REMOVED:
        out.append(Segment(
            SegmentKind.REMOVED,
            indent + MARKER_REMOVED + _entry(item.key, item.value_a, is_array) + trailer,
        ))
    else:
        raise TypeError(f"render: unknown resolution {resolution!r}")


def _write_level(out: List[Segment], result: DiffResult, depth: int) -> None:
    opening, closing = ("[", "]") if result.is_array else ("{", "}")
    out.append(Segment(SegmentKind.NEUTRAL, opening))
    indent = INDENTATION * (depth + 1)

    last = len(result.items) - 1
    for i, item in enumerate(result.items):
        trailer = "," if i < last else ""
        out.append(Segment(SegmentKind.NEUTRAL, "\n"))
        if item.resolution is Resolution.DIFF:
            label = "" if result.is_array else json.dumps(item.key, ensure_ascii=False) + ": "
            out.append(Segment(SegmentKind.NEUTRAL, indent + label))
            _write_level(out, item.sub_diff, depth + 1)
            out.append(Segment(SegmentKind.NEUTRAL, trailer))
        else:
            _write_leaf(out, item, indent, result.is_array, trailer)

    out.append(Segment(SegmentKind.NEUTRAL, "\n" + INDENTATION * depth + closing))


def render_segments(result: DiffResult) -> List[Segment]:
    """
    Render a DiffResult into an ordered list of segments.

    Adjacent segments of the same kind are merged. A failed result renders
    as an empty frame; use format_error() for its description.
    """
    out: List[Segment] = []
    _write_level(out, result, 0)
    return coalesce(out)


def render_text(result: DiffResult) -> str:
    """The uncoloured report as a string."""
    return join_plain(render_segments(result))


def format_error(result: DiffResult) -> str:
    """One-line description of a failed comparison, or empty string."""
    if result.error is None:
        return ""
    return result.error.message
