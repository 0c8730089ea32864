# jsonrift/render/segments.py
# Segment -- the unit of renderer output.
#
# The renderer emits an ordered list of segments; the presenter decides how
# each kind is shown (ANSI colour, rich style, or plain text). Concatenating
# the text of every segment always yields the uncoloured report.

from dataclasses import dataclass
from enum import Enum, unique
from typing import Iterable, List


@unique
class SegmentKind(str, Enum):
    """The four colour bands of a report."""
    NEUTRAL = "NEUTRAL"   # framing, EQUAL and DIFF lines
    CHANGED = "CHANGED"   # NOT_EQUAL pair
    ADDED   = "ADDED"     # present only on the right
    REMOVED = "REMOVED"   # present only on the left


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    text: str


def join_plain(segments: Iterable[Segment]) -> str:
    return "".join(segment.text for segment in segments)


def coalesce(segments: Iterable[Segment]) -> List[Segment]:
    """Merge adjacent segments of the same kind. Empty segments are dropped."""
    merged: List[Segment] = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].kind is segment.kind:
            merged[-1] = Segment(segment.kind, merged[-1].text + segment.text)
        else:
            merged.append(segment)
    return merged
