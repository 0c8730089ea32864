# jsonrift/render/__init__.py
# Structural rendering (segments) and colour presentation of diff results.

from .segments import Segment, SegmentKind
from .renderer import (
    INDENTATION,
    format_error,
    render_segments,
    render_text,
    serialize_value,
)
from .presenter import (
    DEFAULT_THEME,
    format_diff,
    paint,
    print_diff,
)

__all__ = [
    "Segment",
    "SegmentKind",
    "INDENTATION",
    "render_segments",
    "render_text",
    "serialize_value",
    "format_error",
    "DEFAULT_THEME",
    "paint",
    "format_diff",
    "print_diff",
]
