# jsonrift/__init__.py
# Structural JSON diff with an annotated, colourized report.
#
# ENTRY POINT:
#   python -m jsonrift.cli [path_a] [path_b]
#
# Standard import pattern:
#   from jsonrift import compare_files, format_diff
#
#   result = compare_files("expected.json", "actual.json")
#   if result.has_diff:
#       print(format_diff(result).decode())

from .version import __version__
from .core import (
    DecodeError,
    EncodeError,
    JsonDiffError,
    JsonValue,
    LoadError,
    ValueKind,
    from_native,
    to_native,
)
from .diff import (
    ComparisonStatus,
    DiffItem,
    DiffResult,
    Resolution,
    compare,
)
from .render import (
    Segment,
    SegmentKind,
    format_diff,
    format_error,
    print_diff,
    render_segments,
)
from .loader import (
    compare_bytes,
    compare_files,
    compare_mem_to_file,
    compare_native,
    decode_document,
    read_file,
    to_json_bytes,
)

__all__ = [
    "__version__",
    # Errors
    "JsonDiffError",
    "EncodeError",
    "DecodeError",
    "LoadError",
    # Value model
    "JsonValue",
    "ValueKind",
    "from_native",
    "to_native",
    # Diff model and comparator
    "Resolution",
    "ComparisonStatus",
    "DiffItem",
    "DiffResult",
    "compare",
    # Rendering
    "Segment",
    "SegmentKind",
    "render_segments",
    "format_diff",
    "format_error",
    "print_diff",
    # Loading
    "read_file",
    "to_json_bytes",
    "decode_document",
    "compare_bytes",
    "compare_native",
    "compare_files",
    "compare_mem_to_file",
]
