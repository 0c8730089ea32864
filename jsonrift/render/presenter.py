# jsonrift/render/presenter.py
# Maps renderer segments onto terminal colour bands.
#
# The bands are expressed as a rich Theme. format_diff() renders them to raw
# ANSI escape sequences (8-colour standard system) so the byte output does
# not depend on the capabilities of the current terminal; print_diff() hands
# a styled rich Text to a Console and lets rich decide.

import sys
from typing import Dict, Iterable, List, Optional

from rich.color import ColorSystem
from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.style import Style
from rich.text import Text
from rich.theme import Theme

from jsonrift.diff.models import DiffResult
from jsonrift.render.renderer import render_segments
from jsonrift.render.segments import Segment, SegmentKind

STYLE_NAMES: Dict[SegmentKind, str] = {
    SegmentKind.NEUTRAL: "jsonrift.neutral",
    SegmentKind.CHANGED: "jsonrift.changed",
    SegmentKind.ADDED:   "jsonrift.added",
    SegmentKind.REMOVED: "jsonrift.removed",
}

DEFAULT_THEME = Theme(
    {
        "jsonrift.neutral": "none",
        "jsonrift.changed": "yellow",
        "jsonrift.added":   "green",
        "jsonrift.removed": "red",
    }
)


def style_for(kind: SegmentKind, theme: Theme = DEFAULT_THEME) -> Style:
    """Theme style for a segment kind; the null style when the theme lacks it."""
    return theme.styles.get(STYLE_NAMES[kind], Style.null())


def paint(
    segments: Iterable[Segment],
    color:    bool = True,
    theme:    Theme = DEFAULT_THEME,
) -> str:
    """
    Join segments into a string. With color=True every non-neutral segment
    is wrapped in the ANSI codes of its band, reset included.
    """
    parts: List[str] = []
    for segment in segments:
        style = style_for(segment.kind, theme)
        if not color or segment.kind is SegmentKind.NEUTRAL or not style:
            parts.append(segment.text)
        else:
            parts.append(style.render(segment.text, color_system=ColorSystem.STANDARD))
    return "".join(parts)


def format_diff(result: DiffResult, color: bool = True) -> bytes:
    """
    Render a DiffResult to UTF-8 bytes for terminal display.

    The output is JSON-shaped but not JSON whenever a marker is present.
    Formatting is pure: the same result always yields the same bytes.
    """
    return paint(render_segments(result), color=color).encode("utf-8")


def to_rich_text(result: DiffResult, color: bool = True, theme: Theme = DEFAULT_THEME) -> Text:
    """The report as a rich Text, one styled span per coloured segment."""
    text = Text(no_wrap=True)
    for segment in render_segments(result):
        if color and segment.kind is not SegmentKind.NEUTRAL:
            text.append(segment.text, style=style_for(segment.kind, theme))
        else:
            text.append(segment.text)
    return text


def make_console(color: bool = True, file=None) -> Console:
    """A Console with the jsonrift theme that prints reports verbatim."""
    return Console(
        theme=DEFAULT_THEME,
        highlighter=NullHighlighter(),
        file=file if file is not None else sys.stdout,
        no_color=not color,
        soft_wrap=True,
    )


def print_diff(
    result:  DiffResult,
    console: Optional[Console] = None,
    color:   bool = True,
) -> None:
    """Write the report of result to a rich Console (stdout by default)."""
    if console is None:
        console = make_console(color=color)
    console.print(to_rich_text(result, color=color), markup=False, highlight=False)
