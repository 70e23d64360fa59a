"""Render a grid snapshot for true-color terminals.

Each terminal line shows two grid rows using half-block characters:
- UPPER_HALF (▀): foreground = top cell, background = bottom cell
- LOWER_HALF (▄): foreground = bottom cell, used when the top is transparent
- Space: both cells transparent
"""

from __future__ import annotations

from rich.color import Color as RichColor
from rich.console import Console, ConsoleOptions, RenderResult
from rich.measure import Measurement
from rich.segment import Segment
from rich.style import Style

from pixel_art.core.color import Color
from pixel_art.core.constants import LOWER_HALF, UPPER_HALF
from pixel_art.core.grid import Snapshot


def _rich_color(color: Color) -> RichColor:
    return RichColor.from_rgb(color.r, color.g, color.b)


def _half_block(top: Color, bottom: Color) -> Segment:
    if top.transparent and bottom.transparent:
        return Segment(" ")
    if top.transparent:
        return Segment(LOWER_HALF, Style(color=_rich_color(bottom)))
    if bottom.transparent:
        return Segment(UPPER_HALF, Style(color=_rich_color(top)))
    return Segment(UPPER_HALF, Style(color=_rich_color(top), bgcolor=_rich_color(bottom)))


class GridView:
    """Rich renderable showing a snapshot with one character per cell column."""

    def __init__(self, snapshot: Snapshot):
        self.snapshot = snapshot

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        rows = self.snapshot.rows
        for top_y in range(0, self.snapshot.height, 2):
            top_row = rows[top_y]
            # Odd heights leave the last bottom half empty
            if top_y + 1 < self.snapshot.height:
                bottom_row = rows[top_y + 1]
            else:
                bottom_row = (Color.TRANSPARENT,) * self.snapshot.width
            for top, bottom in zip(top_row, bottom_row):
                yield _half_block(top, bottom)
            yield Segment.line()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement(self.snapshot.width, self.snapshot.width)


def render_to_ansi(snapshot: Snapshot) -> str:
    """Render a snapshot to a 24-bit ANSI string."""
    console = Console(
        force_terminal=True,
        color_system="truecolor",
        width=snapshot.width,
        legacy_windows=False,
    )
    with console.capture() as capture:
        console.print(GridView(snapshot), end="")
    return capture.get()
