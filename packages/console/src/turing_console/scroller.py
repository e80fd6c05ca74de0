"""Scroller indicators — two 3x3 blocks flanking the tape."""
from __future__ import annotations

from .colors import RESET, SCROLLER_DISABLED, SCROLLER_ENABLED, SCROLLER_GLYPH
from .layout import SCROLLER_SIZE, Coordinate, Layout
from .terminal import Terminal

LEFT_GLYPH = "<"
RIGHT_GLYPH = ">"


class ScrollerRenderer:
    """Stateless: both flags must be supplied on every paint."""

    def __init__(self, terminal: Terminal, layout: Layout) -> None:
        self._terminal = terminal
        self._layout = layout

    def paint(self, left_disabled: bool = True, right_disabled: bool = True) -> None:
        self._paint_block(self._layout.left_scroller, LEFT_GLYPH, left_disabled)
        self._paint_block(self._layout.right_scroller, RIGHT_GLYPH, right_disabled)

        term = self._terminal
        term.set_attribute(RESET)
        term.set_cursor(self._layout.park)
        term.flush()

    def _paint_block(self, origin: Coordinate, glyph: str, disabled: bool) -> None:
        term = self._terminal
        term.set_attribute(RESET)
        term.set_attribute(SCROLLER_GLYPH)
        term.set_attribute(SCROLLER_DISABLED if disabled else SCROLLER_ENABLED)

        blank = " " * SCROLLER_SIZE
        middle = SCROLLER_SIZE // 2
        for offset in range(SCROLLER_SIZE):
            term.set_cursor(Coordinate(origin.column, origin.row + offset))
            if offset == middle:
                term.write_str(glyph.center(SCROLLER_SIZE))
            else:
                term.write_str(blank)
