"""Tape renderer — one row of symbols with a highlighted cursor cell."""
from __future__ import annotations

import logging

from .colors import RESET, TAPE_CURSOR
from .layout import Layout
from .terminal import Terminal
from .utils import cell_width

logger = logging.getLogger(__name__)

BLANK = " "


class TapeOverflowError(ValueError):
    """The tape holds more symbols than the tape viewport has cells."""


class TapeRenderer:
    """
    Paints the tape and keeps the cursor highlight on exactly one cell.

    The tape contents belong to the caller and are passed to every call;
    the renderer only owns the cursor index.
    """

    def __init__(self, terminal: Terminal, layout: Layout) -> None:
        self._terminal = terminal
        self._layout = layout
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def paint_full(self, tape: str) -> None:
        """Write every symbol of `tape`; the symbol under the cursor gets the highlight."""
        if len(tape) > self._layout.tape_display_width:
            # TODO: scroll the visible window so the cursor stays centred
            raise TapeOverflowError(
                f"Tape of {len(tape)} symbols does not fit in {self._layout.tape_display_width} cells"
            )
        for symbol in tape:
            _check_symbol(symbol)

        term = self._terminal
        term.set_cursor(self._layout.tape_display_start)
        term.set_attribute(RESET)
        for index, symbol in enumerate(tape):
            if index == self._cursor:
                term.set_attribute(TAPE_CURSOR)
                term.write_char(symbol)
                term.set_attribute(RESET)
            else:
                term.write_char(symbol)
        # Blank whatever a longer tape left behind
        term.write_str(BLANK * (self._layout.tape_display_width - len(tape)))

        term.set_cursor(self._layout.park)
        term.flush()

    def move_cursor(self, position: int, tape: str) -> None:
        """Move the highlight to `position`, redrawing only the old and new cells."""
        if not 0 <= position < len(tape):
            raise ValueError(f"Cursor position {position} is outside the tape (length {len(tape)})")
        self._check_position(position)
        _check_symbol(tape[position])

        term = self._terminal
        previous = self._cursor
        term.set_cursor(self._layout.tape_cell(previous))
        term.set_attribute(RESET)
        # The tape may have shrunk since the previous cursor was drawn
        term.write_char(tape[previous] if previous < len(tape) else BLANK)

        term.set_cursor(self._layout.tape_cell(position))
        term.set_attribute(TAPE_CURSOR)
        term.write_char(tape[position])
        term.set_attribute(RESET)

        self._cursor = position
        term.set_cursor(self._layout.park)
        term.flush()

    def write_cell(self, symbol: str, position: int) -> None:
        """Overwrite one cell, keeping the highlight if it is the cursor cell."""
        self._check_position(position)
        _check_symbol(symbol)

        term = self._terminal
        term.set_cursor(self._layout.tape_cell(position))
        term.set_attribute(TAPE_CURSOR if position == self._cursor else RESET)
        term.write_char(symbol)
        term.set_attribute(RESET)
        term.set_cursor(self._layout.park)
        term.flush()

    def _check_position(self, position: int) -> None:
        if not 0 <= position < self._layout.tape_display_width:
            raise ValueError(
                f"Tape position {position} is outside the viewport "
                f"(0..{self._layout.tape_display_width - 1})"
            )


def _check_symbol(symbol: str) -> None:
    if len(symbol) != 1 or cell_width(symbol) != 1:
        raise ValueError(f"Tape symbol {symbol!r} must occupy exactly one cell")
