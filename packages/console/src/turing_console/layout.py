"""
Screen geometry: fixed regions derived once from the terminal size.

Regions (columns, rows are zero-based):
- scrollers: two 3x3 blocks at (1, 1) and (width - 4, 1)
- tape viewport: one row starting at (5, 2), width - 10 cells wide
- code viewport: from (0, 5) down to the last row
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

MARGIN = 10
SCROLLER_SIZE = 3

TAPE_START_COLUMN = 5
TAPE_START_ROW = 2
CODE_START_COLUMN = 0
CODE_START_ROW = 5
SCROLLER_ROW = 1
LEFT_SCROLLER_COLUMN = 1
# Right block ends one cell before the right edge.
RIGHT_SCROLLER_INSET = 1 + SCROLLER_SIZE

MIN_WIDTH = MARGIN + 1
MIN_HEIGHT = CODE_START_ROW + 1


class ScreenSize(NamedTuple):
    width: int
    height: int


class Coordinate(NamedTuple):
    column: int
    row: int


class LayoutError(ValueError):
    """Raised when the terminal is too small for the fixed layout."""


@dataclass(frozen=True)
class Layout:
    size: ScreenSize
    tape_display_start: Coordinate
    tape_display_width: int
    code_start: Coordinate
    left_scroller: Coordinate
    right_scroller: Coordinate
    # Where the hardware cursor rests after tape and scroller paints
    park: Coordinate

    @classmethod
    def from_size(cls, size: ScreenSize) -> Layout:
        if size.width < MIN_WIDTH or size.height < MIN_HEIGHT:
            raise LayoutError(
                f"Terminal {size.width}x{size.height} is smaller than the minimum "
                f"{MIN_WIDTH}x{MIN_HEIGHT}"
            )
        return cls(
            size=size,
            tape_display_start=Coordinate(TAPE_START_COLUMN, TAPE_START_ROW),
            tape_display_width=size.width - MARGIN,
            code_start=Coordinate(CODE_START_COLUMN, CODE_START_ROW),
            left_scroller=Coordinate(LEFT_SCROLLER_COLUMN, SCROLLER_ROW),
            right_scroller=Coordinate(size.width - RIGHT_SCROLLER_INSET, SCROLLER_ROW),
            park=Coordinate(1, CODE_START_ROW),
        )

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def tape_cell(self, position: int) -> Coordinate:
        """Screen coordinate of tape index `position`."""
        return Coordinate(self.tape_display_start.column + position, self.tape_display_start.row)

    def code_line_row(self, line: int) -> int:
        """Screen row of 1-based code line `line`."""
        return self.code_start.row + line - 1

    def is_code_row_visible(self, row: int) -> bool:
        return self.code_start.row <= row < self.size.height
