"""Shared fixtures: an in-memory terminal that records cells and their colors."""
from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from turing_console.colors import ColorAttribute
from turing_console.layout import Coordinate, Layout, ScreenSize
from turing_console.terminal import Terminal


@dataclass(frozen=True)
class Cell:
    char: str
    fg: ColorAttribute | None = None
    bg: ColorAttribute | None = None


class GridTerminal(Terminal):
    """Terminal double that keeps a cell grid, layering colors the way SGR does."""

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.size = ScreenSize(width, height)
        self.cells: dict[Coordinate, Cell] = {}
        self.position = Coordinate(0, 0)
        self.fg: ColorAttribute | None = None
        self.bg: ColorAttribute | None = None
        self.started = False
        self.stopped = False
        self.flushes = 0
        self.writes: list[tuple[Coordinate, str]] = []

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def query_size(self) -> ScreenSize:
        return self.size

    def set_cursor(self, position: Coordinate) -> None:
        self.position = position

    def set_attribute(self, attribute: ColorAttribute) -> None:
        if attribute.is_reset:
            self.fg = self.bg = None
        elif attribute.is_foreground:
            self.fg = attribute
        else:
            self.bg = attribute

    def write_char(self, char: str) -> None:
        self.writes.append((self.position, char))
        self.cells[self.position] = Cell(char, self.fg, self.bg)
        self.position = Coordinate(self.position.column + 1, self.position.row)

    def write_str(self, text: str) -> None:
        for char in text:
            self.write_char(char)

    def flush(self) -> None:
        self.flushes += 1

    def clear(self) -> None:
        self.cells.clear()
        self.position = Coordinate(0, 0)

    # ── inspection helpers ───────────────────────────────────────────────────

    def cell(self, column: int, row: int) -> Cell | None:
        return self.cells.get(Coordinate(column, row))

    def row_text(self, row: int, start: int = 0, length: int | None = None) -> str:
        columns = sorted(c.column for c in self.cells if c.row == row and c.column >= start)
        if length is not None:
            columns = [c for c in columns if c < start + length]
        return "".join(self.cells[Coordinate(c, row)].char for c in columns)

    def row_cells(self, row: int, start: int, length: int) -> list[Cell | None]:
        return [self.cell(column, row) for column in range(start, start + length)]


@pytest.fixture
def make_grid():
    return GridTerminal


@pytest.fixture
def grid() -> GridTerminal:
    return GridTerminal()


@pytest.fixture
def layout(grid: GridTerminal) -> Layout:
    return Layout.from_size(grid.size)


@pytest.fixture
def program() -> io.StringIO:
    return io.StringIO("MOV R ;move right\nWRITE 1\n; a comment line\nHALT\n")
