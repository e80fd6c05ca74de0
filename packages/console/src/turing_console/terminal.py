"""
Terminal backends.

Provides:
- Terminal: abstract base class (capability set used by every renderer)
- AnsiTerminal: direct-stream backend writing ANSI escape sequences inline
- CursesTerminal: cell-buffer backend on top of curses with pre-registered color pairs
- create_terminal() / probe_backend(): runtime backend selection
"""
from __future__ import annotations

import importlib.util
import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import Sequence, TextIO

from .colors import STYLE_COMBINATIONS, Color, ColorAttribute
from .config import BACKEND_ANSI, BACKEND_AUTO, BACKEND_CURSES, get_backend_name, get_write_log_path
from .layout import Coordinate, ScreenSize

logger = logging.getLogger(__name__)


class BackendInitError(RuntimeError):
    """The terminal could not be initialised or its size could not be queried."""


# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """
    Minimal terminal interface for the renderers.

    Coordinates are (column, row) with (0, 0) at the top-left. Backends that
    need another ordering translate internally.
    """

    @abstractmethod
    def start(self) -> None:
        """Take over the terminal. Raises BackendInitError when that is impossible."""

    @abstractmethod
    def stop(self) -> None:
        """Restore the terminal to its prior mode. Safe to call more than once."""

    @abstractmethod
    def query_size(self) -> ScreenSize:
        """Terminal size in cells."""

    @abstractmethod
    def set_cursor(self, position: Coordinate) -> None:
        """Move the write position."""

    @abstractmethod
    def set_attribute(self, attribute: ColorAttribute) -> None:
        """Apply a reset or a single foreground/background selection to later writes."""

    @abstractmethod
    def write_char(self, char: str) -> None:
        """Write one character at the write position and advance it."""

    @abstractmethod
    def write_str(self, text: str) -> None:
        """Write text at the write position and advance it."""

    @abstractmethod
    def flush(self) -> None:
        """Make pending writes visible."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the entire screen and move the write position to (0, 0)."""


# ─────────────────────────────────────────────────────────────────────────────
# AnsiTerminal
# ─────────────────────────────────────────────────────────────────────────────

class AnsiTerminal(Terminal):
    """
    Direct-stream backend.
    Colors are SGR codes applied immediately; every write is flushed.
    """

    def __init__(self, stream: TextIO | None = None, size: ScreenSize | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._size = size
        self._write_log_path = get_write_log_path()
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        size = self.query_size()
        logger.debug("Console width:  %d", size.width)
        logger.debug("Console height: %d", size.height)
        self.write("\x1b[?25l")
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        self.write("\x1b[0m\x1b[?25h")

    def query_size(self) -> ScreenSize:
        if self._size is not None:
            return self._size
        try:
            columns, lines = os.get_terminal_size(self._stream.fileno())
        except (OSError, ValueError) as exc:
            raise BackendInitError("Failed to query terminal size") from exc
        return ScreenSize(columns, lines)

    def write(self, data: str) -> None:
        self._stream.write(data)
        self._stream.flush()
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.debug("Could not append to write log %s", self._write_log_path)

    def set_cursor(self, position: Coordinate) -> None:
        # CUP takes 1-based row;column
        self.write(f"\x1b[{position.row + 1};{position.column + 1}H")

    def set_attribute(self, attribute: ColorAttribute) -> None:
        self.write(f"\x1b[{attribute.sgr_code}m")

    def write_char(self, char: str) -> None:
        self.write(char)

    def write_str(self, text: str) -> None:
        self.write(text)

    def flush(self) -> None:
        self._stream.flush()

    def clear(self) -> None:
        self.write("\x1b[2J\x1b[H")


# ─────────────────────────────────────────────────────────────────────────────
# CursesTerminal
# ─────────────────────────────────────────────────────────────────────────────

# (color, bright) for one side of a pair; None is the terminal default
_Slot = tuple[Color, bool] | None
_PairKey = tuple[_Slot, _Slot]


def fold_attributes(attributes: Sequence[ColorAttribute], start: _PairKey = (None, None)) -> _PairKey:
    """Fold a sequence of attributes into the (foreground, background) they leave active."""
    fg, bg = start
    for attribute in attributes:
        if attribute.is_reset:
            fg, bg = None, None
        elif attribute.is_foreground:
            fg = (attribute.color, attribute.is_bright)
        else:
            bg = (attribute.color, attribute.is_bright)
    return fg, bg


class CursesTerminal(Terminal):
    """
    Cell-buffer backend.

    Every color combination listed in `combinations` is registered as a
    numbered pair during start(). Writes land in the curses screen buffer and
    become visible on flush().
    """

    def __init__(self, combinations: Sequence[Sequence[ColorAttribute]] = STYLE_COMBINATIONS) -> None:
        self._combinations = combinations
        self._curses = None
        self._screen = None
        self._pairs: dict[_PairKey, int] = {}
        self._state: _PairKey = (None, None)
        self._has_colors = False
        self._bright_colors = False
        self._prev_cursor: int | None = None
        self._warned: set[_PairKey] = set()

    @property
    def started(self) -> bool:
        return self._screen is not None

    @property
    def pairs(self) -> dict[_PairKey, int]:
        return dict(self._pairs)

    def start(self) -> None:
        import curses

        self._curses = curses
        try:
            self._screen = curses.initscr()
        except curses.error as exc:
            raise BackendInitError("Unable to initialise curses screen") from exc

        try:
            curses.noecho()
            curses.cbreak()
            try:
                self._prev_cursor = curses.curs_set(0)
            except curses.error:
                self._prev_cursor = None

            self._has_colors = curses.has_colors()
            if self._has_colors:
                curses.start_color()
                self._register_pairs()

            size = self.query_size()
        except curses.error as exc:
            self.stop()
            raise BackendInitError("Unable to configure curses screen") from exc

        logger.debug("Console width:  %d", size.width)
        logger.debug("Console height: %d", size.height)

    def _register_pairs(self) -> None:
        curses = self._curses
        try:
            curses.use_default_colors()
            default_fg = default_bg = -1
        except curses.error:
            default_fg, default_bg = int(Color.WHITE), int(Color.BLACK)

        self._bright_colors = curses.COLORS >= 16
        for combination in self._combinations:
            key = fold_attributes(combination)
            if key == (None, None) or key in self._pairs:
                continue
            number = len(self._pairs) + 1
            if number >= curses.COLOR_PAIRS:
                logger.warning("Terminal supports only %d color pairs", curses.COLOR_PAIRS)
                break
            curses.init_pair(
                number,
                self._color_number(key[0], default_fg),
                self._color_number(key[1], default_bg),
            )
            self._pairs[key] = number

    def _color_number(self, slot: _Slot, default: int) -> int:
        if slot is None:
            return default
        color, bright = slot
        if bright and self._bright_colors:
            return int(color) + 8
        return int(color)

    def _current_attr(self) -> int:
        curses = self._curses
        fg, bg = self._state
        attr = curses.A_NORMAL

        if not self._has_colors:
            if bg is not None:
                attr |= curses.A_REVERSE
            elif fg is not None and fg[1]:
                attr |= curses.A_DIM
            return attr

        if fg is not None and fg[1] and not self._bright_colors:
            attr |= curses.A_BOLD
        if self._state == (None, None):
            return attr

        number = self._pairs.get(self._state)
        if number is None:
            if self._state not in self._warned:
                self._warned.add(self._state)
                logger.warning("Color combination %r was not registered, using default colors", self._state)
            return attr
        return attr | curses.color_pair(number)

    def _require_screen(self):
        if self._screen is None:
            raise BackendInitError("Curses screen is not initialised")
        return self._screen

    def stop(self) -> None:
        if self._screen is None:
            return
        curses = self._curses
        self._screen = None
        if self._prev_cursor is not None:
            try:
                curses.curs_set(self._prev_cursor)
            except curses.error:
                logger.debug("Could not restore cursor visibility")
        curses.nocbreak()
        curses.echo()
        curses.endwin()

    def query_size(self) -> ScreenSize:
        rows, columns = self._require_screen().getmaxyx()
        return ScreenSize(columns, rows)

    def set_cursor(self, position: Coordinate) -> None:
        screen = self._require_screen()
        try:
            screen.move(position.row, position.column)
        except self._curses.error:
            logger.debug("Cursor position %r is outside the screen", position)

    def set_attribute(self, attribute: ColorAttribute) -> None:
        self._state = fold_attributes((attribute,), self._state)
        self._require_screen().attrset(self._current_attr())

    def write_char(self, char: str) -> None:
        self.write_str(char)

    def write_str(self, text: str) -> None:
        screen = self._require_screen()
        try:
            screen.addstr(text)
        except self._curses.error:
            # curses reports writes into the last cell as errors
            logger.debug("Dropped write past the screen edge: %r", text)

    def flush(self) -> None:
        self._require_screen().refresh()

    def clear(self) -> None:
        screen = self._require_screen()
        screen.erase()
        screen.move(0, 0)


# ─────────────────────────────────────────────────────────────────────────────
# Backend selection
# ─────────────────────────────────────────────────────────────────────────────

def probe_backend(stream: TextIO | None = None) -> str:
    """Pick "curses" when curses is usable on this output, "ansi" otherwise."""
    stream = stream if stream is not None else sys.stdout
    if importlib.util.find_spec("_curses") is None:
        return BACKEND_ANSI
    try:
        is_tty = stream.isatty()
    except (AttributeError, ValueError):
        is_tty = False
    term = os.environ.get("TERM", "")
    if is_tty and term and term != "dumb":
        return BACKEND_CURSES
    return BACKEND_ANSI


def create_terminal(name: str | None = None, stream: TextIO | None = None) -> Terminal:
    """
    Build an unstarted backend.
    `name` defaults to the configured backend; "auto" runs the capability probe.
    """
    name = name or get_backend_name()
    if name == BACKEND_AUTO:
        name = probe_backend(stream)
    logger.info("Using %s terminal backend", name)
    if name == BACKEND_CURSES:
        return CursesTerminal()
    if name == BACKEND_ANSI:
        return AnsiTerminal(stream)
    raise ValueError(f"Unknown terminal backend: {name!r}")
