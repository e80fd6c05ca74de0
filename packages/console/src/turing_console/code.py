"""
Code renderer — paints the program source and highlights the current line.

The source stream belongs to the caller. Every call rewinds it before
returning so the next reader always starts at the beginning.
"""
from __future__ import annotations

import logging
from typing import Callable, TextIO

from .colors import CODE_HIGHLIGHT, COMMENT, RESET, ColorAttribute
from .layout import Coordinate, Layout
from .terminal import Terminal
from .utils import strip_line_terminator

logger = logging.getLogger(__name__)

ErrorChannel = Callable[[str], None]

COMMENT_CHAR = ";"

UNREADABLE_MESSAGE = "Error opening file containing Turing instructions"
LINE_OUT_OF_RANGE_MESSAGE = "Argument <line> is greater than lines in the file"


def log_error(message: str) -> None:
    """Default error channel."""
    logger.error("%s", message)


def is_readable(stream: TextIO | None) -> bool:
    if stream is None or getattr(stream, "closed", True):
        return False
    return stream.readable() and stream.seekable()


class CodeRenderer:
    """
    Paints source text with comment styling and keeps at most one line highlighted.

    Lines are 1-based; current_line is 0 until the first successful highlight.
    """

    def __init__(self, terminal: Terminal, layout: Layout, on_error: ErrorChannel | None = None) -> None:
        self._terminal = terminal
        self._layout = layout
        self._on_error = on_error or log_error
        self._current_line = 0

    @property
    def current_line(self) -> int:
        return self._current_line

    def paint_full(self, stream: TextIO | None) -> bool:
        """
        Write the whole stream into the code viewport.
        Text from a `;` up to the end of its line uses the comment style.
        Returns False (and reports the error) when the stream cannot be read.
        """
        if not is_readable(stream):
            self._on_error(UNREADABLE_MESSAGE)
            return False

        term = self._terminal
        column = self._layout.code_start.column
        row = self._layout.code_start.row
        in_comment = False

        term.set_cursor(Coordinate(column, row))
        term.set_attribute(RESET)
        try:
            stream.seek(0)
            while True:
                char = stream.read(1)
                if not char:
                    break
                if char == "\n":
                    if in_comment:
                        term.set_attribute(RESET)
                        in_comment = False
                    row += 1
                    if not self._layout.is_code_row_visible(row):
                        break
                    term.set_cursor(Coordinate(column, row))
                    continue
                if char == "\r":
                    continue
                if char == COMMENT_CHAR and not in_comment:
                    term.set_attribute(COMMENT)
                    in_comment = True
                term.write_char(char)
        except (OSError, UnicodeDecodeError):
            logger.debug("Reading source stream failed", exc_info=True)
            self._on_error(UNREADABLE_MESSAGE)
            return False
        finally:
            stream.seek(0)
            term.set_attribute(RESET)
            term.flush()
        return True

    def highlight_line(self, target_line: int, stream: TextIO | None) -> bool:
        """
        Move the highlight to `target_line`.

        The stream is scanned from the start; the previously highlighted line is
        rewritten in the reset style and the target line in the highlight style.
        When the target lies past the end of the stream the error channel is told,
        current_line keeps its value and False is returned. A reset of the previous
        line that already happened during the scan stays on screen.
        """
        if not is_readable(stream):
            self._on_error(UNREADABLE_MESSAGE)
            return False

        previous = self._current_line
        reset_done = previous < 1
        highlighted = False
        try:
            stream.seek(0)
            for number, raw in enumerate(iter(stream.readline, ""), start=1):
                text = strip_line_terminator(raw)
                # previous and target may be the same line
                if number == previous:
                    self._write_line(number, text, RESET)
                    reset_done = True
                if number == target_line:
                    self._write_line(number, text, CODE_HIGHLIGHT)
                    highlighted = True
                if reset_done and highlighted:
                    break
        except (OSError, UnicodeDecodeError):
            logger.debug("Reading source stream failed", exc_info=True)
            self._on_error(UNREADABLE_MESSAGE)
            return False
        finally:
            stream.seek(0)
            self._terminal.flush()

        if not highlighted:
            self._on_error(LINE_OUT_OF_RANGE_MESSAGE)
            return False

        self._current_line = target_line
        return True

    def _write_line(self, number: int, text: str, attribute: ColorAttribute) -> None:
        row = self._layout.code_line_row(number)
        if not self._layout.is_code_row_visible(row):
            return
        term = self._terminal
        term.set_cursor(Coordinate(self._layout.code_start.column, row))
        term.set_attribute(attribute)
        term.write_str(text)
        term.set_attribute(RESET)
