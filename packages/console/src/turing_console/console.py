"""
TuringConsole — the display surface used by the Turing-machine runner.

Owns the terminal backend from construction until close(), and routes every
draw request to the tape, code and scroller renderers.
"""
from __future__ import annotations

import logging
from typing import TextIO

from .code import CodeRenderer, ErrorChannel
from .layout import Layout
from .scroller import ScrollerRenderer
from .tape import TapeRenderer
from .terminal import Terminal, create_terminal

logger = logging.getLogger(__name__)


class TuringConsole:
    """
    Terminal display for a Turing machine: tape row, scroller indicators and source code.

    Usage:
        with open("program.tm") as code_file, TuringConsole(code_file) as console:
            console.print_turing_code(code_file)
            console.set_tape_value(tape)
            console.set_current_code_line(1, code_file)

    The terminal is restored when the console is closed, including when
    construction fails after the backend was started.
    """

    def __init__(
        self,
        code_file: TextIO | None,
        terminal: Terminal | None = None,
        on_error: ErrorChannel | None = None,
    ) -> None:
        self.code_file = code_file
        self._terminal = terminal if terminal is not None else create_terminal()
        self._closed = False

        self._terminal.start()
        try:
            self._layout = Layout.from_size(self._terminal.query_size())
            self._tape = TapeRenderer(self._terminal, self._layout)
            self._code = CodeRenderer(self._terminal, self._layout, on_error=on_error)
            self._scrollers = ScrollerRenderer(self._terminal, self._layout)

            self.clear()
            self.draw_tape_scrollers()
        except BaseException:
            self.close()
            raise

    # ── context manager ──────────────────────────────────────────────────────

    def __enter__(self) -> TuringConsole:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Restore the terminal. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._terminal.stop()

    @property
    def closed(self) -> bool:
        return self._closed

    # ── metrics ──────────────────────────────────────────────────────────────

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    @property
    def layout(self) -> Layout:
        return self._layout

    def get_width(self) -> int:
        return self._layout.width

    def get_height(self) -> int:
        return self._layout.height

    @property
    def tape_cursor(self) -> int:
        return self._tape.cursor

    @property
    def current_code_line(self) -> int:
        return self._code.current_line

    # ── drawing ──────────────────────────────────────────────────────────────

    def clear(self) -> None:
        self._terminal.clear()
        self._terminal.flush()

    def set_tape_cursor(self, position: int, tape: str) -> None:
        self._tape.move_cursor(position, tape)

    def set_current_code_line(self, line: int, code_file: TextIO | None = None) -> bool:
        """Highlight 1-based `line`. Returns False when it does not exist."""
        return self._code.highlight_line(line, self._stream(code_file))

    def write_at(self, symbol: str, tape_position: int) -> None:
        self._tape.write_cell(symbol, tape_position)

    def print_turing_code(self, code_file: TextIO | None = None) -> bool:
        """Paint the program source. Returns False when it cannot be read."""
        return self._code.paint_full(self._stream(code_file))

    def set_tape_value(self, tape: str) -> None:
        self._tape.paint_full(tape)

    def draw_tape_scrollers(self, left_disabled: bool = True, right_disabled: bool = True) -> None:
        self._scrollers.paint(left_disabled, right_disabled)

    def _stream(self, code_file: TextIO | None) -> TextIO | None:
        return code_file if code_file is not None else self.code_file
