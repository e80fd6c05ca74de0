"""
turing_console — terminal display layer for a Turing-machine visualizer.

Renders the tape, the program source with its current line highlighted,
and the two scroller indicators on either an ANSI or a curses backend.
"""
from .code import CodeRenderer, ErrorChannel
from .colors import (
    CODE_HIGHLIGHT,
    COMMENT,
    RESET,
    SCROLLER_DISABLED,
    SCROLLER_ENABLED,
    SCROLLER_GLYPH,
    STYLE_COMBINATIONS,
    TAPE_CURSOR,
    AttributeKind,
    Color,
    ColorAttribute,
    background,
    bright_background,
    bright_foreground,
    foreground,
)
from .console import TuringConsole
from .layout import Coordinate, Layout, LayoutError, ScreenSize
from .scroller import ScrollerRenderer
from .tape import TapeOverflowError, TapeRenderer
from .terminal import (
    AnsiTerminal,
    BackendInitError,
    CursesTerminal,
    Terminal,
    create_terminal,
    probe_backend,
)

__all__ = [
    # code
    "CodeRenderer",
    "ErrorChannel",
    # colors
    "AttributeKind",
    "CODE_HIGHLIGHT",
    "COMMENT",
    "Color",
    "ColorAttribute",
    "RESET",
    "SCROLLER_DISABLED",
    "SCROLLER_ENABLED",
    "SCROLLER_GLYPH",
    "STYLE_COMBINATIONS",
    "TAPE_CURSOR",
    "background",
    "bright_background",
    "bright_foreground",
    "foreground",
    # console
    "TuringConsole",
    # layout
    "Coordinate",
    "Layout",
    "LayoutError",
    "ScreenSize",
    # scroller
    "ScrollerRenderer",
    # tape
    "TapeOverflowError",
    "TapeRenderer",
    # terminal
    "AnsiTerminal",
    "BackendInitError",
    "CursesTerminal",
    "Terminal",
    "create_terminal",
    "probe_backend",
]
