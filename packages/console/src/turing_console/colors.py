"""
Color attributes shared by every backend.

Provides:
- Color: the eight base terminal colors
- AttributeKind / ColorAttribute: a reset or exactly one foreground/background selection
- foreground() / background() / bright_foreground() / bright_background(): constructors
- The fixed styles used by the renderers and STYLE_COMBINATIONS, the attribute
  sequences a pair-based backend must register up front
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7


class AttributeKind(Enum):
    RESET = "reset"
    FOREGROUND = "foreground"
    BACKGROUND = "background"
    BRIGHT_FOREGROUND = "bright_foreground"
    BRIGHT_BACKGROUND = "bright_background"


# SGR base code per kind; the color index is added on top.
_SGR_BASE: dict[AttributeKind, int] = {
    AttributeKind.RESET: 0,
    AttributeKind.FOREGROUND: 30,
    AttributeKind.BACKGROUND: 40,
    AttributeKind.BRIGHT_FOREGROUND: 90,
    AttributeKind.BRIGHT_BACKGROUND: 100,
}


@dataclass(frozen=True)
class ColorAttribute:
    """
    A single draw attribute.

    Either a pure reset (no color) or one foreground/background selection.
    Attributes never carry both a foreground and a background; combined styles
    are expressed as a sequence of attributes applied after a reset.
    """

    kind: AttributeKind
    color: Color | None = None

    def __post_init__(self) -> None:
        if self.kind is AttributeKind.RESET:
            if self.color is not None:
                raise ValueError("reset attribute cannot carry a color")
        elif self.color is None:
            raise ValueError(f"{self.kind.value} attribute requires a color")

    @property
    def is_reset(self) -> bool:
        return self.kind is AttributeKind.RESET

    @property
    def is_foreground(self) -> bool:
        return self.kind in (AttributeKind.FOREGROUND, AttributeKind.BRIGHT_FOREGROUND)

    @property
    def is_background(self) -> bool:
        return self.kind in (AttributeKind.BACKGROUND, AttributeKind.BRIGHT_BACKGROUND)

    @property
    def is_bright(self) -> bool:
        return self.kind in (AttributeKind.BRIGHT_FOREGROUND, AttributeKind.BRIGHT_BACKGROUND)

    @property
    def sgr_code(self) -> int:
        """Numeric ANSI SGR parameter for this attribute."""
        base = _SGR_BASE[self.kind]
        if self.color is None:
            return base
        return base + int(self.color)


RESET = ColorAttribute(AttributeKind.RESET)


def foreground(color: Color) -> ColorAttribute:
    return ColorAttribute(AttributeKind.FOREGROUND, color)


def background(color: Color) -> ColorAttribute:
    return ColorAttribute(AttributeKind.BACKGROUND, color)


def bright_foreground(color: Color) -> ColorAttribute:
    return ColorAttribute(AttributeKind.BRIGHT_FOREGROUND, color)


def bright_background(color: Color) -> ColorAttribute:
    return ColorAttribute(AttributeKind.BRIGHT_BACKGROUND, color)


# ─────────────────────────────────────────────────────────────────────────────
# Styles
# ─────────────────────────────────────────────────────────────────────────────

TAPE_CURSOR = background(Color.CYAN)
CODE_HIGHLIGHT = background(Color.GREEN)
COMMENT = bright_foreground(Color.BLACK)
SCROLLER_GLYPH = foreground(Color.BLACK)
SCROLLER_ENABLED = background(Color.WHITE)
SCROLLER_DISABLED = bright_background(Color.BLACK)

# Every attribute sequence the renderers apply after a reset.
STYLE_COMBINATIONS: tuple[tuple[ColorAttribute, ...], ...] = (
    (TAPE_CURSOR,),
    (CODE_HIGHLIGHT,),
    (COMMENT,),
    (SCROLLER_GLYPH,),
    (SCROLLER_GLYPH, SCROLLER_ENABLED),
    (SCROLLER_GLYPH, SCROLLER_DISABLED),
)
