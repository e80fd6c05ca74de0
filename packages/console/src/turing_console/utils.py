"""Cell-width helpers for text written to the terminal grid."""
from __future__ import annotations

from wcwidth import wcswidth


def cell_width(text: str) -> int:
    """
    Number of terminal cells `text` occupies.
    Non-printable characters make wcswidth return -1; those are reported as -1 too.
    """
    if not text:
        return 0
    return wcswidth(text)


def strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line
