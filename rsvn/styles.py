"""Colours and text styles used by the interface."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Color(Enum):
    """Terminal colours the interface draws with."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_MAGENTA = "light_magenta"
    WHITE = "white"


@dataclass(frozen=True)
class Style:
    """An immutable text style: foreground, background and boldness."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False

    def fg_color(self, color: Color) -> Style:
        """Return a copy with the given foreground colour."""
        return replace(self, fg=color)

    def bg_color(self, color: Color) -> Style:
        """Return a copy with the given background colour."""
        return replace(self, bg=color)

    def with_bold(self) -> Style:
        """Return a bold copy."""
        return replace(self, bold=True)


_STATUS_COLORS = {
    "M": Color.BLUE,  # modified
    "A": Color.GREEN,  # added
    "D": Color.RED,  # deleted
    "C": Color.LIGHT_RED,  # conflict
    "?": Color.YELLOW,  # untracked
    "!": Color.LIGHT_RED,  # missing
    "I": Color.DARK_GRAY,  # ignored
    "R": Color.CYAN,  # replaced
    "X": Color.MAGENTA,  # external
    "~": Color.LIGHT_MAGENTA,  # obstructed
}


def style_for_status(state: str) -> Style:
    """Return the style for an svn status code; unknown codes get the plain style."""
    color = _STATUS_COLORS.get(state)
    return Style() if color is None else Style(fg=color)