"""Building and drawing the sections of the interface."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from typing import Any

from rsvn.styles import Color, Style, style_for_status
from rsvn.svn import SvnStatusList


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the screen."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Span:
    """A piece of text drawn in one style."""

    text: str
    style: Style = Style()


@dataclass
class Section:
    """A bordered box with a title and lines of styled text."""

    title: str
    lines: list[list[Span]] = field(default_factory=list)
    border_style: Style = Style()
    highlight_style: Style | None = None
    wrap: bool = False


@dataclass(frozen=True)
class ProjectInfo:
    """What the info section shows about the working copy."""

    path: str


def create_layout(width: int, height: int) -> list[Rect]:
    """Split the screen into info, status, selected and commit areas."""
    width = max(width, 0)
    height = max(height, 0)
    bottom = min(7, height)
    top = min(3, height - bottom)
    middle = height - top - bottom
    left = width // 2
    bottom_y = top + middle
    return [
        Rect(0, 0, width, top),
        Rect(0, top, width, middle),
        Rect(0, bottom_y, left, bottom),
        Rect(left, bottom_y, width - left, bottom),
    ]


def is_focused_styles(is_focused: bool) -> Style:
    """Return the border style for a focused or unfocused section."""
    if is_focused:
        return Style(fg=Color.BLUE, bold=True)
    return Style(fg=Color.GRAY)


def create_section_info(info: ProjectInfo) -> Section:
    """Build the section showing the working copy path."""
    return Section(
        title=" Project info ",
        lines=[[Span(info.path, Style(fg=Color.BLUE))]],
        border_style=Style(),
    )


def create_status_line_spans(idx: int, status_list: SvnStatusList) -> list[Span]:
    """Build the spans for one status line, marking it if selected."""
    if not 0 <= idx < len(status_list.entries):
        return [Span(f"(Error: Índice {idx} inválido)", Style(fg=Color.RED))]
    entry = status_list.entries[idx]
    file_text = str(entry.file)
    if idx in status_list.selections:
        base_selected = Style(fg=Color.BLACK, bg=Color.BLUE)
        return [
            Span(entry.state, base_selected),
            Span(" ", base_selected),
            Span(file_text, base_selected),
        ]
    return [Span(entry.state, style_for_status(entry.state)), Span(" "), Span(file_text)]


def create_section_status(status_list: SvnStatusList, is_focused: bool) -> Section:
    """Build the section listing every status entry."""
    return Section(
        title=" Status ",
        lines=[
            create_status_line_spans(idx, status_list)
            for idx in range(len(status_list.entries))
        ],
        border_style=is_focused_styles(is_focused),
        highlight_style=Style(fg=Color.WHITE, bg=Color.DARK_GRAY),
    )


def create_selected_items(status_list: SvnStatusList, is_focused: bool) -> Section:
    """Build the section listing the selected entries."""
    lines = [
        [Span(entry.state, style_for_status(entry.state)), Span(" "), Span(str(entry.file))]
        for entry in status_list.selected_entries()
    ]
    return Section(
        title=" Selected ",
        lines=lines,
        border_style=is_focused_styles(is_focused),
        highlight_style=Style(bg=Color.DARK_GRAY),
    )


def create_section_commit(is_focused: bool, commit_message: str) -> Section:
    """Build the section holding the commit message being typed."""
    return Section(
        title=" Commit ",
        lines=[[Span(line)] for line in commit_message.split("\n")],
        border_style=is_focused_styles(is_focused),
        wrap=True,
    )


_pairs: dict[tuple[Color | None, Color | None], int] = {}


def _curses_color(color: Color | None) -> int:
    if color is None:
        return -1
    bright = getattr(curses, "COLORS", 8) > 8
    return {
        Color.BLACK: curses.COLOR_BLACK,
        Color.RED: curses.COLOR_RED,
        Color.GREEN: curses.COLOR_GREEN,
        Color.YELLOW: curses.COLOR_YELLOW,
        Color.BLUE: curses.COLOR_BLUE,
        Color.MAGENTA: curses.COLOR_MAGENTA,
        Color.CYAN: curses.COLOR_CYAN,
        Color.GRAY: curses.COLOR_WHITE,
        Color.WHITE: curses.COLOR_WHITE,
        Color.DARK_GRAY: 8 if bright else curses.COLOR_BLACK,
        Color.LIGHT_RED: 9 if bright else curses.COLOR_RED,
        Color.LIGHT_MAGENTA: 13 if bright else curses.COLOR_MAGENTA,
    }[color]


def _attr(style: Style) -> int:
    attr = curses.A_BOLD if style.bold else curses.A_NORMAL
    if style.fg is None and style.bg is None:
        return attr
    key = (style.fg, style.bg)
    try:
        number = _pairs.get(key)
        if number is None:
            number = len(_pairs) + 1
            curses.init_pair(number, _curses_color(style.fg), _curses_color(style.bg))
            _pairs[key] = number
        return attr | curses.color_pair(number)
    except (curses.error, ValueError):
        return attr


def _put(window: Any, y: int, x: int, text: str, style: Style) -> None:
    if not text:
        return
    try:
        window.addstr(y, x, text, _attr(style))
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _patch(base: Style, over: Style) -> Style:
    return Style(
        fg=over.fg if over.fg is not None else base.fg,
        bg=over.bg if over.bg is not None else base.bg,
        bold=base.bold or over.bold,
    )


def _wrap(line: list[Span], width: int) -> list[list[Span]]:
    if width <= 0:
        return [line]
    rows: list[list[Span]] = [[]]
    used = 0
    for span in line:
        text = span.text
        while text:
            if used == width:
                rows.append([])
                used = 0
            chunk = text[: width - used]
            rows[-1].append(Span(chunk, span.style))
            used += len(chunk)
            text = text[len(chunk):]
    return rows


def draw_section(window: Any, section: Section, rect: Rect, selected: int | None = None) -> None:
    """Draw ``section`` inside ``rect``, highlighting and scrolling to ``selected``."""
    if rect.width < 2 or rect.height < 2:
        return
    border = section.border_style
    inner_w = rect.width - 2
    inner_h = rect.height - 2
    right = rect.x + rect.width - 1
    bottom = rect.y + rect.height - 1

    _put(window, rect.y, rect.x, "╭" + "─" * inner_w + "╮", border)
    for y in range(rect.y + 1, bottom):
        _put(window, y, rect.x, "│", border)
        _put(window, y, right, "│", border)
    _put(window, bottom, rect.x, "╰" + "─" * inner_w + "╯", border)
    _put(window, rect.y, rect.x + 1, section.title[:inner_w], border)

    rows: list[list[Span]] = []
    for line in section.lines:
        rows.extend(_wrap(line, inner_w) if section.wrap else [line])

    highlighted = None
    if section.highlight_style is not None and selected is not None and rows:
        highlighted = min(max(selected, 0), len(rows) - 1)
    offset = 0 if highlighted is None else max(0, highlighted - inner_h + 1)

    for n, row in enumerate(rows[offset : offset + inner_h]):
        y = rect.y + 1 + n
        if offset + n == highlighted and section.highlight_style is not None:
            highlight = section.highlight_style
            _put(window, y, rect.x + 1, " " * inner_w, highlight)
            row = [Span(span.text, _patch(span.style, highlight)) for span in row]
        x = rect.x + 1
        room = inner_w
        for span in row:
            if room <= 0:
                break
            text = span.text[:room]
            _put(window, y, x, text, span.style)
            x += len(text)
            room -= len(text)