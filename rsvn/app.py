"""The interactive application and its command-line entry point."""

from __future__ import annotations

import argparse
import curses
import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, TextIO

from rsvn.cursor import move_cursor_down, move_cursor_up
from rsvn.files import copy_file
from rsvn.renders import (
    ProjectInfo,
    create_layout,
    create_section_commit,
    create_section_info,
    create_section_status,
    create_selected_items,
    draw_section,
)
from rsvn.svn import SvnClient, push_basic_commit


class AppMode(enum.Enum):
    """Which section has the keyboard."""

    NORMAL = "normal"
    COMMIT = "commit"
    SELECTED_LIST = "selected_list"


@dataclass(frozen=True)
class Key:
    """A key press: a single character or one of the named keys."""

    code: str
    ctrl: bool = False

    ESC: ClassVar[str] = "Esc"
    UP: ClassVar[str] = "Up"
    DOWN: ClassVar[str] = "Down"
    ENTER: ClassVar[str] = "Enter"
    BACKSPACE: ClassVar[str] = "Backspace"


def _is_ctrl_c(key: Key) -> bool:
    return key.ctrl and key.code in ("c", "C")


class App:
    """State of the svn status browser."""

    def __init__(
        self,
        project_path: str | Path,
        client: Any = None,
        clipboard: TextIO | None = None,
    ) -> None:
        self.project_path = Path(project_path)
        self.svn = SvnClient(self.project_path) if client is None else client
        self.status_lines = self.svn.status()
        self.selected = 0
        self.list_selected = 0
        self.mode = AppMode.NORMAL
        self.commit_message = ""
        self.running = True
        self._clipboard = clipboard

    def quit(self) -> None:
        """Stop the main loop."""
        self.running = False

    def on_key(self, key: Key) -> None:
        """Apply one key press to the application state."""
        if self.mode is AppMode.NORMAL:
            self._on_normal_key(key)
        elif self.mode is AppMode.COMMIT:
            self._on_commit_key(key)
        else:
            self._on_selected_key(key)

    def _on_normal_key(self, key: Key) -> None:
        code = key.code
        if code in (Key.ESC, "q") or _is_ctrl_c(key):
            self.quit()
        elif code in (Key.UP, "k"):
            self.selected = move_cursor_up(self.selected)
        elif code in (Key.DOWN, "j"):
            self.selected = move_cursor_down(self.selected, len(self.status_lines.entries))
        elif code == "y":
            copy_file(self.selected, self.status_lines.entries, self._clipboard)
        elif code == " ":
            self.status_lines.toggle_selection(self.selected)
        elif code == "c":
            self.mode = AppMode.COMMIT
        elif code == "s":
            self.mode = AppMode.SELECTED_LIST

    def _on_commit_key(self, key: Key) -> None:
        code = key.code
        if code == Key.ESC:
            self.mode = AppMode.NORMAL
        elif code == Key.ENTER:
            self.status_lines = push_basic_commit(
                self.svn, self.status_lines, self.commit_message
            )
            self.commit_message = ""
            self.mode = AppMode.NORMAL
        elif code == Key.BACKSPACE:
            self.commit_message = self.commit_message[:-1]
        elif len(code) == 1:
            self.commit_message += code

    def _on_selected_key(self, key: Key) -> None:
        code = key.code
        if code == Key.ESC:
            self.mode = AppMode.NORMAL
        elif code == "q" or _is_ctrl_c(key):
            self.quit()
        elif code == "c":
            self.mode = AppMode.COMMIT
        elif code in (Key.UP, "k"):
            self.list_selected = move_cursor_up(self.list_selected)
        elif code in (Key.DOWN, "j"):
            self.list_selected = move_cursor_down(
                self.list_selected, len(self.status_lines.selections)
            )
        elif code == " ":
            chosen = list(self.status_lines.selected_entries())
            if 0 <= self.list_selected < len(chosen):
                self.status_lines.toggle_selection_by_file(chosen[self.list_selected].file)

    def render(self, screen: Any) -> None:
        """Draw every section on ``screen``."""
        screen.erase()
        height, width = screen.getmaxyx()
        layout = create_layout(width, height)
        info = create_section_info(ProjectInfo(str(self.project_path)))
        status = create_section_status(self.status_lines, self.mode is AppMode.NORMAL)
        chosen = create_selected_items(
            self.status_lines, self.mode is AppMode.SELECTED_LIST
        )
        commit = create_section_commit(self.mode is AppMode.COMMIT, self.commit_message)
        draw_section(screen, info, layout[0])
        draw_section(screen, status, layout[1], self.selected)
        draw_section(screen, chosen, layout[2], self.list_selected)
        draw_section(screen, commit, layout[3])
        screen.refresh()

    def run(self, screen: Any) -> None:
        """Draw and handle key presses until the user quits."""
        _prepare_terminal(screen)
        self.running = True
        while self.running:
            self.render(screen)
            try:
                raw = screen.get_wch()
            except curses.error:
                continue
            key = _translate_key(raw)
            if key is not None:
                self.on_key(key)


def _prepare_terminal(screen: Any) -> None:
    for setup in (
        lambda: curses.curs_set(0),
        curses.start_color,
        curses.use_default_colors,
        lambda: curses.set_escdelay(25),
    ):
        try:
            setup()
        except curses.error:
            pass
    screen.keypad(True)


_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
}

_SPECIAL_CHARS = {
    "\x1b": Key.ESC,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}


def _translate_key(raw: int | str) -> Key | None:
    if isinstance(raw, int):
        code = _SPECIAL_KEYS.get(raw)
        return None if code is None else Key(code)
    if raw in _SPECIAL_CHARS:
        return Key(_SPECIAL_CHARS[raw])
    if len(raw) == 1 and "\x01" <= raw <= "\x1a":
        return Key(chr(ord(raw) + 96), ctrl=True)
    return Key(raw)


def main(argv: list[str] | None = None) -> int:
    """Start the interface on the working copy given on the command line."""
    parser = argparse.ArgumentParser(prog="rsvn", description="A TUI for svn")
    parser.add_argument("-d", "--directory", default=".")
    args = parser.parse_args(argv)
    try:
        path = Path(args.directory).resolve(strict=True)
    except OSError as exc:
        parser.error(f"cannot open {args.directory!r}: {exc}")
    app = App(path)
    curses.wrapper(app.run)
    return 0