"""Cursor movement helpers for list views."""


def move_cursor_down(selected: int, lines: int) -> int:
    """Move one line down, never past the last of ``lines`` lines."""
    return min(selected + 1, max(lines - 1, 0))


def move_cursor_up(selected: int) -> int:
    """Move one line up, never above the first line."""
    return max(selected - 1, 0)