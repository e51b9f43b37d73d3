"""Copying file names to the terminal clipboard."""

from __future__ import annotations

import base64
import sys
from collections.abc import Sequence
from typing import TextIO

from rsvn.svn import StatusEntry


class ClipboardError(Exception):
    """Raised when text cannot be sent to the clipboard."""


def clipboard_sequence(text: str) -> str:
    """Return the OSC 52 escape sequence that puts ``text`` on the clipboard."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\x1b]52;c;{encoded}\x07"


def copy_file(
    selected: int, entries: Sequence[StatusEntry], stream: TextIO | None = None
) -> str:
    """Copy the file of the selected entry to the clipboard and return it.

    Raises IndexError if ``selected`` is out of range and ClipboardError if
    the terminal stream cannot be written.
    """
    text = str(entries[selected].file)
    out = sys.stdout if stream is None else stream
    try:
        out.write(clipboard_sequence(text))
        out.flush()
    except (OSError, ValueError) as exc:
        raise ClipboardError(f"cannot copy {text!r} to the clipboard") from exc
    return text