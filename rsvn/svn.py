"""Running svn and tracking the status of a working copy."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

_FIRST_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class StatusEntry:
    """One line of ``svn status``: a state code and a file."""

    file: Path
    state: str


@dataclass
class SvnStatusList:
    """Status entries together with the indices the user has selected."""

    entries: list[StatusEntry] = field(default_factory=list)
    selections: set[int] = field(default_factory=set)

    def toggle_selection(self, idx: int) -> None:
        """Select the entry at ``idx``, or unselect it if already selected."""
        if idx in self.selections:
            self.selections.remove(idx)
        else:
            self.selections.add(idx)

    def toggle_selection_by_file(self, file: str | os.PathLike[str]) -> None:
        """Unselect the first entry whose file is ``file``."""
        target = Path(file)
        for idx, entry in enumerate(self.entries):
            if entry.file == target:
                self.selections.discard(idx)
                return

    def selected_entries(self) -> Iterator[StatusEntry]:
        """Yield the selected entries in list order, skipping stale indices."""
        for idx in sorted(self.selections):
            if 0 <= idx < len(self.entries):
                yield self.entries[idx]


def parse_status(output: str) -> SvnStatusList:
    """Parse the text printed by ``svn status`` into a status list."""
    entries = []
    for line in output.split("\n"):
        line = line.removesuffix("\r")
        parts = _FIRST_WHITESPACE.split(line, maxsplit=1)
        if len(parts) < 2:
            continue
        state, rest = parts
        entries.append(StatusEntry(file=Path(rest.strip()), state=state))
    return SvnStatusList(entries=entries)


class SvnClient:
    """Runs svn commands inside a working copy."""

    def __init__(self, working_copy: str | os.PathLike[str] = ".") -> None:
        self.working_copy = Path(working_copy)

    def __repr__(self) -> str:
        return f"SvnClient({str(self.working_copy)!r})"

    def raw_command(self, args: Sequence[str]) -> str:
        """Run ``svn`` with ``args`` and return its standard output.

        An empty string is returned if svn cannot be started.
        """
        try:
            completed = subprocess.run(
                ["svn", *args],
                cwd=self.working_copy,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError:
            return ""
        return completed.stdout.decode("utf-8", errors="replace")

    def status(self) -> SvnStatusList:
        """Return the current status of the working copy."""
        return parse_status(self.raw_command(["status"]))


def push_basic_commit(
    client: SvnClient, status_list: SvnStatusList, message: str
) -> SvnStatusList:
    """Commit the selected files with ``message``.

    Returns the refreshed status, or ``status_list`` unchanged when nothing
    is selected.
    """
    files = [str(entry.file) for entry in status_list.selected_entries()]
    if not files:
        return status_list
    client.raw_command(["commit", "-m", message, *files])
    return client.status()