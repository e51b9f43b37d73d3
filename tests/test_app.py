import io
from pathlib import Path

import pytest

from rsvn.app import App, AppMode, Key, main
from rsvn.files import clipboard_sequence
from rsvn.svn import parse_status

INITIAL = "M       a.txt\nA       b.txt\n?       c.txt\n"


class FakeClient:
    def __init__(self, *outputs):
        self.outputs = list(outputs)
        self.calls = []

    def raw_command(self, args):
        self.calls.append(list(args))
        return ""

    def status(self):
        text = self.outputs.pop(0) if len(self.outputs) > 1 else self.outputs[0]
        return parse_status(text)


class FakeScreen:
    def __init__(self, keys, size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.cells = {}

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.cells = {}

    def refresh(self):
        pass

    def keypad(self, flag):
        pass

    def addstr(self, y, x, text, attr=0):
        for i, ch in enumerate(text):
            self.cells[(y, x + i)] = ch

    def get_wch(self):
        return self.keys.pop(0)

    def text(self):
        height, width = self.size
        return "\n".join(
            "".join(self.cells.get((y, x), " ") for x in range(width))
            for y in range(height)
        )


def make_app(*outputs, clipboard=None):
    client = FakeClient(*(outputs or (INITIAL,)))
    return App("/wc", client=client, clipboard=clipboard), client


def test_initial_state():
    app, _ = make_app()
    assert app.mode is AppMode.NORMAL
    assert app.running
    assert len(app.status_lines.entries) == 3
    assert app.selected == 0


def test_cursor_moves_and_clamps():
    app, _ = make_app()
    for _ in range(5):
        app.on_key(Key("j"))
    assert app.selected == 2
    app.on_key(Key(Key.UP))
    assert app.selected == 1
    for _ in range(3):
        app.on_key(Key("k"))
    assert app.selected == 0


@pytest.mark.parametrize("key", [Key("q"), Key(Key.ESC), Key("c", ctrl=True), Key("C", ctrl=True)])
def test_quit_keys_in_normal_mode(key):
    app, _ = make_app()
    app.on_key(key)
    assert not app.running


def test_space_toggles_selection():
    app, _ = make_app()
    app.on_key(Key(Key.DOWN))
    app.on_key(Key(" "))
    assert app.status_lines.selections == {1}
    app.on_key(Key(" "))
    assert app.status_lines.selections == set()


def test_commit_mode_editing():
    app, _ = make_app()
    app.on_key(Key("c"))
    assert app.mode is AppMode.COMMIT
    for ch in "fixq":
        app.on_key(Key(ch))
    app.on_key(Key(Key.BACKSPACE))
    assert app.commit_message == "fix"
    assert app.running
    app.on_key(Key(Key.ESC))
    assert app.mode is AppMode.NORMAL
    assert app.commit_message == "fix"


def test_commit_runs_svn_and_refreshes():
    app, client = make_app(INITIAL, "M       a.txt\n")
    app.on_key(Key(" "))
    app.on_key(Key("c"))
    for ch in "msg":
        app.on_key(Key(ch))
    app.on_key(Key(Key.ENTER))
    assert client.calls == [["commit", "-m", "msg", "a.txt"]]
    assert app.commit_message == ""
    assert app.mode is AppMode.NORMAL
    assert [str(e.file) for e in app.status_lines.entries] == ["a.txt"]


def test_commit_without_selection_does_nothing():
    app, client = make_app()
    app.on_key(Key("c"))
    app.on_key(Key("x"))
    app.on_key(Key(Key.ENTER))
    assert client.calls == []
    assert app.commit_message == ""
    assert len(app.status_lines.entries) == 3


def test_selected_list_removes_entry():
    app, _ = make_app()
    app.on_key(Key(" "))
    app.on_key(Key("j"))
    app.on_key(Key("j"))
    app.on_key(Key(" "))
    app.on_key(Key("s"))
    assert app.mode is AppMode.SELECTED_LIST
    app.on_key(Key("j"))
    assert app.list_selected == 1
    app.on_key(Key(" "))
    assert app.status_lines.selections == {0}


def test_selected_list_mode_switches():
    app, _ = make_app()
    app.on_key(Key("s"))
    app.on_key(Key("c"))
    assert app.mode is AppMode.COMMIT
    app.on_key(Key(Key.ESC))
    app.on_key(Key("s"))
    app.on_key(Key("q"))
    assert not app.running


def test_copy_writes_clipboard_sequence():
    stream = io.StringIO()
    app, _ = make_app(clipboard=stream)
    app.on_key(Key("j"))
    app.on_key(Key("y"))
    assert stream.getvalue() == clipboard_sequence("b.txt")


def test_render_shows_sections():
    app, _ = make_app()
    screen = FakeScreen([])
    app.render(screen)
    text = screen.text()
    assert " Project info " in text
    assert " Status " in text
    assert " Selected " in text
    assert " Commit " in text
    assert "a.txt" in text


def test_run_until_quit():
    app, _ = make_app()
    screen = FakeScreen(["j", " ", "q"])
    app.run(screen)
    assert not app.running
    assert app.status_lines.selections == {1}
    assert screen.keys == []


def test_run_translates_control_and_enter():
    app, client = make_app()
    screen = FakeScreen([" ", "c", "o", "k", "\n", "\x03"])
    app.run(screen)
    assert client.calls == [["commit", "-m", "ok", "a.txt"]]
    assert not app.running


def test_main_rejects_missing_directory(tmp_path):
    with pytest.raises(SystemExit):
        main(["-d", str(Path(tmp_path) / "missing")])