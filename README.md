# rsvn

A small terminal user interface for Subversion working copies. It shows the
output of `svn status`, lets you pick files and commits only the ones you
picked, with a message you type in place.

## Requirements

- Python 3.10 or later
- The `svn` command-line client on your `PATH`
- A terminal with curses support

## Installation

```
pip install .
```

## Usage

Start it inside a working copy:

```
rsvn
```

Or point it at a working copy somewhere else:

```
rsvn --directory path/to/working-copy
```

`-d` is the short form of `--directory`; it defaults to the current directory.

The screen has four panels: project info (the working copy path), the status
list, the list of selected files and the commit message. The focused panel has
a bold blue border. Status codes are coloured, for example `M` blue, `A` green,
`D` red and `?` yellow.

### Keys

Status list (normal mode):

| Key              | Action                                        |
|------------------|-----------------------------------------------|
| `j` / Down       | Move down                                     |
| `k` / Up         | Move up                                       |
| Space            | Select or deselect the file under the cursor  |
| `y`              | Copy the file path to the clipboard           |
| `s`              | Focus the selected list                       |
| `c`              | Write a commit message                        |
| `q`, Esc, Ctrl-C | Quit                                          |

Selected list:

| Key          | Action                                  |
|--------------|-----------------------------------------|
| `j` / Down   | Move down                               |
| `k` / Up     | Move up                                 |
| Space        | Remove the file from the selection      |
| `c`          | Write a commit message                  |
| Esc          | Back to the status list                 |
| `q`, Ctrl-C  | Quit                                    |

Commit message:

| Key       | Action                                            |
|-----------|---------------------------------------------------|
| Enter     | Commit the selected files and refresh the status  |
| Backspace | Delete the last character                         |
| Esc       | Back to the status list                           |

Any other character is added to the message. Enter always clears the message
and returns to the status list; no commit is made when no files are selected.

Copying writes the terminal's OSC 52 clipboard sequence, so it needs a
terminal that supports it.

## Using it as a library

- `rsvn.svn`: `SvnClient` runs `svn` in a working copy (`raw_command`,
  `status`); `parse_status` turns `svn status` output into an `SvnStatusList`;
  `push_basic_commit` commits the selected entries and returns the new status.
- `rsvn.files`: `clipboard_sequence` builds the OSC 52 sequence and
  `copy_file` writes it for a chosen entry.
- `rsvn.renders`: builds the panels (`create_section_*`,
  `create_selected_items`, `create_layout`) and draws them with `draw_section`.
- `rsvn.app`: `App` holds the interface state; `App.on_key` applies a `Key`,
  and `main` is the `rsvn` command.

## What it does not do

It only lists status and commits selected files. It does not add, delete,
revert, update, diff or show logs. Errors from `svn` are not shown: only its
standard output is read, and the status is re-read after a commit.

## Running the tests

```
pip install .[test]
pytest
```