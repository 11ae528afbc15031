# noeagles

A small tool for collecting race result CSV files and organising them by race.
It provides a line-oriented shell and a few plain Python classes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The shell

Start it with:

```
noeagles
noeagles --directory path/to/results
```

`--directory` sets the directory searched for files to import. It defaults
to the working directory. The prompt shows the current screen, for example
`[home] `.

Screens:

- `home`: switches to the Home screen.
- `import`: switches to the Import screen. It lists every regular file below
  the directory, recursively, and shows the suggestions.
- `configuration`: switches to the race configuration screen and lists the
  races.

Import commands:

- `input TEXT`: sets the typed text and clears the selection. It then shows
  the files whose path contains the text, ignoring case. At most ten are
  shown, and the selected one is marked with `>`. If nothing matches, it
  prints `No matches found.`
- `down` / `up`: move the selection through the suggestions, wrapping around.
- `right`: copies the selected suggestion into the typed text.
- `load [PATH]`: if the typed text (or `PATH`, when given) names an existing
  file, adds it to the loaded files. A file already loaded is not added
  twice.
- `files`: lists the loaded files with their indices.
- `remove INDEX`: removes the loaded file at that index.

Race commands:

- `races`: lists races and their linked files.
- `addrace NAME DATE`: adds a race. Both values are required. Use quotes for
  names with spaces.
- `link RACE FILE`: links a loaded file to a race. A file is linked to a race
  only once.
- `delrace NAME`: removes every race with that name.

`quit`, `exit` or end of input leave the shell.

## Library use

```python
from noeagles.app import App, FileConfiguration, Screen
from noeagles.files import CommandError, get_list_of_files, read_csv_file
from noeagles.importer import ImportSession
from noeagles.races import RaceBoard

files = FileConfiguration()
session = ImportSession(files, directory=".")
session.refresh()                 # raises CommandError if "." cannot be listed
session.set_input("results")
print(session.suggestions())
session.handle_key("ArrowDown")   # also "ArrowUp" and "ArrowRight"
session.submit()                  # adds the typed file if it exists

board = RaceBoard(files)
board.add_race("Spring Classic", "2024-03-10")
```

`noeagles.files` provides these functions:

- `validate_file_exists(path)`: tells whether the path, with surrounding
  whitespace stripped, is an existing regular file.
- `get_current_directory()`: returns the working directory.
- `get_list_of_files(directory)`: returns every regular file below
  `directory`. It does not follow symbolic links.
- `read_csv_file(path)`: reads lines 8 to 38 (counting from 1) of a UTF-8
  file. It splits each line on commas and keeps only columns 0, 1, 5, 7, 8,
  9 and 12, skipping any that a short line does not have.

Directory and file errors raise `CommandError`. `FileConfiguration.remove`
raises `IndexError` for an index out of range. `RaceBoard.link_file` raises
`KeyError` for an unknown race.

## What it does not do

- There is no graphical interface, only the text shell. The Home screen
  shows nothing but its title.
- Loaded files and races exist only while the shell runs. They are not saved.
- The shell does not show the columns read from a results file.
  `read_csv_file` is available from Python only.