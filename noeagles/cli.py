"""Interactive command shell for importing files and configuring races."""

from __future__ import annotations

import argparse
import cmd
import shlex
from typing import IO

from noeagles.app import App, Screen
from noeagles.files import CommandError
from noeagles.importer import ImportSession
from noeagles.races import RaceBoard

NO_MATCHES = "No matches found."


class Shell(cmd.Cmd):
    """Line-oriented front end with Home, Import and Configuration screens."""

    def __init__(
        self,
        app: App | None = None,
        directory: str | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        self.app = app if app is not None else App()
        self.importer = ImportSession(configuration=self.app.configuration, directory=directory)
        self.board = RaceBoard(configuration=self.app.configuration)
        self._update_prompt()

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def _update_prompt(self) -> None:
        self.prompt = f"[{self.app.current_screen.value}] "

    def _split(self, arg: str, count: int) -> list[str] | None:
        try:
            parts = shlex.split(arg)
        except ValueError as exc:
            self._say(f"Cannot parse arguments: {exc}")
            return None
        if len(parts) != count:
            self._say(f"Expected {count} argument(s), got {len(parts)}.")
            return None
        return parts

    def _show_suggestions(self) -> None:
        suggestions = self.importer.suggestions()
        if not suggestions:
            self._say(NO_MATCHES)
            return
        for index, name in enumerate(suggestions):
            marker = ">" if index == self.importer.selected_index else " "
            self._say(f"{marker} {name}")

    def postcmd(self, stop: bool, line: str) -> bool:
        self._update_prompt()
        return stop

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        self._say(f"Unknown command: {line}")
        return False

    # Screens

    def do_home(self, arg: str) -> None:
        """Show the home screen."""
        self.app.show(Screen.HOME)
        self._say("Home")

    def do_import(self, arg: str) -> None:
        """Show the import screen and list files in the working directory."""
        self.app.show(Screen.IMPORT)
        self._say(f"Import from {self.importer.directory}")
        try:
            self.importer.refresh()
        except CommandError as exc:
            self._say(str(exc))
        self._show_suggestions()

    def do_configuration(self, arg: str) -> None:
        """Show the race configuration screen."""
        self.app.show(Screen.CONFIGURATION)
        self._say("Race configuration")
        self.do_races("")

    # Import screen

    def do_input(self, arg: str) -> None:
        """Set the file name being typed and show matching suggestions."""
        self.importer.set_input(arg)
        self._show_suggestions()

    def do_down(self, arg: str) -> None:
        """Select the next suggestion."""
        self.importer.handle_key("ArrowDown")
        self._show_suggestions()

    def do_up(self, arg: str) -> None:
        """Select the previous suggestion."""
        self.importer.handle_key("ArrowUp")
        self._show_suggestions()

    def do_right(self, arg: str) -> None:
        """Accept the selected suggestion as the input."""
        self.importer.handle_key("ArrowRight")
        self._say(f"Input: {self.importer.input_value}")

    def do_load(self, arg: str) -> None:
        """Load the file named by the input (or by the argument, if given)."""
        if arg.strip():
            self.importer.set_input(arg)
        typed = self.importer.input_value.strip()
        if not typed:
            return
        if self.importer.submit():
            self._say(f"Loaded {typed}")
        else:
            self._say(f"File not found: {typed}")

    def do_files(self, arg: str) -> None:
        """List the loaded files with their indices."""
        for index, name in enumerate(self.app.configuration.lazy_files):
            self._say(f"{index}: {name}")

    def do_remove(self, arg: str) -> None:
        """Remove the loaded file at the given index."""
        try:
            removed = self.importer.remove(int(arg.strip()))
        except ValueError:
            self._say(f"Not an index: {arg.strip()}")
        except IndexError as exc:
            self._say(str(exc))
        else:
            self._say(f"Removed {removed}")

    # Configuration screen

    def do_races(self, arg: str) -> None:
        """List races and their linked files."""
        for race in self.board.races:
            self._say(f"{race.name} ({race.date})")
            for name in race.linked_files:
                self._say(f"  - {name}")

    def do_addrace(self, arg: str) -> None:
        """Add a race: addrace NAME DATE."""
        parts = self._split(arg, 2)
        if parts is None:
            return
        race = self.board.add_race(*parts)
        if race is None:
            self._say("Race name and date are required.")
        else:
            self._say(f"Added race {race.name} ({race.date})")

    def do_link(self, arg: str) -> None:
        """Link a loaded file to a race: link RACE FILE."""
        parts = self._split(arg, 2)
        if parts is None:
            return
        race_name, file = parts
        if file not in self.board.available_files():
            self._say(f"File is not loaded: {file}")
            return
        try:
            linked = self.board.link_file(race_name, file)
        except KeyError:
            self._say(f"No race named {race_name}")
            return
        if linked:
            self._say(f"Linked {file} to {race_name}")

    def do_delrace(self, arg: str) -> None:
        """Remove a race by name."""
        name = arg.strip()
        removed = self.board.delete_race(name)
        self._say(f"Removed {removed} race(s) named {name}")

    # Leaving

    def do_quit(self, arg: str) -> bool:
        """Leave the shell."""
        return True

    do_exit = do_quit

    def do_EOF(self, arg: str) -> bool:
        """Leave the shell at end of input."""
        self._say("")
        return True


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shell."""
    parser = argparse.ArgumentParser(prog="noeagles", description=__doc__)
    parser.add_argument(
        "--directory",
        default=None,
        help="directory searched for files to import (default: working directory)",
    )
    args = parser.parse_args(argv)
    shell = Shell(directory=args.directory)
    try:
        shell.cmdloop()
    except KeyboardInterrupt:
        print()
    return 0