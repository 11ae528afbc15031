"""Race configuration: races with a date and the loaded files linked to them."""

from __future__ import annotations

from dataclasses import dataclass, field

from noeagles.app import FileConfiguration


@dataclass
class Race:
    """A race with its name, date and linked files."""

    name: str
    date: str
    linked_files: list[str] = field(default_factory=list)


@dataclass
class RaceBoard:
    """The list of configured races, drawing files from the shared configuration."""

    configuration: FileConfiguration = field(default_factory=FileConfiguration)
    races: list[Race] = field(default_factory=list)

    def add_race(self, name: str, date: str) -> Race | None:
        """Add a race if both name and date are non-blank; return it, or None if ignored."""
        name = name.strip()
        date = date.strip()
        if not name or not date:
            return None
        race = Race(name, date)
        self.races.append(race)
        return race

    def _find(self, name: str) -> Race:
        for race in self.races:
            if race.name == name:
                return race
        raise KeyError(name)

    def link_file(self, race_name: str, file: str) -> bool:
        """Link ``file`` to the named race; return False if empty or already linked.

        Raises KeyError if no race has that name.
        """
        race = self._find(race_name)
        if not file or file in race.linked_files:
            return False
        race.linked_files.append(file)
        return True

    def delete_race(self, name: str) -> int:
        """Remove every race with ``name``; return how many were removed."""
        before = len(self.races)
        self.races = [race for race in self.races if race.name != name]
        return before - len(self.races)

    def available_files(self) -> list[str]:
        """Files that can be linked to a race."""
        return list(self.configuration.lazy_files)