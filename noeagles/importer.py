"""Import screen logic: file suggestions, keyboard navigation and loading files."""

from __future__ import annotations

from dataclasses import dataclass, field

from noeagles.app import FileConfiguration
from noeagles.files import get_current_directory, get_list_of_files, validate_file_exists

MAX_SUGGESTIONS = 10


@dataclass
class ImportSession:
    """State of the import screen: user input, suggestions and the selected one."""

    configuration: FileConfiguration = field(default_factory=FileConfiguration)
    directory: str | None = None
    eligible_files: list[str] = field(default_factory=list)
    selected_index: int | None = None
    input_value: str = ""

    def __post_init__(self) -> None:
        if self.directory is None:
            self.directory = get_current_directory()

    def refresh(self) -> list[str]:
        """Reload the eligible files from the session directory and return them.

        Raises CommandError if the directory cannot be listed.
        """
        self.eligible_files = get_list_of_files(self.directory)
        return self.eligible_files

    def set_input(self, value: str) -> None:
        """Replace the user input and clear the current selection."""
        self.input_value = value
        self.selected_index = None

    def suggestions(self) -> list[str]:
        """Eligible files containing the input, case-insensitively, at most ten."""
        query = self.input_value.lower()
        matches = (name for name in self.eligible_files if query in name.lower())
        return [name for _, name in zip(range(MAX_SUGGESTIONS), matches)]

    def handle_key(self, key: str) -> bool:
        """Apply a navigation key; return True if the key was handled."""
        suggestions = self.suggestions()
        total = len(suggestions)
        current = self.selected_index

        if key == "ArrowRight":
            if current is not None and current < total:
                self.input_value = suggestions[current]
            return True

        if key == "ArrowDown":
            if current is None:
                self.selected_index = 0
            elif total:
                self.selected_index = (current + 1) % total
            else:
                self.selected_index = None
            return True

        if key == "ArrowUp":
            if current is None or current == 0:
                self.selected_index = max(total - 1, 0)
            elif total:
                self.selected_index = (current - 1) % total
            else:
                self.selected_index = None
            return True

        return False

    def submit(self) -> bool:
        """Load the typed file if it exists; return True when the input was accepted."""
        trimmed = self.input_value.strip()
        if not trimmed or not validate_file_exists(trimmed):
            return False
        self.configuration.add(trimmed)
        self.input_value = ""
        return True

    def remove(self, index: int) -> str:
        """Remove and return the loaded file at ``index``."""
        return self.configuration.remove(index)