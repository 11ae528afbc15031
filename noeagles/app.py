"""Application state: the list of loaded files and the active screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Screen(Enum):
    """Screens reachable from the side menu."""

    HOME = "home"
    IMPORT = "import"
    CONFIGURATION = "configuration"


@dataclass
class FileConfiguration:
    """Files the user has chosen to work with, shared across screens."""

    lazy_files: list[str] = field(default_factory=list)

    def add(self, path: str) -> bool:
        """Add ``path`` unless already present; return whether it was added."""
        if path in self.lazy_files:
            return False
        self.lazy_files.append(path)
        return True

    def remove(self, index: int) -> str:
        """Remove and return the file at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.lazy_files):
            raise IndexError(f"no file at index {index}")
        return self.lazy_files.pop(index)


@dataclass
class App:
    """Top-level application: shared configuration plus the current screen."""

    configuration: FileConfiguration = field(default_factory=FileConfiguration)
    current_screen: Screen = Screen.HOME

    def show(self, screen: Screen | str) -> Screen:
        """Switch to ``screen`` (a Screen or its name) and return it."""
        self.current_screen = Screen(screen)
        return self.current_screen