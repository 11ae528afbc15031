"""File-system commands: file checks, recursive listing and CSV extraction."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

START_ROW = 8
END_ROW = 38
COLUMNS = (0, 1, 5, 7, 8, 9, 12)
INVALID_DIRECTORY = "Provided path is not a valid directory."
NO_CURRENT_DIRECTORY = "Unable to get current dir"


class CommandError(Exception):
    """Raised when a file command cannot complete."""


def validate_file_exists(path: str) -> bool:
    """Return True if ``path`` (surrounding whitespace ignored) is an existing regular file."""
    candidate = Path(path.strip())
    return candidate.exists() and candidate.is_file()


def get_current_directory() -> str:
    """Return the working directory, or a fixed message if it cannot be determined."""
    try:
        return os.getcwd()
    except OSError:
        return NO_CURRENT_DIRECTORY


def _walk(directory: str) -> Iterator[str]:
    try:
        entries = list(os.scandir(directory))
    except OSError as exc:
        raise CommandError(f"Failed to read dir: {exc}") from exc
    for entry in entries:
        try:
            is_file = entry.is_file(follow_symlinks=False)
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise CommandError(f"Failed to read metadata: {exc}") from exc
        if is_file:
            yield entry.path
        elif is_dir:
            yield from _walk(entry.path)


def get_list_of_files(directory: str) -> list[str]:
    """Return the paths of all regular files below ``directory``, recursively."""
    root = Path(directory.strip())
    if not root.exists() or not root.is_dir():
        raise CommandError(INVALID_DIRECTORY)
    return list(_walk(str(root)))


def read_csv_file(path: str) -> list[list[str]]:
    """Read rows 8 to 38 (1-based) of a CSV file, keeping only the selected columns."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise CommandError(str(exc)) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CommandError(str(exc)) from exc

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    records = []
    for line_num, line in enumerate(lines, start=1):
        if not START_ROW <= line_num <= END_ROW:
            continue
        fields = [field.strip() for field in line.strip().split(",")]
        records.append([fields[idx] for idx in COLUMNS if idx < len(fields)])
    return records