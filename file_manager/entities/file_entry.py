"""
Directory entry domain entity.
"""

import os
from dataclasses import dataclass
from typing import Any

from file_manager.exceptions import FileRepositoryError

DIRECTORY = "directory"
FILE = "file"


@dataclass(frozen=True)
class FileEntry:
    """
    Directory listing entry (file or directory) as shown by ``ls``.
    """

    name: str
    path: str
    entry_type: str

    def __post_init__(self) -> None:
        if not self.name:
            raise FileRepositoryError("Entry name must be a non-empty string")
        if self.entry_type not in (DIRECTORY, FILE):
            raise FileRepositoryError(f"Unknown entry type: {self.entry_type}")

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry) -> "FileEntry":
        """Build an entry from an ``os.scandir`` result without following symlinks."""
        entry_type = DIRECTORY if entry.is_dir(follow_symlinks=False) else FILE
        return cls(name=entry.name, path=entry.path, entry_type=entry_type)

    @property
    def is_dir(self) -> bool:
        return self.entry_type == DIRECTORY

    def sort_key(self) -> tuple[str, str]:
        """Directories before files, then by name."""
        return (self.entry_type, self.name)

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry as a row for display.

        Returns:
            Dictionary with the entry name and type
        """
        return {"Name": self.name, "Type": self.entry_type}

    def __str__(self) -> str:
        return f"FileEntry(name='{self.name}', type='{self.entry_type}')"
