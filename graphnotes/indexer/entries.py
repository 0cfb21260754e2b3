"""Immutable entry records produced by the indexer."""

from dataclasses import dataclass
from enum import Enum

SEPARATOR = "/"


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class FileEntry:
    """One filesystem node as seen through the vault.

    `children` is a tuple for directories and None for files.
    """

    name: str
    path: str
    kind: EntryKind
    children: tuple["FileEntry", ...] | None = None

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory,
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "FileEntry":
        children = data.get("children")
        return cls(
            name=data["name"],
            path=data["path"],
            kind=EntryKind.DIRECTORY if data["is_directory"] else EntryKind.FILE,
            children=tuple(cls.from_dict(c) for c in children) if children is not None else None,
        )


def join_path(parent: str, name: str) -> str:
    """Join a root-relative parent path and a name with the canonical separator."""
    return f"{parent}{SEPARATOR}{name}" if parent else name


def level_sort_key(entry: FileEntry) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name; exact name breaks ties."""
    return (not entry.is_directory, entry.name.lower(), entry.name)


def path_sort_key(entry: FileEntry) -> tuple[str, str]:
    return (entry.path.lower(), entry.path)
