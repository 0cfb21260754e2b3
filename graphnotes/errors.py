"""Error types raised by the vault indexer and search engine."""

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Closed set of failure kinds a caller can branch on."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IO_ERROR = "io_error"
    INVALID_PATTERN = "invalid_pattern"


_REASONS = {
    ErrorKind.NOT_FOUND: "Directory does not exist",
    ErrorKind.NOT_A_DIRECTORY: "Path is not a directory",
    ErrorKind.IO_ERROR: "Failed to read directory",
    ErrorKind.INVALID_PATTERN: "Invalid pattern",
}


class VaultError(Exception):
    """A hard failure while indexing or searching a vault."""

    def __init__(self, kind: ErrorKind, path: str | Path, detail: str = "") -> None:
        self.kind = kind
        self.path = str(path)
        self.detail = detail
        message = f"{_REASONS[kind]}: {self.path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def check_directory(path: Path) -> None:
    """Raise NOT_FOUND / NOT_A_DIRECTORY before any traversal begins."""
    if not path.exists():
        raise VaultError(ErrorKind.NOT_FOUND, path)
    if not path.is_dir():
        raise VaultError(ErrorKind.NOT_A_DIRECTORY, path)
