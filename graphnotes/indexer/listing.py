"""Flat listings of a vault: one directory level, or every note in the subtree."""

import logging
import os
from pathlib import Path

from graphnotes.errors import ErrorKind, VaultError, check_directory

from .entries import EntryKind, FileEntry, join_path, level_sort_key, path_sort_key
from .filters import admit
from .walker import read_directory, walk_markdown

logger = logging.getLogger(__name__)


def list_shallow(directory: str | os.PathLike, root: str | os.PathLike | None = None) -> list[FileEntry]:
    """List one level of `directory`, all kinds included.

    Paths are relative to `root` when given (it must contain `directory`),
    otherwise relative to `directory` itself. Entries carry no children.
    """
    directory = Path(directory)
    check_directory(directory)

    rel_dir = ""
    if root is not None:
        try:
            rel_dir = directory.resolve().relative_to(Path(root).resolve()).as_posix()
        except ValueError as e:
            raise VaultError(ErrorKind.NOT_FOUND, directory, f"outside of {root}") from e
        if rel_dir == ".":
            rel_dir = ""

    entries = []
    for item in read_directory(directory, strict=True):
        if not admit(item.name):
            continue

        kind = EntryKind.DIRECTORY if Path(item.path).is_dir() else EntryKind.FILE
        entries.append(FileEntry(name=item.name, path=join_path(rel_dir, item.name), kind=kind))

    entries.sort(key=level_sort_key)
    return entries


def list_recursive_markdown(root: str | os.PathLike) -> list[FileEntry]:
    """List every markdown note under `root` as one flat, path-sorted sequence.

    Follows symbolic links. Any unreadable directory fails the whole call.
    """
    root = Path(root)
    check_directory(root)

    entries = [
        FileEntry(name=file_path.name, path=rel_path, kind=EntryKind.FILE)
        for file_path, rel_path in walk_markdown(root, admit, strict=True)
    ]
    entries.sort(key=path_sort_key)

    logger.debug(f"Listed {len(entries)} notes under {root}")
    return entries
