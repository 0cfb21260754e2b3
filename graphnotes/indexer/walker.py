"""Depth-first markdown walk shared by the flat listing and the search engine."""

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from graphnotes.errors import ErrorKind, VaultError

from .entries import join_path
from .filters import is_markdown

logger = logging.getLogger(__name__)

# (st_dev, st_ino) of a directory
DirKey = tuple[int, int]


@dataclass
class _Frame:
    entries: Iterator[os.DirEntry]
    rel_dir: str
    ancestors: frozenset[DirKey]


def dir_key(stat_result: os.stat_result) -> DirKey:
    return (stat_result.st_dev, stat_result.st_ino)


def read_directory(directory: str | Path, strict: bool) -> list[os.DirEntry] | None:
    """Read one directory level.

    On failure, raise VaultError when strict, otherwise log and return None.
    """
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        if strict:
            raise VaultError(ErrorKind.IO_ERROR, directory, e.strerror or str(e)) from e
        logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return None


def walk_markdown(
    root: Path,
    admit: Callable[[str], bool],
    strict: bool,
) -> Iterator[tuple[Path, str]]:
    """Yield (absolute path, root-relative path) for every admitted markdown file.

    Symbolic links are followed. A link back to a directory already on the
    current descent path is not entered again, so cyclic link graphs terminate.
    Entries are visited in filesystem enumeration order, each directory's
    subtree before its next sibling. When `strict` is set, the first directory
    that cannot be read aborts the walk with VaultError; otherwise it is skipped.
    """
    root_entries = read_directory(root, strict)
    if root_entries is None:
        return

    stack = [_Frame(iter(root_entries), "", frozenset({dir_key(root.stat())}))]

    while stack:
        frame = stack[-1]
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            continue

        if not admit(entry.name):
            continue

        rel_path = join_path(frame.rel_dir, entry.name)

        if _is_dir(entry):
            try:
                key = dir_key(entry.stat())
            except OSError as e:
                if strict:
                    raise VaultError(ErrorKind.IO_ERROR, entry.path, e.strerror or str(e)) from e
                logger.debug(f"Skipping {entry.path}: {e}")
                continue

            if key in frame.ancestors:
                logger.warning(f"Not following symlink cycle at {entry.path}")
                continue

            children = read_directory(entry.path, strict)
            if children is not None:
                stack.append(_Frame(iter(children), rel_path, frame.ancestors | {key}))
            continue

        if is_markdown(entry.name) and _is_file(entry):
            yield Path(entry.path), rel_path


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False
