"""Tree builder - hierarchical index of a vault for the file browser."""

import logging
import os
from pathlib import Path

from graphnotes.errors import ErrorKind, VaultError, check_directory

from .entries import EntryKind, FileEntry, join_path, level_sort_key
from .filters import admit, is_markdown
from .walker import DirKey, dir_key, read_directory

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds the navigation tree of a vault.

    Every directory is kept, even when nothing below it survives filtering.
    Only markdown files are kept. Reading any directory in the subtree
    fails the whole build; a partial tree is never returned.
    """

    def __init__(self, root: str | os.PathLike) -> None:
        self.root = Path(root)

    def build(self) -> list[FileEntry]:
        check_directory(self.root)
        logger.debug(f"Building file tree: {self.root}")

        entries = self._build_level(self.root, "", frozenset({dir_key(self.root.stat())}))

        logger.debug(f"Built file tree with {len(entries)} top-level entries")
        return entries

    def _build_level(self, directory: Path, rel_dir: str, ancestors: frozenset[DirKey]) -> list[FileEntry]:
        entries: list[FileEntry] = []

        for item in read_directory(directory, strict=True):
            if not admit(item.name):
                continue

            rel_path = join_path(rel_dir, item.name)
            item_path = Path(item.path)

            if not item_path.is_dir():
                if is_markdown(item.name):
                    entries.append(FileEntry(name=item.name, path=rel_path, kind=EntryKind.FILE))
                continue

            try:
                key = dir_key(item_path.stat())
            except OSError as e:
                raise VaultError(ErrorKind.IO_ERROR, item_path, e.strerror or str(e)) from e

            if key in ancestors:
                logger.warning(f"Not following symlink cycle at {item_path}")
                children: list[FileEntry] = []
            else:
                children = self._build_level(item_path, rel_path, ancestors | {key})

            entries.append(
                FileEntry(
                    name=item.name,
                    path=rel_path,
                    kind=EntryKind.DIRECTORY,
                    children=tuple(children),
                )
            )

        entries.sort(key=level_sort_key)
        return entries


def build(root: str | os.PathLike) -> list[FileEntry]:
    """Build the file tree rooted at `root`."""
    return TreeBuilder(root).build()
