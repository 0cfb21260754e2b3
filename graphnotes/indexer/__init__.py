"""Vault indexing - file trees and flat listings of notes."""

from .entries import EntryKind, FileEntry
from .filters import METADATA_DIR_NAME, admit, admit_content, is_markdown
from .listing import list_recursive_markdown, list_shallow
from .tree import TreeBuilder, build

__all__ = [
    "METADATA_DIR_NAME",
    "EntryKind",
    "FileEntry",
    "TreeBuilder",
    "admit",
    "admit_content",
    "build",
    "is_markdown",
    "list_recursive_markdown",
    "list_shallow",
]
