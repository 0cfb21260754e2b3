"""Graphnotes - vault indexer and search engine for markdown notes."""

from .errors import ErrorKind, VaultError
from .indexer import EntryKind, FileEntry, build, list_recursive_markdown, list_shallow
from .search import GrepMatch
from .search import search as grep_search

__all__ = [
    "EntryKind",
    "ErrorKind",
    "FileEntry",
    "GrepMatch",
    "VaultError",
    "build",
    "grep_search",
    "list_recursive_markdown",
    "list_shallow",
]
