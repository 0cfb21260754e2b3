"""Search engine - bounded line-by-line grep over the notes of a vault."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from graphnotes.errors import check_directory
from graphnotes.indexer.filters import admit_content
from graphnotes.indexer.walker import walk_markdown

from .pattern import compile_pattern

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 100


@dataclass(frozen=True)
class GrepMatch:
    """One matching line.

    `match_start` and `match_end` are UTF-8 byte offsets into `line_content`.
    """

    filepath: str
    line_number: int
    line_content: str
    match_start: int
    match_end: int

    def to_dict(self) -> dict:
        return {
            "filepath": self.filepath,
            "line_number": self.line_number,
            "line_content": self.line_content,
            "match_start": self.match_start,
            "match_end": self.match_end,
        }

    def highlight(self) -> tuple[str, str, str]:
        """Split the line into (before, match, after) around the match."""
        encoded = self.line_content.encode("utf-8")
        return (
            encoded[: self.match_start].decode("utf-8"),
            encoded[self.match_start : self.match_end].decode("utf-8"),
            encoded[self.match_end :].decode("utf-8"),
        )


def split_lines(text: str) -> list[str]:
    """Split on newlines; a final newline does not produce an empty last line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _byte_offset(line: str, index: int) -> int:
    return len(line[:index].encode("utf-8"))


def search(root: str | os.PathLike, pattern: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[GrepMatch]:
    """Search every note under `root` for `pattern`.

    Reports the first non-empty match of each line, in walk order then line order,
    and stops as soon as `max_results` matches are collected. Files that
    cannot be read or decoded are skipped.
    """
    root = Path(root)
    check_directory(root)

    if pattern == "" or max_results <= 0:
        return []

    compiled = compile_pattern(pattern)
    matches: list[GrepMatch] = []
    files_searched = 0

    for file_path, rel_path in walk_markdown(root, admit_content, strict=False):
        if len(matches) >= max_results:
            break

        # Bytes first: text mode would also split on a lone \r
        try:
            content = file_path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping {file_path}: {e}")
            continue

        files_searched += 1

        for line_number, line in enumerate(split_lines(content), 1):
            if len(matches) >= max_results:
                break

            match = compiled.search(line)
            if match is None:
                continue

            matches.append(
                GrepMatch(
                    filepath=rel_path,
                    line_number=line_number,
                    line_content=line,
                    match_start=_byte_offset(line, match.start()),
                    match_end=_byte_offset(line, match.end()),
                )
            )

    mode = "literal" if compiled.literal else "regex"
    logger.debug(
        f"Found {len(matches)} matches for {mode} {compiled.source!r} in {files_searched} notes"
    )
    return matches
