"""Pattern compiler - any user text becomes a usable regex."""

import logging
import re
from dataclasses import dataclass

from graphnotes.errors import ErrorKind, VaultError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledPattern:
    """A ready-to-scan pattern.

    `literal` is True when the source text was not valid regex syntax and
    is matched as a plain substring instead.
    """

    source: str
    regex: re.Pattern
    literal: bool = False

    def search(self, line: str) -> re.Match | None:
        """Return the first non-empty match in `line`, skipping empty-width hits."""
        for match in self.regex.finditer(line):
            if match.end() > match.start():
                return match
        return None


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile `pattern` as a regex, falling back to an escaped literal."""
    try:
        return CompiledPattern(source=pattern, regex=re.compile(pattern))
    except re.error as e:
        logger.debug(f"Pattern {pattern!r} is not a valid regex ({e}), searching literally")

    try:
        return CompiledPattern(source=pattern, regex=re.compile(re.escape(pattern)), literal=True)
    except re.error as e:
        raise VaultError(ErrorKind.INVALID_PATTERN, pattern, str(e)) from e
