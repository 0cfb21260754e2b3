"""Full-text grep over vault notes."""

from .engine import DEFAULT_MAX_RESULTS, GrepMatch, search, split_lines
from .pattern import CompiledPattern, compile_pattern

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "CompiledPattern",
    "GrepMatch",
    "compile_pattern",
    "search",
    "split_lines",
]
