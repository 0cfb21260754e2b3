"""Admission rules applied to every entry during a vault traversal."""

# Name of the vault's own metadata directory
METADATA_DIR_NAME = ".graphnotes"

HIDDEN_MARKER = "."

MARKDOWN_EXTENSIONS = frozenset({"md", "markdown"})


def admit(name: str) -> bool:
    """Admit a name for navigation views (trees and listings).

    Hidden names are rejected, except the metadata directory which stays navigable.
    """
    if name == METADATA_DIR_NAME:
        return True
    return not name.startswith(HIDDEN_MARKER)


def admit_content(name: str) -> bool:
    """Admit a name for content scans. No metadata exception."""
    return not name.startswith(HIDDEN_MARKER)


def extension(name: str) -> str:
    """Return the text after the last dot, or '' for names like 'notes' or '.profile'."""
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return ext


def is_markdown(name: str) -> bool:
    return extension(name) in MARKDOWN_EXTENSIONS
